"""
Helpers shared by the registration statement extractors (S-1, S-4, S-8).

The fee table ("Calculation of Registration Fee", or the "Filing Fee Tables"
exhibit on newer filings) is read positionally: after the last header cell,
the first security title, the first share count and the next three dollar
amounts (price per share, aggregate price, fee). Par values are skipped.
"""

import logging
import re
from typing import Optional

from ..parse.sections import html_to_text
from .schemas import OfferingDetails

logger = logging.getLogger(__name__)

FEE_TABLE_PATTERN = re.compile(
    r"CALCULATION\s+OF\s+(?:THE\s+)?(?:REGISTRATION|FILING)\s+FEES?|FILING\s+FEE\s+TABLES?",
    re.IGNORECASE,
)
FEE_HEADER_END_PATTERN = re.compile(
    r"(?:AMOUNT\s+OF\s+REGISTRATION\s+FEE|FEE\s+RATE)(?:\s*\(\d+\))*",
    re.IGNORECASE,
)
SECURITY_TITLE_PATTERN = re.compile(
    r"^[ \t]*((?:Class\s+[A-Z]\s+)?(?:Common|Ordinary|Preferred|Depositary|Warrants?|Units?|Rights|"
    r"Debt|Senior|Subordinated|Notes?)\b[^\n]{0,150})$",
    re.IGNORECASE | re.MULTILINE,
)
SHARE_COUNT_PATTERN = re.compile(r"(?<![$\d.,])(\d{1,3}(?:,\d{3})+|\d{4,})(?![\d.,]*%)")
DOLLAR_PATTERN = re.compile(r"\$\s*(\d[\d,]*(?:\.\d+)?)")

FEE_TABLE_WINDOW = 5000


def _dollar_amounts(text: str) -> list[str]:
    """Dollar amounts in order, excluding par values."""
    amounts = []
    for match in DOLLAR_PATTERN.finditer(text):
        if "par value" in text[max(0, match.start() - 25):match.start()].lower():
            continue
        amounts.append(f"${match.group(1)}")
    return amounts


def extract_offering_details(
    document_text: str,
    details_type: type[OfferingDetails] = OfferingDetails,
) -> Optional[OfferingDetails]:
    """
    Read the first row of the registration fee table.

    Args:
        document_text: Raw submission text (all documents are searched)
        details_type: OfferingDetails or a subclass to instantiate

    Returns:
        Offering details, or None if no fee table was found
    """
    text = html_to_text(document_text)
    table = FEE_TABLE_PATTERN.search(text)
    if table is None:
        logger.debug("No registration fee table found")
        return None

    window = text[table.end():table.end() + FEE_TABLE_WINDOW]
    header_ends = list(FEE_HEADER_END_PATTERN.finditer(window))
    if header_ends:
        window = window[header_ends[-1].end():]

    details = details_type()

    title = SECURITY_TITLE_PATTERN.search(window)
    if title:
        details.title_of_securities = " ".join(title.group(1).split())
        window = window[title.end():]

    shares = SHARE_COUNT_PATTERN.search(window)
    if shares:
        details.amount_to_be_registered = shares.group(1)

    amounts = _dollar_amounts(window)
    if len(amounts) > 0:
        details.proposed_maximum_offering_price_per_share = amounts[0]
    if len(amounts) > 1:
        details.proposed_maximum_aggregate_offering_price = amounts[1]
    if len(amounts) > 2:
        details.amount_of_registration_fee = amounts[2]

    return details
