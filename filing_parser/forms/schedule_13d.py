"""
Schedule 13D (active beneficial ownership) extractor.

Subject company and filer come from the header. CUSIP and the cover page
rows (voting / dispositive power, aggregate amount, percent of class) are
read from the body text by label, since row numbering differs between 13D
and 13G cover pages.
"""

import logging
import re
from typing import Optional

from ..parse.impact import upgrade_neutral
from ..parse.models import EstimatedImpact
from ..parse.patterns import PatternChain, first_match
from ..parse.sections import SectionFinder, html_to_text, primary_document_text
from .base import TICKER_SYMBOL_PATTERNS, FormExtractor
from .schemas import Schedule13DData, SecuritiesOwned

logger = logging.getLogger(__name__)

CUSIP_SHAPE = re.compile(r"^[0-9A-Z]{9}$")


def is_cusip(value: str) -> bool:
    return bool(CUSIP_SHAPE.match(value.replace(" ", "").upper()))


CUSIP_PATTERNS: PatternChain = [
    (re.compile(r"CUSIP:\s*([A-Z0-9]{9})\b", re.IGNORECASE), is_cusip),
    (re.compile(r"CUSIP\s+(?:No\.?|Number)\s*:?\s*([0-9A-Z]{6}\s?[0-9A-Z]{2}\s?[0-9A-Z])\b", re.IGNORECASE), is_cusip),
    (re.compile(r"\b([0-9A-Z]{6}\s?[0-9A-Z]{2}\s?[0-9A-Z])\s*\n?\s*\(CUSIP\s+Number\)", re.IGNORECASE), is_cusip),
]

# Cover page rows, located by label; the value is the first number after it
_NUMBER_AFTER = r"[^\d]{0,120}?(\d[\d,]*(?:\.\d+)?)"

COVER_ROW_PATTERNS = {
    "sole_voting_power": re.compile(r"SOLE\s+VOTING\s+POWER" + _NUMBER_AFTER, re.IGNORECASE),
    "shared_voting_power": re.compile(r"SHARED\s+VOTING\s+POWER" + _NUMBER_AFTER, re.IGNORECASE),
    "sole_dispositive_power": re.compile(r"SOLE\s+DISPOSITIVE\s+POWER" + _NUMBER_AFTER, re.IGNORECASE),
    "shared_dispositive_power": re.compile(r"SHARED\s+DISPOSITIVE\s+POWER" + _NUMBER_AFTER, re.IGNORECASE),
    "amount_beneficially_owned": re.compile(
        r"AGGREGATE\s+AMOUNT\s+BENEFICIALLY\s+OWNED\s+BY\s+EACH\s+REPORTING\s+PERSON" + _NUMBER_AFTER,
        re.IGNORECASE,
    ),
}

PERCENT_OF_CLASS_PATTERN = re.compile(
    r"PERCENT\s+OF\s+CLASS\s+REPRESENTED\s+BY\s+AMOUNT\s+IN\s+ROW\s*\(?\d+\)?[^\d]{0,120}?(\d+(?:\.\d+)?)\s*%",
    re.IGNORECASE,
)
TITLE_OF_CLASS_PATTERN = re.compile(r"([^\n]{3,150})\n\s*\(Title\s+of\s+Class\s+of\s+Securities\)", re.IGNORECASE)
REPORTING_PERSON_TYPE_PATTERN = re.compile(
    r"TYPE\s+OF\s+REPORTING\s+PERSON[^\n]*\n\s*(?:\(\d+\)\s*)?([A-Z]{2}(?:\s*,\s*[A-Z]{2})*)\b"
)

PURPOSE_SECTION = {
    "start_patterns": [r"ITEM\s+4\.?\s*[-–—:]?\s*PURPOSE\s+OF\s+(?:THE\s+)?TRANSACTION"],
    "end_patterns": [r"ITEM\s+5\b"],
}


def _number(text: str) -> Optional[float]:
    try:
        return float(text.replace(",", ""))
    except ValueError:
        return None


def body_text(document_text: str) -> str:
    """Primary document as plain text."""
    return html_to_text(primary_document_text(document_text))


def extract_cusip(document_text: str, text: Optional[str] = None) -> Optional[str]:
    """CUSIP from the header-style label, then the cover page, spaces removed."""
    for candidate_text in (document_text, text or ""):
        cusip = first_match(candidate_text, CUSIP_PATTERNS, "CUSIP")
        if cusip:
            return cusip.replace(" ", "").upper()
    return None


def extract_securities_owned(text: str, cusip: Optional[str] = None) -> Optional[SecuritiesOwned]:
    """
    Cover page rows of the first reporting person.

    Returns:
        SecuritiesOwned, or None when no row label is found
    """
    owned = SecuritiesOwned(cusip=cusip)
    found = False

    for field, pattern in COVER_ROW_PATTERNS.items():
        match = pattern.search(text)
        if match:
            setattr(owned, field, _number(match.group(1)))
            found = True

    percent = PERCENT_OF_CLASS_PATTERN.search(text)
    if percent:
        owned.percent_of_class = _number(percent.group(1))
        found = True

    title = TITLE_OF_CLASS_PATTERN.search(text)
    if title:
        owned.title_of_class = " ".join(title.group(1).split())

    person_type = REPORTING_PERSON_TYPE_PATTERN.search(text)
    if person_type:
        owned.type_of_reporting_person = person_type.group(1)

    return owned if found else None


class Schedule13DExtractor(FormExtractor[Schedule13DData]):
    """Schedule 13D / 13D/A: CUSIP, cover page, purpose; ownership impact bump."""

    payload_type = Schedule13DData
    ticker_patterns = TICKER_SYMBOL_PATTERNS

    def augment(self, document_text: str, payload: Schedule13DData) -> None:
        text = body_text(document_text)
        payload.cusip = extract_cusip(document_text, text)
        if payload.cusip is None:
            logger.debug(f"No CUSIP found in {payload.accession_number}")
        payload.securities_owned = extract_securities_owned(text, payload.cusip)
        found = SectionFinder(document_text, self.config.sections).find_sections(
            {"purpose_of_transaction": PURPOSE_SECTION}
        )
        payload.purpose_of_transaction = found["purpose_of_transaction"]

    def refine_impact(self, payload: Schedule13DData, base: EstimatedImpact) -> EstimatedImpact:
        return upgrade_neutral(base, self.config.impact.ownership_boost)
