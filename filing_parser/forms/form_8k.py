"""
Form 8-K (current report) extractor.

Items come from two places: the ITEM INFORMATION lines of the header (titles)
and "Item N.NN" headings in the body (codes). Both are kept, deduplicated in
order of appearance. Material items push the impact positive.
"""

import logging
import re
from typing import Iterable, Optional

from ..config import ImpactConfig
from ..parse.impact import adjust_impact
from ..parse.models import EstimatedImpact, MarketImpact
from ..parse.patterns import PatternChain, is_ticker
from ..parse.sections import html_to_text, primary_document_text
from .base import FormExtractor
from .schemas import Form8KData

logger = logging.getLogger(__name__)

ITEM_CODE_PATTERN = re.compile(r"\bItem\s+(\d{1,2}\.\d{2})\b", re.IGNORECASE)

OTC_TICKER_PATTERNS: PatternChain = [
    (re.compile(r"\(OTC:\s*([A-Z]+)\)", re.IGNORECASE), is_ticker),
]

# Canonical SEC titles of the 8-K items
ITEM_TITLES = {
    "1.01": "Entry into a Material Definitive Agreement",
    "1.02": "Termination of a Material Definitive Agreement",
    "1.03": "Bankruptcy or Receivership",
    "1.04": "Mine Safety - Reporting of Shutdowns and Patterns of Violations",
    "1.05": "Material Cybersecurity Incidents",
    "2.01": "Completion of Acquisition or Disposition of Assets",
    "2.02": "Results of Operations and Financial Condition",
    "2.03": "Creation of a Direct Financial Obligation or an Obligation under an Off-Balance Sheet Arrangement of a Registrant",
    "2.04": "Triggering Events That Accelerate or Increase a Direct Financial Obligation or an Obligation under an Off-Balance Sheet Arrangement",
    "2.05": "Costs Associated with Exit or Disposal Activities",
    "2.06": "Material Impairments",
    "3.01": "Notice of Delisting or Failure to Satisfy a Continued Listing Rule or Standard; Transfer of Listing",
    "3.02": "Unregistered Sales of Equity Securities",
    "3.03": "Material Modification to Rights of Security Holders",
    "4.01": "Changes in Registrant's Certifying Accountant",
    "4.02": "Non-Reliance on Previously Issued Financial Statements or a Related Audit Report or Completed Interim Review",
    "5.01": "Changes in Control of Registrant",
    "5.02": "Departure of Directors or Certain Officers; Election of Directors; Appointment of Certain Officers; Compensatory Arrangements of Certain Officers",
    "5.03": "Amendments to Articles of Incorporation or Bylaws; Change in Fiscal Year",
    "5.04": "Temporary Suspension of Trading Under Registrant's Employee Benefit Plans",
    "5.05": "Amendments to the Registrant's Code of Ethics, or Waiver of a Provision of the Code of Ethics",
    "5.06": "Change in Shell Company Status",
    "5.07": "Submission of Matters to a Vote of Security Holders",
    "5.08": "Shareholder Director Nominations",
    "6.01": "ABS Informational and Computational Material",
    "6.02": "Change of Servicer or Trustee",
    "6.03": "Change in Credit Enhancement or Other External Support",
    "6.04": "Failure to Make a Required Distribution",
    "6.05": "Securities Act Updating Disclosure",
    "7.01": "Regulation FD Disclosure",
    "8.01": "Other Events",
    "9.01": "Financial Statements and Exhibits",
}

_TITLE_TO_CODE = {title.lower(): code for code, title in ITEM_TITLES.items()}


def _dedupe(values: Iterable[str]) -> list[str]:
    seen = set()
    result = []
    for value in values:
        key = value.strip()
        if key and key not in seen:
            seen.add(key)
            result.append(key)
    return result


def extract_body_item_codes(document_text: str) -> list[str]:
    """'Item N.NN' codes mentioned in the primary document, in order."""
    body = html_to_text(primary_document_text(document_text))
    return _dedupe(m.group(1) for m in ITEM_CODE_PATTERN.finditer(body))


def merge_item_information(header_items: list[str], body_codes: list[str]) -> list[str]:
    """Header titles followed by body item codes ("Item 2.01"), deduplicated."""
    return _dedupe(list(header_items) + [f"Item {code}" for code in body_codes])


def item_code(item: str) -> Optional[str]:
    """
    Resolve an item entry to its code.

    "Item 2.01" -> "2.01"
    "Completion of Acquisition or Disposition of Assets" -> "2.01"
    """
    match = ITEM_CODE_PATTERN.search(item)
    if match:
        return match.group(1)
    return _TITLE_TO_CODE.get(" ".join(item.split()).lower())


def assess_8k_impact(
    base: EstimatedImpact,
    item_information: list[str],
    config: ImpactConfig,
) -> EstimatedImpact:
    """Material items -> positive, confidence and total score boosted."""
    codes = {item_code(item) for item in item_information}
    material = sorted(c for c in codes if c in config.high_impact_items)
    if not material:
        return base

    logger.debug(f"8-K material items: {material}")
    boost = config.high_impact_item_boost
    return adjust_impact(
        base,
        market_impact=MarketImpact.POSITIVE,
        confidence_delta=boost,
        score_delta=boost,
    )


class Form8KExtractor(FormExtractor[Form8KData]):
    """Form 8-K: item list plus material-event impact."""

    payload_type = Form8KData
    ticker_patterns = OTC_TICKER_PATTERNS

    def augment(self, document_text: str, payload: Form8KData) -> None:
        payload.item_information = merge_item_information(
            payload.item_information,
            extract_body_item_codes(document_text),
        )

    def refine_impact(self, payload: Form8KData, base: EstimatedImpact) -> EstimatedImpact:
        return assess_8k_impact(base, payload.item_information, self.config.impact)
