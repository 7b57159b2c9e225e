"""
Form S-4 (business combination registration) extractor.
"""

import logging
import re
from typing import Optional

from ..parse.impact import upgrade_neutral
from ..parse.models import EstimatedImpact
from ..parse.sections import (
    FORM_S4_SECTIONS,
    SectionFinder,
    html_to_text,
    primary_document_text,
    split_paragraphs,
)
from .base import TICKER_SYMBOL_PATTERNS, FormExtractor
from .registration import extract_offering_details
from .schemas import BusinessCombination, FormS4Data, TransactionDetails

logger = logging.getLogger(__name__)

# Checked in order; the first one mentioned names the transaction
TRANSACTION_TYPES = [
    (re.compile(r"\bbusiness\s+combination\b", re.IGNORECASE), "Business Combination"),
    (re.compile(r"\bexchange\s+offer\b", re.IGNORECASE), "Exchange Offer"),
    (re.compile(r"\btender\s+offer\b", re.IGNORECASE), "Tender Offer"),
    (re.compile(r"\bmerger\b", re.IGNORECASE), "Merger"),
    (re.compile(r"\bacquisition\b", re.IGNORECASE), "Acquisition"),
    (re.compile(r"\breorganization\b", re.IGNORECASE), "Reorganization"),
]

# Only the cover and summary pages are used to classify
TRANSACTION_TYPE_WINDOW = 20000


def classify_transaction(document_text: str) -> Optional[str]:
    """Transaction type named on the first pages of the prospectus."""
    text = html_to_text(primary_document_text(document_text))[:TRANSACTION_TYPE_WINDOW]
    for pattern, label in TRANSACTION_TYPES:
        if pattern.search(text):
            return label
    return None


class FormS4Extractor(FormExtractor[FormS4Data]):
    """Form S-4: transaction details, merger narrative, M&A impact bump."""

    payload_type = FormS4Data
    ticker_patterns = TICKER_SYMBOL_PATTERNS

    def augment(self, document_text: str, payload: FormS4Data) -> None:
        details = extract_offering_details(document_text, TransactionDetails)
        if details is None:
            logger.debug(f"No fee table found in {payload.accession_number}")
            details = TransactionDetails()
        details.transaction_type = classify_transaction(document_text)
        payload.transaction_details = details

        found = SectionFinder(document_text, self.config.sections).find_sections(FORM_S4_SECTIONS)
        payload.business_combination = BusinessCombination(
            summary_of_transaction=found["summary_of_transaction"],
            background_of_transaction=found["background_of_transaction"],
            reasons_for_transaction=found["reasons_for_transaction"],
            recommendation_of_board=found["recommendation_of_board"],
            fairness_opinion=found["fairness_opinion"],
        )
        payload.risk_factors = split_paragraphs(found["risk_factors"])
        payload.regulatory_approvals = split_paragraphs(found["regulatory_approvals"])

    def refine_impact(self, payload: FormS4Data, base: EstimatedImpact) -> EstimatedImpact:
        return upgrade_neutral(base, self.config.impact.s4_boost)
