"""
Form 3 (initial statement of beneficial ownership) extractor.

The reporting person and issuer blocks come from the header; values the
header parser could not place are recovered with the regexes below. The
ownership detail comes from the embedded <ownershipDocument>.
"""

import logging
import re
from typing import Optional

from ..parse.header_parser import extract_header_text
from ..parse.impact import upgrade_neutral
from ..parse.models import CompanyData, EstimatedImpact, FilingValues
from .base import FormExtractor
from .form_4 import parse_ownership_document, trading_symbol
from .schemas import BeneficialOwnership, Form3Data, Form3Issuer, OwnerData, ReportingPerson

logger = logging.getLogger(__name__)

# Fallbacks over the raw header text, keyed by field name
FILING_VALUE_PATTERNS = {
    "sec_file_number": re.compile(r"(?:SEC FILE NUMBER|FILE NO\.?)[:\s]*(\d{3}-\d{5,6})", re.IGNORECASE),
    "film_number": re.compile(r"(?:FILM NUMBER|FILM NO\.?)[:\s]*(\d{8,})", re.IGNORECASE),
}

COMPANY_DATA_PATTERNS = {
    "standard_industrial_classification": re.compile(
        r"STANDARD INDUSTRIAL CLASSIFICATION:[ \t]*([^\n\r]+)", re.IGNORECASE
    ),
    "ein": re.compile(r"\b(?:EIN|IRS NUMBER)\b[^:\n]*:\s*(\d{2}-?\d{7})", re.IGNORECASE),
    "state_of_incorporation": re.compile(r"STATE OF INCORPORATION:\s*([A-Z]{2})\b", re.IGNORECASE),
    "fiscal_year_end": re.compile(r"FISCAL YEAR END:\s*(\d{4})", re.IGNORECASE),
}


def _fill_missing(record, patterns: dict[str, re.Pattern], text: str) -> None:
    """Set fields that are still None from the first match of their pattern."""
    for field, pattern in patterns.items():
        if getattr(record, field) is not None:
            continue
        match = pattern.search(text)
        if match:
            setattr(record, field, match.group(1).strip())


def build_reporting_person(payload: Form3Data, header_text: str) -> Optional[ReportingPerson]:
    """REPORTING-OWNER header block (first owner) as a ReportingPerson."""
    owners = (payload.model_extra or {}).get("reportingOwner") or []
    if not owners or not isinstance(owners[0], dict):
        logger.debug(f"No REPORTING-OWNER block in {payload.accession_number}")
        return None

    person = ReportingPerson.model_validate(owners[0])
    if person.owner_data is None:
        person.owner_data = OwnerData()
    if person.filing_values is None:
        person.filing_values = FilingValues(form_type=payload.conformed_submission_type)
    _fill_missing(person.filing_values, FILING_VALUE_PATTERNS, header_text)
    return person


def complete_issuer(issuer: Optional[Form3Issuer], header_text: str) -> Optional[Form3Issuer]:
    """Fill issuer company data the header parser left empty."""
    if issuer is None:
        return None
    if issuer.company_data is None:
        issuer.company_data = CompanyData()
    _fill_missing(issuer.company_data, COMPANY_DATA_PATTERNS, header_text)
    return issuer


class Form3Extractor(FormExtractor[Form3Data]):
    """Form 3: reporting person, issuer and ownership document."""

    payload_type = Form3Data

    def augment(self, document_text: str, payload: Form3Data) -> None:
        header_text = extract_header_text(document_text)
        payload.reporting_person = build_reporting_person(payload, header_text)
        payload.issuer = complete_issuer(payload.issuer, header_text)

        document = parse_ownership_document(document_text)
        if document is not None:
            payload.beneficial_ownership = BeneficialOwnership(ownership_document=document)
            symbol = trading_symbol(document)
            if symbol:
                payload.ticker = symbol

    def refine_impact(self, payload: Form3Data, base: EstimatedImpact) -> EstimatedImpact:
        return upgrade_neutral(base, self.config.impact.ownership_boost)
