"""
Form S-1 (registration statement) extractor.
"""

from ..parse.impact import upgrade_neutral
from ..parse.models import EstimatedImpact
from ..parse.sections import FORM_S1_SECTIONS, SectionFinder, split_paragraphs
from .base import TICKER_SYMBOL_PATTERNS, FormExtractor
from .registration import extract_offering_details
from .schemas import BusinessDescription, FormS1Data, RegistrationFinancialInformation


class FormS1Extractor(FormExtractor[FormS1Data]):
    """Form S-1 / S-1/A: fee table, prospectus sections, IPO impact bump."""

    payload_type = FormS1Data
    ticker_patterns = TICKER_SYMBOL_PATTERNS

    def augment(self, document_text: str, payload: FormS1Data) -> None:
        payload.offering_details = extract_offering_details(document_text)

        found = SectionFinder(document_text, self.config.sections).find_sections(FORM_S1_SECTIONS)
        payload.business_description = BusinessDescription(
            business_overview=found["business_overview"],
            risk_factors=split_paragraphs(found["risk_factors"]),
            use_of_proceeds=found["use_of_proceeds"],
            dividend_policy=found["dividend_policy"],
        )
        payload.financial_information = RegistrationFinancialInformation(
            management_discussion=found["management_discussion"],
        )

    def refine_impact(self, payload: FormS1Data, base: EstimatedImpact) -> EstimatedImpact:
        return upgrade_neutral(base, self.config.impact.s1_boost)
