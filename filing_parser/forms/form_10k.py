"""
Form 10-K (annual report) extractor.
"""

from ..parse.impact import adjust_impact
from ..parse.models import EstimatedImpact
from ..parse.sections import FORM_10K_SECTIONS, SectionFinder, split_paragraphs
from .base import TICKER_SYMBOL_PATTERNS, FormExtractor
from .schemas import (
    AnnualBusinessInformation,
    AnnualFinancialInformation,
    CorporateGovernance,
    Form10KData,
    MarketInformation,
)

ANNUAL_SECTIONS = {
    **FORM_10K_SECTIONS,
    "selected_financial_data": {
        "start_patterns": [r"ITEM\s+6\.?\s*[-–—:]?\s*SELECTED\s+(?:CONSOLIDATED\s+)?FINANCIAL\s+DATA"],
        "end_patterns": [r"ITEM\s+7\b"],
    },
}


class Form10KExtractor(FormExtractor[Form10KData]):
    """Form 10-K: narrative Item sections, small confidence bump."""

    payload_type = Form10KData
    ticker_patterns = TICKER_SYMBOL_PATTERNS

    def augment(self, document_text: str, payload: Form10KData) -> None:
        found = SectionFinder(document_text, self.config.sections).find_sections(ANNUAL_SECTIONS)

        payload.business_information = AnnualBusinessInformation(
            business_overview=found["business_overview"],
            risk_factors=split_paragraphs(found["risk_factors"]),
            properties=found["properties"],
            legal_proceedings=found["legal_proceedings"],
            mine_safety_disclosures=found["mine_safety_disclosures"],
        )
        payload.financial_information = AnnualFinancialInformation(
            selected_financial_data=found["selected_financial_data"],
            supplementary_data=found["supplementary_data"],
            management_discussion_and_analysis=found["management_discussion_and_analysis"],
            quantitative_and_qualitative_disclosures=found["quantitative_and_qualitative_disclosures"],
        )
        payload.market_information = MarketInformation(
            market_for_registrant_common_equity=found["market_for_registrant_common_equity"],
        )
        payload.corporate_governance = CorporateGovernance(
            directors_and_executive_officers=found["directors_and_executive_officers"],
            executive_compensation=found["executive_compensation"],
        )

    def refine_impact(self, payload: Form10KData, base: EstimatedImpact) -> EstimatedImpact:
        return adjust_impact(base, confidence_delta=self.config.impact.periodic_report_boost)
