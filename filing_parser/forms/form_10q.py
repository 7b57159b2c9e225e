"""
Form 10-Q (quarterly report) extractor.
"""

from ..parse.impact import adjust_impact
from ..parse.models import EstimatedImpact
from ..parse.sections import FORM_10Q_SECTIONS, SectionFinder, split_paragraphs
from .base import TICKER_SYMBOL_PATTERNS, FormExtractor
from .schemas import (
    Form10QData,
    MarketInformation,
    QuarterlyBusinessInformation,
    QuarterlyFinancialInformation,
)


class Form10QExtractor(FormExtractor[Form10QData]):
    """Form 10-Q: Part I / Part II Item sections, small confidence bump."""

    payload_type = Form10QData
    ticker_patterns = TICKER_SYMBOL_PATTERNS

    def augment(self, document_text: str, payload: Form10QData) -> None:
        found = SectionFinder(document_text, self.config.sections).find_sections(FORM_10Q_SECTIONS)

        payload.financial_information = QuarterlyFinancialInformation(
            financial_statements=found["financial_statements"],
        )
        payload.business_information = QuarterlyBusinessInformation(
            management_discussion_and_analysis=found["management_discussion_and_analysis"],
            quantitative_and_qualitative_disclosures=found["quantitative_and_qualitative_disclosures"],
            controls_and_procedures=found["controls_and_procedures"],
        )
        payload.market_information = MarketInformation(
            issuer_purchases_of_equity_securities=found["issuer_purchases_of_equity_securities"],
        )
        payload.legal_proceedings = found["legal_proceedings"]
        payload.risk_factors = split_paragraphs(found["risk_factors"])

    def refine_impact(self, payload: Form10QData, base: EstimatedImpact) -> EstimatedImpact:
        return adjust_impact(base, confidence_delta=self.config.impact.periodic_report_boost)
