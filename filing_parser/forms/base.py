"""
Base class for form-specific extractors.

An extractor owns a GenericParsingService for its payload type and composes
form behaviour over the generic result:

    doc = service.parse(text, url)      # header, company, attachments, baseline
    augment(text, doc.parsed)           # form-specific XML / text parsing
    doc.estimated_impact = refine(...)  # form-specific impact adjustment
"""

import logging
import re
from typing import ClassVar, Generic, Optional

from ..config import ParserConfig
from ..parse.generic import GenericParsingService
from ..parse.models import EstimatedImpact, ParsedDocument, T
from ..parse.patterns import PatternChain, is_ticker

logger = logging.getLogger(__name__)

# "TICKER SYMBOL: ABC", used by periodic reports, registrations and schedules
TICKER_SYMBOL_PATTERNS: PatternChain = [
    (re.compile(r"TICKER SYMBOL:\s*([A-Z]{1,5})\b", re.IGNORECASE), is_ticker),
]


class FormExtractor(Generic[T]):
    """
    Extracts one family of forms.

    Subclasses set payload_type (and optionally ticker_patterns) and override
    augment() / refine_impact(). The default behaviour is the generic parse.
    """

    payload_type: ClassVar[type]
    ticker_patterns: ClassVar[PatternChain] = []

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Args:
            config: Parser configuration (defaults if None)
        """
        self.config = config or ParserConfig()
        self.service: GenericParsingService[T] = GenericParsingService(
            self.payload_type,
            config=self.config,
            extra_ticker_patterns=self.ticker_patterns,
        )

    def augment(self, document_text: str, payload: T) -> None:
        """Add form-specific fields to the payload in place."""

    def refine_impact(self, payload: T, base: EstimatedImpact) -> EstimatedImpact:
        """Adjust the baseline impact. Default: unchanged."""
        return base

    def parse(self, document_text: str, url: str) -> ParsedDocument[T]:
        """
        Parse a raw submission of this form family.

        Args:
            document_text: Full raw submission text
            url: Source URL

        Returns:
            ParsedDocument with the form payload and refined impact
        """
        doc = self.service.parse(document_text, url)
        self.augment(document_text, doc.parsed)
        doc.estimated_impact = self.refine_impact(doc.parsed, doc.estimated_impact)
        logger.debug(
            f"{type(self).__name__}: {doc.basic.accession_number} -> "
            f"{doc.estimated_impact.market_impact} ({doc.estimated_impact.confidence})"
        )
        return doc
