"""
Generic EDGAR parsing service.

Handles everything that is common to all filings:
- SGML header -> payload model
- Company name / CIK / ticker via fallback pattern chains
- Normalized basic info (epoch datetimes)
- Attachments
- Baseline market impact

Form-specific extractors hold one of these for their payload type and layer
their own parsing on top of the result.
"""

import logging
from typing import Generic, Optional

from pydantic import ValidationError

from ..config import ParserConfig
from .attachments import AttachmentExtractor
from .datetime_normalizer import normalize_datetime
from .errors import FormatError
from .header_parser import parse_header
from .impact import assess_baseline
from .models import (
    BasicInfo,
    ConsistentDocumentFields,
    EstimatedImpact,
    ParsedDocument,
    T,
)
from .patterns import PatternChain, extract_cik, extract_company_name, extract_ticker

logger = logging.getLogger(__name__)


class GenericParsingService(Generic[T]):
    """
    Parses any EDGAR submission into a ParsedDocument[T].

    Example:
        service = GenericParsingService()
        doc = service.parse(raw_text, "https://www.sec.gov/Archives/...")
        print(doc.basic.acceptance_datetime, doc.parsed.cik)
    """

    def __init__(
        self,
        payload_type: type[T] = ConsistentDocumentFields,
        config: Optional[ParserConfig] = None,
        extra_ticker_patterns: Optional[PatternChain] = None,
    ):
        """
        Args:
            payload_type: Model the header is validated into
            config: Parser configuration (defaults if None)
            extra_ticker_patterns: Form-specific ticker patterns tried first
        """
        self.payload_type = payload_type
        self.config = config or ParserConfig()
        self.extra_ticker_patterns = extra_ticker_patterns or []
        self.attachment_extractor = AttachmentExtractor(self.config.attachments)

    def validate_header(self, header: dict) -> T:
        """
        Validate parsed header fields into the payload model.

        Values whose shape does not fit the model are set aside under a
        "<key>Raw" extra instead of failing the parse. For repeated blocks
        only the offending entries are set aside.

        Raises:
            FormatError: if the header still does not validate
        """
        try:
            return self.payload_type.model_validate(header)
        except ValidationError as e:
            data = set_aside_invalid(header, e.errors())
            logger.warning(
                f"{self.payload_type.__name__}: {e.error_count()} header values did not match "
                f"the expected shape, kept as raw extras"
            )

        try:
            return self.payload_type.model_validate(data)
        except ValidationError as e:
            raise FormatError(f"Header does not fit {self.payload_type.__name__}", str(e)) from e

    def parse_payload(self, document_text: str) -> T:
        """Header fields plus company name, CIK and ticker."""
        payload = self.validate_header(parse_header(document_text))

        company_name = extract_company_name(document_text)
        cik = extract_cik(document_text)
        ticker = extract_ticker(document_text, self.extra_ticker_patterns)

        if company_name:
            payload.company_conformed_name = company_name
        if cik:
            payload.cik = cik
        if ticker:
            payload.ticker = ticker

        return payload

    def build_basic(self, payload: T, url: str) -> BasicInfo:
        """
        Normalized header summary.

        Raises:
            FormatError: if the acceptance datetime or filing date is missing
                or malformed
        """
        acceptance = normalize_datetime(payload.acceptance_datetime)
        filed_as_of = normalize_datetime(payload.filed_as_of_date)
        payload.unix_timestamp = acceptance

        return BasicInfo(
            accession_number=payload.accession_number,
            acceptance_datetime=acceptance,
            conformed_submission_type=payload.conformed_submission_type,
            public_document_count=payload.public_document_count,
            filed_as_of_date=filed_as_of,
            date_as_of_change=payload.date_as_of_change,
            unix_timestamp=acceptance,
            submission_type=payload.conformed_submission_type,
            url=url,
        )

    def assess_impact(self, payload: T) -> EstimatedImpact:
        """Baseline impact from the submission type."""
        return assess_baseline(payload.conformed_submission_type, self.config.impact)

    def collect_attachments(self, document_text: str, payload: T, url: str = "") -> list[str]:
        return self.attachment_extractor.collect(
            document_text,
            public_document_count=payload.public_document_count,
            url=url,
        )

    def parse(self, document_text: str, url: str) -> ParsedDocument[T]:
        """
        Parse a raw submission.

        Args:
            document_text: Full raw submission text
            url: Source URL, copied into basic.url

        Returns:
            ParsedDocument[T] with baseline impact
        """
        payload = self.parse_payload(document_text)
        basic = self.build_basic(payload, url)

        logger.debug(
            f"Parsed {payload.conformed_submission_type} {payload.accession_number} "
            f"(cik={payload.cik}, ticker={payload.ticker})"
        )

        return ParsedDocument[self.payload_type](
            basic=basic,
            estimated_impact=self.assess_impact(payload),
            parsed=payload,
            attachments=self.collect_attachments(document_text, payload, url),
        )


def set_aside_invalid(header: dict, errors: list[dict]) -> dict:
    """
    Move header values that failed validation to "<key>Raw" extras.

    Errors are matched on their top-level key. When the key holds a list and the
    error points at one entry, only that entry is moved.
    """
    data = dict(header)
    bad_entries: dict[str, set[int]] = {}
    bad_keys: set[str] = set()

    for error in errors:
        loc = error.get("loc", ())
        if not loc or not isinstance(loc[0], str) or loc[0] not in data:
            continue
        key = loc[0]
        if len(loc) > 1 and isinstance(loc[1], int) and isinstance(data[key], list):
            bad_entries.setdefault(key, set()).add(loc[1])
        else:
            bad_keys.add(key)

    for key, indexes in bad_entries.items():
        if key in bad_keys:
            continue
        values = data[key]
        data[f"{key}Raw"] = [v for i, v in enumerate(values) if i in indexes]
        data[key] = [v for i, v in enumerate(values) if i not in indexes]

    for key in bad_keys:
        data[f"{key}Raw"] = data.pop(key)

    return data
