"""
Form 4 (statement of changes in beneficial ownership) extractor.

The transaction detail lives in the embedded <ownershipDocument> XML, which
is shared with Forms 3 and 5.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from ..parse.xml_islands import parse_first_island
from .base import FormExtractor
from .schemas import Form4Data, OwnershipDocument

logger = logging.getLogger(__name__)


def parse_ownership_document(document_text: str) -> Optional[OwnershipDocument]:
    """
    Parse the first well-formed <ownershipDocument> of a submission.

    Returns:
        OwnershipDocument, or None if absent or malformed (logged)
    """
    raw = parse_first_island(document_text, "ownershipDocument")
    if raw is None:
        return None
    try:
        return OwnershipDocument.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Ownership document did not match the expected shape: {e.error_count()} errors")
        return None


def trading_symbol(document: Optional[OwnershipDocument]) -> Optional[str]:
    """issuerTradingSymbol of an ownership document, upper-cased."""
    if document is None or document.issuer is None:
        return None
    symbol = (document.issuer.issuer_trading_symbol or "").strip().upper()
    return symbol or None


class Form4Extractor(FormExtractor[Form4Data]):
    """Form 4 / 4/A: ownership document. Impact stays at baseline."""

    payload_type = Form4Data

    def augment(self, document_text: str, payload: Form4Data) -> None:
        payload.ownership_document = parse_ownership_document(document_text)
        symbol = trading_symbol(payload.ownership_document)
        if symbol:
            payload.ticker = symbol
