"""
Schedule 13G (passive beneficial ownership) extractor.
"""

from .base import TICKER_SYMBOL_PATTERNS, FormExtractor
from .schedule_13d import body_text, extract_cusip, extract_securities_owned
from .schemas import Schedule13GData


class Schedule13GExtractor(FormExtractor[Schedule13GData]):
    """Schedule 13G / 13G/A: CUSIP and cover page. Impact stays at baseline."""

    payload_type = Schedule13GData
    ticker_patterns = TICKER_SYMBOL_PATTERNS

    def augment(self, document_text: str, payload: Schedule13GData) -> None:
        text = body_text(document_text)
        payload.cusip = extract_cusip(document_text, text)
        payload.securities_owned = extract_securities_owned(text, payload.cusip)
