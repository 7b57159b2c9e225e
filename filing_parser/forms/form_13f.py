"""
Form 13F-HR (institutional holdings report) extractor.

The cover page is the <edgarSubmission> XML, the holdings are the rows of the
<informationTable> (usually namespace-prefixed, e.g. <ns1:infoTable>). Every
row is kept and summed; the totals drive the impact estimate.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from ..config import ImpactConfig
from ..parse.impact import adjust_impact
from ..parse.models import EstimatedImpact, MarketImpact
from ..parse.xml_islands import find_xml_islands, parse_first_island, parse_xml_island
from .base import FormExtractor
from .schemas import Form13FFiling, InfoTableEntry

logger = logging.getLogger(__name__)


def _dig(data: Optional[dict], *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def parse_info_table_rows(document_text: str) -> list[dict]:
    """All <infoTable> rows, from the <informationTable> or row by row."""
    table = parse_first_island(document_text, "informationTable")
    if table and table.get("infoTable"):
        return [row for row in table["infoTable"] if isinstance(row, dict)]

    rows = []
    for fragment in find_xml_islands(document_text, "infoTable"):
        try:
            row = parse_xml_island(fragment, "infoTable")
        except Exception as e:
            logger.warning(f"Failed to parse <infoTable> XML: {e}")
            continue
        if row is not None:
            rows.append(row)
    return rows


def build_holdings(rows: list[dict]) -> list[InfoTableEntry]:
    """Validate rows into holdings, skipping rows with an unexpected shape."""
    holdings = []
    for i, row in enumerate(rows):
        try:
            holdings.append(InfoTableEntry.model_validate(row))
        except ValidationError as e:
            logger.warning(f"Skipping infoTable row {i}: {e.error_count()} validation errors")
    return holdings


def holdings_totals(holdings: list[InfoTableEntry]) -> tuple[float, float]:
    """(total value, total shares or principal amount) across all holdings."""
    total_value = sum(h.value or 0.0 for h in holdings)
    total_shares = sum(
        (h.shrs_or_prn_amt.ssh_prnamt or 0.0) if h.shrs_or_prn_amt else 0.0
        for h in holdings
    )
    return total_value, total_shares


def assess_13f_impact(
    base: EstimatedImpact,
    total_value: float,
    total_shares: float,
    config: ImpactConfig,
) -> EstimatedImpact:
    """
    Large books -> positive with boosted confidence, small books -> neutral
    with reduced confidence (floored), otherwise neutral at baseline.
    Total score scales with the reported value.
    """
    total_score = total_value / config.holdings_value_scale

    if total_value > config.holdings_value_threshold and total_shares > config.holdings_shares_threshold:
        return adjust_impact(
            base,
            market_impact=MarketImpact.POSITIVE,
            confidence_delta=config.large_holdings_boost,
            total_score=total_score,
        )
    if total_value < config.small_holdings_value:
        return adjust_impact(
            base,
            market_impact=MarketImpact.NEUTRAL,
            confidence_delta=-config.small_holdings_penalty,
            total_score=total_score,
            min_confidence=config.min_holdings_confidence,
        )
    return adjust_impact(base, market_impact=MarketImpact.NEUTRAL, total_score=total_score)


class Form13FExtractor(FormExtractor[Form13FFiling]):
    """Form 13F-HR: cover page, all holdings and their totals."""

    payload_type = Form13FFiling

    def augment(self, document_text: str, payload: Form13FFiling) -> None:
        payload.edgar_submission = parse_first_island(document_text, "edgarSubmission")
        payload.filing_manager = _dig(
            payload.edgar_submission, "formData", "coverPage", "filingManager", "name"
        )

        payload.info_table = build_holdings(parse_info_table_rows(document_text))
        payload.total_value, payload.total_shares = holdings_totals(payload.info_table)
        logger.debug(
            f"13F holdings: {len(payload.info_table)} rows, "
            f"value={payload.total_value}, shares={payload.total_shares}"
        )

    def refine_impact(self, payload: Form13FFiling, base: EstimatedImpact) -> EstimatedImpact:
        return assess_13f_impact(base, payload.total_value, payload.total_shares, self.config.impact)
