"""
Rule-based market impact heuristic.

This is not a model: the baseline is a lookup on submission type, and each
form extractor may refine it with a few structural signals. Every value goes
through EstimatedImpact, which clamps to [0, 1] and rounds to 8 decimals.
"""

from typing import Optional

from ..config import ImpactConfig
from .models import EstimatedImpact, MarketImpact


def assess_baseline(submission_type: Optional[str], config: Optional[ImpactConfig] = None) -> EstimatedImpact:
    """
    Baseline impact from the filing type alone.

    {4, 4/A, 3} insider activity -> positive 0.7
    {8-K, S-1, S-4} major events -> positive 0.6
    {10-K, 10-Q} routine reporting -> neutral 0.4
    anything else -> neutral 0.5
    """
    config = config or ImpactConfig()
    filing_type = (submission_type or "").strip()

    if filing_type in config.insider_types:
        market_impact, confidence = MarketImpact.POSITIVE, config.insider_confidence
    elif filing_type in config.major_event_types:
        market_impact, confidence = MarketImpact.POSITIVE, config.major_event_confidence
    elif filing_type in config.periodic_types:
        market_impact, confidence = MarketImpact.NEUTRAL, config.periodic_confidence
    else:
        market_impact, confidence = MarketImpact.NEUTRAL, config.default_confidence

    return EstimatedImpact(
        market_impact=market_impact,
        confidence=confidence,
        total_score=confidence,
        sentiment=config.neutral_sentiment,
    )


def adjust_impact(
    base: EstimatedImpact,
    market_impact: Optional[MarketImpact] = None,
    confidence_delta: float = 0.0,
    score_delta: float = 0.0,
    total_score: Optional[float] = None,
    min_confidence: float = 0.0,
) -> EstimatedImpact:
    """
    Return a new estimate with the given changes applied (and re-clamped).

    Args:
        base: Estimate to start from
        market_impact: Replacement direction (None keeps the base one)
        confidence_delta: Added to the confidence
        score_delta: Added to the total score
        total_score: Replacement total score (overrides score_delta)
        min_confidence: Lower bound applied before clamping
    """
    return EstimatedImpact(
        market_impact=market_impact or base.market_impact,
        confidence=max(base.confidence + confidence_delta, min_confidence),
        total_score=total_score if total_score is not None else base.total_score + score_delta,
        sentiment=base.sentiment,
    )


def upgrade_neutral(base: EstimatedImpact, confidence_delta: float) -> EstimatedImpact:
    """Turn a neutral estimate positive and bump its confidence."""
    direction = MarketImpact.POSITIVE if base.market_impact == MarketImpact.NEUTRAL else None
    return adjust_impact(base, market_impact=direction, confidence_delta=confidence_delta)
