"""
Ordered regex fallback chains for company name, CIK and ticker.

Each chain is a list of (pattern, validator) pairs evaluated first-match-wins:
the first match of each pattern is validated, and the first valid candidate
is returned. A chain that runs out of patterns returns None; absence is a
normal outcome, not an error.
"""

import logging
import re
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Validator = Callable[[str], bool]
PatternChain = list[tuple[re.Pattern, Validator]]

TICKER_PATTERN = re.compile(r"^[A-Z]{1,5}$")

# Shapes of individual names, used to reject REPORTING PERSON as a company
PERSON_NAME_PATTERNS = [
    re.compile(r"^[A-Z][a-z]+ [A-Z][a-z]+$"),  # First Last
    re.compile(r"^[A-Z][a-z]+ [A-Z]\. [A-Z][a-z]+$"),  # First M. Last
    re.compile(r"^[A-Z][a-z]+ [A-Z][a-z]+ [A-Z][a-z]+$"),  # First Middle Last
    re.compile(r"^[A-Z][a-z]+ [A-Z][a-z]+ [A-Z]\. [A-Z][a-z]+$"),  # First Middle M. Last
]


def looks_like_person_name(name: str) -> bool:
    """True if the string has the shape of an individual's name."""
    return any(p.match(name) for p in PERSON_NAME_PATTERNS)


def is_name_like(value: str) -> bool:
    """Reject bare numbers (CIKs etc.) and fragments."""
    return not value.isdigit() and len(value) > 2


def is_company_name(value: str) -> bool:
    return is_name_like(value) and not looks_like_person_name(value)


def is_ticker(value: str) -> bool:
    return bool(TICKER_PATTERN.match(value))


def _any(_: str) -> bool:
    return True


# =============================================================================
# Pattern Chains
# =============================================================================

# Header keys use [ \t]* so an empty section opener ("ISSUER:" followed by a
# nested block) never captures the next line.
COMPANY_NAME_PATTERNS: PatternChain = [
    (re.compile(r"COMPANY CONFORMED NAME:[ \t]*([^\n\r]+)", re.IGNORECASE), is_name_like),
    (re.compile(r"ISSUER:[ \t]*([^\n\r]+)", re.IGNORECASE), is_name_like),
    (re.compile(r"COMPANY NAME:[ \t]*([^\n\r]+)", re.IGNORECASE), is_name_like),
    (re.compile(r"ISSUER NAME:[ \t]*([^\n\r]+)", re.IGNORECASE), is_name_like),
    (re.compile(r"ISSUER CONFORMED NAME:[ \t]*([^\n\r]+)", re.IGNORECASE), is_name_like),
    (re.compile(r"<issuerName>([^<]+)</issuerName>", re.IGNORECASE), is_name_like),
    (re.compile(r"<companyName>([^<]+)</companyName>", re.IGNORECASE), is_name_like),
    # Last resort, and only when it does not look like an individual
    (re.compile(r"REPORTING PERSON:[ \t]*([^\n\r]+)", re.IGNORECASE), is_company_name),
]

CIK_PATTERNS: PatternChain = [
    (re.compile(r"CENTRAL INDEX KEY:\s*(\d+)", re.IGNORECASE), _any),
    (re.compile(r"CIK:\s*(\d+)", re.IGNORECASE), _any),
    (re.compile(r"ISSUER CIK:\s*(\d+)", re.IGNORECASE), _any),
]

TICKER_PATTERNS: PatternChain = [
    # Quoted symbol phrases
    (re.compile(r"ticker symbol[:\s]*['\"]([A-Z]{1,5})['\"]", re.IGNORECASE), is_ticker),
    (re.compile(r"symbol[:\s]*['\"]([A-Z]{1,5})['\"]", re.IGNORECASE), is_ticker),
    (re.compile(r"trading symbol[:\s]*['\"]([A-Z]{1,5})['\"]", re.IGNORECASE), is_ticker),
    (re.compile(r"under the symbol[:\s]*['\"]([A-Z]{1,5})['\"]", re.IGNORECASE), is_ticker),
    (re.compile(r"ticker[:\s]*['\"]([A-Z]{1,5})['\"]", re.IGNORECASE), is_ticker),

    # Exchange-qualified, unquoted ("NYSE American: FAX")
    (re.compile(r"NASDAQ[^:]*:\s*([A-Z]{1,5})\b", re.IGNORECASE), is_ticker),
    (re.compile(r"NYSE[^:]*:\s*([A-Z]{1,5})\b", re.IGNORECASE), is_ticker),
    (re.compile(r"NYSE American[^:]*:\s*([A-Z]{1,5})\b", re.IGNORECASE), is_ticker),
    (re.compile(r"NYSE Arca[^:]*:\s*([A-Z]{1,5})\b", re.IGNORECASE), is_ticker),
    (re.compile(r"NYSE MKT[^:]*:\s*([A-Z]{1,5})\b", re.IGNORECASE), is_ticker),
    (re.compile(r"NASDAQ[^:]*symbol[:\s]*['\"]([A-Z]{1,5})['\"]", re.IGNORECASE), is_ticker),
    (re.compile(r"NYSE[^:]*symbol[:\s]*['\"]([A-Z]{1,5})['\"]", re.IGNORECASE), is_ticker),

    # Parenthetical exchange forms ("(NYSE: FAX)")
    (re.compile(r"\([^)]*NYSE[^)]*:\s*([A-Z]{1,5})\)", re.IGNORECASE), is_ticker),
    (re.compile(r"\([^)]*NASDAQ[^)]*:\s*([A-Z]{1,5})\)", re.IGNORECASE), is_ticker),

    # Low-confidence generic fallbacks
    (re.compile(r"\(([A-Z]{1,5})\)", re.IGNORECASE), is_ticker),
    (re.compile(r"\b([A-Z]{1,5})\b.*\([^)]*exchange[^)]*\)", re.IGNORECASE), is_ticker),
]


def first_match(
    text: str,
    chain: PatternChain,
    label: str = "value",
) -> Optional[str]:
    """
    Run a fallback chain over text.

    Args:
        text: Text to search
        chain: Ordered (pattern, validator) pairs
        label: Name used in debug logging

    Returns:
        First captured group that passes its validator, stripped, or None
    """
    for i, (pattern, validate) in enumerate(chain, start=1):
        match = pattern.search(text)
        if not match or not match.group(1):
            continue
        candidate = match.group(1).strip()
        if validate(candidate):
            logger.debug(f"{label} extracted: {candidate!r} using pattern {i}")
            return candidate

    logger.debug(f"No valid {label} found in document")
    return None


def extract_company_name(text: str) -> Optional[str]:
    """Company name via the ordered fallback chain."""
    return first_match(text, COMPANY_NAME_PATTERNS, "company name")


def extract_cik(text: str) -> Optional[str]:
    """CIK via the ordered fallback chain, zero-padded to 10 digits."""
    cik = first_match(text, CIK_PATTERNS, "CIK")
    return cik.zfill(10) if cik else None


def extract_ticker(text: str, extra_patterns: Optional[PatternChain] = None) -> Optional[str]:
    """
    Ticker via the ordered fallback chain.

    Args:
        text: Raw document text
        extra_patterns: Form-specific patterns tried before the generic chain
    """
    chain = list(extra_patterns or []) + TICKER_PATTERNS
    return first_match(text, chain, "ticker")
