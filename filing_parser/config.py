"""
Configuration management for the filing parser.

Supports:
- Loading parser settings from YAML
- Merging an override file onto the base config
- Config validation with Pydantic
- Config hashing for reproducibility
"""

import hashlib
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "configs" / "parser.yaml"


# =============================================================================
# Pydantic Config Models
# =============================================================================


class AttachmentConfig(BaseModel):
    """Which <DOCUMENT> bodies are kept as attachments."""

    image_extensions: list[str] = Field(
        default_factory=lambda: ["jpg", "jpeg", "png", "gif", "bmp", "tiff", "webp", "svg"]
    )
    binary_extensions: list[str] = Field(
        default_factory=lambda: ["pdf", "zip", "exe", "dll", "bin", "dat", "db", "sqlite"]
    )
    primary_extensions: list[str] = Field(default_factory=lambda: ["txt"])  # main filing body
    decode_errors: str = "replace"  # codec error handler for UUE payloads


class ImpactConfig(BaseModel):
    """Weights for the rule-based market impact heuristic."""

    # Baseline buckets keyed by submission type
    insider_types: list[str] = Field(default_factory=lambda: ["4", "4/A", "3"])
    insider_confidence: float = 0.7
    major_event_types: list[str] = Field(default_factory=lambda: ["8-K", "S-1", "S-4"])
    major_event_confidence: float = 0.6
    periodic_types: list[str] = Field(default_factory=lambda: ["10-K", "10-Q"])
    periodic_confidence: float = 0.4
    default_confidence: float = 0.5
    neutral_sentiment: float = 0.5

    # Form 8-K
    high_impact_items: list[str] = Field(
        default_factory=lambda: ["1.01", "2.01", "3.01", "5.01", "8.01"]
    )
    high_impact_item_boost: float = 0.2

    # Form 13F-HR
    holdings_value_threshold: float = 1_000_000
    holdings_shares_threshold: float = 100_000
    small_holdings_value: float = 100_000
    large_holdings_boost: float = 0.2
    small_holdings_penalty: float = 0.1
    min_holdings_confidence: float = 0.1
    holdings_value_scale: float = 10_000_000

    # Per-form confidence bumps
    s1_boost: float = 0.1
    s4_boost: float = 0.15
    ownership_boost: float = 0.1  # Schedule 13D, Form 3
    periodic_report_boost: float = 0.05  # 10-K, 10-Q


class SectionConfig(BaseModel):
    """Narrative section search over the primary document."""

    enabled: bool = True
    max_chars: int = 20000  # Maximum characters kept per section
    min_chars: int = 200  # Shorter matches are treated as table-of-contents hits


class EdgarConfig(BaseModel):
    """EDGAR archive access (filing service only)."""

    base_url: str = "https://www.sec.gov/Archives/edgar/data"
    user_agent: Optional[str] = None  # Falls back to SEC_USER_AGENT env var
    timeout_seconds: float = 30.0


class ParserConfig(BaseModel):
    """Complete parser configuration."""

    attachments: AttachmentConfig = Field(default_factory=AttachmentConfig)
    impact: ImpactConfig = Field(default_factory=ImpactConfig)
    sections: SectionConfig = Field(default_factory=SectionConfig)
    edgar: EdgarConfig = Field(default_factory=EdgarConfig)

    def config_hash(self) -> str:
        """
        Generate hash of config for reproducibility tracking.

        Returns:
            SHA256 hash of serialized config (first 12 chars)
        """
        config_json = self.model_dump_json(exclude={"edgar"})
        return hashlib.sha256(config_json.encode()).hexdigest()[:12]


# =============================================================================
# Config Loading Functions
# =============================================================================


def load_yaml(path: Union[str, Path]) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Override values take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    base_path: Optional[Union[str, Path]] = None,
) -> ParserConfig:
    """
    Load parser configuration from YAML.

    The file at config_path is merged over the base config. If base_path is not
    provided, configs/parser.yaml in the project root is used when present; the
    built-in defaults match that file, so its absence is not an error.

    Args:
        config_path: Path to an override config (None = base only)
        base_path: Optional explicit path to base config

    Returns:
        ParserConfig with all settings resolved
    """
    explicit_base = base_path is not None
    base_path = Path(base_path) if explicit_base else DEFAULT_CONFIG_PATH

    config_dict: dict[str, Any] = {}
    if base_path.exists():
        config_dict = load_yaml(base_path)
    elif explicit_base:
        logger.warning(f"Base config not found at {base_path}, using built-in defaults")
    else:
        # Installed without the configs/ directory
        logger.debug(f"No base config at {base_path}, using built-in defaults")

    if config_path is not None:
        config_dict = deep_merge(config_dict, load_yaml(config_path))
        logger.info(f"Merged config from {config_path} with base {base_path}")

    config = ParserConfig.model_validate(config_dict)
    logger.debug(f"Loaded parser config (hash: {config.config_hash()})")
    return config
