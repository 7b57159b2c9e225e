"""
Pydantic models for parsed EDGAR filings.

Python attributes are snake_case; serialized output (by_alias=True) uses the
camelCase keys produced by the SGML header parser.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class MarketImpact(str, Enum):
    """Direction of the estimated market impact."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


def _expects_list(annotation: Any) -> bool:
    """True for list[...] and Optional[list[...]] annotations."""
    if get_origin(annotation) is list or annotation is list:
        return True
    return any(_expects_list(arg) for arg in get_args(annotation) if arg is not type(None))


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class EdgarModel(CamelModel):
    """
    Base for header-derived records.

    Header keys the model does not declare are kept as extra fields, so no
    information from the SGML header is lost.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="allow",
    )

    @model_validator(mode="before")
    @classmethod
    def collapse_repeated_values(cls, data: Any) -> Any:
        """
        Reconcile repeated and single values with the declared field shape.

        A key repeated where one value is expected keeps the first value; a
        single value where a list is expected is wrapped.
        """
        if not isinstance(data, dict):
            return data
        for name, info in cls.model_fields.items():
            wants_list = _expects_list(info.annotation)
            for key in (info.alias or name, name):
                value = data.get(key)
                if value is None:
                    continue
                if wants_list and not isinstance(value, list):
                    data = {**data, key: [value]}
                elif not wants_list and isinstance(value, list):
                    data = {**data, key: value[0] if value else None}
        return data


# =============================================================================
# Header Sub-records
# =============================================================================

class CompanyData(EdgarModel):
    """COMPANY DATA block of a filer / subject company."""
    company_conformed_name: Optional[str] = None
    central_index_key: Optional[str] = None
    standard_industrial_classification: Optional[str] = None
    organization_name: Optional[str] = None
    irs_number: Optional[str] = None
    ein: Optional[str] = None
    state_of_incorporation: Optional[str] = None
    fiscal_year_end: Optional[str] = None


class FilingValues(EdgarModel):
    """FILING VALUES block."""
    form_type: Optional[str] = None
    sec_act: Optional[str] = None
    sec_file_number: Optional[str] = None
    film_number: Optional[str] = None


class Address(EdgarModel):
    """BUSINESS ADDRESS / MAIL ADDRESS block."""
    street1: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    business_phone: Optional[str] = None


class FormerCompany(EdgarModel):
    """FORMER COMPANY block."""
    former_conformed_name: Optional[str] = None
    date_of_name_change: Optional[str] = None


class Filer(EdgarModel):
    """A FILER / SUBJECT COMPANY / FILED BY entry of the header."""
    company_data: Optional[CompanyData] = None
    filing_values: Optional[FilingValues] = None
    business_address: Optional[Address] = None
    mail_address: Optional[Address] = None
    former_company: list[FormerCompany] = Field(default_factory=list)


# =============================================================================
# Document Envelope
# =============================================================================

class ConsistentDocumentFields(EdgarModel):
    """
    Fields every parsed filing carries.

    This is the join point between the generic parser, which only knows these
    fields, and the form-specific extractors, which extend it.
    """
    accession_number: Optional[str] = None
    acceptance_datetime: Optional[str] = None  # raw SEC string
    conformed_submission_type: Optional[str] = None
    public_document_count: Optional[str] = None
    filed_as_of_date: Optional[str] = None  # raw SEC string
    date_as_of_change: Optional[str] = None
    unix_timestamp: Optional[int] = None

    # Filled by the fallback pattern chains
    company_conformed_name: Optional[str] = None
    cik: Optional[str] = None
    ticker: Optional[str] = None


T = TypeVar("T", bound=ConsistentDocumentFields)


class BasicInfo(CamelModel):
    """Normalized header summary. Datetimes are epoch seconds."""
    accession_number: Optional[str] = None
    acceptance_datetime: int
    conformed_submission_type: Optional[str] = None
    public_document_count: Optional[str] = None
    filed_as_of_date: int
    date_as_of_change: Optional[str] = None
    unix_timestamp: int
    submission_type: Optional[str] = None
    url: str


class EstimatedImpact(CamelModel):
    """
    Rule-based market impact estimate.

    Scores are clamped to [0, 1] and rounded to 8 decimals on construction.
    Build a new instance (not model_copy) when adjusting a score so the
    validators run.
    """
    market_impact: MarketImpact = MarketImpact.NEUTRAL
    confidence: float = 0.5
    total_score: float = 0.5
    sentiment: float = 0.5

    @field_validator("confidence", "total_score", "sentiment", mode="before")
    @classmethod
    def clamp_score(cls, v: Any) -> float:
        return round(min(max(float(v), 0.0), 1.0), 8)


class ParsedDocument(CamelModel, Generic[T]):
    """Universal output envelope, parametric over the form payload."""
    basic: BasicInfo
    estimated_impact: EstimatedImpact
    parsed: T
    attachments: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize with camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=indent)


@dataclass
class UueFile:
    """A file recovered from a uuencoded block. Transient."""
    name: str
    data: bytes
