"""
Generic EDGAR submission parsing package.

This package provides the form-independent building blocks: SGML header
parsing, datetime normalization, UUE decoding, attachment extraction,
XML island reading, narrative section finding and the impact heuristic.
"""

from .errors import FormatError

from .models import (
    # Enums
    MarketImpact,
    # Header sub-records
    CompanyData,
    FilingValues,
    Address,
    FormerCompany,
    Filer,
    # Envelope
    ConsistentDocumentFields,
    BasicInfo,
    EstimatedImpact,
    ParsedDocument,
    UueFile,
)

from .datetime_normalizer import normalize_datetime
from .header_parser import parse_header, to_camel_key
from .uue_codec import UueDecodeError, decode_uu_files

from .attachments import AttachmentExtractor

from .patterns import (
    extract_cik,
    extract_company_name,
    extract_ticker,
    looks_like_person_name,
)

from .xml_islands import (
    find_xml_islands,
    parse_first_island,
    parse_xml_island,
)

from .sections import SectionFinder

from .impact import (
    adjust_impact,
    assess_baseline,
    upgrade_neutral,
)

from .generic import GenericParsingService

__all__ = [
    # Errors
    "FormatError",
    "UueDecodeError",
    # Enums
    "MarketImpact",
    # Models
    "CompanyData",
    "FilingValues",
    "Address",
    "FormerCompany",
    "Filer",
    "ConsistentDocumentFields",
    "BasicInfo",
    "EstimatedImpact",
    "ParsedDocument",
    "UueFile",
    # Leaf parsers
    "normalize_datetime",
    "parse_header",
    "to_camel_key",
    "decode_uu_files",
    "AttachmentExtractor",
    # Pattern chains
    "extract_cik",
    "extract_company_name",
    "extract_ticker",
    "looks_like_person_name",
    # XML
    "find_xml_islands",
    "parse_first_island",
    "parse_xml_island",
    # Sections
    "SectionFinder",
    # Impact
    "adjust_impact",
    "assess_baseline",
    "upgrade_neutral",
    # Service
    "GenericParsingService",
]
