"""
SEC EDGAR filing parser.

Converts raw full-text EDGAR submissions (SGML header, <DOCUMENT> blocks,
embedded XML, uuencoded attachments) into form-aware JSON documents.
"""

from .config import ParserConfig, load_config
from .forms.factory import parse_filing, select_extractor
from .parse.errors import FormatError
from .parse.generic import GenericParsingService
from .parse.models import ParsedDocument
from .service import FilingService

__all__ = [
    "ParserConfig",
    "load_config",
    "parse_filing",
    "select_extractor",
    "FormatError",
    "GenericParsingService",
    "ParsedDocument",
    "FilingService",
]
