"""
Form factory: maps an SEC form type code to its extractor.

Codes without a dedicated extractor (including unknown and missing codes) are
handled by the GenericParsingService. Selection never raises.
"""

import logging
import re
from enum import Enum
from typing import Optional, Union

from ..config import ParserConfig
from ..parse.generic import GenericParsingService
from ..parse.models import ParsedDocument
from .base import FormExtractor
from .form_10k import Form10KExtractor
from .form_10q import Form10QExtractor
from .form_13f import Form13FExtractor
from .form_3 import Form3Extractor
from .form_4 import Form4Extractor
from .form_8k import Form8KExtractor
from .form_s1 import FormS1Extractor
from .form_s4 import FormS4Extractor
from .form_s8 import FormS8Extractor
from .schedule_13d import Schedule13DExtractor
from .schedule_13g import Schedule13GExtractor

logger = logging.getLogger(__name__)

SUBMISSION_TYPE_PATTERN = re.compile(r"CONFORMED SUBMISSION TYPE:[ \t]*([^\n\r]+)", re.IGNORECASE)


class FormType(Enum):
    """Form type codes with a dedicated extractor."""
    FORM_8K = "8-K"
    FORM_4 = "4"
    FORM_4A = "4/A"
    FORM_13F_HR = "13F-HR"
    FORM_S8 = "S-8"
    FORM_S1 = "S-1"
    FORM_S1A = "S-1/A"
    FORM_10K = "10-K"
    FORM_10Q = "10-Q"
    FORM_S4 = "S-4"
    SCHEDULE_13D = "13D"
    SCHEDULE_13DA = "13D/A"
    FORM_3 = "3"
    SCHEDULE_13G = "13G"
    SCHEDULE_13GA = "13G/A"

    @property
    def extractor_class(self) -> type[FormExtractor]:
        return EXTRACTORS[self]


EXTRACTORS: dict[FormType, type[FormExtractor]] = {
    FormType.FORM_8K: Form8KExtractor,
    FormType.FORM_4: Form4Extractor,
    FormType.FORM_4A: Form4Extractor,
    FormType.FORM_13F_HR: Form13FExtractor,
    FormType.FORM_S8: FormS8Extractor,
    FormType.FORM_S1: FormS1Extractor,
    FormType.FORM_S1A: FormS1Extractor,
    FormType.FORM_10K: Form10KExtractor,
    FormType.FORM_10Q: Form10QExtractor,
    FormType.FORM_S4: FormS4Extractor,
    FormType.SCHEDULE_13D: Schedule13DExtractor,
    FormType.SCHEDULE_13DA: Schedule13DExtractor,
    FormType.FORM_3: Form3Extractor,
    FormType.SCHEDULE_13G: Schedule13GExtractor,
    FormType.SCHEDULE_13GA: Schedule13GExtractor,
}

# Known codes deliberately handled by the generic service
GENERIC_FORM_CODES = {"144", "144/A", "N-23C3A", "SC TO-I", "D", "497", "424B2"}

# Header spellings of schedule codes
FORM_CODE_ALIASES = {
    "SC 13D": "13D",
    "SC 13D/A": "13D/A",
    "SC 13G": "13G",
    "SC 13G/A": "13G/A",
    "SCHEDULE 13D": "13D",
    "SCHEDULE 13D/A": "13D/A",
    "SCHEDULE 13G": "13G",
    "SCHEDULE 13G/A": "13G/A",
}

Extractor = Union[FormExtractor, GenericParsingService]


def normalize_form_code(form_type_code: Optional[str]) -> Optional[str]:
    """Trim, upper-case and resolve schedule aliases ("SC 13D" -> "13D")."""
    if not form_type_code:
        return None
    code = " ".join(form_type_code.split()).upper()
    return FORM_CODE_ALIASES.get(code, code)


def detect_form_type(document_text: str) -> Optional[str]:
    """CONFORMED SUBMISSION TYPE from the header, if present."""
    match = SUBMISSION_TYPE_PATTERN.search(document_text)
    return match.group(1).strip() if match else None


def select_extractor(
    form_type_code: Optional[str],
    config: Optional[ParserConfig] = None,
) -> Extractor:
    """
    Select the extractor for a form type code.

    Args:
        form_type_code: SEC form type ("8-K", "4/A", "SC 13D", ...); may be None
        config: Parser configuration passed to the extractor

    Returns:
        Form-specific extractor, or a GenericParsingService fallback
    """
    code = normalize_form_code(form_type_code)

    try:
        form_type = FormType(code)
    except ValueError:
        if code in GENERIC_FORM_CODES:
            logger.debug(f"Form type {code} is parsed generically")
        else:
            logger.debug(f"No extractor for form type {form_type_code!r}, using generic parser")
        return GenericParsingService(config=config)

    return form_type.extractor_class(config)


def parse_filing(
    document_text: str,
    url: str,
    form_type_code: Optional[str] = None,
    config: Optional[ParserConfig] = None,
) -> ParsedDocument:
    """
    Parse a raw EDGAR submission with the right extractor.

    Args:
        document_text: Full raw submission text
        url: Source URL, copied into basic.url
        form_type_code: Form type; detected from the header when None
        config: Parser configuration (defaults if None)

    Returns:
        ParsedDocument for the form's payload type

    Raises:
        FormatError: if the header datetimes cannot be interpreted
    """
    code = form_type_code or detect_form_type(document_text)
    extractor = select_extractor(code, config)
    logger.info(f"Parsing {url} as {code or 'unknown form'} with {type(extractor).__name__}")
    return extractor.parse(document_text, url)
