"""
Form-specific extraction package.

Each extractor wraps the generic parsing service for one family of SEC forms
and adds its own XML / text parsing and impact refinement.
"""

from .schemas import (
    Form8KData,
    Form4Data,
    Form3Data,
    Form10KData,
    Form10QData,
    FormS1Data,
    FormS4Data,
    FormS8Data,
    Form13FFiling,
    Schedule13DData,
    Schedule13GData,
    InfoTableEntry,
    OfferingDetails,
    OwnershipDocument,
    SecuritiesOwned,
)

from .base import FormExtractor
from .form_8k import Form8KExtractor
from .form_4 import Form4Extractor
from .form_3 import Form3Extractor
from .form_10k import Form10KExtractor
from .form_10q import Form10QExtractor
from .form_s1 import FormS1Extractor
from .form_s4 import FormS4Extractor
from .form_s8 import FormS8Extractor
from .form_13f import Form13FExtractor
from .schedule_13d import Schedule13DExtractor
from .schedule_13g import Schedule13GExtractor

from .factory import (
    FormType,
    GENERIC_FORM_CODES,
    detect_form_type,
    normalize_form_code,
    parse_filing,
    select_extractor,
)

__all__ = [
    # Payloads
    "Form8KData",
    "Form4Data",
    "Form3Data",
    "Form10KData",
    "Form10QData",
    "FormS1Data",
    "FormS4Data",
    "FormS8Data",
    "Form13FFiling",
    "Schedule13DData",
    "Schedule13GData",
    "InfoTableEntry",
    "OfferingDetails",
    "OwnershipDocument",
    "SecuritiesOwned",
    # Extractors
    "FormExtractor",
    "Form8KExtractor",
    "Form4Extractor",
    "Form3Extractor",
    "Form10KExtractor",
    "Form10QExtractor",
    "FormS1Extractor",
    "FormS4Extractor",
    "FormS8Extractor",
    "Form13FExtractor",
    "Schedule13DExtractor",
    "Schedule13GExtractor",
    # Factory
    "FormType",
    "GENERIC_FORM_CODES",
    "detect_form_type",
    "normalize_form_code",
    "parse_filing",
    "select_extractor",
]
