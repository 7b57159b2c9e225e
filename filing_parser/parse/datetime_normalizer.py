"""
Datetime normalization for SEC header timestamps.

EDGAR records ACCEPTANCE-DATETIME as YYYYMMDDHHMMSS and FILED AS OF DATE as
YYYYMMDD, both in US Eastern time. The source data carries no DST marker, so
every value is read at a fixed -04:00 offset.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Union

from .errors import FormatError

SEC_TIMEZONE = timezone(timedelta(hours=-4))

# Accepted input lengths and their strptime formats
DATETIME_FORMATS = {
    14: "%Y%m%d%H%M%S",
    8: "%Y%m%d",
}


def normalize_datetime(value: Union[int, str]) -> int:
    """
    Convert an SEC compact timestamp into epoch seconds.

    Args:
        value: "YYYYMMDDHHMMSS" or "YYYYMMDD" (str or int)

    Returns:
        Integer epoch seconds

    Raises:
        FormatError: if the value is not 8 or 14 characters long, or is not a
            valid calendar date/time
    """
    text = str(value) if value is not None else ""

    fmt = DATETIME_FORMATS.get(len(text))
    if fmt is None or not text.isdigit():
        raise FormatError(f"Unexpected datetime format: {text!r}", value)

    try:
        parsed = datetime.strptime(text, fmt)
    except ValueError as e:
        raise FormatError(f"Invalid datetime value: {text!r}", value) from e

    return math.floor(parsed.replace(tzinfo=SEC_TIMEZONE).timestamp())
