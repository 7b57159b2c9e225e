"""
Reader for XML fragments embedded in EDGAR submissions.

Forms 3/4 carry an <ownershipDocument>, 13F-HR an <edgarSubmission> cover page
and an <informationTable> of <infoTable> rows. These fragments are located by
regex in the raw text, parsed with BeautifulSoup's XML builder, and turned into
plain dicts with known numeric and boolean keys coerced.
"""

import logging
import re
from typing import Any, Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

# Keys whose leaf values are numbers
NUMERIC_KEYS = {
    "value",
    "sshPrnamt",
    "Sole",
    "Shared",
    "None",
    "tableEntryTotal",
    "tableValueTotal",
    "otherIncludedManagersCount",
    "transactionShares",
    "transactionPricePerShare",
    "transactionTotalValue",
    "sharesOwnedFollowingTransaction",
    "valueOwnedFollowingTransaction",
    "conversionOrExercisePrice",
    "underlyingSecurityShares",
    "underlyingSecurityValue",
}

# Keys whose leaf values are flags ("1"/"0"/"true"/"false")
BOOLEAN_KEYS = {
    "isDirector",
    "isOfficer",
    "isTenPercentOwner",
    "isOther",
    "notSubjectToSection16",
    "noSecuritiesOwned",
    "aff10b5One",
    "isAmendment",
}

# Repeating elements, always returned as lists
LIST_KEYS = {
    "infoTable",
    "reportingOwner",
    "nonDerivativeTransaction",
    "nonDerivativeHolding",
    "derivativeTransaction",
    "derivativeHolding",
    "footnote",
    "otherManager2",
}

# Ownership documents wrap values as <x><value>..</value><footnoteId/></x>
VALUE_WRAPPER_CHILDREN = {"value", "footnoteId"}

PREFIX_PATTERN = re.compile(r"<(/?)[A-Za-z_][\w.\-]*:([A-Za-z_])")


def coerce_value(key: str, text: str) -> Any:
    """Coerce a leaf value according to its key."""
    if key in NUMERIC_KEYS:
        cleaned = text.replace(",", "").replace("$", "").strip()
        try:
            number = float(cleaned)
        except ValueError:
            return text
        if "." not in cleaned and "e" not in cleaned.lower():
            return int(number)
        return number
    if key in BOOLEAN_KEYS:
        lowered = text.strip().lower()
        if lowered in ("1", "true", "y", "yes"):
            return True
        if lowered in ("0", "false", "n", "no"):
            return False
    return text


def element_to_dict(tag: Tag) -> Any:
    """
    Convert an element to a dict (or leaf value).

    Value wrappers are collapsed, so
    <transactionShares><value>100</value></transactionShares> becomes 100.
    """
    children = [c for c in tag.children if isinstance(c, Tag)]

    if not children:
        text = tag.get_text(strip=True)
        return coerce_value(tag.name, text) if text else None

    child_names = {c.name for c in children}
    if child_names <= VALUE_WRAPPER_CHILDREN:
        value_child = tag.find("value", recursive=False)
        if value_child is None:
            return None  # footnote reference only
        text = value_child.get_text(strip=True)
        return coerce_value(tag.name, text) if text else None

    result: dict[str, Any] = {}
    for child in children:
        value = element_to_dict(child)
        key = child.name
        if key in LIST_KEYS:
            result.setdefault(key, []).append(value)
        elif key in result:
            existing = result[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                result[key] = [existing, value]
        else:
            result[key] = value
    return result


def strip_namespace_prefixes(xml_text: str) -> str:
    """<ns1:infoTable> -> <infoTable>"""
    return PREFIX_PATTERN.sub(r"<\1\2", xml_text)


def find_xml_islands(document_text: str, tag_name: str) -> list[str]:
    """Return every <tag_name>...</tag_name> fragment (namespace prefix optional)."""
    pattern = re.compile(
        rf"<(?:[\w.\-]+:)?{tag_name}\b[^>]*>[\s\S]*?</(?:[\w.\-]+:)?{tag_name}>"
    )
    return [m.group(0) for m in pattern.finditer(document_text)]


def parse_xml_island(xml_text: str, root_tag: str) -> Optional[dict[str, Any]]:
    """
    Parse one XML fragment into a dict.

    Args:
        xml_text: XML fragment (as found by find_xml_islands)
        root_tag: Name of the element to convert

    Returns:
        Dict for the root element, or None if it cannot be found
    """
    soup = BeautifulSoup(strip_namespace_prefixes(xml_text), "lxml-xml")
    root = soup.find(root_tag)
    if root is None:
        logger.debug(f"XML island has no <{root_tag}> element")
        return None
    converted = element_to_dict(root)
    return converted if isinstance(converted, dict) else None


def parse_first_island(document_text: str, root_tag: str) -> Optional[dict[str, Any]]:
    """Parse the first <root_tag> fragment in the text that converts cleanly."""
    for fragment in find_xml_islands(document_text, root_tag):
        try:
            parsed = parse_xml_island(fragment, root_tag)
        except Exception as e:
            logger.warning(f"Failed to parse <{root_tag}> XML: {e}")
            continue
        if parsed is not None:
            return parsed
    return None
