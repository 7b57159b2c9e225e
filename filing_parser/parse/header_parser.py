"""
SGML header parser for EDGAR submissions.

Turns the header block of a full-text submission

    <SEC-HEADER>0000320193-25-000008.hdr.sgml : 20250131
    <ACCEPTANCE-DATETIME>20250130163208
    ACCESSION NUMBER:		0000320193-25-000008
    ...
    FILER:
    	COMPANY DATA:
    		COMPANY CONFORMED NAME:			Apple Inc.

into a nested dict keyed by lower-camel-cased tag names:

    {"acceptanceDatetime": "20250130163208",
     "accessionNumber": "0000320193-25-000008",
     "filer": [{"companyData": {"companyConformedName": "Apple Inc."}}]}
"""

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# Header keys that may legitimately repeat, always returned as lists
LIST_KEYS = {
    "filer",
    "itemInformation",
    "reportingOwner",
    "formerCompany",
    "subjectCompany",
    "filedBy",
    "groupMembers",
}

HEADER_END_PATTERN = re.compile(r"</SEC-HEADER>|<DOCUMENT>", re.IGNORECASE)
ANGLE_TAG_PATTERN = re.compile(r"^<([A-Z0-9][A-Z0-9\-]*)>\s*(.*)$", re.IGNORECASE)
KEY_VALUE_PATTERN = re.compile(r"^([A-Z0-9][A-Z0-9 \-/&.]*?):\s*(.*)$", re.IGNORECASE)


def to_camel_key(tag: str) -> str:
    """
    Lower-camel-case an SEC header tag.

    "CONFORMED SUBMISSION TYPE" -> "conformedSubmissionType"
    "ACCEPTANCE-DATETIME" -> "acceptanceDatetime"
    "STREET 1" -> "street1"
    """
    words = [w for w in re.split(r"[^A-Za-z0-9]+", tag) if w]
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in rest)


def _indent_of(line: str) -> int:
    """Leading whitespace width, with tabs expanded to 8-column stops."""
    expanded = line.expandtabs(8)
    return len(expanded) - len(expanded.lstrip())


def _add_value(target: dict, key: str, value: Any) -> None:
    """Store value under key, accumulating repeats into a list."""
    if key in LIST_KEYS:
        target.setdefault(key, []).append(value)
    elif key in target:
        existing = target[key]
        if isinstance(existing, list):
            existing.append(value)
        else:
            target[key] = [existing, value]
    else:
        target[key] = value


def _prune_empty(node: dict) -> dict:
    """Drop sections that opened with no value and never received children."""
    pruned: dict[str, Any] = {}
    for key, value in node.items():
        if isinstance(value, dict):
            child = _prune_empty(value)
            if child:
                pruned[key] = child
        elif isinstance(value, list):
            items = [_prune_empty(v) if isinstance(v, dict) else v for v in value]
            pruned[key] = [v for v in items if v not in ({}, "")]
        else:
            pruned[key] = value
    return pruned


def extract_header_text(document_text: str) -> str:
    """Return the header portion of a submission (everything before the first document)."""
    match = HEADER_END_PATTERN.search(document_text)
    return document_text[: match.start()] if match else document_text


def parse_header(document_text: str) -> dict[str, Any]:
    """
    Parse the SGML header of an EDGAR submission into a nested dict.

    Unrecognised lines are ignored; this function never raises on malformed
    input, it just returns whatever it could read.

    Args:
        document_text: Full raw submission text (or just its header)

    Returns:
        Dict of camelCase keys to strings, nested dicts, or lists of either
    """
    header_text = extract_header_text(document_text)
    root: dict[str, Any] = {}
    # Stack of (indent, container) pairs for nested sections
    stack: list[tuple[int, dict]] = [(-1, root)]

    for raw_line in header_text.splitlines():
        if not raw_line.strip():
            continue
        line = raw_line.strip()

        if line.startswith("</"):
            continue

        angle = ANGLE_TAG_PATTERN.match(line)
        if angle:
            key = to_camel_key(angle.group(1))
            if key:
                _add_value(root, key, angle.group(2).strip())
            stack = [(-1, root)]
            continue

        kv = KEY_VALUE_PATTERN.match(line)
        if not kv:
            logger.debug(f"Skipping unrecognised header line: {line[:80]!r}")
            continue

        key = to_camel_key(kv.group(1))
        value = kv.group(2).strip()
        indent = _indent_of(raw_line)

        while len(stack) > 1 and stack[-1][0] >= indent:
            stack.pop()
        parent = stack[-1][1]

        if value:
            _add_value(parent, key, value)
        else:
            section: dict[str, Any] = {}
            _add_value(parent, key, section)
            stack.append((indent, section))

    return _prune_empty(root)
