"""
UUE (uuencoding) codec for legacy EDGAR attachments.

Older submissions embed binary files (PDFs, spreadsheets, images) as

    begin 644 exhibit.pdf
    M)5!$1BTQ+C0*)>+CS],*...
    `
    end

Decoding is best-effort: a corrupted block is logged and skipped so it never
fails the surrounding document parse.
"""

import binascii
import logging
import re

from .models import UueFile

logger = logging.getLogger(__name__)

BEGIN_PATTERN = re.compile(r"^begin\s+([0-7]{3,4})\s+(\S.*?)\s*$")
END_PATTERN = re.compile(r"^end\s*$")


class UueDecodeError(ValueError):
    """A uuencoded block could not be decoded."""


def decode_uu_line(line: str) -> bytes:
    """
    Decode one uuencoded line.

    The first character encodes the byte count (offset by 0x20, backtick
    meaning zero); the rest are 6-bit groups offset by 0x20.
    """
    if not line:
        return b""

    length_char = ord(line[0])
    if length_char < 0x20 or length_char > 0x60:
        raise UueDecodeError(f"Bad length byte {line[0]!r}")

    try:
        return binascii.a2b_uu(line)
    except binascii.Error:
        # Some encoders append padding after the last group; decode only the
        # characters the length byte accounts for.
        nbytes = (((length_char - 0x20) & 0x3F) * 4 + 5) // 3
        try:
            return binascii.a2b_uu(line[:nbytes])
        except binascii.Error as e:
            raise UueDecodeError(str(e)) from e


def decode_uu_lines(lines: list[str]) -> bytes:
    """Decode the body lines of one block."""
    chunks = []
    for line in lines:
        chunks.append(decode_uu_line(line))
    return b"".join(chunks)


def decode_uu_files(document_text: str) -> list[UueFile]:
    """
    Find and decode every uuencoded block in the text.

    Args:
        document_text: Raw submission text

    Returns:
        Decoded files in document order. Blocks with a bad length byte,
        illegal characters, or no closing "end" line are skipped.
    """
    files: list[UueFile] = []
    lines = document_text.splitlines()
    i = 0

    while i < len(lines):
        begin = BEGIN_PATTERN.match(lines[i])
        if not begin:
            i += 1
            continue

        name = begin.group(2)
        body: list[str] = []
        j = i + 1
        ended = False
        while j < len(lines):
            if END_PATTERN.match(lines[j]):
                ended = True
                break
            if BEGIN_PATTERN.match(lines[j]):
                break
            body.append(lines[j])
            j += 1

        if not ended:
            logger.warning(f"Skipping uuencoded block {name!r}: no closing 'end' line")
            i = j
            continue

        try:
            data = decode_uu_lines(body)
        except UueDecodeError as e:
            logger.warning(f"Skipping uuencoded block {name!r}: {e}")
        else:
            files.append(UueFile(name=name, data=data))
            logger.debug(f"Decoded uuencoded file {name} ({len(data):,} bytes)")

        i = j + 1

    return files
