"""
Attachment extraction from <DOCUMENT> blocks.

Attachments are collected in memory, in document order:
1. uuencoded files (decoded to text)
2. <TEXT> bodies of the remaining documents

UUE decoding must run first: the names it recovers are excluded from step 2
so the same file is never returned twice.
"""

import logging
import re
from typing import Iterator, Optional

from ..config import AttachmentConfig
from .uue_codec import decode_uu_files

logger = logging.getLogger(__name__)

DOCUMENT_PATTERN = re.compile(
    r"<DOCUMENT>[\s\S]*?<FILENAME>([^<\n]+)[\s\S]*?<TEXT>([\s\S]*?)</TEXT>[\s\S]*?</DOCUMENT>",
    re.IGNORECASE,
)


def _extension_pattern(extensions: list[str]) -> re.Pattern:
    return re.compile(r"\.(" + "|".join(re.escape(e) for e in extensions) + r")$", re.IGNORECASE)


class AttachmentExtractor:
    """Collects attachment payloads from a raw submission."""

    def __init__(self, config: Optional[AttachmentConfig] = None):
        self.config = config or AttachmentConfig()
        self._image = _extension_pattern(self.config.image_extensions)
        self._binary = _extension_pattern(self.config.binary_extensions)
        self._primary = _extension_pattern(self.config.primary_extensions)

    def iter_documents(self, document_text: str) -> Iterator[tuple[str, str]]:
        """Yield (filename, body) for every <DOCUMENT> with a <TEXT> section."""
        for match in DOCUMENT_PATTERN.finditer(document_text):
            yield match.group(1).strip(), match.group(2).strip()

    def extract_text_attachments(
        self,
        document_text: str,
        uue_filenames: set[str],
    ) -> list[str]:
        """
        Extract <TEXT> bodies, skipping the primary .txt body, UUE-recovered
        files, images and binaries.
        """
        attachments = []

        for filename, content in self.iter_documents(document_text):
            logger.debug(f"Found document section: filename={filename}, contentLength={len(content)}")

            if self._image.search(filename):
                logger.debug(f"Skipped image file: {filename}")
                continue
            if self._binary.search(filename):
                logger.debug(f"Skipped binary file: {filename}")
                continue
            if not filename or not content:
                continue
            if self._primary.search(filename) or filename in uue_filenames:
                continue

            attachments.append(content)
            logger.debug(f"Extracted attachment: {filename}")

        return attachments

    def collect(
        self,
        document_text: str,
        public_document_count: Optional[str] = None,
        url: str = "",
    ) -> list[str]:
        """
        Collect all attachments of a submission.

        Args:
            document_text: Raw submission text
            public_document_count: PUBLIC DOCUMENT COUNT header value; "0" skips extraction
            url: Source URL, used in log messages only

        Returns:
            Attachment contents as strings, UUE files first
        """
        if public_document_count is not None and public_document_count.strip() == "0":
            return []

        attachments: list[str] = []

        uue_files = decode_uu_files(document_text)
        uue_filenames = set()
        if uue_files:
            logger.debug(f"Decoding UUE attachments: {url}")
            for uue_file in uue_files:
                attachments.append(uue_file.data.decode("utf-8", errors=self.config.decode_errors))
                uue_filenames.add(uue_file.name)
            logger.debug(f"UUE attachments in memory: {','.join(f.name for f in uue_files)}")

        attachments.extend(self.extract_text_attachments(document_text, uue_filenames))

        if attachments:
            logger.debug(f"Total attachments: {len(attachments)} for {url}")

        return attachments
