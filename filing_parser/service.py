"""
Filing service: fetch a submission from the EDGAR archive and parse it.

Paths are "<cik>/<accession>.txt" (a ".json" suffix is accepted and mapped to
the full-text submission). The SEC requires a descriptive User-Agent with
contact details; it is read from the config or the SEC_USER_AGENT variable.
"""

import logging
import os
from typing import Any, Optional

import requests
from dotenv import load_dotenv

from .config import ParserConfig
from .forms.factory import detect_form_type, parse_filing

logger = logging.getLogger(__name__)

USER_AGENT_ENV_VAR = "SEC_USER_AGENT"
DEFAULT_USER_AGENT = "filing-parser research@example.com"


class FilingService:
    """
    Fetches and parses EDGAR full-text submissions.

    Example:
        service = FilingService()
        result = service.parse_sec_filing("320193/0000320193-25-000008.txt")
        print(result["filingType"], result["parsedFiling"]["basic"]["url"])
    """

    def __init__(self, config: Optional[ParserConfig] = None, session: Optional[requests.Session] = None):
        """
        Args:
            config: Parser configuration (defaults if None)
            session: Optional requests session (one per service otherwise)
        """
        self.config = config or ParserConfig()
        self.session = session or requests.Session()

        load_dotenv()
        self.user_agent = (
            self.config.edgar.user_agent
            or os.environ.get(USER_AGENT_ENV_VAR)
            or DEFAULT_USER_AGENT
        )
        if self.user_agent == DEFAULT_USER_AGENT:
            logger.warning(f"{USER_AGENT_ENV_VAR} not set; SEC may throttle the default User-Agent")

    def get_sec_headers(self) -> dict[str, str]:
        """Return headers required by SEC EDGAR."""
        return {
            "User-Agent": self.user_agent,
            "Accept-Encoding": "gzip, deflate",
            "Host": "www.sec.gov",
        }

    def build_url(self, filing_path: str) -> str:
        """'320193/0000320193-25-000008.json' -> archive URL of the .txt submission."""
        path = filing_path.strip().lstrip("/")
        if path.endswith(".json"):
            path = path[: -len(".json")] + ".txt"
        return f"{self.config.edgar.base_url.rstrip('/')}/{path}"

    def fetch(self, url: str) -> str:
        """
        Download a submission.

        Raises:
            requests.HTTPError: on a non-2xx response
        """
        logger.info(f"Fetching {url}")
        response = self.session.get(
            url,
            headers=self.get_sec_headers(),
            timeout=self.config.edgar.timeout_seconds,
        )
        try:
            response.raise_for_status()
        except requests.HTTPError:
            logger.error(f"Failed to fetch filing: {response.status_code} {response.reason} ({url})")
            raise
        return response.text

    def parse_sec_filing(self, filing_path: str, form_type_code: Optional[str] = None) -> dict[str, Any]:
        """
        Fetch and parse one filing.

        Args:
            filing_path: "<cik>/<accession>.txt"
            form_type_code: Form type; detected from the header when None

        Returns:
            Dict with parsedFiling, rawContentLength, filingType, cik, secUrl
        """
        cik = filing_path.strip().lstrip("/").split("/")[0]
        url = self.build_url(filing_path)

        text = self.fetch(url)
        filing_type = form_type_code or detect_form_type(text)
        parsed = parse_filing(text, url, filing_type, config=self.config)

        return {
            "parsedFiling": parsed.to_dict(),
            "rawContentLength": len(text),
            "filingType": filing_type,
            "cik": cik,
            "secUrl": url,
        }
