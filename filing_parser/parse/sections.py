"""
Section finder for narrative "Item" sections of periodic reports and
registration statements.

Each section is described by start patterns (the heading) and end patterns
(the next heading). The first start match whose content is long enough wins;
shorter hits are table-of-contents entries and are skipped.
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

from ..config import SectionConfig

logger = logging.getLogger(__name__)

PRIMARY_TEXT_PATTERN = re.compile(r"<DOCUMENT>[\s\S]*?<TEXT>([\s\S]*?)</TEXT>", re.IGNORECASE)

_ITEM = r"ITEM\s+"
_SEP = r"\.?\s*[-–—:]?\s*"

FORM_10K_SECTIONS = {
    "business_overview": {
        "start_patterns": [_ITEM + r"1" + _SEP + r"BUSINESS\b"],
        "end_patterns": [_ITEM + r"1A\b", _ITEM + r"2\b"],
    },
    "risk_factors": {
        "start_patterns": [_ITEM + r"1A" + _SEP + r"RISK\s+FACTORS"],
        "end_patterns": [_ITEM + r"1B\b", _ITEM + r"1C\b", _ITEM + r"2\b"],
    },
    "properties": {
        "start_patterns": [_ITEM + r"2" + _SEP + r"PROPERTIES"],
        "end_patterns": [_ITEM + r"3\b"],
    },
    "legal_proceedings": {
        "start_patterns": [_ITEM + r"3" + _SEP + r"LEGAL\s+PROCEEDINGS"],
        "end_patterns": [_ITEM + r"4\b"],
    },
    "mine_safety_disclosures": {
        "start_patterns": [_ITEM + r"4" + _SEP + r"MINE\s+SAFETY"],
        "end_patterns": [r"PART\s+II\b", _ITEM + r"5\b"],
    },
    "market_for_registrant_common_equity": {
        "start_patterns": [_ITEM + r"5" + _SEP + r"MARKET\s+FOR"],
        "end_patterns": [_ITEM + r"6\b", _ITEM + r"7\b"],
    },
    "management_discussion_and_analysis": {
        "start_patterns": [_ITEM + r"7" + _SEP + r"MANAGEMENT.S\s+DISCUSSION"],
        "end_patterns": [_ITEM + r"7A\b", _ITEM + r"8\b"],
    },
    "quantitative_and_qualitative_disclosures": {
        "start_patterns": [_ITEM + r"7A" + _SEP + r"QUANTITATIVE"],
        "end_patterns": [_ITEM + r"8\b"],
    },
    "supplementary_data": {
        "start_patterns": [_ITEM + r"8" + _SEP + r"FINANCIAL\s+STATEMENTS"],
        "end_patterns": [_ITEM + r"9\b"],
    },
    "directors_and_executive_officers": {
        "start_patterns": [_ITEM + r"10" + _SEP + r"DIRECTORS"],
        "end_patterns": [_ITEM + r"11\b"],
    },
    "executive_compensation": {
        "start_patterns": [_ITEM + r"11" + _SEP + r"EXECUTIVE\s+COMPENSATION"],
        "end_patterns": [_ITEM + r"12\b"],
    },
}

FORM_10Q_SECTIONS = {
    "financial_statements": {
        "start_patterns": [_ITEM + r"1" + _SEP + r"(?:CONDENSED\s+)?(?:CONSOLIDATED\s+)?FINANCIAL\s+STATEMENTS"],
        "end_patterns": [_ITEM + r"2\b"],
    },
    "management_discussion_and_analysis": {
        "start_patterns": [_ITEM + r"2" + _SEP + r"MANAGEMENT.S\s+DISCUSSION"],
        "end_patterns": [_ITEM + r"3\b"],
    },
    "quantitative_and_qualitative_disclosures": {
        "start_patterns": [_ITEM + r"3" + _SEP + r"QUANTITATIVE"],
        "end_patterns": [_ITEM + r"4\b"],
    },
    "controls_and_procedures": {
        "start_patterns": [_ITEM + r"4" + _SEP + r"CONTROLS\s+AND\s+PROCEDURES"],
        "end_patterns": [r"PART\s+II\b", _ITEM + r"1\b"],
    },
    "legal_proceedings": {
        "start_patterns": [_ITEM + r"1" + _SEP + r"LEGAL\s+PROCEEDINGS"],
        "end_patterns": [_ITEM + r"1A\b", _ITEM + r"2\b"],
    },
    "risk_factors": {
        "start_patterns": [_ITEM + r"1A" + _SEP + r"RISK\s+FACTORS"],
        "end_patterns": [_ITEM + r"2\b"],
    },
    "issuer_purchases_of_equity_securities": {
        "start_patterns": [_ITEM + r"2" + _SEP + r"UNREGISTERED\s+SALES"],
        "end_patterns": [_ITEM + r"3\b", _ITEM + r"5\b", _ITEM + r"6\b"],
    },
}

FORM_S1_SECTIONS = {
    "business_overview": {
        "start_patterns": [r"PROSPECTUS\s+SUMMARY", r"^\s*BUSINESS\s*$"],
        "end_patterns": [r"^\s*RISK\s+FACTORS\s*$", r"THE\s+OFFERING"],
    },
    "risk_factors": {
        "start_patterns": [r"^\s*RISK\s+FACTORS\s*$"],
        "end_patterns": [r"SPECIAL\s+NOTE\s+REGARDING", r"CAUTIONARY\s+NOTE", r"^\s*USE\s+OF\s+PROCEEDS\s*$"],
    },
    "use_of_proceeds": {
        "start_patterns": [r"^\s*USE\s+OF\s+PROCEEDS\s*$"],
        "end_patterns": [r"DIVIDEND\s+POLICY", r"^\s*CAPITALIZATION\s*$", r"^\s*DILUTION\s*$"],
    },
    "dividend_policy": {
        "start_patterns": [r"DIVIDEND\s+POLICY"],
        "end_patterns": [r"^\s*CAPITALIZATION\s*$", r"^\s*DILUTION\s*$"],
    },
    "management_discussion": {
        "start_patterns": [r"MANAGEMENT.S\s+DISCUSSION\s+AND\s+ANALYSIS"],
        "end_patterns": [r"^\s*BUSINESS\s*$", r"^\s*MANAGEMENT\s*$"],
    },
}

FORM_S4_SECTIONS = {
    "summary_of_transaction": {
        "start_patterns": [r"^\s*SUMMARY\s*$", r"QUESTIONS\s+AND\s+ANSWERS"],
        "end_patterns": [r"^\s*RISK\s+FACTORS\s*$"],
    },
    "risk_factors": {
        "start_patterns": [r"^\s*RISK\s+FACTORS\s*$"],
        "end_patterns": [r"CAUTIONARY\s+STATEMENT", r"THE\s+SPECIAL\s+MEETING", r"THE\s+MERGER\b"],
    },
    "background_of_transaction": {
        "start_patterns": [r"BACKGROUND\s+OF\s+THE\s+(?:MERGER|TRANSACTION|BUSINESS\s+COMBINATION)"],
        "end_patterns": [r"REASONS\s+FOR\s+THE", r"RECOMMENDATION\s+OF"],
    },
    "reasons_for_transaction": {
        "start_patterns": [r"REASONS\s+FOR\s+THE\s+(?:MERGER|TRANSACTION|BUSINESS\s+COMBINATION)"],
        "end_patterns": [r"OPINION\s+OF", r"RECOMMENDATION\s+OF", r"INTERESTS\s+OF"],
    },
    "recommendation_of_board": {
        "start_patterns": [r"RECOMMENDATION\s+OF\s+THE\s+[\w\s]{0,40}?BOARD"],
        "end_patterns": [r"OPINION\s+OF", r"INTERESTS\s+OF", r"REGULATORY\s+APPROVALS"],
    },
    "fairness_opinion": {
        "start_patterns": [r"OPINION\s+OF\s+[\w\s.,&]{0,80}?FINANCIAL\s+ADVISOR"],
        "end_patterns": [r"INTERESTS\s+OF", r"REGULATORY\s+APPROVALS", r"CERTAIN\s+.{0,40}PROJECTIONS"],
    },
    "regulatory_approvals": {
        "start_patterns": [r"REGULATORY\s+APPROVALS\s+REQUIRED", r"REGULATORY\s+APPROVALS"],
        "end_patterns": [r"ACCOUNTING\s+TREATMENT", r"MATERIAL\s+U\.S\.\s+FEDERAL", r"APPRAISAL\s+RIGHTS"],
    },
}


def primary_document_text(document_text: str) -> str:
    """Body of the first <DOCUMENT> (the form itself), or the whole text."""
    match = PRIMARY_TEXT_PATTERN.search(document_text)
    return match.group(1) if match else document_text


def html_to_text(content: str) -> str:
    """Strip markup, keeping block boundaries as line breaks."""
    if "<" not in content:
        return content
    soup = BeautifulSoup(content, "html.parser")
    text = soup.get_text(separator="\n")
    return re.sub(r"\n\s*\n+", "\n\n", text)


def split_paragraphs(text: Optional[str], min_chars: int = 40) -> list[str]:
    """Split section text into paragraphs, dropping short fragments."""
    if not text:
        return []
    paragraphs = [" ".join(p.split()) for p in re.split(r"\n\s*\n", text)]
    return [p for p in paragraphs if len(p) >= min_chars]


class SectionFinder:
    """
    Finds narrative sections in a filing's primary document.
    """

    def __init__(self, document_text: str, config: Optional[SectionConfig] = None):
        """
        Args:
            document_text: Raw submission text (the primary document is used)
            config: Section size limits
        """
        self.config = config or SectionConfig()
        self.full_text = html_to_text(primary_document_text(document_text))

    def find_section(self, definition: dict) -> Optional[str]:
        """
        Extract one section.

        Args:
            definition: {"start_patterns": [...], "end_patterns": [...]}

        Returns:
            Section text (heading included), or None if not found
        """
        flags = re.IGNORECASE | re.MULTILINE
        for start_pattern in definition["start_patterns"]:
            for start in re.finditer(start_pattern, self.full_text, flags):
                end_pos = min(start.start() + self.config.max_chars, len(self.full_text))
                for end_pattern in definition["end_patterns"]:
                    end = re.compile(end_pattern, flags).search(self.full_text, start.end(), end_pos)
                    if end:
                        end_pos = end.start()
                        break
                section = self.full_text[start.start():end_pos].strip()
                if len(section) >= self.config.min_chars:
                    return section
        return None

    def find_sections(self, table: dict[str, dict]) -> dict[str, Optional[str]]:
        """Extract every section of a table. Missing sections map to None."""
        if not self.config.enabled:
            return {name: None for name in table}

        found = {name: self.find_section(definition) for name, definition in table.items()}
        hits = sum(1 for v in found.values() if v)
        logger.debug(f"Section finder matched {hits}/{len(table)} sections")
        return found
