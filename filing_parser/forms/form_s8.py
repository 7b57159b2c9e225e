"""
Form S-8 (employee benefit plan registration) extractor.
"""

import re

from ..parse.sections import html_to_text, primary_document_text
from .base import FormExtractor
from .registration import extract_offering_details
from .schemas import FormS8Data, PlanInformation

PLAN_NAME_PATTERN = re.compile(
    r"((?:[A-Z][\w&.,'-]*\s+){0,8}?(?:\d{4}\s+)?(?:Amended\s+and\s+Restated\s+)?"
    r"(?:Equity\s+Incentive|Stock\s+Incentive|Omnibus\s+(?:Equity\s+)?Incentive|Employee\s+Stock\s+Purchase|"
    r"Stock\s+Option|Incentive\s+Award|Incentive\s+Compensation|Long[- ]Term\s+Incentive|Stock)\s+Plan)"
)


def extract_plan_names(document_text: str) -> list[str]:
    """Benefit plan names in order of first mention."""
    text = html_to_text(primary_document_text(document_text))
    names: list[str] = []
    for match in PLAN_NAME_PATTERN.finditer(text):
        name = " ".join(match.group(1).split())
        if name.lower().startswith("the "):
            name = name[4:]
        if name not in names:
            names.append(name)
    return names


class FormS8Extractor(FormExtractor[FormS8Data]):
    """Form S-8: fee table and plan names. Impact stays at baseline."""

    payload_type = FormS8Data

    def augment(self, document_text: str, payload: FormS8Data) -> None:
        payload.registration_statement = extract_offering_details(document_text)
        names = extract_plan_names(document_text)
        if names:
            payload.plan_information = PlanInformation(plan_name=names[0], plan_names=names)
