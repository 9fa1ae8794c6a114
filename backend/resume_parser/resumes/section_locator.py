"""
Header-synonym section locator
"""
import re
from dataclasses import dataclass
from typing import Sequence

import structlog

logger = structlog.get_logger()

EXPERIENCE_HEADERS = (
    "experience",
    "work experience",
    "employment",
    "work history",
    "professional experience",
)

NEXT_SECTION_HEADERS = ("education", "skills", "projects", "awards", "certifications")


@dataclass(frozen=True)
class SectionSpan:
    """
    Character offsets of one section inside the raw text.

    ``start == -1`` means the section was not found and ``end`` carries no meaning.
    """
    start: int
    end: int

    @property
    def found(self) -> bool:
        return self.start != -1

    def slice(self, text: str) -> str:
        if not self.found:
            return ""
        return text[self.start:self.end]


NOT_FOUND = SectionSpan(start=-1, end=-1)


def _search(header: str, text: str, pos: int = 0) -> int:
    match = re.compile(re.escape(header), re.IGNORECASE).search(text, pos)
    return match.start() if match else -1


def find_section(
    text: str,
    headers: Sequence[str] = EXPERIENCE_HEADERS,
    end_headers: Sequence[str] = NEXT_SECTION_HEADERS,
) -> SectionSpan:
    """
    Locate a section by the first header synonym present in the text.

    Headers are tried in order and the first one found wins, wherever it
    occurs. The section runs until the nearest following occurrence of any
    end header, or to the end of the text.
    """
    start = -1
    for header in headers:
        start = _search(header, text)
        if start != -1:
            break

    if start == -1:
        logger.debug("section_not_found", headers=list(headers))
        return NOT_FOUND

    end = len(text)
    for header in end_headers:
        index = _search(header, text, start + 1)
        if index != -1 and index < end:
            end = index

    logger.debug("section_located", start=start, end=end)
    return SectionSpan(start=start, end=end)
