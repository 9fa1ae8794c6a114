"""
Resume parsing service

Heuristic extraction of a structured profile from raw resume text.
No models are involved: line structure, regexes and position are all
that is used, and every field falls back to a placeholder when nothing
is found.
"""
from typing import Dict, List, Optional

import structlog

from resume_parser.resumes import patterns
from resume_parser.resumes.schemas import (
    DEFAULT_NAME,
    ExperienceEntry,
    ParsedResumeData,
    PersonalInfo,
    placeholder_education,
    placeholder_experience,
    placeholder_skills,
)
from resume_parser.resumes.section_locator import EXPERIENCE_HEADERS, SectionSpan, find_section

logger = structlog.get_logger()

NAME_SEARCH_LINES = 5
SECTION_HEADER_WORDS = ("experience", "employment")
MIN_TITLE_LENGTH = 2
MAX_TITLE_LENGTH = 50
MAX_COMPANY_LENGTH = 60


class ResumeParser:
    """Parse resume text into structured data"""

    def __init__(self, max_chars: Optional[int] = None):
        # None or 0 means unbounded
        self.max_chars = max_chars or None

    def parse(self, text: str) -> ParsedResumeData:
        """Run every extraction stage and fill gaps with placeholders"""
        text = text or ""
        if self.max_chars and len(text) > self.max_chars:
            logger.warning("resume_text_truncated", length=len(text), max_chars=self.max_chars)
            text = text[:self.max_chars]

        lines = self.normalize_lines(text)
        contact = self.extract_contact(text)
        name = self.detect_name(lines)
        section = find_section(text, EXPERIENCE_HEADERS)
        experiences = self.extract_experiences(text, section)

        logger.info(
            "resume_parsed",
            lines=len(lines),
            name_found=bool(name),
            email_found=bool(contact["email"]),
            phone_found=bool(contact["phone"]),
            experience_section_found=section.found,
            experiences=len(experiences),
        )

        return ParsedResumeData(
            personal_info=PersonalInfo(
                name=name or DEFAULT_NAME,
                email=contact["email"],
                phone=contact["phone"],
            ),
            experiences=experiences or [placeholder_experience()],
            education=[placeholder_education()],
            skills=placeholder_skills(),
        )

    @staticmethod
    def normalize_lines(text: str) -> List[str]:
        """Trimmed, non-empty lines in document order"""
        return [line.strip() for line in text.splitlines() if line.strip()]

    def extract_contact(self, text: str) -> Dict[str, str]:
        """First email and phone number anywhere in the text"""
        return {
            "email": patterns.match_email(text) or "",
            "phone": patterns.match_phone(text) or "",
        }

    def detect_name(self, lines: List[str]) -> str:
        """
        Candidate name from the top of the document.

        Only the first few lines are considered. Lines that look like contact
        details or a document title are skipped; the first remaining line
        shaped like a name wins. Returns an empty string when nothing fits.
        """
        for line in lines[:NAME_SEARCH_LINES]:
            if not patterns.is_name_candidate(line):
                continue
            if patterns.match_name_shape(line):
                return line
        return ""

    def extract_experiences(self, text: str, section: SectionSpan) -> List[ExperienceEntry]:
        """
        Segment the experience section into jobs.

        Expects the "Title / Company / Period / bullets" layout. A single entry
        is built at a time and emitted as soon as title, company and period are
        all known. Lines of an entry still unfinished when the section ends are
        trailing bullets of the last emitted job and go to its description.
        """
        if not section.found:
            return []

        experiences: List[ExperienceEntry] = []
        current: Optional[ExperienceEntry] = None
        current_lines: List[str] = []

        for line in self.normalize_lines(section.slice(text)):
            lowered = line.lower()
            if any(word in lowered for word in SECTION_HEADER_WORDS):
                continue

            period = patterns.match_date_range(line)
            if period and current is not None:
                current.period = period
            elif (
                current is None
                and MIN_TITLE_LENGTH < len(line) < MAX_TITLE_LENGTH
                and not patterns.has_digit(line)
            ):
                current = ExperienceEntry(title=line)
            elif current is not None:
                if not current.company and len(line) < MAX_COMPANY_LENGTH:
                    current.company = line
                else:
                    current.description.append(line)
            else:
                continue

            current_lines.append(line)
            if current.is_complete:
                experiences.append(current)
                current = None
                current_lines = []

        if current is not None and experiences:
            experiences[-1].description.extend(current_lines)

        logger.debug("experiences_segmented", count=len(experiences), dangling=current is not None)
        return experiences
