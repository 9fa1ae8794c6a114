"""
Regex patterns used by the heuristic resume parser

Every pattern sits behind a small named function so the parsing stages
can be tested independently of the expressions themselves.
"""
import re
from typing import Optional

EMAIL_PATTERN = re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b', re.ASCII)

# Optional "+1 " country code and "(415)" area code; "+" and "(" never sit on a \b
PHONE_PATTERN = re.compile(r'(?<!\w)(?:\+\d{1,2}\s?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b', re.ASCII)

_MONTH = r'(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*'

# "Jan 2020 - Present", "January 2020 - Dec 2022", or bare "2018 - 2020" / "2018 - Present"
DATE_RANGE_PATTERN = re.compile(
    rf'\b{_MONTH}\s+\d{{4}}\s*-\s*(?:Present|{_MONTH}\s+\d{{4}})\b'
    r'|\d{4}\s*-\s*(?:Present|\d{4})',
    re.IGNORECASE | re.ASCII,
)

# Tried in order; lines are already trimmed
NAME_PATTERNS = [
    re.compile(r'[A-Z][a-z]+ [A-Z][a-z]+(?: [A-Z][a-z]+)?'),  # First Last / First Middle Last
    re.compile(r'[A-Z]+ [A-Z]+'),  # JOHN SMITH
    re.compile(r'[A-Z]\. [A-Z][a-z]+'),  # J. Smith
]

NAME_STOP_WORDS = ("resume", "curriculum", "vitae")
MAX_NAME_LENGTH = 40

_DIGIT = re.compile(r'[0-9]')


def match_email(text: str) -> Optional[str]:
    """First email address in text"""
    match = EMAIL_PATTERN.search(text)
    return match.group(0) if match else None


def match_phone(text: str) -> Optional[str]:
    """First North-American style phone number in text"""
    match = PHONE_PATTERN.search(text)
    return match.group(0) if match else None


def match_date_range(line: str) -> Optional[str]:
    """Employment period found in line, e.g. "Jan 2020 - Present" """
    match = DATE_RANGE_PATTERN.search(line)
    return match.group(0) if match else None


def has_digit(line: str) -> bool:
    return _DIGIT.search(line) is not None


def is_name_candidate(line: str) -> bool:
    """
    Reject lines that cannot be a name: contact details, numbers,
    document titles and anything longer than a name plausibly is.
    """
    if "@" in line or has_digit(line) or len(line) > MAX_NAME_LENGTH:
        return False
    lowered = line.lower()
    return not any(word in lowered for word in NAME_STOP_WORDS)


def match_name_shape(line: str) -> bool:
    """Whether the whole line has the shape of a person's name"""
    return any(pattern.fullmatch(line) for pattern in NAME_PATTERNS)
