"""Resume structure signals: section headers, contact info, experience and education."""

import re
from typing import Optional

from models.schemas.sub_scores import EducationInfo
from services.skill_dictionary import DEGREE_LEVELS, DEGREE_PATTERNS, FIELDS_OF_STUDY

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "contact": [
        r"contact\s*(?:info(?:rmation)?|details)?",
        r"personal\s*(?:info(?:rmation)?|details)",
    ],
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"career\s*(?:history|summary|path)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
    ],
    "projects": [
        r"(?:key|notable|selected|personal)?\s*projects",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?\s*(?:&|and)?\s*certific(?:ations?|ates?)",
    ],
}

# Compile all patterns into a single line-anchored regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"^\s*(?:{combined})\s*:?\s*$", re.IGNORECASE | re.MULTILINE
    )

# Looser keyword checks used by format scoring: the keyword may appear
# anywhere in the resume, not only as a standalone heading.
REQUIRED_SECTION_KEYWORDS: dict[str, re.Pattern] = {
    "contact": re.compile(r"email|phone|address|linkedin", re.IGNORECASE),
    "experience": re.compile(r"experience|employment|work history", re.IGNORECASE),
    "education": re.compile(r"education|academic|degree", re.IGNORECASE),
    "skills": re.compile(r"skills|technical|competencies", re.IGNORECASE),
}

# Contact info patterns
EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
LINKEDIN_RE = re.compile(r"linkedin\.com", re.IGNORECASE)
LOCATION_RE = re.compile(r"city|state|address|location", re.IGNORECASE)


def parse_sections(text: str) -> dict[str, str]:
    """Split resume text into named sections.

    Returns a dict mapping section name -> section text content.
    Unmatched text at the top goes into 'header'.
    """
    lines = text.split("\n")
    sections: dict[str, str] = {}
    current_section = "header"
    current_lines: list[str] = []

    for line in lines:
        matched_section = None
        stripped = line.strip()

        if stripped:
            for section_name, pattern in _COMPILED.items():
                if pattern.match(stripped):
                    matched_section = section_name
                    break

        if matched_section:
            if current_lines:
                sections[current_section] = "\n".join(current_lines).strip()
            current_section = matched_section
            current_lines = []
        else:
            current_lines.append(line)

    if current_lines:
        sections[current_section] = "\n".join(current_lines).strip()

    return sections


def detect_headers(text: str) -> list[str]:
    """Names of the standalone section headings present in a resume."""
    return sorted(name for name in parse_sections(text) if name != "header")


def detect_required_sections(text: str) -> dict[str, bool]:
    """Flag which of contact/experience/education/skills the resume mentions."""
    return {
        name: bool(pattern.search(text))
        for name, pattern in REQUIRED_SECTION_KEYWORDS.items()
    }


def check_contact_info(text: str) -> dict[str, bool]:
    """Report which contact details a resume includes."""
    return {
        "has_email": bool(EMAIL_RE.search(text)),
        "has_phone": bool(PHONE_RE.search(text)),
        "has_linkedin": bool(LINKEDIN_RE.search(text)),
        "has_location": bool(LOCATION_RE.search(text)),
    }


# ---------------------------------------------------------------------------
# Experience duration extraction
# ---------------------------------------------------------------------------

# "5+ years of experience", "experience: 3 years", "4 years in fintech"
EXP_YEARS_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"(\d+)\+?\s*years?\s+(?:of\s+)?experience", re.IGNORECASE),
    re.compile(r"experience[:\s]+(\d+)\+?\s*years?", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*years?\s+(?:in|with)", re.IGNORECASE),
)


def extract_years_of_experience(text: str) -> Optional[int]:
    """Return the largest stated number of years of experience, or None.

    Works for both sides: a resume's claim ("6 years of experience") and a
    job's requirement ("3+ years experience"). Zero counts as not stated.
    """
    max_years = 0
    for pattern in EXP_YEARS_PATTERNS:
        for match in pattern.finditer(text):
            max_years = max(max_years, int(match.group(1)))
    return max_years if max_years > 0 else None


# ---------------------------------------------------------------------------
# Education level detection
# ---------------------------------------------------------------------------

_DEGREE_COMPILED: dict[str, re.Pattern] = {}
for _level, _patterns in DEGREE_PATTERNS.items():
    _combined = "|".join(_patterns)
    _DEGREE_COMPILED[_level] = re.compile(
        rf"(?<![a-z])(?:{_combined})(?![a-z])", re.IGNORECASE
    )


def detect_education(text: str) -> EducationInfo:
    """Detect degree levels and fields of study mentioned in text.

    ``degrees`` lists every level found, highest first; ``highest_degree``
    is the first of them or None.
    """
    degrees = [level for level in DEGREE_LEVELS if _DEGREE_COMPILED[level].search(text)]
    text_lower = text.lower()
    fields = [field for field in FIELDS_OF_STUDY if field in text_lower]

    return EducationInfo(
        highest_degree=degrees[0] if degrees else None,
        degrees=degrees,
        field_of_study=fields,
    )
