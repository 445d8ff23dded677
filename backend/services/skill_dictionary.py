"""Static lookup tables for resume and job description analysis.

Every table is built once at import time and is read-only afterwards:
categories map to tuples, word lists are tuples or frozensets, and mappings
are wrapped in ``MappingProxyType``. Nothing in the pipeline mutates them,
so concurrent analyses can share them freely.
"""

from types import MappingProxyType

# ---------------------------------------------------------------------------
# Technical skills, grouped by category.
# Entries are lowercase canonical names; multi-word entries match as phrases.
# ---------------------------------------------------------------------------
TECHNICAL_SKILLS: MappingProxyType = MappingProxyType({
    "programming": (
        "python", "java", "javascript", "typescript", "c++", "c#", "ruby", "go", "rust",
        "php", "swift", "kotlin", "scala", "r", "matlab", "sql", "html", "css",
    ),
    "frameworks": (
        "react", "angular", "vue", "node.js", "express", "django", "flask", "spring",
        "tensorflow", "pytorch", "keras", "scikit-learn", "pandas", "numpy", "react native",
        "flutter", "next.js", "fastapi", "laravel", "rails", ".net", "asp.net",
    ),
    "databases": (
        "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "cassandra",
        "dynamodb", "oracle", "sql server", "sqlite", "mariadb", "neo4j",
    ),
    "cloud": (
        "aws", "azure", "gcp", "google cloud", "docker", "kubernetes", "jenkins",
        "terraform", "ansible", "ci/cd", "devops", "microservices", "serverless",
    ),
    "dataScience": (
        "machine learning", "deep learning", "nlp", "computer vision", "data mining",
        "statistical analysis", "data visualization", "big data", "spark", "hadoop",
        "tableau", "power bi", "jupyter", "a/b testing", "predictive modeling",
    ),
    "tools": (
        "git", "github", "gitlab", "jira", "confluence", "slack", "vscode",
        "intellij", "postman", "swagger", "figma", "sketch", "photoshop",
    ),
    "methodologies": (
        "agile", "scrum", "kanban", "waterfall", "tdd", "bdd", "ci/cd",
        "pair programming", "code review", "version control",
    ),
})

SKILL_CATEGORIES: tuple[str, ...] = tuple(TECHNICAL_SKILLS)

# Verbs that signal accomplishments when they open a bullet or sentence
ACTION_VERBS: tuple[str, ...] = (
    "achieved", "improved", "developed", "created", "implemented", "designed",
    "managed", "led", "coordinated", "increased", "decreased", "reduced",
    "optimized", "streamlined", "automated", "launched", "delivered", "built",
    "established", "analyzed", "evaluated", "researched", "collaborated",
    "mentored", "trained", "presented", "negotiated", "resolved", "executed",
)

# Matched as raw substrings of the lowercased resume
LEADERSHIP_TERMS: tuple[str, ...] = ("led", "managed", "directed", "supervised", "mentored")

STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
    "be", "have", "has", "had", "do", "does", "did", "will", "would",
    "could", "should", "may", "might", "must", "can", "this", "that",
    "these", "those", "i", "you", "he", "she", "it", "we", "they",
})

# ---------------------------------------------------------------------------
# Education
# Patterns are matched case-insensitively between letter boundaries; short
# forms keep their dots optional only where the bare form is not an English word.
# ---------------------------------------------------------------------------
DEGREE_PATTERNS: MappingProxyType = MappingProxyType({
    "phd": (
        r"ph\.?\s?d\.?", r"doctorate", r"doctoral", r"doctor of philosophy",
    ),
    "masters": (
        r"master['’]?s", r"master of", r"m\.?s\.?", r"m\.?sc\.?", r"m\.?b\.?a\.?",
        r"m\.?eng\.?", r"m\.?tech", r"m\.a\.",
    ),
    "bachelors": (
        r"bachelor(?:['’]?s)?", r"b\.?s\.?", r"b\.?sc\.?", r"b\.?a\.?",
        r"b\.?eng\.?", r"b\.?tech", r"undergraduate",
    ),
    "associates": (
        r"associate['’]?s?\s+(?:degree|of)", r"a\.a\.", r"a\.s\.",
    ),
})

# Highest level first; the first level found is the highest degree
DEGREE_LEVELS: tuple[str, ...] = ("phd", "masters", "bachelors", "associates")

DEGREE_RANK: MappingProxyType = MappingProxyType({
    "phd": 4,
    "masters": 3,
    "bachelors": 2,
    "associates": 1,
})

FIELDS_OF_STUDY: tuple[str, ...] = (
    "computer science", "data science", "engineering", "mathematics",
    "statistics", "business", "marketing", "finance", "accounting",
    "biology", "chemistry", "physics", "psychology",
)

# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

# Decorative glyphs that many ATS parsers mangle
SPECIAL_CHARACTERS: frozenset[str] = frozenset("™®©♦●◆▪")

BULLET_MARKERS: frozenset[str] = frozenset("-•*")

PRIORITY_RANK: MappingProxyType = MappingProxyType({"high": 0, "medium": 1, "low": 2})


def iter_skills():
    """Yield (skill, category) pairs in dictionary order."""
    for category, skills in TECHNICAL_SKILLS.items():
        for skill in skills:
            yield skill, category
