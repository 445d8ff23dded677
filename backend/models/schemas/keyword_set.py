"""Keyword extraction and comparison contracts."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SkillCategory = Literal[
    "programming",
    "frameworks",
    "databases",
    "cloud",
    "dataScience",
    "tools",
    "methodologies",
]


class SkillRecord(BaseModel):
    """A dictionary skill found in a text, with its occurrence count."""
    model_config = ConfigDict(frozen=True)

    skill: str
    category: SkillCategory
    count: int = Field(ge=1)


class ActionVerbRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    verb: str
    count: int = Field(ge=1)


class EntityHint(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["organization", "place"]
    value: str


class KeywordMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_keywords: int = 0
    skills_count: int = 0
    action_verbs_count: int = 0


class KeywordSet(BaseModel):
    """Everything the extractor learned about one text.

    ``keywords`` is the de-duplicated union of ranked terms, skill names
    and phrases, in first-seen order.
    """
    model_config = ConfigDict(frozen=True)

    keywords: list[str] = []
    skills: list[SkillRecord] = []
    action_verbs: list[ActionVerbRecord] = []
    phrases: list[str] = []
    entities: list[EntityHint] = []
    metadata: KeywordMetadata = KeywordMetadata()


class ComparisonResult(BaseModel):
    """Job keywords split into those the resume covers and those it lacks."""
    model_config = ConfigDict(frozen=True)

    matched: list[str] = []
    missing: list[str] = []
    match_rate: float = Field(default=0.0, ge=0.0, le=100.0)
    matched_count: int = 0
    missing_count: int = 0
    total_job_keywords: int = 0
