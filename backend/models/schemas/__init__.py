"""Pydantic contracts passed between the analysis stages."""

from models.schemas.keyword_set import (
    ActionVerbRecord,
    ComparisonResult,
    EntityHint,
    KeywordSet,
    SkillRecord,
)
from models.schemas.recommendation import Recommendation
from models.schemas.score_result import ScoreResult
from models.schemas.sub_scores import (
    EducationInfo,
    EducationScore,
    ExperienceScore,
    FormatScore,
    KeywordMatchScore,
    SkillsScore,
)

__all__ = [
    "ActionVerbRecord",
    "ComparisonResult",
    "EntityHint",
    "KeywordSet",
    "SkillRecord",
    "Recommendation",
    "ScoreResult",
    "EducationInfo",
    "EducationScore",
    "ExperienceScore",
    "FormatScore",
    "KeywordMatchScore",
    "SkillsScore",
]
