"""Outputs of the five sub-score calculators.

Each carries a 0-100 ``score`` plus the analysis that produced it. The
calculators are independent, so no model here refers to another.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.keyword_set import SkillRecord

DegreeLevel = Literal["associates", "bachelors", "masters", "phd"]


class KeywordMatchScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0, le=100)
    matched: int = 0  # count of matched job keywords
    missing: int = 0
    match_rate: float = 0.0
    skills_match_rate: float = 0.0
    matched_keywords: list[str] = []  # first 20
    missing_keywords: list[str] = []  # first 20


class SkillsAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: list[SkillRecord] = []  # first 15
    missing: list[SkillRecord] = []  # first 10
    categories: dict[str, int] = {}  # matched skills per category
    total_resume_skills: int = 0
    total_job_skills: int = 0


class SkillsScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0, le=100)
    coverage: int = 0
    critical_matched: int = 0
    analysis: SkillsAnalysis = SkillsAnalysis()


class ExperienceAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    resume_years: Optional[int] = None
    required_years: Optional[int] = None
    meets_requirement: bool = False
    has_action_verbs: bool = False
    has_leadership: bool = False


class ExperienceScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0, le=100)
    analysis: ExperienceAnalysis = ExperienceAnalysis()


class EducationInfo(BaseModel):
    """Degrees and fields of study detected in one text."""
    model_config = ConfigDict(frozen=True)

    highest_degree: Optional[DegreeLevel] = None
    degrees: list[DegreeLevel] = []
    field_of_study: list[str] = []


class EducationAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    resume: EducationInfo = EducationInfo()
    required: EducationInfo = EducationInfo()
    meets_requirement: bool = False


class EducationScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0, le=100)
    analysis: EducationAnalysis = EducationAnalysis()


class FormatAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    issues: list[str] = []
    strengths: list[str] = []
    detected_headers: list[str] = []


class FormatScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0, le=100)
    sections: dict[str, bool] = {}
    analysis: FormatAnalysis = FormatAnalysis()
