"""Aggregate scoring result produced once per analysis."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.sub_scores import FormatAnalysis, SkillsAnalysis

Grade = Literal["A", "B", "C", "D", "F"]


class BreakdownEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    weight: int
    weighted_score: int


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword_match: BreakdownEntry
    skills_alignment: BreakdownEntry
    experience_relevance: BreakdownEntry
    education_match: BreakdownEntry
    format_readability: BreakdownEntry


class ResumeLength(BaseModel):
    model_config = ConfigDict(frozen=True)

    words: int = 0
    optimal: bool = False
    pages: int = 0


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_email: bool = False
    has_phone: bool = False
    has_linkedin: bool = False
    has_location: bool = False


class ScoreMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    keywords_matched: int = 0
    keywords_missing: int = 0
    match_rate: float = 0.0
    skills_coverage: int = 0
    critical_skills_matched: int = 0
    action_verbs_count: int = 0
    quantifiable_achievements: int = 0
    resume_length: ResumeLength = ResumeLength()
    contact_info: ContactInfo = ContactInfo()
    sections_complete: dict[str, bool] = {}


class KeywordAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: list[str] = []
    missing: list[str] = []
    match_rate: float = 0.0


class ContentQuality(BaseModel):
    model_config = ConfigDict(frozen=True)

    avg_sentence_length: int = 0
    active_voice_ratio: int = 0
    uses_star_method: bool = False
    star_indicator_count: int = 0
    readability_score: int = Field(default=0, ge=0, le=100)
    word_count: int = 0
    sentence_count: int = 0


class ScoreResult(BaseModel):
    """Weighted ATS score with every intermediate analysis attached.

    Built by ``ats_scorer.calculate_score`` and never modified afterwards.
    """
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(ge=0, le=100)
    score_grade: Grade
    industry: str = "general"
    breakdown: ScoreBreakdown
    metrics: ScoreMetrics
    keyword_analysis: KeywordAnalysis
    skills_analysis: SkillsAnalysis
    content_quality: ContentQuality
    format_analysis: FormatAnalysis
