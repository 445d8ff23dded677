from pydantic import BaseModel

from models.schemas.recommendation import Recommendation
from models.schemas.score_result import (
    ContentQuality,
    Grade,
    KeywordAnalysis,
    ScoreBreakdown,
    ScoreMetrics,
)
from models.schemas.sub_scores import FormatAnalysis, SkillsAnalysis


class AnalysisResponse(BaseModel):
    overall_score: int = 0
    score_grade: Grade = "F"
    industry: str = "general"
    score_breakdown: ScoreBreakdown
    metrics: ScoreMetrics = ScoreMetrics()
    keyword_analysis: KeywordAnalysis = KeywordAnalysis()
    skills_analysis: SkillsAnalysis = SkillsAnalysis()
    content_quality: ContentQuality = ContentQuality()
    format_analysis: FormatAnalysis = FormatAnalysis()
    recommendations: list[Recommendation] = []
    # ISO-8601 UTC
    timestamp: str = ""


class SampleJob(BaseModel):
    title: str
    company: str
    description: str


class SampleJobsResponse(BaseModel):
    samples: dict[str, SampleJob] = {}
