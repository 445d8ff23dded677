"""Orchestrator: keyword extraction, weighted scoring and recommendations.

Pipeline:
1. Keyword extraction from the resume and from the job description
2. Five sub-scores combined into the weighted ATS score
3. Rule-based recommendations from the finished score
"""

import logging
from datetime import datetime, timezone

from models.responses import AnalysisResponse
from services import ats_scorer, keyword_extractor, recommendations

logger = logging.getLogger(__name__)


def analyze(
    resume_text: str, job_description: str, industry: str = "general"
) -> AnalysisResponse:
    """Run the full analysis for one resume against one job description.

    Synchronous and CPU-bound; the HTTP layer runs it in a worker thread.
    """
    # --- Step 1: Keyword extraction ---
    resume_keywords = keyword_extractor.extract_keywords(resume_text)
    job_keywords = keyword_extractor.extract_keywords(job_description)
    logger.debug(
        "Extracted %d resume keywords, %d job keywords",
        resume_keywords.metadata.total_keywords,
        job_keywords.metadata.total_keywords,
    )

    # --- Step 2: Weighted score ---
    result = ats_scorer.calculate_score(
        resume_text, job_description, resume_keywords, job_keywords, industry
    )

    # --- Step 3: Recommendations ---
    recs = recommendations.generate_recommendations(result, resume_text, job_description)

    return AnalysisResponse(
        overall_score=result.overall_score,
        score_grade=result.score_grade,
        industry=result.industry,
        score_breakdown=result.breakdown,
        metrics=result.metrics,
        keyword_analysis=result.keyword_analysis,
        skills_analysis=result.skills_analysis,
        content_quality=result.content_quality,
        format_analysis=result.format_analysis,
        recommendations=recs,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
