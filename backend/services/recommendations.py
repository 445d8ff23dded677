"""Rule-based recommendations derived from a finished ScoreResult."""

import logging

from models.schemas.recommendation import Recommendation
from models.schemas.score_result import ScoreResult
from services.skill_dictionary import PRIORITY_RANK
from services.text_utils import round_half_up

logger = logging.getLogger(__name__)

# Sub-scores below this trigger their recommendation
WEAK_SCORE = 70
MIN_ACTION_VERBS = 5
MIN_QUANTIFIABLE = 3
SHORT_RESUME_WORDS = 300


def _keyword_rule(result: ScoreResult) -> Recommendation | None:
    if result.breakdown.keyword_match.score >= WEAK_SCORE:
        return None
    missing = ", ".join(result.keyword_analysis.missing[:5])
    return Recommendation(
        priority="high",
        category="Keywords",
        title="Improve Keyword Match",
        description=(
            f"Your resume matches only {round_half_up(result.keyword_analysis.match_rate)}% "
            f"of job keywords. Add these important keywords: {missing}"
        ),
        action="Naturally incorporate missing keywords into your experience and skills sections",
    )


def _skills_rule(result: ScoreResult) -> Recommendation | None:
    if result.breakdown.skills_alignment.score >= WEAK_SCORE:
        return None
    missing = result.skills_analysis.missing[:5]
    if not missing:
        return None
    return Recommendation(
        priority="high",
        category="Skills",
        title="Add Missing Technical Skills",
        description=(
            "Job requires skills you haven't listed: "
            + ", ".join(s.skill for s in missing)
        ),
        action=(
            "Add a dedicated skills section or incorporate these skills "
            "into your experience descriptions"
        ),
    )


def _action_verb_rule(result: ScoreResult) -> Recommendation | None:
    count = result.metrics.action_verbs_count
    if count >= MIN_ACTION_VERBS:
        return None
    return Recommendation(
        priority="medium",
        category="Experience",
        title="Use More Action Verbs",
        description=(
            f"Your resume has only {count} action verbs. "
            "Strong resumes use action verbs to start bullet points."
        ),
        action=(
            "Start experience bullet points with verbs like: "
            "Developed, Implemented, Led, Achieved, Optimized"
        ),
    )


def _impact_rule(result: ScoreResult) -> Recommendation | None:
    if result.metrics.quantifiable_achievements >= MIN_QUANTIFIABLE:
        return None
    return Recommendation(
        priority="high",
        category="Impact",
        title="Add Quantifiable Results",
        description=(
            "Your resume lacks measurable achievements. "
            "Numbers make your impact concrete."
        ),
        action=(
            'Add metrics: "Increased sales by 30%", "Managed team of 5", '
            '"Reduced costs by $50K"'
        ),
    )


def _format_rule(result: ScoreResult) -> Recommendation | None:
    if result.breakdown.format_readability.score >= WEAK_SCORE:
        return None
    issues = result.format_analysis.issues
    if not issues:
        return None
    return Recommendation(
        priority="medium",
        category="Format",
        title="Improve ATS Readability",
        description="; ".join(issues),
        action=(
            "Use standard section headers, add bullet points, "
            "and ensure all sections are present"
        ),
    )


def _length_rule(result: ScoreResult) -> Recommendation | None:
    length = result.metrics.resume_length
    if length.optimal:
        return None
    if length.words < SHORT_RESUME_WORDS:
        return Recommendation(
            priority="medium",
            category="Length",
            title="Expand Your Resume",
            description=(
                "Your resume is too brief. Add more detail about your "
                "experiences and achievements."
            ),
            action="Aim for 400-800 words (1-2 pages). Add more bullet points to each role.",
        )
    return Recommendation(
        priority="low",
        category="Length",
        title="Consider Condensing",
        description=(
            "Your resume is quite long. Focus on most relevant and recent experiences."
        ),
        action="Aim for 1-2 pages. Remove older or less relevant experiences.",
    )


def _contact_rule(result: ScoreResult) -> Recommendation | None:
    contact = result.metrics.contact_info
    missing = [
        label
        for label, present in (
            ("email", contact.has_email),
            ("phone", contact.has_phone),
            ("LinkedIn", contact.has_linkedin),
        )
        if not present
    ]
    if not missing:
        return None
    return Recommendation(
        priority="high",
        category="Contact",
        title="Complete Contact Information",
        description=f"Missing: {', '.join(missing)}",
        action="Add all contact methods at the top of your resume",
    )


def _education_rule(result: ScoreResult) -> Recommendation | None:
    if result.breakdown.education_match.score >= WEAK_SCORE:
        return None
    return Recommendation(
        priority="medium",
        category="Education",
        title="Highlight Education",
        description=(
            "Ensure your education section clearly states your degree and field of study"
        ),
        action=(
            'Use clear format: "Bachelor of Science in Computer Science, '
            'University Name, Year"'
        ),
    )


# Evaluation order; ties within a priority keep this order
_RULES = (
    _keyword_rule,
    _skills_rule,
    _action_verb_rule,
    _impact_rule,
    _format_rule,
    _length_rule,
    _contact_rule,
    _education_rule,
)


def generate_recommendations(
    score_result: ScoreResult, resume_text: str, job_description: str
) -> list[Recommendation]:
    """Apply every rule to a ScoreResult and return the hits, high priority first.

    Each rule reads only the ScoreResult. The texts are accepted so callers
    pass the same inputs the scorer saw.
    """
    recommendations = []
    for rule in _RULES:
        rec = rule(score_result)
        if rec is not None:
            recommendations.append(rec)
    recommendations.sort(key=lambda r: PRIORITY_RANK[r.priority])
    logger.debug("Generated %d recommendations", len(recommendations))
    return recommendations
