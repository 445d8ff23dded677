"""ATS compatibility scoring.

Five independent sub-scores, each 0-100, combined with fixed weights:

    Keyword Match          40%
    Skills Alignment       20%
    Experience Relevance   15%
    Education Match        10%
    Format & Readability   15%

Every calculator is total over its input: empty or degenerate text yields a
definite score (neutral defaults where there is nothing to compare), never
an exception.
"""

import logging
import re

from models.schemas.keyword_set import KeywordSet
from models.schemas.score_result import (
    BreakdownEntry,
    ContactInfo,
    ContentQuality,
    KeywordAnalysis,
    ResumeLength,
    ScoreBreakdown,
    ScoreMetrics,
    ScoreResult,
)
from models.schemas.sub_scores import (
    EducationAnalysis,
    EducationScore,
    ExperienceAnalysis,
    ExperienceScore,
    FormatAnalysis,
    FormatScore,
    KeywordMatchScore,
    SkillsAnalysis,
    SkillsScore,
)
from services import section_parser
from services.keyword_extractor import compare_keywords, extract_action_verbs, extract_skills
from services.skill_dictionary import DEGREE_RANK, LEADERSHIP_TERMS, SPECIAL_CHARACTERS
from services.text_utils import clamp, estimate_pages, round_half_up, word_count

logger = logging.getLogger(__name__)

W_KEYWORD = 40
W_SKILLS = 20
W_EXPERIENCE = 15
W_EDUCATION = 10
W_FORMAT = 15

# Used when the job description names no dictionary skills
DEFAULT_SKILLS_SCORE = 75

OPTIMAL_MIN_WORDS = 300
OPTIMAL_MAX_WORDS = 1000

_BULLET_LINE_RE = re.compile(r"^[ \t]*[-•*]", re.MULTILINE)
_NUMBER_RE = re.compile(r"\d+[%$]?")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

QUANTIFIABLE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\d+%"),  # percentages
    re.compile(r"\$[\d,]+"),  # dollar amounts
    re.compile(r"\d+\s*(?:million|thousand|billion)", re.IGNORECASE),
    re.compile(r"(?:increased|decreased|improved|reduced)[\s\w]*?by\s*\d+", re.IGNORECASE),
    re.compile(r"\d+\s*(?:years|months|weeks|days)", re.IGNORECASE),
)

# Situation/Task/Action/Result phrasing
STAR_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"achieved|accomplished|attained", re.IGNORECASE),
    re.compile(r"resulted in|led to|contributed to", re.IGNORECASE),
    re.compile(r"responsible for|tasked with", re.IGNORECASE),
    re.compile(r"implemented|executed|delivered", re.IGNORECASE),
)
STAR_THRESHOLD = 3


# ---------------------------------------------------------------------------
# Sub-score calculators
# ---------------------------------------------------------------------------

def calculate_keyword_score(
    resume_keywords: KeywordSet, job_keywords: KeywordSet
) -> KeywordMatchScore:
    """Keyword Match: share of job keywords present in the resume.

    +10 when more than 70% of the job's dictionary skills are also matched.
    """
    comparison = compare_keywords(resume_keywords.keywords, job_keywords.keywords)
    skills_comparison = compare_keywords(
        [s.skill for s in resume_keywords.skills],
        [s.skill for s in job_keywords.skills],
    )

    score = comparison.match_rate
    if skills_comparison.match_rate > 70:
        score = clamp(score + 10)

    return KeywordMatchScore(
        score=score,
        matched=comparison.matched_count,
        missing=comparison.missing_count,
        match_rate=round(comparison.match_rate, 1),
        skills_match_rate=round(skills_comparison.match_rate, 1),
        matched_keywords=comparison.matched[:20],
        missing_keywords=comparison.missing[:20],
    )


def calculate_skills_score(resume_text: str, job_description: str) -> SkillsScore:
    """Skills Alignment: coverage of the job's dictionary skills.

    Matching is exact on the canonical skill name, with no fuzzy fallback.
    """
    resume_skills = extract_skills(resume_text)
    job_skills = extract_skills(job_description)

    if not job_skills:
        return SkillsScore(
            score=DEFAULT_SKILLS_SCORE,
            coverage=DEFAULT_SKILLS_SCORE,
            critical_matched=0,
            analysis=SkillsAnalysis(total_resume_skills=len(resume_skills)),
        )

    resume_names = {s.skill.lower() for s in resume_skills}
    matched = [s for s in job_skills if s.skill.lower() in resume_names]
    missing = [s for s in job_skills if s.skill.lower() not in resume_names]

    coverage = len(matched) / len(job_skills) * 100
    score = coverage

    extra_skills = len(resume_skills) - len(matched)
    if extra_skills > 5 and coverage > 50:
        score = clamp(score + 10)

    categories: dict[str, int] = {}
    for skill in matched:
        categories[skill.category] = categories.get(skill.category, 0) + 1

    return SkillsScore(
        score=score,
        coverage=round_half_up(coverage),
        critical_matched=len(matched),
        analysis=SkillsAnalysis(
            matched=matched[:15],
            missing=missing[:10],
            categories=categories,
            total_resume_skills=len(resume_skills),
            total_job_skills=len(job_skills),
        ),
    )


def calculate_experience_score(resume_text: str, job_description: str) -> ExperienceScore:
    """Experience Relevance: stated years against the requirement, plus wording bonuses."""
    resume_years = section_parser.extract_years_of_experience(resume_text)
    required_years = section_parser.extract_years_of_experience(job_description)

    score = 70
    meets_requirement = False
    if required_years is not None:
        if resume_years is None:
            score = 50
        elif resume_years >= required_years:
            score = 100
            meets_requirement = True
        elif resume_years >= required_years * 0.75:
            score = 80
            meets_requirement = True
        else:
            score = 60
    elif resume_years is not None and resume_years > 0:
        score = 85

    resume_lower = resume_text.lower()

    has_action_verbs = len(extract_action_verbs(resume_lower)) >= 5
    if has_action_verbs:
        score = clamp(score + 10)

    # Plain substring test, so "led" also fires inside "skilled"
    has_leadership = any(term in resume_lower for term in LEADERSHIP_TERMS)
    if has_leadership:
        score = clamp(score + 5)

    return ExperienceScore(
        score=score,
        analysis=ExperienceAnalysis(
            resume_years=resume_years,
            required_years=required_years,
            meets_requirement=meets_requirement,
            has_action_verbs=has_action_verbs,
            has_leadership=has_leadership,
        ),
    )


def calculate_education_score(resume_text: str, job_description: str) -> EducationScore:
    """Education Match: degree rank against the requirement, +10 for a shared field."""
    resume_education = section_parser.detect_education(resume_text)
    job_education = section_parser.detect_education(job_description)

    resume_rank = DEGREE_RANK.get(resume_education.highest_degree, 0)
    job_rank = DEGREE_RANK.get(job_education.highest_degree, 0)

    if job_education.highest_degree is None:
        score = 90 if resume_education.highest_degree else 70
    elif resume_rank >= job_rank:
        score = 100
    elif resume_rank == job_rank - 1:
        score = 75
    elif resume_rank > 0:
        score = 60
    else:
        score = 40

    shared_fields = set(resume_education.field_of_study) & set(job_education.field_of_study)
    if shared_fields:
        score = clamp(score + 10)

    return EducationScore(
        score=score,
        analysis=EducationAnalysis(
            resume=resume_education,
            required=job_education,
            meets_requirement=job_rank > 0 and resume_rank >= job_rank,
        ),
    )


def calculate_format_score(resume_text: str) -> FormatScore:
    """Format & Readability: sections, length, bullets, numbers and glyphs."""
    score = 0.0
    issues: list[str] = []
    strengths: list[str] = []

    sections = section_parser.detect_required_sections(resume_text)
    for name, present in sections.items():
        if present:
            strengths.append(f"{name.capitalize()} section present")
        else:
            issues.append(f"Missing {name} section")
    score += sum(sections.values()) / len(sections) * 40

    words = word_count(resume_text)
    if OPTIMAL_MIN_WORDS <= words <= OPTIMAL_MAX_WORDS:
        score += 20
        strengths.append("Optimal resume length")
    elif words < OPTIMAL_MIN_WORDS:
        score += 10
        issues.append("Resume may be too short")
    else:
        score += 15
        issues.append("Resume may be too long")

    if len(_BULLET_LINE_RE.findall(resume_text)) >= 5:
        score += 15
        strengths.append("Good use of bullet points")
    else:
        score += 5
        issues.append("Consider adding more bullet points")

    if len(_NUMBER_RE.findall(resume_text)) >= 5:
        score += 15
        strengths.append("Contains quantifiable achievements")
    else:
        score += 5
        issues.append("Add more quantifiable results")

    if any(ch in SPECIAL_CHARACTERS for ch in resume_text):
        score -= 10
        issues.append("Contains special characters that may confuse ATS")
    else:
        score += 10
        strengths.append("No problematic special characters")

    return FormatScore(
        score=clamp(score),
        sections=sections,
        analysis=FormatAnalysis(
            issues=issues,
            strengths=strengths,
            detected_headers=section_parser.detect_headers(resume_text),
        ),
    )


# ---------------------------------------------------------------------------
# Derived metrics
# ---------------------------------------------------------------------------

def count_quantifiable_achievements(text: str) -> int:
    """Count percentages, money, scaled numbers, "improved by N" and time spans."""
    return sum(len(pattern.findall(text)) for pattern in QUANTIFIABLE_PATTERNS)


def is_optimal_length(text: str) -> bool:
    return OPTIMAL_MIN_WORDS <= word_count(text) <= OPTIMAL_MAX_WORDS


def calculate_readability_score(avg_sentence_length: float, active_voice_ratio: float) -> int:
    score = 100
    if avg_sentence_length > 25:
        score -= 20
    elif avg_sentence_length > 20:
        score -= 10
    if avg_sentence_length < 10:
        score -= 15
    if active_voice_ratio > 50:
        score += 10
    return int(clamp(score))


def analyze_content_quality(text: str) -> ContentQuality:
    """Sentence length, active voice, STAR phrasing and readability."""
    sentences = [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]
    words = word_count(text)

    avg_sentence_length = words / len(sentences) if sentences else 0.0
    action_verbs = extract_action_verbs(text)
    active_voice_ratio = len(action_verbs) / len(sentences) * 100 if sentences else 0.0

    star_count = sum(len(pattern.findall(text)) for pattern in STAR_PATTERNS)

    return ContentQuality(
        avg_sentence_length=round_half_up(avg_sentence_length),
        active_voice_ratio=round_half_up(active_voice_ratio),
        uses_star_method=star_count >= STAR_THRESHOLD,
        star_indicator_count=star_count,
        readability_score=calculate_readability_score(avg_sentence_length, active_voice_ratio),
        word_count=words,
        sentence_count=len(sentences),
    )


def get_score_grade(score: int) -> str:
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "F"


def _weighted(score: int, weight: int) -> int:
    """score * weight / 100, rounded half up, in integer arithmetic."""
    return (score * weight + 50) // 100


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------

def calculate_score(
    resume_text: str,
    job_description: str,
    resume_keywords: KeywordSet,
    job_keywords: KeywordSet,
    industry: str = "general",
) -> ScoreResult:
    """Run all five calculators and combine them into the overall ATS score.

    Sub-scores are rounded to integers before weighting, so ``overall_score``
    always equals the weighted sum of the breakdown scores, rounded half up.
    """
    logger.info("Starting ATS analysis (industry=%s)", industry)

    keyword = calculate_keyword_score(resume_keywords, job_keywords)
    skills = calculate_skills_score(resume_text, job_description)
    experience = calculate_experience_score(resume_text, job_description)
    education = calculate_education_score(resume_text, job_description)
    fmt = calculate_format_score(resume_text)

    keyword_int = round_half_up(keyword.score)
    skills_int = round_half_up(skills.score)
    experience_int = round_half_up(experience.score)
    education_int = round_half_up(education.score)
    format_int = round_half_up(fmt.score)

    weighted_total = (
        W_KEYWORD * keyword_int
        + W_SKILLS * skills_int
        + W_EXPERIENCE * experience_int
        + W_EDUCATION * education_int
        + W_FORMAT * format_int
    )
    overall_score = (weighted_total + 50) // 100

    breakdown = ScoreBreakdown(
        keyword_match=BreakdownEntry(
            score=keyword_int, weight=W_KEYWORD, weighted_score=_weighted(keyword_int, W_KEYWORD)
        ),
        skills_alignment=BreakdownEntry(
            score=skills_int, weight=W_SKILLS, weighted_score=_weighted(skills_int, W_SKILLS)
        ),
        experience_relevance=BreakdownEntry(
            score=experience_int,
            weight=W_EXPERIENCE,
            weighted_score=_weighted(experience_int, W_EXPERIENCE),
        ),
        education_match=BreakdownEntry(
            score=education_int,
            weight=W_EDUCATION,
            weighted_score=_weighted(education_int, W_EDUCATION),
        ),
        format_readability=BreakdownEntry(
            score=format_int, weight=W_FORMAT, weighted_score=_weighted(format_int, W_FORMAT)
        ),
    )

    words = word_count(resume_text)
    metrics = ScoreMetrics(
        keywords_matched=keyword.matched,
        keywords_missing=keyword.missing,
        match_rate=keyword.match_rate,
        skills_coverage=skills.coverage,
        critical_skills_matched=skills.critical_matched,
        action_verbs_count=len(resume_keywords.action_verbs),
        quantifiable_achievements=count_quantifiable_achievements(resume_text),
        resume_length=ResumeLength(
            words=words,
            optimal=is_optimal_length(resume_text),
            pages=estimate_pages(resume_text),
        ),
        contact_info=ContactInfo(**section_parser.check_contact_info(resume_text)),
        sections_complete=fmt.sections,
    )

    result = ScoreResult(
        overall_score=overall_score,
        score_grade=get_score_grade(overall_score),
        industry=industry,
        breakdown=breakdown,
        metrics=metrics,
        keyword_analysis=KeywordAnalysis(
            matched=keyword.matched_keywords,
            missing=keyword.missing_keywords,
            match_rate=keyword.match_rate,
        ),
        skills_analysis=skills.analysis,
        content_quality=analyze_content_quality(resume_text),
        format_analysis=fmt.analysis,
    )

    logger.info("Analysis complete. Overall score: %d/100", overall_score)
    return result
