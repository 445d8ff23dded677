from models.schemas.keyword_set import SkillRecord
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
from models.schemas.sub_scores import FormatAnalysis, SkillsAnalysis
from services.ats_scorer import calculate_score
from services.keyword_extractor import extract_keywords
from services.recommendations import generate_recommendations
from services.skill_dictionary import PRIORITY_RANK


def _entry(score: int, weight: int) -> BreakdownEntry:
    return BreakdownEntry(score=score, weight=weight, weighted_score=(score * weight + 50) // 100)


def _result(
    keyword=100,
    skills=100,
    experience=100,
    education=100,
    fmt=100,
    match_rate=100.0,
    missing_keywords=(),
    missing_skills=(),
    issues=(),
    action_verbs=10,
    quantifiable=5,
    words=500,
    contact=None,
) -> ScoreResult:
    """A ScoreResult that triggers no rule unless a field is overridden."""
    return ScoreResult(
        overall_score=100,
        score_grade="A",
        breakdown=ScoreBreakdown(
            keyword_match=_entry(keyword, 40),
            skills_alignment=_entry(skills, 20),
            experience_relevance=_entry(experience, 15),
            education_match=_entry(education, 10),
            format_readability=_entry(fmt, 15),
        ),
        metrics=ScoreMetrics(
            action_verbs_count=action_verbs,
            quantifiable_achievements=quantifiable,
            resume_length=ResumeLength(words=words, optimal=300 <= words <= 1000, pages=1),
            contact_info=contact or ContactInfo(has_email=True, has_phone=True, has_linkedin=True),
        ),
        keyword_analysis=KeywordAnalysis(missing=list(missing_keywords), match_rate=match_rate),
        skills_analysis=SkillsAnalysis(missing=list(missing_skills)),
        content_quality=ContentQuality(),
        format_analysis=FormatAnalysis(issues=list(issues)),
    )


def _titles(recs) -> list[str]:
    return [r.title for r in recs]


def test_no_recommendations_for_strong_result():
    assert generate_recommendations(_result(), "", "") == []


def test_keyword_recommendation():
    recs = generate_recommendations(
        _result(keyword=50, match_rate=42.5, missing_keywords=["a", "b", "c", "d", "e", "f"]),
        "",
        "",
    )
    assert len(recs) == 1
    rec = recs[0]
    assert rec.priority == "high"
    assert rec.category == "Keywords"
    assert rec.title == "Improve Keyword Match"
    assert rec.description == (
        "Your resume matches only 43% of job keywords. "
        "Add these important keywords: a, b, c, d, e"
    )


def test_skills_recommendation_needs_missing_skills():
    assert generate_recommendations(_result(skills=40), "", "") == []

    missing = [
        SkillRecord(skill="docker", category="cloud", count=1),
        SkillRecord(skill="kubernetes", category="cloud", count=1),
    ]
    recs = generate_recommendations(_result(skills=40, missing_skills=missing), "", "")
    assert _titles(recs) == ["Add Missing Technical Skills"]
    assert recs[0].description == "Job requires skills you haven't listed: docker, kubernetes"


def test_action_verb_recommendation():
    recs = generate_recommendations(_result(action_verbs=2), "", "")
    assert _titles(recs) == ["Use More Action Verbs"]
    assert recs[0].priority == "medium"
    assert "only 2 action verbs" in recs[0].description


def test_quantifiable_recommendation():
    recs = generate_recommendations(_result(quantifiable=0), "", "")
    assert _titles(recs) == ["Add Quantifiable Results"]
    assert recs[0].priority == "high"
    assert recs[0].category == "Impact"


def test_format_recommendation_joins_issues():
    assert generate_recommendations(_result(fmt=60), "", "") == []

    recs = generate_recommendations(
        _result(fmt=60, issues=["Missing skills section", "Resume may be too short"]), "", ""
    )
    assert _titles(recs) == ["Improve ATS Readability"]
    assert recs[0].description == "Missing skills section; Resume may be too short"


def test_length_recommendations():
    short = generate_recommendations(_result(words=120), "", "")
    assert _titles(short) == ["Expand Your Resume"]
    assert short[0].priority == "medium"

    long = generate_recommendations(_result(words=1500), "", "")
    assert _titles(long) == ["Consider Condensing"]
    assert long[0].priority == "low"


def test_contact_recommendation():
    recs = generate_recommendations(_result(contact=ContactInfo(has_email=True)), "", "")
    assert _titles(recs) == ["Complete Contact Information"]
    assert recs[0].description == "Missing: phone, LinkedIn"


def test_education_recommendation():
    recs = generate_recommendations(_result(education=40), "", "")
    assert _titles(recs) == ["Highlight Education"]
    assert recs[0].priority == "medium"


def test_sorted_by_priority_and_stable():
    result = _result(
        keyword=30,
        match_rate=30.0,
        missing_keywords=["docker"],
        education=40,
        action_verbs=1,
        quantifiable=0,
        words=1500,
        contact=ContactInfo(),
    )
    recs = generate_recommendations(result, "", "")
    assert _titles(recs) == [
        "Improve Keyword Match",
        "Add Quantifiable Results",
        "Complete Contact Information",
        "Use More Action Verbs",
        "Highlight Education",
        "Consider Condensing",
    ]
    ranks = [PRIORITY_RANK[r.priority] for r in recs]
    assert ranks == sorted(ranks)


def test_zero_quantifiable_resume_gets_impact_recommendation():
    resume = "Motivated engineer who enjoys building software"
    job = "Python developer wanted"
    result = calculate_score(resume, job, extract_keywords(resume), extract_keywords(job))
    assert result.metrics.quantifiable_achievements == 0

    recs = generate_recommendations(result, resume, job)
    impact = [r for r in recs if r.title == "Add Quantifiable Results"]
    assert len(impact) == 1
    assert impact[0].priority == "high"
    assert all(r.priority in PRIORITY_RANK for r in recs)
    ranks = [PRIORITY_RANK[r.priority] for r in recs]
    assert ranks == sorted(ranks)
