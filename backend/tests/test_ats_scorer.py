import pytest

from models.schemas.keyword_set import KeywordSet, SkillRecord
from services.ats_scorer import (
    DEFAULT_SKILLS_SCORE,
    analyze_content_quality,
    calculate_education_score,
    calculate_experience_score,
    calculate_format_score,
    calculate_keyword_score,
    calculate_readability_score,
    calculate_score,
    calculate_skills_score,
    count_quantifiable_achievements,
    get_score_grade,
)
from services.keyword_extractor import extract_keywords

SCENARIO_RESUME = (
    "Experienced Python developer with 5 years experience. Led team of 5. "
    "Increased revenue by 30%. Skills: Python, SQL, AWS. "
    "Bachelor's degree in Computer Science."
)
SCENARIO_JOB = (
    "Looking for Python developer with 3+ years experience. "
    "Required: Python, SQL. Bachelor's degree required."
)


def _score(resume: str, job: str, industry: str = "general"):
    return calculate_score(resume, job, extract_keywords(resume), extract_keywords(job), industry)


def _python_skill() -> SkillRecord:
    return SkillRecord(skill="python", category="programming", count=1)


# --- Keyword Match ---


class TestKeywordScore:
    def test_match_rate_with_skills_bonus(self):
        resume = KeywordSet(keywords=["python", "docker"], skills=[_python_skill()])
        job = KeywordSet(keywords=["python", "kubernetes"], skills=[_python_skill()])
        result = calculate_keyword_score(resume, job)
        assert result.match_rate == 50.0
        assert result.skills_match_rate == 100.0
        assert result.score == 60
        assert result.matched_keywords == ["python"]
        assert result.missing_keywords == ["kubernetes"]

    def test_no_bonus_without_skill_overlap(self):
        resume = KeywordSet(keywords=["python"])
        job = KeywordSet(keywords=["python", "kubernetes"], skills=[_python_skill()])
        assert calculate_keyword_score(resume, job).score == 50

    def test_empty_job(self):
        assert calculate_keyword_score(KeywordSet(), KeywordSet()).score == 0


# --- Skills Alignment ---


class TestSkillsScore:
    def test_full_coverage(self):
        result = calculate_skills_score("Python and SQL", "Python, SQL required")
        assert result.score == 100
        assert result.coverage == 100
        assert result.critical_matched == 2

    def test_default_when_job_lists_no_skills(self):
        result = calculate_skills_score("Python, Docker, AWS", "We need a great communicator")
        assert result.score == DEFAULT_SKILLS_SCORE == 75
        assert result.analysis.total_resume_skills == 3

    def test_partial_coverage_lists_missing(self):
        result = calculate_skills_score("Python only", "Python, Docker, Kubernetes, AWS")
        assert result.coverage == 25
        assert {s.skill for s in result.analysis.missing} == {"docker", "kubernetes", "aws"}
        assert result.analysis.categories == {"programming": 1}

    def test_breadth_bonus(self):
        resume = "Python, SQL, Docker, Kubernetes, AWS, Git, Jira, React"
        job = "Python, SQL, Go"
        result = calculate_skills_score(resume, job)
        # 2 of 3 covered, 6 extra skills
        assert result.coverage == 67
        assert result.score == pytest.approx(200 / 3 + 10)

    def test_no_bonus_with_exactly_five_extra_skills(self):
        resume = "Python, SQL, Docker, Kubernetes, AWS, Git, Jira"
        job = "Python, SQL, Go"
        result = calculate_skills_score(resume, job)
        assert result.coverage == 67
        assert result.score == pytest.approx(200 / 3)

    def test_no_bonus_at_half_coverage(self):
        resume = "Python, Docker, Kubernetes, AWS, Git, Jira, React"
        job = "Python, SQL"
        assert calculate_skills_score(resume, job).score == 50


# --- Experience Relevance ---


class TestExperienceScore:
    def test_meets_requirement(self):
        result = calculate_experience_score("8 years of experience", "5+ years of experience")
        assert result.score == 100
        assert result.analysis.meets_requirement

    def test_close_to_requirement(self):
        result = calculate_experience_score("4 years of experience", "5+ years of experience")
        assert result.score == 80
        assert result.analysis.meets_requirement

    def test_below_requirement(self):
        result = calculate_experience_score("2 years of experience", "5+ years of experience")
        assert result.score == 60
        assert not result.analysis.meets_requirement

    def test_resume_silent_on_years(self):
        assert calculate_experience_score("Software developer", "5+ years of experience").score == 50

    def test_no_requirement_with_stated_years(self):
        assert calculate_experience_score("3 years of experience", "Developer wanted").score == 85

    def test_neither_side_states_years(self):
        assert calculate_experience_score("Software developer", "Developer wanted").score == 70

    def test_action_verb_bonus(self):
        resume = "Developed, implemented, designed, built and delivered apps."
        result = calculate_experience_score(resume, "Developer wanted")
        assert result.analysis.has_action_verbs
        assert not result.analysis.has_leadership
        assert result.score == 80

    def test_leadership_is_a_substring_test(self):
        result = calculate_experience_score("Skilled developer", "Developer wanted")
        assert result.analysis.has_leadership
        assert result.score == 75


# --- Education Match ---


class TestEducationScore:
    def test_one_level_below(self):
        assert calculate_education_score("Bachelor of Arts", "Master's degree required").score == 75

    def test_far_below(self):
        assert calculate_education_score("Bachelor of Arts", "PhD required").score == 60

    def test_no_degree_against_requirement(self):
        result = calculate_education_score("Self taught programmer", "Bachelor's degree required")
        assert result.score == 40
        assert not result.analysis.meets_requirement

    def test_no_requirement(self):
        result = calculate_education_score("Bachelor of Arts", "Developer wanted")
        assert result.score == 90
        assert not result.analysis.meets_requirement
        result = calculate_education_score("Self taught programmer", "Developer wanted")
        assert result.score == 70
        assert not result.analysis.meets_requirement

    def test_meets_stated_requirement(self):
        result = calculate_education_score("Master's degree in Physics", "Bachelor's degree required")
        assert result.score == 100
        assert result.analysis.meets_requirement

    def test_field_bonus(self):
        result = calculate_education_score(
            "Bachelor of Science in Mathematics", "Master's in Mathematics"
        )
        assert result.score == 85


# --- Format & Readability ---


def _well_formatted_resume() -> str:
    bullets = "\n".join(f"- Increased sales by {n}0%" for n in range(1, 6))
    filler = " ".join(["delivery"] * 350)
    return (
        "Email: jane@example.com\n"
        f"Experience\n{bullets}\n"
        "Education\nSkills\n"
        f"{filler}"
    )


class TestFormatScore:
    def test_well_formatted(self):
        result = calculate_format_score(_well_formatted_resume())
        assert result.score == 100
        assert result.analysis.issues == []
        assert "Optimal resume length" in result.analysis.strengths
        assert all(result.sections.values())

    def test_minimal_text(self):
        result = calculate_format_score("Hello world")
        assert result.score == 30
        assert result.analysis.issues == [
            "Missing contact section",
            "Missing experience section",
            "Missing education section",
            "Missing skills section",
            "Resume may be too short",
            "Consider adding more bullet points",
            "Add more quantifiable results",
        ]

    def test_special_characters_penalised(self):
        result = calculate_format_score("Hello ● world")
        assert result.score == 10
        assert "Contains special characters that may confuse ATS" in result.analysis.issues

    def test_too_long(self):
        result = calculate_format_score(" ".join(["word"] * 1200))
        assert "Resume may be too long" in result.analysis.issues
        assert result.score == 35

    def test_bullet_on_first_line_counts(self):
        text = "\n".join(["- one", "- two", "- three", "- four", "- five"])
        assert "Good use of bullet points" in calculate_format_score(text).analysis.strengths


# --- Derived metrics ---


def test_count_quantifiable_achievements():
    assert count_quantifiable_achievements("Increased revenue by 30%") == 2
    assert count_quantifiable_achievements("Reduced costs by 15") == 1
    assert count_quantifiable_achievements("Managed a $5,000 budget") == 1
    assert count_quantifiable_achievements("Served 3 million users") == 1
    assert count_quantifiable_achievements("Over 2 years") == 1


def test_count_quantifiable_achievements_none():
    assert count_quantifiable_achievements("Motivated engineer who enjoys building software") == 0


def test_analyze_content_quality():
    quality = analyze_content_quality("Developed APIs. Led teams! Built tools?")
    assert quality.sentence_count == 3
    assert quality.word_count == 6
    assert quality.avg_sentence_length == 2
    assert quality.active_voice_ratio == 100
    assert quality.readability_score == 95
    assert not quality.uses_star_method


def test_analyze_content_quality_star_method():
    text = "Achieved targets. Delivered on time. Implemented CI. Responsible for QA."
    quality = analyze_content_quality(text)
    assert quality.star_indicator_count == 4
    assert quality.uses_star_method


def test_calculate_readability_score():
    assert calculate_readability_score(22, 0) == 90
    assert calculate_readability_score(30, 60) == 90
    assert calculate_readability_score(15, 10) == 100
    assert calculate_readability_score(5, 80) == 95


@pytest.mark.parametrize(
    "score,grade",
    [(100, "A"), (90, "A"), (89, "B"), (80, "B"), (79, "C"), (70, "C"), (60, "D"), (59, "F"), (0, "F")],
)
def test_get_score_grade(score, grade):
    assert get_score_grade(score) == grade


# --- Aggregate ---


def test_calculate_score_scenario():
    result = _score(SCENARIO_RESUME, SCENARIO_JOB)
    assert result.breakdown.experience_relevance.score == 100
    assert result.breakdown.education_match.score == 100
    assert result.metrics.skills_coverage == 100
    assert result.skills_analysis.missing == []


def test_calculate_score_empty_inputs():
    result = calculate_score("", "", KeywordSet(), KeywordSet())
    assert result.breakdown.keyword_match.score == 0
    assert result.breakdown.skills_alignment.score == 75
    assert result.breakdown.experience_relevance.score == 70
    assert result.breakdown.education_match.score == 70
    assert result.breakdown.format_readability.score == 30
    assert result.overall_score == 37
    assert result.score_grade == "F"
    assert result.metrics.resume_length.words == 0


@pytest.mark.parametrize(
    "resume,job",
    [
        ("", ""),
        (SCENARIO_RESUME, SCENARIO_JOB),
        ("Python", ""),
        ("", SCENARIO_JOB),
        (_well_formatted_resume(), SCENARIO_JOB),
    ],
)
def test_overall_matches_weighted_breakdown(resume, job):
    result = _score(resume, job)
    b = result.breakdown
    weighted = (
        40 * b.keyword_match.score
        + 20 * b.skills_alignment.score
        + 15 * b.experience_relevance.score
        + 10 * b.education_match.score
        + 15 * b.format_readability.score
    )
    assert isinstance(result.overall_score, int)
    assert 0 <= result.overall_score <= 100
    assert result.overall_score == (weighted + 50) // 100
    assert result.score_grade == get_score_grade(result.overall_score)


def test_breakdown_weights():
    b = _score(SCENARIO_RESUME, SCENARIO_JOB).breakdown
    assert [
        b.keyword_match.weight,
        b.skills_alignment.weight,
        b.experience_relevance.weight,
        b.education_match.weight,
        b.format_readability.weight,
    ] == [40, 20, 15, 10, 15]
    assert b.experience_relevance.weighted_score == 15


def test_industry_echoed():
    assert _score(SCENARIO_RESUME, SCENARIO_JOB, industry="fintech").industry == "fintech"
