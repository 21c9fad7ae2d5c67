"""Shared test configuration, pytest markers and structured analyses."""

import pytest


def _scenario_a() -> dict:
    """Strong candidate: 8/10 keywords, 4/5 required skills, complete resume.

    Category scores: keywords 73.3, experience 87, skills 74, format 100.
    Weighted raw score 80.87; +5 contact, +8 title -> 93.87 before the ceiling.
    Exceptional criteria met: experience exceeds, ATS compatibility 95 (2 of 4).
    """
    return {
        "contact_analysis": {
            "has_phone": True,
            "has_email": True,
            "has_location": True,
            "has_linkedin": True,
        },
        "job_title_analysis": {
            "current_title": "Backend Engineer",
            "target_title": "Backend Engineer",
            "title_match": "exact",
        },
        "keyword_optimization": {
            "total_job_keywords": 10,
            "total_matched_keywords": 8,
            "critical_keywords_matched": ["python", "aws", "docker"],
            "critical_keywords_missing": [],
            "keyword_density": 2,
        },
        "experience_analysis": {
            "required_years": "3 years",
            "total_years_experience": "5 years",
            "required_level": "mid",
            "current_level": "senior",
            "experience_match": "exceeds",
            "career_progression": "moderate",
        },
        "hard_skills": [
            {"skill": "Python", "found_in_resume": True, "required_for_job": True, "skill_category": "programming"},
            {"skill": "Go", "found_in_resume": True, "required_for_job": True, "skill_category": "programming"},
            {"skill": "AWS", "found_in_resume": True, "required_for_job": True, "skill_category": "cloud"},
            {"skill": "GCP", "found_in_resume": True, "required_for_job": True, "skill_category": "cloud"},
            {"skill": "Kubernetes", "found_in_resume": False, "required_for_job": True, "skill_category": "cloud"},
        ],
        "resume_structure": {
            "has_professional_summary": True,
            "has_skills_section": True,
            "has_work_experience": True,
            "has_education_section": True,
            "has_contact_info": True,
            "chronological_format": True,
        },
        "ats_compatibility": {
            "compatibility_score": 95,
            "format_issues": [],
            "parsing_concerns": [],
        },
    }


def _scenario_b() -> dict:
    """LLM-scored analysis at 70 carrying 50 points of penalties."""
    return {
        "overall_score": 70,
        "missing_skills": [
            {"skill": "Kubernetes", "priority": "high"},
            {"skill": "Terraform", "priority": "high"},
        ],
        "experience_analysis": {
            "experience_gap": "2 years",
            "required_level": "senior",
            "current_level": "mid",
        },
        "education_analysis": {"degree_match": "related"},
    }


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through the FastAPI test client"
    )


@pytest.fixture
def scenario_a() -> dict:
    return _scenario_a()


@pytest.fixture
def scenario_b() -> dict:
    return _scenario_b()
