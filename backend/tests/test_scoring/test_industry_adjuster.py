"""Tests for industry adjustments, the exceptional-match gate and ATS compatibility."""

import pytest

from models.responses import CategoryScores
from models.schemas.structured_analysis import StructuredAnalysis
from services.scoring.industry_adjuster import (
    apply_industry_adjustments,
    ats_compatibility,
    exceptional_criteria,
    is_exceptional_match,
)
from services.scoring.policy import DEFAULT_POLICY


def _make_analysis(**sections) -> StructuredAnalysis:
    return StructuredAnalysis.model_validate(sections)


class TestContactAndTitle:
    def test_no_sections_no_adjustment(self):
        adjusted, _ = apply_industry_adjustments(50, _make_analysis(), DEFAULT_POLICY)
        assert adjusted == 50

    def test_missing_email_and_phone(self):
        analysis = _make_analysis(contact_analysis={"has_linkedin": True})
        adjusted, _ = apply_industry_adjustments(50, analysis, DEFAULT_POLICY)
        assert adjusted == 25

    def test_complete_contact_bonus(self):
        analysis = _make_analysis(contact_analysis={
            "has_email": True, "has_phone": True, "has_linkedin": True,
        })
        adjusted, _ = apply_industry_adjustments(50, analysis, DEFAULT_POLICY)
        assert adjusted == 55

    def test_email_and_phone_without_linkedin(self):
        analysis = _make_analysis(contact_analysis={"has_email": True, "has_phone": True})
        adjusted, _ = apply_industry_adjustments(50, analysis, DEFAULT_POLICY)
        assert adjusted == 50

    @pytest.mark.parametrize(
        "title_match, expected",
        [("exact", 58), ("Similar", 53), ("different", 45), (None, 45)],
    )
    def test_title_alignment(self, title_match, expected):
        analysis = _make_analysis(job_title_analysis={"title_match": title_match})
        adjusted, _ = apply_industry_adjustments(50, analysis, DEFAULT_POLICY)
        assert adjusted == expected


class TestBounds:
    def test_floor(self):
        analysis = _make_analysis(
            contact_analysis={},
            job_title_analysis={"title_match": "different"},
        )
        adjusted, _ = apply_industry_adjustments(20, analysis, DEFAULT_POLICY)
        assert adjusted == 15

    def test_ceiling_without_exceptional_match(self):
        adjusted, exceptional = apply_industry_adjustments(95, _make_analysis(), DEFAULT_POLICY)
        assert adjusted == 75
        assert exceptional is False

    def test_exactly_eighty_is_not_capped(self):
        adjusted, _ = apply_industry_adjustments(80, _make_analysis(), DEFAULT_POLICY)
        assert adjusted == 80

    def test_never_above_hundred(self, scenario_a):
        analysis = StructuredAnalysis.model_validate(scenario_a)
        analysis = analysis.model_copy(update={"hard_skills": [
            s.model_copy(update={"found_in_resume": True}) for s in analysis.hard_skills
        ]})
        adjusted, exceptional = apply_industry_adjustments(99, analysis, DEFAULT_POLICY)
        assert exceptional is True
        assert adjusted == 100


class TestExceptionalGate:
    def test_scenario_a_meets_two_criteria(self, scenario_a):
        analysis = StructuredAnalysis.model_validate(scenario_a)
        assert sorted(exceptional_criteria(analysis, DEFAULT_POLICY)) == ["experience", "format"]
        assert is_exceptional_match(analysis, DEFAULT_POLICY) is False

    def test_three_criteria_pass(self, scenario_a):
        scenario_a["keyword_optimization"]["total_matched_keywords"] = 9
        analysis = StructuredAnalysis.model_validate(scenario_a)
        assert sorted(exceptional_criteria(analysis, DEFAULT_POLICY)) == ["experience", "format", "keywords"]
        assert is_exceptional_match(analysis, DEFAULT_POLICY) is True

    def test_skills_criterion_needs_required_skills(self):
        analysis = _make_analysis(hard_skills=[{"skill": "Git", "found_in_resume": True}])
        assert "skills" not in exceptional_criteria(analysis, DEFAULT_POLICY)

    def test_missing_compatibility_score_does_not_count(self):
        analysis = _make_analysis(ats_compatibility={"format_issues": []})
        assert "format" not in exceptional_criteria(analysis, DEFAULT_POLICY)


class TestATSCompatibility:
    def test_strong_scores(self):
        scores = CategoryScores(keywords=73.3, experience=87, skills=74, format=100)
        ats = ats_compatibility(scores, DEFAULT_POLICY)
        # 73.3*0.5 + 100*0.3 + 83.575*0.2
        assert ats.compatibility_score == 83
        assert ats.likely_to_pass_screening is True
        assert ats.critical_issues == ()

    def test_critical_issues(self):
        scores = CategoryScores(keywords=39, experience=39, skills=29, format=49)
        ats = ats_compatibility(scores, DEFAULT_POLICY)
        assert ats.likely_to_pass_screening is False
        assert len(ats.critical_issues) == 4
        assert ats.critical_issues[0].startswith("Low keyword match")

    def test_thresholds_are_strict(self):
        scores = CategoryScores(keywords=40, experience=40, skills=30, format=50)
        assert ats_compatibility(scores, DEFAULT_POLICY).critical_issues == ()
