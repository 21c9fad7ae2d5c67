from models.responses import CategoryScores, ScoringAdjustments
from models.schemas.structured_analysis import StructuredAnalysis
from services.scoring.policy import DEFAULT_POLICY, RecommendationRules, ScoringPolicy
from services.scoring.recommendations import (
    calibration_recommendations,
    composite_recommendations,
)

_STRONG = CategoryScores(keywords=80, experience=80, skills=80, format=80)


def _missing_skills(*names: str) -> list[dict]:
    return [{"skill": n, "found_in_resume": False, "required_for_job": True} for n in names]


class TestComposite:
    def test_strong_scores_get_nothing(self):
        assert composite_recommendations(StructuredAnalysis(), _STRONG, DEFAULT_POLICY) == []

    def test_keyword_suggestion_names_first_three(self):
        analysis = StructuredAnalysis.model_validate({
            "keyword_optimization": {"critical_keywords_missing": ["kafka", "", "rust", "grpc", "helm"]},
        })
        scores = _STRONG.model_copy(update={"keywords": 42.6})
        [rec] = composite_recommendations(analysis, scores, DEFAULT_POLICY)
        assert rec.category == "keywords"
        assert rec.suggestion == (
            "Increase keyword match from 43% to 70%+. Add missing critical keywords: kafka, rust, grpc"
        )

    def test_skills_suggestion(self):
        analysis = StructuredAnalysis.model_validate({"hard_skills": _missing_skills("Go", "Terraform")})
        scores = _STRONG.model_copy(update={"skills": 20})
        [rec] = composite_recommendations(analysis, scores, DEFAULT_POLICY)
        assert rec.suggestion == "Add missing required skills: Go, Terraform"
        assert rec.impact == "high"

    def test_skills_suggestion_without_names(self):
        scores = _STRONG.model_copy(update={"skills": 20})
        [rec] = composite_recommendations(StructuredAnalysis(), scores, DEFAULT_POLICY)
        assert rec.suggestion == "Add missing required skills: Review job requirements"

    def test_format_is_medium_priority(self):
        scores = _STRONG.model_copy(update={"format": 59})
        [rec] = composite_recommendations(StructuredAnalysis(), scores, DEFAULT_POLICY)
        assert (rec.category, rec.priority, rec.impact) == ("format", "medium", "medium")

    def test_thresholds_are_strict(self):
        scores = CategoryScores(keywords=60, experience=50, skills=40, format=60)
        assert composite_recommendations(StructuredAnalysis(), scores, DEFAULT_POLICY) == []

    def test_named_item_limit_from_policy(self):
        policy = ScoringPolicy(recommendations=RecommendationRules(max_named_items=1))
        analysis = StructuredAnalysis.model_validate({"hard_skills": _missing_skills("Go", "Terraform")})
        scores = _STRONG.model_copy(update={"skills": 20})
        [rec] = composite_recommendations(analysis, scores, policy)
        assert rec.suggestion.endswith(": Go")


class TestCalibration:
    def test_no_penalties_no_recommendations(self):
        assert calibration_recommendations(StructuredAnalysis(), ScoringAdjustments(), DEFAULT_POLICY) == []

    def test_education_mentions_missing_certifications(self):
        analysis = StructuredAnalysis.model_validate({
            "education_analysis": {"degree_match": "related", "certifications_missing": ["CKA"]},
        })
        adj = ScoringAdjustments(education_mismatch=15, total_penalty=15)
        [rec] = calibration_recommendations(analysis, adj, DEFAULT_POLICY)
        assert rec.category == "education"
        assert rec.suggestion.endswith("Consider adding relevant certifications: CKA")

    def test_each_component(self):
        adj = ScoringAdjustments(
            missing_critical_skills=15,
            experience_gap=10,
            education_mismatch=10,
            format_issues=10,
            keyword_density=16,
            total_penalty=61,
        )
        recs = calibration_recommendations(StructuredAnalysis(), adj, DEFAULT_POLICY)
        assert [r.category for r in recs] == ["skills", "experience", "education", "format", "keywords"]
        assert recs[-1].suggestion == "Tailor your resume to include more job-specific terminology"

    def test_component_at_threshold_is_skipped(self):
        adj = ScoringAdjustments(missing_critical_skills=10, format_issues=5, total_penalty=15)
        assert calibration_recommendations(StructuredAnalysis(), adj, DEFAULT_POLICY) == []
