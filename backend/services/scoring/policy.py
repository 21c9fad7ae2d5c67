"""Scoring policy: every weight, bonus, penalty and threshold in one place.

Both the composite scorer and the penalty calibrator read their constants from
a ScoringPolicy instance. The policy is frozen; construct a new one, e.g.
``ScoringPolicy(weights=CategoryWeights(keywords=0.5, format=0.05))``, to try
different values.
"""

import math

from pydantic import BaseModel, ConfigDict, model_validator


class _PolicySection(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class CategoryWeights(_PolicySection):
    keywords: float = 0.40
    experience: float = 0.25
    skills: float = 0.20
    format: float = 0.15

    @model_validator(mode="after")
    def _weights_sum_to_one(self) -> "CategoryWeights":
        total = math.fsum(self.as_dict().values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"category weights must sum to 1.0, got {total}")
        return self

    def as_dict(self) -> dict[str, float]:
        return {
            "keywords": self.keywords,
            "experience": self.experience,
            "skills": self.skills,
            "format": self.format,
        }


class CategoryDefaults(_PolicySection):
    """Scores used when the section a category needs is absent."""
    keywords: float = 30
    experience: float = 40
    skills: float = 25
    format: float = 50


class KeywordRules(_PolicySection):
    match_points: float = 60
    critical_points: float = 25
    density_points_max: float = 15
    stuffing_threshold: float = 3  # keyword density %, above this is stuffing
    stuffing_penalty_per_point: float = 5


class ExperienceRules(_PolicySection):
    years_met_points: float = 40
    years_exceeded_bonus: float = 10
    years_exceeded_ratio: float = 1.5
    years_partial_points: float = 30
    level_met_points: float = 25
    level_partial_points: float = 15
    clear_progression_points: float = 20
    moderate_progression_points: float = 12
    progression_default: float = 5
    direct_industry_points: float = 15
    related_industry_points: float = 8
    industry_default: float = 2

    def progression_points(self, progression: str | None) -> float:
        if progression == "clear":
            return self.clear_progression_points
        if progression == "moderate":
            return self.moderate_progression_points
        return self.progression_default

    def industry_points(self, industry: str | None) -> float:
        if industry == "direct":
            return self.direct_industry_points
        if industry == "related":
            return self.related_industry_points
        return self.industry_default


class SkillsRules(_PolicySection):
    required_points: float = 60
    no_required_points: float = 30
    overall_points: float = 25
    category_points: float = 3
    category_bonus_max: float = 15


class FormatRules(_PolicySection):
    essential_points: float = 50
    beneficial_points: float = 30
    chronological_points: float = 20
    format_issue_penalty: float = 5
    parsing_concern_penalty: float = 3


class IndustryRules(_PolicySection):
    missing_email_penalty: float = 15
    missing_phone_penalty: float = 10
    complete_contact_bonus: float = 5
    exact_title_points: float = 8
    similar_title_points: float = 3
    title_default: float = -5
    ceiling_threshold: float = 80
    ceiling_cap: float = 75
    floor: float = 15
    max_score: float = 100
    # Exceptional-match gate
    exceptional_min_criteria: int = 3
    exceptional_keyword_rate: float = 0.9
    exceptional_compatibility_score: float = 90

    def title_points(self, title_match: str | None) -> float:
        if title_match == "exact":
            return self.exact_title_points
        if title_match == "similar":
            return self.similar_title_points
        return self.title_default


class ATSRules(_PolicySection):
    keyword_weight: float = 0.5
    format_weight: float = 0.3
    average_weight: float = 0.2
    pass_threshold: float = 60
    low_keywords: float = 40
    low_format: float = 50
    low_skills: float = 30
    low_experience: float = 40


class MatchLevelThresholds(_PolicySection):
    excellent: float
    good: float
    fair: float

    def level_for(self, score: float) -> str:
        if score >= self.excellent:
            return "Excellent"
        if score >= self.good:
            return "Good"
        if score >= self.fair:
            return "Fair"
        return "Poor"


class RecommendationRules(_PolicySection):
    keywords_below: float = 60
    experience_below: float = 50
    skills_below: float = 40
    format_below: float = 60
    max_named_items: int = 3


class CalibrationRules(_PolicySection):
    critical_skill_penalty: float = 15
    high_priority_skill_penalty: float = 10
    gap_year_penalty: float = 5
    gap_penalty_cap: float = 25
    level_gap_penalty: float = 10
    missing_degree_penalty: float = 20
    related_degree_penalty: float = 10
    missing_certification_penalty: float = 5
    format_baseline: float = 70
    format_penalty_rate: float = 0.5
    format_default_score: float = 50
    keyword_baseline: float = 50
    keyword_penalty_rate: float = 0.8
    # Bounds
    ceiling_threshold: float = 80
    ceiling_cap: float = 75
    exceptional_min_criteria: int = 4
    exceptional_format_score: float = 90
    exceptional_keyword_percentage: float = 80
    minor_issue_floor: float = 60  # exclusive lower edge of the minor-issue band
    minor_issue_cap: float = 55
    minor_medium_skill_gaps: int = 2
    minor_format_score: float = 80
    minor_keyword_percentage: float = 65


class ExplanationRules(_PolicySection):
    strong_score: float = 60
    moderate_score: float = 40
    itemize_above: float = 10
    skills_above: float = 10
    experience_above: float = 5
    education_above: float = 5
    format_above: float = 5
    keyword_above: float = 5


class ScoringPolicy(_PolicySection):
    weights: CategoryWeights = CategoryWeights()
    defaults: CategoryDefaults = CategoryDefaults()
    keywords: KeywordRules = KeywordRules()
    experience: ExperienceRules = ExperienceRules()
    skills: SkillsRules = SkillsRules()
    format: FormatRules = FormatRules()
    industry: IndustryRules = IndustryRules()
    ats: ATSRules = ATSRules()
    recommendations: RecommendationRules = RecommendationRules()
    calibration: CalibrationRules = CalibrationRules()
    explanation: ExplanationRules = ExplanationRules()

    # The two strategies bucket scores differently; both are kept.
    composite_levels: MatchLevelThresholds = MatchLevelThresholds(
        excellent=75, good=60, fair=45
    )
    calibration_levels: MatchLevelThresholds = MatchLevelThresholds(
        excellent=75, good=55, fair=35
    )


DEFAULT_POLICY = ScoringPolicy()
