from typing import Any

from pydantic import BaseModel, ConfigDict


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


class _CategoryValues(_Result):
    keywords: float = 0.0
    experience: float = 0.0
    skills: float = 0.0
    format: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return {
            "keywords": self.keywords,
            "experience": self.experience,
            "skills": self.skills,
            "format": self.format,
        }


class CategoryScores(_CategoryValues):
    """Per-category scores, each 0-100."""


class AppliedWeights(_CategoryValues):
    """The policy weights a result was scored with."""


class BreakdownEntry(_Result):
    score: float
    weight: float
    contribution: int
    importance: str


class ScoringBreakdown(_Result):
    keyword_analysis: BreakdownEntry
    experience_analysis: BreakdownEntry
    skills_analysis: BreakdownEntry
    format_analysis: BreakdownEntry

    def entries(self) -> dict[str, BreakdownEntry]:
        return {name: getattr(self, name) for name in type(self).model_fields}


class ATSCompatibility(_Result):
    likely_to_pass_screening: bool = False
    compatibility_score: int = 0
    critical_issues: tuple[str, ...] = ()


class Recommendation(_Result):
    category: str = ""
    priority: str = ""
    suggestion: str = ""
    impact: str = ""


class ScoringResult(_Result):
    """Composite path output: weighted categories plus industry adjustment."""
    overall_score: int = 15
    match_level: str = "Poor"
    raw_score: float = 0.0  # weighted sum before industry adjustment
    exceptional_match: bool = False
    category_scores: CategoryScores = CategoryScores()
    weights: AppliedWeights = AppliedWeights()
    scoring_breakdown: ScoringBreakdown | None = None
    ats_compatibility: ATSCompatibility = ATSCompatibility()
    recommendations: tuple[Recommendation, ...] = ()
    scoring_method: str = "composite"


class ScoringAdjustments(_Result):
    missing_critical_skills: float = 0.0
    experience_gap: float = 0.0
    education_mismatch: float = 0.0
    format_issues: float = 0.0
    keyword_density: float = 0.0
    total_penalty: float = 0.0


class CalibratedResult(_Result):
    """Calibration path output.

    Every key of the calibrated analysis is carried through as an extra
    field; the declared fields below are the ones calibration sets.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    original_score: float
    overall_score: int
    match_level: str
    scoring_adjustments: ScoringAdjustments = ScoringAdjustments()
    explanation: str = ""
    recommendations: tuple[Any, ...] = ()
    scoring_method: str = "calibration"
