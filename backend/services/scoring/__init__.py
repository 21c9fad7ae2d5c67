"""Resume/job match scoring engine.

Two independent strategies; pick one per analysis:

- score_analysis: composite path (category scores, weights, industry
  adjustment). Canonical for user-facing scores.
- calibrate_score: penalty calibration of an existing overall_score.

Both are pure functions of their input and a ScoringPolicy.
"""

from services.scoring.composite_scorer import enrich_analysis, score_analysis
from services.scoring.penalty_calibrator import calibrate_score
from services.scoring.policy import DEFAULT_POLICY, ScoringPolicy

__all__ = [
    "DEFAULT_POLICY",
    "ScoringPolicy",
    "calibrate_score",
    "enrich_analysis",
    "score_analysis",
]
