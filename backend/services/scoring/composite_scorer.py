"""Composite scoring: the canonical production path.

Pipeline:
1. Category scores (keywords, experience, skills, format)
2. Weighted sum with fixed policy weights
3. Industry adjustments (contact, title, exceptional-match ceiling, floor)
4. Breakdown, ATS compatibility and recommendations

Do not feed a composite result into ``calibrate_score``: both paths penalize
the same weaknesses under different rules.
"""

import copy
import logging
import math
from typing import Any

from models.responses import BreakdownEntry, CategoryScores, ScoringBreakdown, ScoringResult
from models.schemas.structured_analysis import StructuredAnalysis
from services.scoring.category_scorer import score_categories
from services.scoring.industry_adjuster import apply_industry_adjustments, ats_compatibility
from services.scoring.parsing import round_half_up, to_record
from services.scoring.policy import DEFAULT_POLICY, ScoringPolicy
from services.scoring.recommendations import composite_recommendations

logger = logging.getLogger(__name__)

# category -> (breakdown key, importance note)
_BREAKDOWN_NOTES: dict[str, tuple[str, str]] = {
    "keywords": ("keyword_analysis", "Critical - ATS systems primarily match on keywords"),
    "experience": ("experience_analysis", "High - Years and relevance determine qualification level"),
    "skills": ("skills_analysis", "High - Technical skills must match job requirements"),
    "format": ("format_analysis", "Medium - Poor formatting prevents ATS from parsing correctly"),
}


def weighted_score(scores: CategoryScores, policy: ScoringPolicy) -> float:
    weights = policy.weights.as_dict()
    return math.fsum(score * weights[name] for name, score in scores.as_dict().items())


def scoring_breakdown(scores: CategoryScores, policy: ScoringPolicy) -> ScoringBreakdown:
    weights = policy.weights.as_dict()
    breakdown: dict[str, BreakdownEntry] = {}
    for name, score in scores.as_dict().items():
        key, importance = _BREAKDOWN_NOTES[name]
        breakdown[key] = BreakdownEntry(
            score=score,
            weight=weights[name],
            contribution=round_half_up(score * weights[name]),
            importance=importance,
        )
    return ScoringBreakdown(**breakdown)


def parse_analysis(analysis: Any) -> StructuredAnalysis:
    if isinstance(analysis, StructuredAnalysis):
        return analysis
    record = to_record(analysis)
    if record is None:
        logger.warning("Analysis is not a record (%s); scoring with defaults", type(analysis).__name__)
        record = {}
    return StructuredAnalysis.model_validate(record)


def score_analysis(analysis: Any, policy: ScoringPolicy = DEFAULT_POLICY) -> ScoringResult:
    """Score a Structured Analysis on the composite path."""
    parsed = parse_analysis(analysis)

    scores = score_categories(parsed, policy)
    raw = weighted_score(scores, policy)
    adjusted, exceptional = apply_industry_adjustments(raw, parsed, policy)
    overall = round_half_up(adjusted)

    logger.debug(
        "Composite score %d (raw=%.2f, adjusted=%.2f, exceptional=%s)",
        overall, raw, adjusted, exceptional,
    )

    return ScoringResult(
        overall_score=overall,
        match_level=policy.composite_levels.level_for(overall),
        raw_score=raw,
        exceptional_match=exceptional,
        category_scores=scores,
        weights=policy.weights.as_dict(),
        scoring_breakdown=scoring_breakdown(scores, policy),
        ats_compatibility=ats_compatibility(scores, policy),
        recommendations=composite_recommendations(parsed, scores, policy),
    )


def enrich_analysis(analysis: Any, policy: ScoringPolicy = DEFAULT_POLICY) -> dict[str, Any]:
    """Merge a composite result into the raw analysis record.

    The score and match level replace the extraction's own estimates, the
    computed ATS compatibility is laid over the extracted one, and generated
    recommendations follow the extraction's recommendations.
    """
    record = copy.deepcopy(to_record(analysis) or {})
    result = score_analysis(record, policy)

    extracted_ats = record.get("ats_compatibility")
    extracted_recs = record.get("recommendations")

    return {
        **record,
        "overall_score": result.overall_score,
        "match_level": result.match_level,
        "ats_compatibility": {
            **(extracted_ats if isinstance(extracted_ats, dict) else {}),
            **result.ats_compatibility.model_dump(mode="json"),
        },
        "professional_scoring": result.model_dump(
            mode="json", include={"category_scores", "scoring_breakdown", "weights"}
        ),
        "recommendations": [
            *(extracted_recs if isinstance(extracted_recs, list) else []),
            *(r.model_dump() for r in result.recommendations),
        ],
        "scoring_method": result.scoring_method,
    }
