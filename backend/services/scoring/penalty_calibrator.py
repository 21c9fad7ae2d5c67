"""Penalty calibration: the alternate scoring path.

Takes an analysis that already carries an ``overall_score`` (an LLM estimate,
or any other score) and subtracts penalties for missing critical skills,
experience and level gaps, education mismatches, weak ATS formatting and low
keyword match. The result is re-bounded and bucketed with this path's own
match-level thresholds, which differ from the composite path's.

Run exactly one of ``score_analysis`` or ``calibrate_score`` per analysis.
Calibrating a composite result penalizes the same weaknesses twice under
different rule sets; that combination is logged but not blocked.
"""

import copy
import logging
from typing import Any

from models.responses import CalibratedResult, ScoringAdjustments
from models.schemas.structured_analysis import StructuredAnalysis
from services.scoring.explanation import build_explanation
from services.scoring.parsing import (
    clamp_score,
    is_number,
    level_ordinal,
    parse_experience_gap,
    round_half_up,
    to_record,
)
from services.scoring.policy import DEFAULT_POLICY, ScoringPolicy
from services.scoring.recommendations import calibration_recommendations

logger = logging.getLogger(__name__)


def keyword_match_percentage(analysis: StructuredAnalysis) -> float | None:
    """Keyword match %, from keyword_analysis or derived from keyword_optimization."""
    if analysis.keyword_analysis is not None:
        return analysis.keyword_analysis.keyword_match_percentage
    if analysis.keyword_optimization is not None:
        return analysis.keyword_optimization.match_rate * 100
    return None


def _high_priority_missing(analysis: StructuredAnalysis) -> int:
    return sum(1 for s in analysis.missing_skills if s.priority == "high")


def calculate_penalties(analysis: StructuredAnalysis, policy: ScoringPolicy) -> ScoringAdjustments:
    rules = policy.calibration

    skills = (
        sum(1 for s in analysis.missing_critical_skills if s.impact == "high")
        * rules.critical_skill_penalty
        + _high_priority_missing(analysis) * rules.high_priority_skill_penalty
    )

    experience = 0.0
    exp = analysis.experience_analysis
    if exp is not None:
        gap_years = parse_experience_gap(exp.experience_gap) or 0.0
        if gap_years > 0:
            experience = min(gap_years * rules.gap_year_penalty, rules.gap_penalty_cap)
        if exp.required_level and exp.current_level:
            level_gap = level_ordinal(exp.required_level) - level_ordinal(exp.current_level)
            experience += max(level_gap, 0) * rules.level_gap_penalty

    education = 0.0
    edu = analysis.education_analysis
    if edu is not None:
        if edu.degree_match == "missing":
            education = rules.missing_degree_penalty
        elif edu.degree_match == "related":
            education = rules.related_degree_penalty
        education += len(edu.certifications_missing) * rules.missing_certification_penalty

    formatting = 0.0
    if analysis.format_analysis is not None:
        ats_score = analysis.format_analysis.ats_friendly_score
        if ats_score is None:
            ats_score = rules.format_default_score
        if ats_score < rules.format_baseline:
            formatting = (rules.format_baseline - ats_score) * rules.format_penalty_rate

    keywords = 0.0
    match_pct = keyword_match_percentage(analysis)
    if match_pct is not None and match_pct < rules.keyword_baseline:
        keywords = (rules.keyword_baseline - match_pct) * rules.keyword_penalty_rate

    return ScoringAdjustments(
        missing_critical_skills=skills,
        experience_gap=experience,
        education_mismatch=education,
        format_issues=formatting,
        keyword_density=keywords,
        total_penalty=skills + experience + education + formatting + keywords,
    )


def exceptional_criteria(analysis: StructuredAnalysis, policy: ScoringPolicy) -> dict[str, bool]:
    """The calibration path's own exceptional-match criteria (need 4 of 5)."""
    rules = policy.calibration
    exp = analysis.experience_analysis
    edu = analysis.education_analysis
    fmt = analysis.format_analysis

    missing = len(analysis.missing_critical_skills) + _high_priority_missing(analysis)
    ats_score = fmt.ats_friendly_score if fmt is not None else None

    return {
        "perfect_skills_match": missing == 0,
        "perfect_experience_match": (
            exp is not None and exp.industry_match == "exact" and not exp.experience_gap
        ),
        "perfect_education_match": (
            edu is not None and edu.degree_match == "exact" and not edu.certifications_missing
        ),
        "excellent_format": (ats_score or 0) >= rules.exceptional_format_score,
        "high_keyword_match": (
            (keyword_match_percentage(analysis) or 0) >= rules.exceptional_keyword_percentage
        ),
    }


def has_minor_issues(analysis: StructuredAnalysis, policy: ScoringPolicy) -> bool:
    rules = policy.calibration

    medium_gaps = sum(1 for s in analysis.missing_skills if s.priority == "medium")

    # An unassessed format or keyword match is not counted as an issue
    fmt = analysis.format_analysis
    ats_score = fmt.ats_friendly_score if fmt is not None else None
    match_pct = keyword_match_percentage(analysis)

    return (
        medium_gaps > rules.minor_medium_skill_gaps
        or (ats_score is not None and ats_score < rules.minor_format_score)
        or (match_pct is not None and match_pct < rules.minor_keyword_percentage)
    )


def apply_scoring_bounds(score: float, analysis: StructuredAnalysis, policy: ScoringPolicy) -> float:
    rules = policy.calibration

    if score > rules.ceiling_threshold:
        met = sum(exceptional_criteria(analysis, policy).values())
        if met < rules.exceptional_min_criteria:
            score = min(score, rules.ceiling_cap)

    # Applied after the ceiling: a score capped to 75 can still be capped to 55
    if rules.minor_issue_floor < score <= rules.ceiling_threshold and has_minor_issues(analysis, policy):
        score = min(score, rules.minor_issue_cap)

    return score


def calibrate_score(analysis: Any, policy: ScoringPolicy = DEFAULT_POLICY) -> Any:
    """Recalibrate an already-scored analysis.

    Returns the input object itself, untouched, when it is not a record or
    has no finite numeric ``overall_score``. Otherwise returns a new
    CalibratedResult carrying every input key plus the calibration fields.
    """
    record = to_record(analysis)
    if record is None or not is_number(record.get("overall_score")):
        logger.debug("Nothing to calibrate: no numeric overall_score")
        return analysis

    record = copy.deepcopy(record)

    if record.get("scoring_method") == "composite":
        logger.warning(
            "Calibrating a composite-scored analysis; weaknesses already penalized "
            "by industry adjustment will be penalized again"
        )

    parsed = StructuredAnalysis.model_validate(record)
    original = record["overall_score"]

    adjustments = calculate_penalties(parsed, policy)
    calibrated = clamp_score(original - adjustments.total_penalty)
    calibrated = apply_scoring_bounds(calibrated, parsed, policy)
    overall = round_half_up(calibrated)

    logger.debug(
        "Calibrated %s -> %d (penalty=%.1f)", original, overall, adjustments.total_penalty
    )

    extracted_recs = record.get("recommendations")
    generated = calibration_recommendations(parsed, adjustments, policy)

    return CalibratedResult.model_validate(
        {
            **record,
            "original_score": original,
            "overall_score": overall,
            "match_level": policy.calibration_levels.level_for(overall),
            "scoring_adjustments": adjustments,
            "explanation": build_explanation(overall, adjustments, policy),
            "recommendations": [
                *(extracted_recs if isinstance(extracted_recs, list) else []),
                *(r.model_dump() for r in generated),
            ],
            "scoring_method": "calibration",
        }
    )
