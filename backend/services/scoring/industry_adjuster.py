"""Industry adjustments for the composite path.

Turns the raw weighted score into an industry-plausible one:
1. Contact penalties (missing email/phone) and a complete-contact bonus
2. Job title alignment bonus or penalty
3. Ceiling: above 80 only when the Exceptional-Match Gate passes, else 75
4. Bounds: never below 15, never above 100
"""

import logging

from models.responses import ATSCompatibility, CategoryScores
from models.schemas.structured_analysis import StructuredAnalysis
from services.scoring.parsing import clamp_score, round_half_up
from services.scoring.policy import ScoringPolicy

logger = logging.getLogger(__name__)


def exceptional_criteria(analysis: StructuredAnalysis, policy: ScoringPolicy) -> list[str]:
    """Names of the near-perfect criteria this analysis satisfies."""
    rules = policy.industry
    met: list[str] = []

    kw = analysis.keyword_optimization
    if kw is not None and kw.match_rate >= rules.exceptional_keyword_rate:
        met.append("keywords")

    exp = analysis.experience_analysis
    if exp is not None and exp.experience_match == "exceeds":
        met.append("experience")

    required = [s for s in analysis.hard_skills if s.required_for_job]
    if required and all(s.found_in_resume for s in required):
        met.append("skills")

    ats = analysis.ats_compatibility
    if (
        ats is not None
        and ats.compatibility_score is not None
        and ats.compatibility_score >= rules.exceptional_compatibility_score
    ):
        met.append("format")

    return met


def is_exceptional_match(analysis: StructuredAnalysis, policy: ScoringPolicy) -> bool:
    return len(exceptional_criteria(analysis, policy)) >= policy.industry.exceptional_min_criteria


def apply_industry_adjustments(
    score: float, analysis: StructuredAnalysis, policy: ScoringPolicy
) -> tuple[float, bool]:
    """Adjust a raw weighted score. Returns (adjusted score, gate passed)."""
    rules = policy.industry
    adjusted = score

    contact = analysis.contact_analysis
    if contact is not None:
        if not contact.has_email:
            adjusted -= rules.missing_email_penalty
        if not contact.has_phone:
            adjusted -= rules.missing_phone_penalty
        if contact.has_email and contact.has_phone and contact.has_linkedin:
            adjusted += rules.complete_contact_bonus

    title = analysis.job_title_analysis
    if title is not None:
        adjusted += rules.title_points(title.title_match)

    exceptional = is_exceptional_match(analysis, policy)
    if adjusted > rules.ceiling_threshold and not exceptional:
        logger.debug("Capping %.1f at %s: exceptional-match gate not met", adjusted, rules.ceiling_cap)
        adjusted = min(adjusted, rules.ceiling_cap)

    adjusted = clamp_score(adjusted, rules.floor, rules.max_score)
    return adjusted, exceptional


def critical_issues(scores: CategoryScores, policy: ScoringPolicy) -> list[str]:
    rules = policy.ats
    issues: list[str] = []
    if scores.keywords < rules.low_keywords:
        issues.append("Low keyword match - resume may not appear in searches")
    if scores.format < rules.low_format:
        issues.append("Format issues may prevent proper parsing")
    if scores.skills < rules.low_skills:
        issues.append("Missing too many required technical skills")
    if scores.experience < rules.low_experience:
        issues.append("Experience level doesn't meet job requirements")
    return issues


def ats_compatibility(scores: CategoryScores, policy: ScoringPolicy) -> ATSCompatibility:
    rules = policy.ats
    average = sum(scores.as_dict().values()) / 4
    weighted = (
        scores.keywords * rules.keyword_weight
        + scores.format * rules.format_weight
        + average * rules.average_weight
    )
    return ATSCompatibility(
        likely_to_pass_screening=weighted >= rules.pass_threshold,
        compatibility_score=round_half_up(weighted),
        critical_issues=critical_issues(scores, policy),
    )
