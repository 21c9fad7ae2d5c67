"""Category scores: keywords, experience, skills and format, each 0-100.

A category whose input section is missing scores its policy default rather
than zero, so an incomplete extraction degrades the score instead of
collapsing it.
"""

import logging

from models.responses import CategoryScores
from models.schemas.structured_analysis import StructuredAnalysis
from services.scoring.parsing import clamp_score, level_ordinal, parse_years
from services.scoring.policy import ScoringPolicy

logger = logging.getLogger(__name__)


def keyword_score(analysis: StructuredAnalysis, policy: ScoringPolicy) -> float:
    kw = analysis.keyword_optimization
    if kw is None:
        return policy.defaults.keywords
    rules = policy.keywords

    score = kw.match_rate * rules.match_points

    matched = len(kw.critical_keywords_matched)
    critical_total = matched + len(kw.critical_keywords_missing)
    score += matched / max(critical_total, 1) * rules.critical_points

    score += min(kw.keyword_density / 100 * rules.density_points_max, rules.density_points_max)

    if kw.keyword_density > rules.stuffing_threshold:
        score -= (kw.keyword_density - rules.stuffing_threshold) * rules.stuffing_penalty_per_point

    return clamp_score(score)


def level_match_points(
    required_level: str | None, current_level: str | None, policy: ScoringPolicy
) -> float:
    required = level_ordinal(required_level)
    current = level_ordinal(current_level)
    if current >= required:
        return policy.experience.level_met_points
    return current / required * policy.experience.level_partial_points


def experience_score(analysis: StructuredAnalysis, policy: ScoringPolicy) -> float:
    exp = analysis.experience_analysis
    if exp is None:
        return policy.defaults.experience
    rules = policy.experience

    required_years = parse_years(exp.required_years) or 0.0
    actual_years = parse_years(exp.total_years_experience) or 0.0

    if actual_years >= required_years:
        score = rules.years_met_points
        if actual_years > required_years * rules.years_exceeded_ratio:
            score += rules.years_exceeded_bonus
    else:
        score = actual_years / max(required_years, 1) * rules.years_partial_points

    score += level_match_points(exp.required_level, exp.current_level, policy)

    score += rules.progression_points(exp.career_progression)

    # Industry relevance only counts when the extraction assessed it
    if analysis.industry_alignment is not None:
        score += rules.industry_points(analysis.industry_alignment.industry_experience)

    return clamp_score(score)


def skills_score(analysis: StructuredAnalysis, policy: ScoringPolicy) -> float:
    skills = analysis.hard_skills
    if not skills:
        return policy.defaults.skills
    rules = policy.skills

    found = [s for s in skills if s.found_in_resume]
    required = [s for s in skills if s.required_for_job]
    found_required = [s for s in required if s.found_in_resume]

    if required:
        score = len(found_required) / len(required) * rules.required_points
    else:
        score = rules.no_required_points

    score += len(found) / len(skills) * rules.overall_points

    categories = {s.skill_category for s in found}
    score += min(len(categories) * rules.category_points, rules.category_bonus_max)

    return clamp_score(score)


def format_score(analysis: StructuredAnalysis, policy: ScoringPolicy) -> float:
    structure = analysis.resume_structure
    if structure is None:
        return policy.defaults.format
    rules = policy.format

    essential = [
        structure.has_contact_info,
        structure.has_work_experience,
        structure.has_skills_section,
    ]
    beneficial = [
        structure.has_professional_summary,
        structure.has_education_section,
    ]
    score = rules.essential_points * sum(essential) / len(essential)
    score += rules.beneficial_points * sum(beneficial) / len(beneficial)
    if structure.chronological_format:
        score += rules.chronological_points

    issues_source = analysis.ats_compatibility or analysis.format_analysis
    if issues_source is not None:
        score -= len(issues_source.format_issues) * rules.format_issue_penalty
        score -= len(issues_source.parsing_concerns) * rules.parsing_concern_penalty

    return clamp_score(score)


def score_categories(analysis: StructuredAnalysis, policy: ScoringPolicy) -> CategoryScores:
    scores = CategoryScores(
        keywords=keyword_score(analysis, policy),
        experience=experience_score(analysis, policy),
        skills=skills_score(analysis, policy),
        format=format_score(analysis, policy),
    )
    logger.debug("Category scores: %s", scores.as_dict())
    return scores
