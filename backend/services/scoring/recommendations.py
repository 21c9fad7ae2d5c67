"""Improvement recommendations for both scoring paths.

The composite path reads category scores; the calibration path reads the
penalty breakdown. Entries are ordered as emitted and never deduplicated
against recommendations the extraction step already produced.
"""

from models.responses import CategoryScores, Recommendation, ScoringAdjustments
from models.schemas.structured_analysis import StructuredAnalysis
from services.scoring.parsing import round_half_up
from services.scoring.policy import ScoringPolicy

_FORMAT_ADVICE = (
    "Improve ATS compatibility - use standard section headings, "
    "avoid graphics/tables, ensure chronological format"
)


def _first(items: list[str], policy: ScoringPolicy) -> list[str]:
    return [i for i in items if i][: policy.recommendations.max_named_items]


def _missing_required_skills(analysis: StructuredAnalysis) -> list[str]:
    return [s.skill for s in analysis.hard_skills if s.required_for_job and not s.found_in_resume]


def composite_recommendations(
    analysis: StructuredAnalysis, scores: CategoryScores, policy: ScoringPolicy
) -> list[Recommendation]:
    rules = policy.recommendations
    recs: list[Recommendation] = []

    if scores.keywords < rules.keywords_below:
        kw = analysis.keyword_optimization
        missing = _first(kw.critical_keywords_missing, policy) if kw else []
        recs.append(Recommendation(
            category="keywords",
            priority="high",
            suggestion=(
                f"Increase keyword match from {round_half_up(scores.keywords)}% to 70%+. "
                f"Add missing critical keywords: {', '.join(missing) or 'N/A'}"
            ),
            impact="high",
        ))

    if scores.experience < rules.experience_below:
        recs.append(Recommendation(
            category="experience",
            priority="high",
            suggestion=(
                "Highlight relevant experience more prominently. Quantify "
                "achievements with specific metrics and results."
            ),
            impact="high",
        ))

    if scores.skills < rules.skills_below:
        missing = _first(_missing_required_skills(analysis), policy)
        recs.append(Recommendation(
            category="skills",
            priority="high",
            suggestion=f"Add missing required skills: {', '.join(missing) or 'Review job requirements'}",
            impact="high",
        ))

    if scores.format < rules.format_below:
        recs.append(Recommendation(
            category="format",
            priority="medium",
            suggestion=_FORMAT_ADVICE,
            impact="medium",
        ))

    return recs


def calibration_recommendations(
    analysis: StructuredAnalysis, adjustments: ScoringAdjustments, policy: ScoringPolicy
) -> list[Recommendation]:
    # Same per-component thresholds the explanation uses to list key issues
    rules = policy.explanation
    recs: list[Recommendation] = []

    if adjustments.missing_critical_skills > rules.skills_above:
        named = [s.skill for s in analysis.missing_critical_skills if s.impact == "high"]
        named += [s.skill for s in analysis.missing_skills if s.priority == "high"]
        missing = _first(named, policy)
        recs.append(Recommendation(
            category="skills",
            priority="high",
            suggestion=f"Add missing critical skills: {', '.join(missing) or 'Review job requirements'}",
            impact="high",
        ))

    if adjustments.experience_gap > rules.experience_above:
        recs.append(Recommendation(
            category="experience",
            priority="high",
            suggestion=(
                "Close the experience gap: surface projects, internships and "
                "responsibilities that show work at the required level."
            ),
            impact="high",
        ))

    if adjustments.education_mismatch > rules.education_above:
        edu = analysis.education_analysis
        certs = _first(edu.certifications_missing, policy) if edu else []
        suggestion = "Make degree and coursework relevant to the role easy to find."
        if certs:
            suggestion += f" Consider adding relevant certifications: {', '.join(certs)}"
        recs.append(Recommendation(
            category="education",
            priority="medium",
            suggestion=suggestion,
            impact="medium",
        ))

    if adjustments.format_issues > rules.format_above:
        recs.append(Recommendation(
            category="format",
            priority="medium",
            suggestion=_FORMAT_ADVICE,
            impact="medium",
        ))

    if adjustments.keyword_density > rules.keyword_above:
        recs.append(Recommendation(
            category="keywords",
            priority="high",
            suggestion="Tailor your resume to include more job-specific terminology",
            impact="high",
        ))

    return recs
