"""One-paragraph explanation of a calibrated score."""

from models.responses import ScoringAdjustments
from services.scoring.policy import ScoringPolicy


def key_issues(adjustments: ScoringAdjustments, policy: ScoringPolicy) -> list[str]:
    rules = policy.explanation
    issues: list[str] = []
    if adjustments.missing_critical_skills > rules.skills_above:
        issues.append("missing critical skills")
    if adjustments.experience_gap > rules.experience_above:
        issues.append("experience gaps")
    if adjustments.education_mismatch > rules.education_above:
        issues.append("education mismatch")
    if adjustments.format_issues > rules.format_above:
        issues.append("format problems")
    if adjustments.keyword_density > rules.keyword_above:
        issues.append("low keyword density")
    return issues


def build_explanation(score: int, adjustments: ScoringAdjustments, policy: ScoringPolicy) -> str:
    rules = policy.explanation
    parts = [f"Your resume scored {score}% using professional ATS standards."]

    if score >= rules.strong_score:
        parts.append(
            "This is a strong score that should pass most ATS systems and get recruiter attention."
        )
    elif score >= rules.moderate_score:
        parts.append(
            "This score suggests your resume may pass some ATS systems but needs "
            "improvement for better results."
        )
    else:
        parts.append(
            "This score indicates your resume is likely to be filtered out by most ATS systems."
        )

    if adjustments.total_penalty > rules.itemize_above:
        issues = key_issues(adjustments, policy)
        # Several small penalties can add up past the threshold with none itemized
        if issues:
            parts.append(f"Key issues identified: {', '.join(issues)}.")

    return " ".join(parts)
