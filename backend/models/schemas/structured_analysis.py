"""Structured Analysis: the AI-extracted description of a resume against a job.

The extraction step is an LLM, so values arrive loosely typed. Every field has
a conservative default and any value that fails validation falls back to that
default instead of rejecting the whole analysis. A section that cannot be read
at all is treated as absent.
"""

import logging
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

logger = logging.getLogger(__name__)


def _normalize_label(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower() or None
    return value


def _record_items(value: Any) -> Any:
    # One unreadable entry drops that entry, not the whole list
    if isinstance(value, (list, tuple)):
        return [
            dict(item) if isinstance(item, Mapping) else item
            for item in value
            if isinstance(item, (Mapping, AnalysisSection))
        ]
    return value


def _text_items(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, str)]
    return value


# Categorical values from the LLM ("Exact", " senior ") compared lower-case
Label = Annotated[str | None, BeforeValidator(_normalize_label)]
TextList = Annotated[list[str], BeforeValidator(_text_items)]


class AnalysisSection(BaseModel):
    # NaN and infinity are invalid and fall back like any other bad value
    model_config = ConfigDict(extra="ignore", populate_by_name=True, allow_inf_nan=False)

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_invalid(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.debug(
                "Invalid %s.%s=%r; using default", cls.__name__, info.field_name, value
            )
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)


class ContactAnalysis(AnalysisSection):
    has_phone: bool = False
    has_email: bool = False
    has_location: bool = False
    has_linkedin: bool = False


class JobTitleAnalysis(AnalysisSection):
    current_title: str = ""
    target_title: str = ""
    title_match: Label = None  # exact / similar / different


class HardSkill(AnalysisSection):
    skill: str = ""
    found_in_resume: bool = False
    required_for_job: bool = False
    skill_category: str = ""
    evidence: str = ""


class ExperienceAnalysis(AnalysisSection):
    required_years: str | float | None = None
    total_years_experience: str | float | None = None
    required_level: Label = Field(
        default=None, validation_alias=AliasChoices("required_level", "level_required")
    )
    current_level: Label = Field(
        default=None, validation_alias=AliasChoices("current_level", "level_candidate")
    )
    experience_match: Label = None  # exceeds / meets / below
    career_progression: Label = None  # clear / moderate / ...
    experience_gap: str | float | None = None
    industry_match: Label = None


class IndustryAlignment(AnalysisSection):
    industry_experience: Label = None  # direct / related / ...


class EducationAnalysis(AnalysisSection):
    degree_match: Label = None  # exact / related / missing
    certifications_missing: TextList = []


class KeywordOptimization(AnalysisSection):
    total_job_keywords: float = 0
    total_matched_keywords: float = 0
    critical_keywords_matched: TextList = []
    critical_keywords_missing: TextList = []
    keyword_density: float = 0  # percent

    @property
    def match_rate(self) -> float:
        return self.total_matched_keywords / max(self.total_job_keywords, 1)


class KeywordAnalysis(AnalysisSection):
    keyword_match_percentage: float | None = None


class ResumeStructure(AnalysisSection):
    has_professional_summary: bool = False
    has_skills_section: bool = False
    has_work_experience: bool = False
    has_education_section: bool = False
    has_contact_info: bool = False
    chronological_format: bool = False


class ATSCompatibilityAnalysis(AnalysisSection):
    likely_to_pass_screening: bool | None = None
    compatibility_score: float | None = None
    format_issues: TextList = []
    parsing_concerns: TextList = []


class FormatAnalysis(AnalysisSection):
    ats_friendly_score: float | None = None
    format_issues: TextList = []
    parsing_concerns: TextList = []


class MissingSkill(AnalysisSection):
    skill: str = ""
    impact: Label = None  # high / medium / low
    priority: Label = None  # high / medium / low


class StructuredAnalysis(AnalysisSection):
    """One resume scored against one job description."""
    contact_analysis: ContactAnalysis | None = None
    job_title_analysis: JobTitleAnalysis | None = None
    hard_skills: Annotated[list[HardSkill], BeforeValidator(_record_items)] = []
    experience_analysis: ExperienceAnalysis | None = None
    industry_alignment: IndustryAlignment | None = None
    education_analysis: EducationAnalysis | None = None
    keyword_optimization: KeywordOptimization | None = None
    keyword_analysis: KeywordAnalysis | None = None
    resume_structure: ResumeStructure | None = None
    ats_compatibility: ATSCompatibilityAnalysis | None = None
    format_analysis: FormatAnalysis | None = None
    missing_critical_skills: Annotated[list[MissingSkill], BeforeValidator(_record_items)] = []
    missing_skills: Annotated[list[MissingSkill], BeforeValidator(_record_items)] = []
