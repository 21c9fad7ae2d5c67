"""Pydantic contracts for the Structured Analysis consumed by the scoring engine."""

from models.schemas.structured_analysis import (
    ATSCompatibilityAnalysis,
    ContactAnalysis,
    EducationAnalysis,
    ExperienceAnalysis,
    FormatAnalysis,
    HardSkill,
    IndustryAlignment,
    JobTitleAnalysis,
    KeywordAnalysis,
    KeywordOptimization,
    MissingSkill,
    ResumeStructure,
    StructuredAnalysis,
)

__all__ = [
    "ATSCompatibilityAnalysis",
    "ContactAnalysis",
    "EducationAnalysis",
    "ExperienceAnalysis",
    "FormatAnalysis",
    "HardSkill",
    "IndustryAlignment",
    "JobTitleAnalysis",
    "KeywordAnalysis",
    "KeywordOptimization",
    "MissingSkill",
    "ResumeStructure",
    "StructuredAnalysis",
]
