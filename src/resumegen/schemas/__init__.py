from __future__ import annotations

from resumegen.schemas.resume import (
    ContactPayload,
    DatesPayload,
    EducationPayload,
    ExperiencePayload,
    LinkPayload,
    LocationPayload,
    ProjectPayload,
    ResumePayload,
    SkillPayload,
)

__all__ = [
    "ContactPayload",
    "DatesPayload",
    "EducationPayload",
    "ExperiencePayload",
    "LinkPayload",
    "LocationPayload",
    "ProjectPayload",
    "ResumePayload",
    "SkillPayload",
]
