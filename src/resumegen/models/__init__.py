"""Document model: value types, item variants, sections, title and document."""

from __future__ import annotations

from resumegen.models.document import Document
from resumegen.models.items import (
    EducationItem,
    ExperienceItem,
    ProjectItem,
    TechnicalSkillItem,
)
from resumegen.models.section import Section
from resumegen.models.title import TitleBlock
from resumegen.models.values import (
    DateRange,
    Hybrid,
    InPerson,
    Link,
    Location,
    Moment,
    Remote,
    Temporal,
)

__all__ = [
    "DateRange",
    "Document",
    "EducationItem",
    "ExperienceItem",
    "Hybrid",
    "InPerson",
    "Link",
    "Location",
    "Moment",
    "ProjectItem",
    "Remote",
    "Section",
    "TechnicalSkillItem",
    "Temporal",
    "TitleBlock",
]
