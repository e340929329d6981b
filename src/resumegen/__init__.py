"""Render structured résumé data as LaTeX in Jake Gutierrez's layout."""

from __future__ import annotations

from resumegen.constants.sections import SectionKind
from resumegen.models import (
    DateRange,
    Document,
    EducationItem,
    ExperienceItem,
    Hybrid,
    InPerson,
    Link,
    Moment,
    ProjectItem,
    Remote,
    Section,
    TechnicalSkillItem,
    TitleBlock,
)
from resumegen.services.resume_builder import build_document, render_resume
from resumegen.templates.base import escape_latex

__all__ = [
    "DateRange",
    "Document",
    "EducationItem",
    "ExperienceItem",
    "Hybrid",
    "InPerson",
    "Link",
    "Moment",
    "ProjectItem",
    "Remote",
    "Section",
    "SectionKind",
    "TechnicalSkillItem",
    "TitleBlock",
    "build_document",
    "escape_latex",
    "render_resume",
]

__version__ = "0.1.0"
