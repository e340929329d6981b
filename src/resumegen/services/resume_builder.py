"""Resume building service.

Maps a validated :class:`ResumePayload` onto the document model and
renders it.  This is the entry point a data-entry front end calls with the
data it collected.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from resumegen.constants.sections import SECTION_ORDER
from resumegen.models import (
    DateRange,
    Document,
    EducationItem,
    ExperienceItem,
    Hybrid,
    InPerson,
    Link,
    Location,
    Moment,
    ProjectItem,
    Remote,
    Section,
    TechnicalSkillItem,
    Temporal,
    TitleBlock,
)
from resumegen.schemas.resume import (
    ContactPayload,
    DatesPayload,
    LocationPayload,
    ResumePayload,
)

logger = logging.getLogger(__name__)

__all__ = ["build_document", "parse_payload", "render_resume"]


# -----------------------------------------------------------------------
# Internal builders


def _build_location(payload: LocationPayload) -> Location:
    """Map a location payload to its model variant."""
    if payload.mode == "remote":
        return Remote()
    if payload.mode == "hybrid":
        return Hybrid(payload.city, payload.state)
    return InPerson(payload.city, payload.state)


def _build_dates(payload: DatesPayload) -> Temporal:
    """A payload without an end date is a single moment."""
    if payload.end is None:
        return Moment(payload.start)
    return DateRange(payload.start, payload.end)


def _build_title(contact: ContactPayload) -> TitleBlock:
    return TitleBlock(
        first_name=contact.first_name,
        middle_initial=contact.middle_initial,
        last_name=contact.last_name,
        phone_number=contact.phone,
        email=contact.email,
        urls=[Link(link.url, link.text) for link in contact.links],
    )


def _build_sections(payload: ResumePayload) -> list[Section]:
    """Build one section per non-empty category, in display order."""
    education = Section(EducationItem)
    for edu in payload.education:
        education.add_item(
            EducationItem(
                school=edu.school,
                location=_build_location(edu.location),
                degree=edu.degree,
                dates=_build_dates(edu.dates),
            )
        )

    experience = Section(ExperienceItem)
    for work in payload.experience:
        experience.add_item(
            ExperienceItem(
                position=work.position,
                dates=_build_dates(work.dates),
                organization=work.organization,
                location=_build_location(work.location),
                bullets=list(work.bullets),
            )
        )

    projects = Section(ProjectItem)
    for project in payload.projects:
        projects.add_item(
            ProjectItem(
                title=project.title,
                keywords=list(project.keywords),
                dates=_build_dates(project.dates),
                bullets=list(project.bullets),
            )
        )

    skills = Section(TechnicalSkillItem)
    for skill in payload.skills:
        skills.add_item(TechnicalSkillItem(label=skill.label, skills=list(skill.skills)))

    by_kind = {section.kind: section for section in (education, experience, projects, skills)}
    return [by_kind[kind] for kind in SECTION_ORDER if by_kind[kind].items]


# -----------------------------------------------------------------------
# Public API


def parse_payload(data: ResumePayload | Mapping[str, Any]) -> ResumePayload:
    """Validate *data* into a :class:`ResumePayload`.

    Raises:
        pydantic.ValidationError: If *data* does not describe a résumé.
    """
    if isinstance(data, ResumePayload):
        return data
    try:
        return ResumePayload.model_validate(data)
    except ValidationError as exc:
        logger.warning("Rejected resume payload: %d validation error(s)", exc.error_count())
        raise


def build_document(data: ResumePayload | Mapping[str, Any]) -> Document:
    """Assemble a :class:`Document` from a payload.

    The title block comes first, followed by the non-empty sections in the
    order Education, Experience, Projects, Technical Skills.

    Args:
        data: A payload model or an equivalent mapping.

    Returns:
        The document, ready for :meth:`Document.render`.
    """
    payload = parse_payload(data)
    sections = _build_sections(payload)
    logger.debug(
        "Built resume for %s %s with sections: %s",
        payload.contact.first_name,
        payload.contact.last_name,
        ", ".join(section.title for section in sections) or "none",
    )
    return Document([_build_title(payload.contact), *sections], escape=payload.escape)


def render_resume(data: ResumePayload | Mapping[str, Any]) -> str:
    """Build and render a payload in one step; returns the ``.tex`` source."""
    return build_document(data).render()
