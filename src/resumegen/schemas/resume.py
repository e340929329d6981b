"""Pydantic schemas for résumé payloads.

A payload is the plain-data form of a résumé that a data-entry front end
hands over.  These schemas are the only place input is validated; the
document model itself renders whatever it is given.
"""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

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


class LocationPayload(BaseModel):
    """Where a position or school is.

    ``city`` and ``state`` are required together unless ``mode`` is
    ``remote``, in which case they are ignored.
    """

    model_config = ConfigDict(extra="forbid")

    mode: Literal["in_person", "hybrid", "remote"] = Field(
        "in_person", description="Work arrangement"
    )
    city: str | None = Field(None, description="City name")
    state: str | None = Field(None, description="State or region")

    @model_validator(mode="after")
    def _check_place(self) -> LocationPayload:
        if self.mode != "remote" and not (self.city and self.state):
            msg = f"city and state are required for a {self.mode} location"
            raise ValueError(msg)
        return self


class DatesPayload(BaseModel):
    """A single month (``end`` omitted) or a start/end range."""

    model_config = ConfigDict(extra="forbid")

    start: date = Field(..., description="Start date, or the only date (ISO format)")
    end: date | None = Field(None, description="End date (ISO format)")

    @model_validator(mode="after")
    def _check_order(self) -> DatesPayload:
        if self.end is not None and self.end < self.start:
            msg = "end cannot be before start"
            raise ValueError(msg)
        return self


class LinkPayload(BaseModel):
    """Request schema for a header link."""

    model_config = ConfigDict(extra="forbid")

    url: str = Field(..., min_length=1, description="Link target")
    text: str | None = Field(None, description="Display text; defaults to the url")


class ContactPayload(BaseModel):
    """Name and contact details for the title block."""

    model_config = ConfigDict(extra="forbid")

    first_name: str
    middle_initial: str | None = Field(None, max_length=1, description="Single letter, no dot")
    last_name: str
    phone: str
    email: str
    links: list[LinkPayload] = Field(default_factory=list)


class EducationPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    school: str
    location: LocationPayload
    degree: str | None = None
    dates: DatesPayload


class ExperiencePayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    position: str
    organization: str | None = None
    location: LocationPayload
    dates: DatesPayload
    bullets: list[str] = Field(default_factory=list)


class ProjectPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    keywords: list[str] = Field(default_factory=list)
    dates: DatesPayload
    bullets: list[str] = Field(default_factory=list)


class SkillPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    label: str
    skills: list[str] = Field(default_factory=list)


class ResumePayload(BaseModel):
    """Top-level bundle turned into a :class:`~resumegen.models.Document`.

    Empty categories produce no section.
    """

    model_config = ConfigDict(extra="forbid")

    contact: ContactPayload
    education: list[EducationPayload] = Field(default_factory=list)
    experience: list[ExperiencePayload] = Field(default_factory=list)
    projects: list[ProjectPayload] = Field(default_factory=list)
    skills: list[SkillPayload] = Field(default_factory=list)
    escape: bool | None = Field(
        None, description="Escape LaTeX special characters; None uses the environment default"
    )
