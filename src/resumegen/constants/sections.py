"""Section kinds and their display titles.

Every item variant belongs to exactly one :class:`SectionKind`.  The kind
decides both the ``\\section{}`` heading and which list layout the section
wraps its items in.
"""

from __future__ import annotations

from enum import StrEnum


class SectionKind(StrEnum):
    """Closed set of section item variants."""

    EDUCATION = "education"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    TECHNICAL_SKILLS = "technical_skills"


SECTION_TITLES: dict[SectionKind, str] = {
    SectionKind.EDUCATION: "Education",
    SectionKind.EXPERIENCE: "Experience",
    SectionKind.PROJECTS: "Projects",
    SectionKind.TECHNICAL_SKILLS: "Technical Skills",
}

# Kinds rendered as a single compact paragraph instead of a subheading list.
COMPACT_KINDS: frozenset[SectionKind] = frozenset({SectionKind.TECHNICAL_SKILLS})

# Order the builder emits sections in.
SECTION_ORDER: tuple[SectionKind, ...] = (
    SectionKind.EDUCATION,
    SectionKind.EXPERIENCE,
    SectionKind.PROJECTS,
    SectionKind.TECHNICAL_SKILLS,
)


def get_section_title(kind: SectionKind) -> str:
    """Return the display title for *kind*."""
    return SECTION_TITLES[kind]


def is_compact(kind: SectionKind) -> bool:
    """Return True when sections of *kind* use the compact itemize layout."""
    return kind in COMPACT_KINDS
