"""Section item variants.

Each variant renders a fixed template with its fields substituted in
order.  The variant's ``kind`` ties it to one section heading.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pylatex import NoEscape

from resumegen.constants.sections import SectionKind
from resumegen.models.values import Location, Temporal
from resumegen.templates.base import SectionItem, latex_text

__all__ = [
    "EducationItem",
    "ExperienceItem",
    "ProjectItem",
    "TechnicalSkillItem",
]


def _bullet_lines(bullets: list[str], *, escape: bool) -> list[str]:
    """Wrap *bullets* in an item list, or nothing at all when empty.

    An empty ``itemize`` does not compile, so the list markup is only emitted
    when there is at least one bullet.
    """
    if not bullets:
        return []
    lines = [r"      \resumeItemListStart"]
    for bullet in bullets:
        lines.append(rf"        \resumeItem{{{latex_text(bullet, escape=escape)}}}")
    lines.append(r"      \resumeItemListEnd")
    return lines


@dataclass
class EducationItem(SectionItem):
    """A school attended, with an optional degree."""

    kind = SectionKind.EDUCATION

    school: str
    location: Location
    degree: str | None
    dates: Temporal

    def render(self, *, escape: bool = False) -> NoEscape:
        school = latex_text(self.school, escape=escape)
        degree = latex_text(self.degree, escape=escape)
        lines = [
            r"    \resumeSubheading",
            rf"      {{{school}}}{{{self.location.render(escape=escape)}}}",
            rf"      {{{degree}}}{{{self.dates.render()}}}",
        ]
        return NoEscape("\n".join(lines) + "\n")


@dataclass
class ExperienceItem(SectionItem):
    """A position held, newest bullets first as the caller ordered them."""

    kind = SectionKind.EXPERIENCE

    position: str
    dates: Temporal
    organization: str | None
    location: Location
    bullets: list[str] = field(default_factory=list)

    def render(self, *, escape: bool = False) -> NoEscape:
        position = latex_text(self.position, escape=escape)
        organization = latex_text(self.organization, escape=escape)
        lines = [
            r"    \resumeSubheading",
            rf"      {{{position}}}{{{self.dates.render()}}}",
            rf"      {{{organization}}}{{{self.location.render(escape=escape)}}}",
            *_bullet_lines(self.bullets, escape=escape),
        ]
        return NoEscape("\n".join(lines) + "\n")


@dataclass
class ProjectItem(SectionItem):
    """A project heading with its tech keywords, plus bullets."""

    kind = SectionKind.PROJECTS

    title: str
    keywords: list[str]
    dates: Temporal
    bullets: list[str] = field(default_factory=list)

    def render(self, *, escape: bool = False) -> NoEscape:
        title = latex_text(self.title, escape=escape)
        keywords = ", ".join(latex_text(k, escape=escape) for k in self.keywords)
        lines = [
            r"    \resumeProjectHeading",
            rf"      {{\textbf{{{title}}} $|$ \emph{{{keywords}}}}}{{{self.dates.render()}}}",
            *_bullet_lines(self.bullets, escape=escape),
        ]
        return NoEscape("\n".join(lines) + "\n")


@dataclass
class TechnicalSkillItem(SectionItem):
    """One labelled, comma-separated line of skills."""

    kind = SectionKind.TECHNICAL_SKILLS

    label: str
    skills: list[str] = field(default_factory=list)

    def render(self, *, escape: bool = False) -> NoEscape:
        label = latex_text(self.label, escape=escape)
        skills = ", ".join(latex_text(s, escape=escape) for s in self.skills)
        return NoEscape(rf"      \textbf{{{label}}}{{: {skills}}} \\" + "\n")
