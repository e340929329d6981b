"""Small value objects rendered inline by résumé items.

``Location`` and ``Temporal`` are closed unions of frozen dataclasses; callers
pick the concrete variant and every variant exposes ``render()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from resumegen.templates.base import format_month_year, latex_text

__all__ = [
    "DateRange",
    "Hybrid",
    "InPerson",
    "Link",
    "Location",
    "Moment",
    "Remote",
    "Temporal",
]


# ----------------------------------------------------------------------
# Location
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class InPerson:
    """An on-site position or school."""

    city: str
    state: str

    def render(self, *, escape: bool = False) -> str:
        city = latex_text(self.city, escape=escape)
        state = latex_text(self.state, escape=escape)
        return f"{city}, {state}"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Hybrid(InPerson):
    """Split between an office and remote work."""

    def render(self, *, escape: bool = False) -> str:
        return f"{super().render(escape=escape)} (Hybrid)"


@dataclass(frozen=True)
class Remote:
    """Fully remote; carries no place."""

    def render(self, *, escape: bool = False) -> str:
        return "Remote"

    def __str__(self) -> str:
        return self.render()


Location = InPerson | Hybrid | Remote


# ----------------------------------------------------------------------
# Temporal
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class DateRange:
    """A span such as ``Aug 2018 -- May 2022``.

    ``start`` is expected not to be after ``end``; the model does not check.
    """

    start: date
    end: date

    def render(self, *, escape: bool = False) -> str:
        return f"{format_month_year(self.start)} -- {format_month_year(self.end)}"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Moment:
    """A single month, e.g. a graduation date."""

    date: date

    def render(self, *, escape: bool = False) -> str:
        return format_month_year(self.date)

    def __str__(self) -> str:
        return self.render()


Temporal = DateRange | Moment


# ----------------------------------------------------------------------
# Link
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class Link:
    """A hyperlink shown as underlined text.

    ``display_text`` falls back to ``url`` when omitted.  The URL is handed
    to hyperref untouched; only the display text is subject to escaping.
    """

    url: str
    display_text: str | None = None

    @property
    def text(self) -> str:
        return self.url if self.display_text is None else self.display_text

    def render(self, *, escape: bool = False) -> str:
        text = latex_text(self.text, escape=escape)
        return rf"\href{{{self.url}}}{{\underline{{{text}}}}}"

    def __str__(self) -> str:
        return self.render()
