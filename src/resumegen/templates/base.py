"""Renderable capabilities and shared LaTeX helpers.

Every node of a résumé document implements :class:`Renderable`.  Nodes that
may sit directly inside a :class:`~resumegen.models.document.Document`
additionally implement :class:`DocElement`; nodes that only make sense inside
a :class:`~resumegen.models.section.Section` implement :class:`SectionItem`.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import date
from typing import ClassVar

from pylatex import NoEscape

from resumegen.constants.sections import SectionKind, get_section_title

__all__ = [
    "DocElement",
    "Renderable",
    "SectionItem",
    "escape_latex",
    "format_month_year",
    "latex_text",
]

# Characters that have special meaning in LaTeX, and what each becomes.
_LATEX_REPLACEMENTS = {
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "\\": r"\textbackslash{}",
}
_LATEX_SPECIAL = re.compile(r"[&%$#_{}~^\\]")

_MONTH_ABBR = [
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


class Renderable(ABC):
    """Anything that produces LaTeX markup."""

    @abstractmethod
    def render(self, *, escape: bool = False) -> NoEscape:
        """Return this node as LaTeX.

        Args:
            escape: Escape LaTeX special characters in user-supplied text.
        """


class DocElement(Renderable):
    """A node that can be placed at the top level of a document."""


class SectionItem(Renderable):
    """A node that can only be placed inside a section of its own kind.

    Subclasses set ``kind``; ``section_title`` is derived from it once, at
    class creation, so it can be read straight off the type.
    """

    kind: ClassVar[SectionKind]
    section_title: ClassVar[str]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        kind = cls.__dict__.get("kind")
        if kind is not None:
            cls.section_title = get_section_title(kind)


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------


def escape_latex(text: str) -> str:
    r"""Escape LaTeX special characters in *text*.

    Handles: ``& % $ # _ { } ~ ^ \``.  ``NoEscape`` input is already markup
    and is returned unchanged.
    """
    if isinstance(text, NoEscape):
        return text
    # Single pass, so replacement text is never escaped again.
    return _LATEX_SPECIAL.sub(lambda match: _LATEX_REPLACEMENTS[match.group()], text)


def latex_text(text: str | None, *, escape: bool) -> str:
    """Prepare user text for interpolation; ``None`` becomes ``""``."""
    if text is None:
        return ""
    return escape_latex(text) if escape else text


def format_month_year(value: date) -> str:
    """Format *value* as ``Mon YYYY`` (e.g. ``May 2020``).

    The month names are fixed English abbreviations so the output does not
    depend on the process locale.
    """
    return f"{_MONTH_ABBR[value.month]} {value.year:04d}"
