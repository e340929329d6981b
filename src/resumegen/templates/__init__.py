"""LaTeX building blocks shared by every document node."""

from __future__ import annotations

from resumegen.templates.base import (
    DocElement,
    Renderable,
    SectionItem,
    escape_latex,
    format_month_year,
    latex_text,
)
from resumegen.templates.jake import DOCUMENT_BEGIN, DOCUMENT_END, PREAMBLE

__all__ = [
    "DOCUMENT_BEGIN",
    "DOCUMENT_END",
    "PREAMBLE",
    "DocElement",
    "Renderable",
    "SectionItem",
    "escape_latex",
    "format_month_year",
    "latex_text",
]
