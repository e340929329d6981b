"""The root of a résumé: the preamble plus every top-level element."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pylatex import NoEscape

from resumegen.config import get_escape_default
from resumegen.templates.base import DocElement
from resumegen.templates.jake import DOCUMENT_BEGIN, DOCUMENT_END, PREAMBLE

logger = logging.getLogger(__name__)

__all__ = ["Document"]


class Document:
    """An ordered, heterogeneous sequence of document elements.

    Elements are rendered in insertion order, each followed by a blank line,
    between the fixed preamble and ``\\end{document}``.

    Args:
        contents: Initial elements, typically a
            :class:`~resumegen.models.title.TitleBlock` followed by sections.
        escape: Escape LaTeX special characters in user text.  ``None`` uses
            :func:`~resumegen.config.get_escape_default`.
    """

    def __init__(
        self,
        contents: Iterable[DocElement] | None = None,
        *,
        escape: bool | None = None,
    ) -> None:
        self.contents: list[DocElement] = list(contents or ())
        self.escape = get_escape_default() if escape is None else escape

    def __repr__(self) -> str:
        return f"Document(contents={self.contents!r}, escape={self.escape!r})"

    def add(self, element: DocElement) -> None:
        """Append *element* after the existing contents."""
        self.contents.append(element)

    def render(self) -> NoEscape:
        """Return the complete ``.tex`` source."""
        logger.debug(
            "Rendering document with %d elements (escape=%s)", len(self.contents), self.escape
        )
        parts = [PREAMBLE, DOCUMENT_BEGIN, "\n\n"]
        for element in self.contents:
            parts.append(element.render(escape=self.escape))
            parts.append("\n\n")
        parts.append(DOCUMENT_END)
        return NoEscape("".join(parts))
