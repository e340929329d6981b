"""A titled list of items that all share one variant."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from pylatex import NoEscape

from resumegen.constants.sections import SectionKind, is_compact
from resumegen.templates.base import DocElement, SectionItem

logger = logging.getLogger(__name__)

__all__ = ["Section"]

T = TypeVar("T", bound=SectionItem)


class Section(DocElement, Generic[T]):
    """Ordered items of a single variant under one ``\\section`` heading.

    The heading and the list layout both come from ``item_type``, so every
    section of the same variant looks the same regardless of its contents.

    Example::

        education = Section(EducationItem)
        education.add_item(EducationItem(...))
    """

    def __init__(self, item_type: type[T], items: Iterable[T] | None = None) -> None:
        self.item_type = item_type
        self.items: list[T] = []
        for item in items or ():
            self.add_item(item)

    def __repr__(self) -> str:
        return f"Section({self.item_type.__name__}, items={self.items!r})"

    @property
    def kind(self) -> SectionKind:
        return self.item_type.kind

    @property
    def title(self) -> str:
        return self.item_type.section_title

    def add_item(self, item: T) -> None:
        """Append *item*; duplicates are kept.

        Raises:
            TypeError: If *item* is not an instance of this section's variant.
        """
        if not isinstance(item, self.item_type):
            msg = (
                f"{self.item_type.__name__} section cannot hold "
                f"{type(item).__name__!r} items"
            )
            raise TypeError(msg)
        self.items.append(item)
        logger.debug("Added %s to %s section", type(item).__name__, self.title)

    def render(self, *, escape: bool = False) -> NoEscape:
        if is_compact(self.kind):
            start = [r"  \begin{itemize}[leftmargin=0.15in, label={}]", r"    \small{\item{"]
            end = [r"    }}", r"  \end{itemize}"]
        else:
            start = [r"  \resumeSubHeadingListStart"]
            end = [r"  \resumeSubHeadingListEnd"]

        lines = [rf"\section{{{self.title}}}", *start]
        lines.extend(item.render(escape=escape) for item in self.items)
        lines.extend(end)
        return NoEscape("\n".join(lines) + "\n")
