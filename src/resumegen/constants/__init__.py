from __future__ import annotations

from resumegen.constants.sections import (
    COMPACT_KINDS,
    SECTION_ORDER,
    SECTION_TITLES,
    SectionKind,
    get_section_title,
    is_compact,
)

__all__ = [
    "COMPACT_KINDS",
    "SECTION_ORDER",
    "SECTION_TITLES",
    "SectionKind",
    "get_section_title",
    "is_compact",
]
