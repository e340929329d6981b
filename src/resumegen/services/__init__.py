from __future__ import annotations

from resumegen.services.resume_builder import build_document, parse_payload, render_resume

__all__ = ["build_document", "parse_payload", "render_resume"]
