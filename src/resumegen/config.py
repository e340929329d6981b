"""Runtime configuration.

Settings are read from environment variables at call time so tests can
override them with ``monkeypatch.setenv``.

- ``RESUMEGEN_ESCAPE_LATEX``: when truthy (``1``, ``true``, ``yes``, ``on``),
  documents escape LaTeX special characters in user text unless told
  otherwise.  Off by default, which reproduces input text verbatim.
"""

from __future__ import annotations

import os

__all__ = ["ESCAPE_ENV_VAR", "get_escape_default"]

ESCAPE_ENV_VAR = "RESUMEGEN_ESCAPE_LATEX"

_TRUTHY = {"1", "true", "yes", "on"}


def get_escape_default() -> bool:
    """Return whether escaping is enabled, allowing overrides via environment variable."""
    env_value = os.getenv(ESCAPE_ENV_VAR)
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY
