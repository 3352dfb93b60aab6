"""Error type raised for caller mistakes with no sensible geometric answer."""

from __future__ import annotations


class SceneError(ValueError):
    """Raised for failed structural queries and violated geometric preconditions."""
