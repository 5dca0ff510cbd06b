"""Runtime options for entry parsing."""

from __future__ import annotations

import os
from dataclasses import dataclass

STRICT_SINGULAR_ENV = "DOCENTRY_STRICT_SINGULAR"


@dataclass(frozen=True)
class ParseOptions:
    """Options shared by every entry builder.

    strict_singular: Report a repeated @since/@deprecated instead of
        keeping the last one.
    """

    strict_singular: bool = False

    @classmethod
    def from_env(cls) -> ParseOptions:
        """Read options from DOCENTRY_* environment variables."""
        strict = os.environ.get(STRICT_SINGULAR_ENV, "").lower() in ("1", "true")
        return cls(strict_singular=strict)


DEFAULT_OPTIONS = ParseOptions()
