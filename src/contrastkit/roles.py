"""Foreground roles a caller can request."""
from __future__ import annotations

from enum import Enum


class ContrastRole(Enum):
    """Usage of a foreground color drawn on a background."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    LINK = "link"
    NEON_LINK = "neon-link"

    @classmethod
    def parse(cls, value: "str | ContrastRole") -> "ContrastRole":
        """Accept a role, its value, or its name (``"neon_link"``, ``"NEON_LINK"``)."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower().replace("_", "-")
        try:
            return cls(text)
        except ValueError:
            choices = ", ".join(role.value for role in cls)
            raise ValueError(f"Unknown role {value!r}; expected one of: {choices}") from None
