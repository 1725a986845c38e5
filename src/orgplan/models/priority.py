"""Headline priority ranks."""

from __future__ import annotations

from enum import Enum


class Priority(str, Enum):
    """Priority rank of a headline, ``A`` being the highest."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"

    def render(self) -> str:
        """Return the priority cookie, e.g. ``[#A]``."""

        return f"[#{self.value}]"

    @classmethod
    def from_cookie(cls, cookie: str) -> "Priority":
        """Parse a cookie produced by :meth:`render`.

        Raises:
            ValueError: If ``cookie`` is not one of the four literals.
        """

        if len(cookie) == 4 and cookie.startswith("[#") and cookie.endswith("]"):
            try:
                return cls(cookie[2])
            except ValueError:
                pass
        raise ValueError(f"not a priority cookie: {cookie!r}")
