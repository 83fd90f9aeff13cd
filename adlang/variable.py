"""Named variables."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Variable:
    """A variable identified by its name."""

    name: str

    @classmethod
    def parse(cls, text: str) -> Variable:
        """Build a variable from its written name."""
        return cls(text)