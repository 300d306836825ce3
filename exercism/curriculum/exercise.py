"""Exercise value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Exercise:
    """One exercise, identified by language and slug."""

    language: str
    slug: str

    def __str__(self) -> str:
        return f"{self.language}/{self.slug}"
