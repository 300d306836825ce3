"""Language curricula: ordered exercise slug lists per language."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol


class LanguageCurriculum(Protocol):
    """Capability a language curriculum must expose to the registry."""

    def language(self) -> str: ...

    def slugs(self) -> Sequence[str]: ...


class StaticCurriculum:
    """Curriculum backed by a fixed, ordered list of slugs."""

    def __init__(self, language: str, slugs: Iterable[str]):
        self._language = language
        self._slugs = tuple(slugs)

    def language(self) -> str:
        return self._language

    def slugs(self) -> Sequence[str]:
        return self._slugs

    def __repr__(self) -> str:
        return f"StaticCurriculum({self._language!r}, {len(self._slugs)} slugs)"


class OcamlCurriculum:
    def language(self) -> str:
        return "ocaml"

    def slugs(self) -> Sequence[str]:
        # Pretty simple
        simple = [
            "bob", "word-count", "anagram", "beer-song", "nucleotide-count",
            "rna-transcription", "point-mutations", "phone-number",
            "grade-school", "space-age",
        ]
        # Somewhat tricky
        tricky = ["prime-factors"]
        # Rather complicated
        complicated = ["zipper"]
        return simple + tricky + complicated


BUILTIN_CURRICULA: tuple[LanguageCurriculum, ...] = (OcamlCurriculum(),)
