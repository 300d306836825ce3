"""Curriculum registry mapping submitted paths to exercises."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import PurePosixPath

from exercism.config import DEFAULT_EXTENSIONS, ExercismSettings, get_settings
from exercism.curriculum.exercise import Exercise
from exercism.curriculum.languages import (
    BUILTIN_CURRICULA,
    LanguageCurriculum,
    StaticCurriculum,
)
from exercism.submissions.exceptions import UnknownExerciseError, UnknownLanguageError


class Curriculum:
    """Registry of language curricula keyed by language identifier.

    Built once by the caller and passed to whatever needs to resolve paths;
    there is no process-wide instance.
    """

    def __init__(
        self,
        curricula: Iterable[LanguageCurriculum] = (),
        extensions: Mapping[str, str] | None = None,
    ):
        self._curricula: dict[str, LanguageCurriculum] = {}
        self._extensions = dict(DEFAULT_EXTENSIONS if extensions is None else extensions)
        for curriculum in curricula:
            self.add(curriculum)

    def add(self, curriculum: LanguageCurriculum) -> None:
        """Register a language curriculum, replacing any for the same language."""
        self._curricula[curriculum.language()] = curriculum

    def languages(self) -> list[str]:
        return sorted(self._curricula)

    def slugs(self, language: str) -> list[str]:
        curriculum = self._curricula.get(language)
        if curriculum is None:
            raise UnknownLanguageError(language)
        return list(curriculum.slugs())

    def language_for(self, path: str) -> str:
        """Return the registered language for a path's file extension."""
        extension = PurePosixPath(path.replace("\\", "/")).suffix.lstrip(".").lower()
        language = self._extensions.get(extension)
        if language is None or language not in self._curricula:
            raise UnknownLanguageError(extension or path)
        return language

    def resolve(self, path: str) -> Exercise:
        """Resolve ``<slug>/<slug>.<ext>`` to an Exercise.

        Raises:
            UnknownLanguageError: extension maps to no registered curriculum
            UnknownExerciseError: slug is not part of that curriculum
        """
        language = self.language_for(path)
        parts = PurePosixPath(path.replace("\\", "/"))
        slug = parts.parent.name or parts.stem
        if slug not in self._curricula[language].slugs():
            raise UnknownExerciseError(language, slug)
        return Exercise(language, slug)


def build_curriculum(settings: ExercismSettings | None = None) -> Curriculum:
    """Registry with the built-in curricula plus any configured slug lists."""
    settings = settings or get_settings()
    curriculum = Curriculum(BUILTIN_CURRICULA, extensions=settings.extensions)
    for language, slugs in settings.curricula.items():
        curriculum.add(StaticCurriculum(language, slugs))
    return curriculum
