"""Stand-in for "no previous submission" on a (language, slug) key."""

from __future__ import annotations

from dataclasses import dataclass, field

from exercism.curriculum.exercise import Exercise


@dataclass(frozen=True)
class NullSubmission:
    """Read-only substitute for a Submission that does not exist.

    Answers the same questions a real submission does, so callers can ask
    for the previous submission without checking for ``None``. It is falsy.
    """

    language: str
    slug: str
    code: str = ""
    state: None = None
    muted_by: tuple = field(default=())

    @property
    def exercise(self) -> Exercise:
        return Exercise(self.language, self.slug)

    @property
    def is_current(self) -> bool:
        return False

    def matches(self, code: str) -> bool:
        """Nothing to duplicate."""
        return False

    def __bool__(self) -> bool:
        return False
