"""Submission lifecycle state machine.

States: pending ⇄ hibernating, either → superseded | completed.
``pending`` and ``hibernating`` are the current states; at most one
submission per (user, language, slug) may be current.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from exercism.submissions.exceptions import SubmissionStateError

if TYPE_CHECKING:
    from exercism.infrastructure.database.models import Submission


class SubmissionState(str, enum.Enum):
    pending = "pending"
    hibernating = "hibernating"
    superseded = "superseded"
    completed = "completed"


CURRENT_STATES: frozenset[str] = frozenset(
    {SubmissionState.pending.value, SubmissionState.hibernating.value}
)

VALID_TRANSITIONS: dict[str, list[str]] = {
    "pending": ["superseded", "hibernating", "completed"],
    "hibernating": ["superseded", "pending", "completed"],
    "superseded": [],   # terminal
    "completed": [],    # terminal
}


def _value(state: str) -> str:
    return state.value if isinstance(state, SubmissionState) else state


def can_transition(current: str, target: str) -> bool:
    """Check if a submission state transition is valid."""
    return _value(target) in VALID_TRANSITIONS.get(_value(current), [])


def validate_transition(current: str, target: str) -> None:
    """Validate a state transition, raising SubmissionStateError if invalid."""
    if not can_transition(current, target):
        raise SubmissionStateError(_value(current), _value(target))


def transition(submission: Submission, target: SubmissionState) -> None:
    """Move a submission to ``target``.

    Superseding also clears the mute list: a newer attempt puts the
    exercise back in front of everyone who had muted it.
    """
    validate_transition(submission.state, target.value)
    submission.state = target.value
    if target is SubmissionState.superseded:
        submission.muted_by.clear()
