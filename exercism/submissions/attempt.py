"""An Attempt: one submission of code against an exercise, before and after saving."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from exercism.curriculum.exercise import Exercise
from exercism.curriculum.registry import Curriculum
from exercism.infrastructure.database.models import Submission, User
from exercism.repositories.submission_repository import SubmissionRepository
from exercism.shared.utils.logging import get_logger
from exercism.submissions.code import normalize_code
from exercism.submissions.exceptions import (
    ConcurrentAttemptError,
    DuplicateSubmissionError,
)
from exercism.submissions.null_submission import NullSubmission
from exercism.submissions.state_machine import SubmissionState, transition

logger = get_logger(__name__)


class Attempt:
    """Code a user submitted for the exercise its path resolves to.

    Construction resolves the exercise and normalizes the code; nothing is
    written until :meth:`save`. The previous submission for the same user,
    language and slug must be loaded before the attempt can be compared or
    saved, so build attempts with :meth:`prepare`.
    """

    def __init__(
        self,
        session: AsyncSession,
        user: User,
        code: str,
        path: str,
        curriculum: Curriculum,
    ):
        self.session = session
        self.user = user
        self.path = path
        self.exercise: Exercise = curriculum.resolve(path)
        self.code = normalize_code(code)
        self._previous: Submission | NullSubmission | None = None
        self.submission: Submission | None = None
        self._submissions = SubmissionRepository(session)

    @classmethod
    async def prepare(
        cls,
        session: AsyncSession,
        user: User,
        code: str,
        path: str,
        curriculum: Curriculum,
    ) -> Attempt:
        """Build an attempt and load the previous submission for its exercise."""
        attempt = cls(session, user, code, path, curriculum)
        await attempt.load_previous()
        return attempt

    async def load_previous(self) -> None:
        self._previous = await self._submissions.latest_for(
            self.user.id, self.exercise.language, self.exercise.slug
        )

    @property
    def previous_submission(self) -> Submission | NullSubmission:
        """Latest submission for the exercise as found by :meth:`load_previous`.

        Raises:
            RuntimeError: If the previous submission has not been loaded
        """
        if self._previous is None:
            raise RuntimeError("Previous submission not loaded. Use Attempt.prepare().")
        return self._previous

    @property
    def language(self) -> str:
        return self.exercise.language

    @property
    def slug(self) -> str:
        return self.exercise.slug

    @property
    def is_duplicate(self) -> bool:
        return self.previous_submission.matches(self.code)

    async def save(self) -> Submission:
        """Record this attempt as the pending submission for its exercise.

        A current previous submission is superseded (and unmuted) in the same
        flush. The user's ``current`` exercise for the language is updated;
        the legacy ``completed`` record is left as it is.

        Raises:
            RuntimeError: the previous submission has not been loaded
            DuplicateSubmissionError: code matches the previous submission
            ConcurrentAttemptError: another save on the same exercise won;
                the session has been rolled back
        """
        if self.is_duplicate:
            raise DuplicateSubmissionError(self.language, self.slug)

        previous = self.previous_submission
        supersedes = previous.is_current
        if supersedes:
            transition(previous, SubmissionState.superseded)

        submission = Submission(
            user_id=self.user.id,
            language=self.language,
            slug=self.slug,
            code=self.code,
            state=SubmissionState.pending.value,
        )
        self.session.add(submission)
        self.user.current = {**(self.user.current or {}), self.language: self.slug}
        user_id = str(self.user.id)

        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(
                "attempt_conflict",
                user_id=user_id,
                exercise=str(self.exercise),
                error=str(e.orig),
            )
            raise ConcurrentAttemptError(self.language, self.slug) from e

        self.submission = submission
        logger.info(
            "attempt_saved",
            user_id=user_id,
            submission_id=str(submission.id),
            exercise=str(self.exercise),
            superseded=str(previous.id) if supersedes else None,
        )
        return submission
