"""Service layer for submitting code and moving submissions through their lifecycle."""

from __future__ import annotations

from collections.abc import Callable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from exercism.curriculum.registry import Curriculum
from exercism.infrastructure.database.models import Submission
from exercism.repositories.unit_of_work import UnitOfWork, create_unit_of_work
from exercism.shared.utils.logging import get_logger
from exercism.submissions.attempt import Attempt
from exercism.submissions.exceptions import (
    SubmissionNotFoundError,
    UserNotFoundError,
)
from exercism.submissions.state_machine import SubmissionState, transition

logger = get_logger(__name__)


class SubmissionService:
    """Runs each operation in its own unit of work and commits it whole."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | Callable[[], AsyncSession],
        curriculum: Curriculum,
    ):
        self.session_factory = session_factory
        self.curriculum = curriculum

    # ==========================================
    # ATTEMPTS
    # ==========================================

    async def submit(self, user_id: str | UUID, code: str, path: str) -> Submission:
        """Save ``code`` as the user's new pending submission for ``path``."""
        async with create_unit_of_work(self.session_factory) as uow:
            user = await uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(str(user_id))

            attempt = await Attempt.prepare(uow.session, user, code, path, self.curriculum)
            submission = await attempt.save()
            await uow.commit()
            return submission

    async def submit_as(self, username: str, code: str, path: str) -> Submission:
        """Like :meth:`submit`, looking the user up by username."""
        async with create_unit_of_work(self.session_factory) as uow:
            user = await uow.users.get_by_username(username)
            if user is None:
                raise UserNotFoundError(username)
            user_id = user.id
        return await self.submit(user_id, code, path)

    # ==========================================
    # LIFECYCLE
    # ==========================================

    async def hibernate(self, submission_id: str | UUID) -> Submission:
        """Park a pending submission."""
        return await self._transition(submission_id, SubmissionState.hibernating)

    async def wake(self, submission_id: str | UUID) -> Submission:
        """Return a hibernating submission to pending."""
        return await self._transition(submission_id, SubmissionState.pending)

    async def complete(self, submission_id: str | UUID) -> Submission:
        """Mark a current submission as completed."""
        return await self._transition(submission_id, SubmissionState.completed)

    async def mute(self, submission_id: str | UUID, user_id: str | UUID) -> Submission:
        """Hide a submission from a user's queue until the next attempt."""
        async with create_unit_of_work(self.session_factory) as uow:
            submission = await self._get_submission(uow, submission_id)
            user = await uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(str(user_id))
            if user not in submission.muted_by:
                submission.muted_by.append(user)
            await uow.commit()
            logger.info("submission_muted", submission_id=str(submission.id), user_id=str(user.id))
            return submission

    async def unmute(self, submission_id: str | UUID, user_id: str | UUID) -> Submission:
        async with create_unit_of_work(self.session_factory) as uow:
            submission = await self._get_submission(uow, submission_id)
            submission.muted_by = [u for u in submission.muted_by if str(u.id) != str(user_id)]
            await uow.commit()
            return submission

    # ==========================================
    # HELPERS
    # ==========================================

    async def _transition(
        self,
        submission_id: str | UUID,
        target: SubmissionState,
    ) -> Submission:
        async with create_unit_of_work(self.session_factory) as uow:
            submission = await self._get_submission(uow, submission_id)
            previous_state = submission.state
            transition(submission, target)
            await uow.commit()
            logger.info(
                "submission_transitioned",
                submission_id=str(submission.id),
                from_state=previous_state,
                to_state=target.value,
            )
            return submission

    async def _get_submission(self, uow: UnitOfWork, submission_id: str | UUID) -> Submission:
        submission = await uow.submissions.get_by_id(submission_id)
        if submission is None:
            raise SubmissionNotFoundError(str(submission_id))
        return submission
