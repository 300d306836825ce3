"""Submission repository."""

from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.orm import selectinload

from exercism.infrastructure.database.models import Submission
from exercism.repositories.base import BaseRepository, parse_uuid
from exercism.submissions.null_submission import NullSubmission


class SubmissionRepository(BaseRepository[Submission]):
    """Repository for Submission database operations."""

    model_class = Submission

    async def get_by_id(self, submission_id: str | UUID) -> Submission | None:
        """Fetch a submission with its mute list, refreshing any loaded copy."""
        parsed_id = parse_uuid(submission_id)
        if parsed_id is None:
            return None
        query = (
            select(Submission)
            .where(Submission.id == parsed_id)
            .options(selectinload(Submission.muted_by))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def latest_for(
        self,
        user_id: UUID,
        language: str,
        slug: str,
    ) -> Submission | NullSubmission:
        """Most recent submission for the key, or a NullSubmission."""
        query = (
            select(Submission)
            .where(
                and_(
                    Submission.user_id == user_id,
                    Submission.language == language,
                    Submission.slug == slug,
                )
            )
            .options(selectinload(Submission.muted_by))
            .order_by(Submission.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(query)
        submission = result.scalar_one_or_none()
        if submission is None:
            return NullSubmission(language, slug)
        return submission

    async def list_for_user(
        self,
        user_id: UUID,
        language: str | None = None,
        slug: str | None = None,
    ) -> list[Submission]:
        """List a user's submissions, oldest first."""
        conditions = [Submission.user_id == user_id]
        if language:
            conditions.append(Submission.language == language)
        if slug:
            conditions.append(Submission.slug == slug)
        query = (
            select(Submission)
            .where(and_(*conditions))
            .options(selectinload(Submission.muted_by))
            .order_by(Submission.created_at)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def users_with_submission(
        self,
        user_ids: set[UUID],
        language: str,
        slug: str,
    ) -> set[UUID]:
        """Subset of ``user_ids`` owning any submission for the exercise."""
        if not user_ids:
            return set()
        query = (
            select(Submission.user_id)
            .where(
                and_(
                    Submission.user_id.in_(user_ids),
                    Submission.language == language,
                    Submission.slug == slug,
                )
            )
            .distinct()
        )
        result = await self.session.execute(query)
        return set(result.scalars().all())

