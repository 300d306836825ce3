"""User repository."""

from typing import Any
from uuid import UUID

from sqlalchemy import select

from exercism.infrastructure.database.models import User
from exercism.repositories.base import BaseRepository
from exercism.repositories.exceptions import DuplicateEntityError
from exercism.shared.utils.logging import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    model_class = User

    async def create_user(
        self,
        username: str,
        completed: dict[str, list[str]] | None = None,
        **kwargs: Any,
    ) -> User:
        """Create a user.

        Raises:
            DuplicateEntityError: If the username is taken
        """
        if await self.get_by_username(username) is not None:
            raise DuplicateEntityError("User", "username", username)

        user = await self.add(User(username=username, completed=completed or {}, **kwargs))
        logger.info("user_created", user_id=str(user.id), username=username)
        return user

    async def get_by_username(self, username: str) -> User | None:
        query = select(User).where(User.username == username)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def completed_records(self, user_ids: set[UUID]) -> dict[UUID, dict[str, list[str]]]:
        """Legacy completed records for ``user_ids``, read from the database."""
        if not user_ids:
            return {}
        query = select(User.id, User.completed).where(User.id.in_(user_ids))
        result = await self.session.execute(query)
        return {user_id: completed or {} for user_id, completed in result.all()}
