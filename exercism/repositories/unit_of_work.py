"""Unit of Work pattern implementation.

Provides transaction management and repository coordination
for atomic operations across multiple repositories.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from exercism.repositories.exceptions import TransactionError
from exercism.repositories.submission_repository import SubmissionRepository
from exercism.repositories.team_repository import TeamRepository
from exercism.repositories.user_repository import UserRepository
from exercism.shared.utils.logging import get_logger

logger = get_logger(__name__)


class UnitOfWork:
    """Single transaction boundary for multiple repository operations.

    Usage:
        async with UnitOfWork(session_factory) as uow:
            user = await uow.users.get_by_username("alice")
            ...
            await uow.commit()

    Anything not explicitly committed is rolled back on exit.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | Callable[[], AsyncSession],
    ) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

        self._users: UserRepository | None = None
        self._submissions: SubmissionRepository | None = None
        self._teams: TeamRepository | None = None

    @property
    def session(self) -> AsyncSession:
        """Get the current database session.

        Raises:
            RuntimeError: If the Unit of Work has not been entered
        """
        if self._session is None:
            raise RuntimeError("Unit of Work not started. Use 'async with' context manager.")
        return self._session

    @property
    def users(self) -> UserRepository:
        if self._users is None:
            self._users = UserRepository(self.session)
        return self._users

    @property
    def submissions(self) -> SubmissionRepository:
        if self._submissions is None:
            self._submissions = SubmissionRepository(self.session)
        return self._submissions

    @property
    def teams(self) -> TeamRepository:
        if self._teams is None:
            self._teams = TeamRepository(self.session)
        return self._teams

    async def __aenter__(self) -> UnitOfWork:
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if self._session is None:
            return

        try:
            await self.rollback()
            if exc_type is not None:
                logger.debug("transaction_rolled_back", exception_type=exc_type.__name__)
        finally:
            await self._session.close()
            self._session = None
            self._reset_repositories()

    async def commit(self) -> None:
        """Commit the current transaction.

        Raises:
            TransactionError: If the commit fails
        """
        if self._session is None:
            raise RuntimeError("Unit of Work not started")

        try:
            await self._session.commit()
            logger.debug("transaction_committed")
        except Exception as e:
            await self.rollback()
            raise TransactionError("Failed to commit transaction", original_error=e) from e

    async def rollback(self) -> None:
        if self._session is not None:
            await self._session.rollback()

    def _reset_repositories(self) -> None:
        self._users = None
        self._submissions = None
        self._teams = None


@asynccontextmanager
async def create_unit_of_work(
    session_factory: async_sessionmaker[AsyncSession] | Callable[[], AsyncSession],
) -> AsyncGenerator[UnitOfWork, None]:
    """Create a Unit of Work context manager."""
    uow = UnitOfWork(session_factory)
    async with uow:
        yield uow


__all__ = [
    "UnitOfWork",
    "create_unit_of_work",
]
