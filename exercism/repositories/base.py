"""Base repository providing common lookups for UUID-keyed models."""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


def parse_uuid(value: str | UUID) -> UUID | None:
    """Parse a string to UUID, returning None for malformed input."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value)
    except (ValueError, AttributeError):
        return None


class BaseRepository(Generic[T]):
    """Common CRUD helpers; subclasses set ``model_class``."""

    model_class: type[T]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, entity_id: str | UUID) -> T | None:
        parsed_id = parse_uuid(entity_id)
        if parsed_id is None:
            return None
        return await self.session.get(self.model_class, parsed_id)

    async def add(self, entity: T) -> T:
        """Persist a new entity and flush so generated values are populated."""
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def count(self) -> int:
        query = select(func.count()).select_from(self.model_class)
        result = await self.session.execute(query)
        return result.scalar() or 0
