"""Team repository."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from exercism.infrastructure.database.models import Team, User, team_memberships
from exercism.repositories.base import BaseRepository
from exercism.repositories.exceptions import DuplicateEntityError
from exercism.shared.utils.logging import get_logger

logger = get_logger(__name__)


class TeamRepository(BaseRepository[Team]):
    """Repository for Team database operations."""

    model_class = Team

    async def create_team(
        self,
        slug: str,
        creator: User,
        members: Iterable[User] = (),
    ) -> Team:
        """Create a team.

        Raises:
            DuplicateEntityError: If the slug is taken
        """
        if await self.get_by_slug(slug) is not None:
            raise DuplicateEntityError("Team", "slug", slug)

        team = await self.add(Team(slug=slug, creator=creator, members=list(members)))
        logger.info("team_created", team_id=str(team.id), slug=slug, creator=creator.username)
        return team

    async def get_by_slug(self, slug: str) -> Team | None:
        query = (
            select(Team)
            .where(Team.slug == slug)
            .options(selectinload(Team.members), selectinload(Team.creator))
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_by_member(self, user_id: UUID) -> list[Team]:
        """Teams the user belongs to as a member, with creators and members loaded."""
        query = (
            select(Team)
            .join(team_memberships, team_memberships.c.team_id == Team.id)
            .where(team_memberships.c.user_id == user_id)
            .options(selectinload(Team.members), selectinload(Team.creator))
            .order_by(Team.slug)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return list(result.scalars().unique().all())
