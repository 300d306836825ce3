"""Cohort: who a user works alongside and who may see their work."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from exercism.curriculum.exercise import Exercise
from exercism.infrastructure.database.models import Team, User
from exercism.repositories.submission_repository import SubmissionRepository
from exercism.repositories.team_repository import TeamRepository
from exercism.repositories.user_repository import UserRepository


def _by_username(users: dict[UUID, User], ids: set[UUID]) -> list[User]:
    return sorted((users[user_id] for user_id in ids), key=lambda u: u.username)


class Cohort:
    """Teammates and managers of one subject user.

    Built from the teams the subject belongs to as a member. Creating a team
    does not make its creator part of their own cohort. Team membership is
    read once by :meth:`for_user`; :meth:`sees` re-reads completion data on
    every call.
    """

    def __init__(self, session: AsyncSession, subject: User, teams: list[Team]):
        self.session = session
        self.subject = subject
        self.teams = teams

        self._users: dict[UUID, User] = {}
        self._member_ids: set[UUID] = set()
        self._manager_ids: set[UUID] = set()
        for team in teams:
            self._users[team.creator.id] = team.creator
            self._manager_ids.add(team.creator.id)
            for member in team.members:
                self._users[member.id] = member
                self._member_ids.add(member.id)

        self._member_ids.discard(subject.id)
        self._manager_ids.discard(subject.id)

    @classmethod
    async def for_user(cls, session: AsyncSession, subject: User) -> Cohort:
        """Compute the cohort from current team data."""
        teams = await TeamRepository(session).list_by_member(subject.id)
        return cls(session, subject, teams)

    @property
    def members(self) -> list[User]:
        """Peers across all of the subject's teams, sorted by username."""
        return _by_username(self._users, self._member_ids)

    @property
    def managers(self) -> list[User]:
        """Creators of the subject's teams, sorted by username."""
        return _by_username(self._users, self._manager_ids)

    @property
    def users(self) -> set[User]:
        return {self._users[user_id] for user_id in self._member_ids | self._manager_ids}

    async def sees(self, exercise: Exercise) -> list[User]:
        """Users who may look at the subject's work on ``exercise``.

        Managers always can. Peers can once they have done the exercise
        themselves: it is in their legacy completed record or they have
        submitted code for it.
        """
        records = await UserRepository(self.session).completed_records(self._member_ids)
        done_ids = {
            user_id
            for user_id, completed in records.items()
            if exercise.slug in completed.get(exercise.language, [])
        }
        done_ids |= await SubmissionRepository(self.session).users_with_submission(
            self._member_ids - done_ids, exercise.language, exercise.slug
        )
        return _by_username(self._users, self._manager_ids | done_ids)
