"""SQLAlchemy ORM models for users, submissions, and teams."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    JSON,
    Column,
    CheckConstraint,
    ForeignKey,
    Index,
    Table,
    Text,
    Uuid,
    text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.types import DateTime

from exercism.curriculum.exercise import Exercise
from exercism.shared.utils.datetime_utils import utcnow
from exercism.submissions.code import normalize_code
from exercism.submissions.state_machine import CURRENT_STATES, SubmissionState

_CURRENT_STATES_SQL = "state IN ('pending','hibernating')"


class Base(DeclarativeBase):
    pass


# ---------------------------------------------------------------------------
# Association tables
# ---------------------------------------------------------------------------


team_memberships = Table(
    "team_memberships",
    Base.metadata,
    Column("team_id", Uuid, ForeignKey("teams.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)

submission_mutes = Table(
    "submission_mutes",
    Base.metadata,
    Column(
        "submission_id",
        Uuid,
        ForeignKey("submissions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(Base):
    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    # Legacy record of finished exercises: {language: [slug, ...]}.
    completed: Mapped[dict[str, list[str]]] = mapped_column(
        JSON, nullable=False, default=dict
    )
    # Exercise being worked on per language: {language: slug}.
    current: Mapped[dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    submissions: Mapped[list["Submission"]] = relationship(
        back_populates="user",
        foreign_keys="Submission.user_id",
        order_by="Submission.created_at",
    )

    def __repr__(self) -> str:
        return f"<User {self.username}>"

    def working_on(self, exercise: Exercise) -> bool:
        return (self.current or {}).get(exercise.language) == exercise.slug


# ---------------------------------------------------------------------------
# Submissions
# ---------------------------------------------------------------------------


class Submission(Base):
    __tablename__ = "submissions"
    __table_args__ = (
        Index("idx_submissions_key", "user_id", "language", "slug", "created_at"),
        # At most one current submission per (user, language, slug).
        Index(
            "uq_submissions_current",
            "user_id",
            "language",
            "slug",
            unique=True,
            postgresql_where=text(_CURRENT_STATES_SQL),
            sqlite_where=text(_CURRENT_STATES_SQL),
        ),
        CheckConstraint(
            "state IN ('pending','hibernating','superseded','completed')",
            name="ck_submission_state",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    language: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[str] = mapped_column(Text, nullable=False, default="")
    state: Mapped[str] = mapped_column(
        Text, nullable=False, default=SubmissionState.pending.value
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    user: Mapped["User"] = relationship(
        back_populates="submissions", foreign_keys=[user_id]
    )
    muted_by: Mapped[list["User"]] = relationship(secondary=submission_mutes)

    def __repr__(self) -> str:
        return f"<Submission {self.language}/{self.slug} {self.state}>"

    @property
    def exercise(self) -> Exercise:
        return Exercise(self.language, self.slug)

    @property
    def is_current(self) -> bool:
        return self.state in CURRENT_STATES

    @property
    def is_pending(self) -> bool:
        return self.state == SubmissionState.pending

    @property
    def is_superseded(self) -> bool:
        return self.state == SubmissionState.superseded

    def matches(self, code: str) -> bool:
        """Whether this submission holds the same code, ignoring trailing newlines."""
        return normalize_code(self.code or "") == code


# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------


class Team(Base):
    __tablename__ = "teams"
    __table_args__ = (Index("idx_teams_creator", "creator_id"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    slug: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    creator_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    creator: Mapped["User"] = relationship(foreign_keys=[creator_id])
    members: Mapped[list["User"]] = relationship(secondary=team_memberships)

    def __repr__(self) -> str:
        return f"<Team {self.slug}>"
