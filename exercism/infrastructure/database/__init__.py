"""Database infrastructure package."""

from exercism.infrastructure.database.models import Base, Submission, Team, User
from exercism.infrastructure.database.session import (
    close_db,
    get_session_factory,
    init_db,
)

__all__ = [
    "Base",
    "Submission",
    "Team",
    "User",
    "close_db",
    "get_session_factory",
    "init_db",
]
