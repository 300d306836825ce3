"""Repository layer for database operations."""

from exercism.repositories.base import BaseRepository
from exercism.repositories.exceptions import (
    DuplicateEntityError,
    RepositoryError,
    TransactionError,
)
from exercism.repositories.submission_repository import SubmissionRepository
from exercism.repositories.team_repository import TeamRepository
from exercism.repositories.unit_of_work import UnitOfWork, create_unit_of_work
from exercism.repositories.user_repository import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    # Unit of Work
    "UnitOfWork",
    "create_unit_of_work",
    # Exceptions
    "RepositoryError",
    "DuplicateEntityError",
    "TransactionError",
    # Repositories
    "UserRepository",
    "SubmissionRepository",
    "TeamRepository",
]
