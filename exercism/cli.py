"""Command-line entry point.

Usage:
    python -m exercism init-db
    python -m exercism add-user USERNAME
    python -m exercism submit USERNAME FILE [--as PATH]

Examples:
    python -m exercism add-user alice
    python -m exercism submit alice bob/bob.ml
    python -m exercism submit alice solution.ml --as bob/bob.ml
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from exercism.config import get_settings
from exercism.curriculum.registry import build_curriculum
from exercism.infrastructure.database.session import (
    close_db,
    get_engine,
    get_session_factory,
    init_db,
)
from exercism.repositories.exceptions import RepositoryError
from exercism.repositories.unit_of_work import UnitOfWork
from exercism.shared.utils.logging import configure_logging, get_logger
from exercism.submissions.exceptions import SubmissionServiceError
from exercism.submissions.service import SubmissionService

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exercism",
        description="Exercism core: submit solutions and manage the submission store",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        default=None,
        help="Logging level (default: from settings)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create database tables")

    add_user = subparsers.add_parser("add-user", help="Create a user")
    add_user.add_argument("username")

    submit = subparsers.add_parser("submit", help="Submit a solution file")
    submit.add_argument("username")
    submit.add_argument("file", type=Path)
    submit.add_argument(
        "--as",
        dest="path",
        default=None,
        help="Exercise path to submit under, e.g. bob/bob.ml (default: FILE)",
    )
    return parser


async def _init_db(args: argparse.Namespace) -> None:
    await init_db(get_engine())
    print("database initialized")


async def _add_user(args: argparse.Namespace) -> None:
    async with UnitOfWork(get_session_factory()) as uow:
        user = await uow.users.create_user(args.username)
        await uow.commit()
    print(f"{user.username} {user.id}")


async def _submit(args: argparse.Namespace) -> None:
    code = args.file.read_text(encoding="utf-8")
    path = args.path or args.file.as_posix()
    service = SubmissionService(get_session_factory(), build_curriculum())
    submission = await service.submit_as(args.username, code, path)
    print(f"{submission.id} {submission.language}/{submission.slug} {submission.state}")


COMMANDS = {
    "init-db": _init_db,
    "add-user": _add_user,
    "submit": _submit,
}


async def run(args: argparse.Namespace) -> None:
    try:
        await COMMANDS[args.command](args)
    finally:
        await close_db()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(
        level=args.log_level or settings.log_level,
        json_format=settings.log_json,
    )

    try:
        asyncio.run(run(args))
    except (SubmissionServiceError, RepositoryError) as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
