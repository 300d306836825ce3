"""Test data factories for the exercism core."""

from tests.factories.curricula import FakePythonCurriculum, FakeRubyCurriculum
from tests.factories.records import create_submission, create_team, create_user

__all__ = [
    "FakePythonCurriculum",
    "FakeRubyCurriculum",
    "create_submission",
    "create_team",
    "create_user",
]
