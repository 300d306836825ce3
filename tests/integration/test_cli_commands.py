"""Integration tests running CLI commands against a SQLite database file."""

import pytest

from exercism import cli
from exercism.config import get_settings


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the CLI at a throwaway SQLite file and keep logging untouched."""
    monkeypatch.setenv("EXERCISM_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
    get_settings.cache_clear()
    assert cli.main(["init-db"]) == 0
    yield
    get_settings.cache_clear()


@pytest.fixture
def solution(tmp_path):
    path = tmp_path / "bob" / "bob.ml"
    path.parent.mkdir()
    path.write_text("let hey _ = \"Whatever.\"\n\n")
    return path


class TestMain:
    def test_add_user_and_submit(self, database, solution, capsys):
        assert cli.main(["add-user", "alice"]) == 0
        assert cli.main(["submit", "alice", str(solution)]) == 0

        out = capsys.readouterr().out
        assert "ocaml/bob pending" in out

    def test_submit_under_another_path(self, database, tmp_path, capsys):
        source = tmp_path / "scratch.ml"
        source.write_text("let () = ()\n")
        assert cli.main(["add-user", "alice"]) == 0
        assert cli.main(["submit", "alice", str(source), "--as", "zipper/zipper.ml"]) == 0

        assert "ocaml/zipper pending" in capsys.readouterr().out

    def test_duplicate_submission_fails(self, database, solution, capsys):
        cli.main(["add-user", "alice"])
        assert cli.main(["submit", "alice", str(solution)]) == 0
        assert cli.main(["submit", "alice", str(solution)]) == 1

        assert "identical" in capsys.readouterr().err

    def test_unknown_user_fails(self, database, solution, capsys):
        assert cli.main(["submit", "nobody", str(solution)]) == 1
        assert "nobody" in capsys.readouterr().err

    def test_duplicate_user_fails(self, database):
        assert cli.main(["add-user", "alice"]) == 0
        assert cli.main(["add-user", "alice"]) == 1

    def test_missing_file_fails(self, database, tmp_path):
        assert cli.main(["add-user", "alice"]) == 0
        assert cli.main(["submit", "alice", str(tmp_path / "nope" / "nope.ml")]) == 1
