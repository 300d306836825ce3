"""Tests for the curriculum registry and language curricula."""

import pytest

from exercism.config import ExercismSettings
from exercism.curriculum.exercise import Exercise
from exercism.curriculum.languages import OcamlCurriculum, StaticCurriculum
from exercism.curriculum.registry import Curriculum, build_curriculum
from exercism.submissions.exceptions import (
    ExerciseResolutionError,
    UnknownExerciseError,
    UnknownLanguageError,
)
from tests.factories import FakePythonCurriculum, FakeRubyCurriculum


class TestExercise:
    def test_equality_by_language_and_slug(self):
        assert Exercise("ruby", "two") == Exercise("ruby", "two")
        assert Exercise("ruby", "two") != Exercise("python", "two")

    def test_hashable(self):
        assert len({Exercise("ruby", "two"), Exercise("ruby", "two")}) == 1

    def test_str(self):
        assert str(Exercise("ocaml", "word-count")) == "ocaml/word-count"


class TestResolve:
    """Test Curriculum.resolve."""

    def test_resolves_ruby_path(self, curriculum):
        assert curriculum.resolve("two/two.rb") == Exercise("ruby", "two")

    def test_resolves_python_path(self, curriculum):
        assert curriculum.resolve("one/one.py") == Exercise("python", "one")

    def test_slug_comes_from_directory(self, curriculum):
        assert curriculum.resolve("three/solution.rb") == Exercise("ruby", "three")

    def test_nested_path(self, curriculum):
        assert curriculum.resolve("/home/alice/exercism/ruby/cake/cake.rb") == Exercise(
            "ruby", "cake"
        )

    def test_windows_separators(self, curriculum):
        assert curriculum.resolve("two\\two.py") == Exercise("python", "two")

    def test_bare_file_name_uses_stem(self, curriculum):
        assert curriculum.resolve("two.rb") == Exercise("ruby", "two")

    def test_unknown_extension(self, curriculum):
        with pytest.raises(UnknownLanguageError) as exc_info:
            curriculum.resolve("two/two.txt")
        assert exc_info.value.error_type == "unknown_language"

    def test_no_extension(self, curriculum):
        with pytest.raises(UnknownLanguageError):
            curriculum.resolve("two/two")

    def test_known_extension_without_registered_curriculum(self, curriculum):
        with pytest.raises(UnknownLanguageError):
            curriculum.resolve("bob/bob.ml")

    def test_unknown_slug(self, curriculum):
        with pytest.raises(UnknownExerciseError) as exc_info:
            curriculum.resolve("cake/cake.py")
        assert exc_info.value.language == "python"
        assert exc_info.value.slug == "cake"

    def test_resolution_errors_share_a_base(self, curriculum):
        for path in ("two/two.txt", "cake/cake.py"):
            with pytest.raises(ExerciseResolutionError):
                curriculum.resolve(path)


class TestRegistry:
    """Test registering and listing curricula."""

    def test_empty_registry(self):
        curriculum = Curriculum()
        assert curriculum.languages() == []
        with pytest.raises(UnknownLanguageError):
            curriculum.resolve("two/two.rb")

    def test_languages(self, curriculum):
        assert curriculum.languages() == ["python", "ruby"]

    def test_slugs_in_order(self, curriculum):
        assert curriculum.slugs("ruby") == ["one", "two", "three", "cake"]

    def test_slugs_for_unknown_language(self, curriculum):
        with pytest.raises(UnknownLanguageError):
            curriculum.slugs("cobol")

    def test_add_replaces_same_language(self, curriculum):
        curriculum.add(StaticCurriculum("ruby", ["bob"]))
        assert curriculum.slugs("ruby") == ["bob"]
        with pytest.raises(UnknownExerciseError):
            curriculum.resolve("two/two.rb")

    def test_constructor_registers_curricula(self):
        curriculum = Curriculum([FakeRubyCurriculum(), FakePythonCurriculum()])
        assert curriculum.languages() == ["python", "ruby"]

    def test_custom_extensions(self):
        curriculum = Curriculum([FakeRubyCurriculum()], extensions={"rbx": "ruby"})
        assert curriculum.resolve("one/one.rbx") == Exercise("ruby", "one")
        with pytest.raises(UnknownLanguageError):
            curriculum.resolve("one/one.rb")

    def test_language_for(self, curriculum):
        assert curriculum.language_for("two/two.RB") == "ruby"


class TestLanguageCurricula:
    def test_static_curriculum(self):
        static = StaticCurriculum("go", ["hello-world", "leap"])
        assert static.language() == "go"
        assert list(static.slugs()) == ["hello-world", "leap"]

    def test_ocaml_curriculum(self):
        ocaml = OcamlCurriculum()
        assert ocaml.language() == "ocaml"
        slugs = list(ocaml.slugs())
        assert slugs[0] == "bob"
        assert slugs[-2:] == ["prime-factors", "zipper"]
        assert len(slugs) == len(set(slugs)) == 12


class TestBuildCurriculum:
    def test_includes_builtin_ocaml(self):
        curriculum = build_curriculum(ExercismSettings())
        assert curriculum.resolve("bob/bob.ml") == Exercise("ocaml", "bob")

    def test_configured_slug_lists(self):
        settings = ExercismSettings(curricula={"ruby": ["bob", "leap"]})
        curriculum = build_curriculum(settings)
        assert curriculum.languages() == ["ocaml", "ruby"]
        assert curriculum.resolve("leap/leap.rb") == Exercise("ruby", "leap")
