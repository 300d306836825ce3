"""Configuration for the exercism core."""

from functools import lru_cache

from pydantic_settings import BaseSettings

# File extension → language identifier for submitted paths.
DEFAULT_EXTENSIONS: dict[str, str] = {
    "clj": "clojure",
    "coffee": "coffeescript",
    "ex": "elixir",
    "exs": "elixir",
    "go": "go",
    "hs": "haskell",
    "js": "javascript",
    "ml": "ocaml",
    "py": "python",
    "rb": "ruby",
    "scala": "scala",
}


class ExercismSettings(BaseSettings):
    """Exercism core settings."""

    model_config = {"env_file": ".env", "env_prefix": "EXERCISM_", "case_sensitive": False}

    # Database
    database_url: str = "sqlite+aiosqlite:///./exercism.db"
    database_echo: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Curriculum
    extensions: dict[str, str] = dict(DEFAULT_EXTENSIONS)
    # Extra slug lists per language, e.g. EXERCISM_CURRICULA='{"ruby": ["bob"]}'
    curricula: dict[str, list[str]] = {}


@lru_cache
def get_settings() -> ExercismSettings:
    """Get cached settings instance."""
    return ExercismSettings()
