"""Environment-backed settings."""

from dataclasses import dataclass

from environs import Env


@dataclass(frozen=True, slots=True)
class Settings:
    """Settings read from the environment (and ``.env`` when loaded)."""

    logging_level: str = "INFO"
    debug: bool = False


def load_settings(env: Env) -> Settings:
    """Read settings; the DEBUG flag overrides the log level when set."""
    debug = env.bool("DEBUG", default=False)
    logging_level = env.str("LOGGING_LEVEL", "INFO").upper()
    if debug:
        logging_level = "DEBUG"
    return Settings(logging_level=logging_level, debug=debug)
