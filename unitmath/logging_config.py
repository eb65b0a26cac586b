import logging
import sys

from environs import Env

from unitmath.config import load_settings

PACKAGE_LOGGER = "unitmath"


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    settings = load_settings(env)

    numeric_level = getattr(logging, settings.logging_level, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {settings.logging_level}")

    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    if logging.root.handlers:  # Check if logging is already configured
        return

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
