"""
Logging configuration for the pizza builder application.

Usage:
    from pizza_builder.logging_config import setup_logging
    setup_logging()  # Call once at application startup

Environment variables:
    LOG_LEVEL: Set to DEBUG, INFO, WARNING, ERROR, or CRITICAL (default: INFO)
    PIZZA_ENGINE_LOG_LEVEL: Level for the selection/validation/pricing
        engine only (pizza_builder.pizza). Defaults to LOG_LEVEL. Set it to
        DEBUG to trace every flavor and ingredient toggle without turning on
        SQL and request debugging.
"""
import logging
import os
import sys

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

APP_LOGGER = "pizza_builder"
ENGINE_LOGGER = "pizza_builder.pizza"

# Third-party loggers held at WARNING unless the app runs at DEBUG
NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "slowapi", "uvicorn.access")


def _parse_level(value, default: str) -> str:
    if not value:
        return default
    value = value.strip().upper()
    return value if value in VALID_LEVELS else default


def setup_logging(level: str = None, engine_level: str = None) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If not provided, reads from LOG_LEVEL env var, defaults to INFO.
        engine_level: Level for the pizza engine loggers. If not provided,
               reads PIZZA_ENGINE_LOG_LEVEL, defaults to the app level.
    """
    level = _parse_level(level or os.getenv("LOG_LEVEL"), "INFO")
    engine_level = _parse_level(engine_level or os.getenv("PIZZA_ENGINE_LOG_LEVEL"), level)

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    logging.getLogger(APP_LOGGER).setLevel(getattr(logging, level))
    # The engine inherits the app level unless it was set on its own
    engine_numeric = logging.NOTSET if engine_level == level else getattr(logging, engine_level)
    logging.getLogger(ENGINE_LOGGER).setLevel(engine_numeric)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if level == "DEBUG" else logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured at %s level (engine: %s)", level, engine_level)
