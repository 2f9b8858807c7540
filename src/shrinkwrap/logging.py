import logging
import os

PACKAGE = "shrinkwrap"

# Level set through settings; takes precedence over the environment.
_level_override: int | None = None


def _default_level(name: str) -> int:
    # Library modules stay quiet unless asked; the CLI reports at INFO.
    # SHRINKWRAP_LOG_LEVEL overrides both.
    default_level = logging.WARNING
    if name.startswith("shrinkwrap.cli"):
        default_level = logging.INFO

    level_name = os.getenv("SHRINKWRAP_LOG_LEVEL", logging.getLevelName(default_level))
    level = getattr(logging, level_name.upper(), default_level)
    if not isinstance(level, int):
        level = default_level
    return level


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if _level_override is not None:
        logger.setLevel(_level_override)
    else:
        logger.setLevel(_default_level(name))
    return logger


def set_level(level: str | int) -> None:
    """Set the level of every shrinkwrap logger, including ones created later.

    Args:
        level: Level name (e.g. "DEBUG") or number
    """
    global _level_override
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    _level_override = level
    for name in list(logging.Logger.manager.loggerDict):
        if name == PACKAGE or name.startswith(PACKAGE + "."):
            logging.getLogger(name).setLevel(level)
