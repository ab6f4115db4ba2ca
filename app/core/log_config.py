import logging

from app.core.config import settings


def configure_logging(level: str | None = None) -> int:
    """Initializes root logging for the application.

    Args:
        level (str | None): Level name overriding settings.LOG_LEVEL.

    Returns:
        int: The numeric level that was applied.

    Raises:
        ValueError: If the level name is not a known logging level.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=numeric_level,
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler()] # This sends it to the Terminal
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(numeric_level)
    return numeric_level
