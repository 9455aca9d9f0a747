from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

ROOT_LOGGER_NAME = "flightgraph"

_HANDLER_ATTR = "_flightgraph_handler"


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    level: Optional[str] = None,
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling this again only updates the level and format of the handler
    installed the first time.
    """
    config = config or get_config().observability
    level_name = (level or config.level).upper()

    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ConfigurationError(
            f"Unknown log level: {level_name}",
            setting_name="level",
            expected_type="DEBUG|INFO|WARNING|ERROR|CRITICAL",
        )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)

    handler = next(
        (h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)

    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(config.format))

    logger.debug("Logging configured", extra={"level": level_name})
    return logger
