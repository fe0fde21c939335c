"""
Logging setup for command-line and interactive use.

Library modules only create module loggers (logging.getLogger(__name__))
and never configure handlers. Applications call setup() once to get colored
output from everything under the "distviz" logger.
"""

import logging
from typing import Optional

import colorlog

ROOT_LOGGER = "distviz"
LOG_FORMAT = "%(log_color)s%(name)s [%(levelname)s] %(message)s"


def setup(level: int = logging.INFO, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """
    Attach a colored stream handler and set the level.

    Args:
        level: Logging level (e.g. logging.DEBUG)
        logger: Logger to configure; defaults to the "distviz" logger

    Returns:
        The configured logger

    Examples:
        >>> import logging
        >>> from distviz.utils import log
        >>> log.setup(logging.DEBUG).name
        'distviz'

    Notes:
        Calling setup() again only changes the level; the colored handler
        is attached once.
    """
    if logger is None:
        logger = colorlog.getLogger(ROOT_LOGGER)

    logger.setLevel(level)
    if not any(isinstance(h, colorlog.StreamHandler) for h in logger.handlers):
        handler = colorlog.StreamHandler()
        handler.setFormatter(colorlog.ColoredFormatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
