"""Console logging for cpcrain.

Library modules only create loggers; handlers are installed here, on the
package logger, when an application asks for them.
"""

import logging

__all__ = ['configure_logging', 'LOG_FORMAT']

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(level="INFO") -> logging.Logger:
    """Attach a single console handler to the ``cpcrain`` logger.

    Parameters
    ----------
    level : str, int or InternalConfig
        Log level name/number, or a config whose ``logging.level`` is used.

    Returns
    -------
    logging.Logger
        The package logger. Calling again replaces the handler rather than
        adding a second one.
    """
    if hasattr(level, "logging"):
        level = level.logging.level
    if isinstance(level, str):
        level = level.upper()

    package_logger = logging.getLogger("cpcrain")
    package_logger.setLevel(level)

    for handler in package_logger.handlers[:]:
        if getattr(handler, "_cpcrain_console", False):
            package_logger.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    ch._cpcrain_console = True
    package_logger.addHandler(ch)

    package_logger.debug("Logging: level=%s", logging.getLevelName(package_logger.level))
    return package_logger
