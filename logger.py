import logging
import os

LOGGER_NAME = "heapkit"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_env_level = os.environ.get("HEAPKIT_LOG_LEVEL")
if _env_level:
    try:
        logger.setLevel(_env_level.upper())
    except ValueError:
        logger.warning("ignoring unknown HEAPKIT_LOG_LEVEL %r", _env_level)


def set_verbose(verbose: bool) -> None:
    """Send debug output of the data structures to stderr."""
    if verbose:
        if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
            logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)


def print_(message, *args, level=logging.DEBUG):
    logger.log(level, message, *args)
