"""Package logger.

Request and conflict details are logged at DEBUG. The stderr handler installed
on import stays at WARNING; raise it with ``setup_logger(logging.DEBUG)``.
"""

import logging
import sys

logger = logging.getLogger("hawkular")

_FORMAT = "hawkular: %(levelname)s %(message)s"


def setup_logger(level: int = logging.WARNING) -> None:
    """Attach a stderr handler to the ``hawkular`` logger, or update its level.

    Args:
        level: Level for both the logger and its handler
    """
    logger.setLevel(level)
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(stream_handler)
    logger.propagate = False


setup_logger()
