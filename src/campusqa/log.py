# src/campusqa/log.py
"""Logging setup for applications embedding campus-qa.

Library modules only create loggers; handlers are installed here, by the CLI
or by the host application.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Third-party loggers that are noisy at INFO
_QUIET_LOGGERS = ("LiteLLM", "litellm", "httpx")


def configure_logging(level: int | str = logging.INFO) -> None:
    """Install a single stream handler on the ``campusqa`` logger.

    Calling this more than once replaces the previous handler.
    """
    logger = logging.getLogger("campusqa")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
