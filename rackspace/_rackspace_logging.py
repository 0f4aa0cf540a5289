import logging
import os
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL_ENV = "RACKSPACE_LOG_LEVEL"


def _parse_level(level: Union[int, str, None]) -> int:
    if level is None or level == "":
        return logging.INFO
    if isinstance(level, int):
        return level
    parsed = logging.getLevelName(level.upper())
    return parsed if isinstance(parsed, int) else logging.INFO


class LoggerConfig:
    """
    Logger configuration class for the console loggers of the rackspace package.

    Each module asks for its own logger (``LoggerConfig(logger_name=__name__)``). A
    console handler is attached only when the logger has none, so importing modules
    repeatedly never duplicates output.

    Attributes:
        logger_name (str): Name of the logger instance.
        log_level (int): Logging level for the logger instance. When not given, the
            ``RACKSPACE_LOG_LEVEL`` environment variable is used, falling back to INFO.
    """

    def __init__(self, logger_name: str = "rackspace", log_level: Union[int, str, None] = None):
        self.logger_name = logger_name
        self.log_level = _parse_level(log_level if log_level is not None else os.getenv(LOG_LEVEL_ENV))
        self.logger = self._initialize_logger()

    def _initialize_logger(self) -> logging.Logger:
        logger = logging.getLogger(self.logger_name)
        logger.setLevel(self.log_level)

        if not logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(self.log_level)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(console_handler)
            # Parent "rackspace" loggers would print the same record twice
            logger.propagate = False

        return logger

    def get_logger(self) -> logging.Logger:
        return self.logger

    def set_level(self, log_level: Union[int, str]) -> None:
        """Change the level of the logger and of its handlers."""
        self.log_level = _parse_level(log_level)
        self.logger.setLevel(self.log_level)
        for handler in self.logger.handlers:
            handler.setLevel(self.log_level)
