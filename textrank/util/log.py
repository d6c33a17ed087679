import logging
import os

# Environment variable to read the custom logging level from
LOGGING_LEVEL_ENV_VARIABLE = 'TEXTRANK_LOGGING_LEVEL'

# Used when the environment variable is not set or invalid
DEFAULT_LOGGING_LEVEL = 'INFO'

__LOGGING_LEVELS = {
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'DEBUG': logging.DEBUG,
}


def logging_level_from_environment() -> int:
    """Return "logging" level named by TEXTRANK_LOGGING_LEVEL, or the default one if it's unset or unknown."""
    level_name = os.environ.get(LOGGING_LEVEL_ENV_VARIABLE, DEFAULT_LOGGING_LEVEL).strip().upper()
    if level_name not in __LOGGING_LEVELS:
        logging.getLogger(__name__).warning(
            "Logging level '%s' is invalid, resetting to default '%s'" % (level_name, DEFAULT_LOGGING_LEVEL,)
        )
        level_name = DEFAULT_LOGGING_LEVEL
    return __LOGGING_LEVELS[level_name]


class Logger(object):
    """Logger used by language adapters, configuration and the factory.

    Model loading goes to INFO, degenerate input (None text, empty sentences) to WARNING / DEBUG."""

    __slots__ = [
        # "logging" object
        '__l',
    ]

    def __init__(self, name: str):
        self.__l = logging.getLogger(name)

        # Handler gets added once per name; subsequent create_logger() calls reuse it
        if not self.__l.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(
                fmt='%(asctime)s %(levelname)s %(name)s [%(process)d/%(threadName)s]: %(message)s'
            ))
            self.__l.addHandler(handler)

            self.__l.setLevel(logging_level_from_environment())

            # Adapters are used as a library, so don't duplicate messages through the root logger
            self.__l.propagate = False

    @property
    def level(self) -> int:
        return self.__l.level

    def error(self, message: str) -> None:
        self.__l.error(message)

    def warning(self, message: str) -> None:
        self.__l.warning(message)

    def info(self, message: str) -> None:
        self.__l.info(message)

    def debug(self, message: str) -> None:
        self.__l.debug(message)


def create_logger(name: str) -> Logger:
    """Create and return Logger object."""
    return Logger(name=name)
