from enum import IntEnum

from ..common.errors import AppError, ErrorKind, Severity


class LogLevel(IntEnum):
    INFO = 1
    DEBUG = 2
    ERROR = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


INFO = LogLevel.INFO
DEBUG = LogLevel.DEBUG
ERROR = LogLevel.ERROR


def parse_level(name: str) -> LogLevel:
    """
    Resolve a level name such as "info" or " ERROR " to its LogLevel member.
    """
    key = str(name).strip().upper()
    try:
        return LogLevel[key]
    except KeyError as exc:
        raise AppError(
            f"Unknown log level: {name!r}",
            severity=Severity.ABORT,
            kind=ErrorKind.CONFIG,
            original_exception=exc,
        )
