import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple

from ..common.errors import AppError, ErrorKind, Severity
from .levels import LogLevel

logger = logging.getLogger(__name__)

DEFAULT_ORDER: Tuple[LogLevel, ...] = (LogLevel.INFO, LogLevel.DEBUG, LogLevel.ERROR)


class LogProcessor(ABC):
    """
    One link of the processor chain. A processor prints messages tagged with
    its own level and hands everything else to its successor; a message that
    reaches a processor without a successor is dropped without output.
    """

    @property
    @abstractmethod
    def level(self) -> LogLevel:
        pass

    def __init__(self, next_processor: Optional["LogProcessor"] = None):
        self._next = next_processor

    @property
    def next_processor(self) -> Optional["LogProcessor"]:
        return self._next

    def log(self, level: Any, message: str) -> None:
        if level == self.level:
            print(f"{self.level.label} Log: {message}")
        elif self._next is not None:
            self._next.log(level, message)
        else:
            logger.debug("No processor accepted level %r; message dropped", level)

    def levels(self) -> Tuple[LogLevel, ...]:
        """Levels handled from this processor to the end of the chain, in order."""
        found = []
        node: Optional[LogProcessor] = self
        while node is not None:
            found.append(node.level)
            node = node.next_processor
        return tuple(found)


class InfoLogProcessor(LogProcessor):
    @property
    def level(self) -> LogLevel:
        return LogLevel.INFO


class DebugLogProcessor(LogProcessor):
    @property
    def level(self) -> LogLevel:
        return LogLevel.DEBUG


class ErrorLogProcessor(LogProcessor):
    @property
    def level(self) -> LogLevel:
        return LogLevel.ERROR


PROCESSOR_TYPES = {
    LogLevel.INFO: InfoLogProcessor,
    LogLevel.DEBUG: DebugLogProcessor,
    LogLevel.ERROR: ErrorLogProcessor,
}


def build_chain(order: Sequence[LogLevel] = DEFAULT_ORDER) -> LogProcessor:
    """
    Wrap processors innermost first so that order[0] becomes the head of the chain.
    """
    try:
        levels = [LogLevel(level) for level in order]
    except ValueError as exc:
        raise AppError(str(exc), Severity.ABORT, ErrorKind.CHAIN, original_exception=exc)
    if not levels:
        raise AppError("Processor chain needs at least one level.", Severity.ABORT, ErrorKind.CHAIN)
    if len(set(levels)) != len(levels):
        raise AppError(
            f"Processor chain lists a level more than once: {[lvl.name for lvl in levels]}",
            Severity.ABORT,
            ErrorKind.CHAIN,
        )

    head: Optional[LogProcessor] = None
    for level in reversed(levels):
        head = PROCESSOR_TYPES[level](head)

    logger.debug("Built processor chain: %s", " -> ".join(lvl.name for lvl in levels))
    return head
