"""Lazy, consumer-driven traversal of a date range.

A traversal walks a cursor along the linear day axis and converts one day
count per produced date. The consumer decides after every element whether to
continue, suspend (keep a resumable cursor) or halt (drop remaining state).

Two front ends share the same cursor:
- ``Traversal``: a Python iterator with explicit ``halt``/``suspend``/``resume``
- ``reduce_range``: a reduction driven by ``Directive`` commands that returns
  ``Done``, ``Halted`` or ``Suspended`` results
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from calrange.domain.calendars import from_rata_die
from calrange.domain.models import Calendar, Date

if TYPE_CHECKING:
    from calrange.domain.ranges import DateRange

logger = logging.getLogger(__name__)


class Directive(Enum):
    """What the consumer wants after receiving an element."""

    CONT = "cont"
    SUSPEND = "suspend"
    HALT = "halt"


class TraversalState(Enum):
    RUNNING = "running"
    SUSPENDED = "suspended"
    HALTED = "halted"
    DONE = "done"


@dataclass(frozen=True)
class Cursor:
    """Resumable traversal position.

    ``position`` is the next day count to emit and ``bound`` the last one
    (inclusive). Both are fixed for the cursor's lifetime.
    """

    position: int
    bound: int
    ascending: bool
    calendar: Calendar

    @property
    def exhausted(self) -> bool:
        if self.ascending:
            return self.position > self.bound
        return self.position < self.bound

    @property
    def remaining(self) -> int:
        if self.exhausted:
            return 0
        return abs(self.bound - self.position) + 1

    def current(self) -> Date:
        return from_rata_die(self.position, self.calendar)

    def advance(self) -> "Cursor":
        step = 1 if self.ascending else -1
        return Cursor(self.position + step, self.bound, self.ascending, self.calendar)


class Traversal:
    """Iterator over the dates under a cursor.

    Each ``next()`` performs exactly one calendar conversion. Once halted,
    suspended or done, ``next()`` raises ``StopIteration`` without converting.
    """

    def __init__(self, cursor: Cursor) -> None:
        self._cursor = cursor
        self._state = TraversalState.RUNNING

    @classmethod
    def resume(cls, cursor: Cursor) -> "Traversal":
        """Start a running traversal from a cursor returned by ``suspend``."""
        logger.debug("Resuming traversal at day %d", cursor.position)
        return cls(cursor)

    @property
    def state(self) -> TraversalState:
        return self._state

    def has_next(self) -> bool:
        return self._state is TraversalState.RUNNING and not self._cursor.exhausted

    def __iter__(self) -> "Traversal":
        return self

    def __next__(self) -> Date:
        if self._state is not TraversalState.RUNNING:
            raise StopIteration
        if self._cursor.exhausted:
            self._state = TraversalState.DONE
            raise StopIteration
        date = self._cursor.current()
        self._cursor = self._cursor.advance()
        return date

    def __length_hint__(self) -> int:
        if self._state is not TraversalState.RUNNING:
            return 0
        return self._cursor.remaining

    def halt(self) -> None:
        """Stop for good; the remaining position is discarded."""
        if self._state is TraversalState.DONE:
            return
        logger.debug("Traversal halted before day %d", self._cursor.position)
        self._state = TraversalState.HALTED

    def suspend(self) -> Cursor:
        """Pause and hand back the cursor to resume from later.

        Raises:
            RuntimeError: If the traversal was already halted.
        """
        if self._state is TraversalState.HALTED:
            raise RuntimeError("Cannot suspend a halted traversal")
        if self._state is TraversalState.RUNNING:
            logger.debug("Traversal suspended before day %d", self._cursor.position)
            self._state = TraversalState.SUSPENDED
        return self._cursor


Command = tuple[Directive, Any]
Reducer = Callable[[Date, Any], Command]


@dataclass(frozen=True)
class Done:
    """The bound was passed; every date was handed to the reducer."""

    acc: Any


@dataclass(frozen=True)
class Halted:
    """The consumer halted; no further date was converted."""

    acc: Any


@dataclass(frozen=True)
class Continuation:
    """Re-enters the reduction at a captured cursor."""

    cursor: Cursor
    fun: Reducer

    def __call__(self, command: Command) -> "Result":
        return _reduce(self.cursor, command, self.fun)


@dataclass(frozen=True)
class Suspended:
    """The consumer suspended; ``continuation`` resumes from the same cursor."""

    acc: Any
    continuation: Continuation


Result = Done | Halted | Suspended


def _reduce(cursor: Cursor, command: Command, fun: Reducer) -> Result:
    while True:
        directive, acc = command
        if directive is Directive.HALT:
            return Halted(acc)
        if directive is Directive.SUSPEND:
            return Suspended(acc, Continuation(cursor, fun))
        if cursor.exhausted:
            return Done(acc)
        command = fun(cursor.current(), acc)
        cursor = cursor.advance()


def reduce_range(date_range: "DateRange", command: Command, fun: Reducer) -> Result:
    """Reduce a range under consumer control.

    Args:
        date_range: Range to traverse. It is not consumed.
        command: Initial ``(directive, acc)``; a HALT here converts nothing.
        fun: Called as ``fun(date, acc)`` and returns the next command.

    Returns:
        ``Done``, ``Halted`` or ``Suspended`` carrying the accumulator.
    """
    return _reduce(date_range.cursor(), command, fun)
