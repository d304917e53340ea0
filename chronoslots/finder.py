import logging
from collections.abc import Iterable
from datetime import datetime
from typing import overload

from chronoslots.interval import (
    BusyInterval,
    FreeInterval,
    HasBounds,
    InvalidRangeError,
    instant,
)
from chronoslots.protocols import Input, Out
from chronoslots.window import Window

logger = logging.getLogger(__name__)


class SlotError(Exception):
    """Base class for errors raised by a slot search."""


class InvalidPeriodError(SlotError):
    """A busy record, the window, or a derived gap had invalid bounds.

    Attributes:
        cause: The InvalidRangeError that aborted the search
    """

    def __init__(self, cause: InvalidRangeError):
        self.cause: InvalidRangeError = cause
        super().__init__(
            f"Invalid blocks. Check your arguments are valid.\nCause: {cause}"
        )


def _to_busy_intervals(inputs: Iterable[Input]) -> list[BusyInterval]:
    """Convert every input eagerly, sorted by start."""
    blocks = []
    for index, item in enumerate(inputs):
        try:
            blocks.append(item.to_busy_interval())
        except InvalidRangeError as err:
            logger.debug("input #%d could not be converted: %s", index, err)
            raise InvalidPeriodError(err) from err
    blocks.sort(key=lambda block: instant(block.start))
    return blocks


def _sweep(target: Window, blocks: list[BusyInterval]) -> list[FreeInterval]:
    """Carve busy intervals out of the window, left to right.

    ``target`` is consumed in place. Gaps are emitted in temporal order.
    """
    slots: list[FreeInterval] = []

    for block in blocks:
        relation = block.relation_to(target)
        logger.debug("%s is %s relative to window %s", block, relation, target)

        if relation == "contains":
            target.collapse()
            break

        if relation == "overlaps_start":
            target.advance_past(block)
            continue

        if relation == "contained":
            slots.append(FreeInterval.create_from(target, block))
            target.advance_past(block)
            continue

        if relation == "overlaps_end":
            slots.append(FreeInterval.create_from(target, block))
            target.collapse()
            break

    if target.has_remaining():
        slots.append(target.to_free_interval())

    return slots


@overload
def find(window: HasBounds, inputs: Iterable[Input]) -> list[FreeInterval]: ...


@overload
def find(window: HasBounds, inputs: Iterable[Input], output: type[Out]) -> list[Out]: ...


def find(
    window: HasBounds,
    inputs: Iterable[Input],
    output: type[Out] | type[FreeInterval] = FreeInterval,
) -> list[Out] | list[FreeInterval]:
    """Find the free slots left in ``window`` once ``inputs`` are scheduled.

    Args:
        window: The query span. It is copied, never mutated.
        inputs: Busy records in any order, each implementing ``Input``
        output: Class implementing ``Output`` used to materialize each gap.
            Defaults to FreeInterval.

    Returns:
        One ``output`` record per gap, in temporal order.

    Raises:
        InvalidPeriodError: If any input fails to convert, or the window
            (or a gap derived from it) has invalid bounds. Nothing partial
            is returned.

    Example:
        >>> slots = find(Window(start=nine, end=five), meetings, AvailableSlot)
    """
    blocks = _to_busy_intervals(inputs)
    logger.debug("searching %s against %d busy intervals", window, len(blocks))

    try:
        target = Window.of(window)
        slots = _sweep(target, blocks)
    except InvalidRangeError as err:
        raise InvalidPeriodError(err) from err

    logger.debug("found %d free slots", len(slots))
    return [output.from_free_interval(slot) for slot in slots]


def find_free(
    window: HasBounds | tuple[datetime, datetime],
    busy: Iterable[Input | tuple[datetime, datetime]],
) -> list[FreeInterval]:
    """Shorthand for ``find`` accepting ``(start, end)`` pairs.

    Example:
        >>> find_free((nine, five), [(ten, eleven), (two, three)])
    """
    try:
        if isinstance(window, tuple):
            window = Window(start=window[0], end=window[1])
        inputs = [
            BusyInterval(start=item[0], end=item[1]) if isinstance(item, tuple) else item
            for item in busy
        ]
    except InvalidRangeError as err:
        raise InvalidPeriodError(err) from err
    return find(window, inputs)
