"""Iteration and numeric helpers.

Small utilities that drawing loops lean on: counted repetition with an
optional start and step, early-exit iteration over collections, and value
clamping/remapping.
"""

import math
from collections.abc import Callable, Mapping, Sequence
from typing import Any, overload

from shapeplot.exceptions import (
    InvalidArgumentCountError,
    InvalidCallbackError,
    UnsupportedCollectionError,
)

RepeatAction = Callable[[float], Any]


def _number(value: object) -> float:
    # Non-numbers and NaN count as 0
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value == value:
        return value
    return 0


@overload
def repeat(end: float, action: RepeatAction, /) -> None: ...


@overload
def repeat(start: float, end: float, action: RepeatAction, /) -> None: ...


@overload
def repeat(start: float, end: float, step: float, action: RepeatAction, /) -> None: ...


def repeat(*args: Any) -> None:
    """Call ``action(i)`` for i from ``start`` towards ``end`` (exclusive).

    Supported forms: ``(end, action)``, ``(start, end, action)`` and
    ``(start, end, step, action)``. ``start`` defaults to 0 and ``step`` to 1.
    The sign of the step is taken from the direction of travel, so only its
    magnitude matters. A zero step does nothing, even when ``action`` is not
    callable. Iteration stops early when the action returns ``False``.

    Raises:
        InvalidArgumentCountError: For any other number of arguments
        InvalidCallbackError: If the last argument is not callable and the
            step is non-zero
    """
    if len(args) == 2:
        start, end, step, action = 0, _number(args[0]), 1, args[1]
    elif len(args) == 3:
        start, end, step, action = _number(args[0]), _number(args[1]), 1, args[2]
    elif len(args) == 4:
        start, end, step, action = (
            _number(args[0]),
            _number(args[1]),
            abs(_number(args[2])),
            args[3],
        )
    else:
        raise InvalidArgumentCountError(
            "repeat",
            "arguments must be [end, action], [start, end, action], "
            f"or [start, end, step, action], got {len(args)}",
        )

    if step == 0:
        return

    if not callable(action):
        raise InvalidCallbackError("repeat", action)

    positive = end > start
    step = step if positive else -step

    i = start
    while (i < end) if positive else (i > end):
        if action(i) is False:
            return
        i += step


def for_each(collection: Any, action: Callable[[Any, Any], Any]) -> None:
    """Call ``action(value, key)`` for every item of a collection.

    Sequences and strings pass their index as the key, mappings their keys.
    Iteration stops early when the action returns ``False``.

    Raises:
        InvalidCallbackError: If ``action`` is not callable
        UnsupportedCollectionError: If ``collection`` is not a sequence,
            mapping, or string
    """
    if not callable(action):
        raise InvalidCallbackError("for_each", action)

    if isinstance(collection, Mapping):
        for key, value in collection.items():
            if action(value, key) is False:
                return
    elif isinstance(collection, (Sequence, str)):
        for index, value in enumerate(collection):
            if action(value, index) is False:
                return
    else:
        raise UnsupportedCollectionError(collection)


def constrain(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``; reversed bounds are swapped."""
    if lower > upper:
        lower, upper = upper, lower

    return max(min(value, upper), lower)


def map_range(
    value: float,
    from_start: float,
    from_end: float,
    to_start: float,
    to_end: float,
) -> float:
    """Linearly remap ``value`` from one range onto another.

    An empty source range maps every value to NaN.

    Examples:
        >>> map_range(5, 0, 10, 0, 100)
        50.0
    """
    from_diff = from_end - from_start
    if from_diff == 0:
        return math.nan

    to_diff = to_end - to_start
    return to_start + to_diff * (value - from_start) / from_diff
