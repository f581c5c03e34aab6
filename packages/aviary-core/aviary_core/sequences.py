"""Generic sequence helpers: stride sampling and projected folds."""

from __future__ import annotations

import operator
from functools import reduce
from typing import Callable, Iterable, Sequence, TypeVar

from .capabilities import Flyable
from .exceptions import InvalidArgumentError

T = TypeVar("T")

_airspeed = operator.attrgetter("airspeed_velocity")


def skip(container: Sequence[T], stride: int) -> list[T]:
    """Return every ``stride``-th element of ``container``, starting at index 0.

    A stride of zero yields an empty list. Negative strides are rejected.
    The container is read through ``len`` and integer indexing only and is
    never modified. Any integer-like stride (one with ``__index__``) is accepted.

    >>> skip(["a", "b", "c", "d", "e"], 2)
    ['a', 'c', 'e']
    """

    if isinstance(stride, bool):
        raise InvalidArgumentError("stride", stride, "stride must be an integer")
    try:
        stride = operator.index(stride)
    except TypeError as exc:
        raise InvalidArgumentError(
            "stride", stride, "stride must be an integer"
        ) from exc
    if stride < 0:
        raise InvalidArgumentError("stride", stride, "stride must not be negative")
    if stride == 0:
        return []

    result: list[T] = []
    position = 0
    for index in range(len(container)):
        if position % stride == 0:
            result.append(container[index])
        position += 1
    return result


def max_by(
    items: Iterable[T],
    key: Callable[[T], float],
    *,
    initial: float = 0.0,
) -> float:
    """Largest ``key(item)`` over ``items``, or ``initial`` when nothing beats it."""

    return reduce(max, map(key, items), initial)


def total_by(
    items: Iterable[T],
    key: Callable[[T], int],
    *,
    initial: int = 0,
) -> int:
    """Sum of ``key(item)`` over ``items``.

    >>> total_by(["frog", "pants"], len)
    9
    """

    return reduce(lambda acc, value: acc + value, map(key, items), initial)


def top_speed(flyers: Iterable[Flyable]) -> float:
    """Highest airspeed velocity in ``flyers``.

    An empty collection reports ``0.0``, which cannot be told apart from a
    flock of grounded flyers.
    """

    return max_by(flyers, _airspeed, initial=0.0)


__all__ = ["max_by", "skip", "top_speed", "total_by"]
