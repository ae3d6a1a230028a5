from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from .errors import PointTypeError


@dataclass(frozen=True)
class Point:
    """Immutable 2D point with float components."""

    x: float
    y: float

    def __post_init__(self) -> None:
        for axis in ("x", "y"):
            value = getattr(self, axis)
            if not _is_coordinate(value):
                raise PointTypeError(axis, value)
            object.__setattr__(self, axis, float(value))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, values: object) -> "Point":
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.size != 2:
            raise ValueError(f"expected exactly two coordinates, got {arr.size}")
        return cls(float(arr[0]), float(arr[1]))


def _is_coordinate(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_point(value: object) -> bool:
    """Return ``True`` when *value* exposes real-valued ``x`` and ``y`` attributes.

    Sequences are never treated as points, so ``(3, 4)`` and ``np.array([3, 4])``
    are rejected even though they hold two numbers.
    """

    if isinstance(value, Point):
        return True
    return _is_coordinate(getattr(value, "x", None)) and _is_coordinate(getattr(value, "y", None))


def as_point(value: object, *, name: Optional[str] = None) -> Point:
    """Return *value* as a :class:`Point` or raise :class:`PointTypeError`."""

    if isinstance(value, Point):
        return value
    if not is_point(value):
        raise PointTypeError(name, value)
    return Point(value.x, value.y)  # type: ignore[attr-defined]


__all__ = ["Point", "is_point", "as_point"]
