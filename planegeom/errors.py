"""Exception types raised by the planar geometry helpers."""

from __future__ import annotations

from typing import Optional


class GeometryError(Exception):
    """Base class for failures caused by degenerate geometric input."""


class PointTypeError(TypeError):
    """Raised when an operand expected to be a 2D point is not one."""

    def __init__(self, name: Optional[str] = None, value: object = None) -> None:
        message = "Arguments must be instances of Point"
        if name is not None:
            message += f" ({name} is {type(value).__name__})"
        super().__init__(message)
        self.name = name


class CollinearPointsError(GeometryError, ValueError):
    """Raised when three points span no triangle."""

    def __init__(self, denominator: float) -> None:
        super().__init__("The points are collinear, circumcenter cannot be determined.")
        self.denominator = denominator


class CosineLawDomainError(GeometryError, ValueError):
    """Raised in strict mode when the cosine-law radicand is negative."""

    def __init__(self, radicand: float) -> None:
        super().__init__(f"cosine law radicand is negative ({radicand!r})")
        self.radicand = radicand


__all__ = [
    "GeometryError",
    "PointTypeError",
    "CollinearPointsError",
    "CosineLawDomainError",
]
