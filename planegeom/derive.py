"""Point constructions derived from other points.

Every routine validates its operands with :func:`~planegeom.point.as_point` before
doing any arithmetic and always returns a fresh :class:`~planegeom.point.Point`.
Degenerate input raises instead of returning ``None``; callers decide how to
recover.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .config import get_geometry_config
from .errors import CollinearPointsError
from .logging_utils import apply_debug_logging
from .point import Point, as_point

logger = logging.getLogger(__name__)


def _sub(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def _norm_sq(p: Point) -> float:
    return p.x * p.x + p.y * p.y


def _resolve_tolerance(tolerance: Optional[float]) -> float:
    if tolerance is None:
        return get_geometry_config().collinear_tolerance
    if not tolerance >= 0:
        raise ValueError("tolerance must be a non-negative number")
    return float(tolerance)


def shift_coordinate_2d(A: object, B: object) -> Point:
    """Return ``A - B``, i.e. the vector from ``B`` to ``A``."""

    a = as_point(A, name="A")
    b = as_point(B, name="B")
    return _sub(a, b)


def find_circumcenter_2d(
    A: object, B: object, C: object, *, tolerance: Optional[float] = None
) -> Point:
    """Return the circumcenter of triangle ``ABC``.

    ``D`` is twice the signed area of the triangle.  With the default tolerance of
    ``0.0`` only exactly collinear points (``D == 0``) are rejected, so nearly
    collinear input can still produce a very distant center.
    """

    a = as_point(A, name="A")
    b = as_point(B, name="B")
    c = as_point(C, name="C")
    tol = _resolve_tolerance(tolerance)

    d = 2 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))
    if abs(d) <= tol:
        raise CollinearPointsError(d)

    sa = _norm_sq(a)
    sb = _norm_sq(b)
    sc = _norm_sq(c)
    ux = (1 / d) * (sa * (b.y - c.y) + sb * (c.y - a.y) + sc * (a.y - b.y))
    uy = (1 / d) * (sa * (c.x - b.x) + sb * (a.x - c.x) + sc * (b.x - a.x))
    return Point(ux, uy)


def circumradius_2d(
    A: object, B: object, C: object, *, tolerance: Optional[float] = None
) -> float:
    """Return the radius of the circle through ``A``, ``B`` and ``C``."""

    center = find_circumcenter_2d(A, B, C, tolerance=tolerance)
    offset = _sub(as_point(A, name="A"), center)
    return math.hypot(offset.x, offset.y)


apply_debug_logging(globals(), logger=logger)
