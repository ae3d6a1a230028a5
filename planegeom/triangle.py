"""Scalar triangle helpers: side validity and the law of cosines."""

from __future__ import annotations

import logging
import math
from typing import Optional

from .config import get_geometry_config
from .errors import CosineLawDomainError
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


def _as_float(value: float) -> float:
    # Integers beyond float range saturate to infinity.
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def is_valid_triangle(a: float, b: float, c: float) -> bool:
    """Return ``True`` when ``a``, ``b`` and ``c`` are sides of a non-degenerate triangle.

    All sides must be strictly positive and each pair must strictly exceed the
    third.  Collinear (degenerate) side triples yield ``False``.
    """

    return a > 0 and b > 0 and c > 0 and a + b > c and a + c > b and b + c > a


def third_side_by_cosine_law(
    a: float, b: float, angle: float, *, strict: Optional[bool] = None
) -> float:
    """Return the side opposite ``angle`` (radians) between sides ``a`` and ``b``.

    A negative radicand yields ``nan`` unless ``strict`` is enabled, in which case
    :class:`CosineLawDomainError` is raised.
    """

    if strict is None:
        strict = get_geometry_config().strict_cosine_law
    a = _as_float(a)
    b = _as_float(b)
    angle = _as_float(angle)
    cos_angle = math.cos(angle) if math.isfinite(angle) else math.nan
    radicand = a * a + b * b - 2 * a * b * cos_angle
    if radicand < 0:
        if strict:
            raise CosineLawDomainError(radicand)
        logger.debug("Negative cosine-law radicand %r for a=%r b=%r angle=%r", radicand, a, b, angle)
        return math.nan
    return math.sqrt(radicand)


apply_debug_logging(globals(), logger=logger)
