"""Library-wide defaults for the geometry helpers."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class GeometryConfig:
    # 0.0 keeps the exact ``D == 0`` collinearity test.
    collinear_tolerance: float = 0.0
    strict_cosine_law: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.collinear_tolerance >= 0:
            raise ValueError("collinear_tolerance must be non-negative")


_GEOMETRY_CONFIG = GeometryConfig()


def get_geometry_config() -> GeometryConfig:
    return copy.deepcopy(_GEOMETRY_CONFIG)


def set_geometry_config(config: GeometryConfig) -> None:
    global _GEOMETRY_CONFIG
    config.validate()
    _GEOMETRY_CONFIG = copy.deepcopy(config)


__all__ = ["GeometryConfig", "get_geometry_config", "set_geometry_config"]
