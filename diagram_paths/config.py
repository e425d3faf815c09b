"""Numeric tolerance configuration shared by the geometry modules."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class GeometryConfig:
    """Tolerances used for approximate comparisons."""

    tolerance: float = 1e-9
    # imaginary-part cutoff and [0, 1] slack for cubic critical points
    root_tolerance: float = 1e-12


_GEOMETRY_CONFIG = GeometryConfig()


def get_geometry_config() -> GeometryConfig:
    return copy.deepcopy(_GEOMETRY_CONFIG)


def set_geometry_config(config: GeometryConfig) -> None:
    global _GEOMETRY_CONFIG
    _GEOMETRY_CONFIG = copy.deepcopy(config)


def default_tolerance() -> float:
    return _GEOMETRY_CONFIG.tolerance


def root_tolerance() -> float:
    return _GEOMETRY_CONFIG.root_tolerance


__all__ = [
    "GeometryConfig",
    "get_geometry_config",
    "set_geometry_config",
    "default_tolerance",
    "root_tolerance",
]
