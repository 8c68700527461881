"""Helpers for interpolating angles in degrees along the shorter arc."""

from __future__ import annotations

import math

_FULL_TURN = 360.0


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed distance in degrees from a0 to a1 along the shorter way round."""
    da = math.fmod(a1 - a0, _FULL_TURN)
    return math.fmod(2.0 * da, _FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Move from a0 towards a1 by the fraction t of the shorter arc."""
    return a0 + short_angle_dist(a0, a1) * t