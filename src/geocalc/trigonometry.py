#!/usr/bin/env python3
"""
Table-driven arctangent.

atan2_lookup trades a few hundredths of a degree of accuracy for a single
table read per call.
"""

from typing import Tuple
import math

from .config import DEFAULT_CONFIG

_TABLE_SIZE = DEFAULT_CONFIG.atan_table_size

# atan(t) for t sampled evenly over [0, 1]
ATAN_TABLE: Tuple[float, ...] = tuple(
    math.atan(i / (_TABLE_SIZE - 1)) for i in range(_TABLE_SIZE)
)


def atan2_lookup(y: float, x: float) -> float:
    """
    Approximate math.atan2(y, x) using ATAN_TABLE.

    The arguments are reduced to the first octant, looked up, and the angle
    is mapped back to its octant.

    Args:
        y: Ordinate
        x: Abscissa

    Returns:
        Angle in radians within [-pi, pi]
    """
    if abs(x) < DEFAULT_CONFIG.epsilon:
        if abs(y) < DEFAULT_CONFIG.epsilon:
            return 0.0
        return math.pi / 2 if y >= 0.0 else -math.pi / 2

    octant = 0
    if x < 0.0:
        octant = 1
        x = -x
    if y < 0.0:
        octant |= 2
        y = -y

    t = y / x
    if t > 1.0:
        octant |= 4
        t = 1.0 / t

    angle = ATAN_TABLE[int(t * (_TABLE_SIZE - 1))]

    if octant == 1:
        angle = math.pi - angle
    elif octant == 2:
        angle = -angle
    elif octant == 3:
        angle = -math.pi + angle
    elif octant == 4:
        angle = math.pi / 2 - angle
    elif octant == 5:
        angle = math.pi / 2 + angle
    elif octant == 6:
        angle = -math.pi / 2 + angle
    elif octant == 7:
        angle = -math.pi / 2 - angle
    return angle
