"""Circular statistics for wind direction.

Directions are cyclic: the arithmetic mean of 350 and 10 degrees is 180,
while the directions actually average to 0. Each direction is treated as a
unit vector; the mean direction is the angle of the vector sum.
"""

import math

import numpy as np

__all__ = ['CircularAccumulator', 'circular_mean', 'RESULTANT_EPSILON']

# Mean resultant length below which the mean direction is undefined
RESULTANT_EPSILON = 1e-9


class CircularAccumulator:
    """Running cosine/sine sums of directions in degrees.

    Undefined (NaN/None) directions are ignored.

    Examples
    --------
    >>> acc = CircularAccumulator()
    >>> for d in (350.0, 10.0):
    ...     acc.add(d)
    >>> round(acc.mean(), 6) % 360
    0.0
    """

    __slots__ = ("sum_cos", "sum_sin", "count")

    def __init__(self):
        self.sum_cos = 0.0
        self.sum_sin = 0.0
        self.count = 0

    def add(self, degrees) -> None:
        if degrees is None or math.isnan(degrees):
            return
        radians = math.radians(degrees)
        self.sum_cos += math.cos(radians)
        self.sum_sin += math.sin(radians)
        self.count += 1

    def resultant_length(self) -> float:
        """Mean resultant length in [0, 1]; NaN when nothing was added."""
        if self.count == 0:
            return math.nan
        return math.hypot(self.sum_cos, self.sum_sin) / self.count

    def mean(self) -> float:
        """Mean direction in degrees within [0, 360).

        Returns NaN when no defined direction was added, or when the
        directions cancel out (e.g. 0, 90, 180 and 270 degrees) and the
        vector sum has no direction.
        """
        if self.count == 0:
            return math.nan
        if self.resultant_length() < RESULTANT_EPSILON:
            return math.nan

        angle = math.degrees(math.atan2(self.sum_sin, self.sum_cos))
        if angle < 0:
            angle += 360.0
        # -1e-15 + 360 rounds to 360.0
        if angle >= 360.0:
            angle -= 360.0
        return angle


def circular_mean(angles_degrees) -> float:
    """Circular mean of angles in degrees, ignoring undefined values.

    Parameters
    ----------
    angles_degrees : array-like
        Directions in degrees. NaN entries are skipped.

    Returns
    -------
    float
        Mean direction in [0, 360), or NaN if no angle is defined or the
        angles cancel out.
    """
    acc = CircularAccumulator()
    for angle in np.asarray(angles_degrees, dtype=np.float64).ravel():
        acc.add(float(angle))
    return acc.mean()
