"""
Nominal dynamic pressure during the first-stage ascent.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DynamicPressureModel:
    peak_kpa: float
    peak_time_s: float
    width_s: float

    def _bump(self, t: float) -> float:
        return float(np.exp(-0.5 * ((t - self.peak_time_s) / self.width_s) ** 2))

    def __call__(self, t: float) -> float:
        """
        Dynamic pressure [kPa] at time `t` after liftoff.

        A Gaussian bump centred on Max-Q stands in for 0.5 * rho * v^2; the
        exponential density fall-off and the quadratic velocity rise produce a
        similar single peak. The bump is shifted down by its liftoff value and
        rescaled, so q is exactly zero on the pad and exactly `peak_kpa` at
        Max-Q. The tail past the mirror of liftoff is floored at zero.
        """
        base = self._bump(0.0)
        q = self.peak_kpa * (self._bump(t) - base) / (1.0 - base)
        return float(np.maximum(0.0, q))
