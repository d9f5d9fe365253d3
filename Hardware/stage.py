"""
Stage model: propellant remaining over a burn window.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Stage:
    burn_start_s: float
    burn_end_s: float

    def fuel_remaining_pct(self, t: float) -> float:
        """
        Return propellant remaining [%] at mission time `t`.

        Full before ignition, linear depletion to empty at burnout, and empty
        from then on. The time evolution is nominal only; no mass flow is
        integrated.
        """
        if t < self.burn_start_s:
            return 100.0
        if t <= self.burn_end_s:
            frac = (t - self.burn_start_s) / (self.burn_end_s - self.burn_start_s)
            return float(np.maximum(0.0, 100.0 * (1.0 - frac)))
        return 0.0
