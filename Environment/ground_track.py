"""
Simplified ground track: sub-vehicle latitude/longitude along the nominal ascent.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class GroundTrack:
    launch_lat_deg: float
    launch_lon_deg: float
    booster_track_deg: Tuple[float, float]
    upper_track_deg: Tuple[float, float]
    coast_lat_amplitude_deg: float
    coast_lon_span_deg: float
    coast_saturation_s: float
    saturate: bool = True

    def on_pad(self) -> Tuple[float, float]:
        return self.launch_lat_deg, self.launch_lon_deg

    def booster(self, frac: float) -> Tuple[float, float]:
        """Position after `frac` (0..1) of the first-stage burn."""
        d_lat, d_lon = self.booster_track_deg
        return self.launch_lat_deg + frac * d_lat, self.launch_lon_deg + frac * d_lon

    def staging(self) -> Tuple[float, float]:
        """Position held through the separation coast."""
        return self.booster(1.0)

    def upper(self, frac: float) -> Tuple[float, float]:
        """Position after `frac` (0..1) of the second-stage burn."""
        lat0, lon0 = self.staging()
        d_lat, d_lon = self.upper_track_deg
        return lat0 + frac * d_lat, lon0 + frac * d_lon

    def coast_fraction(self, t_coast: float) -> float:
        frac = t_coast / self.coast_saturation_s
        if self.saturate:
            frac = np.minimum(1.0, frac)
        return float(frac)

    def coast(self, t_coast: float) -> Tuple[float, float]:
        """
        Position `t_coast` seconds after SECO.

        Latitude swings north and back (one half sine over the coast window)
        while longitude advances linearly. With saturation enabled both are
        bounded once the coast window has elapsed.
        """
        lat0, lon0 = self.upper(1.0)
        c = self.coast_fraction(t_coast)
        lat = lat0 + c * self.coast_lat_amplitude_deg * np.sin(c * np.pi)
        lon = lon0 + c * self.coast_lon_span_deg
        return float(lat), float(lon)
