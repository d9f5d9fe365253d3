"""
Configuration for the environment models (launch site, aerodynamics, ground track).
"""

from dataclasses import dataclass

from Environment.aerodynamics import DynamicPressureModel
from Environment.ground_track import GroundTrack


GROUND_TRACK_SATURATION_POLICIES = ("hold", "none")


@dataclass
class EnvironmentConfig:
    # --- Launch Site ---
    # Cape Canaveral SLC-40 (approximate)
    launch_lat_deg: float = 28.5623
    launch_lon_deg: float = -80.5774

    # --- Aerodynamics (Max-Q bump) ---
    max_q_peak_kpa: float = 35.0     # Typical Max-Q for a medium-lift ascent is ~30-40 kPa
    max_q_time_s: float = 72.0
    max_q_width_s: float = 25.0      # Gaussian sigma

    # --- Ground Track ---
    # Offsets [deg] accumulated by the end of each burn, heading east-northeast.
    booster_track_deg: tuple[float, float] = (2.0, 5.0)    # (lat, lon) at MECO
    upper_track_deg: tuple[float, float] = (10.0, 30.0)    # additional (lat, lon) at SECO
    coast_lat_amplitude_deg: float = 20.0
    coast_lon_span_deg: float = 60.0
    coast_saturation_s: float = 3600.0
    # "hold": coast fraction saturates at 1 after coast_saturation_s.
    # "none": coast fraction keeps growing with time (unbounded drift).
    ground_track_saturation: str = "hold"

    def __post_init__(self):
        if self.ground_track_saturation not in GROUND_TRACK_SATURATION_POLICIES:
            raise ValueError(
                f"Unknown ground_track_saturation '{self.ground_track_saturation}'. "
                f"Expected one of {GROUND_TRACK_SATURATION_POLICIES}."
            )
        if self.max_q_width_s <= 0.0:
            raise ValueError("max_q_width_s must be positive.")
        if self.coast_saturation_s <= 0.0:
            raise ValueError("coast_saturation_s must be positive.")

    def create_dynamic_pressure_model(self) -> DynamicPressureModel:
        return DynamicPressureModel(
            peak_kpa=self.max_q_peak_kpa,
            peak_time_s=self.max_q_time_s,
            width_s=self.max_q_width_s,
        )

    def create_ground_track(self) -> GroundTrack:
        return GroundTrack(
            launch_lat_deg=self.launch_lat_deg,
            launch_lon_deg=self.launch_lon_deg,
            booster_track_deg=self.booster_track_deg,
            upper_track_deg=self.upper_track_deg,
            coast_lat_amplitude_deg=self.coast_lat_amplitude_deg,
            coast_lon_span_deg=self.coast_lon_span_deg,
            coast_saturation_s=self.coast_saturation_s,
            saturate=self.ground_track_saturation == "hold",
        )
