"""
Configuration for telemetry synthesis: sensor noise, random source and batch runs.
"""

import dataclasses
from dataclasses import dataclass
from typing import Optional


@dataclass
class SimulationConfig:
    # --- Random Source ---
    seed: Optional[int] = None   # None draws fresh entropy for each synthesizer

    # --- Batch Run ---
    batch_start_s: float = -30.0
    batch_end_s: float = 1200.0
    batch_interval_s: float = 1.0

    # --- Noise amplitudes (peak-to-peak of a uniform draw) ---
    # First-stage burn
    booster_noise: dict = dataclasses.field(
        default_factory=lambda: {
            "altitude": 0.5,
            "velocity": 0.02,
            "downrange": 0.3,
            "acceleration": 0.05,
            "throttle": 1.0,
            "throttle_bucket": 2.0,
            "latitude": 0.01,
            "longitude": 0.01,
            "dynamic_pressure": 0.3,
            "fuel": 0.2,
        }
    )
    # Stage separation coast
    sep_coast_noise: dict = dataclasses.field(
        default_factory=lambda: {
            "altitude": 0.3,
            "velocity": 0.01,
            "downrange": 0.2,
            "acceleration": 0.1,
            "latitude": 0.01,
            "longitude": 0.01,
        }
    )
    # Second-stage burn
    upper_noise: dict = dataclasses.field(
        default_factory=lambda: {
            "altitude": 0.5,
            "velocity": 0.02,
            "downrange": 1.0,
            "acceleration": 0.05,
            "throttle": 1.0,
            "latitude": 0.02,
            "longitude": 0.02,
        }
    )
    # Orbital coast
    coast_noise: dict = dataclasses.field(
        default_factory=lambda: {
            "altitude": 0.2,
            "velocity": 0.005,
            "downrange": 2.0,
            "acceleration": 0.01,
            "latitude": 0.05,
            "longitude": 0.05,
        }
    )

    # --- Orbital coast oscillation ---
    coast_altitude_swing_km: float = 5.0
    coast_velocity_swing_kms: float = 0.05

    def __post_init__(self):
        for label in ("booster_noise", "sep_coast_noise", "upper_noise", "coast_noise"):
            for key, amplitude in getattr(self, label).items():
                if amplitude < 0.0:
                    raise ValueError(f"{label}['{key}'] must be non-negative, got {amplitude}.")
        if self.batch_interval_s <= 0.0:
            raise ValueError("batch_interval_s must be positive.")
