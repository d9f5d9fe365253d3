"""
Noise-free nominal ascent profile.

Five regimes, keyed on mission time t [s]:

    t < 0              on the pad, everything zero
    0 <= t <= MECO     first-stage burn
    MECO < t <= sep    separation coast, engines off
    sep < t <= SECO    second-stage burn
    t > SECO           orbital coast

With the default Falcon 9 profile this gives ~80 km / 2.3 km/s / 100 km at MECO
and ~250 km / 7.8 km/s / 2000 km at SECO.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from Environment.aerodynamics import DynamicPressureModel
from Environment.config import EnvironmentConfig
from Hardware.config import HardwareConfig, resolve_vehicle_profile


@dataclass(frozen=True)
class KinematicProfile:
    altitude: float          # [km]
    velocity: float          # [km/s]
    downrange: float         # [km]
    acceleration: float      # [g]
    dynamic_pressure: float  # [kPa]

    def rounded(self) -> "KinematicProfile":
        """Round to display precision (velocity to m/s, the rest to 0.01)."""
        return KinematicProfile(
            altitude=round(self.altitude, 2),
            velocity=round(self.velocity, 3),
            downrange=round(self.downrange, 2),
            acceleration=round(self.acceleration, 2),
            dynamic_pressure=round(self.dynamic_pressure, 2),
        )


ON_PAD = KinematicProfile(0.0, 0.0, 0.0, 0.0, 0.0)


class KinematicModel:
    def __init__(self, hw_config: HardwareConfig, q_model: DynamicPressureModel):
        self.hw = hw_config
        self.q_model = q_model

    def booster_fraction(self, t: float) -> float:
        return t / self.hw.meco_time_s

    def upper_fraction(self, t: float) -> float:
        return (t - self.hw.stage_sep_time_s) / self.hw.upper_burn_duration_s

    def profile(self, t: float) -> KinematicProfile:
        """Unrounded nominal state at mission time `t`."""
        hw = self.hw
        if t < 0.0:
            return ON_PAD

        if t <= hw.meco_time_s:
            n = self.booster_fraction(t)
            return KinematicProfile(
                altitude=hw.meco_altitude_km * (n * n * 0.3 + n * 0.7),
                velocity=hw.meco_velocity_kms * n * (0.5 + 0.5 * n),
                downrange=hw.meco_downrange_km * n * n * n,
                acceleration=hw.booster_liftoff_accel_g + hw.booster_accel_gain_g * n,
                dynamic_pressure=self.q_model(t),
            )

        if t <= hw.stage_sep_time_s:
            dt = t - hw.meco_time_s
            return KinematicProfile(
                altitude=hw.meco_altitude_km + dt * hw.sep_coast_climb_kms,
                velocity=hw.meco_velocity_kms,
                downrange=hw.meco_downrange_km + dt * hw.sep_coast_downrange_kms,
                acceleration=0.0,
                dynamic_pressure=0.0,
            )

        if t <= hw.seco_time_s:
            m = self.upper_fraction(t)
            return KinematicProfile(
                altitude=hw.meco_altitude_km + (hw.seco_altitude_km - hw.meco_altitude_km) * m,
                velocity=hw.meco_velocity_kms + (hw.seco_velocity_kms - hw.meco_velocity_kms) * m,
                downrange=hw.meco_downrange_km
                + (hw.seco_downrange_km - hw.meco_downrange_km) * m * (0.3 + 0.7 * m),
                acceleration=hw.upper_ignition_accel_g + hw.upper_accel_gain_g * m,
                dynamic_pressure=0.0,  # Above the sensible atmosphere
            )

        return KinematicProfile(
            altitude=hw.seco_altitude_km,
            velocity=hw.seco_velocity_kms,
            downrange=hw.seco_downrange_km + (t - hw.seco_time_s) * hw.orbital_velocity_kms,
            acceleration=0.0,
            dynamic_pressure=0.0,
        )


_DEFAULT_Q_MODEL = EnvironmentConfig().create_dynamic_pressure_model()


def typical_profile(mission_time_s: float, vehicle_profile: Optional[str] = None) -> KinematicProfile:
    """
    Nominal (noise-free) altitude, velocity, downrange, acceleration and dynamic
    pressure at `mission_time_s`, rounded to display precision.

    Deterministic: the same time always yields the same values. Useful for
    plotting nominal-profile overlays against synthesized telemetry.
    """
    model = KinematicModel(resolve_vehicle_profile(vehicle_profile or "falcon9"), _DEFAULT_Q_MODEL)
    return model.profile(mission_time_s).rounded()
