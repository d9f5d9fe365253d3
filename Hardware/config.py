"""
Configuration for vehicle hardware: staging timeline and nominal ascent targets.
"""

import dataclasses
from dataclasses import dataclass
from typing import Dict

from Hardware.stage import Stage


GENERIC_PROFILE_NAME = "generic"


@dataclass(frozen=True)
class HardwareConfig:
    # --- Vehicle Specifications (Falcon 9 class, two stages) ---
    name: str = "falcon9"

    # Staging timeline [s after liftoff]
    meco_time_s: float = 162.0          # First-stage engines off
    stage_sep_time_s: float = 165.0     # Second-stage burn window opens after this
    seco_time_s: float = 510.0          # Second engine cutoff, orbit reached

    # FIRST STAGE (at MECO)
    meco_altitude_km: float = 80.0
    meco_velocity_kms: float = 2.3
    meco_downrange_km: float = 100.0
    booster_liftoff_accel_g: float = 1.3   # T/W at liftoff
    booster_accel_gain_g: float = 2.2      # Rise as propellant burns off

    # Coast between MECO and second-stage ignition
    sep_coast_climb_kms: float = 0.5
    sep_coast_downrange_kms: float = 2.0

    # SECOND STAGE (at SECO)
    seco_altitude_km: float = 250.0
    seco_velocity_kms: float = 7.8
    seco_downrange_km: float = 2000.0
    upper_ignition_accel_g: float = 0.8
    upper_accel_gain_g: float = 2.2

    # Orbital coast: downrange grows at orbital speed
    orbital_velocity_kms: float = 7.8

    def __post_init__(self):
        if not (0.0 < self.meco_time_s <= self.stage_sep_time_s < self.seco_time_s):
            raise ValueError(
                f"Vehicle profile '{self.name}' needs 0 < MECO <= stage sep < SECO, got "
                f"{self.meco_time_s}, {self.stage_sep_time_s}, {self.seco_time_s}."
            )

    @property
    def upper_burn_duration_s(self) -> float:
        return self.seco_time_s - self.stage_sep_time_s

    def create_booster_stage(self) -> Stage:
        return Stage(burn_start_s=0.0, burn_end_s=self.meco_time_s)


VEHICLE_PROFILES: Dict[str, HardwareConfig] = {
    "falcon9": HardwareConfig(),
}


def resolve_vehicle_profile(name: str | None) -> HardwareConfig:
    """
    Return the hardware profile registered under `name`.

    Unknown or missing names fall back to the generic profile, which carries the
    same nominal numbers under the generic label.
    """
    if name is not None and name in VEHICLE_PROFILES:
        return VEHICLE_PROFILES[name]
    return dataclasses.replace(VEHICLE_PROFILES["falcon9"], name=GENERIC_PROFILE_NAME)
