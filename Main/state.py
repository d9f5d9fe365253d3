"""
Telemetry record for a single instant of the ascent.
"""

from dataclasses import dataclass, fields


# snake_case field -> key used by the JSON telemetry feed
_FEED_KEYS = {
    "mission_time": "missionTime",
    "dynamic_pressure": "dynamicPressure",
    "fuel_remaining": "fuelRemaining",
    "stage_status": "stageStatus",
    "fairing_status": "fairingStatus",
    "is_max_q": "isMaxQ",
}


@dataclass(frozen=True)
class TelemetryPoint:
    mission_time: float      # [s] relative to T-0
    altitude: float          # [km]
    velocity: float          # [km/s]
    downrange: float         # [km]
    acceleration: float      # [g]
    throttle: float          # [%]
    latitude: float          # [deg]
    longitude: float         # [deg]
    phase: str               # MissionPhase.id
    dynamic_pressure: float  # [kPa]
    fuel_remaining: float    # [%]
    stage_status: str        # "attached" | "separated"
    fairing_status: str      # "attached" | "separated"
    is_max_q: bool

    def as_dict(self) -> dict:
        """Return the point keyed the way the telemetry feed expects (camelCase)."""
        return {_FEED_KEYS.get(f.name, f.name): getattr(self, f.name) for f in fields(self)}
