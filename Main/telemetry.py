"""
Minimal in-memory logger for synthesized telemetry runs.
"""

from typing import Any, Dict, Iterable, List

import numpy as np

from Software.mission_profile import get_phase
from .state import TelemetryPoint


class Logger:
    """
    Minimal in-memory logger for telemetry runs, one list per channel.
    """

    def __init__(self):
        self.mission_time = []
        self.altitude = []
        self.velocity = []
        self.downrange = []
        self.acceleration = []
        self.throttle = []
        self.latitude = []
        self.longitude = []
        self.phase = []
        self.dynamic_pressure = []
        self.fuel_remaining = []
        self.stage_status = []
        self.fairing_status = []
        self.is_max_q = []

    def __len__(self) -> int:
        return len(self.mission_time)

    def record(self, point: TelemetryPoint):
        self.mission_time.append(float(point.mission_time))
        self.altitude.append(float(point.altitude))
        self.velocity.append(float(point.velocity))
        self.downrange.append(float(point.downrange))
        self.acceleration.append(float(point.acceleration))
        self.throttle.append(float(point.throttle))
        self.latitude.append(float(point.latitude))
        self.longitude.append(float(point.longitude))
        self.phase.append(str(point.phase))
        self.dynamic_pressure.append(float(point.dynamic_pressure))
        self.fuel_remaining.append(float(point.fuel_remaining))
        self.stage_status.append(str(point.stage_status))
        self.fairing_status.append(str(point.fairing_status))
        self.is_max_q.append(bool(point.is_max_q))

    def extend(self, points: Iterable[TelemetryPoint]):
        for point in points:
            self.record(point)

    def points(self) -> List[TelemetryPoint]:
        """Rebuild the recorded TelemetryPoints in order."""
        return [
            TelemetryPoint(
                mission_time=self.mission_time[i],
                altitude=self.altitude[i],
                velocity=self.velocity[i],
                downrange=self.downrange[i],
                acceleration=self.acceleration[i],
                throttle=self.throttle[i],
                latitude=self.latitude[i],
                longitude=self.longitude[i],
                phase=self.phase[i],
                dynamic_pressure=self.dynamic_pressure[i],
                fuel_remaining=self.fuel_remaining[i],
                stage_status=self.stage_status[i],
                fairing_status=self.fairing_status[i],
                is_max_q=self.is_max_q[i],
            )
            for i in range(len(self))
        ]

    def summary(self) -> Dict[str, Any]:
        """
        Post-flight statistics: peak altitude [km], velocity [km/s], g-load [g]
        and dynamic pressure [kPa], plus the phases reached in time order.
        Empty logs return zeros and no phases.
        """
        if not self.mission_time:
            return {
                "max_altitude": 0.0,
                "max_velocity": 0.0,
                "max_g_force": 0.0,
                "max_dynamic_pressure": 0.0,
                "phases_reached": [],
            }
        reached = sorted(set(self.phase), key=lambda pid: (get_phase(pid).trigger_time, self.phase.index(pid)))
        return {
            "max_altitude": round(float(np.max(self.altitude)), 1),
            "max_velocity": round(float(np.max(self.velocity)), 3),
            "max_g_force": round(float(np.max(self.acceleration)), 2),
            "max_dynamic_pressure": round(float(np.max(self.dynamic_pressure)), 1),
            "phases_reached": reached,
        }
