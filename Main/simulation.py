"""
Simulation glue: nominal profile, noise, hardware events and batch runs.
"""

from __future__ import annotations

import math
from typing import Iterator, List, Optional

import numpy as np

from Environment.config import EnvironmentConfig
from Hardware.config import HardwareConfig, resolve_vehicle_profile
from Software.config import SoftwareConfig
from Software.mission_profile import current_phase
from .config import SimulationConfig
from .kinematics import KinematicModel
from .state import TelemetryPoint


class TelemetrySynthesizer:
    """
    Synthesizes telemetry points along the nominal ascent with small sensor-like
    perturbations.

    All randomness comes from `rng`, a numpy Generator. Pass a seeded one (or
    set `SimulationConfig.seed`) for reproducible output.
    """

    def __init__(
        self,
        sim_config: Optional[SimulationConfig] = None,
        env_config: Optional[EnvironmentConfig] = None,
        hw_config: Optional[HardwareConfig] = None,
        sw_config: Optional[SoftwareConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.sim_config = sim_config or SimulationConfig()
        self.env_config = env_config or EnvironmentConfig()
        self.hw_config = hw_config or resolve_vehicle_profile("falcon9")
        self.sw_config = sw_config or SoftwareConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.sim_config.seed)

        self.q_model = self.env_config.create_dynamic_pressure_model()
        self.ground_track = self.env_config.create_ground_track()

        # Components per vehicle profile name, built on first use
        self._components: dict[str, tuple] = {}
        self._components[self.hw_config.name] = self._build_components(self.hw_config)

    def _build_components(self, hw_config: HardwareConfig) -> tuple:
        return (
            hw_config,
            KinematicModel(hw_config, self.q_model),
            self.sw_config.create_throttle_program(hw_config),
            self.sw_config.create_event_manager(hw_config),
            hw_config.create_booster_stage(),
        )

    def _components_for(self, vehicle_profile: Optional[str]) -> tuple:
        if vehicle_profile is None:
            return self._components[self.hw_config.name]
        hw_config = resolve_vehicle_profile(vehicle_profile)
        if hw_config.name not in self._components:
            self._components[hw_config.name] = self._build_components(hw_config)
        return self._components[hw_config.name]

    def noise(self, amplitude: float) -> float:
        """Uniform perturbation in [-amplitude/2, amplitude/2)."""
        return (self.rng.random() - 0.5) * amplitude

    def synthesize(self, mission_time_s: float, vehicle_profile: Optional[str] = None) -> TelemetryPoint:
        """
        Build one telemetry point at `mission_time_s`.

        Never raises for numeric input; NaN/inf propagate into the unclamped
        fields.
        """
        hw, kinematics, throttle_program, events, booster_stage = self._components_for(vehicle_profile)
        sim = self.sim_config
        track = self.ground_track
        t = mission_time_s

        nominal = kinematics.profile(t)
        altitude = nominal.altitude
        velocity = nominal.velocity
        downrange = nominal.downrange
        acceleration = nominal.acceleration
        dynamic_pressure = nominal.dynamic_pressure
        throttle = throttle_program(t)
        fuel_remaining = booster_stage.fuel_remaining_pct(t)

        if t < 0.0:
            # On the pad: no noise, vehicle at the launch site
            latitude, longitude = track.on_pad()
        elif t <= hw.meco_time_s:
            amp = sim.booster_noise
            altitude += self.noise(amp["altitude"])
            velocity += self.noise(amp["velocity"])
            downrange += self.noise(amp["downrange"])
            acceleration += self.noise(amp["acceleration"])
            bucket = throttle_program.in_max_q_bucket(t)
            throttle += self.noise(amp["throttle_bucket"] if bucket else amp["throttle"])
            latitude, longitude = track.booster(kinematics.booster_fraction(t))
            latitude += self.noise(amp["latitude"])
            longitude += self.noise(amp["longitude"])
            dynamic_pressure += self.noise(amp["dynamic_pressure"])
            fuel_remaining += self.noise(amp["fuel"])
        elif t <= hw.stage_sep_time_s:
            amp = sim.sep_coast_noise
            altitude += self.noise(amp["altitude"])
            velocity += self.noise(amp["velocity"])
            downrange += self.noise(amp["downrange"])
            acceleration += self.noise(amp["acceleration"])
            latitude, longitude = track.staging()
            latitude += self.noise(amp["latitude"])
            longitude += self.noise(amp["longitude"])
        elif t <= hw.seco_time_s:
            amp = sim.upper_noise
            altitude += self.noise(amp["altitude"])
            velocity += self.noise(amp["velocity"])
            downrange += self.noise(amp["downrange"])
            acceleration += self.noise(amp["acceleration"])
            throttle += self.noise(amp["throttle"])
            latitude, longitude = track.upper(kinematics.upper_fraction(t))
            latitude += self.noise(amp["latitude"])
            longitude += self.noise(amp["longitude"])
        else:
            amp = sim.coast_noise
            t_coast = t - hw.seco_time_s
            swing = np.sin(track.coast_fraction(t_coast) * np.pi * 2)
            altitude += swing * sim.coast_altitude_swing_km + self.noise(amp["altitude"])
            velocity += swing * sim.coast_velocity_swing_kms + self.noise(amp["velocity"])
            downrange += self.noise(amp["downrange"])
            acceleration += self.noise(amp["acceleration"])
            latitude, longitude = track.coast(t_coast)
            latitude += self.noise(amp["latitude"])
            longitude += self.noise(amp["longitude"])

        # Clamp to physical ranges; acceleration and position are left as-is
        altitude = np.maximum(0.0, altitude)
        velocity = np.maximum(0.0, velocity)
        downrange = np.maximum(0.0, downrange)
        dynamic_pressure = np.maximum(0.0, dynamic_pressure)
        throttle = np.clip(throttle, 0.0, 100.0)
        fuel_remaining = np.clip(fuel_remaining, 0.0, 100.0)

        status = events.status_at(t)
        return TelemetryPoint(
            mission_time=t,
            altitude=round(float(altitude), 2),
            velocity=round(float(velocity), 3),
            downrange=round(float(downrange), 2),
            acceleration=round(float(acceleration), 2),
            throttle=round(float(throttle), 1),
            latitude=round(float(latitude), 4),
            longitude=round(float(longitude), 4),
            phase=current_phase(t).id,
            dynamic_pressure=round(float(dynamic_pressure), 2),
            fuel_remaining=round(float(fuel_remaining), 1),
            stage_status=status.stage_status,
            fairing_status=status.fairing_status,
            is_max_q=status.is_max_q,
        )

    def batch(
        self,
        start_s: float,
        end_s: float,
        interval_s: float = 1.0,
        vehicle_profile: Optional[str] = None,
    ) -> List[TelemetryPoint]:
        """Synthesize every point from `start_s` to `end_s` inclusive, eagerly."""
        return list(self.iter_batch(start_s, end_s, interval_s, vehicle_profile))

    def iter_batch(
        self,
        start_s: float,
        end_s: float,
        interval_s: float = 1.0,
        vehicle_profile: Optional[str] = None,
    ) -> "TelemetryBatch":
        """Lazy, restartable counterpart of `batch`."""
        return TelemetryBatch(self, start_s, end_s, interval_s, vehicle_profile)


class TelemetryBatch:
    """
    Finite sequence of telemetry points at t = start + k * interval, t <= end.

    Points are synthesized on iteration; every new iteration starts over at
    `start` with fresh noise draws. Times are computed from the step index so
    an end that is an exact multiple of the interval is always included.
    """

    def __init__(
        self,
        synthesizer: TelemetrySynthesizer,
        start_s: float,
        end_s: float,
        interval_s: float,
        vehicle_profile: Optional[str] = None,
    ):
        # NaN passes this check; times() then stops after the first point
        if interval_s <= 0.0:
            raise ValueError(f"Batch interval must be positive, got {interval_s}.")
        if start_s == -math.inf or end_s == math.inf:
            raise ValueError(f"Batch range [{start_s}, {end_s}] is unbounded.")
        self.synthesizer = synthesizer
        self.start_s = start_s
        self.end_s = end_s
        self.interval_s = interval_s
        self.vehicle_profile = vehicle_profile

    def times(self) -> Iterator[float]:
        k = 0
        t = self.start_s
        while t <= self.end_s:
            yield t
            k += 1
            t = self.start_s + k * self.interval_s

    def __iter__(self) -> Iterator[TelemetryPoint]:
        for t in self.times():
            yield self.synthesizer.synthesize(t, self.vehicle_profile)

    def __len__(self) -> int:
        if not (math.isfinite(self.start_s) and math.isfinite(self.end_s)) or self.end_s < self.start_s:
            return 0
        if math.isnan(self.interval_s):
            return 1
        # Same comparison as times(), so len() matches the iteration count
        n = int(math.floor((self.end_s - self.start_s) / self.interval_s))
        while self.start_s + (n + 1) * self.interval_s <= self.end_s:
            n += 1
        while n > 0 and self.start_s + n * self.interval_s > self.end_s:
            n -= 1
        return n + 1


_default_synthesizer: Optional[TelemetrySynthesizer] = None


def default_synthesizer() -> TelemetrySynthesizer:
    """Process-wide synthesizer with default configs and an unseeded generator."""
    global _default_synthesizer
    if _default_synthesizer is None:
        _default_synthesizer = TelemetrySynthesizer()
    return _default_synthesizer


def _synthesizer_for(rng: Optional[np.random.Generator]) -> TelemetrySynthesizer:
    return default_synthesizer() if rng is None else TelemetrySynthesizer(rng=rng)


def synthesize(
    mission_time_s: float,
    vehicle_profile: str = "falcon9",
    rng: Optional[np.random.Generator] = None,
) -> TelemetryPoint:
    return _synthesizer_for(rng).synthesize(mission_time_s, vehicle_profile)


def batch(
    start_s: float,
    end_s: float,
    interval_s: float = 1.0,
    vehicle_profile: str = "falcon9",
    rng: Optional[np.random.Generator] = None,
) -> List[TelemetryPoint]:
    return _synthesizer_for(rng).batch(start_s, end_s, interval_s, vehicle_profile)
