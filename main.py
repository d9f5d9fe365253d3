"""
Entry point to synthesize a launch telemetry run end to end.

This builds the vehicle/environment/software stack, synthesizes telemetry over
a time window, prints a short summary, saves the log and optionally plots it.
Numbers follow a typical Falcon 9 class ascent to a ~250 km orbit.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from Environment.config import EnvironmentConfig
from Hardware.config import HardwareConfig, resolve_vehicle_profile
from Software.config import SoftwareConfig
from Software.mission_profile import get_phase, phase_progress

from Main.clock import format_mission_time
from Main.config import SimulationConfig
from Main.simulation import TelemetrySynthesizer
from Main.telemetry import Logger

from Logging.config import LoggingConfig


def main_orchestrator(
    env_config: Optional[EnvironmentConfig] = None,
    hw_config: Optional[HardwareConfig] = None,
    sw_config: Optional[SoftwareConfig] = None,
    sim_config: Optional[SimulationConfig] = None,
    log_config: Optional[LoggingConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[TelemetrySynthesizer, LoggingConfig]:
    # 1. Instantiate all config objects if not provided
    env_config = env_config or EnvironmentConfig()
    hw_config = hw_config or resolve_vehicle_profile("falcon9")
    sw_config = sw_config or SoftwareConfig()
    sim_config = sim_config or SimulationConfig()
    log_config = log_config or LoggingConfig()

    # 2. Random source: explicit generator wins, else the configured seed
    rng = rng if rng is not None else np.random.default_rng(sim_config.seed)

    synthesizer = TelemetrySynthesizer(
        sim_config=sim_config,
        env_config=env_config,
        hw_config=hw_config,
        sw_config=sw_config,
        rng=rng,
    )
    return synthesizer, log_config


def run_and_get_log(
    synthesizer: TelemetrySynthesizer,
    start_s: Optional[float] = None,
    end_s: Optional[float] = None,
    interval_s: Optional[float] = None,
) -> Logger:
    """Synthesizes the batch window (defaults from SimulationConfig) into a Logger."""
    sim_config = synthesizer.sim_config
    start_s = sim_config.batch_start_s if start_s is None else start_s
    end_s = sim_config.batch_end_s if end_s is None else end_s
    interval_s = sim_config.batch_interval_s if interval_s is None else interval_s

    log = Logger()
    log.extend(synthesizer.iter_batch(start_s, end_s, interval_s))
    return log


def print_summary(log: Logger, synthesizer: TelemetrySynthesizer):
    """Prints a summary of the synthesized run."""
    if not len(log):
        print("No telemetry points in the requested window.")
        return

    stats = log.summary()
    t_first, t_last = log.mission_time[0], log.mission_time[-1]
    print(
        f"Vehicle: {synthesizer.hw_config.name} | window {format_mission_time(t_first)} -> "
        f"{format_mission_time(t_last)} ({len(log)} points)"
    )
    print(
        f"Peak altitude {stats['max_altitude']:.1f} km, peak velocity {stats['max_velocity']:.3f} km/s, "
        f"peak g {stats['max_g_force']:.2f}, peak q {stats['max_dynamic_pressure']:.1f} kPa"
    )

    print("Phases reached:")
    for phase_id in stats["phases_reached"]:
        phase = get_phase(phase_id)
        print(f"  {format_mission_time(phase.trigger_time):>12}  {phase.name}")

    final = phase_progress(t_last)
    if final.next_phase is not None:
        print(
            f"At {format_mission_time(t_last)}: {final.current_phase.name}, "
            f"{final.progress:.0%} of the way to {final.next_phase.name}"
        )
    else:
        print(f"At {format_mission_time(t_last)}: {final.current_phase.name}")


def main():
    synthesizer, log_config = main_orchestrator()
    log = run_and_get_log(synthesizer)

    if log_config.print_summary:
        print_summary(log, synthesizer)
    if log_config.save_log:
        from Logging.generate_logs import save_log_to_txt
        save_log_to_txt(log, log_config.log_filename)
    if log_config.plot_telemetry:
        from Analysis.plotting import plot_telemetry
        plot_telemetry(log, filename=log_config.plot_filename)


if __name__ == "__main__":
    main()
