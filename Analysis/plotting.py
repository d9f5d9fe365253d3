"""
Functions for plotting synthesized telemetry runs.
"""
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from Main.kinematics import typical_profile
from Main.telemetry import Logger
from Software.mission_profile import STANDARD_PHASES


def plot_telemetry(log: Logger, vehicle_profile: Optional[str] = None, filename: Optional[str] = None):
    """
    Overview of a run: time series with the nominal profile overlaid where one
    exists, phase markers, and the ground track.

    Saves to `filename` when given and closes the figure, otherwise shows it.
    Returns the matplotlib Figure.
    """
    times = np.array(log.mission_time)
    nominal = [typical_profile(t, vehicle_profile) for t in times]

    fig, axes = plt.subplots(2, 3, figsize=(15, 8))
    (ax_alt, ax_vel, ax_track), (ax_acc, ax_q, ax_fuel) = axes

    ax_alt.plot(times, log.altitude, color="tab:purple", lw=1.5, label="Telemetry")
    ax_alt.plot(times, [p.altitude for p in nominal], color="black", lw=0.8, ls="--", label="Nominal")
    ax_alt.set_ylabel("Altitude [km]")

    ax_vel.plot(times, log.velocity, color="tab:cyan", lw=1.5, label="Telemetry")
    ax_vel.plot(times, [p.velocity for p in nominal], color="black", lw=0.8, ls="--", label="Nominal")
    ax_vel.set_ylabel("Velocity [km/s]")

    ax_acc.plot(times, log.acceleration, color="tab:orange", lw=1.5, label="Acceleration")
    ax_acc.set_ylabel("Acceleration [g]")
    ax_thr = ax_acc.twinx()
    ax_thr.plot(times, log.throttle, color="tab:gray", lw=0.8, alpha=0.7, label="Throttle")
    ax_thr.set_ylabel("Throttle [%]")
    ax_thr.set_ylim(-5, 105)

    ax_q.plot(times, log.dynamic_pressure, color="tab:red", lw=1.5, label="Telemetry")
    ax_q.plot(times, [p.dynamic_pressure for p in nominal], color="black", lw=0.8, ls="--", label="Nominal")
    max_q = np.array(log.is_max_q, dtype=bool)
    if max_q.any():
        ax_q.axvspan(times[max_q].min(), times[max_q].max(), color="tab:red", alpha=0.1, label="Max-Q")
    ax_q.set_ylabel("Dynamic pressure [kPa]")

    ax_fuel.plot(times, log.fuel_remaining, color="tab:green", lw=1.5)
    ax_fuel.set_ylabel("First-stage propellant [%]")
    ax_fuel.set_ylim(-5, 105)

    # Phase markers on the time-series panels
    if times.size:
        for phase in STANDARD_PHASES:
            if times.min() <= phase.trigger_time <= times.max():
                for ax in (ax_alt, ax_vel, ax_acc, ax_q, ax_fuel):
                    ax.axvline(phase.trigger_time, color="lightgray", lw=0.6, zorder=0)
                ax_alt.annotate(
                    phase.name, (phase.trigger_time, 1.0), xycoords=("data", "axes fraction"),
                    rotation=90, fontsize=7, va="top", ha="right", color="dimgray",
                )

    for ax in (ax_alt, ax_vel, ax_acc, ax_q, ax_fuel):
        ax.set_xlabel("Mission time [s]")
        ax.grid(True, alpha=0.3)
    ax_alt.legend(loc="lower right")
    ax_q.legend(loc="upper right")

    ax_track.plot(log.longitude, log.latitude, color="tab:blue", lw=1.5)
    if len(log):
        ax_track.scatter(log.longitude[0], log.latitude[0], color="green", s=30, label="Launch", zorder=3)
        ax_track.scatter(log.longitude[-1], log.latitude[-1], color="black", s=30, label="Final", zorder=3)
        ax_track.legend()
    ax_track.set_xlabel("Longitude [deg]")
    ax_track.set_ylabel("Latitude [deg]")
    ax_track.set_title("Ground track")
    ax_track.grid(True, alpha=0.3)

    fig.suptitle("Launch telemetry")
    fig.tight_layout()
    if filename:
        fig.savefig(filename, dpi=120)
        plt.close(fig)
        print(f"Saved telemetry plot to {filename}", flush=True)
    else:
        plt.show()
    return fig
