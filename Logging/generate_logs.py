"""
Functions for saving and reloading synthesized telemetry logs.
"""
from __future__ import annotations

import csv

from Main.telemetry import Logger
from Main.state import TelemetryPoint

LOG_HEADER = [
    "t_mission_s", "alt_km", "vel_kmps", "downrange_km", "accel_g", "throttle_pct",
    "lat_deg", "lon_deg", "phase", "q_kPa", "fuel_pct", "stage", "fairing", "max_q",
]


def save_log_to_txt(log: Logger, filename: str):
    """Write telemetry points to a text (CSV-style) file for analysis."""
    with open(filename, "w") as f:
        f.write("# " + ",".join(LOG_HEADER) + "\n")
        for i in range(len(log)):
            f.write(
                f"{log.mission_time[i]:.3f},{log.altitude[i]:.2f},{log.velocity[i]:.3f},{log.downrange[i]:.2f},"
                f"{log.acceleration[i]:.2f},{log.throttle[i]:.1f},{log.latitude[i]:.4f},{log.longitude[i]:.4f},"
                f"{log.phase[i]},{log.dynamic_pressure[i]:.2f},{log.fuel_remaining[i]:.1f},"
                f"{log.stage_status[i]},{log.fairing_status[i]},{int(log.is_max_q[i])}\n"
            )
    print(f"Saved telemetry log to {filename}", flush=True)


def load_log_from_txt(filename: str) -> Logger:
    """Read a file written by save_log_to_txt back into a Logger."""
    log = Logger()
    with open(filename, newline="") as f:
        header = f.readline()
        if header.lstrip("# ").strip().split(",") != LOG_HEADER:
            raise ValueError(f"{filename} is not a telemetry log (unexpected header).")
        for row in csv.reader(f):
            if not row:
                continue
            log.record(
                TelemetryPoint(
                    mission_time=float(row[0]),
                    altitude=float(row[1]),
                    velocity=float(row[2]),
                    downrange=float(row[3]),
                    acceleration=float(row[4]),
                    throttle=float(row[5]),
                    latitude=float(row[6]),
                    longitude=float(row[7]),
                    phase=row[8],
                    dynamic_pressure=float(row[9]),
                    fuel_remaining=float(row[10]),
                    stage_status=row[11],
                    fairing_status=row[12],
                    is_max_q=row[13] == "1",
                )
            )
    return log
