"""
Configuration for logging outputs and post-run analysis.
"""

from dataclasses import dataclass


@dataclass
class LoggingConfig:
    # Logging
    log_filename: str = "telemetry_log.txt"
    save_log: bool = True
    print_summary: bool = True
    plot_telemetry: bool = False
    plot_filename: str | None = None  # Save the figure instead of showing it
