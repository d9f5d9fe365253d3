"""
Configuration for the software components (throttle program, flight events).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from Hardware.config import HardwareConfig
    from Software.events import EventManager
    from Software.guidance import ThrottleProgram


@dataclass
class SoftwareConfig:
    # --- Throttle Program (Max-Q Bucket) ---
    full_throttle_pct: float = 100.0
    max_q_throttle_pct: float = 70.0                          # Throttle down to protect the structure
    max_q_throttle_window_s: tuple[float, float] = (50.0, 80.0)
    engine_start_lead_s: float = 10.0                         # Engines light this long before T-0

    # --- Events ---
    max_q_flag_window_s: tuple[float, float] = (67.0, 77.0)  # +/- 5 s around peak q
    fairing_sep_time_s: float = 210.0

    def __post_init__(self):
        if not (0.0 <= self.max_q_throttle_pct <= self.full_throttle_pct <= 100.0):
            raise ValueError("Throttle levels must satisfy 0 <= max_q <= full <= 100.")
        for label, (start, end) in (
            ("max_q_throttle_window_s", self.max_q_throttle_window_s),
            ("max_q_flag_window_s", self.max_q_flag_window_s),
        ):
            if start > end:
                raise ValueError(f"{label} start {start} is after its end {end}.")

    def create_throttle_program(self, hw_config: HardwareConfig) -> ThrottleProgram:
        from Software.guidance import ThrottleProgram  # Local import
        return ThrottleProgram(sw_config=self, hw_config=hw_config)

    def create_event_manager(self, hw_config: HardwareConfig) -> EventManager:
        from Software.events import EventManager  # Local import
        return EventManager(sw_config=self, hw_config=hw_config)
