from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from Hardware.config import HardwareConfig
    from .config import SoftwareConfig


class ThrottleProgram:
    """
    Nominal throttle command [%] as a function of mission time.

    Engines are off until the engine-start lead time before T-0, full through
    the first-stage burn apart from the Max-Q bucket, off through the
    separation coast, full through the second-stage burn and off after SECO.
    Boundaries follow the staging timeline of the vehicle profile.
    """

    def __init__(self, sw_config: SoftwareConfig, hw_config: HardwareConfig):
        self.engine_start_lead_s = sw_config.engine_start_lead_s
        self.full_throttle_pct = sw_config.full_throttle_pct
        self.max_q_throttle_pct = sw_config.max_q_throttle_pct
        self.bucket_start_s, self.bucket_end_s = sw_config.max_q_throttle_window_s
        self.meco_time_s = hw_config.meco_time_s
        self.stage_sep_time_s = hw_config.stage_sep_time_s
        self.seco_time_s = hw_config.seco_time_s

    def __call__(self, t: float) -> float:
        if t < 0.0:
            # Engine chill/start in the final seconds of the count
            return self.full_throttle_pct if t > -self.engine_start_lead_s else 0.0
        if t <= self.meco_time_s:
            if self.bucket_start_s <= t <= self.bucket_end_s:
                return self.max_q_throttle_pct
            return self.full_throttle_pct
        if t <= self.stage_sep_time_s:
            return 0.0
        if t <= self.seco_time_s:
            return self.full_throttle_pct
        return 0.0

    def in_max_q_bucket(self, t: float) -> bool:
        return self.bucket_start_s <= t <= self.bucket_end_s
