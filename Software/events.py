# Software/events.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from Hardware.config import HardwareConfig
    from .config import SoftwareConfig


ATTACHED = "attached"
SEPARATED = "separated"


@dataclass(frozen=True)
class HardwareStatus:
    stage_status: str
    fairing_status: str
    is_max_q: bool


class EventManager:
    """
    Resolves the time-triggered hardware events of the ascent, such as stage
    separation and fairing jettison, into the vehicle's status at an instant.
    """

    def __init__(self, sw_config: SoftwareConfig, hw_config: HardwareConfig):
        self.stage_sep_after_s = hw_config.meco_time_s
        self.fairing_sep_time_s = sw_config.fairing_sep_time_s
        self.max_q_start_s, self.max_q_end_s = sw_config.max_q_flag_window_s

    def status_at(self, t: float) -> HardwareStatus:
        """
        Parameters
        ----------
        t : float
            Mission time [s] relative to T-0.

        Returns
        -------
        HardwareStatus
            Stage is separated strictly after MECO (from the separation coast
            onwards); the fairing is separated from its jettison time
            inclusive; the Max-Q flag covers the closed Max-Q window.
        """
        return HardwareStatus(
            stage_status=SEPARATED if t > self.stage_sep_after_s else ATTACHED,
            fairing_status=SEPARATED if t >= self.fairing_sep_time_s else ATTACHED,
            is_max_q=bool(self.max_q_start_s <= t <= self.max_q_end_s),
        )
