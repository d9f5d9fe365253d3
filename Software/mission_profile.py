"""
mission_profile.py

Defines the mission timeline: the named phases of a standard orbital launch
and the classifiers that map a mission-elapsed time onto them.

Two orderings of the same table are in use. `current_phase` scans the table in
declared order, `phase_progress` scans a time-sorted copy. They disagree once
`booster_landing` (T+510, declared after `payload_deploy`) qualifies: the
declared-order scan keeps reporting it after T+960.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class MissionPhase:
    id: str
    name: str
    description: str
    detailed_description: str
    icon: str
    trigger_time: float  # [s] relative to T-0


STANDARD_PHASES: Tuple[MissionPhase, ...] = (
    MissionPhase(
        id="pre_launch", name="Pre-Launch", description="Vehicle on pad, systems check", icon="🔧",
        trigger_time=-3600.0,
        detailed_description=(
            "The launch vehicle is vertical on the pad. Ground crews perform final inspections, "
            "range safety checks, and verify all telemetry links. Weather balloons are launched "
            "to check upper-level winds."
        ),
    ),
    MissionPhase(
        id="fueling", name="Fueling", description="Propellant loading", icon="⛽",
        trigger_time=-2400.0,
        detailed_description=(
            "RP-1 kerosene and liquid oxygen are loaded into both stages. LOX loading continues "
            "until just before launch due to boil-off. The strongback retracts to launch position."
        ),
    ),
    MissionPhase(
        id="terminal_count", name="Terminal Count", description="Final countdown sequence", icon="⏱️",
        trigger_time=-600.0,
        detailed_description=(
            "The automated launch sequence begins and the flight computers take over the count. "
            "Propellant tanks are pressurized, engines are chilled and the launch director polls "
            "all stations for GO."
        ),
    ),
    MissionPhase(
        id="ignition", name="Ignition", description="Engine ignition and liftoff", icon="🔥",
        trigger_time=0.0,
        detailed_description=(
            "First-stage engines ignite and the vehicle is released from the hold-down clamps at "
            "T+0. The vehicle clears the tower within seconds."
        ),
    ),
    MissionPhase(
        id="max_q", name="Max-Q", description="Maximum dynamic pressure", icon="💨",
        trigger_time=72.0,
        detailed_description=(
            "The vehicle passes through the region of maximum aerodynamic stress at roughly 35 kPa. "
            "Engines throttle down to about 70% to reduce structural loads, then throttle back up."
        ),
    ),
    MissionPhase(
        id="meco", name="MECO", description="Main engine cutoff", icon="✂️",
        trigger_time=162.0,
        detailed_description=(
            "First-stage engines shut down at about 2.3 km/s. A brief coast follows before stage "
            "separation."
        ),
    ),
    MissionPhase(
        id="stage_sep", name="Stage Separation", description="First and second stage separation", icon="🔗",
        trigger_time=165.0,
        detailed_description=(
            "Pneumatic pushers separate the stages. Cold gas thrusters orient the first stage for "
            "its return while the interstage clears the second-stage engine."
        ),
    ),
    MissionPhase(
        id="ses", name="SES", description="Second engine start", icon="🚀",
        trigger_time=170.0,
        detailed_description=(
            "The vacuum-optimized second-stage engine ignites. This burn places the payload into "
            "its target orbit."
        ),
    ),
    MissionPhase(
        id="fairing_sep", name="Fairing Sep", description="Payload fairing separation", icon="🛡️",
        trigger_time=210.0,
        detailed_description=(
            "The two fairing halves separate and fall away once the vehicle is above the sensible "
            "atmosphere, exposing the payload to space."
        ),
    ),
    MissionPhase(
        id="seco", name="SECO", description="Second engine cutoff", icon="⏹️",
        trigger_time=510.0,
        detailed_description=(
            "The second stage shuts down at orbital velocity, about 7.8 km/s, with the payload in a "
            "roughly 250 km orbit."
        ),
    ),
    MissionPhase(
        id="payload_deploy", name="Payload Deploy", description="Payload deployment", icon="🛰️",
        trigger_time=960.0,
        detailed_description=(
            "The payload separates from the second-stage adapter, deploys its solar arrays and "
            "begins its own mission."
        ),
    ),
    MissionPhase(
        id="booster_landing", name="Booster Landing", description="First stage landing", icon="🎯",
        trigger_time=510.0,
        detailed_description=(
            "The first stage performs boostback, entry and landing burns, steering with grid fins "
            "to a drone ship or landing pad."
        ),
    ),
    MissionPhase(
        id="mission_complete", name="Mission Complete", description="Mission objectives achieved", icon="✅",
        trigger_time=3600.0,
        detailed_description=(
            "The payload is confirmed in its target orbit with healthy telemetry and mission "
            "success is declared."
        ),
    ),
)

# Stable sort: phases sharing a trigger time keep their declared order.
_SORTED_PHASES: Tuple[MissionPhase, ...] = tuple(sorted(STANDARD_PHASES, key=lambda p: p.trigger_time))
_PHASES_BY_ID = {p.id: p for p in STANDARD_PHASES}


class PhaseProgress(NamedTuple):
    current_phase: MissionPhase
    progress: float
    next_phase: Optional[MissionPhase]


def get_phase(phase_id: str) -> MissionPhase:
    """Look up a phase by id. Raises KeyError for unknown ids."""
    try:
        return _PHASES_BY_ID[phase_id]
    except KeyError:
        raise KeyError(f"Unknown mission phase '{phase_id}'.") from None


def current_phase(mission_time_s: float) -> MissionPhase:
    """
    Return the phase active at `mission_time_s`.

    The table is scanned in declared order and the last entry whose trigger
    time has been reached wins, so a phase declared later overrides one with a
    larger trigger time. Times before the first trigger map to the first
    declared phase.
    """
    phase = STANDARD_PHASES[0]
    for candidate in STANDARD_PHASES:
        if mission_time_s >= candidate.trigger_time:
            phase = candidate
    return phase


def phase_progress(mission_time_s: float) -> PhaseProgress:
    """
    Return the current phase, fractional progress towards the next phase and
    the next phase itself, using the time-sorted phase table.

    Progress is clamped to [0, 1] and is exactly 1 once the final phase has
    been reached (`next_phase` is then None).
    """
    current_index = 0
    for i, candidate in enumerate(_SORTED_PHASES):
        if mission_time_s >= candidate.trigger_time:
            current_index = i

    phase = _SORTED_PHASES[current_index]
    next_phase = _SORTED_PHASES[current_index + 1] if current_index < len(_SORTED_PHASES) - 1 else None

    progress = 1.0
    if next_phase is not None:
        # The last qualifying index always sits past any tie, so duration > 0.
        duration = next_phase.trigger_time - phase.trigger_time
        elapsed = mission_time_s - phase.trigger_time
        progress = float(np.clip(elapsed / duration, 0.0, 1.0))

    return PhaseProgress(phase, progress, next_phase)


def completed_phases(mission_time_s: float) -> Tuple[MissionPhase, ...]:
    """Phases already reached at `mission_time_s`, in time order."""
    return tuple(p for p in _SORTED_PHASES if p.trigger_time <= mission_time_s)
