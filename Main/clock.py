"""
Mission clock formatting (T-/T+ countdown and count-up).
"""

import math


def _pad(n: int) -> str:
    return f"{n:02d}"


def format_mission_time(seconds: float) -> str:
    """
    Format a signed mission time as T+MM:SS / T-MM:SS, or T+HH:MM:SS / T-HH:MM:SS
    from one hour on.

    Zero is shown as T+00:00. Fractional seconds are truncated for both signs,
    so -90.9 formats as T-01:30. NaN and infinite times do not raise; they come
    back as "T+nan", "T+inf" or "T-inf".
    """
    sign = "-" if seconds < 0 else "+"
    abs_s = abs(seconds)
    if not math.isfinite(abs_s):
        return f"T{sign}{abs_s}"

    h = math.floor(abs_s / 3600)
    m = math.floor((abs_s % 3600) / 60)
    s = math.floor(abs_s % 60)

    if h > 0:
        return f"T{sign}{_pad(h)}:{_pad(m)}:{_pad(s)}"
    return f"T{sign}{_pad(m)}:{_pad(s)}"
