"""Battery capacity, charging state and remaining time from sysfs."""

from __future__ import annotations

import os
from pathlib import Path

from .util import StatusError, read_first_line, read_int

POWER_SUPPLY_ROOT = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "F",
}


def _pick(directory: Path, *names: str) -> Path:
    for name in names:
        candidate = directory / name
        if os.access(candidate, os.R_OK):
            return candidate
    raise StatusError(f"none of {', '.join(names)} readable in '{directory}'")


def _read_state(directory: Path) -> str:
    tokens = read_first_line(directory / "status").split()
    if not tokens:
        raise StatusError(f"empty battery status in '{directory}'")
    return tokens[0][:12]


def battery_perc(bat: str, root: str = POWER_SUPPLY_ROOT) -> str:
    """Return the battery charge percentage."""
    return str(read_int(Path(root) / bat / "capacity"))


def battery_state(bat: str, root: str = POWER_SUPPLY_ROOT) -> str:
    """Return '+' when charging, '-' when discharging, 'F' when full, else '?'."""
    return _STATE_SYMBOLS.get(_read_state(Path(root) / bat), "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY_ROOT) -> str:
    """Return the remaining time as 'Hh Mm' while discharging, else ''."""
    directory = Path(root) / bat
    state = _read_state(directory)
    charge_now = read_int(_pick(directory, "charge_now", "energy_now"))

    if state != "Discharging":
        return ""

    current_now = read_int(_pick(directory, "current_now", "power_now"))
    if current_now == 0:
        raise StatusError("battery draw is zero")

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"