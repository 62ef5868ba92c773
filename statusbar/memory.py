"""RAM and swap figures read from /proc/meminfo."""

from __future__ import annotations

import os

from .util import StatusError, fmt_human

MEMINFO = "/proc/meminfo"


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each meminfo field name to its value (in kB)."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        key, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts:
            continue
        try:
            fields[key.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _fields(path: str, *names: str) -> tuple[int, ...]:
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            info = parse_meminfo(fh.read())
    except OSError as exc:
        raise StatusError(f"fopen '{os.fspath(path)}': {exc.strerror}") from exc
    missing = [name for name in names if name not in info]
    if missing:
        raise StatusError(f"'{path}' lacks {', '.join(missing)}")
    return tuple(info[name] for name in names)


def ram_free(path: str = MEMINFO) -> str:
    """Return the memory available for new allocations."""
    (available,) = _fields(path, "MemAvailable")
    return fmt_human(available * 1024, 1024)


def ram_perc(path: str = MEMINFO) -> str:
    """Return the share of memory in use, excluding buffers and cache."""
    total, free, buffers, cached = _fields(
        path, "MemTotal", "MemFree", "Buffers", "Cached"
    )
    if total == 0:
        raise StatusError("MemTotal is zero")
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(path: str = MEMINFO) -> str:
    """Return the total amount of memory."""
    (total,) = _fields(path, "MemTotal")
    return fmt_human(total * 1024, 1024)


def ram_used(path: str = MEMINFO) -> str:
    """Return the memory in use, excluding buffers and cache."""
    total, free, buffers, cached = _fields(
        path, "MemTotal", "MemFree", "Buffers", "Cached"
    )
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def _swap(path: str) -> tuple[int, int, int]:
    total, free, cached = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    return total, free, cached


def swap_free(path: str = MEMINFO) -> str:
    """Return the unused swap space."""
    (free,) = _fields(path, "SwapFree")
    return fmt_human(free * 1024, 1024)


def swap_perc(path: str = MEMINFO) -> str:
    """Return the share of swap in use, excluding swap cache."""
    total, free, cached = _swap(path)
    if total == 0:
        raise StatusError("SwapTotal is zero")
    return str(100 * (total - free - cached) // total)


def swap_total(path: str = MEMINFO) -> str:
    """Return the total swap space."""
    (total,) = _fields(path, "SwapTotal")
    return fmt_human(total * 1024, 1024)


def swap_used(path: str = MEMINFO) -> str:
    """Return the swap space in use, excluding swap cache."""
    total, free, cached = _swap(path)
    return fmt_human((total - free - cached) * 1024, 1024)