"""Temperature sensor readings and the first output line of shell commands."""

from __future__ import annotations

import subprocess

from .util import StatusError, read_int

_MAX_LINE = 1022


def temp(path: str) -> str:
    """Return a millidegree sensor reading in whole degrees Celsius."""
    value = read_int(path)
    degrees = abs(value) // 1000
    return str(-degrees if value < 0 else degrees)


def run_command(cmd: str) -> str:
    """Run ``cmd`` through the shell and return its first output line."""
    try:
        proc = subprocess.Popen(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        raise StatusError(f"popen '{cmd}': {exc.strerror}") from exc

    with proc:
        assert proc.stdout is not None
        line = proc.stdout.readline(_MAX_LINE)
        proc.stdout.close()
        proc.wait()

    if not line:
        raise StatusError(f"no output from '{cmd}'")
    newline = line.rfind("\n")
    if newline >= 0:
        line = line[:newline]
    if not line:
        raise StatusError(f"empty output from '{cmd}'")
    return line