"""Shared helpers: error reporting, human-readable sizes and small file readers."""

from __future__ import annotations

import os
import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class StatusError(Exception):
    """Raised when a status value cannot be retrieved."""


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return ""


def warn(message: str) -> None:
    """Write a diagnostic line to standard error, prefixed with the program name."""
    prog = _program_name()
    prefix = f"{prog}: " if prog and not message.startswith("usage") else ""
    sys.stderr.write(f"{prefix}{message}\n")
    sys.stderr.flush()


def fmt_human(num: int | float, base: int) -> str:
    """Scale ``num`` by ``base`` and attach an SI (1000) or IEC (1024) prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def _read_text(path: str | os.PathLike[str]) -> str:
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            return fh.read()
    except OSError as exc:
        raise StatusError(f"fopen '{os.fspath(path)}': {exc.strerror}") from exc


def read_first_line(path: str | os.PathLike[str]) -> str:
    """Return the first line of a file without its trailing newline."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            line = fh.readline()
    except OSError as exc:
        raise StatusError(f"fopen '{os.fspath(path)}': {exc.strerror}") from exc
    return line.rstrip("\n")


def read_int(path: str | os.PathLike[str]) -> int:
    """Read the leading integer of a file, skipping leading whitespace."""
    text = _read_text(path)
    match = _LEADING_INT.match(text)
    if match is None:
        raise StatusError(f"no integer in '{os.fspath(path)}'")
    return int(match.group(1))