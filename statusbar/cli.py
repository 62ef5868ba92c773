"""Command line entry point: render the configured status line repeatedly."""

from __future__ import annotations

import os
import signal
import sys
import threading
import time
from typing import Mapping, Sequence, TextIO

from .config import Component, Config, default_config
from .util import StatusError, warn


def _usage() -> str:
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    return f"usage: {prog or 'statusbar'} [-s]"


def render_status(config: Config, functions: Mapping[str, Component]) -> str:
    """Build one status line from the configured elements."""
    pieces: list[str] = []
    length = 0
    for arg in config.args:
        try:
            component = functions[arg.func]
        except KeyError:
            raise ValueError(f"unknown function '{arg.func}'") from None
        try:
            value = component(arg.args)
        except (StatusError, OSError):
            value = config.unknown_str
        try:
            piece = arg.fmt % value
        except (TypeError, ValueError):
            warn("vsnprintf: invalid format")
            break
        size = len(piece.encode("utf-8", errors="replace"))
        if length + size >= config.maxlen:
            warn("vsnprintf: Output truncated")
            break
        pieces.append(piece)
        length += size
    return "".join(pieces)


def parse_args(argv: Sequence[str]) -> bool:
    """Return whether -s was given; raise ValueError on any other usage."""
    single = False
    remaining = list(argv)
    while remaining and remaining[0].startswith("-") and len(remaining[0]) > 1:
        option = remaining.pop(0)
        if option == "--":
            break
        for flag in option[1:]:
            if flag != "s":
                raise ValueError(_usage())
            single = True
    if remaining:
        raise ValueError(_usage())
    return single


def run(config: Config, single: bool = True, out: TextIO | None = None) -> None:
    """Print the status line every interval until SIGINT or SIGTERM arrives."""
    if out is None:
        out = sys.stdout
    if not single:
        raise StatusError("XOpenDisplay: Failed to open display")

    functions = config.functions()
    stop = threading.Event()

    def terminate(_signo, _frame) -> None:
        stop.set()

    previous = {
        signo: signal.signal(signo, terminate)
        for signo in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        while not stop.is_set():
            start = time.monotonic()
            status = render_status(config, functions)
            try:
                out.write(status + "\n")
                out.flush()
            except OSError as exc:
                raise StatusError(f"puts: {exc.strerror}") from exc

            if not stop.is_set():
                wait = config.interval / 1000 - (time.monotonic() - start)
                if wait >= 0:
                    stop.wait(wait)
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the status monitor; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        single = parse_args(argv)
    except ValueError as exc:
        warn(str(exc))
        return 1
    try:
        run(default_config(), single, sys.stdout)
    except StatusError as exc:
        warn(str(exc))
        return 1
    return 0