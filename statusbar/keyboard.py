"""Keyboard lock indicators and keymap layout selection."""

from __future__ import annotations

from .util import StatusError

# Prefixes of names in the xkb symbols string that are not layouts.
_INVALID_PREFIXES = ("evdev", "inet", "pc", "base")
_FMT_LIMIT = 4


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps ('c') and num ('n') lock state as described by ``fmt``.

    A letter followed by '?' appears, case preserved, only when its
    indicator is on; otherwise the letter always appears, upper case when
    on and lower case when off.
    """
    fmt = fmt[:_FMT_LIMIT]
    out = []
    for position, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        following = fmt[position + 1 : position + 2]
        togglecase = following != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def valid_layout_or_variant(sym: str) -> bool:
    """Tell whether a symbols token names a layout rather than a rules file."""
    return not sym.startswith(_INVALID_PREFIXES)


def get_layout(symbols: str, group: int) -> str:
    """Return the layout active for keyboard ``group`` in an xkb symbols string."""
    tokens = (
        token
        for chunk in symbols.split("+")
        for token in chunk.split(":")
        if token
    )
    layout = None
    found = 0
    for token in tokens:
        if found > group:
            break
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            continue
        layout = token
        found += 1
    if layout is None:
        raise StatusError(f"no layout in '{symbols}'")
    return layout