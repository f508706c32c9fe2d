"""Helpers for the main window: saved position and tray tooltip."""

from __future__ import annotations

from .mulfiles import _atoi, _span_excluding

_TIP_SIZE = 128


def parse_position(text: str) -> tuple[int, int] | None:
    """Window position from ``"x,y"``; None unless both numbers are non-zero."""
    x = _atoi(_span_excluding(text, ","))
    comma = text.find(",")
    y = _atoi(text[comma + 1:]) if comma != -1 else 0
    if x == 0 or y == 0:
        return None
    return x, y


def format_position(left: int, top: int) -> str:
    """Text saved for a window's top-left corner."""
    return f"{int(left)},{int(top)}"


def tray_tip(title: str, profile: str) -> str:
    """Tray icon tooltip naming the version and profile, cut to the tooltip size."""
    return f"{title} ({profile})"[:_TIP_SIZE - 1]