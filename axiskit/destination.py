"""Checks for a new travel destination entered by the user."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from .mulfiles import _atoi

_COORD_CHARS = frozenset("0123456789-")

NO_CATEGORY = "IDS_NOCATSEL"
NO_SUBSECTION = "IDS_NOSUBSEL"
NO_DESCRIPTION = "IDS_NODESC"
INVALID_COORD = "IDS_INVALCOORD"
INVALID_MAP = "IDS_INVALMAP"


class DestinationError(ValueError):
    """A destination field is missing or out of range.

    ``code`` names the message (such as ``IDS_INVALCOORD``); ``field`` names
    the offending input, the axis letter for coordinates.
    """

    def __init__(self, code: str, field: str):
        super().__init__(f"{code}: {field}")
        self.code = code
        self.field = field


@dataclass(frozen=True)
class Destination:
    """A validated travel destination."""

    category: str
    subsection: str
    description: str
    x: int
    y: int
    z: int
    plane: int


def _number(text: str, low: int | None, high: int | None) -> int | None:
    """Integer of ``text`` after trimming leading blanks, or None if not acceptable."""
    text = text.lstrip()
    if not text or not set(text) <= _COORD_CHARS:
        return None
    value = _atoi(text)
    if low is not None and value < low:
        return None
    if high is not None and value > high:
        return None
    return value


def validate_destination(
    category: str,
    subsection: str,
    description: str,
    x: str,
    y: str,
    z: str,
    plane: str,
) -> Destination:
    """Check the fields of a new destination and return it with numeric coordinates.

    Checks run in the order category, subsection, description, X, Y, Z, map;
    the first failure raises :class:`DestinationError`. X and Y must be at
    least 0, Z lie in -128..128 and the map plane in 0..255. Coordinates may
    hold only digits and '-' after leading blanks are removed.
    """
    if category == "":
        raise DestinationError(NO_CATEGORY, "category")
    if subsection == "":
        raise DestinationError(NO_SUBSECTION, "subsection")
    if description == "":
        raise DestinationError(NO_DESCRIPTION, "description")
    x_value = _number(x, 0, None)
    if x_value is None:
        raise DestinationError(INVALID_COORD, "X")
    y_value = _number(y, 0, None)
    if y_value is None:
        raise DestinationError(INVALID_COORD, "Y")
    z_value = _number(z, -128, 128)
    if z_value is None:
        raise DestinationError(INVALID_COORD, "Z")
    plane_value = _number(plane, 0, 255)
    if plane_value is None:
        raise DestinationError(INVALID_MAP, "plane")
    return Destination(
        category=category,
        subsection=subsection,
        description=description,
        x=x_value,
        y=y_value,
        z=z_value,
        plane=plane_value,
    )


def subsections_for(categories: Mapping[str, Iterable[str]], category: str) -> list[str]:
    """Subsection names of ``category`` in order; empty if it is blank or unknown."""
    if category == "":
        return []
    subsections = categories.get(category)
    if subsections is None:
        return []
    return list(subsections)