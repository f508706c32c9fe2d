"""Reader for the application's INI file: general settings and tag name lists."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Iterable

from .axislog import AxisLog, LogLevel
from .mulfiles import _atoi, _span_excluding

HKEY_LOCAL_MACHINE = "HKEY_LOCAL_MACHINE"
HKEY_CURRENT_USER = "HKEY_CURRENT_USER"


class IniSection(IntEnum):
    """Kinds of section the INI file may hold."""

    SETTINGS = 0
    NPCTAG = 1
    ITEMTAG = 2

    @classmethod
    def lookup(cls, name: str) -> "IniSection | None":
        """Section for a header word such as ``SETTINGS``, or None if unknown."""
        for section in cls:
            if section.name == name:
                return section
        return None


_NUMERIC_SETTINGS = {
    "AllowMultiple": "allow_multiple",
    "AlwaysOnTop": "always_on_top",
    "DisableToolbar": "disable_toolbar",
    "DrawDifs": "draw_difs",
    "DrawStatics": "draw_statics",
    "LoadDefault": "load_default",
    "RoomView": "room_view",
    "SameAsClient": "same_as_client",
    "StartTab": "start_tab",
    "SysClose": "sys_close",
    "ShowSpawnpoints": "show_spawnpoints",
    "NPCSpawnColor": "npc_spawn_color",
    "ItemSpawnColor": "item_spawn_color",
    "ItemBGColor": "item_bg_color",
    "SpawnBGColor": "spawn_bg_color",
    "ShowItems": "show_items",
    "ShowNPCs": "show_npcs",
    "ShowMap": "show_map",
}

_TEXT_SETTINGS = {
    "Position": "position",
    "CommandPrefix": "command_prefix",
    "UOTitle": "uo_title",
}

_REG_LOCATIONS = {
    "Machine": HKEY_LOCAL_MACHINE,
    "User": HKEY_CURRENT_USER,
}


@dataclass
class AxisSettings:
    """Values of the ``[SETTINGS]`` section."""

    allow_multiple: int = 0
    always_on_top: int = 0
    disable_toolbar: int = 0
    draw_difs: int = 0
    draw_statics: int = 0
    load_default: int = 0
    position: str = ""
    room_view: int = 0
    same_as_client: int = 0
    start_tab: int = 0
    sys_close: int = 0
    show_spawnpoints: int = 0
    npc_spawn_color: int = 0
    item_spawn_color: int = 0
    item_bg_color: int = 0
    spawn_bg_color: int = 0
    show_items: int = 0
    show_npcs: int = 0
    show_map: int = 0
    command_prefix: str = ""
    uo_title: str = ""
    reg_location: str | None = None

    def apply(self, name: str, value: str) -> bool:
        """Set the setting called ``name`` from its text; False if the name is unknown."""
        if name in _NUMERIC_SETTINGS:
            setattr(self, _NUMERIC_SETTINGS[name], _atoi(value))
            return True
        if name in _TEXT_SETTINGS:
            setattr(self, _TEXT_SETTINGS[name], value)
            return True
        if name == "RegInstallation":
            location = _REG_LOCATIONS.get(value)
            if location is not None:
                self.reg_location = location
            return True
        return False


@dataclass
class TagLists:
    """Property and tag names listed in the ``[NPCTAG ...]`` and ``[ITEMTAG ...]`` sections."""

    npc_stats: list[str] = field(default_factory=list)
    npc_resistences: list[str] = field(default_factory=list)
    npc_misc: list[str] = field(default_factory=list)
    npc_tags: list[str] = field(default_factory=list)
    item_props: list[str] = field(default_factory=list)
    item_tags: list[str] = field(default_factory=list)

    def target(self, section: IniSection, index: str) -> list[str] | None:
        """The list a section header with this index fills, or None."""
        if section is IniSection.NPCTAG:
            names = {
                "Stats": self.npc_stats,
                "Resistences": self.npc_resistences,
                "Misc": self.npc_misc,
                "Tags": self.npc_tags,
            }
        elif section is IniSection.ITEMTAG:
            names = {"Props": self.item_props, "Tags": self.item_tags}
        else:
            return None
        return names.get(index)

    def __len__(self) -> int:
        return sum(len(getattr(self, item.name)) for item in fields(self))


@dataclass
class IniData:
    """Everything read from an INI file."""

    settings: AxisSettings = field(default_factory=AxisSettings)
    tags: TagLists = field(default_factory=TagLists)


_SKIP = object()
_SETTINGS = object()


def _setting_pair(body: str) -> tuple[str, str]:
    name = _span_excluding(body, " \t=").strip()
    value = body[len(name) + 1:].strip()
    position = value.find(" \t=")
    if position != 0:
        value = value[position + 1:]
    return name, value.strip()


def _parse(
    lines: Iterable[str],
    part: int | None,
    only: str | None,
    log: AxisLog | None,
    source: str,
) -> IniData:
    wanted = None if part is None or int(part) < 0 else int(part)
    data = IniData()
    mode: object = _SKIP
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith("["):
            key = _span_excluding(line[1:], "]")
            space = key.find(" ")
            index = key[space + 1:] if space != -1 else ""
            section = IniSection.lookup(_span_excluding(key, " "))
            if wanted is not None and (section is None or int(section) != wanted):
                mode = _SKIP
            elif section is None:
                if log is not None:
                    log.add(LogLevel.WARNING, f"Unknown section {line} in {source}")
                mode = _SKIP
            elif section is IniSection.SETTINGS:
                mode = _SETTINGS
            else:
                target = data.tags.target(section, index)
                mode = target if target is not None else _SKIP
            continue
        if mode is _SKIP:
            continue
        body = _span_excluding(line, "/").strip()
        if not body:
            continue
        if mode is _SETTINGS:
            name, value = _setting_pair(body)
            if only and name != only:
                continue
            data.settings.apply(name, value)
        else:
            mode.append(body)  # type: ignore[union-attr]
    return data


def parse_ini(
    lines: Iterable[str],
    part: int | None = None,
    only: str | None = None,
    log: AxisLog | None = None,
) -> IniData:
    """Parse INI lines.

    ``part`` limits reading to one :class:`IniSection` (None or -1 reads all);
    ``only`` limits the settings section to the one setting of that name.
    Unknown sections are reported to ``log`` and skipped.
    """
    return _parse(lines, part, only, log, "<ini>")


def load_ini(
    path: str | os.PathLike[str],
    part: int | None = None,
    only: str | None = None,
    log: AxisLog | None = None,
) -> IniData:
    """Read and parse an INI file; a file that cannot be opened is logged and raised."""
    try:
        with open(path, encoding="latin-1") as handle:
            lines = handle.readlines()
    except OSError:
        if log is not None:
            log.add(LogLevel.WARNING, f"Unable to open {os.fspath(path)}")
        raise
    return _parse(lines, part, only, log, os.fspath(path))