"""Readers for the client data files: body definitions, hues, sounds and music."""

from __future__ import annotations

import os
import re
import struct
from contextlib import ExitStack
from dataclasses import dataclass
from itertools import takewhile
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, NamedTuple

_WORD_MASK = 0xFFFF
_NO_SOUND = 0xFFFFFFFF
_SOUND_NAME_SIZE = 32
_HUE_NAME_SIZE = 20
_TEXT_ENCODING = "latin-1"

_HUE_HEADER = struct.Struct("<I")
_HUE_ENTRY = struct.Struct(f"<32HHH{_HUE_NAME_SIZE}s")
_HUES_PER_GROUP = 8
HUE_GROUP_SIZE = _HUE_HEADER.size + _HUES_PER_GROUP * _HUE_ENTRY.size

_SOUND_INDEX = struct.Struct("<III")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Leading decimal integer of ``text``, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _span_excluding(text: str, chars: str) -> str:
    """Prefix of ``text`` before the first character found in ``chars``."""
    return "".join(takewhile(lambda ch: ch not in chars, text))


def _clean(line: str) -> str:
    return _span_excluding(line, "#").strip()


def _read_lines(path: str | os.PathLike[str]) -> list[str]:
    with open(path, encoding=_TEXT_ENCODING) as handle:
        return [line.rstrip("\r\n") for line in handle]


def _c_string(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode(_TEXT_ENCODING)


def _chunks(data: bytes, size: int) -> Iterator[bytes]:
    """Fixed-size records; a short final record is padded with zero bytes."""
    for start in range(0, len(data), size):
        yield data[start:start + size].ljust(size, b"\0")


@dataclass(frozen=True)
class DefEntry:
    """A body mapping: ``value`` is shown as body ``target`` from file set ``multiplier``."""

    value: int
    target: int
    multiplier: int = 0


@dataclass(frozen=True)
class SoundEntry:
    """One used slot of the sound index with the name stored in the sound file."""

    index: int
    start: int
    length: int
    extra: int
    name: str = ""


@dataclass(frozen=True)
class MusicEntry:
    """One track of the music list."""

    index: int
    name: str
    path: str


@dataclass(frozen=True)
class HueGroup:
    """A block of eight hues as stored in the hues file."""

    class Entry(NamedTuple):
        colors: tuple[int, ...]
        table_start: int
        table_end: int
        name: str

    header: int
    hues: tuple["HueGroup.Entry", ...]

    @classmethod
    def from_bytes(cls, record: bytes) -> "HueGroup":
        (header,) = _HUE_HEADER.unpack_from(record, 0)
        hues = []
        for slot in range(_HUES_PER_GROUP):
            fields = _HUE_ENTRY.unpack_from(record, _HUE_HEADER.size + slot * _HUE_ENTRY.size)
            hues.append(
                cls.Entry(
                    colors=tuple(fields[:32]),
                    table_start=fields[32],
                    table_end=fields[33],
                    name=_c_string(fields[34]),
                )
            )
        return cls(header=header, hues=tuple(hues))


def parse_body_def(lines: Iterable[str]) -> list[DefEntry]:
    """Parse body definition lines of the form ``value {id, ...} hue``."""
    entries = []
    for raw in lines:
        line = _clean(raw)
        if not line:
            continue
        value = _atoi(_span_excluding(line, " \t"))
        brace = line.find("{")
        target_text = line[brace + 1:] if brace != -1 else line
        target = _atoi(_span_excluding(target_text, "}"))
        entries.append(DefEntry(value & _WORD_MASK, target & _WORD_MASK))
    return entries


def load_body_def(path: str | os.PathLike[str]) -> list[DefEntry]:
    """Read a body definition file; a file that cannot be opened gives no entries."""
    try:
        lines = _read_lines(path)
    except OSError:
        return []
    return parse_body_def(lines)


def parse_body_convert(lines: Iterable[str]) -> list[DefEntry]:
    """Parse body conversion lines: a body followed by one column per file set.

    The first column that is not ``-1`` gives the target body and the file set
    (counted from 2). With no such column the body maps to itself in set 1.
    Lines whose first number is 0 are skipped.
    """
    entries = []
    for raw in lines:
        line = _clean(raw)
        if not line:
            continue
        first = _span_excluding(line, " \t")
        value = _atoi(first)
        if value == 0:
            continue
        value &= _WORD_MASK
        position = len(first) + 1
        multiplier = 2
        while True:
            column = _span_excluding(line[position:], " \t")
            position += len(column) + 1
            if not column:
                entry = DefEntry(value, value, 1)
                break
            if column != "-1":
                entry = DefEntry(value, _atoi(column) & _WORD_MASK, multiplier)
                break
            multiplier += 1
        entries.append(entry)
    return entries


def load_body_convert(path: str | os.PathLike[str]) -> list[DefEntry]:
    """Read a body conversion file; a file that cannot be opened gives no entries."""
    try:
        lines = _read_lines(path)
    except OSError:
        return []
    return parse_body_convert(lines)


def load_hues(path: str | os.PathLike[str]) -> list[HueGroup]:
    """Read every hue group from a hues file."""
    data = Path(path).read_bytes()
    return [HueGroup.from_bytes(record) for record in _chunks(data, HUE_GROUP_SIZE)]


def _sound_name(handle: BinaryIO | None, start: int) -> str:
    if handle is None:
        return ""
    handle.seek(start)
    raw = handle.read(_SOUND_NAME_SIZE).ljust(_SOUND_NAME_SIZE, b"\0")
    name = _c_string(raw[:_SOUND_NAME_SIZE - 1])
    return _span_excluding(name, ".")


def load_sounds(
    index_path: str | os.PathLike[str], sound_path: str | os.PathLike[str]
) -> list[SoundEntry]:
    """Read the used slots of a sound index, naming each from the sound file.

    Slots whose length is 0xFFFFFFFF are unused and left out. If the sound file
    cannot be opened the entries are kept with empty names.
    """
    data = Path(index_path).read_bytes()
    sounds = []
    with ExitStack() as stack:
        try:
            handle: BinaryIO | None = stack.enter_context(open(sound_path, "rb"))
        except OSError:
            handle = None
        for index, record in enumerate(_chunks(data, _SOUND_INDEX.size)):
            start, length, extra = _SOUND_INDEX.unpack(record)
            if length == _NO_SOUND:
                continue
            sounds.append(SoundEntry(index, start, length, extra, _sound_name(handle, start)))
    return sounds


def parse_music_list(lines: Iterable[str], list_path: str) -> list[MusicEntry]:
    """Parse music list lines ``number name.mp3[,loop]`` next to ``list_path``."""
    cut = list_path.rfind("\\")
    directory = list_path[:cut + 1] if cut != -1 else ""
    tracks = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        space = line.find(" ")
        title = _span_excluding(line[space + 1:] if space != -1 else line, ".,")
        index = (_atoi(_span_excluding(line, " ")) + 1) & _WORD_MASK
        tracks.append(MusicEntry(index, title, f"{directory}\\{title}.mp3"))
    return tracks


def load_music(path: str | os.PathLike[str]) -> list[MusicEntry]:
    """Read a music list file."""
    return parse_music_list(_read_lines(path), os.fspath(path))