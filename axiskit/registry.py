"""Persistent key/value settings store modelled on the Windows registry.

Keys are backslash-separated paths such as ``Software\\Axis2``. Each key holds
named values of one of three kinds: a 32-bit unsigned number, a string, or a
list of strings. Key paths and value names are matched case-insensitively.
The store is kept in a JSON file and written back after every change.
"""

from __future__ import annotations

import json
import os
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Iterable

from .axislog import AxisLog, LogLevel

REGKEY_AXIS = "Software\\Axis2"
REGKEY_OVERRIDEPATH = "Software\\Axis2\\OverridePath"

_DWORD_MASK = 0xFFFFFFFF
_ENCODING = "utf-8"


class RegistryError(Exception):
    """The settings file cannot be read as a settings store."""


class ValueKind(IntEnum):
    """Kind of a stored value, numbered as the registry numbers them."""

    SZ = 1
    DWORD = 4
    MULTI_SZ = 7


def encode_multi_sz(strings: Iterable[str]) -> bytes:
    """Join strings into a block where each one is ended by a NUL byte."""
    return b"".join(text.encode(_ENCODING) + b"\0" for text in strings)


def decode_multi_sz(data: bytes) -> list[str]:
    """Split a block of NUL-terminated strings back into a list."""
    if not data:
        return []
    parts = data.split(b"\0")
    if data.endswith(b"\0"):
        parts.pop()
    return [part.decode(_ENCODING, errors="replace") for part in parts]


def _normalize_key(key: str) -> str:
    return key.replace("/", "\\").strip("\\")


@dataclass
class _Value:
    name: str
    kind: ValueKind
    data: int | str | list[str]

    def raw(self) -> bytes:
        if self.kind is ValueKind.DWORD:
            return struct.pack("<I", int(self.data))
        if self.kind is ValueKind.SZ:
            return str(self.data).encode(_ENCODING)
        return encode_multi_sz(self.data)  # type: ignore[arg-type]


@dataclass
class _Key:
    name: str
    values: dict[str, _Value] = field(default_factory=dict)


class SettingsStore:
    """Named settings grouped under keys, saved to ``path`` when it is set.

    Problems reading or writing single values are reported to ``log`` as
    warnings and the caller gets its default back, as the registry helpers do.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        log: AxisLog | None = None,
    ):
        self.path = Path(path) if path is not None else None
        self.log = log
        self._keys: dict[str, _Key] = {}
        if self.path is not None and self.path.exists():
            self._load()

    # -- persistence -------------------------------------------------------

    def _load(self) -> None:
        assert self.path is not None
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
            keys = document["keys"]
            for key_name, values in keys.items():
                key = self._create_key(key_name)
                for value_name, entry in values.items():
                    kind = ValueKind[entry["kind"]]
                    data = entry["value"]
                    if kind is ValueKind.DWORD:
                        data = int(data) & _DWORD_MASK
                    elif kind is ValueKind.SZ:
                        data = str(data)
                    else:
                        data = [str(item) for item in data]
                    key.values[value_name.casefold()] = _Value(value_name, kind, data)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            raise RegistryError(f"cannot read settings file {self.path}: {exc}") from exc

    def save(self) -> None:
        """Write the store to its file; does nothing for an in-memory store."""
        if self.path is None:
            return
        document = {
            "keys": {
                key.name: {
                    value.name: {"kind": value.kind.name, "value": value.data}
                    for value in key.values.values()
                }
                for key in self._keys.values()
            }
        }
        try:
            self.path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as exc:
            self._warn(f"Unable to write settings file {self.path}: {exc}")

    # -- helpers -----------------------------------------------------------

    def _warn(self, message: str) -> None:
        if self.log is not None:
            self.log.add(LogLevel.WARNING, message)

    def _find_key(self, key: str) -> _Key | None:
        return self._keys.get(_normalize_key(key).casefold())

    def _create_key(self, key: str) -> _Key:
        name = _normalize_key(key)
        return self._keys.setdefault(name.casefold(), _Key(name))

    def _lookup(self, name: str, key: str) -> _Value | None:
        found = self._find_key(key)
        if found is None:
            return None
        return found.values.get(name.casefold())

    def _type_warning(self, name: str, actual: ValueKind, expected: ValueKind) -> None:
        self._warn(
            f"Registry value {name} has type {int(actual)}, expected {int(expected)}"
        )

    def _put(self, name: str, kind: ValueKind, data, key: str) -> None:
        target = self._create_key(key)
        target.values[name.casefold()] = _Value(name, kind, data)
        self.save()

    # -- reading -----------------------------------------------------------

    def get_dword(self, name: str, default: int = 0, key: str = REGKEY_AXIS) -> int:
        """Number stored under ``name``, or ``default`` if absent or not a number."""
        value = self._lookup(name, key)
        if value is None:
            return default
        if value.kind is not ValueKind.DWORD:
            self._type_warning(name, value.kind, ValueKind.DWORD)
            return default
        return int(value.data)

    def get_string(self, name: str, default: str = "", key: str = REGKEY_AXIS) -> str:
        """String stored under ``name``, or ``default`` if absent or not a string."""
        value = self._lookup(name, key)
        if value is None:
            return default
        if value.kind is not ValueKind.SZ:
            self._type_warning(name, value.kind, ValueKind.SZ)
            return default
        return str(value.data)

    def get_multi_sz(self, name: str, key: str = REGKEY_AXIS) -> list[str]:
        """List of strings stored under ``name``; empty if absent.

        A value of another kind is still split as a string block, with a warning.
        """
        value = self._lookup(name, key)
        if value is None:
            return []
        if value.kind is ValueKind.MULTI_SZ:
            return list(value.data)  # type: ignore[arg-type]
        strings = decode_multi_sz(value.raw())
        self._type_warning(name, value.kind, ValueKind.MULTI_SZ)
        return strings

    # -- writing -----------------------------------------------------------

    def put_dword(self, name: str, value: int, key: str = REGKEY_AXIS) -> None:
        """Store a number, reduced to 32 unsigned bits."""
        self._put(name, ValueKind.DWORD, int(value) & _DWORD_MASK, key)

    def put_string(self, name: str, value: str, key: str = REGKEY_AXIS) -> None:
        """Store a string."""
        self._put(name, ValueKind.SZ, str(value), key)

    def put_multi_sz(self, name: str, strings: Iterable[str], key: str = REGKEY_AXIS) -> None:
        """Store a list of strings."""
        self._put(name, ValueKind.MULTI_SZ, [str(text) for text in strings], key)

    # -- deleting ----------------------------------------------------------

    def delete_key(self, key: str) -> None:
        """Remove a key and its values; a key with subkeys is kept, with a warning."""
        found = self._find_key(key)
        if found is None:
            return
        prefix = found.name.casefold() + "\\"
        if any(other.startswith(prefix) for other in self._keys):
            self._warn(f"Unable to delete registry key {found.name}: key has subkeys")
            return
        del self._keys[found.name.casefold()]
        self.save()

    def delete_value(self, name: str, key: str = REGKEY_AXIS) -> None:
        """Remove one value; a missing key is reported, a missing value is not."""
        found = self._find_key(key)
        if found is None:
            self._warn(f"Unable to open registry key {_normalize_key(key)}")
            return
        if found.values.pop(name.casefold(), None) is not None:
            self.save()