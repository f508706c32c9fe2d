# axiskit

Helpers for administering an Ultima Online shard: a small file-backed
settings store, readers for the client's data files, a loader for the
`Axis2.ini` configuration, an activity log, checks for travel
destinations and builders for the account commands sent to the server.

The package has no dependencies outside the standard library.

## Install

    pip install axiskit

For running the tests:

    pip install "axiskit[test]"
    pytest

## Modules

### `axiskit.axislog`

- `LogLevel` – `STATUS`, `WARNING`, `ERROR`, `DEBUG`. `LogLevel.coerce`
  maps any integer to a level; unknown numbers become `DEBUG`.
- `LogEntry` – a frozen record of `time` (`HH:MM:SS`), `kind` (the level
  label, such as `Status`) and `message`; `format()` gives
  `HH:MM:SS (Status): message`.
- `AxisLog(path="Axis.log")` – `add(level, message)` appends the formatted
  line to the file, calls every callable in `listeners` with the entry and
  keeps it in `entries`. It returns the entry, or `None` when the file
  cannot be opened (the entry is then not recorded). With `path=None`
  nothing is written to disk. `close()` closes the file, `clear()` closes
  and deletes it. `AxisLog` is a context manager that closes on exit.

### `axiskit.commands`

- `priv_set_command(prefix, level)` → `"<prefix>privset <level>"`
- `resdisp_command(prefix, resdisp)` → `"<prefix>set account.resdisp <resdisp>"`
- `set_tag_command(prefix, tag, value)` → `"<prefix>et account.<tag> <value>"`
  (the prefix is expected to end in the letter `s` of `set`, e.g. `".s"`)
- `get_tag_command(prefix, tag)` → `"<prefix>get account.<tag>"`
- `AccountCommands(prefix, send=None)` – `set_priv_level`, `set_resdisp`,
  `set_tag` and `get_tag` build the same commands, pass them to `send` if
  it is set, and return the command text.

### `axiskit.registry`

- `SettingsStore(path=None, log=None)` – values grouped under
  backslash-separated keys (default key `Software\Axis2`), matched
  case-insensitively. Three kinds, listed in `ValueKind`: `DWORD`
  (32-bit unsigned), `SZ` (string) and `MULTI_SZ` (list of strings).
  - `get_dword`, `get_string` return the stored value, or the default when
    the value is missing or of another kind (the latter is logged as a
    warning to `log`).
  - `get_multi_sz` returns a list, empty when missing.
  - `put_dword`, `put_string`, `put_multi_sz` store a value and save.
  - `delete_key` removes a key unless it has subkeys; `delete_value`
    removes one value.
  - `save()` writes the store as JSON to `path`; with no path the store
    lives in memory only. A file that cannot be parsed raises
    `RegistryError` when the store is opened.
- `encode_multi_sz(strings)` / `decode_multi_sz(data)` – the
  NUL-terminated block form of a string list.

### `axiskit.mulfiles`

- `parse_body_def(lines)` / `load_body_def(path)` – `value {id, ...}` lines
  into `DefEntry(value, target)`. A missing file gives an empty list.
- `parse_body_convert(lines)` / `load_body_convert(path)` – body conversion
  lines into `DefEntry(value, target, multiplier)`: the first column that
  is not `-1` gives the target and its file set (counted from 2); with none
  the body maps to itself in set 1. Lines starting with 0 are skipped.
- `load_hues(path)` – every `HueGroup` (a header and eight hues of 32
  colours, table start/end and name) from a hues file.
- `load_sounds(index_path, sound_path)` – used slots of a sound index as
  `SoundEntry`, named from the first bytes of each sound in the sound file
  (empty names if that file cannot be opened).
- `parse_music_list(lines, list_path)` / `load_music(path)` – music list
  lines `number name.mp3[,loop]` into `MusicEntry(index, name, path)`, the
  index being the number plus one.

`load_hues`, `load_sounds` (for the index file) and `load_music` raise
`OSError` when their file cannot be read.

### `axiskit.inifile`

- `parse_ini(lines, part=None, only=None, log=None)` and
  `load_ini(path, part=None, only=None, log=None)` read `[SETTINGS]`,
  `[NPCTAG Stats|Resistences|Misc|Tags]` and `[ITEMTAG Props|Tags]`
  sections into `IniData`, which holds `AxisSettings` and `TagLists`.
  `part` restricts reading to one `IniSection`; `only` restricts the
  settings section to one setting name. Text after `/` is dropped. Unknown
  sections are logged as warnings and skipped. `load_ini` logs and
  re-raises `OSError` when the file cannot be opened.
- `AxisSettings.apply(name, value)` sets a setting from its INI name
  (`AllowMultiple`, `CommandPrefix`, `RegInstallation`, ...) and returns
  `False` for unknown names.

### `axiskit.destination`

- `validate_destination(category, subsection, description, x, y, z, plane)`
  returns a `Destination` with integer coordinates or raises
  `DestinationError` (with `code` and `field`) at the first problem:
  empty category, subsection or description; X or Y below 0; Z outside
  -128..128; map plane outside 0..255; or a coordinate holding anything
  but digits and `-`.
- `subsections_for(categories, category)` – the subsection list of a
  category in a mapping, empty if blank or unknown.

### `axiskit.window`

- `parse_position("x,y")` → `(x, y)`, or `None` unless both are non-zero.
- `format_position(left, top)` → `"left,top"`.
- `tray_tip(title, profile)` → `"title (profile)"`, cut to 127 characters.

## Example

    from axiskit.commands import AccountCommands

    sent = []
    account = AccountCommands(".", sent.append)
    account.set_priv_level(4)
    account.get_tag("email")
    print(sent)   # ['.privset 4', '.get account.email']

    from axiskit.axislog import AxisLog, LogLevel

    with AxisLog("axis.log") as log:
        log.add(LogLevel.STATUS, "Loading finished")

    from axiskit.registry import SettingsStore

    store = SettingsStore("settings.json")
    store.put_string("CommandPrefix", ".")
    print(store.get_string("CommandPrefix"))   # .

## What it does not do

axiskit is a library of building blocks. It has no window, tray icon or
command-line program, does not connect to a server (the command builders
only produce text for a sender you supply), does not launch the game
client, and does not read or write the Windows registry: `SettingsStore`
keeps its values in its own JSON file.