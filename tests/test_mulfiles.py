import struct

import pytest

from axiskit.mulfiles import (
    HUE_GROUP_SIZE,
    DefEntry,
    HueGroup,
    MusicEntry,
    load_body_convert,
    load_body_def,
    load_hues,
    load_music,
    load_sounds,
    parse_body_convert,
    parse_body_def,
    parse_music_list,
)


def _hue_group_bytes(header, names):
    data = struct.pack("<I", header)
    for slot, name in enumerate(names):
        colors = [slot * 32 + i for i in range(32)]
        data += struct.pack("<32HHH20s", *colors, slot, slot + 100, name.encode())
    return data


def test_parse_body_def_reads_value_and_braced_id():
    entries = parse_body_def(["# header", "", "400 {401, 402} 0  # comment", "   "])
    assert entries == [DefEntry(400, 401)]


def test_parse_body_def_without_brace_uses_whole_line():
    entries = parse_body_def(["12 34"])
    assert entries[0].value == 12
    assert entries[0].target == 12


def test_load_body_def_missing_file_is_empty(tmp_path):
    assert load_body_def(tmp_path / "missing.def") == []


def test_load_body_def_from_file(tmp_path):
    path = tmp_path / "Body.def"
    path.write_text("400 {401} 0\n401 {402} 0\n")
    assert [entry.target for entry in load_body_def(path)] == [401, 402]


def test_parse_body_convert_first_column():
    entries = parse_body_convert(["400 123 -1"])
    assert entries == [DefEntry(400, 123, 2)]


def test_parse_body_convert_skips_minus_one_columns():
    (entry,) = parse_body_convert(["400 -1 77"])
    assert entry.target == 77
    assert entry.multiplier == 3


def test_parse_body_convert_no_target_maps_to_itself():
    (entry,) = parse_body_convert(["500"])
    assert entry.target == entry.value == 500
    assert entry.multiplier == 1


def test_parse_body_convert_skips_zero_and_comments():
    assert parse_body_convert(["0 5", "# 10 20", "abc 3"]) == []


def test_load_body_convert_missing_file_is_empty(tmp_path):
    assert load_body_convert(tmp_path / "nope.def") == []


def test_load_hues_round_trip(tmp_path):
    names = [f"hue{i}" for i in range(8)]
    path = tmp_path / "hues.mul"
    path.write_bytes(_hue_group_bytes(7, names) + _hue_group_bytes(9, names))
    groups = load_hues(path)
    assert [group.header for group in groups] == [7, 9]
    assert [hue.name for hue in groups[0].hues] == names
    assert groups[1].hues[3].colors == tuple(3 * 32 + i for i in range(32))
    assert groups[1].hues[3].table_start == 3
    assert groups[1].hues[3].table_end == 103


def test_load_hues_pads_partial_group(tmp_path):
    path = tmp_path / "hues.mul"
    path.write_bytes(_hue_group_bytes(1, ["a"] * 8) + struct.pack("<H", 5))
    groups = load_hues(path)
    assert len(groups) == 2
    assert groups[1].header == 5
    assert all(hue.colors == (0,) * 32 and hue.name == "" for hue in groups[1].hues)


def test_hue_group_size_matches_record():
    record = _hue_group_bytes(2, ["x"] * 8)
    assert len(record) == HUE_GROUP_SIZE
    assert isinstance(HueGroup.from_bytes(record).hues[0], HueGroup.Entry)


def test_load_hues_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_hues(tmp_path / "hues.mul")


def _write_sounds(tmp_path):
    sound = b"\0" * 8 + b"door.wav".ljust(40, b"\0") + b"bell".ljust(32, b"\0")
    index = (
        struct.pack("<III", 8, 40, 0)
        + struct.pack("<III", 0, 0xFFFFFFFF, 0)
        + struct.pack("<III", 48, 32, 6)
    )
    index_path = tmp_path / "soundidx.mul"
    sound_path = tmp_path / "sound.mul"
    index_path.write_bytes(index)
    sound_path.write_bytes(sound)
    return index_path, sound_path


def test_load_sounds_names_and_skips_unused(tmp_path):
    index_path, sound_path = _write_sounds(tmp_path)
    sounds = load_sounds(index_path, sound_path)
    assert [sound.name for sound in sounds] == ["door", "bell"]
    assert [sound.index for sound in sounds] == [0, 2]
    assert sounds[1].start == 48
    assert sounds[1].extra == 6


def test_load_sounds_without_sound_file_keeps_entries(tmp_path):
    index_path, _ = _write_sounds(tmp_path)
    sounds = load_sounds(index_path, tmp_path / "absent.mul")
    assert [sound.name for sound in sounds] == ["", ""]
    assert [sound.length for sound in sounds] == [40, 32]


def test_load_sounds_missing_index_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sounds(tmp_path / "soundidx.mul", tmp_path / "sound.mul")


def test_parse_music_list_builds_name_index_and_path():
    list_path = "C:\\UO\\Music\\Digital\\Config.txt"
    tracks = parse_music_list(["0 oldult01.mp3,loop", "5 stones2.mp3"], list_path)
    directory = "C:\\UO\\Music\\Digital\\"
    assert tracks[0] == MusicEntry(1, "oldult01", directory + "\\oldult01.mp3")
    assert tracks[1].name == "stones2"
    assert tracks[1].path.endswith("stones2.mp3")


def test_parse_music_list_index_increments_file_number():
    tracks = parse_music_list(["10 a.mp3", "11 b.mp3"], "Config.txt")
    assert tracks[1].index - tracks[0].index == 1
    assert [track.path for track in tracks] == ["\\a.mp3", "\\b.mp3"]


def test_load_music_reads_file(tmp_path):
    path = tmp_path / "Config.txt"
    path.write_text("0 first.mp3,loop\n1 second.mp3\n")
    tracks = load_music(path)
    assert [track.name for track in tracks] == ["first", "second"]


def test_load_music_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_music(tmp_path / "Config.txt")