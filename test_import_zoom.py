#!/usr/bin/env python3
"""
Tests for the import run: root selection, track provisioning and item layout.
Uses the in-memory PreviewHost with a fake length loader, so no REAPER or audio files are needed.
Runs under pytest, or directly: python test_import_zoom.py
"""

import json
import os
import sys
import tempfile

from import_zoom import (
    CONFIG,
    import_zoom_folders,
    insert_item,
    provision_tracks,
    select_root,
    take_name,
)
from preview_import import FixedPathPicker, PreviewHost, preview

SECTION = CONFIG["ext_section"]
KEY = CONFIG["ext_key"]


class FakePicker:
    def __init__(self, answer, dialog=True, available=True):
        self.answer = answer
        self.dialog = dialog
        self._available = available
        self.asked_with = None

    def available(self):
        return self._available

    def pick(self, default):
        self.asked_with = default
        return self.answer


def make_card(root, layout):
    """layout: {folder: [filename, ...]} -> empty files on disk."""
    for folder, names in layout.items():
        os.makedirs(os.path.join(root, folder), exist_ok=True)
        for name in names:
            with open(os.path.join(root, folder, name), "w"):
                pass


def length_loader(lengths):
    """Loader returning lengths by file name; unknown names fail to load."""
    return lambda path: lengths.get(os.path.basename(path))


def test_select_root_prefers_first_available_dialog():
    host = PreviewHost(project_dir="/projects/song")
    missing = FakePicker("/ignored", available=False)
    js = FakePicker("C:\\Cards\\FOLDER01")
    sws = FakePicker("/other")
    prompt = FakePicker("/typed", dialog=False)

    assert select_root(host, [missing, js, sws, prompt]) == "C:/Cards/FOLDER01"
    assert js.asked_with == "/projects/song"
    assert sws.asked_with is None
    assert prompt.asked_with is None
    assert host.get_ext_state(SECTION, KEY) == "C:/Cards/FOLDER01"


def test_select_root_falls_back_to_prompt_after_cancelled_dialog():
    host = PreviewHost()
    host.set_ext_state(SECTION, KEY, "/last/card", True)
    js = FakePicker(None)
    sws = FakePicker("/never")
    prompt = FakePicker("/typed/card", dialog=False)

    assert select_root(host, [js, sws, prompt]) == "/typed/card"
    assert js.asked_with == "/last/card"
    assert sws.asked_with is None
    assert prompt.asked_with == "/last/card"


def test_select_root_cancel_leaves_preference_alone():
    host = PreviewHost()
    host.set_ext_state(SECTION, KEY, "/last/card", True)
    assert select_root(host, [FakePicker(""), FakePicker("", dialog=False)]) is None
    assert host.get_ext_state(SECTION, KEY) == "/last/card"


def test_take_name_strips_directory_and_extension():
    assert take_name("/r/ZOOM0001/ZOOM0001_Tr1.WAV") == "ZOOM0001_Tr1"
    assert take_name("C:\\r\\ZOOM0001\\a.b_tr1.wav") == "a.b_tr1"
    assert take_name("/r/.wav") == ""


def test_provision_tracks_compacts_slots():
    host = PreviewHost()
    channels = CONFIG["channels"]
    tracks = provision_tracks(host, channels, [1, 4])

    assert list(tracks) == [1, 4]
    assert [t["name"] for t in host.tracks] == ["Tr2", "Tr5"]
    assert tracks[1] is host.tracks[0]
    assert tracks[4] is host.tracks[1]


def test_provision_tracks_reuses_existing():
    host = PreviewHost()
    host.tracks = [{"name": "Old A", "items": []}]
    tracks = provision_tracks(host, CONFIG["channels"], [0, 2])

    assert len(host.tracks) == 2
    assert tracks[0] is host.tracks[0]
    assert [t["name"] for t in host.tracks] == ["Tr1", "Tr3"]


def test_insert_item_failed_load_warns():
    host = PreviewHost(loader=lambda path: None)
    track = {"name": "Tr1", "items": []}
    assert insert_item(host, track, "/r/ZOOM0001/x_tr1.wav", 3.0) == 0.0
    assert track["items"] == []
    assert host.log[-1] == "Could not load / Didn't find: /r/ZOOM0001/x_tr1.wav"


def test_import_lays_out_folders_sequentially():
    with tempfile.TemporaryDirectory() as root:
        make_card(root, {
            "ZOOM0001": ["ZOOM0001_Tr1.WAV", "ZOOM0001_Tr2.WAV"],
            "ZOOM0002": ["ZOOM0002_Tr1.WAV"],
        })
        host = PreviewHost(loader=length_loader({
            "ZOOM0001_Tr1.WAV": 10.0,
            "ZOOM0001_Tr2.WAV": 12.0,
            "ZOOM0002_Tr1.WAV": 5.0,
        }))
        result = import_zoom_folders(host, [FixedPathPicker(root)])

        assert result.folders == ["ZOOM0001", "ZOOM0002"]
        got = [(p.folder, p.channel, p.position, p.length) for p in result.placements]
        assert got == [
            ("ZOOM0001", 0, 0.0, 10.0),
            ("ZOOM0001", 1, 0.0, 12.0),
            ("ZOOM0002", 0, 12.0, 5.0),
        ]
        tr1, tr2 = host.tracks
        assert tr1["name"] == "Tr1" and tr2["name"] == "Tr2"
        assert [(i["take"], i["position"], i["length"]) for i in tr1["items"]] == [
            ("ZOOM0001_Tr1", 0.0, 10.0),
            ("ZOOM0002_Tr1", 12.0, 5.0),
        ]
        assert host.log[-1] == "Done. Imported 2 folders."
        assert host.undo_points == [CONFIG["undo_label"]]


def test_failed_load_counts_as_zero_and_run_continues():
    with tempfile.TemporaryDirectory() as root:
        make_card(root, {
            "ZOOM0001": ["ZOOM0001_Tr1.WAV", "ZOOM0001_Tr2.WAV"],
            "ZOOM0002": ["ZOOM0002_Tr1.WAV", "ZOOM0002_Tr2.WAV"],
            "ZOOM0003": ["ZOOM0003_Tr1.WAV"],
        })
        host = PreviewHost(loader=length_loader({
            "ZOOM0001_Tr2.WAV": 7.0,
            "ZOOM0002_Tr2.WAV": 4.0,
            "ZOOM0003_Tr1.WAV": 2.0,
        }))
        result = import_zoom_folders(host, [FixedPathPicker(root)])

        positions = {(p.folder, p.channel): (p.position, p.length) for p in result.placements}
        assert positions[("ZOOM0001", 0)] == (0.0, 0.0)
        assert positions[("ZOOM0001", 1)] == (0.0, 7.0)
        assert positions[("ZOOM0002", 1)] == (7.0, 4.0)
        assert positions[("ZOOM0003", 0)] == (11.0, 2.0)
        warnings = [m for m in host.log if m.startswith("Could not load")]
        assert len(warnings) == 2
        assert len(host.tracks[0]["items"]) == 1


def test_only_active_channels_get_tracks():
    with tempfile.TemporaryDirectory() as root:
        make_card(root, {
            "ZOOM0001": ["ZOOM0001_Tr2.WAV"],
            "ZOOM0002": ["ZOOM0002_Tr5.WAV"],
        })
        host = PreviewHost(loader=lambda path: 1.0)
        result = import_zoom_folders(host, [FixedPathPicker(root)])

        assert [t["name"] for t in host.tracks] == ["Tr2", "Tr5"]
        assert list(result.tracks) == [1, 4]
        assert [(p.folder, p.position) for p in result.placements] == [("ZOOM0001", 0.0), ("ZOOM0002", 1.0)]


def test_rerun_reuses_tracks():
    with tempfile.TemporaryDirectory() as root:
        make_card(root, {"ZOOM0001": ["ZOOM0001_Tr1.WAV", "ZOOM0001_TrLR.WAV"]})
        host = PreviewHost(loader=lambda path: 3.0)

        import_zoom_folders(host, [FixedPathPicker(root)])
        import_zoom_folders(host, [FixedPathPicker(root)])

        assert [t["name"] for t in host.tracks] == ["Tr1", "Tr3"]
        assert len(host.tracks[0]["items"]) == 2
        assert host.tracks[1]["items"][0]["take"] == "ZOOM0001_TrLR"


def test_cancel_is_silent():
    host = PreviewHost()
    assert import_zoom_folders(host, [FakePicker(None, dialog=False)]) is None
    assert host.log == []
    assert host.tracks == []
    assert host.undo_points == [CONFIG["undo_label"]]


def test_no_folders_reports_and_changes_nothing():
    with tempfile.TemporaryDirectory() as root:
        os.mkdir(os.path.join(root, "DCIM"))
        host = PreviewHost()
        assert import_zoom_folders(host, [FixedPathPicker(root)]) is None
        assert host.log == ["No ZOOMxxxx folders found in " + root]
        assert host.tracks == []


def test_no_active_channels_creates_no_tracks():
    with tempfile.TemporaryDirectory() as root:
        make_card(root, {"ZOOM0001": ["ZOOM0001_Tr1.mp3", "notes.txt"]})
        host = PreviewHost(loader=lambda path: 1.0)
        assert import_zoom_folders(host, [FixedPathPicker(root)]) is None
        assert host.log[-1] == "No matching Tr1-6 files found in any ZOOM folder."
        assert host.tracks == []


def test_preview_writes_layout_json():
    with tempfile.TemporaryDirectory() as root:
        make_card(root, {"ZOOM0001": ["ZOOM0001_Tr1.WAV"]})
        out_json = os.path.join(root, "layout.json")
        host = preview(root, out_json, loader=lambda path: 2.5)

        with open(out_json) as f:
            data = json.load(f)
        assert data == host.layout()
        assert data[0]["name"] == "Tr1"
        assert data[0]["items"][0]["length"] == 2.5


def main():
    """Run all import tests."""
    tests = [v for k, v in sorted(globals().items()) if k.startswith("test_") and callable(v)]
    passed = 0
    for test in tests:
        try:
            test()
            print(f"✓ {test.__name__}")
            passed += 1
        except AssertionError as e:
            print(f"✗ {test.__name__}: {e}")
    print(f"\nImport tests: {passed}/{len(tests)} passed")
    return passed == len(tests)

if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
