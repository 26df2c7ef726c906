#!/usr/bin/env python3
"""
Offline preview of a Zoom import.
Runs the same import logic against an in-memory project, measuring files with
pydub instead of REAPER, and prints the resulting track/item layout.
"""

import json
import os
import sys

from audio_length import get_audio_length
from import_zoom import import_zoom_folders
from zoom_scan import os_list_dirs, os_list_files


class PreviewHost:
    """In-memory stand-in for a REAPER project."""

    def __init__(self, loader=None, project_dir=None):
        self.loader = loader or get_audio_length
        self.project_dir = project_dir or os.getcwd()
        self.tracks = []
        self.ext_state = {}
        self.log = []
        self.undo_points = []
        self._undo_depth = 0

    def msg(self, text):
        self.log.append(str(text))
        print(text)

    def clear_console(self):
        self.log = []

    def get_ext_state(self, section, key):
        return self.ext_state.get((section, key), "")

    def set_ext_state(self, section, key, value, persist):
        self.ext_state[(section, key)] = value

    def project_path(self):
        return self.project_dir

    def list_dirs(self, path):
        return os_list_dirs(path)

    def list_files(self, path):
        return os_list_files(path)

    def get_track(self, index):
        if 0 <= index < len(self.tracks):
            return self.tracks[index]
        return None

    def insert_track(self, index):
        self.tracks.insert(index, {"name": "", "items": []})

    def set_track_name(self, track, name):
        track["name"] = name

    def load_source(self, path):
        length = self.loader(path)
        if length is None:
            return None
        return {"path": path, "length": length}

    def source_length(self, src):
        return src["length"]

    def add_item(self, track):
        item = {"position": 0.0, "length": 0.0, "source": None, "take": ""}
        track["items"].append(item)
        return item

    def set_item_position(self, item, pos):
        item["position"] = pos

    def set_item_length(self, item, length):
        item["length"] = length

    def add_take(self, item, src):
        item["source"] = src["path"]
        return item

    def set_take_name(self, take, name):
        take["take"] = name

    def update_item(self, item):
        pass

    def update_arrange(self):
        pass

    def undo_begin(self):
        self._undo_depth += 1

    def undo_end(self, label):
        self._undo_depth -= 1
        self.undo_points.append(label)

    def layout(self):
        """Tracks and their items as plain data."""
        return [
            {"track": i, "name": t["name"], "items": [
                {"take": it["take"], "source": it["source"],
                 "position": it["position"], "length": it["length"]}
                for it in t["items"]
            ]}
            for i, t in enumerate(self.tracks)
        ]


class FixedPathPicker:
    """Picker that answers with a path given up front (command line)."""
    dialog = False

    def __init__(self, path):
        self.path = path

    def available(self):
        return True

    def pick(self, default):
        return self.path


def preview(root, out_json=None, loader=None):
    host = PreviewHost(loader=loader)
    result = import_zoom_folders(host, [FixedPathPicker(root)])
    if result is None:
        return None

    for t in host.layout():
        print(f">>> Track {t['track'] + 1}: {t['name']} ({len(t['items'])} items)")
    for p in result.placements:
        print(f">>>   {p.folder} {os.path.basename(p.path)} @ {p.position:.3f}s len {p.length:.3f}s")

    if out_json:
        try:
            with open(out_json, "w") as f:
                json.dump(host.layout(), f, indent=2)
            print(f">>> Layout written to {out_json}")
        except OSError as e:
            print(f"ERROR: Could not write {out_json}: {e}")
    return host

if __name__ == "__main__":
    # Usage: python3 preview_import.py <root> [out_json]
    if len(sys.argv) < 2:
        print("Usage: python3 preview_import.py <root> [out_json]")
        sys.exit(1)
    out_json = sys.argv[2] if len(sys.argv) > 2 else None
    preview(sys.argv[1], out_json)
