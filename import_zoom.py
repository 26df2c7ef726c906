#!/usr/bin/env python3
"""
Import Zoom Folders - core import logic
Scans ZOOMxxxx folders under a root, creates one track per recorder channel
and lays the takes out on the timeline one folder after another.

Everything host-specific goes through a host object (see reaper_host.ReaperHost
and preview_import.PreviewHost), so the same code runs inside REAPER and offline.
"""

import re
from dataclasses import dataclass, field

from zoom_scan import list_zoom_folders, prescan

# Load configuration
try:
    import config
    CONFIG = {
        "ext_section": config.EXT_SECTION,
        "ext_key": config.EXT_KEY,
        "persist_ext_state": config.PERSIST_EXT_STATE,
        "channels": config.CHANNELS,
        "undo_label": config.UNDO_LABEL,
        "clear_console": config.CLEAR_CONSOLE,
    }
except ImportError:
    # Default configuration
    CONFIG = {
        "ext_section": "ZOOM_IMPORT",
        "ext_key": "ROOT",
        "persist_ext_state": True,
        "channels": [
            {"name": "Tr1", "variants": ["tr1"]},
            {"name": "Tr2", "variants": ["tr2"]},
            {"name": "Tr3", "variants": ["tr3", "trlr"]},
            {"name": "Tr4", "variants": ["tr4"]},
            {"name": "Tr5", "variants": ["tr5"]},
            {"name": "Tr6", "variants": ["tr6"]},
        ],
        "undo_label": "Import Zoom folders",
        "clear_console": True,
    }


@dataclass
class Placement:
    folder: str
    channel: int
    path: str
    position: float
    length: float


@dataclass
class ImportResult:
    root: str
    folders: list
    tracks: dict
    placements: list = field(default_factory=list)


def select_root(host, pickers):
    """Ask the user for the root folder.

    The default comes from the remembered ExtState value, else the project path.
    Only the first available dialog picker is tried; if it is missing or
    cancelled the non-dialog pickers (text prompt) get a turn. Returns None on cancel.
    """
    default = host.get_ext_state(CONFIG["ext_section"], CONFIG["ext_key"])
    if not default:
        default = host.project_path()

    asked_dialog = False
    for picker in pickers:
        if picker.dialog and asked_dialog:
            continue
        if not picker.available():
            continue
        asked_dialog = asked_dialog or picker.dialog
        picked = picker.pick(default)
        if picked:
            picked = picked.replace("\\", "/")
            host.set_ext_state(CONFIG["ext_section"], CONFIG["ext_key"], picked,
                               CONFIG["persist_ext_state"])
            return picked
    return None


def ensure_track(host, name, index):
    """Reuse the track at index or insert one there, then name it."""
    track = host.get_track(index)
    if track is None:
        host.insert_track(index)
        track = host.get_track(index)
    host.set_track_name(track, name)
    return track


def provision_tracks(host, channels, active):
    """Give each active channel the next track slot, in channel order."""
    tracks = {}
    track_pos = 0
    for i, ch in enumerate(channels):
        if i in active:
            tracks[i] = ensure_track(host, ch["name"], track_pos)
            track_pos += 1
    return tracks


def take_name(filepath):
    """File name without directories or its last extension."""
    name = re.split(r"[/\\]", filepath)[-1]
    return re.sub(r"\.[^.]+$", "", name)


def insert_item(host, track, filepath, pos):
    """Place filepath on track at pos. Returns the source length, 0 if it didn't load."""
    src = host.load_source(filepath)
    if src is None:
        host.msg("Could not load / Didn't find: " + filepath)
        return 0.0
    src_len = host.source_length(src)
    item = host.add_item(track)
    host.set_item_position(item, pos)
    host.set_item_length(item, src_len)
    take = host.add_take(item, src)
    name = take_name(filepath)
    if name:
        host.set_take_name(take, name)
    host.update_item(item)
    return src_len


def place_items(host, folder_data, tracks, channels):
    """Lay out every folder's files, advancing by the longest item per folder."""
    placements = []
    pos = 0.0
    for entry in folder_data:
        max_len = 0.0
        for i in range(len(channels)):
            tr = tracks.get(i)
            f = entry.files.get(i)
            if tr is not None and f:
                length = insert_item(host, tr, f, pos)
                placements.append(Placement(entry.name, i, f, pos, length))
                max_len = max(max_len, length)
        pos += max_len
    return placements


def import_zoom_folders(host, pickers, channels=None):
    """Run the whole import as a single undo step. Returns an ImportResult or None."""
    if channels is None:
        channels = CONFIG["channels"]

    host.undo_begin()
    try:
        if CONFIG["clear_console"]:
            host.clear_console()

        root = select_root(host, pickers)
        if not root:
            return None

        folders = list_zoom_folders(root, host.list_dirs)
        if not folders:
            host.msg("No ZOOMxxxx folders found in " + root)
            return None
        host.msg(f">>> Found {len(folders)} ZOOM folders in {root}")

        # Pre-scan so tracks are only created for channels that have files
        folder_data, active = prescan(root, folders, channels, host.list_files)
        if not active:
            host.msg("No matching Tr1-6 files found in any ZOOM folder.")
            return None

        tracks = provision_tracks(host, channels, active)
        names = ", ".join(channels[i]["name"] for i in active)
        host.msg(f">>> Using {len(tracks)} tracks: {names}")

        placements = place_items(host, folder_data, tracks, channels)

        host.update_arrange()
        host.msg("Done. Imported " + str(len(folders)) + " folders.")
        return ImportResult(root, folders, tracks, placements)
    finally:
        host.undo_end(CONFIG["undo_label"])
