"""
Folder and file discovery for Zoom recorder cards.
Finds ZOOMxxxx take folders under a root and resolves one WAV per recorder channel.
"""

import os
import re
from dataclasses import dataclass, field

try:
    import config
    FOLDER_PATTERN = config.FOLDER_PATTERN
    FILE_EXT_PATTERN = config.FILE_EXT_PATTERN
except ImportError:
    FOLDER_PATTERN = r"^ZOOM[0-9]+\Z"
    FILE_EXT_PATTERN = r"[wav]+"

FOLDER_RE = re.compile(FOLDER_PATTERN)


@dataclass
class FolderEntry:
    """One ZOOMxxxx folder and the file resolved for each channel index."""
    name: str
    files: dict = field(default_factory=dict)


def enumerate_entries(enum_fn, path):
    """Yield entries from an index-based enumerator until it runs dry.

    REAPER's EnumerateFiles / EnumerateSubdirectories return an empty value
    once the index is past the last entry.
    """
    i = 0
    while True:
        entry = enum_fn(path, i)
        if not entry:
            break
        yield entry
        i += 1


def os_list_dirs(path):
    try:
        return [e.name for e in os.scandir(path) if e.is_dir()]
    except OSError:
        return []


def os_list_files(path):
    try:
        return [e.name for e in os.scandir(path) if e.is_file()]
    except OSError:
        return []


def list_zoom_folders(root, list_dirs=None):
    """Return the ZOOM<digits> subfolders of root, sorted ascending."""
    if list_dirs is None:
        list_dirs = os_list_dirs
    folders = [d for d in list_dirs(root) if FOLDER_RE.match(d)]
    folders.sort()
    return folders


def _variant_re(variant):
    return re.compile("_" + re.escape(variant.lower()) + r"\." + FILE_EXT_PATTERN + r"\Z")


def channel_file_matches(filename, variants):
    """True when filename ends in _<variant>.<wav-ish ext> for any variant (case-insensitive)."""
    lower = filename.lower()
    for v in variants:
        if _variant_re(v).search(lower):
            return True
    return False


def find_channel_file(root, folder, variants, list_files=None):
    """Return the path of the first matching file for a channel, or None."""
    if list_files is None:
        list_files = os_list_files
    path = root + "/" + folder
    found = [f for f in list_files(path) if channel_file_matches(f, variants)]
    if not found:
        return None
    found.sort()
    return path + "/" + found[0]


def prescan(root, folders, channels, list_files=None):
    """Resolve every channel in every folder.

    Returns (folder_data, active) where active lists the channel indices that
    have a file in at least one folder, in channel order.
    """
    folder_data = []
    active = set()
    for folder in folders:
        entry = FolderEntry(folder)
        for i, ch in enumerate(channels):
            f = find_channel_file(root, folder, ch["variants"], list_files)
            if f:
                entry.files[i] = f
                active.add(i)
        folder_data.append(entry)
    return folder_data, sorted(active)
