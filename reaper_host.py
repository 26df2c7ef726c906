"""
REAPER host adapter for Import Zoom Folders.
Wraps the ReaScript Python bridge (RPR_* functions) behind the small host
interface used by import_zoom, plus the folder pickers REAPER can offer.
"""

import re

from zoom_scan import enumerate_entries

try:
    import config
    DIALOG_TITLE = config.DIALOG_TITLE
    PROMPT_TITLE = config.PROMPT_TITLE
    PROMPT_CAPTION = config.PROMPT_CAPTION
except ImportError:
    DIALOG_TITLE = "Select Zoom root folder"
    PROMPT_TITLE = "Import Zoom folders"
    PROMPT_CAPTION = "Root folder (contains ZOOMxxxx)"

PATH_BUF_SIZE = 4096


def is_null(ptr):
    """True for None/empty and for bridge pointer strings like '(MediaTrack*)0x0000000000000000'."""
    if not ptr:
        return True
    m = re.search(r"0x([0-9A-Fa-f]+)", str(ptr))
    return m is not None and int(m.group(1), 16) == 0


def string_out(result):
    """Pull the last string out of a bridge return value.

    Functions with string out-parameters come back as tuples holding every
    argument; the out-buffer is the last string in them.
    """
    if isinstance(result, str):
        return result
    if isinstance(result, tuple):
        for item in reversed(result):
            if isinstance(item, str):
                return item
    return ""


def float_out(result):
    if isinstance(result, (int, float)) and not isinstance(result, bool):
        return float(result)
    if isinstance(result, tuple):
        for val in result:
            if isinstance(val, (int, float)) and not isinstance(val, bool):
                return float(val)
    return 0.0


class ReaperHost:
    """Host interface over the RPR_* namespace (e.g. the reaper_python module)."""

    def __init__(self, api):
        self.api = api

    def _fn(self, name):
        return getattr(self.api, "RPR_" + name)

    def has(self, name):
        return hasattr(self.api, "RPR_" + name)

    def call(self, name, *args):
        return self._fn(name)(*args)

    # Console
    def msg(self, text):
        self._fn("ShowConsoleMsg")(str(text) + "\n")

    def clear_console(self):
        self._fn("ClearConsole")()

    # Persisted preference
    def get_ext_state(self, section, key):
        return string_out(self._fn("GetExtState")(section, key))

    def set_ext_state(self, section, key, value, persist):
        self._fn("SetExtState")(section, key, value, persist)

    def project_path(self):
        return string_out(self._fn("GetProjectPath")("", PATH_BUF_SIZE))

    # File system
    def list_dirs(self, path):
        return list(enumerate_entries(self._fn("EnumerateSubdirectories"), path))

    def list_files(self, path):
        return list(enumerate_entries(self._fn("EnumerateFiles"), path))

    # Tracks
    def get_track(self, index):
        track = self._fn("GetTrack")(0, index)
        if is_null(track):
            return None
        return track

    def insert_track(self, index):
        self._fn("InsertTrackAtIndex")(index, True)
        self._fn("TrackList_AdjustWindows")(False)

    def set_track_name(self, track, name):
        self._fn("GetSetMediaTrackInfo_String")(track, "P_NAME", name, True)

    # Sources, items and takes
    def load_source(self, path):
        src = self._fn("PCM_Source_CreateFromFileEx")(path, False)
        if is_null(src):
            return None
        return src

    def source_length(self, src):
        return float_out(self._fn("GetMediaSourceLength")(src, False))

    def add_item(self, track):
        return self._fn("AddMediaItemToTrack")(track)

    def set_item_position(self, item, pos):
        self._fn("SetMediaItemInfo_Value")(item, "D_POSITION", pos)

    def set_item_length(self, item, length):
        self._fn("SetMediaItemInfo_Value")(item, "D_LENGTH", length)

    def add_take(self, item, src):
        take = self._fn("AddTakeToMediaItem")(item)
        self._fn("SetMediaItemTake_Source")(take, src)
        return take

    def set_take_name(self, take, name):
        self._fn("GetSetMediaItemTakeInfo_String")(take, "P_NAME", name, True)

    def update_item(self, item):
        self._fn("UpdateItemInProject")(item)

    def update_arrange(self):
        self._fn("UpdateArrange")()

    # Undo
    def undo_begin(self):
        self._fn("Undo_BeginBlock")()

    def undo_end(self, label):
        self._fn("Undo_EndBlock")(label, -1)


class JSDialogPicker:
    """Native folder browser from the js_ReaScriptAPI extension."""
    dialog = True

    def __init__(self, host):
        self.host = host

    def available(self):
        return self.host.has("JS_Dialog_BrowseForFolder")

    def pick(self, default):
        result = self.host.call("JS_Dialog_BrowseForFolder", DIALOG_TITLE, default or "", "", PATH_BUF_SIZE)
        if isinstance(result, tuple):
            # retval: 1 = folder chosen, 0 = cancelled, -1 = error
            if result[0] != 1:
                return None
            return string_out(result[1:]) or None
        return None


class SWSFolderPicker:
    """Folder browser from the SWS extension (Windows)."""
    dialog = True

    def __init__(self, host):
        self.host = host

    def available(self):
        return self.host.has("BR_Win32_SelectFolder")

    def pick(self, default):
        result = self.host.call("BR_Win32_SelectFolder", DIALOG_TITLE, default or "")
        if isinstance(result, tuple):
            if not result[0]:
                return None
            return string_out(result[1:]) or None
        return string_out(result) or None


class TextPromptPicker:
    """Single-line GetUserInputs prompt, prefilled with the default path."""
    dialog = False

    def __init__(self, host):
        self.host = host

    def available(self):
        return self.host.has("GetUserInputs")

    def pick(self, default):
        result = self.host.call("GetUserInputs", PROMPT_TITLE, 1, PROMPT_CAPTION, default or "", PATH_BUF_SIZE)
        if not isinstance(result, tuple) or not result[0]:
            return None
        # (retval, title, num_inputs, captions_csv, retvals_csv, retvals_csv_sz)
        if len(result) >= 5 and isinstance(result[4], str):
            return result[4] or None
        return string_out(result) or None


def reaper_pickers(host):
    """Pickers in preference order: dialogs first, text prompt last."""
    return [JSDialogPicker(host), SWSFolderPicker(host), TextPromptPicker(host)]
