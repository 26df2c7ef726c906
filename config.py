#!/usr/bin/env python3
"""
Configuration file for Import Zoom Folders
Modify these settings to customize how Zoom recorder takes are imported into REAPER.
"""

# Persisted preference (REAPER ExtState)
EXT_SECTION = "ZOOM_IMPORT"
EXT_KEY = "ROOT"
PERSIST_EXT_STATE = True      # Keep the last root folder across REAPER restarts

# Recorder channels, in track order. Tr3 is also written as "trlr" on some units.
CHANNELS = [
    {"name": "Tr1", "variants": ["tr1"]},
    {"name": "Tr2", "variants": ["tr2"]},
    {"name": "Tr3", "variants": ["tr3", "trlr"]},
    {"name": "Tr4", "variants": ["tr4"]},
    {"name": "Tr5", "variants": ["tr5"]},
    {"name": "Tr6", "variants": ["tr6"]},
]

# Name matching
FOLDER_PATTERN = r"^ZOOM[0-9]+\Z"  # Take folders written by the recorder, ASCII digits only
FILE_EXT_PATTERN = r"[wav]+"   # Any extension made of the letters w, a, v

# UI text
UNDO_LABEL = "Import Zoom folders"
DIALOG_TITLE = "Select Zoom root folder"
PROMPT_TITLE = "Import Zoom folders"
PROMPT_CAPTION = "Root folder (contains ZOOMxxxx)"

# Console
CLEAR_CONSOLE = True          # Clear the ReaScript console before each run

# Platform-specific settings
# REAPER resource folders the installer copies the scripts into
PLATFORM_PATHS = {
    "macos": {
        "script_locations": [
            "~/Library/Application Support/REAPER/Scripts",
        ]
    },
    "windows": {
        "script_locations": [
            "~/AppData/Roaming/REAPER/Scripts",
            "C:/Program Files/REAPER (x64)/Scripts",
        ]
    },
    "linux": {
        "script_locations": [
            "~/.config/REAPER/Scripts",
        ]
    }
}
