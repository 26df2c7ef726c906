#!/usr/bin/env python3
"""
Import Zoom Folders (Tr1-6) - REAPER ReaScript
Scans ZOOMxxxx folders and places the Tr1-6 WAVs on tracks, one folder after another.

Usage: Actions > Show action list > ReaScript: Load..., pick this file and run it.
Choose the root folder that contains the ZOOMxxxx subfolders (e.g. .../SONIDO/MULTI/FOLDER01).
Items from one ZOOM folder share a start time; folders are laid out sequentially.
"""

import os
import sys

# Make the helper modules next to this script importable
def find_script_dir(file=None):
    """Directory of this script, from __file__, else argv[0], else the cwd."""
    if file:
        return os.path.dirname(os.path.abspath(file))
    # Embedded interpreters may not define sys.argv at all
    argv = getattr(sys, "argv", None)
    return os.path.dirname(os.path.abspath(argv[0])) if argv and argv[0] else os.getcwd()

try:
    script_dir = find_script_dir(__file__)
except NameError:
    # __file__ not available when REAPER execs the script
    script_dir = find_script_dir()

possible_paths = [
    script_dir,
    os.path.join(script_dir, "ZoomImport"),
    os.getcwd()
]

for path in possible_paths:
    if os.path.exists(os.path.join(path, "import_zoom.py")):
        if path not in sys.path:
            sys.path.insert(0, path)
        break
else:
    print("ERROR: Could not find import_zoom.py in any of these locations:")
    for path in possible_paths:
        print(f"  - {path}")
    sys.exit(1)

from import_zoom import import_zoom_folders
from reaper_host import ReaperHost, reaper_pickers


def load_reaper_api():
    """Return the ReaScript bridge module."""
    try:
        import reaper_python
    except ImportError as e:
        raise RuntimeError(f"REAPER API not available (run this from REAPER's action list): {e}")
    return reaper_python


def main():
    """Main function."""
    try:
        api = load_reaper_api()
    except RuntimeError as e:
        print(f"ERROR: {e}")
        return

    host = ReaperHost(api)
    try:
        import_zoom_folders(host, reaper_pickers(host))
    except Exception as e:
        host.msg(f"ERROR: Import failed: {e}")


if __name__ == "__main__":
    main()
