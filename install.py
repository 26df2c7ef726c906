#!/usr/bin/env python3
"""
Install script for Import Zoom Folders
This script helps users install dependencies and copy the scripts into REAPER.
"""

import os
import sys
import platform
import subprocess
import shutil

try:
    import config
    PLATFORM_PATHS = config.PLATFORM_PATHS
except ImportError:
    PLATFORM_PATHS = {}

SCRIPT_SUBDIR = "ZoomImport"

FILES_TO_COPY = [
    "ImportZoomFolders.py",
    "import_zoom.py",
    "reaper_host.py",
    "zoom_scan.py",
    "audio_length.py",
    "preview_import.py",
    "config.py",
]

def get_platform_info():
    """Get platform-specific information."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    elif system == "windows":
        return "windows"
    elif system.startswith("linux"):
        return "linux"
    else:
        return "unknown"

def find_script_directory():
    """Find the REAPER Scripts directory."""
    platform_name = get_platform_info()
    script_paths = [os.path.expanduser(p) for p in
                    PLATFORM_PATHS.get(platform_name, {}).get("script_locations", [])]

    # Portable installs and custom resource paths
    if os.environ.get("REAPER_RESOURCE_PATH"):
        script_paths.insert(0, os.path.join(os.environ["REAPER_RESOURCE_PATH"], "Scripts"))

    for path in script_paths:
        if os.path.exists(path):
            return path

    # If directory doesn't exist, return the first expected path
    return script_paths[0] if script_paths else None

def install_dependencies():
    """Install Python dependencies."""
    print("Installing Python dependencies...")
    try:
        subprocess.check_call([sys.executable, "-m", "pip", "install", "-r", "requirements.txt"])
        print("✓ Dependencies installed successfully")
        return True
    except subprocess.CalledProcessError as e:
        print(f"✗ Failed to install dependencies: {e}")
        return False

def check_ffmpeg():
    """Check if ffmpeg is available."""
    try:
        subprocess.run(["ffmpeg", "-version"], capture_output=True, check=True)
        print("✓ ffmpeg is available")
        return True
    except (subprocess.CalledProcessError, FileNotFoundError):
        print("⚠ ffmpeg not found - the offline preview can still read plain WAV files")
        print("  To preview other formats, install ffmpeg:")
        print("  macOS: brew install ffmpeg")
        print("  Windows: Download from https://ffmpeg.org/download.html")
        print("  Linux: sudo apt install ffmpeg (Ubuntu/Debian)")
        return True  # REAPER itself does not need ffmpeg

def copy_scripts(script_dir):
    """Copy scripts to the REAPER Scripts/ZoomImport directory."""
    if not script_dir:
        print("✗ Could not determine script directory")
        return False

    dest_dir = os.path.join(script_dir, SCRIPT_SUBDIR)
    os.makedirs(dest_dir, exist_ok=True)

    success = True
    for filename in FILES_TO_COPY:
        if os.path.exists(filename):
            dest_path = os.path.join(dest_dir, filename)
            try:
                shutil.copy2(filename, dest_path)
                print(f"✓ Copied {filename} to {dest_path}")
            except OSError as e:
                print(f"✗ Failed to copy {filename}: {e}")
                success = False
        else:
            print(f"✗ {filename} not found in current directory")
            success = False

    return success

def main():
    """Main install function."""
    print("Import Zoom Folders Setup")
    print("=" * 30)

    # Check platform
    platform_name = get_platform_info()
    print(f"Platform: {platform_name}")

    # Install dependencies
    if not install_dependencies():
        print("Setup failed - could not install dependencies")
        return False

    # Check ffmpeg (optional)
    check_ffmpeg()

    # Find script directory
    script_dir = find_script_directory()
    if not script_dir:
        print("✗ Could not find the REAPER Scripts directory")
        print("Please manually copy the files to your REAPER Scripts directory")
        return False

    print(f"Script directory: {script_dir}")

    # Copy scripts
    if not copy_scripts(script_dir):
        print("Setup failed - could not copy scripts")
        return False

    print("\n✓ Setup completed successfully!")
    print("\nNext steps:")
    print("1. Open REAPER and enable Python in Options > Preferences > Plug-ins > ReaScript")
    print("2. Actions > Show action list > New action > Load ReaScript...")
    print(f"3. Pick {SCRIPT_SUBDIR}/ImportZoomFolders.py and run it")
    print("\nIMPORTANT USAGE NOTES:")
    print("• Choose the folder that contains the ZOOMxxxx take folders")
    print("• One track is created (or reused) per Tr1-6 channel that has files")
    print("• Install js_ReaScriptAPI for a native folder browser")
    print("\nTo check a card without REAPER:")
    print("• Run: python preview_import.py <root>")
    print("\nTo customize settings:")
    print("• Edit the config.py file in the script directory")

    return True

if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
