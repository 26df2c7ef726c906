from pydub import AudioSegment
import os, sys

def get_audio_length(path):
    """Return the duration of an audio file in seconds, or None if it can't be loaded."""
    if not os.path.exists(path):
        print(f"audio_length: ERROR - File does not exist: {path}")
        return None

    try:
        a = AudioSegment.from_file(path)
    except Exception as e:
        print(f"audio_length: ERROR loading audio file: {e}")
        return None

    # pydub reports length in milliseconds
    return len(a) / 1000.0

if __name__ == "__main__":
    # Usage: python3 audio_length.py <file> [<file> ...]
    for p in sys.argv[1:]:
        length = get_audio_length(p)
        if length is not None:
            print(f"{p}: {length:.3f}s")
