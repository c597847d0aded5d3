#!/usr/bin/env python3
"""
Example: Basic pattern analysis

Shows how to decode a splice file and walk its tracks.
"""

import sys

sys.path.insert(0, "..")

from drumsplice import SpliceReader


def main(path: str):
    pattern = SpliceReader.read(path)

    # Basic info
    print(f"HW Version: {pattern.hw_version}")
    print(f"Tempo: {pattern.tempo_text} BPM")
    print(f"Tracks: {pattern.track_count}")
    print()

    # Tracks
    for track in pattern.tracks:
        hits = ", ".join(str(s + 1) for s in track.active_steps) or "-"
        print(f"  ({track.sample_id}) {track.sample_name}: steps {hits}")
    print()

    # Text rendering, as printed by the device software
    print(pattern, end="")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "pattern_1.splice")
