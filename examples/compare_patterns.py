#!/usr/bin/env python3
"""
Example: Compare two splice pattern files

Shows differences in header values and per-sample step grids.
"""

import sys

sys.path.insert(0, "..")

from drumsplice import SpliceReader


def compare_patterns(file1: str, file2: str):
    """Compare two splice files and show differences."""

    p1 = SpliceReader.read(file1)
    p2 = SpliceReader.read(file2)

    print("=== Comparing Splice Files ===")
    print(f"File 1: {file1}")
    print(f"File 2: {file2}")
    print()

    print("Header:")
    _compare("HW Version", p1.hw_version, p2.hw_version)
    _compare("Tempo", p1.tempo_text, p2.tempo_text)
    _compare("Tracks", p1.track_count, p2.track_count)
    print()

    print("Tracks:")
    ids = [t.sample_id for t in p1.tracks]
    ids += [t.sample_id for t in p2.tracks if t.sample_id not in ids]
    for sample_id in ids:
        t1 = p1.find_track(sample_id)
        t2 = p2.find_track(sample_id)
        if t1 is None:
            print(f"  + {t2}")
        elif t2 is None:
            print(f"  - {t1}")
        elif t1 != t2:
            print(f"  ({sample_id}) {t1.grid()} -> {t2.grid()}")


def _compare(label: str, v1, v2):
    marker = "" if v1 == v2 else "  <-- differs"
    print(f"  {label:12s}: {v1} | {v2}{marker}")


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print("Usage: compare_patterns.py FILE1 FILE2")
        sys.exit(1)
    compare_patterns(sys.argv[1], sys.argv[2])
