#!/usr/bin/env python3
"""
Example: Export a splice pattern to MIDI
"""

import sys

sys.path.insert(0, "..")

from drumsplice.converters import SpliceToMidiConverter


def main():
    source = sys.argv[1] if len(sys.argv) > 1 else "pattern_1.splice"
    output = sys.argv[2] if len(sys.argv) > 2 else "pattern_1.mid"

    # Map the cowbell sample (id 5) to a tambourine instead
    converter = SpliceToMidiConverter(ticks_per_beat=96, note_map={5: 54})
    path = converter.write(source, output)
    print(f"Wrote {path}")


if __name__ == "__main__":
    main()
