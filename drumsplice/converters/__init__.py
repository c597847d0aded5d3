"""
Pattern converters.

Provides export of decoded splice patterns to other formats.
"""

from drumsplice.converters.splice_to_midi import (
    SpliceToMidiConverter,
    note_for_track,
    pattern_to_midi,
)

__all__ = [
    "SpliceToMidiConverter",
    "note_for_track",
    "pattern_to_midi",
]
