"""
drumsplice - Decoder for drum machine .splice pattern files.

This library provides tools to:
- Decode .splice binary pattern files into Pattern and Track values
- Render patterns as text (step grids)
- Export patterns as MIDI drum files

Example usage:
    from drumsplice import SpliceReader

    pattern = SpliceReader.read("pattern_1.splice")
    print(pattern)
"""

__version__ = "0.1.0"
__author__ = "drumsplice Contributors"

from drumsplice.formats.splice.decoder import SpliceDecoder, decode
from drumsplice.formats.splice.reader import SpliceReader, decode_file
from drumsplice.models.pattern import Pattern
from drumsplice.models.track import Track
from drumsplice.utils.validation import (
    SpliceFormatError,
    InvalidSignatureError,
    TruncatedInputError,
    TruncatedTrackError,
)

__all__ = [
    "SpliceDecoder",
    "SpliceReader",
    "decode",
    "decode_file",
    "Pattern",
    "Track",
    "SpliceFormatError",
    "InvalidSignatureError",
    "TruncatedInputError",
    "TruncatedTrackError",
]
