"""Format handlers for drum machine pattern files."""

from drumsplice.formats.splice import SpliceDecoder, SpliceReader

__all__ = ["SpliceDecoder", "SpliceReader"]
