"""Splice format handlers."""

from drumsplice.formats.splice.cursor import ByteCursor
from drumsplice.formats.splice.decoder import SpliceDecoder, decode
from drumsplice.formats.splice.reader import SpliceReader, decode_file

__all__ = ["ByteCursor", "SpliceDecoder", "SpliceReader", "decode", "decode_file"]
