"""
Splice pattern decoder.

Decodes the binary structure of drum machine pattern (.splice) files.

Splice File Structure:
    Offset  Size    Description
    0x00    6       Signature "SPLICE"
    0x06    7       Padding
    0x0D    1       Reserved
    0x0E    32      HW version (ASCII, null padded)
    0x2E    4       Tempo (float32, little endian)
    0x32    ...     Track records until end of data

Track Record Structure:
    Offset  Size    Description
    0       1       Sample ID
    1       3       Padding
    4       1       Name length (n)
    5       n       Sample name
    5+n     16      Steps (0x00 = off, anything else = on)
"""

import logging
from typing import List, Tuple

from drumsplice.formats.splice.cursor import ByteCursor
from drumsplice.models.pattern import Pattern
from drumsplice.models.track import Track
from drumsplice.utils.validation import (
    HEADER_SIZE,
    SPLICE_SIGNATURE,
    InvalidSignatureError,
    TruncatedInputError,
    TruncatedTrackError,
)

logger = logging.getLogger(__name__)


def decode_null_padded(field: bytes) -> str:
    """
    Decode a null padded ASCII field.

    Every 0x00 byte is dropped, wherever it sits in the field; the other
    bytes keep their order.
    """
    return field.replace(b"\x00", b"").decode("ascii", errors="replace")


def decode_raw_text(field: bytes) -> str:
    """Decode a length-prefixed name as-is, null bytes included."""
    return field.decode("utf-8", errors="replace")


class SpliceDecoder:
    """
    Decoder for splice pattern data.

    The decoder holds no state between calls; one instance can decode
    any number of buffers.

    Example:
        decoder = SpliceDecoder()
        pattern = decoder.decode(data)
        print(pattern)
    """

    SIGNATURE = SPLICE_SIGNATURE
    HEADER_SIZE = HEADER_SIZE
    STEP_COUNT = 16
    TRACK_PREFIX_SIZE = 5

    # Header offset table (start, end)
    OFFSETS = {
        "signature": (0x00, 0x06),
        "padding": (0x06, 0x0D),
        "reserved": (0x0D, 0x0E),
        "hw_version": (0x0E, 0x2E),
        "tempo": (0x2E, 0x32),
    }

    def __init__(self, strict: bool = True):
        """
        Args:
            strict: Reject data whose first six bytes are not "SPLICE"
        """
        self.strict = strict

    def decode(self, data: bytes) -> Pattern:
        """
        Decode a complete splice buffer.

        Args:
            data: Raw file contents

        Returns:
            Decoded Pattern

        Raises:
            TruncatedInputError: Buffer shorter than the 50 byte header
            InvalidSignatureError: Signature mismatch (strict mode only)
            TruncatedTrackError: A track record runs past the buffer end
        """
        data = bytes(data)
        hw_version, tempo = self.decode_header(data)
        tracks = self.decode_tracks(data, self.HEADER_SIZE)
        logger.debug("Decoded %d tracks from %d bytes", len(tracks), len(data))
        return Pattern(hw_version=hw_version, tempo=tempo, tracks=tuple(tracks))

    def decode_header(self, data: bytes) -> Tuple[str, float]:
        """
        Extract hardware version and tempo from the fixed header.

        Returns:
            Tuple of (hw_version, tempo)
        """
        if len(data) < self.HEADER_SIZE:
            raise TruncatedInputError(
                f"Splice data too short: {len(data)} bytes (header needs {self.HEADER_SIZE})",
                offset=len(data),
            )

        cursor = ByteCursor(data, error=TruncatedInputError)

        signature = cursor.read_bytes(6, "signature")
        if signature != self.SIGNATURE:
            if self.strict:
                raise InvalidSignatureError(
                    f"Invalid splice signature: {signature!r} (expected {self.SIGNATURE!r})",
                    offset=0,
                )
            logger.warning("Ignoring invalid splice signature %r", signature)

        cursor.skip(7, "padding")
        cursor.skip(1, "reserved byte")
        hw_version = decode_null_padded(cursor.read_bytes(32, "hw version"))
        tempo = cursor.read_f32le("tempo")

        logger.debug("Header: hw_version=%r tempo=%r", hw_version, tempo)
        return hw_version, tempo

    def decode_tracks(self, data: bytes, start: int = 0) -> List[Track]:
        """
        Scan track records from start to the end of data.

        Args:
            data: Buffer holding the records
            start: Offset of the first record

        Returns:
            Tracks in file order (empty if no bytes remain)
        """
        cursor = ByteCursor(data, start=start, error=TruncatedTrackError)
        tracks = []

        while not cursor.at_end:
            tracks.append(self.decode_track(cursor))

        return tracks

    def decode_track(self, cursor: ByteCursor) -> Track:
        """
        Decode one track record at the cursor and advance past it.

        The whole record is checked against the remaining length before any
        field is read, so a truncated record leaves the cursor in place.
        """
        record_start = cursor.position
        cursor.require(self.TRACK_PREFIX_SIZE, "track record")

        name_length = cursor.data[record_start + 4]
        record_size = self.TRACK_PREFIX_SIZE + name_length + self.STEP_COUNT
        if record_size > cursor.remaining:
            raise TruncatedTrackError(
                f"Track record at offset {record_start} declares {record_size} bytes, "
                f"only {cursor.remaining} remain",
                offset=record_start,
            )

        sample_id = cursor.read_u8("sample id")
        cursor.skip(3, "track padding")
        cursor.read_u8("name length")
        sample_name = decode_raw_text(cursor.read_bytes(name_length, "sample name"))
        steps = tuple(b != 0 for b in cursor.read_bytes(self.STEP_COUNT, "steps"))

        logger.debug(
            "Track at 0x%X: id=%d name=%r (%d bytes)",
            record_start,
            sample_id,
            sample_name,
            record_size,
        )
        return Track(sample_id=sample_id, sample_name=sample_name, steps=steps)

    def record_spans(self, data: bytes) -> List[Tuple[int, int]]:
        """
        List (start, end) offsets of every complete track record.

        Stops quietly at the first truncated record; used for annotating
        hex dumps of files that may not decode.
        """
        spans = []
        offset = self.HEADER_SIZE
        while offset + self.TRACK_PREFIX_SIZE <= len(data):
            end = offset + self.TRACK_PREFIX_SIZE + data[offset + 4] + self.STEP_COUNT
            if end > len(data):
                break
            spans.append((offset, end))
            offset = end
        return spans


def decode(data: bytes, strict: bool = True) -> Pattern:
    """
    Convenience function to decode splice data.

    Args:
        data: Raw file contents
        strict: Reject a missing "SPLICE" signature

    Returns:
        Decoded Pattern
    """
    return SpliceDecoder(strict=strict).decode(data)
