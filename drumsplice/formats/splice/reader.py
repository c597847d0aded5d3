"""
Splice file reader.

Loads .splice files from disk and hands their bytes to the decoder.
"""

import logging
from pathlib import Path
from typing import Union

from drumsplice.formats.splice.decoder import SpliceDecoder, decode_null_padded
from drumsplice.models.pattern import Pattern
from drumsplice.utils.validation import (
    HEADER_SIZE,
    SPLICE_SIGNATURE,
    validate_splice_header,
)

logger = logging.getLogger(__name__)


class SpliceReader:
    """
    Reader for splice pattern files.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(f"HW: {pattern.hw_version}, Tempo: {pattern.tempo_text}")
    """

    def __init__(self, strict: bool = True):
        self.decoder = SpliceDecoder(strict=strict)

    @classmethod
    def read(cls, filepath: Union[str, Path], strict: bool = True) -> Pattern:
        """
        Read a splice file and return a Pattern.

        Args:
            filepath: Path to .splice file
            strict: Reject files without the "SPLICE" signature

        Returns:
            Decoded Pattern object
        """
        reader = cls(strict=strict)
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """
        Parse a splice file.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            SpliceFormatError: If the contents do not decode
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        logger.debug("Read %d bytes from %s", len(data), filepath)
        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Pattern:
        """Decode splice data already in memory."""
        return self.decoder.decode(data)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like a splice pattern.

        Returns:
            True if the file starts with a complete splice header
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(HEADER_SIZE)
        except OSError:
            return False

        return validate_splice_header(header)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a splice file without decoding tracks.

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": False,
            "size": len(data),
            "header_size": HEADER_SIZE,
        }

        if len(data) >= len(SPLICE_SIGNATURE):
            info["signature"] = data[: len(SPLICE_SIGNATURE)].decode("ascii", errors="replace")

        if len(data) >= HEADER_SIZE:
            info["valid"] = data.startswith(SPLICE_SIGNATURE)
            start, end = SpliceDecoder.OFFSETS["hw_version"]
            info["hw_version"] = decode_null_padded(data[start:end])
            info["track_bytes"] = len(data) - HEADER_SIZE

        return info


def decode_file(filepath: Union[str, Path], strict: bool = True) -> Pattern:
    """
    Convenience function to decode a splice file.

    Args:
        filepath: Path to .splice file
        strict: Reject files without the "SPLICE" signature

    Returns:
        Decoded Pattern
    """
    return SpliceReader.read(filepath, strict=strict)
