"""
Error types and header checks for splice pattern data.
"""

from typing import Optional


class SpliceFormatError(ValueError):
    """Raised when splice data cannot be decoded.

    Attributes:
        offset: Byte offset where decoding stopped, if known
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class InvalidSignatureError(SpliceFormatError):
    """Raised when the header does not start with the SPLICE marker."""

    pass


class TruncatedInputError(SpliceFormatError):
    """Raised when the buffer is shorter than the fixed header."""

    pass


class TruncatedTrackError(SpliceFormatError):
    """Raised when a track record claims more bytes than remain."""

    pass


SPLICE_SIGNATURE = b"SPLICE"
HEADER_SIZE = 50


def validate_splice_header(data: bytes) -> bool:
    """
    Check whether data begins with a complete splice header.

    Args:
        data: File data (at least 50 bytes for a full header)

    Returns:
        True if the signature matches and the header is complete
    """
    if len(data) < HEADER_SIZE:
        return False

    return data[: len(SPLICE_SIGNATURE)] == SPLICE_SIGNATURE


def validate_sample_id(sample_id: int) -> None:
    """
    Validate a track sample identifier (0-255).

    Raises:
        ValueError: If the identifier does not fit in one byte
    """
    if not 0 <= sample_id <= 255:
        raise ValueError(f"Sample ID must be 0-255, got {sample_id}")


def validate_steps(steps) -> None:
    """
    Validate a step sequence.

    Raises:
        ValueError: If there are not exactly 16 steps
    """
    if len(steps) != 16:
        raise ValueError(f"A track needs exactly 16 steps, got {len(steps)}")
