"""Utility functions for drumsplice."""

from drumsplice.utils.formatting import format_float32
from drumsplice.utils.validation import (
    SpliceFormatError,
    InvalidSignatureError,
    TruncatedInputError,
    TruncatedTrackError,
    validate_splice_header,
)

__all__ = [
    "format_float32",
    "SpliceFormatError",
    "InvalidSignatureError",
    "TruncatedInputError",
    "TruncatedTrackError",
    "validate_splice_header",
]
