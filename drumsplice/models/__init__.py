"""Data models for decoded splice patterns."""

from drumsplice.models.pattern import Pattern
from drumsplice.models.track import Track

__all__ = [
    "Pattern",
    "Track",
]
