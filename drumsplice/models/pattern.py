"""
Pattern data model - the top-level result of decoding a splice file.
"""

import struct
from dataclasses import dataclass, field
from typing import Optional, Tuple

from drumsplice.models.track import Track
from drumsplice.utils.formatting import format_float32


@dataclass(frozen=True)
class Pattern:
    """
    Complete drum pattern decoded from a .splice file.

    Attributes:
        hw_version: Hardware version string the file was saved with
        tempo: Tempo in BPM (a float32 value)
        tracks: Tracks in the order they appear in the file
    """

    hw_version: str
    tempo: float
    tracks: Tuple[Track, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "tracks", tuple(self.tracks))

    def _key(self) -> tuple:
        # Tempo compares by bit pattern so a NaN tempo equals itself
        return (self.hw_version, struct.pack("<d", self.tempo), self.tracks)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    @property
    def tempo_text(self) -> str:
        """Tempo with the shortest decimal form, e.g. "120" or "98.4"."""
        return format_float32(self.tempo)

    def find_track(self, sample_id: int) -> Optional[Track]:
        """Return the first track using sample_id, or None."""
        for track in self.tracks:
            if track.sample_id == sample_id:
                return track
        return None

    def to_dict(self) -> dict:
        return {
            "hw_version": self.hw_version,
            "tempo": self.tempo,
            "tracks": [track.to_dict() for track in self.tracks],
        }

    def __str__(self) -> str:
        lines = [
            f"Saved with HW Version: {self.hw_version}",
            f"Tempo: {self.tempo_text}",
        ]
        lines.extend(str(track) for track in self.tracks)
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return (
            f"Pattern(hw_version={self.hw_version!r}, tempo={self.tempo_text}, "
            f"tracks={len(self.tracks)})"
        )
