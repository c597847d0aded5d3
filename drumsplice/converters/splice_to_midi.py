"""
Splice to MIDI converter.

Turns a decoded Pattern into a one bar Standard MIDI File on the General
MIDI drum channel, one sixteenth note per step.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import mido

from drumsplice.formats.splice.reader import SpliceReader
from drumsplice.models.pattern import Pattern
from drumsplice.models.track import Track

logger = logging.getLogger(__name__)

DRUM_CHANNEL = 9  # MIDI channel 10
DEFAULT_VELOCITY = 100

# Sample name keyword -> General MIDI drum note, checked in order
GM_DRUM_NOTES = [
    ("kick", 36),
    ("snare", 38),
    ("clap", 39),
    ("hh-close", 42),
    ("hihat", 42),
    ("hh-open", 46),
    ("low-tom", 45),
    ("mid-tom", 47),
    ("hi-tom", 50),
    ("cowbell", 56),
    ("conga", 64),
    ("maracas", 70),
]


def note_for_track(track: Track, note_map: Optional[Dict[int, int]] = None) -> int:
    """
    Pick the MIDI note used for a track.

    Args:
        track: Track to map
        note_map: Explicit sample_id -> note overrides

    Returns:
        MIDI note number (0-127)
    """
    if note_map and track.sample_id in note_map:
        return note_map[track.sample_id]

    name = track.sample_name.lower()
    for keyword, note in GM_DRUM_NOTES:
        if keyword in name:
            return note

    return 36 + track.sample_id % 46


def pattern_to_midi(
    pattern: Pattern,
    ticks_per_beat: int = 480,
    note_map: Optional[Dict[int, int]] = None,
    velocity: int = DEFAULT_VELOCITY,
) -> mido.MidiFile:
    """
    Build a type 0 MIDI file playing the pattern once.

    Args:
        pattern: Decoded pattern
        ticks_per_beat: MIDI resolution
        note_map: Optional sample_id -> note overrides
        velocity: Note-on velocity for every hit

    Returns:
        mido.MidiFile ready to save

    Raises:
        ValueError: If the pattern tempo is not a positive number
    """
    if not pattern.tempo > 0 or pattern.tempo == float("inf"):
        raise ValueError(f"Cannot export tempo {pattern.tempo_text} to MIDI")

    step_ticks = ticks_per_beat // 4
    gate = max(1, step_ticks // 2)

    # (tick, order, message) - note offs sort before note ons on the same tick
    events = []
    for track in pattern.tracks:
        note = note_for_track(track, note_map)
        for step in track.active_steps:
            start = step * step_ticks
            events.append((start, 1, mido.Message(
                "note_on", channel=DRUM_CHANNEL, note=note, velocity=velocity
            )))
            events.append((start + gate, 0, mido.Message(
                "note_off", channel=DRUM_CHANNEL, note=note, velocity=0
            )))
    events.sort(key=lambda e: (e[0], e[1]))

    midi = mido.MidiFile(type=0, ticks_per_beat=ticks_per_beat)
    midi_track = mido.MidiTrack()
    midi.tracks.append(midi_track)

    midi_track.append(mido.MetaMessage("track_name", name=f"splice {pattern.hw_version}", time=0))
    midi_track.append(mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(pattern.tempo), time=0))
    midi_track.append(mido.MetaMessage("time_signature", numerator=4, denominator=4, time=0))

    last_tick = 0
    for tick, _, message in events:
        midi_track.append(message.copy(time=tick - last_tick))
        last_tick = tick

    bar_ticks = ticks_per_beat * 4
    midi_track.append(mido.MetaMessage("end_of_track", time=max(0, bar_ticks - last_tick)))

    logger.debug("Built MIDI with %d note events", len(events))
    return midi


class SpliceToMidiConverter:
    """
    Converter from splice pattern files to MIDI files.

    Example:
        converter = SpliceToMidiConverter()
        midi = converter.convert("pattern_1.splice")
        midi.save("pattern_1.mid")
    """

    def __init__(
        self,
        ticks_per_beat: int = 480,
        note_map: Optional[Dict[int, int]] = None,
        strict: bool = True,
    ):
        self.ticks_per_beat = ticks_per_beat
        self.note_map = note_map
        self.strict = strict

    def convert(self, source: Union[str, Path, Pattern]) -> mido.MidiFile:
        """
        Convert a splice file (or an already decoded Pattern) to MIDI.
        """
        if isinstance(source, Pattern):
            pattern = source
        else:
            pattern = SpliceReader.read(source, strict=self.strict)

        return pattern_to_midi(pattern, self.ticks_per_beat, self.note_map)

    def write(self, source: Union[str, Path, Pattern], output: Union[str, Path]) -> Path:
        """Convert and save to output, creating parent directories."""
        midi = self.convert(source)
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        midi.save(str(output))
        return output
