"""Tests for the splice pattern decoder."""

import struct
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from drumsplice.formats.splice.decoder import (
    SpliceDecoder,
    decode,
    decode_null_padded,
    decode_raw_text,
)
from drumsplice.utils.validation import (
    InvalidSignatureError,
    SpliceFormatError,
    TruncatedInputError,
    TruncatedTrackError,
)
from splice_builders import (
    CLAP_TRACK,
    KICK_TRACK,
    REFERENCE_PATTERNS,
    build_header,
    build_track,
    reference_bytes,
    reference_output,
)


class TestHeader:
    """Test cases for fixed header extraction."""

    def test_hw_version(self, pattern_1_data):
        """Test the null padded version string is decoded exactly."""
        hw_version, _ = SpliceDecoder().decode_header(pattern_1_data)

        assert hw_version == "0.808-alpha"

    @pytest.mark.parametrize("name", sorted(REFERENCE_PATTERNS))
    def test_reference_hw_versions(self, name):
        """Test hardware versions of all reference patterns."""
        pattern = decode(reference_bytes(name))

        assert pattern.hw_version == REFERENCE_PATTERNS[name][0].decode("ascii")

    def test_embedded_nulls_dropped(self):
        """Test null bytes inside the version field are dropped, not cut at."""
        data = build_header(hw_version=b"0.8\x0008\x00\x00-alpha")

        hw_version, _ = SpliceDecoder().decode_header(data)

        assert hw_version == "0.808-alpha"

    def test_tempo_120(self):
        """Test tempo bytes 00 00 F0 42 decode to 120.0."""
        data = build_header()[:46] + bytes([0x00, 0x00, 0xF0, 0x42])

        pattern = decode(data)

        assert pattern.tempo == 120.0
        assert pattern.tempo_text == "120"

    def test_tempo_fractional(self):
        """Test a fractional tempo keeps its float32 value."""
        pattern = decode(build_header(tempo=98.4))

        assert pattern.tempo == struct.unpack("<f", struct.pack("<f", 98.4))[0]
        assert pattern.tempo_text == "98.4"

    def test_reserved_byte_ignored(self):
        """Test the reserved header byte does not affect decoding."""
        a = decode(build_header(reserved=0x00))
        b = decode(build_header(reserved=0x57))

        assert a == b

    def test_invalid_signature_rejected(self):
        """Test a wrong signature fails in strict mode."""
        data = build_header(signature=b"NOTSPL")

        with pytest.raises(InvalidSignatureError, match="Invalid splice signature"):
            decode(data)

    def test_invalid_signature_lenient(self):
        """Test a wrong signature is accepted when strict is off."""
        data = build_header(signature=b"NOTSPL") + KICK_TRACK

        pattern = decode(data, strict=False)

        assert pattern.hw_version == "0.808-alpha"
        assert len(pattern.tracks) == 1

    def test_short_buffer(self):
        """Test buffers shorter than 50 bytes fail with TruncatedInputError."""
        data = build_header()[:49]

        with pytest.raises(TruncatedInputError):
            decode(data)

    def test_empty_buffer(self):
        """Test an empty buffer fails with TruncatedInputError."""
        with pytest.raises(TruncatedInputError):
            decode(b"")

    def test_short_buffer_checked_before_signature(self):
        """Test truncation wins over a bad signature."""
        with pytest.raises(TruncatedInputError):
            decode(b"XXXXXX")


class TestTrackScanning:
    """Test cases for the track record loop."""

    def test_single_track(self):
        """Test decoding the hand built kick record."""
        tracks = SpliceDecoder().decode_tracks(KICK_TRACK)

        assert len(tracks) == 1
        track = tracks[0]
        assert track.sample_id == 40
        assert track.sample_name == "kick"
        assert track.grid() == "|x---|----|x---|----|"

    def test_multiple_tracks_keep_order(self):
        """Test two concatenated records decode as two tracks in order."""
        decoder = SpliceDecoder()
        tracks = decoder.decode_tracks(KICK_TRACK + CLAP_TRACK)

        assert len(tracks) == 2
        assert tracks[0] == decoder.decode_tracks(KICK_TRACK)[0]
        assert tracks[1] == decoder.decode_tracks(CLAP_TRACK)[0]
        assert tracks[1].sample_id == 1
        assert tracks[1].sample_name == "clap"

    def test_header_only_has_no_tracks(self, header_only_data):
        """Test a 50 byte buffer decodes to an empty track list."""
        pattern = decode(header_only_data)

        assert pattern.tracks == ()

    def test_empty_name(self):
        """Test a zero length name."""
        data = build_header() + build_track(7, "", "x---|----|----|----")

        track = decode(data).tracks[0]

        assert track.sample_id == 7
        assert track.sample_name == ""
        assert track.active_steps == [0]

    def test_non_zero_step_bytes_are_on(self):
        """Test any non-zero step byte counts as a hit."""
        record = bytes([3, 0, 0, 0, 1]) + b"a" + bytes([0x02, 0xFF] + [0] * 14)

        track = SpliceDecoder().decode_tracks(record)[0]

        assert track.active_steps == [0, 1]

    def test_name_keeps_null_bytes(self):
        """Test track names are not null stripped like the header."""
        record = bytes([3, 0, 0, 0, 3]) + b"a\x00b" + bytes(16)

        track = SpliceDecoder().decode_tracks(record)[0]

        assert track.sample_name == "a\x00b"

    def test_long_name(self):
        """Test a 255 byte name."""
        name = "n" * 255
        data = build_header() + build_track(255, name, "----|----|----|---x")

        track = decode(data).tracks[0]

        assert track.sample_id == 255
        assert track.sample_name == name
        assert track.active_steps == [15]

    def test_partial_prefix(self):
        """Test fewer than 5 trailing bytes fail with TruncatedTrackError."""
        data = build_header() + KICK_TRACK + bytes([1, 0, 0])

        with pytest.raises(TruncatedTrackError) as exc_info:
            decode(data)

        assert exc_info.value.offset == 50 + len(KICK_TRACK)

    def test_declared_length_past_end(self):
        """Test a record whose name runs past the end fails."""
        data = build_header() + KICK_TRACK[:-1]

        with pytest.raises(TruncatedTrackError, match="declares 25 bytes"):
            decode(data)

    def test_name_length_past_end(self):
        """Test a huge name length fails instead of slicing short."""
        data = build_header() + bytes([1, 0, 0, 0, 200]) + b"kick" + bytes(16)

        with pytest.raises(TruncatedTrackError):
            decode(data)

    def test_format_errors_share_base(self):
        """Test all format errors are SpliceFormatError and ValueError."""
        data = build_header() + bytes([1])

        with pytest.raises(SpliceFormatError):
            decode(data)
        with pytest.raises(ValueError):
            decode(data)

    def test_record_spans(self, pattern_1_data):
        """Test record span listing used by the hex dump."""
        spans = SpliceDecoder().record_spans(pattern_1_data)

        assert len(spans) == 6
        assert spans[0] == (50, 50 + 5 + 4 + 16)
        assert spans[-1][1] == len(pattern_1_data)

    def test_record_spans_stop_at_truncation(self):
        """Test record spans ignore an incomplete final record."""
        data = build_header() + KICK_TRACK + CLAP_TRACK[:10]

        assert SpliceDecoder().record_spans(data) == [(50, 75)]


class TestDecode:
    """Test cases for whole file decoding."""

    @pytest.mark.parametrize("name", sorted(REFERENCE_PATTERNS))
    def test_reference_rendering(self, name):
        """Test each reference pattern renders like the device output."""
        pattern = decode(reference_bytes(name))

        assert str(pattern) == reference_output(name)

    def test_deterministic(self, pattern_1_data):
        """Test decoding the same bytes twice gives equal patterns."""
        decoder = SpliceDecoder()

        assert decoder.decode(pattern_1_data) == decoder.decode(pattern_1_data)

    def test_deterministic_nan_tempo(self):
        """Test NaN tempo bytes decode to equal patterns every time."""
        data = build_header()[:46] + bytes([0x00, 0x00, 0xC0, 0x7F]) + KICK_TRACK

        first = decode(data)

        assert first.tempo != first.tempo
        assert first.tempo_text == "NaN"
        assert first == decode(data)

    def test_accepts_bytearray(self, pattern_1_data):
        """Test a bytearray decodes like bytes."""
        assert decode(bytearray(pattern_1_data)) == decode(pattern_1_data)

    def test_tracks_are_tuple(self, pattern_1_data):
        """Test the decoded pattern exposes an immutable track tuple."""
        pattern = decode(pattern_1_data)

        assert isinstance(pattern.tracks, tuple)
        assert [t.sample_name for t in pattern.tracks] == [
            "kick",
            "snare",
            "clap",
            "hh-open",
            "hh-close",
            "cowbell",
        ]


class TestTextDecoders:
    """Test cases for the two text decoding rules."""

    def test_null_padded(self):
        assert decode_null_padded(b"0.909" + bytes(27)) == "0.909"

    def test_null_padded_all_zero(self):
        assert decode_null_padded(bytes(32)) == ""

    def test_raw_text(self):
        assert decode_raw_text(b"hh-open") == "hh-open"

    def test_raw_text_utf8(self):
        assert decode_raw_text("Cloché".encode("utf-8")) == "Cloché"
