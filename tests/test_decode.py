"""Tests for ecoji.core.decode module."""
import io
import random

import pytest

from ecoji.core.alphabet import VERSION1, VERSION2
from ecoji.core.decode import (
    AlphabetSelector,
    DecoderState,
    decode,
    decode_group,
    decode_to_bytes,
    decode_to_string,
)
from ecoji.core.emojis import V2_SUBSTITUTIONS
from ecoji.core.encode import encode_to_string
from ecoji.core.errors import EcojiError, InvalidDataError, UnexpectedEofError


class TestKnownInputs:
    """Inputs shared with other Ecoji implementations."""

    def test_abc(self, version):
        assert decode_to_bytes("👖📸🎈☕", version) == b"abc"

    def test_input_data(self, version):
        assert decode_to_bytes("👶😲🇲👅🍉🔙🌥🌩", version) == b"input data"

    def test_decode_to_string(self):
        assert decode_to_string("👶😲🇲👅🍉🔙🌥🌩") == "input data"

    def test_non_utf8_payload(self, version):
        assert decode_to_bytes("🧑🦲🧕🙋", version) == bytes([0xFE, 0xFE, 0xFF, 0xFF])


class TestGroupForms:
    """Each group shape decodes to the right number of bytes."""

    def test_one_byte(self, version):
        v = version
        text = v.symbols[0x6B << 2] + v.padding * 3
        assert decode_to_bytes(text, v) == b"k"

    def test_one_byte_elided(self, version):
        v = version
        assert decode_to_bytes(v.symbols[0x6B << 2] + v.padding, v) == b"k"

    def test_two_bytes(self, version):
        v = version
        assert decode_to_bytes(v.symbols[0] + v.symbols[16] + v.padding * 2, v) == bytes([0, 1])
        assert decode_to_bytes(v.symbols[0] + v.symbols[16] + v.padding, v) == bytes([0, 1])

    def test_three_bytes(self, version):
        v = version
        text = v.symbols[0] + v.symbols[16] + v.symbols[128] + v.padding
        assert decode_to_bytes(text, v) == bytes([0, 1, 2])

    def test_four_bytes(self, version):
        v = version
        for last in range(4):
            text = v.symbols[0] + v.symbols[16] + v.symbols[128] + v.padding4[last]
            assert decode_to_bytes(text, v) == bytes([0, 1, 2, last])

    def test_five_bytes(self, version):
        v = version
        text = v.symbols[687] + v.symbols[222] + v.symbols[960] + v.symbols[291]
        assert decode_to_bytes(text, v) == bytes([0xAB, 0xCD, 0xEF, 0x01, 0x23])

    def test_empty(self, version):
        assert decode_to_bytes("", version) == b""

    def test_elided_group_then_end(self):
        # A version 2 stream: one full group followed by "k" with elided padding
        v = VERSION2
        text = encode_to_string(b"01234k", v)
        assert text.endswith(v.symbols[0x6B << 2] + v.padding)
        assert decode_to_bytes(text, v) == b"01234k"


class TestRoundTrip:
    """decode(encode(b)) == b for both versions."""

    def test_lengths_zero_to_twelve(self, version):
        for n in range(13):
            data = bytes(range(200, 200 + n))
            assert decode_to_bytes(encode_to_string(data, version), version) == data

    def test_every_byte_value(self, version):
        data = bytes(range(256))
        assert decode_to_bytes(encode_to_string(data, version), version) == data

    def test_random_data(self, version):
        rng = random.Random(1024)
        for n in (1, 2, 3, 4, 5, 6, 99, 1000):
            data = bytes(rng.randrange(256) for _ in range(n))
            assert decode_to_bytes(encode_to_string(data, version), version) == data

    def test_text(self, version):
        text = "Base64 is so 1999, isn't there something better?"
        assert decode_to_string(encode_to_string(text.encode("utf-8"), version), version) == text


class TestCrossVersion:
    """Decoding falls back to the other version automatically."""

    def test_version2_stream_with_version1_decoder(self):
        data = bytes(range(256))
        text = encode_to_string(data, VERSION2)
        assert any(not VERSION1.is_alphabet_symbol(c) for c in text)
        assert decode_to_bytes(text, VERSION1) == data

    def test_version1_stream_with_version2_decoder(self):
        data = bytes(range(256))
        text = encode_to_string(data, VERSION1)
        assert any(not VERSION2.is_alphabet_symbol(c) for c in text)
        assert decode_to_bytes(text, VERSION2) == data

    def test_switch_inside_group(self):
        # First symbol is shared, third only exists in version 1
        index = next(i for i in sorted(V2_SUBSTITUTIONS) if i > 0)
        assert 0 not in V2_SUBSTITUTIONS
        text = VERSION1.symbols[0] + VERSION1.symbols[0] + VERSION1.symbols[index] + VERSION1.padding
        assert decode_to_bytes(text, VERSION2) == decode_to_bytes(text, VERSION1)

    def test_version2_numbered_padding_with_version1_decoder(self):
        data = bytes([9, 8, 7, 0])
        text = encode_to_string(data, VERSION2)
        assert text[-1] == VERSION2.padding4[0]
        assert not VERSION1.is_alphabet_symbol(text[-1])
        assert decode_to_bytes(text, VERSION1) == data


class TestAlphabetSelector:
    """Test the two-state version tracking."""

    def test_starts_on_primary(self):
        selector = AlphabetSelector(VERSION1)
        assert selector.state is DecoderState.PRIMARY
        assert selector.active is VERSION1

    def test_shared_symbol_keeps_state(self):
        selector = AlphabetSelector(VERSION1)
        assert selector.read(VERSION1.symbols[0]).bits == 0
        assert selector.state is DecoderState.PRIMARY

    def test_switches_to_fallback(self):
        selector = AlphabetSelector(VERSION1)
        index = next(iter(V2_SUBSTITUTIONS))
        symbol = selector.read(VERSION2.symbols[index])
        assert symbol.bits == index
        assert selector.state is DecoderState.FALLBACK
        assert selector.active is VERSION2

    def test_switches_back(self):
        selector = AlphabetSelector(VERSION2)
        index = next(iter(V2_SUBSTITUTIONS))
        selector.read(VERSION1.symbols[index])
        assert selector.active is VERSION1
        selector.read(VERSION2.symbols[index])
        assert selector.state is DecoderState.PRIMARY
        assert selector.active is VERSION2

    def test_classifies_padding(self):
        selector = AlphabetSelector(VERSION1)
        assert selector.read(VERSION1.padding).padding == -1
        assert selector.read(VERSION1.padding4[3]).padding == 3
        assert selector.read(VERSION1.symbols[7]).padding is None

    def test_unknown_character_raises(self):
        selector = AlphabetSelector(VERSION1)
        with pytest.raises(InvalidDataError, match="U\\+0041"):
            selector.read("A")


class TestDecodeGroup:
    """Test decode_group directly."""

    def test_full_group(self):
        selector = AlphabetSelector(VERSION1)
        group = [selector.read(VERSION1.symbols[i]) for i in (687, 222, 960, 291)]
        assert decode_group(group) == bytes([0xAB, 0xCD, 0xEF, 0x01, 0x23])

    def test_generic_padding_truncates(self):
        selector = AlphabetSelector(VERSION1)
        p = VERSION1.padding
        group = [selector.read(c) for c in (VERSION1.symbols[4], p, p, p)]
        assert decode_group(group) == bytes([1])


class TestErrors:
    """Malformed input and I/O failures."""

    def test_character_outside_alphabets(self, version):
        with pytest.raises(InvalidDataError, match="not a part of the Ecoji alphabet"):
            decode_to_bytes("Not emoji data  ", version)

    def test_one_bad_character_in_group(self):
        text = VERSION1.symbols[0] + "x" + VERSION1.symbols[1] + VERSION1.symbols[2]
        with pytest.raises(InvalidDataError):
            decode_to_bytes(text)

    def test_three_symbols_without_padding(self, version):
        v = version
        with pytest.raises(UnexpectedEofError, match="not a multiple of 4"):
            decode_to_bytes(v.symbols[0] + v.symbols[1] + v.symbols[2], v)

    def test_one_symbol_short(self):
        with pytest.raises(UnexpectedEofError):
            decode_to_bytes("👶😲🇲👅🍉🔙🌥")

    def test_single_symbol(self, version):
        with pytest.raises(UnexpectedEofError):
            decode_to_bytes(version.symbols[3], version)

    def test_lone_padding(self, version):
        with pytest.raises(UnexpectedEofError):
            decode_to_bytes(version.padding, version)

    def test_malformed_utf8(self, version):
        with pytest.raises(InvalidDataError):
            decode_to_bytes(bytes([0xFE, 0xFE, 0xFF, 0xFF]), version)

    def test_truncated_utf8(self):
        data = "👖📸🎈☕".encode("utf-8")[:-1]
        with pytest.raises(InvalidDataError):
            decode_to_bytes(data)

    def test_decoded_bytes_not_utf8(self, version):
        with pytest.raises(InvalidDataError, match="not valid UTF-8"):
            decode_to_string("🧑🦲🧕🙋", version)

    def test_errors_share_base_class(self):
        assert issubclass(InvalidDataError, EcojiError)
        assert issubclass(InvalidDataError, ValueError)
        assert issubclass(UnexpectedEofError, EcojiError)
        assert issubclass(UnexpectedEofError, EOFError)

    def test_write_error_propagates(self, failing_writer):
        with pytest.raises(OSError, match="disk full"):
            decode(io.BytesIO("👖📸🎈☕".encode("utf-8")), failing_writer())

    def test_output_before_error_is_kept(self):
        out = io.BytesIO()
        with pytest.raises(UnexpectedEofError):
            decode(io.BytesIO("👶😲🇲👅🍉🔙🌥".encode("utf-8")), out)
        assert out.getvalue() == b"input"


class TestDecodeStream:
    """Test decode over binary streams."""

    def test_returns_bytes_written(self, version):
        out = io.BytesIO()
        n = decode(io.BytesIO("👖📸🎈☕".encode("utf-8")), out, version)
        assert n == 3
        assert out.getvalue() == b"abc"

    def test_short_reads(self, version, trickle_reader):
        data = b"The quick brown fox jumps over the lazy dog"
        encoded = encode_to_string(data, version).encode("utf-8")
        out = io.BytesIO()
        decode(trickle_reader(encoded), out, version)
        assert out.getvalue() == data

    def test_accepts_bytes_and_stream(self):
        encoded = "👖📸🎈☕".encode("utf-8")
        assert decode_to_bytes(encoded) == b"abc"
        assert decode_to_bytes(bytearray(encoded)) == b"abc"
        assert decode_to_bytes(io.BytesIO(encoded)) == b"abc"
