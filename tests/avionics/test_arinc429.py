"""Tests for ARINC-429 word decoding."""

import pytest

from pc12perf.avionics.arinc429 import (
    DATA_SCALE,
    ArincDecoder,
    ArincWord,
    decode_label,
    encode,
    label_name,
)


class TestDecodeLabel:
    """Test label byte decoding."""

    def test_octal_digits_read_as_decimal(self) -> None:
        """Test 0b10_101_011 is label 253, not the binary value 171."""
        assert decode_label(0b10_101_011) == 253

    def test_static_air_temperature_label(self) -> None:
        """Test 0x8B decodes to label 213."""
        assert decode_label(0x8B) == 213

    def test_highest_label(self) -> None:
        """Test all bits set decode to label 377."""
        assert decode_label(0xFF) == 377

    def test_label_names(self) -> None:
        """Test diagnostic label names."""
        assert label_name(213) == "Static Air Temperature"
        assert label_name(204) == "Baro Altitude"
        assert label_name(6) == "Unknown"


class TestArincDecoder:
    """Test ArincDecoder."""

    @pytest.fixture
    def decoder(self) -> ArincDecoder:
        return ArincDecoder()

    def test_zero_word(self, decoder: ArincDecoder) -> None:
        """Test a word with empty data field decodes to zero."""
        word = decoder.decode(bytes([0x00, 0x00, 0x00, 0x8B]))

        assert word.label == 213
        assert word.sign == 0
        assert word.magnitude == 0
        assert word.value == 0.0
        assert word.as_int() == 0

    def test_magnitude_spans_three_bytes(self, decoder: ArincDecoder) -> None:
        """Test the 18 data bits are assembled from bytes 0-2."""
        word = decoder.decode(bytes([0x0F, 0xFF, 0xFC, 0x8B]))
        assert word.magnitude == DATA_SCALE - 1

        word = decoder.decode(bytes([0x00, 0x01, 0x04, 0x8B]))
        assert word.magnitude == (1 << 6) | 1

    def test_sign_bit_offsets_by_full_scale(self, decoder: ArincDecoder) -> None:
        """Test a set sign bit subtracts the full-scale range."""
        word = decoder.decode(bytes([0x10, 0x00, 0x00, 0x8B]))

        assert word.sign == 1
        assert word.value == -512.0
        assert word.as_int() == -512

    def test_half_scale_negative(self, decoder: ArincDecoder) -> None:
        """Test sign bit with half-scale magnitude gives -range/2."""
        # magnitude 1 << 17 is half of full scale
        word = decoder.decode(bytes([0x18, 0x00, 0x00, 0x8B]))

        assert word.magnitude == 1 << 17
        assert word.value == -256.0

    def test_altitude(self, decoder: ArincDecoder) -> None:
        """Test a baro altitude word."""
        word = decoder.decode(encode(204, 24000, 131072))

        assert word.label == 204
        assert word.as_int() == 24000

    def test_negative_temperature(self, decoder: ArincDecoder) -> None:
        """Test a negative static air temperature."""
        word = decoder.decode(encode(213, -30, 512))

        assert word.sign == 1
        assert word.as_int() == -30
        assert word.value == pytest.approx(-30.0)

    def test_as_int_truncates_before_offset(self) -> None:
        """Test as_int truncates the scaled magnitude, then applies the offset."""
        # scaled magnitude 481.5 -> 481 - 512 = -31
        word = ArincWord(label=213, sign=1, magnitude=246528, full_scale=512.0)

        assert word.value == pytest.approx(-30.5)
        assert word.as_int() == -31

    def test_label_without_range(self, decoder: ArincDecoder) -> None:
        """Test labels without a configured range decode without a value."""
        word = decoder.decode(bytes([0x01, 0x00, 0x00, 0xCA]))  # label 312

        assert word.label == 312
        assert word.name == "Ground Speed"
        assert word.value is None
        assert word.as_int() is None

    def test_custom_ranges(self) -> None:
        """Test full-scale ranges can be replaced."""
        decoder = ArincDecoder(full_scale_ranges={312: 4096.0})

        word = decoder.decode(encode(312, 272, 4096))
        assert word.as_int() == 272
        assert decoder.decode(encode(213, 10, 512)).value is None

    def test_alternate_sign_bit(self) -> None:
        """Test the sign bit position is configurable."""
        word_bytes = bytes([0x20, 0x00, 0x00, 0x8B])

        assert ArincDecoder().decode(word_bytes).sign == 0
        assert ArincDecoder(sign_bit=5).decode(word_bytes).sign == 1

    def test_invalid_sign_bit(self) -> None:
        """Test a sign bit inside the data field is rejected."""
        with pytest.raises(ValueError, match="Sign bit"):
            ArincDecoder(sign_bit=3)

    def test_wrong_word_length(self, decoder: ArincDecoder) -> None:
        """Test words that are not 4 bytes are rejected."""
        with pytest.raises(ValueError, match="4 bytes"):
            decoder.decode(b"\x00\x00\x8b")


class TestEncode:
    """Test the encoder used to produce gateway traffic."""

    def test_label_byte(self) -> None:
        """Test encode writes the label digits back into the last byte."""
        assert encode(253, 0, 512)[3] == 0b10_101_011

    def test_sign_bit_position(self) -> None:
        """Test encode honours the sign bit position."""
        assert encode(213, -1, 512)[0] & 0x10
        assert encode(213, -1, 512, sign_bit=5)[0] & 0x20

    def test_invalid_label(self) -> None:
        """Test labels with non-octal digits are rejected."""
        with pytest.raises(ValueError, match="octal"):
            encode(218, 0, 512)

    def test_value_out_of_range(self) -> None:
        """Test values outside the full-scale range are rejected."""
        with pytest.raises(ValueError, match="full-scale"):
            encode(213, 600, 512)
