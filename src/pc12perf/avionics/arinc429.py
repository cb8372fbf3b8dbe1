"""ARINC-429 word decoding.

Gateways forward ARINC-429 bus words over TCP as 4 bytes each. The data
bytes arrive in network order but the label byte (bits 1-8 on the bus) comes
last:

    byte 0: bits 32-25 | byte 1: bits 24-17 | byte 2: bits 16-9 | byte 3: bits 1-8

Labels are written in octal on the wire. This decoder reports them as the
decimal concatenation of the three octal digits (the way labels are quoted
in equipment manuals), so 0b10_101_011 is label 253, not 171.

The data field carries an 18-bit binary fraction of the label's full-scale
range: 1110...1 is (1/2 + 1/4 + 1/8 + 0/16 + ... + 1/2^18) * RANGE. When
the sign bit is set the value is offset by -RANGE.

Typical usage:
    from pc12perf.avionics.arinc429 import ArincDecoder

    decoder = ArincDecoder()
    word = decoder.decode(b"\\x01\\x40\\x00\\x8b")
    print(word.label, word.value)
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

WORD_SIZE = 4
DATA_BITS = 18
DATA_SCALE = 1 << DATA_BITS

SAT_LABEL = 213  # static air temperature
ALTITUDE_LABEL = 203
BARO_ALTITUDE_LABEL = 204  # baro corrected altitude

DEFAULT_FULL_SCALE_RANGES: dict[int, float] = {
    SAT_LABEL: 512.0,
    ALTITUDE_LABEL: 131072.0,
    BARO_ALTITUDE_LABEL: 131072.0,
}

# From the ARINC-429 label assignments, not confirmed against the gateways
LABEL_NAMES: dict[int, str] = {
    1: "Distance To Go",
    2: "Time To Go",
    10: "Latitude",
    11: "Longitude",
    12: "Ground Speed",
    14: "Magnetic Heading",
    15: "Wind Speed",
    16: "Wind Direction",
    56: "ETA",
    74: "Zero Fuel Weight",
    75: "Gross Weight",
    113: "Spare",
    114: "Desired Track",
    115: "Waypoint Bearing",
    125: "Universal Time Coordinated (UTC)",
    147: "Discrete Status 4 EFIS",
    150: "Universal Time Constant (UTC)",
    152: "Cabin Pressure",
    203: "Altitude",
    204: "Baro Altitude",
    205: "Indicated Airspeed",
    210: "True Airspeed",
    213: "Static Air Temperature",
    244: "Fuel Flow",
    247: "Fuel Flow",
    251: "Distance to Go",
    252: "Time to Go",
    260: "Date",
    303: "Application Dependent",
    304: "Application Dependent",
    305: "Application Dependent",
    306: "Application Dependent",
    307: "Application Dependent",
    310: "Present Position - Latitude",
    311: "Present Position - Longitude",
    312: "Ground Speed",
    313: "Track Angle True",
    314: "True Heading",
    315: "Wind Speed",
    316: "Wind Direction",
    320: "Magnetic Heading",
    351: "Maintenance Data",
    352: "Maintenance Data",
    371: "General Aviation Equipment Identifier",
}


def label_name(label: int) -> str:
    """Get the descriptive name of a label, for diagnostics."""
    return LABEL_NAMES.get(label, "Unknown")


def decode_label(label_byte: int) -> int:
    """Decode the label byte as three octal digits in decimal positions.

    Args:
        label_byte: Last byte of the word (0-255).

    Returns:
        Label number 0-377 as written in octal notation.
    """
    return ((label_byte >> 6) & 0x03) * 100 + ((label_byte >> 3) & 0x07) * 10 + (label_byte & 0x07)


@dataclass(frozen=True)
class ArincWord:
    """Decoded ARINC-429 word.

    Attributes:
        label: Label number (octal digits read as decimal)
        sign: Sign bit (0 or 1)
        magnitude: 18-bit unsigned data field
        full_scale: Full-scale range for this label, None if not configured
    """

    label: int
    sign: int
    magnitude: int
    full_scale: float | None = None

    @property
    def value(self) -> float | None:
        """Signed scaled value, or None for labels without a range."""
        if self.full_scale is None:
            return None
        scaled = self.magnitude / DATA_SCALE * self.full_scale
        if self.sign:
            return -self.full_scale + scaled
        return scaled

    def as_int(self) -> int | None:
        """Value as an integer, the scaled magnitude truncated before the sign offset."""
        if self.full_scale is None:
            return None
        scaled = int(self.magnitude / DATA_SCALE * self.full_scale)
        return scaled - int(self.full_scale) if self.sign else scaled

    @property
    def name(self) -> str:
        return label_name(self.label)


class ArincDecoder:
    """Decode 4-byte ARINC-429 words as received from a gateway.

    Both the full-scale range table and the sign bit position are
    configurable: gateway firmware revisions disagree on the altitude label
    (203 or 204), and the sign bit has been read both as bit 4 and bit 5 of
    the first byte.

    Examples:
        >>> decoder = ArincDecoder()
        >>> word = decoder.decode(bytes([0x00, 0x00, 0x00, 0x8B]))
        >>> word.label
        213
    """

    def __init__(
        self,
        full_scale_ranges: Mapping[int, float] | None = None,
        sign_bit: int = 4,
    ) -> None:
        """Initialize the decoder.

        Args:
            full_scale_ranges: Full-scale range per label. Labels missing from
                the table are decoded for identification only.
            sign_bit: Bit position (0 = LSB) of the sign bit in byte 0.

        Raises:
            ValueError: If sign_bit overlaps the data field or is out of range.
        """
        if not 4 <= sign_bit <= 7:
            raise ValueError(f"Sign bit must be in bits 4-7 of byte 0, got {sign_bit}")

        self.full_scale_ranges = dict(
            DEFAULT_FULL_SCALE_RANGES if full_scale_ranges is None else full_scale_ranges
        )
        self.sign_bit = sign_bit

    def decode(self, word: bytes) -> ArincWord:
        """Decode one word.

        Args:
            word: Exactly 4 bytes as received.

        Returns:
            Decoded word.

        Raises:
            ValueError: If word is not 4 bytes long.
        """
        if len(word) != WORD_SIZE:
            raise ValueError(f"ARINC-429 word must be {WORD_SIZE} bytes, got {len(word)}")

        b0, b1, b2, b3 = word
        label = decode_label(b3)
        magnitude = ((b0 & 0x0F) << 14) | (b1 << 6) | ((b2 >> 2) & 0x3F)
        sign = (b0 >> self.sign_bit) & 0x01

        decoded = ArincWord(
            label=label,
            sign=sign,
            magnitude=magnitude,
            full_scale=self.full_scale_ranges.get(label),
        )
        logger.debug("ARINC-429 label: %d (%s) value: %s", label, decoded.name, decoded.value)
        return decoded


def encode(label: int, value: float, full_scale: float, sign_bit: int = 4) -> bytes:
    """Encode a value into a 4-byte word, the inverse of ArincDecoder.decode.

    Gateway simulators and tests use this to produce traffic. Values are
    quantized to full_scale / 2^18.

    Args:
        label: Label as octal digits read in decimal (e.g. 213).
        value: Value in [-full_scale, full_scale).
        full_scale: Full-scale range of the label.
        sign_bit: Bit position of the sign bit in byte 0.

    Returns:
        4 bytes in gateway order.

    Raises:
        ValueError: If the label has a digit that is not octal or the value is
            out of range.
    """
    d2, d1, d0 = label // 100, (label // 10) % 10, label % 10
    if d2 > 3 or d1 > 7 or d0 > 7:
        raise ValueError(f"Label {label} is not a valid octal label")
    if not -full_scale <= value < full_scale:
        raise ValueError(f"Value {value} outside full-scale range {full_scale}")

    sign = 1 if value < 0 else 0
    offset = value + full_scale if sign else value
    magnitude = min(round(offset / full_scale * DATA_SCALE), DATA_SCALE - 1)

    b0 = (sign << sign_bit) | ((magnitude >> 14) & 0x0F)
    b1 = (magnitude >> 6) & 0xFF
    b2 = (magnitude & 0x3F) << 2
    b3 = (d2 << 6) | (d1 << 3) | d0
    return bytes([b0, b1, b2, b3])
