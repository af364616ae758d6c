"""
Segment encoding: classify the input text and pack it into payload bits.

The whole text becomes a single segment in one mode, chosen with the
precedence numeric > alphanumeric > byte.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import UnsupportedCharacter
from .tables import Mode

NUMERIC_CHARSET = "0123456789"

# 45-symbol alphanumeric table, index = code value
ALPHANUMERIC_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
ALPHANUMERIC_TABLE = {ch: i for i, ch in enumerate(ALPHANUMERIC_CHARSET)}


@dataclass(frozen=True)
class Segment:
    """
    Mode-tagged payload.

    @param mode: Segment mode
    @param num_chars: Value of the character-count indicator
    @param bits: Payload as a string of '0'/'1'
    """

    mode: Mode
    num_chars: int
    bits: str

    def __len__(self):
        return len(self.bits)


def is_numeric(text: str) -> bool:
    return all(ch in NUMERIC_CHARSET for ch in text)


def is_alphanumeric(text: str) -> bool:
    return all(ch in ALPHANUMERIC_TABLE for ch in text)


def classify(text: str) -> Mode:
    """
    Pick the narrowest mode that covers every character of the text.

    @param text: Input text
    @return: Mode.NUMERIC, Mode.ALPHANUMERIC or Mode.BYTE
    """
    if is_numeric(text):
        return Mode.NUMERIC
    if is_alphanumeric(text):
        return Mode.ALPHANUMERIC
    return Mode.BYTE


def to_bytes(text: str) -> bytes:
    """
    Byte-mode payload for the text.

    Code points up to 255 map to one byte each; any higher code point switches
    the whole text to its UTF-8 expansion.
    """
    try:
        return text.encode("iso-8859-1")
    except UnicodeEncodeError:
        return text.encode("utf-8")


def _check_charset(text: str, mode: Mode, valid) -> None:
    for position, ch in enumerate(text):
        if ch not in valid:
            raise UnsupportedCharacter(ch, position, mode)


def encode_numeric(text: str) -> str:
    """
    Pack digits three at a time: 3 digits -> 10 bits, 2 -> 7 bits, 1 -> 4 bits.

    @param text: String of ASCII digits
    @return: Payload bit string
    """
    _check_charset(text, Mode.NUMERIC, NUMERIC_CHARSET)
    bits = []
    for i in range(0, len(text), 3):
        group = text[i:i + 3]
        width = 3 * len(group) + 1
        bits.append(f"{int(group):0{width}b}")
    return "".join(bits)


def encode_alphanumeric(text: str) -> str:
    """
    Pack character pairs into 11 bits (45 * first + second), a trailing single into 6.

    @param text: String drawn from ALPHANUMERIC_CHARSET
    @return: Payload bit string
    """
    _check_charset(text, Mode.ALPHANUMERIC, ALPHANUMERIC_TABLE)
    bits = []
    for i in range(0, len(text) - 1, 2):
        value = ALPHANUMERIC_TABLE[text[i]] * 45 + ALPHANUMERIC_TABLE[text[i + 1]]
        bits.append(f"{value:011b}")
    if len(text) % 2:
        bits.append(f"{ALPHANUMERIC_TABLE[text[-1]]:06b}")
    return "".join(bits)


def encode_bytes(data: bytes) -> str:
    """Convert a bytes object to a continuous bit string."""
    return "".join(f"{b:08b}" for b in data)


def make_segment(text: str, mode: Optional[Mode] = None) -> Segment:
    """
    Encode the text as a single segment.

    @param text: Input text
    @param mode: Force a mode; None classifies the text
    @return: Segment with its payload bits
    """
    if mode is None:
        mode = classify(text)
    if mode is Mode.NUMERIC:
        return Segment(mode, len(text), encode_numeric(text))
    if mode is Mode.ALPHANUMERIC:
        return Segment(mode, len(text), encode_alphanumeric(text))
    data = to_bytes(text)
    return Segment(Mode.BYTE, len(data), encode_bytes(data))
