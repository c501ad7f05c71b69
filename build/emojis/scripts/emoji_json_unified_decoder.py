# ./scripts/emoji_json_unified_decoder.py
import re

# A token is one code point written in hexadecimal, e.g. "1F600" or "200D".
HEX_TOKEN_PATTERN = re.compile(r'[0-9A-Fa-f]+')
TOKEN_SEPARATOR = '-'

SUPPLEMENTARY_START = 0x10000
MAX_CODE_POINT = 0x10FFFF
HIGH_SURROGATE_START = 0xD800
LOW_SURROGATE_START = 0xDC00
SURROGATE_END = 0xDFFF


class InvalidCodePointError(ValueError):
    """Raised when a 'unified' string holds a token that is not a usable code point."""

    def __init__(self, token, unified=None, reason="not a hexadecimal code point"):
        self.token = token
        self.unified = unified
        self.reason = reason
        message = f"Invalid code point token '{token}': {reason}"
        if unified is not None and unified != token:
            message += f" (in '{unified}')"
        super().__init__(message)


def code_units(code_point):
    """
    Returns the UTF-16 code units for a single code point.

    Supplementary code points (U+10000 to U+10FFFF) become a high/low
    surrogate pair, everything else is a single unit equal to the code point.
    """
    if SUPPLEMENTARY_START <= code_point <= MAX_CODE_POINT:
        offset = code_point - SUPPLEMENTARY_START
        high_surrogate = offset // 0x400 + HIGH_SURROGATE_START
        low_surrogate = offset % 0x400 + LOW_SURROGATE_START
        return [high_surrogate, low_surrogate]
    return [code_point]


def parse_code_point(token, unified=None):
    """Parses one hexadecimal token, rejecting anything that is not a Unicode scalar value."""
    if not isinstance(token, str) or not HEX_TOKEN_PATTERN.fullmatch(token):
        raise InvalidCodePointError(token, unified)

    code_point = int(token, 16)
    if code_point > MAX_CODE_POINT:
        raise InvalidCodePointError(token, unified, "above U+10FFFF")
    if HIGH_SURROGATE_START <= code_point <= SURROGATE_END:
        raise InvalidCodePointError(token, unified, "lone surrogate")
    return code_point


def units_to_text(units):
    """Joins UTF-16 code units back into a Python string, pairing surrogates up."""
    raw = ''.join(chr(unit) for unit in units)
    return raw.encode('utf-16-le', 'surrogatepass').decode('utf-16-le')


def decode_code_point(token):
    """Decodes a single hexadecimal token, e.g. "1F600" -> "😀"."""
    return units_to_text(code_units(parse_code_point(token)))


def decode_unified(unified):
    """
    Converts a 'unified' string into the emoji character(s) it describes.

    Composite emojis (flags, skin tones, ZWJ sequences) are stored as several
    code points separated by a hyphen, e.g. "1F9D1-200D-1F373". Each part is
    decoded in order and the results are concatenated.
    """
    if not isinstance(unified, str):
        raise InvalidCodePointError(unified, None, "expected a string")

    units = []
    for token in unified.split(TOKEN_SEPARATOR):
        units.extend(code_units(parse_code_point(token, unified)))
    return units_to_text(units)
