"""
base32.py - RFC 4648 Base32 codec for TOTP secrets.

Authenticator apps exchange secrets as Base32 text (A-Z, 2-7, '=' padding).
Decoding is implemented here instead of calling base64.b32decode because the
padding rules differ:

- only 0, 1, 3, 4 or 6 '=' characters are accepted (2 and 5 can never come
  out of a real encoder),
- the padding must be one run at the very end,
- unpadded input of any length is accepted and a trailing group of fewer
  than 8 bits is dropped instead of rejected.

The last point is a compatibility choice so that secrets typed without
padding still work. Stricter decoders may reject such input.
"""

import base64
import logging

from .errors import Base32DecodeError

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PAD = "="
# pad run length -> full bytes in the last 8-symbol block: 0->5, 1->4, 3->3, 4->2, 6->1
VALID_PAD_COUNTS = (0, 1, 3, 4, 6)

_REVERSE = {symbol: value for value, symbol in enumerate(ALPHABET)}


def decode(text: str, casefold: bool = False) -> bytes:
    """
    Decode Base32 text into raw bytes.

    Steps:
    1. Count '=' characters; the count must be in VALID_PAD_COUNTS
    2. The padding must be contiguous at the end of the text
    3. Strip padding, map every symbol to its 5-bit value
    4. Concatenate the bits in symbol order and cut them into bytes,
       dropping a trailing partial byte

    Arguments:
        text: Base32 string
        casefold: accept lower-case symbols (off by default)

    Returns:
        bytes: decoded key; b"" for empty input

    Raises:
        Base32DecodeError: bad pad count, misplaced padding or unknown symbol
    """
    if not text:
        return b""
    if casefold:
        text = text.upper()

    pad_count = text.count(PAD)
    if pad_count not in VALID_PAD_COUNTS:
        raise Base32DecodeError(f"invalid Base32 padding: {pad_count} pad characters")
    if pad_count and not text.endswith(PAD * pad_count):
        raise Base32DecodeError("Base32 padding must be at the end of the input")

    symbols = text[: len(text) - pad_count]
    out = bytearray()
    # 8 symbols = 40 bits = 5 bytes, so block boundaries are byte-aligned and
    # a single running bit buffer gives the same result as per-block packing
    buffer = 0
    bits = 0
    for index, symbol in enumerate(symbols):
        value = _REVERSE.get(symbol)
        if value is None:
            raise Base32DecodeError(f"invalid Base32 symbol at position {index}")
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1

    if bits:
        logger.debug("Base32 decode dropped %d trailing bits", bits)
    return bytes(out)


def encode(data: bytes) -> str:
    """
    Encode raw bytes as padded Base32 text.

    The last 5-bit group is zero-filled on the right and the output is
    padded with '=' to a multiple of 8 symbols, which is exactly what
    base64.b32encode produces.
    """
    return base64.b32encode(bytes(data)).decode("ascii")
