"""
codes.py - HOTP / TOTP code derivation (RFC 4226 / RFC 6238).

Pure functions only: no file access, no clock reads except when a timestamp
is left to default. HMAC-SHA1 is used, which is what Google Authenticator
and compatible apps expect.
"""

from typing import Optional, Tuple
import hmac
import hashlib
import logging
import struct
import time

from .base32 import decode
from .config import DEFAULT_DIGITS, DEFAULT_TIME_STEP, check_digits
from .errors import InvalidTimeStep

logger = logging.getLogger(__name__)

MAX_STEP = 2 ** 64 - 1  # largest counter that packs into 8 bytes


# --- RFC helpers -----------------------------------------------------------
def int_to_bytes(i: int) -> bytes:
    """
    Pack a counter as the 8-byte big-endian message RFC 4226 requires.

    Example: int_to_bytes(1) -> b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'
    """
    return struct.pack(">Q", i)


def dynamic_truncate(hmac_digest: bytes) -> int:
    """
    Dynamic truncation from RFC 4226 section 5.3.

    - offset = low 4 bits of the last byte
    - read 4 bytes from offset as a big-endian integer
    - clear the sign bit, giving a 31-bit value

    Arguments:
        hmac_digest: HMAC digest (20 bytes for SHA-1)
    """
    offset = hmac_digest[-1] & 0x0F
    return struct.unpack(">I", hmac_digest[offset:offset + 4])[0] & 0x7FFFFFFF


def time_step(timestamp: Optional[float] = None, period: int = DEFAULT_TIME_STEP) -> int:
    """Return floor(timestamp / period); timestamp defaults to now."""
    if timestamp is None:
        timestamp = time.time()
    return int(timestamp // period)


def derive_code(key: bytes, step: int, digits: int = DEFAULT_DIGITS) -> str:
    """
    Derive the numeric code for raw key bytes and a counter / time step.

    Steps:
    1. Message = 8-byte big-endian step
    2. HMAC-SHA1(key, message)
    3. Dynamic truncate -> 31-bit value
    4. value % 10^digits, zero-padded to `digits`

    Arguments:
        key: decoded secret bytes
        step: non-negative counter or TOTP time step
        digits: code width, at least 6

    Returns:
        str: zero-padded code

    Raises:
        InvalidCodeLength: digits < 6
        InvalidTimeStep: step outside [0, 2**64 - 1]
    """
    check_digits(digits)
    if not 0 <= step <= MAX_STEP:
        raise InvalidTimeStep(f"time step must be between 0 and 2**64 - 1, got {step}")

    digest = hmac.new(key, int_to_bytes(step), hashlib.sha1).digest()
    value = dynamic_truncate(digest)
    return str(value % (10 ** digits)).zfill(digits)


def hotp(secret_b32: str, counter: int, digits: int = DEFAULT_DIGITS) -> str:
    """
    HOTP code for a Base32 secret and an event counter.

    Raises:
        Base32DecodeError: if the secret is not valid Base32
    """
    return derive_code(decode(secret_b32), counter, digits)


def totp(
    secret_b32: str,
    timestamp: Optional[float] = None,
    period: int = DEFAULT_TIME_STEP,
    digits: int = DEFAULT_DIGITS,
) -> Tuple[str, int]:
    """
    TOTP code for a Base32 secret: HOTP with counter = floor(timestamp / period).

    Arguments:
        secret_b32: Base32 secret
        timestamp: epoch seconds (None -> time.time())
        period: step length in seconds, 30 by default
        digits: code width

    Returns:
        (code, remaining_seconds)
        - code: OTP string
        - remaining_seconds: seconds until the next step starts
    """
    if timestamp is None:
        timestamp = int(time.time())
    step = time_step(timestamp, period)
    code = hotp(secret_b32, step, digits)
    remaining = period - int(timestamp) % period
    logger.debug("TOTP step=%d, remaining=%ds", step, remaining)
    return code, remaining
