"""
verify.py - Drift-tolerant, timing-safe verification of submitted codes.
"""

from typing import Optional, Union
import logging

from .base32 import decode
from .codes import derive_code, time_step
from .config import DEFAULT_DIGITS, DEFAULT_DISCREPANCY, check_discrepancy

logger = logging.getLogger(__name__)


def timing_safe_equals(expected: str, submitted: str) -> bool:
    """
    Compare two strings without stopping at the first differing character.

    Strings of different length are unequal straight away; only the length
    leaks. Otherwise the XOR of every character pair is OR-ed into one
    accumulator that is checked once at the end.
    """
    if len(expected) != len(submitted):
        return False
    result = 0
    for x, y in zip(expected, submitted):
        result |= ord(x) ^ ord(y)
    return result == 0


def verify_code(
    secret: Union[str, bytes],
    code: str,
    discrepancy: int = DEFAULT_DISCREPANCY,
    reference_step: Optional[int] = None,
    digits: int = DEFAULT_DIGITS,
) -> bool:
    """
    Check a user-submitted TOTP code against [ref - d, ref + d].

    A code of the wrong type or length is rejected before any decoding or
    HMAC work. Malformed and mismatched codes both give False.

    Offsets -d..+d are walked in order, 2d + 1 candidates in total. Steps
    below zero have no code and are skipped, so all 2d + 1 are derived only
    when reference_step >= discrepancy.

    Arguments:
        secret: Base32 secret, or already decoded key bytes
        code: submitted code (untrusted)
        discrepancy: accepted steps on each side of the reference step
        reference_step: time step to check around (None -> current step)
        digits: expected code width

    Raises:
        InvalidDiscrepancy: discrepancy < 0
        Base32DecodeError: secret is not valid Base32
    """
    if not isinstance(code, str) or len(code) != digits:
        return False
    check_discrepancy(discrepancy)

    key = decode(secret) if isinstance(secret, str) else bytes(secret)
    if reference_step is None:
        reference_step = time_step()

    for offset in range(-discrepancy, discrepancy + 1):
        step = reference_step + offset
        # steps before the epoch have no code
        if step < 0:
            continue
        if timing_safe_equals(derive_code(key, step, digits), code):
            logger.debug("TOTP code accepted at offset %+d", offset)
            return True
    return False
