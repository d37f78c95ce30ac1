"""
secret.py - Random Base32 secrets for provisioning new authenticators.
"""

import logging
import os

from .base32 import ALPHABET
from .config import DEFAULT_SECRET_LENGTH, check_secret_length
from .errors import NoSecureRandom

logger = logging.getLogger(__name__)


def create_secret(length: int = DEFAULT_SECRET_LENGTH) -> str:
    """
    Create a random Base32 secret of `length` characters.

    - `length` random bytes are drawn from os.urandom (CSPRNG).
    - Each byte is reduced to its low 5 bits and used as an index into the
      Base32 alphabet, so every character carries 5 bits of entropy.
    - There is no fallback to a weaker generator: if the platform has no
      secure source the call fails.

    Arguments:
        length: number of characters, between 10 and 80

    Returns:
        str: Base32 secret without padding (e.g. "JBSWY3DPEHPK3PXP")

    Raises:
        InvalidSecretLength: length outside [10, 80]
        NoSecureRandom: os.urandom has no randomness source
    """
    check_secret_length(length)
    try:
        raw = os.urandom(length)
    except NotImplementedError as e:
        raise NoSecureRandom("no source of secure randomness available") from e

    logger.debug("Generated %d-character secret (%d bits)", length, 5 * length)
    return "".join(ALPHABET[b & 31] for b in raw)
