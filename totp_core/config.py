"""
config.py - Defaults and the immutable settings value for totp_core.

Nothing here is mutated at runtime. Operations take digits, discrepancy and
secret length as explicit arguments; OtpSettings only bundles them for
callers (the CLI) that want to read them from the environment once.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import InvalidCodeLength, InvalidDiscrepancy, InvalidSecretLength, InvalidSetting

# --- Config / constants ----------------------------------------------------
DEFAULT_DIGITS = 6          # standard: 6 digits
MIN_DIGITS = 6
DEFAULT_TIME_STEP = 30      # TOTP step (seconds)
DEFAULT_SECRET_LENGTH = 16  # Base32 characters / random bytes drawn
MIN_SECRET_LENGTH = 10      # 80 bits
MAX_SECRET_LENGTH = 80      # 640 bits
DEFAULT_DISCREPANCY = 1     # +/- one step of clock drift

ENV_DIGITS = "TOTP_DIGITS"
ENV_DISCREPANCY = "TOTP_DISCREPANCY"
ENV_SECRET_LENGTH = "TOTP_SECRET_LENGTH"


def check_digits(digits: int) -> int:
    if digits < MIN_DIGITS:
        raise InvalidCodeLength(f"code length must be at least {MIN_DIGITS} digits, got {digits}")
    return digits


def check_secret_length(length: int) -> int:
    if not MIN_SECRET_LENGTH <= length <= MAX_SECRET_LENGTH:
        raise InvalidSecretLength(
            f"secret length must be between {MIN_SECRET_LENGTH} and "
            f"{MAX_SECRET_LENGTH}, got {length}"
        )
    return length


def check_discrepancy(discrepancy: int) -> int:
    if discrepancy < 0:
        raise InvalidDiscrepancy(f"discrepancy must be >= 0, got {discrepancy}")
    return discrepancy


@dataclass(frozen=True)
class OtpSettings:
    """
    Immutable bundle of the tunable TOTP parameters.

    Attributes:
        digits: code width, at least MIN_DIGITS
        discrepancy: accepted steps before/after the reference step
        secret_length: characters in a freshly created secret
    """

    digits: int = DEFAULT_DIGITS
    discrepancy: int = DEFAULT_DISCREPANCY
    secret_length: int = DEFAULT_SECRET_LENGTH

    def __post_init__(self):
        check_digits(self.digits)
        check_discrepancy(self.discrepancy)
        check_secret_length(self.secret_length)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "OtpSettings":
        """
        Build settings from TOTP_DIGITS / TOTP_DISCREPANCY / TOTP_SECRET_LENGTH.

        Unset variables keep their defaults. A value that is not an integer
        raises InvalidSetting.
        """
        if environ is None:
            environ = os.environ

        def read(name, default):
            value = environ.get(name, default)
            try:
                return int(value)
            except ValueError as e:
                raise InvalidSetting(f"{name} must be an integer, got {value!r}") from e

        return cls(
            digits=read(ENV_DIGITS, DEFAULT_DIGITS),
            discrepancy=read(ENV_DISCREPANCY, DEFAULT_DISCREPANCY),
            secret_length=read(ENV_SECRET_LENGTH, DEFAULT_SECRET_LENGTH),
        )
