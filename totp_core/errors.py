"""
errors.py - Exception types raised by totp_core.

Every error derives from OtpError, itself a ValueError, so callers that
already catch ValueError around secret decoding keep working.

Verification never raises for a malformed submitted code: verify_code()
just returns False, the same answer as for a wrong code.
"""


class OtpError(ValueError):
    """Base class for all totp_core errors."""


class InvalidSecretLength(OtpError):
    """Requested secret length is outside the allowed byte range."""


class NoSecureRandom(OtpError):
    """The platform has no cryptographically secure random source."""


class Base32DecodeError(OtpError):
    """Malformed padding, misplaced padding or a symbol outside the alphabet."""


class InvalidCodeLength(OtpError):
    """Requested code width is below the minimum number of digits."""


class InvalidDiscrepancy(OtpError):
    """Verification window is negative."""


class InvalidTimeStep(OtpError):
    """Counter / time step does not fit in an unsigned 64-bit integer."""


class InvalidSetting(OtpError):
    """A TOTP_* environment variable is not an integer."""
