"""
totp_core package
=================

Create and verify Time-based One-Time Passwords (RFC 6238) compatible with
Google Authenticator, Authy and similar apps.

Core algorithm:
- HOTP (HMAC-based One-Time Password, RFC 4226):
  code = Truncate(HMAC-SHA1(key=secret, msg=counter)) mod 10^digits

- TOTP (Time-based One-Time Password, RFC 6238):
  HOTP with counter = floor(unix_time / 30)

- Dynamic truncation:
  4 bytes of the HMAC taken at offset (last byte & 0x0F), sign bit cleared.

- Verification:
  re-derive the codes for [step - d, step + d] and compare each one with a
  comparison that does not stop at the first differing character.

Usage:
>>> from totp_core import create_secret, build_provisioning_uri, totp, verify_code
>>> secret = create_secret(16)                 # store it on the caller's side
>>> uri = build_provisioning_uri("alice", secret)
>>> code, remaining = totp(secret)
>>> verify_code(secret, code)
True

The library keeps no state and stores nothing: persisting secrets is up to
the caller. QR images are rendered by an injected QrEncoder, for example
totp_core.qr.QrCodeEncoder.
"""
import logging

from .base32 import decode, encode
from .codes import derive_code, hotp, time_step, totp
from .config import OtpSettings
from .errors import (
    Base32DecodeError,
    InvalidCodeLength,
    InvalidDiscrepancy,
    InvalidSecretLength,
    InvalidSetting,
    InvalidTimeStep,
    NoSecureRandom,
    OtpError,
)
from .provisioning import QrEncoder, QrOptions, build_provisioning_uri, provisioning_qr
from .secret import create_secret
from .verify import timing_safe_equals, verify_code

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "decode",
    "encode",
    "derive_code",
    "hotp",
    "time_step",
    "totp",
    "OtpSettings",
    "OtpError",
    "Base32DecodeError",
    "InvalidCodeLength",
    "InvalidDiscrepancy",
    "InvalidSecretLength",
    "InvalidSetting",
    "InvalidTimeStep",
    "NoSecureRandom",
    "QrEncoder",
    "QrOptions",
    "build_provisioning_uri",
    "provisioning_qr",
    "create_secret",
    "timing_safe_equals",
    "verify_code",
]
