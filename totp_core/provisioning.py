"""
provisioning.py - otpauth:// URIs and the QR rendering seam.

The core only builds the URI string. Turning it into an image is the job of
a QrEncoder passed in by the caller; totp_core.qr.QrCodeEncoder is the
implementation backed by the `qrcode` library.
"""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class QrOptions:
    """
    Rendering options handed to a QrEncoder.

    Attributes:
        size: target image width/height in pixels
        margin: quiet zone around the code, in modules
        level: error correction level, one of L, M, Q, H
    """

    size: int = 200
    margin: int = 0
    level: str = "M"


class QrEncoder(Protocol):
    def encode(self, data: str, options: QrOptions) -> str:
        """Render `data` as a QR image and return it as a data URI."""
        ...


def build_provisioning_uri(account_name: str, secret_b32: str) -> str:
    """
    Build the otpauth URI that authenticator apps scan.

    Returns "otpauth://totp/{account_name}?secret={secret_b32}".

    Note: nothing is percent-encoded. Account names containing '/', '?',
    '&', '#', spaces or other reserved characters must be encoded by the
    caller (e.g. urllib.parse.quote) before being passed in.
    """
    return f"otpauth://totp/{account_name}?secret={secret_b32}"


def provisioning_qr(
    account_name: str,
    secret_b32: str,
    encoder: QrEncoder,
    options: Optional[QrOptions] = None,
) -> str:
    """Render the provisioning URI with the given encoder."""
    uri = build_provisioning_uri(account_name, secret_b32)
    return encoder.encode(uri, options or QrOptions())
