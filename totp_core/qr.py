"""
qr.py - QrEncoder implementation on top of the `qrcode` library.

Produces a PNG image of the provisioning URI as a base64 data URI, ready to
drop into an <img src="..."> tag.
"""

import base64
import io
import logging

import qrcode
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q

from .provisioning import QrOptions

logger = logging.getLogger(__name__)

ERROR_CORRECTION_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


class QrCodeEncoder:
    """Render QR codes as PNG data URIs."""

    def encode(self, data: str, options: QrOptions) -> str:
        # unknown levels fall back to medium
        level = ERROR_CORRECTION_LEVELS.get(options.level.upper(), ERROR_CORRECT_M)
        border = max(options.margin, 0)

        qr = qrcode.QRCode(version=None, error_correction=level, box_size=1, border=border)
        qr.add_data(data)
        qr.make(fit=True)

        # largest module size that keeps the image within options.size
        modules = qr.modules_count + 2 * border
        qr.box_size = max(options.size // modules, 1)
        logger.debug("QR version=%d, modules=%d, box_size=%d", qr.version, modules, qr.box_size)

        img = qr.make_image(fill_color="black", back_color="white")

        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        img_str = base64.b64encode(buffer.getvalue()).decode("ascii")
        return f"data:image/png;base64,{img_str}"
