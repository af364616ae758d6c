"""
pyqr: QR code generation following ISO/IEC 18004.
"""

from .encoder import QRCode, encode
from .errors import DataTooLong, InvalidOption, QRError, UnsupportedCharacter
from .tables import ErrorCorrectionLevel, Mode

__all__ = [
    "QRCode",
    "encode",
    "ErrorCorrectionLevel",
    "Mode",
    "QRError",
    "DataTooLong",
    "InvalidOption",
    "UnsupportedCharacter",
]
