"""
Configuration defaults for pyqr.
"""

# Encoding
DEFAULT_EC_LEVEL = "M"
MIN_VERSION = 1
MAX_VERSION = 40
DEFAULT_MASK = None  # None selects the lowest-penalty mask

# Text rendering
DEFAULT_FG_CHAR = "██"
DEFAULT_BG_CHAR = "  "

# Image rendering
DEFAULT_SCALE = 10  # pixels per module
DEFAULT_BORDER = 4  # quiet zone, in modules
DEFAULT_IMAGE_NAME = "qr_output.png"
FRAME_WIDTH = 10  # pixels
