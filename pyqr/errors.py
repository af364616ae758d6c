"""
Error types raised by the QR encoding pipeline.

Every failure is reported synchronously, before any output is produced.
"""


class QRError(ValueError):
    """Base class for all encoding errors."""


class DataTooLong(QRError):
    """
    No version in the requested range can hold the data.

    @param required: Data codewords needed by the segment
    @param available: Data codewords available at the largest allowed version
    """

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Data too long: needs {required} data codewords, "
            f"at most {available} available"
        )


class UnsupportedCharacter(QRError):
    """A character falls outside the table of the requested mode."""

    def __init__(self, character: str, position: int, mode):
        self.character = character
        self.position = position
        self.mode = mode
        super().__init__(
            f"Character {character!r} at position {position} "
            f"cannot be encoded in {mode.name.lower()} mode"
        )


class InvalidOption(QRError):
    """An encode option is out of range."""

    def __init__(self, option: str, value, reason: str = ""):
        self.option = option
        self.value = value
        message = f"Invalid value for {option}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
