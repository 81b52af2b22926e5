"""Error types raised by macfmt."""

from typing import Optional

MAC_HEX_LENGTH = 12


class MacFmtError(Exception):
    """Base class for every fatal macfmt condition."""


class MacAddressError(MacFmtError, ValueError):
    """Candidate string could not be parsed as a MAC address."""


class InvalidLength(MacAddressError):
    """Hex length after separator removal is not 12."""

    def __init__(self, actual: int, expected: int = MAC_HEX_LENGTH, value: Optional[str] = None):
        self.actual = actual
        self.expected = expected
        self.value = value
        message = f"Invalid MAC address length: expected {expected} hex characters, got {actual}"
        if value is not None:
            message += f" in '{value}'"
        super().__init__(message)


class InvalidHexCharacter(MacAddressError):
    """Non-hex character found in a separator-stripped candidate."""

    def __init__(self, char: str, position: int, value: Optional[str] = None):
        self.char = char
        self.position = position
        self.value = value
        message = f"Invalid hex character '{char}' at position {position}"
        if value is not None:
            message += f" in '{value}'"
        super().__init__(message)


class NoAddressesFound(MacFmtError):
    """Scanner yielded no candidates across the whole input."""

    def __init__(self, message: str = "No MAC addresses found in input"):
        super().__init__(message)


class InputUnreadable(MacFmtError):
    """Input file or stream could not be read."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{reason}: {source}")
