"""MAC address value type and notations."""

import re
from dataclasses import dataclass
from enum import Enum

from .errors import MAC_HEX_LENGTH, InvalidHexCharacter, InvalidLength

_SEPARATORS = re.compile(r"[:\-\. ]")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class Notation(Enum):
    """Output layout of a MAC address."""

    STANDARD = "standard"  # xx:xx:xx:xx:xx:xx
    CISCO = "cisco"  # xxxx.xxxx.xxxx
    WINDOWS = "windows"  # xx-xx-xx-xx-xx-xx
    BARE = "bare"  # xxxxxxxxxxxx

    @property
    def delimiter(self) -> str:
        return _LAYOUTS[self][0]

    @property
    def group_size(self) -> int:
        """Hex characters per group."""
        return _LAYOUTS[self][1]


_LAYOUTS = {
    Notation.STANDARD: (":", 2),
    Notation.CISCO: (".", 4),
    Notation.WINDOWS: ("-", 2),
    Notation.BARE: ("", 12),
}


class CasePolicy(Enum):
    """Letter case applied to rendered hex digits."""

    PRESERVE = "preserve"
    UPPER = "upper"
    LOWER = "lower"


@dataclass(frozen=True)
class MacAddress:
    """
    Parsed MAC address.

    Keeps the six octets plus one case flag per input hex character, so that
    rendering with CasePolicy.PRESERVE reproduces the original casing
    character by character (0xAb keeps "A" upper and "b" lower).
    """

    octets: tuple[int, ...]
    original_case: tuple[bool, ...]

    @classmethod
    def parse(cls, value: str) -> "MacAddress":
        """
        Parse a MAC address in any supported notation.

        Supported input formats:
        - AA:BB:CC:DD:EE:FF
        - AA-BB-CC-DD-EE-FF
        - AABB.CCDD.EEFF (Cisco)
        - AABBCCDDEEFF

        Raises:
            InvalidLength: stripped value is not 12 characters long
            InvalidHexCharacter: stripped value contains a non-hex character
        """
        cleaned = _SEPARATORS.sub("", value)

        if len(cleaned) != MAC_HEX_LENGTH:
            raise InvalidLength(len(cleaned), value=value)

        for position, char in enumerate(cleaned):
            if char not in _HEX_DIGITS:
                raise InvalidHexCharacter(char, position, value=value)

        octets = tuple(int(cleaned[i : i + 2], 16) for i in range(0, MAC_HEX_LENGTH, 2))
        original_case = tuple(char in "ABCDEF" for char in cleaned)
        return cls(octets=octets, original_case=original_case)

    def hex_chars(self, case_policy: CasePolicy = CasePolicy.PRESERVE) -> str:
        """Return the twelve hex characters with the case policy applied."""
        digits = "".join(f"{octet:02x}" for octet in self.octets)

        if case_policy is CasePolicy.UPPER:
            return digits.upper()
        if case_policy is CasePolicy.LOWER:
            return digits

        return "".join(
            char.upper() if upper else char
            for char, upper in zip(digits, self.original_case)
        )

    def format(
        self,
        notation: Notation = Notation.STANDARD,
        case_policy: CasePolicy = CasePolicy.PRESERVE,
    ) -> str:
        """
        Render the address in the given notation.

        Example: aabbccddeeff -> aabb.ccdd.eeff (Notation.CISCO)
        """
        digits = self.hex_chars(case_policy)
        size = notation.group_size
        groups = [digits[i : i + size] for i in range(0, MAC_HEX_LENGTH, size)]
        return notation.delimiter.join(groups)

    def __str__(self) -> str:
        return self.format()
