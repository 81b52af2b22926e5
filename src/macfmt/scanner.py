"""Detection of MAC address candidates in free text."""

import logging
import re
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

_HEX = "[0-9A-Fa-f]"

# Alternatives are tried in priority order at each position:
# colon/dash pairs, then Cisco dotted quads, then a bare 12-digit run.
# A candidate may not touch further hex digits on either side.
MAC_PATTERN = re.compile(
    rf"""
    (?<![0-9A-Fa-f])
    (?:
        {_HEX}{{2}}(?P<sep>[:-]){_HEX}{{2}}(?:(?P=sep){_HEX}{{2}}){{4}}
      | {_HEX}{{4}}\.{_HEX}{{4}}\.{_HEX}{{4}}
      | {_HEX}{{12}}
    )
    (?![0-9A-Fa-f])
    """,
    re.VERBOSE,
)


def find_mac_addresses(text: str) -> Iterator[str]:
    """
    Yield MAC-shaped substrings of text, left to right.

    Supported formats:
    - xx:xx:xx:xx:xx:xx / xx-xx-xx-xx-xx-xx (one separator kind per match)
    - xxxx.xxxx.xxxx
    - xxxxxxxxxxxx (exactly 12 hex digits)
    """
    for match in MAC_PATTERN.finditer(text):
        yield match.group()


def scan_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (line_number, candidate) for every candidate in lines."""
    for line_number, line in enumerate(lines, start=1):
        for candidate in find_mac_addresses(line):
            logger.debug(
                f"Candidate on line {line_number}: {candidate}",
                extra={"mac": candidate, "line": line_number},
            )
            yield line_number, candidate
