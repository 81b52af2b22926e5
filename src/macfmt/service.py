"""Reformatting of MAC addresses found in text."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, TextIO

from .config import Config
from .errors import MacAddressError, NoAddressesFound
from .mac_utils import MacAddress
from .scanner import scan_lines

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Summary of a single run."""

    lines: int = 0
    formatted: int = 0

    def __str__(self) -> str:
        return f"Run Summary: lines={self.lines}, formatted={self.formatted}"


class MacFormatService:
    """Scan input text and render every MAC address found."""

    def __init__(self, config: Config):
        self.config = config

    def format_candidate(self, candidate: str) -> str:
        """Parse one scanner candidate and render it."""
        mac = MacAddress.parse(candidate)
        return mac.format(self.config.notation, self.config.case_policy)

    def format_lines(self, lines: Iterable[str], summary: Optional[RunSummary] = None) -> Iterator[str]:
        """
        Yield formatted addresses in input order.

        Raises:
            NoAddressesFound: no candidate in the whole input
            MacAddressError: a scanner candidate failed to parse
        """
        if summary is None:
            summary = RunSummary()

        def counted(source: Iterable[str]) -> Iterator[str]:
            for line in source:
                summary.lines += 1
                yield line

        for line_number, candidate in scan_lines(counted(lines)):
            try:
                formatted = self.format_candidate(candidate)
            except MacAddressError:
                logger.error(
                    f"Scanner produced an unparsable candidate on line {line_number}",
                    extra={"mac": candidate, "line": line_number},
                )
                raise

            logger.debug(
                f"Formatted '{candidate}' as '{formatted}'",
                extra={"mac": formatted, "notation": self.config.notation.value},
            )
            summary.formatted += 1
            yield formatted

        if summary.formatted == 0:
            raise NoAddressesFound()

    def run(self, lines: Iterable[str], output: TextIO) -> RunSummary:
        """Write one formatted address per line to output."""
        summary = RunSummary()
        for formatted in self.format_lines(lines, summary):
            output.write(formatted + "\n")
        logger.info(str(summary))
        return summary
