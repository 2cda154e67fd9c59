import sys
import logging
import dataclasses as dt

from typing import Any, Optional, TextIO
from collections.abc import Mapping

from . import vt100

_logger = logging.getLogger(__name__)


def _requireStr(field: str, value: Any):
    if not isinstance(value, str) or len(value) == 0:
        raise ValueError(f"Banner field '{field}' must be a non-empty string")


# --- Version ---------------------------------------------------------------- #


@dt.dataclass
class VersionBanner:
    """
    Prints a one-line `name vX.Y.Z` banner when `--version` (or the
    `shorthand` short flag) was passed.

    Attributes:
        name: The program name.
        version: The program version.
        shorthand: An optional single letter short flag, e.g. "v" for "-v".
        alwaysPrint: Print the banner even when no flag was passed.
        exit: Exit with status 0 after printing.
    """

    name: str
    version: str
    shorthand: Optional[str] = None
    alwaysPrint: bool = False
    exit: bool = True

    def __post_init__(self):
        _requireStr("name", self.name)
        _requireStr("version", self.version)
        if self.shorthand is not None and (
            not isinstance(self.shorthand, str) or len(self.shorthand) != 1
        ):
            raise ValueError("Banner field 'shorthand' must be a single character")

    def requested(self, options: Mapping[str, Any]) -> bool:
        if self.alwaysPrint or "version" in options:
            return True
        return self.shorthand is not None and self.shorthand in options

    def format(self) -> str:
        return f"{self.name} v{self.version}"

    def show(self, options: Mapping[str, Any], out: Optional[TextIO] = None) -> bool:
        """
        Prints the banner if it was requested.

        Args:
            options: The parsed options.
            out: Where to print, stdout by default.

        Returns:
            True if the banner was printed.

        Raises:
            SystemExit: With status 0 after printing, unless `exit` is false.
        """
        if not self.requested(options):
            return False

        print(self.format(), file=out or sys.stdout)
        if self.exit:
            _logger.info("Version banner printed, exiting")
            sys.exit(0)
        return True


def version(options: Mapping[str, Any], out: Optional[TextIO] = None, **kwargs) -> bool:
    return VersionBanner(**kwargs).show(options, out)


# --- Help ------------------------------------------------------------------- #


@dt.dataclass
class HelpEntry:
    name: str
    description: str = ""


@dt.dataclass
class HelpBanner:
    """
    Prints a usage line and an aligned options table when `--help` or
    `-h` was passed.
    """

    entries: list[HelpEntry] = dt.field(default_factory=list)
    usage: Optional[str] = None
    url: Optional[str] = None
    exit: bool = True

    def __post_init__(self):
        entries = []
        for entry in self.entries:
            if isinstance(entry, Mapping):
                entry = HelpEntry(**entry)
            _requireStr("name", entry.name)
            entries.append(entry)
        self.entries = entries

    def requested(self, options: Mapping[str, Any]) -> bool:
        return "help" in options or "h" in options

    def lines(self) -> list[str]:
        res = []
        if self.usage:
            res.append(f"Usage: {self.usage}")
            res.append("")

        if self.entries:
            width = max(len(entry.name) for entry in self.entries)
            res.append(f"{vt100.BOLD + vt100.WHITE}Options{vt100.RESET}:")
            for entry in self.entries:
                res.append(
                    vt100.indent(
                        f"{vt100.GREEN}{entry.name.ljust(width)}{vt100.RESET}  {entry.description}"
                    )
                )
            res.append("")

        if self.url:
            res.append(f"Documentation: {self.url}")

        return res

    def show(self, options: Mapping[str, Any], out: Optional[TextIO] = None) -> bool:
        if not self.requested(options):
            return False

        print("\n".join(self.lines()), file=out or sys.stdout)
        if self.exit:
            _logger.info("Help banner printed, exiting")
            sys.exit(0)
        return True


def help(options: Mapping[str, Any], out: Optional[TextIO] = None, **kwargs) -> bool:
    return HelpBanner(**kwargs).show(options, out)
