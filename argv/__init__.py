import os
import sys
import logging

from . import banner, const, vt100
from .args import (
    Arguments,
    InvalidTokenType,
    Options,
    ParsedArgs,
    isLongOption,
    isOption,
    isShortOption,
    parse,
    sanitizeKey,
)
from .retriever import Retriever, toArray, toBoolean, toNumber, toString

__all__ = [
    "Arguments",
    "InvalidTokenType",
    "Options",
    "ParsedArgs",
    "Retriever",
    "banner",
    "isLongOption",
    "isOption",
    "isShortOption",
    "main",
    "parse",
    "sanitizeKey",
    "toArray",
    "toBoolean",
    "toNumber",
    "toString",
]


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


HELP = [
    banner.HelpEntry("-h, --help", "Show this help message"),
    banner.HelpEntry("-v, --version", "Show current version"),
    banner.HelpEntry("--verbose", "Enable verbose logging"),
]


def _argv() -> list[str]:
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    return (extra.split(" ") if extra else []) + sys.argv[1:]


def _dump(result: ParsedArgs):
    vt100.title(const.ARGV0)
    print()

    vt100.subtitle("Options")
    for key, value in result.options.items():
        print(vt100.indent(f"{vt100.GREEN}{key}{vt100.RESET} = {value!r}"))
    print()

    vt100.subtitle("Arguments")
    for i, value in enumerate(result.arguments):
        print(vt100.indent(f"{vt100.GREEN}{i}{vt100.RESET} = {value!r}"))
    print()


def main() -> int:
    try:
        tokens = _argv()
        logger.setup("--verbose" in tokens)
        result = parse(tokens)

        banner.help(
            result.options,
            usage=f"{const.ARGV0} [options] [arguments...]",
            entries=HELP,
        )
        banner.version(
            result.options,
            name=const.ARGV0,
            version=const.VERSION_STR,
            shorthand="v",
        )

        _dump(result)
        return 0

    except (InvalidTokenType, ValueError) as e:
        logging.exception(e)
        vt100.error(str(e))
        return 1

    except KeyboardInterrupt:
        print()
        return 1
