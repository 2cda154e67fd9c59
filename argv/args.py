import sys
import logging
import dataclasses as dt
import typing as tp

from typing import Any, Optional, Iterator
from collections.abc import MutableMapping, MutableSequence

from .retriever import Key, PrimitiveValue, Retriever, toString

_logger = logging.getLogger(__name__)


class InvalidTokenType(TypeError):
    """Raised when a token is not a `str`, `int`, `float` or `bool`."""

    token: Any

    def __init__(self, token: Any):
        self.token = token
        super().__init__(
            f"CLI arguments must be of type str|int|float|bool, but got {type(token).__name__}."
        )


# --- Keys ------------------------------------------------------------------- #


def sanitizeKey(key: str) -> str:
    """
    Turns a raw long option name into a camelCase key.

    Hyphens capitalize the next kept letter, but only once something has
    been kept, so "5-fifty" becomes "fifty" and not "Fifty". Characters
    other than a-z (after lowercasing) are dropped.
    """
    result = ""
    capitalizeNext = False

    for c in key.lower():
        if c == "-":
            if len(result) > 0:
                capitalizeNext = True
            continue

        if c < "a" or c > "z":
            continue

        if capitalizeNext:
            result += c.upper()
            capitalizeNext = False
        else:
            result += c

    return result


def _isShortKey(key: str) -> bool:
    return ("a" <= key <= "z") or ("A" <= key <= "Z")


# --- Tokens ----------------------------------------------------------------- #


def isPrimitive(token: Any) -> bool:
    return isinstance(token, (str, int, float, bool))


def isLongOption(token: Any) -> bool:
    return isinstance(token, str) and token.startswith("--")


def isShortOption(token: Any) -> bool:
    return isinstance(token, str) and token.startswith("-") and len(token) == 2


def isOption(token: Any) -> bool:
    if not isinstance(token, str):
        return False

    return isLongOption(token) or isShortOption(token)


class Tokens:
    """
    A cursor over a list of tokens with one token of lookahead.
    """

    _src: list[Any]
    _off: int

    def __init__(self, src: tp.Sequence[Any]):
        self._src = list(src)
        self._off = 0

    def eof(self) -> bool:
        return self._off >= len(self._src)

    def peek(self) -> Any:
        return self._src[self._off]

    def next(self) -> PrimitiveValue:
        """
        Takes the current token and advances past it.

        Raises:
            InvalidTokenType: If the token is not a primitive value.
        """
        token = self._src[self._off]
        self._off += 1
        if not isPrimitive(token):
            raise InvalidTokenType(token)
        return token

    def nextValue(self) -> Optional[PrimitiveValue]:
        """Takes the next token if it can be used as an option value."""
        if self.eof() or isOption(self.peek()):
            return None
        return self.next()


# --- Containers ------------------------------------------------------------- #


class Options(Retriever, MutableMapping[str, PrimitiveValue]):
    """
    The options found while parsing, keyed by their sanitized name.

    Stored keys can also be read as attributes (`options.verbose`).
    """

    _entries: dict[str, PrimitiveValue]

    def __init__(self, entries: Optional[dict[str, PrimitiveValue]] = None):
        self._entries = dict(entries or {})

    def _resolve(self, key: Key) -> Optional[PrimitiveValue]:
        if isinstance(key, str) and key in self._entries:
            return self._entries[key]
        return None

    def __getitem__(self, key: str) -> PrimitiveValue:
        return self._entries[key]

    def __setitem__(self, key: str, value: PrimitiveValue):
        self._entries[key] = value

    def __delitem__(self, key: str):
        del self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getattr__(self, name: str) -> PrimitiveValue:
        if name.startswith("_") or name not in self._entries:
            raise AttributeError(name)
        return self._entries[name]

    def __repr__(self) -> str:
        return f"Options({self._entries!r})"


class Arguments(Retriever, MutableSequence[str]):
    """
    The positional arguments found while parsing, in order.

    Reading an item gives its string form, the typed accessors see the
    value as it was passed to `parse`.
    """

    _values: list[PrimitiveValue]

    def __init__(self, values: tp.Iterable[PrimitiveValue] = ()):
        self._values = list(values)

    def _resolve(self, key: Key) -> Optional[PrimitiveValue]:
        if isinstance(key, bool):
            return None

        if isinstance(key, str):
            if not (key.isascii() and key.isdigit()):
                return None
            if len(key.lstrip("0")) > len(str(len(self._values))):
                return None
            key = int(key)

        if not isinstance(key, int) or key < 0 or key >= len(self._values):
            return None

        return self._values[key]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [toString(v) for v in self._values[index]]
        return toString(self._values[index])

    def __setitem__(self, index, value):
        self._values[index] = value

    def __delitem__(self, index):
        del self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def insert(self, index: int, value: PrimitiveValue):
        self._values.insert(index, value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Arguments):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Arguments({list(self)!r})"


@dt.dataclass
class ParsedArgs:
    """
    The result of `parse`.

    Attributes:
        options: Options prefixed with `-` or `--`. A standalone option is
            `True`, otherwise it holds its value (`--opt=1`, `--opt 1`, `-o 1`).
        arguments: Everything that is not an option or an option's value.
    """

    options: Options = dt.field(default_factory=Options)
    arguments: Arguments = dt.field(default_factory=Arguments)


# --- Parser ----------------------------------------------------------------- #


def _parseLong(token: str, tokens: Tokens) -> tuple[str, PrimitiveValue]:
    body = token[2:]
    if "=" in body:
        key, value = body.split("=", 1)
        return key, value

    value = tokens.nextValue()
    return body, True if value is None else value


def _parseShort(token: str, tokens: Tokens) -> tuple[str, PrimitiveValue]:
    value = tokens.nextValue()
    return token[1], True if value is None else value


def parse(tokens: Optional[tp.Sequence[Any]] = None) -> ParsedArgs:
    """
    Parses command-line tokens into options and positional arguments.

    Option values are taken before the option's key is checked, so a
    token following a malformed option is dropped along with it and never
    ends up in the arguments.

    Args:
        tokens: The tokens to parse, `sys.argv[1:]` when omitted. The
            sequence itself is left untouched.

    Returns:
        The parsed options and arguments.

    Raises:
        InvalidTokenType: If any token is not a `str`, `int`, `float` or `bool`.
    """
    if tokens is None:
        tokens = sys.argv[1:]

    result = ParsedArgs()
    s = Tokens(tokens)

    while not s.eof():
        token = s.next()

        if not isOption(token):
            result.arguments.append(token)
            continue

        token = tp.cast(str, token)
        if isLongOption(token):
            raw, value = _parseLong(token, s)
            key = sanitizeKey(raw)
            if len(key) == 0:
                _logger.debug(f"Dropping option '{token}', no valid key in '{raw}'")
                continue
        else:
            key, value = _parseShort(token, s)
            if not _isShortKey(key):
                _logger.debug(f"Dropping option '{token}', '{key}' is not a letter")
                continue

        result.options[key] = value

    return result
