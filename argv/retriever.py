import math
import re
from decimal import Decimal
from typing import Optional

PrimitiveValue = str | int | float | bool
Key = str | int

# --- Coercion --------------------------------------------------------------- #

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_RADIX = {
    "0x": (16, re.compile(r"[0-9a-fA-F]+")),
    "0o": (8, re.compile(r"[0-7]+")),
    "0b": (2, re.compile(r"[01]+")),
}

_INFINITY = {
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}

_FALSY = ("0", "false")


def _parseNumber(text: str) -> int | float:
    text = text.strip()
    if text == "":
        return 0

    if text in _INFINITY:
        return _INFINITY[text]

    prefix = text[:2].lower()
    if prefix in _RADIX:
        base, digits = _RADIX[prefix]
        if digits.fullmatch(text[2:]):
            return int(text[2:], base)
        return math.nan

    if not _DECIMAL.fullmatch(text):
        return math.nan

    if "." in text or "e" in text or "E" in text:
        return float(text)

    try:
        return int(text)
    except ValueError:
        # Past the interpreter's integer string conversion limit.
        return float(text)


def _formatFloat(value: float) -> str:
    if math.isnan(value):
        return "NaN"

    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if value == 0:
        return "0"

    text = repr(value)
    if value.is_integer() and abs(value) < 1e21:
        return format(Decimal(text).to_integral_value(), "f")

    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")

    # 1e-07 -> 1e-7
    return re.sub(r"e([+-])0*([0-9])", r"e\1\2", text)


def toNumber(value: PrimitiveValue) -> int | float:
    """
    Converts a primitive value to a number.

    Booleans become `1`/`0`, numbers are returned as-is and strings are
    parsed as numeric literals. Surrounding whitespace is ignored and an
    empty string is `0`. Decimal (with optional sign, fraction and
    exponent), `0x`, `0o` and `0b` literals and `Infinity`/`-Infinity` are
    understood. Anything else, including `_` digit separators, is `nan`.
    """
    if isinstance(value, bool):
        return int(value)

    if isinstance(value, (int, float)):
        return value

    return _parseNumber(value)


def toString(value: PrimitiveValue) -> str:
    """
    Converts a primitive value to its canonical textual form.

    Strings are returned unchanged, booleans become `"true"`/`"false"`
    and numbers render as `NaN`, `Infinity`, `-Infinity` or their shortest
    decimal digits.
    """
    if isinstance(value, str):
        return value

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, float):
        return _formatFloat(value)

    return str(value)


def toBoolean(value: PrimitiveValue) -> bool:
    """
    Converts a primitive value to a boolean.

    Numbers are false only for `0` and `nan`. Strings are false when empty
    or when they read `0` or `false` (case-insensitive, trimmed), true
    otherwise.
    """
    if isinstance(value, bool):
        return value

    if isinstance(value, (int, float)):
        return not math.isnan(value) and value != 0

    if len(value) == 0:
        return False

    return value.strip().lower() not in _FALSY


def toArray(value: PrimitiveValue, separator: str = ",", trim: bool = True) -> list[str]:
    """
    Converts a primitive value to a list of strings by splitting its
    textual form on `separator`. An empty separator splits the text into
    single characters.
    """
    text = toString(value)

    items = list(text) if separator == "" else text.split(separator)

    if trim:
        items = [item.strip() for item in items]

    return items


# --- Retriever -------------------------------------------------------------- #


class Retriever:
    """
    Typed access to the values of a container.

    Subclasses provide `_resolve`, which must only ever look at the
    entries actually stored in the container. Every accessor returns
    `None` when the key does not resolve to a stored entry.
    """

    def _resolve(self, key: Key) -> Optional[PrimitiveValue]:
        raise NotImplementedError()

    def asNumber(self, key: Key) -> Optional[int | float]:
        """
        Retrieves the value of the key as a number.

        Args:
            key: The key or index to look up.

        Returns:
            The value as an `int` or `float`, `nan` if it can't be parsed, or
            None if the key was not found.
        """
        value = self._resolve(key)
        if value is None:
            return None
        return toNumber(value)

    def asString(self, key: Key) -> Optional[str]:
        """
        Retrieves the value of the key as a string.

        Args:
            key: The key or index to look up.

        Returns:
            The value as a string, or None if the key was not found.
        """
        value = self._resolve(key)
        if value is None:
            return None
        return toString(value)

    def asBoolean(self, key: Key) -> Optional[bool]:
        """
        Retrieves the value of the key as a boolean.

        Args:
            key: The key or index to look up.

        Returns:
            The value as a boolean, or None if the key was not found.
        """
        value = self._resolve(key)
        if value is None:
            return None
        return toBoolean(value)

    def asArray(
        self, key: Key, separator: str = ",", trim: bool = True
    ) -> Optional[list[str]]:
        """
        Retrieves the value of the key as a list of strings.

        Args:
            key: The key or index to look up.
            separator: The separator to split the value on.
            trim: Whether to strip whitespace around each item.

        Returns:
            The list of items, or None if the key was not found (never an
            empty list).
        """
        value = self._resolve(key)
        if value is None:
            return None
        return toArray(value, separator, trim)
