"""Per-codepoint character classification.

An oracle answers three questions about one codepoint in one encoding:
is it alphabetic, alphanumeric, an uppercase letter. It raises
UnrepresentableError when the encoding has no such character.
CharacterClassifier binds an encoding to an oracle and packs the answers
into ClassificationFlags, returning None for unrepresentable codepoints.

Oracles are plain callables, so tests can substitute a synthetic one:

    >>> def digits_only(encoding, codepoint):
    ...     is_digit = 0x30 <= codepoint <= 0x39
    ...     return (False, is_digit, False)
    >>> classify = CharacterClassifier(ASCII, digits_only)
    >>> classify(0x35)
    <ClassificationFlags.ALNUM: 2>

Thread Safety:
CharacterClassifier holds only immutable references. unicode_oracle is
a pure function of its arguments.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from tablitas.encoding import ASCII, Encoding, is_unicode_encoding
from tablitas.errors import UnrepresentableError
from tablitas.flags import ClassificationFlags

# (alpha, alnum, upper) answers for one codepoint
Oracle: TypeAlias = Callable[[Encoding, int], tuple[bool, bool, bool]]

# Single-codepoint classification; None means unrepresentable
Classify: TypeAlias = Callable[[int], ClassificationFlags | None]

_NO_PROPERTIES: tuple[bool, bool, bool] = (False, False, False)

_SURROGATE_FIRST = 0xD800
_SURROGATE_LAST = 0xDFFF
_MAX_CODEPOINT = 0x10FFFF


def encoded_character(encoding: Encoding, codepoint: int) -> str:
    """Convert a code value to its character in ``encoding``.

    Unicode encodings interpret the value as a Unicode scalar. Other
    codecs pack it into big-endian bytes and decode strictly; the result
    must be exactly one character.

    Raises:
        UnrepresentableError: If the value has no character in the encoding

    """
    if codepoint < 0:
        raise UnrepresentableError(codepoint, encoding.name)

    if is_unicode_encoding(encoding):
        if codepoint > _MAX_CODEPOINT or _SURROGATE_FIRST <= codepoint <= _SURROGATE_LAST:
            raise UnrepresentableError(codepoint, encoding.name)
        return chr(codepoint)

    if encoding.is_binary:
        if codepoint > 0xFF:
            raise UnrepresentableError(codepoint, encoding.name)
        return chr(codepoint)

    length = max(1, (codepoint.bit_length() + 7) // 8)
    try:
        char = codepoint.to_bytes(length, "big").decode(encoding.codec)
    except UnicodeError as e:
        raise UnrepresentableError(codepoint, encoding.name) from e
    if len(char) != 1:
        raise UnrepresentableError(codepoint, encoding.name)
    return char


def unicode_oracle(encoding: Encoding, codepoint: int) -> tuple[bool, bool, bool]:
    """Default oracle backed by Python's Unicode database.

    ASCII-8BIT bytes above 0x7F are valid characters with no properties.
    """
    char = encoded_character(encoding, codepoint)
    if encoding.is_binary and codepoint > 0x7F:
        return _NO_PROPERTIES
    return (char.isalpha(), char.isalnum(), char.isupper())


class CharacterClassifier:
    """Classify codepoints of one encoding into ClassificationFlags.

    Usage:
        >>> classify = CharacterClassifier(ASCII)
        >>> int(classify(ord("A")))
        7
        >>> classify(0xE9) is None
        True

    """

    __slots__ = ("encoding", "oracle")

    def __init__(self, encoding: Encoding, oracle: Oracle = unicode_oracle) -> None:
        self.encoding = encoding
        self.oracle = oracle

    def __call__(self, codepoint: int) -> ClassificationFlags | None:
        """Return the flag set for ``codepoint``, or None if unrepresentable."""
        try:
            alpha, alnum, upper = self.oracle(self.encoding, codepoint)
        except UnrepresentableError:
            return None
        return ClassificationFlags.pack(alpha, alnum, upper)

    def __repr__(self) -> str:
        return f"CharacterClassifier({self.encoding.name!r})"


def classify(
    encoding: Encoding, codepoint: int, oracle: Oracle = unicode_oracle
) -> ClassificationFlags | None:
    """One-shot classification of a single codepoint."""
    return CharacterClassifier(encoding, oracle)(codepoint)


__all__ = [
    "CharacterClassifier",
    "Classify",
    "Oracle",
    "classify",
    "encoded_character",
    "unicode_oracle",
]
