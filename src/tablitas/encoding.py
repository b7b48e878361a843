"""Encoding resolution on top of Python's codec registry.

Resolution is split into explicit steps so each one can be tested alone:

1. resolve_encoding: name -> Encoding (or EncodingNotFoundError)
2. normalize_encoding: plain ASCII -> ASCII-8BIT
3. is_ascii_compatible: reject encodings a byte-wise lexer cannot scan

ASCII-8BIT is a pseudo-encoding with no Python codec: every byte is a
valid character, but only 0x00-0x7F carry character properties.

Thread Safety:
Encoding is frozen (immutable). The codec registry is only read.

"""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass

from tablitas.errors import EncodingNotFoundError
from tablitas.utils.logger import get_logger

logger = get_logger(__name__)

# Bytes 0x00-0x7F and the characters an ASCII-compatible codec must decode them to
_ASCII_BYTES: bytes = bytes(range(0x80))
_ASCII_TEXT: str = "".join(chr(b) for b in range(0x80))

_LABEL_UNSAFE = re.compile(r"[^0-9a-z]+")


@dataclass(frozen=True, slots=True)
class Encoding:
    """A resolved text encoding.

    Attributes:
        name: Display name (the codec registry's canonical name)
        codec: Python codec name, or None for the ASCII-8BIT pseudo-encoding

    """

    name: str
    codec: str | None

    @property
    def is_binary(self) -> bool:
        """True for the ASCII-8BIT pseudo-encoding."""
        return self.codec is None

    @property
    def label(self) -> str:
        """Identifier-safe lower-case name, e.g. ``cp1252`` or ``iso8859_1``."""
        return _LABEL_UNSAFE.sub("_", self.name.lower()).strip("_")

    def __str__(self) -> str:
        return self.name


ASCII: Encoding = Encoding("ascii", "ascii")
BINARY: Encoding = Encoding("ASCII-8BIT", None)
UTF_8: Encoding = Encoding("utf-8", "utf-8")

_BINARY_ALIASES: frozenset[str] = frozenset({"ascii-8bit", "binary"})


def resolve_encoding(name: str) -> Encoding:
    """Resolve an encoding name through the codec registry.

    Args:
        name: Any name or alias Python's codec registry accepts, plus
            ``ASCII-8BIT``/``BINARY``

    Returns:
        The resolved Encoding

    Raises:
        EncodingNotFoundError: If the name is unknown or names a
            bytes-to-bytes codec such as ``base64``

    """
    if name.strip().lower() in _BINARY_ALIASES:
        return BINARY
    try:
        info = codecs.lookup(name)
        # Raises LookupError for codecs that are not text encodings
        b"".decode(info.name)
    except LookupError as e:
        raise EncodingNotFoundError(name) from e
    except UnicodeError:
        # Text codec that refuses even empty input ("undefined"); rejected
        # later as not ASCII compatible
        pass
    logger.debug("Resolved %r to codec %s", name, info.name)
    return Encoding(info.name, info.name)


def normalize_encoding(encoding: Encoding) -> Encoding:
    """Map plain ASCII onto the fixed 8-bit ASCII-8BIT encoding.

    Every other encoding is returned unchanged.
    """
    if encoding.codec == ASCII.codec:
        logger.debug("Normalizing %s to %s", encoding, BINARY)
        return BINARY
    return encoding


def is_ascii_compatible(encoding: Encoding) -> bool:
    """Check that bytes 0x00-0x7F decode to the same ASCII characters."""
    if encoding.is_binary:
        return True
    try:
        return _ASCII_BYTES.decode(encoding.codec) == _ASCII_TEXT
    except UnicodeError:
        return False


def is_unicode_encoding(encoding: Encoding) -> bool:
    """True for Unicode transformation formats (UTF-7/8/16/32 codecs).

    Code values in these encodings are Unicode scalar values.
    """
    return encoding.codec is not None and encoding.codec.startswith("utf")


def is_utf8_family(encoding: Encoding) -> bool:
    """True for UTF-8 and its variants (e.g. ``utf-8-sig``)."""
    return encoding.codec is not None and encoding.codec.startswith("utf-8")


__all__ = [
    "ASCII",
    "BINARY",
    "UTF_8",
    "Encoding",
    "is_ascii_compatible",
    "is_unicode_encoding",
    "is_utf8_family",
    "normalize_encoding",
    "resolve_encoding",
]
