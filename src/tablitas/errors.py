"""Exception classes for Tablitas.

Provides standardized exceptions for error handling throughout Tablitas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tablitas.encoding import Encoding


class TablitasError(Exception):
    """Base exception for all Tablitas errors.

    Subclass this for specific error categories.
    """

    pass


class EncodingNotFoundError(TablitasError, LookupError):
    """The requested encoding name does not resolve to a text codec."""

    def __init__(self, name: str) -> None:
        """Initialize with the unresolved name.

        Args:
            name: Encoding name as given by the caller
        """
        self.name = name
        super().__init__(f"Unknown encoding: {name}")


class NotAsciiCompatibleError(TablitasError):
    """The resolved encoding cannot represent bytes 0x00-0x7F as ASCII.

    Byte tables only make sense for encodings a lexer can scan byte-wise,
    so generation aborts before any output is produced.
    """

    def __init__(self, encoding: Encoding) -> None:
        """Initialize with the rejected encoding.

        Args:
            encoding: The resolved encoding
        """
        self.encoding = encoding
        super().__init__(f"Encoding {encoding.name} is not ASCII compatible")


class UnrepresentableError(TablitasError):
    """A codepoint has no character in the given encoding.

    Raised by classification oracles. CharacterClassifier turns it into
    an "unrepresentable" result; it never reaches callers of the compiler
    or the range compressor.
    """

    def __init__(self, codepoint: int, encoding_name: str) -> None:
        self.codepoint = codepoint
        self.encoding_name = encoding_name
        super().__init__(f"0x{codepoint:X} is not representable in {encoding_name}")
