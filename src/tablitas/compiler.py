"""Byte table compilation.

Builds the dense 256-entry lookup table a lexer indexes with a raw byte
to answer "is this a letter / alphanumeric / uppercase letter". Bytes the
encoding cannot represent on their own classify as 0.

Thread Safety:
ByteTable is frozen (immutable). compile_byte_table is pure.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from tablitas.classifier import CharacterClassifier, Oracle, unicode_oracle
from tablitas.encoding import ASCII, Encoding
from tablitas.flags import NO_FLAGS, ClassificationFlags
from tablitas.profiling import get_scan_accumulator
from tablitas.utils.logger import get_logger

logger = get_logger(__name__)

BYTE_TABLE_SIZE = 256

# Label used for tables identical to plain 7-bit ASCII
CANONICAL_ASCII_LABEL = "ascii"


@dataclass(frozen=True, slots=True)
class ByteTable:
    """Classification flags for every byte value 0-255.

    Attributes:
        encoding: Encoding the table was compiled for
        entries: Exactly 256 flag sets, indexed by byte value

    """

    encoding: Encoding
    entries: tuple[ClassificationFlags, ...]

    def __post_init__(self) -> None:
        if len(self.entries) != BYTE_TABLE_SIZE:
            raise ValueError(
                f"Byte table needs {BYTE_TABLE_SIZE} entries, got {len(self.entries)}"
            )

    def __len__(self) -> int:
        return BYTE_TABLE_SIZE

    def __getitem__(self, byte: int) -> ClassificationFlags:
        return self.entries[byte]

    def __iter__(self) -> Iterator[ClassificationFlags]:
        return iter(self.entries)


def _classify_bytes(encoding: Encoding, oracle: Oracle) -> tuple[ClassificationFlags, ...]:
    classify = CharacterClassifier(encoding, oracle)
    entries: list[ClassificationFlags] = []
    for byte in range(BYTE_TABLE_SIZE):
        flags = classify(byte)
        entries.append(NO_FLAGS if flags is None else flags)
    return tuple(entries)


def compile_byte_table(encoding: Encoding, oracle: Oracle = unicode_oracle) -> ByteTable:
    """Classify byte values 0-255 of ``encoding``.

    Args:
        encoding: Encoding whose single-byte characters are classified
        oracle: Classification oracle (see tablitas.classifier)

    Returns:
        ByteTable with unrepresentable bytes recorded as 0

    """
    entries = _classify_bytes(encoding, oracle)

    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_byte_table(BYTE_TABLE_SIZE)

    return ByteTable(encoding, entries)


def ascii_byte_table(oracle: Oracle = unicode_oracle) -> ByteTable:
    """The byte table for plain 7-bit ASCII (not recorded by profiling)."""
    return ByteTable(ASCII, _classify_bytes(ASCII, oracle))


def is_canonical_ascii(table: ByteTable, oracle: Oracle = unicode_oracle) -> bool:
    """True if ``table`` carries exactly the same flags as plain ASCII."""
    return table.entries == ascii_byte_table(oracle).entries


def table_label(table: ByteTable, oracle: Oracle = unicode_oracle) -> str:
    """Name to emit the table under.

    Tables identical to plain ASCII's share the canonical ``ascii`` label
    so the lexer can reuse one table for all of them.
    """
    if is_canonical_ascii(table, oracle):
        logger.debug("%s byte table matches ASCII", table.encoding)
        return CANONICAL_ASCII_LABEL
    return table.encoding.label


__all__ = [
    "BYTE_TABLE_SIZE",
    "CANONICAL_ASCII_LABEL",
    "ByteTable",
    "ascii_byte_table",
    "compile_byte_table",
    "is_canonical_ascii",
    "table_label",
]
