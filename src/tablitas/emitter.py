"""Render byte tables and range sets as static table text.

Output is C-compatible so a lexer can include it directly:

    static const uint8_t encoding_ascii_table[256] = {
    //           0  1  2  3  4  5  6  7  8  9  A  B  C  D  E  F
        /* 0x */ 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
        ...
    };

    #define UNICODE_ALPHA_CODEPOINTS_LENGTH 1322
    static const uint32_t unicode_alpha_codepoints[UNICODE_ALPHA_CODEPOINTS_LENGTH] = {
        0x100, 0x2C1,
        ...
    };

Byte table entries are the decimal flag values 0-7. Range arrays hold
inclusive start/end pairs; the length is the number of boundaries, twice
the number of ranges.

Symbol prefixes come from the active GeneratorConfig.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tablitas.compiler import BYTE_TABLE_SIZE
from tablitas.config import get_generator_config
from tablitas.flags import Category, ClassificationFlags
from tablitas.ranges import CodepointRange, RangeSet

ROW_WIDTH = 16

_ROW_LEAD = "    /* {row:X}x */ "
_HEADER_LEAD = "//" + " " * (len(_ROW_LEAD.format(row=0)) - 2)


def emit_byte_table(name: str, table: Sequence[ClassificationFlags]) -> str:
    """Render a 256-entry byte table as a 16x16 grid.

    Args:
        name: Table label (e.g. ``ascii`` or ``cp1252``)
        table: Flag sets indexed by byte value

    Returns:
        Table text, ending in a newline

    """
    if len(table) != BYTE_TABLE_SIZE:
        raise ValueError(f"Byte table needs {BYTE_TABLE_SIZE} entries, got {len(table)}")

    prefix = get_generator_config().byte_table_prefix
    lines = [
        f"static const uint8_t {prefix}_{name}_table[{BYTE_TABLE_SIZE}] = {{",
        _HEADER_LEAD + "  ".join(f"{column:X}" for column in range(ROW_WIDTH)),
    ]
    for row in range(BYTE_TABLE_SIZE // ROW_WIDTH):
        cells = table[row * ROW_WIDTH : (row + 1) * ROW_WIDTH]
        lines.append(_ROW_LEAD.format(row=row) + " ".join(f"{int(flags)}," for flags in cells))
    lines.append("};")
    return "\n".join(lines) + "\n"


def emit_range_set(category: Category | str, ranges: Iterable[CodepointRange]) -> str:
    """Render one category's ranges as a length define plus boundary array.

    Args:
        category: Category (or its name, e.g. ``"isupper"``)
        ranges: Inclusive ranges in ascending order

    Returns:
        Range block text, ending in a newline

    """
    name = category.value if isinstance(category, Category) else category
    ranges = list(ranges)

    symbol = f"{get_generator_config().range_prefix}_{name}_codepoints"
    length = f"{symbol.upper()}_LENGTH"
    lines = [
        f"#define {length} {2 * len(ranges)}",
        f"static const uint32_t {symbol}[{length}] = {{",
    ]
    lines.extend(f"    0x{start:X}, 0x{end:X}," for start, end in ranges)
    lines.append("};")
    return "\n".join(lines) + "\n"


def emit_range_sets(range_set: RangeSet) -> str:
    """Render every category of ``range_set`` in alpha, alnum, isupper order."""
    return "\n".join(
        emit_range_set(category, range_set[category])
        for category in Category
        if category in range_set
    )


__all__ = [
    "ROW_WIDTH",
    "emit_byte_table",
    "emit_range_set",
    "emit_range_sets",
]
