"""
Tablitas — Character classification tables for lexers

Turns per-codepoint Unicode property lookups into static data for a
lexer's "is letter / alphanumeric / uppercase letter" fast paths:

- a 256-entry byte table for any ASCII-compatible encoding
- coalesced codepoint ranges for UTF-8, covering 0x100-0x10FFFF

Quick Start:
    >>> from tablitas import generate
    >>> print(generate("cp1252"))
    Encoding: cp1252
    static const uint8_t encoding_cp1252_table[256] = {
    ...

    >>> # Lower-level pieces
    >>> from tablitas import ASCII, UTF_8, Category, CharacterClassifier, compile_byte_table, compress
    >>> table = compile_byte_table(ASCII)
    >>> int(table[ord("A")])
    7
    >>> compress(CharacterClassifier(UTF_8), Category.UPPER, domain=[(0x100, 0x10F)])
    (CodepointRange(start=256, end=256), CodepointRange(start=258, end=258), ...)

Command line:
    tablitas encoding utf-8
"""

from tablitas.classifier import CharacterClassifier, Classify, Oracle, classify, unicode_oracle
from tablitas.compiler import (
    ByteTable,
    ascii_byte_table,
    compile_byte_table,
    is_canonical_ascii,
    table_label,
)
from tablitas.config import (
    GeneratorConfig,
    generator_config_context,
    get_generator_config,
    reset_generator_config,
    set_generator_config,
)
from tablitas.driver import generate, prepare_encoding, write_tables
from tablitas.emitter import emit_byte_table, emit_range_set, emit_range_sets
from tablitas.encoding import (
    ASCII,
    BINARY,
    UTF_8,
    Encoding,
    is_ascii_compatible,
    is_unicode_encoding,
    is_utf8_family,
    normalize_encoding,
    resolve_encoding,
)
from tablitas.errors import (
    EncodingNotFoundError,
    NotAsciiCompatibleError,
    TablitasError,
    UnrepresentableError,
)
from tablitas.flags import Category, ClassificationFlags
from tablitas.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from tablitas.ranges import (
    CODESPACE,
    CodepointRange,
    RangeSet,
    boundaries,
    compress,
    compress_all,
    contains,
    merge_ranges,
)

__version__ = "0.1.0"

__all__ = [
    "ASCII",
    "BINARY",
    "CODESPACE",
    "UTF_8",
    "ByteTable",
    "Category",
    "CharacterClassifier",
    "ClassificationFlags",
    "Classify",
    "CodepointRange",
    "Encoding",
    "EncodingNotFoundError",
    "GeneratorConfig",
    "NotAsciiCompatibleError",
    "Oracle",
    "RangeSet",
    "ScanAccumulator",
    "TablitasError",
    "UnrepresentableError",
    "__version__",
    "ascii_byte_table",
    "boundaries",
    "classify",
    "compile_byte_table",
    "compress",
    "compress_all",
    "contains",
    "emit_byte_table",
    "emit_range_set",
    "emit_range_sets",
    "generate",
    "generator_config_context",
    "get_generator_config",
    "get_scan_accumulator",
    "is_ascii_compatible",
    "is_canonical_ascii",
    "is_unicode_encoding",
    "is_utf8_family",
    "merge_ranges",
    "normalize_encoding",
    "prepare_encoding",
    "profiled_scan",
    "reset_generator_config",
    "resolve_encoding",
    "set_generator_config",
    "table_label",
    "unicode_oracle",
    "write_tables",
]
