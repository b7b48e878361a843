"""Generate classification tables for a named encoding.

Pipeline:
    name -> resolve -> normalize (ASCII -> ASCII-8BIT) -> ASCII-compatibility check
         -> byte table (always)
         -> alpha/alnum/isupper ranges (UTF-8 family only)
         -> text

The encoding is validated before any table is built, and text is only
written once every scan has finished, so a failure never leaves partial
output behind.

"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from tablitas.classifier import CharacterClassifier, Oracle, unicode_oracle
from tablitas.compiler import compile_byte_table, table_label
from tablitas.config import get_generator_config
from tablitas.emitter import emit_byte_table, emit_range_sets
from tablitas.encoding import (
    Encoding,
    is_ascii_compatible,
    is_utf8_family,
    normalize_encoding,
    resolve_encoding,
)
from tablitas.errors import NotAsciiCompatibleError
from tablitas.ranges import CODESPACE, Span, compress_all
from tablitas.utils.logger import get_logger

logger = get_logger(__name__)


def prepare_encoding(name: str) -> Encoding:
    """Resolve, normalize and validate an encoding name.

    Raises:
        EncodingNotFoundError: If the name does not resolve
        NotAsciiCompatibleError: If bytes 0x00-0x7F are not ASCII

    """
    encoding = normalize_encoding(resolve_encoding(name))
    if not is_ascii_compatible(encoding):
        raise NotAsciiCompatibleError(encoding)
    return encoding


def generate(
    name: str,
    *,
    oracle: Oracle = unicode_oracle,
    workers: int | None = None,
    domain: Sequence[Span] = CODESPACE,
) -> str:
    """Build the full table text for an encoding.

    Args:
        name: Encoding name (any alias the codec registry accepts)
        oracle: Classification oracle
        workers: Threads for category scans (defaults to the config's)
        domain: Codepoint spans scanned for UTF-8-family encodings

    Returns:
        ``Encoding:`` header line, byte table, and for UTF-8-family
        encodings the alpha, alnum and isupper range blocks

    """
    encoding = prepare_encoding(name)
    if workers is None:
        workers = get_generator_config().workers

    table = compile_byte_table(encoding, oracle)
    parts = [
        f"Encoding: {encoding.name}\n",
        emit_byte_table(table_label(table, oracle), table),
    ]

    if is_utf8_family(encoding):
        logger.debug("%s is UTF-8 family; compressing code space ranges", encoding)
        range_set = compress_all(CharacterClassifier(encoding, oracle), domain, workers)
        parts.append(emit_range_sets(range_set))

    return "\n".join(parts)


def write_tables(name: str, stream: TextIO | None = None, **kwargs) -> None:
    """Generate tables for ``name`` and write them to ``stream`` (stdout).

    Keyword arguments are passed to generate().
    """
    text = generate(name, **kwargs)
    (stream if stream is not None else sys.stdout).write(text)


__all__ = [
    "generate",
    "prepare_encoding",
    "write_tables",
]
