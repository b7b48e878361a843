"""Range compression over the Unicode code space.

Scans a codepoint domain in ascending order, classifies every codepoint,
and coalesces consecutive matches into maximal inclusive ranges:

    matches:  10 11 12 . . . . . . . 20
    ranges:   (10, 12)               (20, 20)

The default domain is 0x100-0x10FFFF minus the surrogates 0xD800-0xDFFF.
Bytes 0x00-0xFF are left to the byte table. A domain is a sequence of
ascending, disjoint inclusive spans; a range never crosses from one span
to the next, so nothing straddles the surrogate gap, and the gap itself
is never classified.

Lexers consume the result as a flat, sorted boundary list
``[start0, end0, start1, end1, ...]`` and binary-search it (see contains()).

Cost: one classification per codepoint per category, over a million
oracle calls for the full domain. Meant to run offline.

Thread Safety:
Scans share nothing but the read-only classifier. compress_all() may run
the three category scans on worker threads; each publishes its ranges
only once its scan completes.

"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextvars import copy_context
from types import MappingProxyType
from typing import NamedTuple, TypeAlias

from tablitas.classifier import Classify
from tablitas.flags import ALL_FLAGS, Category, ClassificationFlags
from tablitas.profiling import get_scan_accumulator
from tablitas.utils.logger import get_logger

logger = get_logger(__name__)

SURROGATE_FIRST = 0xD800
SURROGATE_LAST = 0xDFFF
MAX_CODEPOINT = 0x10FFFF

# Inclusive (first, last) span of a scan domain
Span: TypeAlias = tuple[int, int]

CODESPACE: tuple[Span, ...] = (
    (0x100, SURROGATE_FIRST - 1),
    (SURROGATE_LAST + 1, MAX_CODEPOINT),
)


class CodepointRange(NamedTuple):
    """Inclusive run of codepoints sharing one category."""

    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def covers(self, codepoint: int) -> bool:
        return self.start <= codepoint <= self.end


RangeSet: TypeAlias = Mapping[Category, tuple[CodepointRange, ...]]


def validate_domain(domain: Sequence[Span]) -> None:
    """Check that spans are well formed, ascending and disjoint.

    Raises:
        ValueError: On an empty, reversed, overlapping or unordered span

    """
    previous_last = -1
    for first, last in domain:
        if first > last:
            raise ValueError(f"Empty span 0x{first:X}-0x{last:X}")
        if first <= previous_last:
            raise ValueError(f"Span 0x{first:X}-0x{last:X} overlaps or precedes its predecessor")
        previous_last = last


def domain_size(domain: Sequence[Span]) -> int:
    """Number of codepoints in ``domain``."""
    return sum(last - first + 1 for first, last in domain)


def merge_ranges(codepoints: Iterable[int]) -> list[CodepointRange]:
    """Coalesce ascending codepoints into maximal inclusive ranges.

    Raises:
        ValueError: If the codepoints are not strictly ascending

    """
    ranges: list[CodepointRange] = []
    start = previous = None
    for codepoint in codepoints:
        if previous is not None:
            if codepoint <= previous:
                raise ValueError(f"Codepoints out of order: 0x{codepoint:X} after 0x{previous:X}")
            if codepoint == previous + 1:
                previous = codepoint
                continue
            ranges.append(CodepointRange(start, previous))
        start = previous = codepoint
    if start is not None:
        ranges.append(CodepointRange(start, previous))
    return ranges


def _matches(
    classify: Classify, matching: frozenset[ClassificationFlags], first: int, last: int
) -> Iterator[int]:
    for codepoint in range(first, last + 1):
        # Unrepresentable (None) is never in the matching set
        if classify(codepoint) in matching:
            yield codepoint


def compress(
    classify: Classify, category: Category, domain: Sequence[Span] = CODESPACE
) -> tuple[CodepointRange, ...]:
    """Ranges of codepoints in ``domain`` that carry ``category``'s flag.

    Args:
        classify: Codepoint classifier (e.g. a CharacterClassifier)
        category: Category whose flag bit is tested
        domain: Ascending, disjoint inclusive spans to scan

    Returns:
        Maximal, non-adjacent ranges in ascending order

    """
    validate_domain(domain)
    matching = frozenset(flags for flags in ALL_FLAGS if flags & category.flag)

    ranges: list[CodepointRange] = []
    for first, last in domain:
        ranges.extend(merge_ranges(_matches(classify, matching, first, last)))

    logger.debug("%s: %d ranges", category.value, len(ranges))
    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_scan(category.value, domain_size(domain), len(ranges))
    return tuple(ranges)


def compress_all(
    classify: Classify, domain: Sequence[Span] = CODESPACE, workers: int | None = None
) -> RangeSet:
    """Compress every category, in alpha, alnum, isupper order.

    Args:
        classify: Codepoint classifier
        domain: Ascending, disjoint inclusive spans to scan
        workers: Threads to scan categories on; None or 1 scans sequentially

    Returns:
        Read-only mapping of Category to its ranges

    """
    categories = list(Category)
    if workers is None or workers <= 1:
        results = [compress(classify, category, domain) for category in categories]
    else:
        with ThreadPoolExecutor(max_workers=min(workers, len(categories))) as ex:
            # Each scan runs in its own copy of the caller's context
            futures = [
                ex.submit(copy_context().run, compress, classify, category, domain)
                for category in categories
            ]
            results = [future.result() for future in futures]
    return MappingProxyType(dict(zip(categories, results, strict=True)))


def boundaries(ranges: Iterable[CodepointRange]) -> list[int]:
    """Flatten ranges into ``[start0, end0, start1, end1, ...]``."""
    flat: list[int] = []
    for start, end in ranges:
        flat.append(start)
        flat.append(end)
    return flat


def contains(flat: Sequence[int], codepoint: int) -> bool:
    """Binary-search a flattened boundary list the way a lexer does.

    A codepoint equal to a boundary is inside a range. Otherwise it lies
    inside a range exactly when an odd number of boundaries precede it.

    Example:
        >>> flat = boundaries([CodepointRange(10, 12), CodepointRange(20, 20)])
        >>> [cp for cp in range(25) if contains(flat, cp)]
        [10, 11, 12, 20]

    """
    index = bisect_left(flat, codepoint)
    if index < len(flat) and flat[index] == codepoint:
        return True
    return index % 2 == 1


__all__ = [
    "CODESPACE",
    "MAX_CODEPOINT",
    "SURROGATE_FIRST",
    "SURROGATE_LAST",
    "CodepointRange",
    "RangeSet",
    "Span",
    "boundaries",
    "compress",
    "compress_all",
    "contains",
    "domain_size",
    "merge_ranges",
    "validate_domain",
]
