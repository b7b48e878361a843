"""Shared fixtures: synthetic oracles and classifiers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import pytest

from tablitas.errors import UnrepresentableError
from tablitas.flags import NO_FLAGS, ClassificationFlags

LETTER = ClassificationFlags.ALPHA | ClassificationFlags.ALNUM
UPPER_LETTER = LETTER | ClassificationFlags.UPPER


def _set_classifier(
    letters: Iterable[int] = (),
    uppers: Iterable[int] = (),
    unrepresentable: Iterable[int] = (),
) -> Callable[[int], ClassificationFlags | None]:
    """Classifier that marks exactly the given codepoints."""
    letters = frozenset(letters)
    uppers = frozenset(uppers)
    unrepresentable = frozenset(unrepresentable)

    def classify(codepoint: int) -> ClassificationFlags | None:
        if codepoint in unrepresentable:
            return None
        if codepoint in uppers:
            return UPPER_LETTER
        if codepoint in letters:
            return LETTER
        return NO_FLAGS

    return classify


@pytest.fixture(scope="session")
def set_classifier():
    """Factory for classifiers that mark exactly the given codepoints.

    Session-scoped so hypothesis tests can use it.
    """
    return _set_classifier


@pytest.fixture
def everything_alpha_oracle():
    """Oracle for which every representable codepoint is an uppercase letter."""

    def oracle(encoding, codepoint):
        if 0xD800 <= codepoint <= 0xDFFF:
            raise UnrepresentableError(codepoint, encoding.name)
        return (True, True, True)

    return oracle


@pytest.fixture
def nothing_representable_oracle():
    """Oracle that rejects every codepoint."""

    def oracle(encoding, codepoint):
        raise UnrepresentableError(codepoint, encoding.name)

    return oracle


@pytest.fixture
def isolated_logging():
    """Restore the tablitas logger's handlers and level after the test."""
    logger = logging.getLogger("tablitas")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
