"""Tests for ClassificationFlags and Category."""

import pytest

from tablitas.flags import ALL_FLAGS, NO_FLAGS, Category, ClassificationFlags


class TestClassificationFlags:
    """Bit layout and packing."""

    def test_bit_values(self) -> None:
        assert ClassificationFlags.ALPHA == 1
        assert ClassificationFlags.ALNUM == 2
        assert ClassificationFlags.UPPER == 4

    @pytest.mark.parametrize(
        "alpha,alnum,upper,expected",
        [
            (False, False, False, 0),
            (True, True, True, 7),
            (False, True, False, 2),
            (True, True, False, 3),
            (True, False, True, 5),
        ],
    )
    def test_pack(self, alpha: bool, alnum: bool, upper: bool, expected: int) -> None:
        assert ClassificationFlags.pack(alpha, alnum, upper) == expected

    def test_pack_returns_flag_type(self) -> None:
        flags = ClassificationFlags.pack(True, True, False)
        assert isinstance(flags, ClassificationFlags)
        assert ClassificationFlags.ALPHA in flags
        assert ClassificationFlags.UPPER not in flags

    def test_pack_does_not_enforce_alpha_implies_alnum(self) -> None:
        """An inconsistent oracle answer is propagated as-is."""
        assert ClassificationFlags.pack(True, False, False) == ClassificationFlags.ALPHA

    def test_all_flags_indexed_by_value(self) -> None:
        assert len(ALL_FLAGS) == 8
        assert [int(f) for f in ALL_FLAGS] == list(range(8))
        assert NO_FLAGS == 0


class TestCategory:
    """Category names, bits and order."""

    def test_emission_order(self) -> None:
        assert [c.value for c in Category] == ["alpha", "alnum", "isupper"]

    def test_flags(self) -> None:
        assert Category.ALPHA.flag is ClassificationFlags.ALPHA
        assert Category.ALNUM.flag is ClassificationFlags.ALNUM
        assert Category.UPPER.flag is ClassificationFlags.UPPER

    def test_lookup_by_name(self) -> None:
        assert Category("isupper") is Category.UPPER
