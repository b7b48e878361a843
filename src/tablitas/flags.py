"""Classification flags and range categories.

Every byte or codepoint classifies into a 3-bit flag set:

    bit 0  ALPHA   alphabetic character
    bit 1  ALNUM   alphanumeric character
    bit 2  UPPER   uppercase letter

A consistent oracle never sets ALPHA without ALNUM, but nothing here
enforces it; flags carry whatever the oracle answered.

Thread Safety:
Both types are enums (inherently immutable).

"""

from enum import Enum, IntFlag


class ClassificationFlags(IntFlag):
    """Per-character classification bits, integer value 0-7."""

    ALPHA = 1
    ALNUM = 2
    UPPER = 4

    @classmethod
    def pack(cls, alpha: bool, alnum: bool, upper: bool) -> "ClassificationFlags":
        """Build a flag set from the three predicate answers.

        Example:
            >>> int(ClassificationFlags.pack(True, True, False))
            3
        """
        return ALL_FLAGS[(1 if alpha else 0) | (2 if alnum else 0) | (4 if upper else 0)]


# All eight flag sets, indexed by integer value
ALL_FLAGS: tuple[ClassificationFlags, ...] = tuple(ClassificationFlags(value) for value in range(8))

# Flag set for unrepresentable characters and empty table slots
NO_FLAGS: ClassificationFlags = ALL_FLAGS[0]


class Category(Enum):
    """Range categories, in emission order.

    Values are the names used in emitted symbols (``isupper`` rather than
    ``upper`` to match the lexer's predicate names).
    """

    ALPHA = "alpha"
    ALNUM = "alnum"
    UPPER = "isupper"

    @property
    def flag(self) -> ClassificationFlags:
        """The flag bit tested for this category."""
        return _CATEGORY_FLAGS[self]


_CATEGORY_FLAGS: dict[Category, ClassificationFlags] = {
    Category.ALPHA: ClassificationFlags.ALPHA,
    Category.ALNUM: ClassificationFlags.ALNUM,
    Category.UPPER: ClassificationFlags.UPPER,
}


__all__ = [
    "ALL_FLAGS",
    "NO_FLAGS",
    "Category",
    "ClassificationFlags",
]
