"""Tests for per-codepoint classification and the default oracle."""

import pytest

from tablitas.classifier import CharacterClassifier, classify, encoded_character, unicode_oracle
from tablitas.encoding import ASCII, BINARY, UTF_8, Encoding, resolve_encoding
from tablitas.errors import UnrepresentableError
from tablitas.flags import ClassificationFlags


class TestEncodedCharacter:
    """Code value -> character conversion."""

    def test_unicode_scalar(self) -> None:
        assert encoded_character(UTF_8, 0x1F600) == "\U0001f600"
        assert encoded_character(UTF_8, 0xE9) == "é"

    @pytest.mark.parametrize("codepoint", [0xD800, 0xDBFF, 0xDC00, 0xDFFF, 0x110000, -1])
    def test_unicode_unrepresentable(self, codepoint: int) -> None:
        with pytest.raises(UnrepresentableError):
            encoded_character(UTF_8, codepoint)

    def test_surrogate_neighbours_are_representable(self) -> None:
        assert encoded_character(UTF_8, 0xD7FF) == "\ud7ff"
        assert encoded_character(UTF_8, 0xE000) == "\ue000"

    def test_single_byte_decode(self) -> None:
        cp1252 = resolve_encoding("cp1252")
        assert encoded_character(cp1252, 0x80) == "€"
        assert encoded_character(cp1252, 0x41) == "A"

    def test_undefined_byte(self) -> None:
        with pytest.raises(UnrepresentableError):
            encoded_character(resolve_encoding("cp1252"), 0x81)

    def test_ascii_rejects_high_bytes(self) -> None:
        with pytest.raises(UnrepresentableError):
            encoded_character(ASCII, 0x80)

    def test_multibyte_value_is_big_endian(self) -> None:
        assert encoded_character(resolve_encoding("euc_jp"), 0xA4A2) == "あ"

    def test_lead_byte_alone_is_unrepresentable(self) -> None:
        with pytest.raises(UnrepresentableError):
            encoded_character(resolve_encoding("euc_jp"), 0xA4)

    def test_codec_raising_unicode_error(self) -> None:
        with pytest.raises(UnrepresentableError):
            encoded_character(Encoding("undefined", "undefined"), 0x41)

    def test_binary_bytes(self) -> None:
        assert encoded_character(BINARY, 0x41) == "A"
        assert encoded_character(BINARY, 0xE9) == "\xe9"
        with pytest.raises(UnrepresentableError):
            encoded_character(BINARY, 0x100)


class TestUnicodeOracle:
    """Default oracle answers."""

    def test_uppercase_letter(self) -> None:
        assert unicode_oracle(ASCII, ord("A")) == (True, True, True)

    def test_digit(self) -> None:
        assert unicode_oracle(ASCII, ord("0")) == (False, True, False)

    def test_lowercase_letter(self) -> None:
        assert unicode_oracle(UTF_8, ord("ß")) == (True, True, False)

    def test_binary_high_bytes_have_no_properties(self) -> None:
        assert unicode_oracle(BINARY, 0xC9) == (False, False, False)
        assert unicode_oracle(BINARY, ord("Z")) == (True, True, True)

    def test_unrepresentable_raises(self) -> None:
        with pytest.raises(UnrepresentableError) as exc_info:
            unicode_oracle(UTF_8, 0xD800)
        assert exc_info.value.codepoint == 0xD800


class TestCharacterClassifier:
    """Flag packing and the unrepresentable outcome."""

    def test_ascii_scenario(self) -> None:
        classify_ascii = CharacterClassifier(ASCII)
        assert classify_ascii(0x41) == (
            ClassificationFlags.ALPHA | ClassificationFlags.ALNUM | ClassificationFlags.UPPER
        )
        assert classify_ascii(0x30) == ClassificationFlags.ALNUM
        assert classify_ascii(0x00) == 0

    def test_unrepresentable_is_none(self) -> None:
        assert CharacterClassifier(ASCII)(0xFF) is None
        assert CharacterClassifier(UTF_8)(0xDC00) is None

    def test_injected_oracle(self) -> None:
        calls = []

        def oracle(encoding, codepoint):
            calls.append((encoding, codepoint))
            return (False, codepoint % 2 == 0, False)

        classify_even = CharacterClassifier(UTF_8, oracle)
        assert classify_even(4) == ClassificationFlags.ALNUM
        assert classify_even(5) == 0
        assert calls == [(UTF_8, 4), (UTF_8, 5)]

    def test_other_oracle_errors_propagate(self) -> None:
        def broken(encoding, codepoint):
            raise RuntimeError("oracle failure")

        with pytest.raises(RuntimeError):
            CharacterClassifier(UTF_8, broken)(0x41)

    def test_one_shot_classify(self) -> None:
        assert classify(UTF_8, ord("É")) == 7
        assert classify(UTF_8, 0xDFFF) is None

    def test_deterministic(self) -> None:
        classify_utf8 = CharacterClassifier(UTF_8)
        assert [classify_utf8(cp) for cp in range(0x100, 0x200)] == [
            classify_utf8(cp) for cp in range(0x100, 0x200)
        ]

    def test_repr(self) -> None:
        assert repr(CharacterClassifier(UTF_8)) == "CharacterClassifier('utf-8')"
