"""Tests for slug part coercion, resolution and parsing."""

import pytest

from space_slug.core.config import SlugOptions
from space_slug.core.errors import InvalidPartError
from space_slug.parts import (
    FunctionPart,
    LiteralPart,
    SequencePart,
    SetPart,
    as_part,
    parse_part_spec,
    resolve_part,
)
from space_slug.sampling import DigitSpec, WordSpec, word


class TestAsPart:
    """Tests for as_part."""

    def test_string_becomes_literal(self):
        assert as_part("ezra") == LiteralPart("ezra")

    def test_list_and_tuple_become_sequence(self):
        assert as_part(["ezra", "holocron"]) == SequencePart(("ezra", "holocron"))
        assert as_part(("ezra",)) == SequencePart(("ezra",))

    def test_sets_become_set_part(self):
        assert as_part({"ezra"}) == SetPart(("ezra",))
        part = as_part(frozenset({"ezra", "holocron"}))
        assert isinstance(part, SetPart)
        assert sorted(part.words) == ["ezra", "holocron"]

    def test_callables_become_function_part(self):
        spec = word("starwars")(1)
        assert as_part(spec) == FunctionPart(spec)

        def custom(_options):
            return "x"

        assert as_part(custom) == FunctionPart(custom)

    def test_variants_pass_through(self):
        part = LiteralPart("ezra")
        assert as_part(part) is part

    def test_unsupported_value_fails(self):
        with pytest.raises(InvalidPartError, match="int"):
            as_part(42)

    def test_non_string_items_fail(self):
        with pytest.raises(InvalidPartError):
            as_part(["ezra", 1])


class TestResolvePart:
    """Tests for resolve_part."""

    def test_literal_is_cleaned_not_transformed(self):
        """Test literals are cleaned; transform is left to the assembler."""
        assert resolve_part(LiteralPart("Hello World!"), SlugOptions()) == "Hello-World"

    def test_sequence_words_joined(self):
        options = SlugOptions(separator="_")
        assert resolve_part(SequencePart(("a b", "c")), options) == "a_b_c"

    def test_function_receives_options(self):
        part = FunctionPart(lambda options: options.locale)
        assert resolve_part(part, SlugOptions(locale="en")) == "en"

    def test_function_returning_list(self):
        part = FunctionPart(lambda _options: ["x y", "z"])
        assert resolve_part(part, SlugOptions()) == "x-y-z"

    def test_function_returning_unsupported_value_fails(self):
        part = FunctionPart(lambda _options: 42)
        with pytest.raises(InvalidPartError, match="int"):
            resolve_part(part, SlugOptions())

    def test_custom_clean_string(self):
        options = SlugOptions(clean_string=lambda s: s.replace(" ", "+"))
        assert resolve_part(LiteralPart("a b"), options) == "a+b"


class TestParsePartSpec:
    """Tests for parse_part_spec."""

    def test_category_with_count(self):
        assert parse_part_spec("adjectives:2") == FunctionPart(WordSpec("adjectives", 2))

    def test_category_default_count(self):
        assert parse_part_spec("nouns") == FunctionPart(WordSpec("nouns", 1))

    def test_digits(self):
        assert parse_part_spec("digits") == FunctionPart(DigitSpec(4, False))
        assert parse_part_spec("digits:2") == FunctionPart(DigitSpec(2, False))
        assert parse_part_spec("digits!:3") == FunctionPart(DigitSpec(3, True))

    def test_literal(self):
        assert parse_part_spec("=ezra") == LiteralPart("ezra")
        assert parse_part_spec(" =a:b ") == LiteralPart("a:b")

    @pytest.mark.parametrize("spec", ["", "  ", "nouns:x", "nouns:0", "digits:-1"])
    def test_invalid_specs_fail(self, spec):
        with pytest.raises(ValueError):
            parse_part_spec(spec)
