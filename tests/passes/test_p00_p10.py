"""
Unit tests for delimiter resolution and the consecutive separator check (p00, p10).
"""

import pytest

from strcalc.core.errors import ConsecutiveSeparatorsError, InvalidInputError
from strcalc.ir.enums import SeparatorMode
from strcalc.passes.p00_resolve_delimiter import resolve_delimiter
from strcalc.passes.p10_check_separators import (
    check_separators,
    find_consecutive_separators,
)


class TestP00ResolveDelimiter:
    """Tests for p00_resolve_delimiter pass."""

    def test_default_separators(self, make_ctx):
        """Input without a header uses comma and newline."""
        ctx = resolve_delimiter(make_ctx("1,2\n3"))

        assert ctx.mode == SeparatorMode.DEFAULT
        assert ctx.separators == (",", "\n")
        assert ctx.body == "1,2\n3"

    def test_custom_separator(self, make_ctx):
        """The character after "//" becomes the only separator."""
        ctx = resolve_delimiter(make_ctx("//;\n1;2"))

        assert ctx.mode == SeparatorMode.CUSTOM
        assert ctx.separators == (";",)
        assert ctx.body == "1;2"

    def test_newline_as_custom_separator(self, make_ctx):
        """A newline can itself be declared as the separator."""
        ctx = resolve_delimiter(make_ctx("//\n\n1\n4"))

        assert ctx.separators == ("\n",)
        assert ctx.body == "1\n4"

    def test_incomplete_header(self, make_ctx):
        """A bare marker has no separator character."""
        with pytest.raises(InvalidInputError):
            resolve_delimiter(make_ctx("//"))

    def test_header_without_body(self, make_ctx):
        """A separator with nothing after it leaves an empty body."""
        ctx = resolve_delimiter(make_ctx("//;"))

        assert ctx.separators == (";",)
        assert ctx.body == ""

    def test_permissive_fourth_character(self, make_ctx):
        """The default profile skips the fourth character unchecked."""
        ctx = resolve_delimiter(make_ctx("//;X1;2"))

        assert ctx.body == "1;2"

    def test_strict_fourth_character(self, make_ctx):
        """The strict profile requires a newline after the separator."""
        with pytest.raises(InvalidInputError):
            resolve_delimiter(make_ctx("//;X1;2", profile="strict"))

    def test_strict_accepts_well_formed_header(self, make_ctx):
        ctx = resolve_delimiter(make_ctx("//;\n1;2", profile="strict"))

        assert ctx.body == "1;2"

    def test_adds_trace(self, make_ctx):
        ctx = resolve_delimiter(make_ctx("1"))

        assert ctx.trace[0].pass_name == "p00_resolve_delimiter"


class TestFindConsecutiveSeparators:
    """Tests for the raw separator scan."""

    @pytest.mark.parametrize("text", ["", "1", "1,2", "1\n2,3", "0, 1, 2", ",1"])
    def test_no_violation(self, text):
        assert find_consecutive_separators(text, ",\n") is None

    def test_adjacent_separators(self):
        """Second separator of a run is reported."""
        assert find_consecutive_separators("1,\n2", ",\n") == 2

    def test_spaces_do_not_break_a_run(self):
        assert find_consecutive_separators("1 , , 2", ",") == 4

    def test_trailing_separator(self):
        """A separator pending at end of text is reported at len(text)."""
        assert find_consecutive_separators("1,", ",") == 2
        assert find_consecutive_separators("1, ", ",") == 3

    def test_only_listed_characters_are_separators(self):
        assert find_consecutive_separators("1;;2", ",") is None


class TestP10CheckSeparators:
    """Tests for p10_check_separators pass."""

    @pytest.mark.parametrize("text", ["1,\n", "1,\n2", "1\n,2"])
    def test_rejects_consecutive_default(self, make_ctx, text):
        ctx = resolve_delimiter(make_ctx(text))

        with pytest.raises(ConsecutiveSeparatorsError):
            check_separators(ctx)

    def test_rejects_consecutive_custom(self, make_ctx):
        ctx = resolve_delimiter(make_ctx("//\n\n1\n\n2"))

        with pytest.raises(ConsecutiveSeparatorsError):
            check_separators(ctx)

    def test_checks_body_not_header(self, make_ctx):
        """The header's own newline does not count as a separator."""
        ctx = resolve_delimiter(make_ctx("//\n\n1\n4"))

        check_separators(ctx)

        assert ctx.trace[-1].action == "separators_ok"
