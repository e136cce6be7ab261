"""Tests for the trigger-condition parser."""

import pytest

from smarthome.core.rules import (
    And,
    BooleanVar,
    Comparison,
    Not,
    Or,
    StringEquals,
    parse_rule,
    render,
)


class TestLeaves:
    """Test parsing single variables, comparisons and string equality."""

    def test_boolean_variable(self):
        assert parse_rule("motion") == BooleanVar("motion")

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_rule("   motion  ") == BooleanVar("motion")

    @pytest.mark.parametrize("operator", [">=", "<=", "==", "!=", ">", "<"])
    def test_comparison_operators(self, operator):
        assert parse_rule(f"hour {operator} 18") == Comparison("hour", operator, 18)

    def test_comparison_without_spaces(self):
        assert parse_rule("hour>=18") == Comparison("hour", ">=", 18)

    def test_negative_integer(self):
        assert parse_rule("temp < -5") == Comparison("temp", "<", -5)

    def test_non_numeric_comparison_degrades_to_string_equality(self):
        assert parse_rule("mode == NIGHT") == StringEquals("mode", "NIGHT")

    def test_not_equal_with_text_also_degrades(self):
        assert parse_rule("mode != NIGHT") == StringEquals("mode", "NIGHT")

    def test_decimal_is_not_an_integer(self):
        assert parse_rule("temp > 20.5") == StringEquals("temp", "20.5")

    def test_single_equals_strips_quotes(self):
        assert parse_rule("mode = 'NIGHT'") == StringEquals("mode", "NIGHT")
        assert parse_rule('mode = "NIGHT"') == StringEquals("mode", "NIGHT")

    def test_single_equals_removes_every_quote(self):
        assert parse_rule("name = \"it's\"") == StringEquals("name", "its")

    def test_leading_operator_is_a_boolean_name(self):
        assert parse_rule(">= 5") == BooleanVar(">= 5")


class TestConnectives:
    """Test NOT, AND and OR grouping."""

    def test_and(self):
        assert parse_rule("motion AND hour >= 18") == And(
            BooleanVar("motion"), Comparison("hour", ">=", 18)
        )

    def test_or(self):
        assert parse_rule("a OR b") == Or(BooleanVar("a"), BooleanVar("b"))

    def test_first_and_splits_first(self):
        assert parse_rule("a AND b AND c") == And(
            BooleanVar("a"), And(BooleanVar("b"), BooleanVar("c"))
        )

    def test_and_is_split_before_or(self):
        # "a OR b AND c" groups as "(a OR b) AND c"
        assert parse_rule("a OR b AND c") == And(
            Or(BooleanVar("a"), BooleanVar("b")), BooleanVar("c")
        )

    def test_and_before_or_on_the_right(self):
        assert parse_rule("a AND b OR c") == And(
            BooleanVar("a"), Or(BooleanVar("b"), BooleanVar("c"))
        )

    def test_leading_not_covers_the_whole_rest(self):
        assert parse_rule("NOT a AND b") == Not(And(BooleanVar("a"), BooleanVar("b")))

    def test_double_not(self):
        assert parse_rule("NOT NOT a") == Not(Not(BooleanVar("a")))

    def test_keywords_are_case_sensitive(self):
        assert parse_rule("a and b") == BooleanVar("a and b")

    def test_not_without_space_is_a_name(self):
        assert parse_rule("NOTa") == BooleanVar("NOTa")

    def test_leading_and_is_not_a_split(self):
        assert parse_rule("AND b") == BooleanVar("AND b")


class TestRender:
    """Test canonical rendering of parsed trees."""

    def test_render_shows_grouping(self):
        assert render(parse_rule("a OR b AND c")) == "((a OR b) AND c)"

    def test_render_leaves(self):
        assert render(parse_rule("motion AND hour >= 18")) == "(motion AND hour >= 18)"
        assert render(parse_rule("mode = 'NIGHT'")) == 'mode = "NIGHT"'
        assert render(parse_rule("NOT away")) == "NOT away"

    def test_parsing_is_deterministic(self):
        rule = "NOT door OR window AND temp > 20"
        assert parse_rule(rule) == parse_rule(rule)
