"""Tests for splitting and recognising action-script statements."""

import pytest

from smarthome.core.scripting import ActionScriptParser, strip_quotes


@pytest.fixture
def parser():
    return ActionScriptParser()


class TestSplit:
    def test_semicolons_and_newlines(self, parser):
        script = "turn_on(a); turn_off(b)\nmode(NIGHT)\r\n"
        assert parser.split(script) == ["turn_on(a)", "turn_off(b)", "mode(NIGHT)"]

    def test_blank_and_comment_lines_dropped(self, parser):
        assert parser.split("# evening\n\n;;turn_on(a)") == ["turn_on(a)"]

    def test_empty_script(self, parser):
        assert parser.split("") == []
        assert parser.split(None) == []


class TestParseStatement:
    def test_simple_call(self, parser):
        statement = parser.parse_statement("turn_on(living-light-1)")
        assert statement.is_valid
        assert statement.function == "turn_on"
        assert statement.argument == "living-light-1"

    def test_function_name_is_lower_cased(self, parser):
        assert parser.parse_statement("TURN_ON(x)").function == "turn_on"

    def test_whitespace_and_quotes(self, parser):
        statement = parser.parse_statement("scene ( 'Movie Night' )")
        assert statement.function == "scene"
        assert statement.argument == "Movie Night"

    def test_empty_argument(self, parser):
        statement = parser.parse_statement("noop()")
        assert statement.is_valid
        assert statement.argument == ""

    @pytest.mark.parametrize(
        "text", ["not_a_call", "1abc(x)", "turn_on(x", "turn on(x)", "(x)", "turn_on(x) now"]
    )
    def test_malformed(self, parser, text):
        statement = parser.parse_statement(text)
        assert not statement.is_valid
        assert statement.function is None
        assert "Unsupported action format" in statement.error

    def test_parse_keeps_order(self, parser):
        statements = parser.parse("turn_on(a); bad; off(b)")
        assert [s.text for s in statements] == ["turn_on(a)", "bad", "off(b)"]
        assert [s.is_valid for s in statements] == [True, False, True]


class TestStripQuotes:
    def test_matching_quotes(self):
        assert strip_quotes("'x'") == "x"
        assert strip_quotes('" x "') == "x"

    def test_mismatched_quotes_kept(self):
        assert strip_quotes("'x\"") == "'x\""

    def test_none(self):
        assert strip_quotes(None) == ""
