"""Parser for action scripts.

An action script is free text holding ``function(argument)`` statements
separated by ``;`` or line breaks. Lines starting with ``#`` are comments.
Malformed statements are reported, never raised.
"""

import re
from dataclasses import dataclass

STATEMENT_SEPARATORS = re.compile(r"[;\n\r]+")

UNSUPPORTED_FORMAT_MESSAGE = "Unsupported action format. Use fn(arg), e.g. turn_on(deviceId)"


@dataclass(frozen=True)
class ScriptStatement:
    """One statement of an action script.

    Attributes:
        text: The trimmed statement as written.
        function: Lower-cased function name, or None when malformed.
        argument: Trimmed, quote-stripped argument ("" when malformed).
        error: Why the statement could not be parsed, if it could not.
    """

    text: str
    function: str | None = None
    argument: str = ""
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.function is not None


def strip_quotes(value: str | None) -> str:
    """Remove one layer of matching single or double quotes."""
    if value is None:
        return ""
    trimmed = value.strip()
    if len(trimmed) >= 2 and trimmed[0] == trimmed[-1] and trimmed[0] in ("'", '"'):
        return trimmed[1:-1].strip()
    return trimmed


def _is_identifier_start(char: str) -> bool:
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_identifier_char(char: str) -> bool:
    return _is_identifier_start(char) or ("0" <= char <= "9")


class ActionScriptParser:
    """Splits scripts into statements and recognises ``name(arg)`` calls."""

    def split(self, script: str | None) -> list[str]:
        """Split a script into trimmed statements, dropping blanks and comments."""
        if not script:
            return []
        statements = []
        for raw in STATEMENT_SEPARATORS.split(script):
            statement = raw.strip()
            if not statement or statement.startswith("#"):
                continue
            statements.append(statement)
        return statements

    def parse_statement(self, statement: str) -> ScriptStatement:
        """Recognise ``identifier ( argument )`` with optional whitespace.

        The argument is everything between the first ``(`` and the closing
        ``)`` that ends the statement.
        """
        text = statement.strip()
        length = len(text)

        if not length or not _is_identifier_start(text[0]):
            return ScriptStatement(text=text, error=UNSUPPORTED_FORMAT_MESSAGE)

        pos = 1
        while pos < length and _is_identifier_char(text[pos]):
            pos += 1
        name = text[:pos]

        while pos < length and text[pos].isspace():
            pos += 1

        if pos >= length or text[pos] != "(" or not text.endswith(")"):
            return ScriptStatement(text=text, error=UNSUPPORTED_FORMAT_MESSAGE)

        argument = strip_quotes(text[pos + 1 : length - 1])
        return ScriptStatement(text=text, function=name.lower(), argument=argument)

    def parse(self, script: str | None) -> list[ScriptStatement]:
        """Parse every statement of a script, in order."""
        return [self.parse_statement(statement) for statement in self.split(script)]
