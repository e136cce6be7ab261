"""Parsing of loosely-typed rule variables.

Variables reach the rule engine either as ``key=value`` text (one per line)
or as already-split request parameters. Values are typed the same way in
both cases: ``true``/``false`` become booleans, integers become ints and
everything else stays a string.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

LINE_SEPARATORS = re.compile(r"[\n\r;]+")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def coerce_value(value: str) -> bool | int | str:
    """Type a single trimmed value."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if INTEGER_PATTERN.fullmatch(value):
        return int(value)
    return value


def parse_variables_text(text: str | None) -> dict[str, Any]:
    """Parse ``key=value`` / ``key:value`` lines into typed variables.

    Lines are separated by newlines or ``;``. Blank lines, ``#`` comments and
    lines without a usable key or value are skipped. The separator is the
    first ``=`` if the line has one, otherwise the first ``:``.

    Examples:
        >>> parse_variables_text("motion=true\\nhour: 20\\nmode=NIGHT")
        {'motion': True, 'hour': 20, 'mode': 'NIGHT'}
    """
    variables: dict[str, Any] = {}
    if not text or not text.strip():
        return variables

    for raw in LINE_SEPARATORS.split(text):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        separator = line.find("=")
        if separator < 0:
            separator = line.find(":")
        if separator <= 0:
            continue

        key = line[:separator].strip()
        value = line[separator + 1 :].strip()
        if not key or not value:
            continue
        variables[key] = coerce_value(value)

    return variables


def coerce_variables(
    params: Mapping[str, Any] | None, ignore: Iterable[str] = ()
) -> dict[str, Any]:
    """Type already-split parameters, dropping ignored keys and blank values.

    Values that are not strings (e.g. JSON booleans and numbers) are kept as-is.
    """
    variables: dict[str, Any] = {}
    ignored = set(ignore)
    for key, value in (params or {}).items():
        if key in ignored or value is None:
            continue
        if not isinstance(value, str):
            variables[key] = value
            continue
        trimmed = value.strip()
        if trimmed:
            variables[key] = coerce_value(trimmed)
    return variables
