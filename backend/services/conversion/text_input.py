from __future__ import annotations
import json
import re
from typing import Any

from core.exceptions import InvalidJSONTextError

_STRING_LITERAL = re.compile(r'"(?:\\.|[^"\\])*"')
_CONSTANT = re.compile(r"-?(?:NaN|Infinity)")


class NonStandardConstantError(ValueError):
    """NaN / Infinity literals: accepted by Python's json, rejected by JSON itself."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unexpected token {name}: not valid JSON")


def _reject_constant(name: str):
    raise NonStandardConstantError(name)


def strict_loads(text: str) -> Any:
    """json.loads that refuses NaN, Infinity and -Infinity."""
    return json.loads(text, parse_constant=_reject_constant)


def _locate_constant(text: str, name: str) -> tuple[int, int]:
    # blank out string literals so a "NaN" inside a name is not matched
    masked = _STRING_LITERAL.sub(lambda m: " " * len(m.group()), text)
    match = _CONSTANT.search(masked)
    pos = match.start() if match else 0
    line = text.count("\n", 0, pos) + 1
    column = pos - (text.rfind("\n", 0, pos) + 1) + 1
    return line, column


def parse_json_text(text: str) -> Any:
    """Decode pasted JSON text, pointing at the line and column of a syntax error."""
    lines = text.split("\n")
    try:
        return strict_loads(text)
    except json.JSONDecodeError as e:
        lineno, colno, msg = e.lineno, e.colno, e.msg
        cause = e
    except NonStandardConstantError as e:
        lineno, colno = _locate_constant(text, e.name)
        msg, cause = str(e), e
    source_line = lines[lineno - 1] if 0 < lineno <= len(lines) else ""
    raise InvalidJSONTextError(msg, lineno, colno, source_line) from cause
