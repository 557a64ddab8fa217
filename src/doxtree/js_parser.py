"""Extract hierarchy data from Doxygen navigation scripts."""

from __future__ import annotations

import json
import re
from typing import Any

from doxtree.config import DOXTREE_VARIABLE_NAME
from doxtree.exceptions import MalformedTreeError

_ASSIGNMENT_TEMPLATE = r"(?:\bvar|\blet|\bconst)?\s*\b{name}\s*=\s*"
_TRAILING_RE = re.compile(r"\s*;?\s*$")


def parse_hierarchy_js(text: str, *, variable: str | None = None) -> list[Any]:
    """Decode the array literal assigned to ``variable`` in a Doxygen script.

    Doxygen writes ``hierarchy.js`` as ``var hierarchy = [ ... ];`` where the
    array uses JSON-compatible literals. A file holding only the array is
    accepted too.

    Args:
        text: Script or JSON source.
        variable: Name of the assigned variable. Defaults to
            ``DOXTREE_VARIABLE_NAME``.

    Returns:
        The decoded nested arrays, unvalidated.

    Raises:
        MalformedTreeError: If no array can be found or it does not decode.
    """
    name = variable or DOXTREE_VARIABLE_NAME
    literal = _extract_literal(text, name)
    try:
        data = json.loads(literal)
    except json.JSONDecodeError as exc:
        raise MalformedTreeError(
            f"Invalid hierarchy literal (line {exc.lineno}, column {exc.colno}): {exc.msg}"
        ) from exc
    if not isinstance(data, list):
        raise MalformedTreeError(
            f"Hierarchy literal must be an array, got {type(data).__name__}"
        )
    return data


def _extract_literal(text: str, name: str) -> str:
    stripped = text.strip()
    if stripped.startswith("["):
        return _TRAILING_RE.sub("", stripped)

    assignment = re.compile(_ASSIGNMENT_TEMPLATE.format(name=re.escape(name)))
    match = assignment.search(text)
    if not match:
        raise MalformedTreeError(f"No assignment to {name!r} found in hierarchy script")

    start = text.find("[", match.end())
    if start == -1 or text[match.end():start].strip():
        raise MalformedTreeError(f"{name!r} is not assigned an array literal")
    end = _find_closing_bracket(text, start)
    return text[start : end + 1]


def _find_closing_bracket(text: str, start: int) -> int:
    """Return the index of the bracket that closes the one at ``start``."""
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return index
    raise MalformedTreeError("Unterminated array literal in hierarchy script")
