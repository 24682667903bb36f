"""Decode API text into typed models, keeping enough context to debug failures.

The upstream payloads drift between game patches, so a failed decode reports
where in the original text it went wrong: line, column and the lines around it.
"""

import json
import re
from functools import lru_cache
from typing import Any, Dict, Tuple

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import ContextLine, DecodeError

CONTEXT_BEFORE = 2
CONTEXT_AFTER = 2

_WS = re.compile(r"[ \t\n\r]*")
_scalar = json.JSONDecoder()


def decode(text: str, target: Any = None, endpoint: str = "") -> Any:
    """Parse ``text`` and validate it against ``target``.

    ``target`` is a pydantic model class or anything ``TypeAdapter`` accepts;
    with ``None`` the parsed document is returned as-is.
    Raises DecodeError for both malformed JSON and shape mismatches.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(endpoint, e.msg, e.lineno, e.colno,
                          context_window(text, e.lineno)) from e
    except RecursionError as e:
        raise DecodeError(endpoint, "document nested too deeply", 1, 1,
                          context_window(text, 1)) from e
    if target is None:
        return payload
    try:
        if isinstance(target, type) and issubclass(target, BaseModel):
            return target.model_validate(payload)
        return _adapter(target).validate_python(payload)
    except ValidationError as e:
        first = e.errors()[0]
        loc = tuple(first.get("loc") or ())
        offset = locate(text, loc, missing=first.get("type") == "missing")
        line, column = line_column(text, offset)
        where = ".".join(str(part) for part in loc) or "<root>"
        message = f"{where}: {first.get('msg')}"
        if e.error_count() > 1:
            message += f" (+{e.error_count() - 1} more)"
        raise DecodeError(endpoint, message, line, column, context_window(text, line)) from e


@lru_cache(maxsize=None)
def _adapter(target):
    return TypeAdapter(target)


def context_window(text: str, line: int, before: int = CONTEXT_BEFORE,
                   after: int = CONTEXT_AFTER) -> Tuple[ContextLine, ...]:
    lines = text.split("\n")
    idx = max(line - 1, 0)
    start = max(idx - before, 0)
    end = min(idx + after + 1, len(lines))
    return tuple(
        ContextLine(n + 1, lines[n].rstrip("\r"), n + 1 == line)
        for n in range(start, end)
    )


def line_column(text: str, offset: int) -> Tuple[int, int]:
    """1-based line/column of ``offset``, counted the way ``json`` does."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def locate(text: str, loc: Tuple, missing: bool = False) -> int:
    """Character offset in ``text`` for a validation error location.

    A present value resolves to its first character. A missing key resolves to
    the closing bracket of the deepest enclosing value that does exist.
    """
    try:
        spans = value_spans(text)
    except RecursionError:
        # nesting json accepted but the walk cannot follow; fall back to the top
        spans = {}
    path = tuple(loc)
    while path and path not in spans:
        path = path[:-1]
    start, end = spans.get(path, (0, len(text)))
    if path != tuple(loc) and missing:
        return max(end - 1, start)
    return start


def value_spans(text: str) -> Dict[Tuple, Tuple[int, int]]:
    """Map every JSON path (keys and list indices) to its ``(start, end)`` offsets.

    Expects a document ``json.loads`` already accepted.
    """
    spans: Dict[Tuple, Tuple[int, int]] = {}
    _walk(text, 0, (), spans)
    return spans


def _skip(text: str, idx: int) -> int:
    return _WS.match(text, idx).end()


def _walk(text: str, idx: int, path: Tuple, spans: Dict) -> int:
    idx = _skip(text, idx)
    start = idx
    ch = text[idx]
    if ch == "{":
        idx = _skip(text, idx + 1)
        if text[idx] == "}":
            idx += 1
        else:
            while True:
                key, idx = _scalar.raw_decode(text, idx)
                idx = _skip(text, idx) + 1  # ':'
                idx = _skip(text, _walk(text, idx, path + (key,), spans))
                if text[idx] == ",":
                    idx = _skip(text, idx + 1)
                    continue
                idx += 1  # '}'
                break
    elif ch == "[":
        idx = _skip(text, idx + 1)
        if text[idx] == "]":
            idx += 1
        else:
            n = 0
            while True:
                idx = _skip(text, _walk(text, idx, path + (n,), spans))
                n += 1
                if text[idx] == ",":
                    idx += 1
                    continue
                idx += 1  # ']'
                break
    else:
        _, idx = _scalar.raw_decode(text, idx)
    spans[path] = (start, idx)
    return idx


def describe(err: DecodeError) -> str:
    """Multi-line report of a decode failure, suitable for a log record."""
    head = [
        "=== PARSING ERROR ===",
        f"Endpoint: {err.endpoint}",
        f"Error: {err.message}",
        f"Error location: line {err.line}, column {err.column}",
        "Context around error:",
    ]
    return "\n".join(head + [err.format_context(), "=== END PARSING ERROR ==="])
