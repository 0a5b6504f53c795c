"""
Pretty-printing of parsed JSON values, with or without syntax colors.

With styling stripped, ``highlight`` produces exactly the text of
``format_plain``: two-space indentation, one item per line, and empty
containers kept on one line.
"""

import json
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

import click

from jsonclip.types import JsonValue

INDENT: Final = "  "

NULL_COLOR: Final = "red"
STRING_COLOR: Final = "green"
NUMBER_COLOR: Final = "blue"
BOOLEAN_COLOR: Final = "yellow"
KEY_COLOR: Final = "cyan"


def _encode_scalar(value: JsonValue) -> str:
    return json.dumps(value, ensure_ascii=False, allow_nan=False)


def _highlight_leaf(value: JsonValue) -> str:  # noqa: PLR0911
    """Renders a scalar or an empty container."""
    if value is None:
        return click.style("null", fg=NULL_COLOR)
    if isinstance(value, bool):
        return click.style(_encode_scalar(value), fg=BOOLEAN_COLOR)
    if isinstance(value, str):
        return click.style(_encode_scalar(value), fg=STRING_COLOR)
    if isinstance(value, int | float):
        return click.style(_encode_scalar(value), fg=NUMBER_COLOR)
    if value == []:
        return "[]"
    if value == {}:
        return "{}"

    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


@dataclass
class _Frame:
    """An open container whose remaining entries are still to be rendered."""

    entries: Iterator[tuple[str | None, JsonValue]]
    close: str
    level: int
    started: bool = False


def _open(
    value: JsonValue, level: int, parts: list[str], stack: list[_Frame]
) -> None:
    if isinstance(value, list) and value:
        parts.append("[")
        stack.append(_Frame(((None, item) for item in value), "]", level))
    elif isinstance(value, dict) and value:
        parts.append("{")
        stack.append(_Frame(iter(value.items()), "}", level))
    else:
        parts.append(_highlight_leaf(value))


def highlight(value: JsonValue, indent: int = 0) -> str:
    """
    Renders ``value`` with a fixed ANSI color per JSON type.

    Containers are walked with an explicit stack, so any document the
    decoder accepts renders regardless of nesting depth.
    """
    parts: list[str] = []
    stack: list[_Frame] = []
    _open(value, indent, parts, stack)

    while stack:
        frame = stack[-1]
        entry = next(frame.entries, None)
        if entry is None:
            stack.pop()
            parts.append(f"\n{INDENT * frame.level}{frame.close}")
            continue

        key, item = entry
        separator = ",\n" if frame.started else "\n"
        parts.append(separator + INDENT * (frame.level + 1))
        frame.started = True
        if key is not None:
            parts.append(f"{click.style(_encode_scalar(key), fg=KEY_COLOR)}: ")
        _open(item, frame.level + 1, parts, stack)

    return "".join(parts)


def format_plain(value: JsonValue) -> str:
    """Standard indented serialization, keys in their original order."""
    return json.dumps(
        value, indent=len(INDENT), ensure_ascii=False, allow_nan=False
    )


def render(value: JsonValue, color: bool) -> str:
    return highlight(value) if color else format_plain(value)


def clipboard_text(value: JsonValue) -> str:
    """
    Text written to the clipboard for an extracted value.

    Strings are copied as their bare contents; everything else is copied as
    indented JSON text.
    """
    if isinstance(value, str):
        return value
    return format_plain(value)
