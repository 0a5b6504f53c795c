"""
Diagnosing JSON parser.

Delegates parsing to the standard-library decoder and, on failure, maps the
reported character offset back to a line/column pair so the offending line
can be shown with a caret under the failure site.
"""

import json
import logging
import math
from dataclasses import dataclass

from jsonclip.errors import InvalidJson
from jsonclip.types import JsonValue
from jsonclip.types import Position

logger = logging.getLogger(__name__)

COMMON_FIXES = (
    "Check for trailing commas",
    "Ensure quotes around keys and string values",
    "Verify brackets and braces are balanced",
)


@dataclass(frozen=True)
class ParseFailure:
    """
    Raw decoder failure: message plus optional character offset.

    ``offset`` is ``None`` for failures the decoder reports without a
    position, such as nesting too deep for the interpreter.
    """

    message: str
    offset: Position | None = None

    @classmethod
    def from_exception(cls, exc: Exception) -> "ParseFailure":
        if isinstance(exc, json.JSONDecodeError):
            return cls(exc.msg, exc.pos)
        return cls(str(exc))


@dataclass(frozen=True)
class Location:
    """1-based line and column of a character offset."""

    line: int
    column: int


@dataclass(frozen=True)
class Diagnostic:
    """
    Human-readable description of where and why parsing failed.

    Renders the decoder message, the literal source line, a caret pointing
    at the failing column, and a block of common remediation hints.
    """

    header: str
    line: int
    column: int
    source_line: str

    @property
    def pointer(self) -> str:
        return " " * (self.column - 1) + "^"

    def render(self) -> str:
        prefix = f"   Line {self.line}: "
        lines = [
            self.header,
            f"{prefix}{self.source_line}",
            " " * len(prefix) + self.pointer,
            "",
            "💡 Common fixes:",
        ]
        lines.extend(f"   - {fix}" for fix in COMMON_FIXES)
        return "\n".join(lines)


def locate(text: str, offset: Position) -> Location:
    """
    Maps a character offset to a 1-based line and column.

    Walks the lines accumulating their lengths plus one for each newline
    until the running total reaches the offset. Falls back to line 1,
    column 1 when the text is exhausted first.
    """
    chars = 0
    for index, line in enumerate(text.split("\n")):
        if chars + len(line) >= offset:
            return Location(index + 1, offset - chars + 1)
        chars += len(line) + 1
    return Location(1, 1)


def diagnose(text: str, failure: ParseFailure) -> Diagnostic | None:
    """Builds a diagnostic for ``failure``, or ``None`` without an offset."""
    if failure.offset is None:
        return None

    location = locate(text, failure.offset)
    source_line = text.split("\n")[location.line - 1]
    return Diagnostic(failure.message, location.line, location.column, source_line)


def _reject_constant(name: str) -> None:
    msg = f"Non-standard constant {name!r} is not valid JSON"
    raise ValueError(msg)


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        msg = f"Number {literal!r} is out of range for a finite float"
        raise ValueError(msg)
    return value


def parse(text: str) -> JsonValue:
    """
    Parses JSON text, raising InvalidJson with a rendered diagnostic.

    Only the standard grammar is accepted: ``NaN`` and ``Infinity`` are
    rejected, as are numbers too large for a finite float, and control
    characters inside strings must be escaped.
    """
    if not isinstance(text, str):
        msg = f"the JSON document must be str, not {type(text).__name__}"
        raise TypeError(msg)

    try:
        value: JsonValue = json.loads(
            text, parse_float=_finite_float, parse_constant=_reject_constant
        )
    except (ValueError, RecursionError) as exc:
        failure = ParseFailure.from_exception(exc)
        diagnostic = diagnose(text, failure)
        if diagnostic is None:
            logger.debug("Parse failed without position: %s", failure.message)
            raise InvalidJson(failure.message) from exc

        logger.debug(
            "Parse failed at line %d, column %d: %s",
            diagnostic.line,
            diagnostic.column,
            failure.message,
        )
        raise InvalidJson(
            failure.message,
            diagnostic.render(),
            pos=failure.offset,
            lineno=diagnostic.line,
            colno=diagnostic.column,
        ) from exc

    logger.debug("Parsed %d characters into %s", len(text), type(value).__name__)
    return value
