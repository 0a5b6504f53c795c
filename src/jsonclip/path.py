"""
Dot/bracket path resolution over parsed JSON values.

``"data.items[0].price"`` splits into ``["data", "items", "0", "price"]``
and is resolved left to right. Keys containing ``.``, ``[`` or ``]`` cannot
be addressed; there is no escaping syntax.
"""

import logging
import re
from enum import Enum
from typing import Final
from typing import Literal

from jsonclip.types import JsonValue

logger = logging.getLogger(__name__)

_SEPARATORS: Final = re.compile(r"[.\[\]]+")
_INDEX: Final = re.compile(r"[0-9]+")


class _NotFound(Enum):
    """Sentinel for unresolved paths, distinct from JSON ``null``."""

    NOT_FOUND = "NotFound"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NotFound"


NotFound: Final = _NotFound.NOT_FOUND
Lookup = JsonValue | Literal[_NotFound.NOT_FOUND]


def split_path(path: str) -> list[str]:
    """Splits a path on runs of ``.``, ``[`` and ``]``, dropping empty tokens."""
    return [token for token in _SEPARATORS.split(path) if token]


def extract(value: JsonValue, path: str) -> Lookup:
    """
    Resolves ``path`` against ``value``, returning NotFound on any miss.

    Digit-only tokens index into lists; any other token must be a present
    key of an object. An absent intermediate (``null``) short-circuits the
    rest of the path. Never raises and never mutates ``value``.
    """
    current: JsonValue = value
    for token in split_path(path):
        if current is None:
            return NotFound
        if isinstance(current, list) and _INDEX.fullmatch(token):
            digits = token.lstrip("0") or "0"
            # int() only sees tokens no longer than the list length
            if len(digits) > len(str(len(current))) or int(digits) >= len(current):
                return NotFound
            current = current[int(digits)]
        elif isinstance(current, dict) and token in current:
            current = current[token]
        else:
            logger.debug("Path %r stopped at token %r", path, token)
            return NotFound
    return current
