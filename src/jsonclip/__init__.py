"""
Zero-config JSON formatter and inspector for clipboard data.

Reads JSON from the clipboard or standard input, validates it with
line/column diagnostics, pretty-prints it with syntax highlighting, and
extracts nested values through dot/bracket paths.
"""

from jsonclip.errors import ClipboardUnavailable
from jsonclip.errors import EmptyInput
from jsonclip.errors import InvalidJson
from jsonclip.errors import JsonclipError
from jsonclip.errors import PathNotFound
from jsonclip.errors import UnexpectedError
from jsonclip.parser import Diagnostic
from jsonclip.parser import Location
from jsonclip.parser import ParseFailure
from jsonclip.parser import diagnose
from jsonclip.parser import locate
from jsonclip.parser import parse
from jsonclip.path import NotFound
from jsonclip.path import extract
from jsonclip.path import split_path
from jsonclip.presenter import clipboard_text
from jsonclip.presenter import format_plain
from jsonclip.presenter import highlight
from jsonclip.presenter import render
from jsonclip.types import JsonValue

__version__ = "0.1.0"

__all__ = [
    "ClipboardUnavailable",
    "Diagnostic",
    "EmptyInput",
    "InvalidJson",
    "JsonValue",
    "JsonclipError",
    "Location",
    "NotFound",
    "ParseFailure",
    "PathNotFound",
    "UnexpectedError",
    "clipboard_text",
    "diagnose",
    "extract",
    "format_plain",
    "highlight",
    "locate",
    "parse",
    "render",
    "split_path",
]
