"""System clipboard access through pyperclip."""

import logging

import pyperclip

from jsonclip.errors import ClipboardUnavailable

logger = logging.getLogger(__name__)


def read_text() -> str:
    """Returns the clipboard's text contents; raises ClipboardUnavailable."""
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        raise ClipboardUnavailable("read", str(exc)) from exc

    logger.debug("Read %d characters from clipboard", len(text or ""))
    return text or ""


def write_text(text: str) -> None:
    """Replaces the clipboard contents with ``text``."""
    if not isinstance(text, str):
        raise TypeError("clipboard payload must be a string")

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardUnavailable("write", str(exc)) from exc

    logger.debug("Wrote %d characters to clipboard", len(text))
