"""
Error kinds reported by the command line tool.

Every error is terminal: the shell reports ``title`` (and ``detail`` when
present) on stderr and exits with ``exit_code``.
"""

from typing import ClassVar

from jsonclip.types import Position


class JsonclipError(Exception):
    """
    Base class for failures surfaced to the user.

    Carries a one-line title and an optional multi-line detail block so the
    shell can style them separately.
    """

    exit_code: ClassVar[int] = 1

    def __init__(self, title: str, detail: str = "") -> None:
        if not isinstance(title, str):
            raise TypeError("title must be a string")

        self.title = title
        self.detail = detail
        super().__init__(f"{title}\n{detail}" if detail else title)


class ClipboardUnavailable(JsonclipError):
    """Raised when the system clipboard cannot be read or written."""

    def __init__(self, action: str, reason: str) -> None:
        self.action = action
        self.reason = reason
        if action == "read":
            title = "Failed to read clipboard. Please copy JSON first."
        else:
            title = f"Failed to {action} clipboard."
        super().__init__(title, reason)


class EmptyInput(JsonclipError):
    """Raised when neither stdin nor the clipboard yielded any text."""

    def __init__(self) -> None:
        super().__init__(
            "No JSON data found.", "Copy JSON to clipboard or pipe via stdin."
        )


class InvalidJson(JsonclipError, ValueError):
    """
    Handles JSON parsing failures with a rendered, human-readable diagnostic.

    ``pos``, ``lineno`` and ``colno`` are ``None`` when the underlying
    decoder did not report a position.
    """

    def __init__(
        self,
        msg: str,
        diagnostic: str = "",
        pos: Position | None = None,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        if pos is not None and (not isinstance(pos, int) or pos < 0):
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.pos = pos
        self.lineno = lineno
        self.colno = colno
        self.diagnostic = diagnostic or msg
        super().__init__("Invalid JSON:", self.diagnostic)


class PathNotFound(JsonclipError, LookupError):
    """Raised when a dot/bracket path does not resolve."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path not found: {path}")


class UnexpectedError(JsonclipError):
    """Wraps any other failure raised while processing a document."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__("Unexpected error:", reason)
