"""Run configuration assembled once from command-line flags and environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL: Final = "WARNING"

LOG_LEVEL_ENV: Final = "JSONCLIP_LOG_LEVEL"
NO_COLOR_ENV: Final = "NO_COLOR"


@dataclass(frozen=True)
class Config:
    """
    Configures a single run with immutable settings.

    Built once at start-up and handed to each pipeline step, so no step
    reads flags or environment variables on its own.
    """

    path: str | None = None
    copy: bool = False
    color: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.path is not None and not isinstance(self.path, str):
            raise TypeError("path must be a string or None")
        if not isinstance(self.copy, bool):
            raise TypeError("copy must be a boolean")
        if not isinstance(self.color, bool):
            raise TypeError("color must be a boolean")
        if self.log_level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)

    @classmethod
    def from_options(
        cls,
        path: str | None,
        copy: bool,
        color: bool,
        environ: Mapping[str, str] | None = None,
    ) -> "Config":
        """
        Merges command-line flags with environment overrides.

        A non-empty ``NO_COLOR`` disables highlighting; ``JSONCLIP_LOG_LEVEL``
        selects the logging threshold, falling back to the default when unset
        or unrecognised. An empty path means no extraction.
        """
        env = os.environ if environ is None else environ
        log_level = env.get(LOG_LEVEL_ENV, "").strip().upper()
        if log_level not in LOG_LEVELS:
            log_level = DEFAULT_LOG_LEVEL
        return cls(
            path=path or None,
            copy=copy,
            color=color and not env.get(NO_COLOR_ENV),
            log_level=log_level,
        )
