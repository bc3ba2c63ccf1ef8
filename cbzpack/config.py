"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from cbzpack.archivers.cbz import DEFAULT_ARCHIVE_EXTENSION
from cbzpack.errors import ConfigurationError

ALLOWED_ARCHIVE_EXTENSIONS = ("cbz", "zip")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got '{value}'")


@dataclass(frozen=True)
class PackSettings:
    """Settings for a packing run.

    Attributes:
        archive_extension: Extension of the default archive path
        show_progress: Whether to draw a progress bar while writing
    """

    archive_extension: str = DEFAULT_ARCHIVE_EXTENSION
    show_progress: bool = True

    @classmethod
    def from_env(cls) -> PackSettings:
        """Load settings from environment variables.

        Reads CBZPACK_ARCHIVE_EXTENSION and CBZPACK_SHOW_PROGRESS. Call
        ``load_dotenv()`` first to pick up a .env file.

        Returns:
            PackSettings: Settings with defaults for unset variables

        Raises:
            ConfigurationError: If a variable has an invalid value
        """
        extension = os.getenv("CBZPACK_ARCHIVE_EXTENSION", DEFAULT_ARCHIVE_EXTENSION)
        extension = extension.strip().lstrip(".").lower()
        if extension not in ALLOWED_ARCHIVE_EXTENSIONS:
            raise ConfigurationError(
                "CBZPACK_ARCHIVE_EXTENSION must be one of "
                + f"{', '.join(ALLOWED_ARCHIVE_EXTENSIONS)}, got '{extension}'"
            )

        show_progress = True
        raw_progress = os.getenv("CBZPACK_SHOW_PROGRESS")
        if raw_progress is not None:
            show_progress = _parse_bool("CBZPACK_SHOW_PROGRESS", raw_progress)

        return cls(archive_extension=extension, show_progress=show_progress)
