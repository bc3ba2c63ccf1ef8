"""Page filename rule derived from the folder name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from cbzpack.errors import ConfigurationError

# Recognized page image extensions, matched case-insensitively
PAGE_EXTENSIONS = ("jpg", "jpeg", "png")


def derive_title(folder: Path) -> str:
    """
    Derive the title from the last component of the folder path.

    Args:
        folder: Path to the source folder

    Returns:
        str: The folder's base name

    Raises:
        ConfigurationError: If the path has no usable final component
    """
    title = folder.name
    if not title or title in (".", ".."):
        raise ConfigurationError(
            f"Could not determine folder name as title from '{folder}'"
        )
    return title


@dataclass(frozen=True)
class NamingRule:
    """Expected page filename shape: ``<title>-<number>.<jpg|jpeg|png>``."""

    title: str
    pattern: re.Pattern[str]

    @classmethod
    def from_title(cls, title: str) -> NamingRule:
        """
        Build the rule for a title.

        The title is escaped, so any regex metacharacters in a folder
        name only ever match themselves.

        Args:
            title: Title derived from the folder name

        Returns:
            NamingRule: Case-insensitive rule for the title
        """
        extensions = "|".join(PAGE_EXTENSIONS)
        pattern = re.compile(
            rf"{re.escape(title)}-([0-9]+)\.(?:{extensions})",
            re.IGNORECASE,
        )
        return cls(title=title, pattern=pattern)

    @property
    def expected_shape(self) -> str:
        """Human readable form of the rule for messages."""
        return f"{self.title}-<number>.<{'|'.join(PAGE_EXTENSIONS)}>"

    def match(self, filename: str) -> str | None:
        """
        Match a whole filename against the rule.

        Args:
            filename: Name of the file, without any directory part

        Returns:
            The captured page digits, or None if the name does not match
        """
        match = self.pattern.fullmatch(filename)
        if match is None:
            return None
        return match.group(1)
