"""Store-only CBZ archive writer."""

from __future__ import annotations

import contextlib
import zipfile
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import final

from cbzpack.errors import ArchiveIOError, ConfigurationError
from cbzpack.models.page import PageEntry

DEFAULT_ARCHIVE_EXTENSION = "cbz"


def default_output_path(folder: Path, extension: str = DEFAULT_ARCHIVE_EXTENSION) -> Path:
    """
    Derive the archive path from the source folder path.

    Any existing suffix on the folder name is replaced, so ``vol.1``
    becomes ``vol.cbz`` next to the folder.

    Args:
        folder: Path to the source folder
        extension: Archive extension without the leading dot

    Returns:
        Path: Archive path beside the folder

    Raises:
        ConfigurationError: If the folder name cannot take a suffix
    """
    try:
        return folder.with_suffix(f".{extension}")
    except ValueError as e:
        raise ConfigurationError(
            f"Cannot derive an archive name from '{folder}': {e}"
        ) from e


@final
class CbzWriter:
    """Writes pages into a zip container without compression."""

    def __init__(self) -> None:
        self.compression = zipfile.ZIP_STORED

    def write(
        self,
        pages: Iterable[PageEntry],
        output_path: Path,
        on_page: Callable[[PageEntry], None] | None = None,
    ) -> Path:
        """Write pages to a new archive in the given order.

        Each source file is read fully before it is stored. Entries are
        named after the original filenames. The first failure aborts the
        write and may leave a partial file behind.

        Args:
            pages: Validated pages in archive order
            output_path: Where to create the archive
            on_page: Optional callback run after each page is stored

        Returns:
            Path to the finished archive

        Raises:
            ArchiveIOError: If the archive cannot be created, a page cannot
                be read, or the archive cannot be written or finalized
        """
        try:
            archive = zipfile.ZipFile(output_path, "w", compression=self.compression)
        except OSError as e:
            raise ArchiveIOError("create", output_path, e) from e

        try:
            for page in pages:
                info, data = self._read_page(page)
                try:
                    archive.writestr(info, data)
                except OSError as e:
                    raise ArchiveIOError("write", output_path, e) from e
                if on_page is not None:
                    on_page(page)
        except BaseException:
            # Close without masking the original error
            with contextlib.suppress(OSError):
                archive.close()
            raise

        try:
            archive.close()
        except OSError as e:
            raise ArchiveIOError("finalize", output_path, e) from e

        return output_path

    def _read_page(self, page: PageEntry) -> tuple[zipfile.ZipInfo, bytes]:
        """Read a page file and build its archive entry header.

        Args:
            page: Page to read

        Returns:
            Tuple of (entry info, file content)

        Raises:
            ArchiveIOError: If the file cannot be read
        """
        try:
            info = zipfile.ZipInfo.from_file(
                page.path, arcname=page.name, strict_timestamps=False
            )
            data = page.path.read_bytes()
        except OSError as e:
            raise ArchiveIOError("read", page.path, e) from e

        info.compress_type = self.compression
        return info, data
