from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from cbzpack.progress.reporter import Reporter


@pytest.fixture
def make_pages() -> Callable[[Path, list[str]], dict[str, bytes]]:
    """Create files in a folder, each with content unique to its name."""

    def _make(folder: Path, names: list[str]) -> dict[str, bytes]:
        folder.mkdir(parents=True, exist_ok=True)
        contents: dict[str, bytes] = {}
        for name in names:
            data = f"image:{name}".encode() + bytes(range(256))
            (folder / name).write_bytes(data)
            contents[name] = data
        return contents

    return _make


@pytest.fixture
def reporter() -> Reporter:
    return Reporter(
        console=Console(record=True, width=200, soft_wrap=True),
        err_console=Console(record=True, width=200, soft_wrap=True),
        show_progress=False,
    )
