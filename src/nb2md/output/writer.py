"""Writing of the markdown document and extracted images."""

import asyncio
from pathlib import Path
from typing import Protocol

from nb2md import AssetWriteError


class AssetWriter(Protocol):
    """Filesystem operations used by the converters."""

    async def ensure_dir(self, path: Path) -> None: ...

    async def write_bytes(self, path: Path, data: bytes) -> None: ...

    async def write_text(self, path: Path, text: str) -> None: ...


class FileAssetWriter:
    """Write assets to the local filesystem.

    Blocking calls run in a worker thread so concurrent conversions can
    overlap their writes.

    Raises:
        AssetWriteError: From every method, when the filesystem call fails
    """

    async def ensure_dir(self, path: Path) -> None:
        """Create a directory and its parents if they do not exist."""
        try:
            await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            raise AssetWriteError(f"Failed to create directory {path}: {e}") from e

    async def write_bytes(self, path: Path, data: bytes) -> None:
        """Write binary data, replacing any existing file."""
        try:
            await asyncio.to_thread(path.write_bytes, data)
        except OSError as e:
            raise AssetWriteError(f"Failed to write {path}: {e}") from e

    async def write_text(self, path: Path, text: str) -> None:
        """Write UTF-8 text, replacing any existing file."""
        try:
            await asyncio.to_thread(self._write_text, path, text)
        except OSError as e:
            raise AssetWriteError(f"Failed to write {path}: {e}") from e

    @staticmethod
    def _write_text(path: Path, text: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
