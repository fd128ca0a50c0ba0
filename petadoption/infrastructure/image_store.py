"""Local Image Store — writes uploads into the directory served at /images.

Invariants:
    - Stored name is <epoch millis><original extension>, never the client's name
    - Existing files are never overwritten (millis bumped on collision)
    - discard() only touches files inside the store directory
    - OSError surfaces as ImageStorageError (HTTP 500)
"""

import asyncio
import logging
import time
from pathlib import Path

from petadoption.core.errors import ImageStorageError

logger = logging.getLogger(__name__)


class LocalImageStore:
    """Filesystem implementation of core.storage_protocols.ImageStore."""

    def __init__(self, directory: Path, url_prefix: str = "/images"):
        self.directory = Path(directory)
        self.url_prefix = url_prefix.rstrip("/")

    def _target_path(self, original_filename: str) -> Path:
        suffix = Path(original_filename or "").suffix.lower()
        stamp = int(time.time() * 1000)
        target = self.directory / f"{stamp}{suffix}"
        while target.exists():
            stamp += 1
            target = self.directory / f"{stamp}{suffix}"
        return target

    def _write(self, original_filename: str, data: bytes) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self._target_path(original_filename)
        target.write_bytes(data)
        return target

    async def save(self, original_filename: str, data: bytes) -> str:
        try:
            target = await asyncio.to_thread(self._write, original_filename, data)
        except OSError as e:
            logger.error(f"Failed to store image: {e}")
            raise ImageStorageError(str(e)) from e
        logger.info(f"Stored image {target.name} ({len(data)} bytes)")
        return f"{self.url_prefix}/{target.name}"

    async def discard(self, reference: str) -> None:
        """Remove a stored image; a missing file or foreign reference is ignored."""
        name = reference.rsplit("/", 1)[-1]
        if not reference.startswith(f"{self.url_prefix}/") or name in ("", ".", ".."):
            return
        try:
            await asyncio.to_thread((self.directory / name).unlink, missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove orphaned image {name}: {e}")
            return
        logger.info(f"Removed orphaned image {name}")
