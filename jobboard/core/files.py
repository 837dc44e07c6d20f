"""Disk storage for uploaded resume files."""

import logging
import random
import time
from pathlib import Path, PurePath

import aiofiles
from fastapi import UploadFile

from jobboard.core.exceptions import (
    FileTooLargeError,
    StorageError,
    UnsupportedFileTypeError,
)

logger = logging.getLogger(__name__)


def generate_filename(original_name: str | None) -> str:
    """Build ``<epoch-millis>-<random int><ext>`` keeping the original extension."""
    suffix = PurePath(original_name or "").suffix
    unique = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{unique}{suffix}"


class FileStore:
    """Validates uploads and writes them under ``<root>/<subdir>``."""

    def __init__(
        self,
        root: str | Path,
        subdir: str,
        max_size: int,
        allowed_content_types: list[str],
    ):
        self.root = Path(root)
        self.subdir = subdir
        self.max_size = max_size
        self.allowed_content_types = set(allowed_content_types)

    @property
    def directory(self) -> Path:
        return self.root / self.subdir

    def ensure_directory(self) -> None:
        """Create the destination directory if it does not exist yet."""
        self.directory.mkdir(parents=True, exist_ok=True)

    def check_content_type(self, upload: UploadFile) -> None:
        if upload.content_type not in self.allowed_content_types:
            logger.warning(
                f"Rejected upload {upload.filename!r} with type {upload.content_type}"
            )
            raise UnsupportedFileTypeError(upload.content_type)

    async def read_limited(self, upload: UploadFile) -> bytes:
        """Read the upload body, failing once it exceeds ``max_size`` bytes."""
        data = await upload.read(self.max_size + 1)
        if len(data) > self.max_size:
            logger.warning(f"Rejected upload {upload.filename!r}: over {self.max_size} bytes")
            raise FileTooLargeError(self.max_size)
        return data

    async def save(self, upload: UploadFile) -> str:
        """Validate and persist an upload.

        Returns the stored path relative to the working directory, always
        with forward slashes.
        """
        self.check_content_type(upload)
        data = await self.read_limited(upload)

        target = self.directory / generate_filename(upload.filename)
        try:
            await self._write(target, data)
        except OSError as e:
            logger.error(f"Failed to write upload to {target}: {e}")
            raise StorageError("Error al subir el archivo", str(e))

        stored_path = target.as_posix()
        logger.info(f"Stored upload {upload.filename!r} as {stored_path} ({len(data)} bytes)")
        return stored_path

    async def _write(self, target: Path, data: bytes) -> None:
        self.ensure_directory()
        async with aiofiles.open(target, "wb") as f:
            await f.write(data)
