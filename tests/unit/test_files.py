"""Tests for the resume file store."""

import re
from pathlib import Path
from unittest.mock import patch

import pytest

from jobboard.core.exceptions import (
    FileTooLargeError,
    StorageError,
    UnsupportedFileTypeError,
)
from jobboard.core.files import FileStore, generate_filename


class TestGenerateFilename:
    def test_format(self):
        name = generate_filename("my resume.pdf")
        assert re.fullmatch(r"\d{13}-\d+\.pdf", name)

    def test_keeps_extension_case(self):
        assert generate_filename("CV.PDF").endswith(".PDF")

    def test_without_extension(self):
        assert re.fullmatch(r"\d{13}-\d+", generate_filename("resume"))

    def test_missing_name(self):
        assert re.fullmatch(r"\d{13}-\d+", generate_filename(None))

    def test_names_differ(self):
        names = {generate_filename("cv.pdf") for _ in range(20)}
        assert len(names) > 1


class TestFileStore:
    @pytest.fixture
    def small_store(self, tmp_path):
        return FileStore(
            root=tmp_path / "uploads",
            subdir="cvs",
            max_size=100,
            allowed_content_types=["application/pdf"],
        )

    def test_ensure_directory_is_idempotent(self, small_store):
        small_store.ensure_directory()
        small_store.ensure_directory()
        assert small_store.directory.is_dir()

    @pytest.mark.asyncio
    async def test_save_writes_file(self, file_store, make_upload, pdf_bytes):
        stored = await file_store.save(make_upload())

        path = Path(stored)
        assert path.read_bytes() == pdf_bytes
        assert path.parent == file_store.directory
        assert path.suffix == ".pdf"
        assert "\\" not in stored
        assert stored == (file_store.directory / path.name).as_posix()

    @pytest.mark.asyncio
    async def test_save_creates_missing_directory(self, small_store, make_upload):
        assert not small_store.directory.exists()
        await small_store.save(make_upload(b"%PDF"))
        assert small_store.directory.is_dir()

    @pytest.mark.asyncio
    async def test_rejects_other_media_types(self, small_store, make_upload):
        with pytest.raises(UnsupportedFileTypeError):
            await small_store.save(make_upload(b"\x89PNG", "cv.png", "image/png"))
        assert not small_store.directory.exists()

    @pytest.mark.asyncio
    async def test_accepts_file_at_limit(self, small_store, make_upload):
        stored = await small_store.save(make_upload(b"x" * 100))
        assert Path(stored).stat().st_size == 100

    @pytest.mark.asyncio
    async def test_rejects_file_over_limit(self, small_store, make_upload):
        with pytest.raises(FileTooLargeError):
            await small_store.save(make_upload(b"x" * 101))
        assert not small_store.directory.exists()

    @pytest.mark.asyncio
    async def test_write_failure_becomes_storage_error(self, small_store, make_upload):
        with patch.object(small_store, "_write", side_effect=OSError("disk full")):
            with pytest.raises(StorageError) as exc_info:
                await small_store.save(make_upload(b"%PDF"))

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "disk full"
