"""Pytest configuration and fixtures."""

import io
import os
import sys

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from starlette.datastructures import Headers, UploadFile

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("LOG_LEVEL", "INFO")

from jobboard.core.config import Settings  # noqa: E402
from jobboard.core.files import FileStore  # noqa: E402
from jobboard.core.storage import Database  # noqa: E402

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n%%EOF\n"


@pytest.fixture
def pdf_bytes():
    """A tiny but well-formed PDF document."""
    return PDF_BYTES


@pytest.fixture
def make_upload():
    """Factory building UploadFile objects the way Starlette does."""

    def _make(
        data: bytes = PDF_BYTES,
        filename: str = "cv.pdf",
        content_type: str = "application/pdf",
    ) -> UploadFile:
        return UploadFile(
            file=io.BytesIO(data),
            filename=filename,
            headers=Headers({"content-type": content_type}),
        )

    return _make


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway database and upload directory."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """Initialized database, disposed after the test."""
    db = Database(test_settings.database_url)
    await db.init_models()
    yield db
    await db.dispose()


@pytest.fixture
def file_store(test_settings):
    return FileStore(
        root=test_settings.upload_dir,
        subdir=test_settings.cv_subdir,
        max_size=test_settings.max_upload_size,
        allowed_content_types=test_settings.allowed_content_types,
    )


@pytest.fixture
def client(test_settings):
    """Test client with the lifespan running against temp storage."""
    from jobboard.main import create_app

    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def sample_account():
    """Registration payload as sent by the frontend."""
    return {
        "nombre": "Ana Torres",
        "codigo": "A00123",
        "correo": "ana@example.com",
        "contrasena": "s3cret-pass",
    }


@pytest.fixture
def sample_vacancy():
    """Vacancy payload as sent by the frontend."""
    return {
        "titulo": "Backend Dev",
        "descripcion": "Build and maintain HTTP services",
        "ubicacion": "Remote",
        "salario": "50k",
    }


@pytest.fixture
def sample_application_form():
    """Form fields that accompany a resume upload."""
    return {
        "correo": "luis@example.com",
        "nombres": "Luis Alberto",
        "apellidos": "Gómez Ruiz",
        "vacanteId": "1",
    }
