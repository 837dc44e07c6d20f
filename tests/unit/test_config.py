"""Tests for configuration module."""

import os
from unittest.mock import patch


class TestSettings:
    """Tests for Settings configuration."""

    def test_defaults(self):
        """Test defaults when nothing is overridden."""
        from jobboard.core.config import Settings

        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./database.db"
        assert settings.upload_dir == "uploads"
        assert settings.cv_subdir == "cvs"
        assert settings.max_upload_size == 5 * 1024 * 1024
        assert settings.allowed_content_types == ["application/pdf"]
        assert settings.port == 3000

    def test_settings_loads_from_env(self):
        """Test that settings loads from environment."""
        env_vars = {
            "DATABASE_URL": "sqlite+aiosqlite:///./other.db",
            "UPLOAD_DIR": "/srv/uploads",
            "MAX_UPLOAD_SIZE": "1024",
            "PORT": "8080",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            from jobboard.core.config import Settings

            settings = Settings()

            assert settings.database_url == "sqlite+aiosqlite:///./other.db"
            assert settings.upload_dir == "/srv/uploads"
            assert settings.max_upload_size == 1024
            assert settings.port == 8080

    def test_settings_case_insensitive(self):
        """Test that settings are case insensitive."""
        with patch.dict(os.environ, {"cv_subdir": "resumes"}, clear=False):
            from jobboard.core.config import Settings

            settings = Settings()

            assert settings.cv_subdir == "resumes"

    def test_list_settings_parse_json(self):
        """Test list settings are read as JSON arrays."""
        env_vars = {"ALLOWED_CONTENT_TYPES": '["application/pdf", "application/x-pdf"]'}

        with patch.dict(os.environ, env_vars, clear=False):
            from jobboard.core.config import Settings

            settings = Settings()

            assert settings.allowed_content_types == [
                "application/pdf",
                "application/x-pdf",
            ]
