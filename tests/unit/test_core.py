"""
Unit tests for core module.
"""

from datetime import timedelta

import pytest


class TestSettings:
    """Tests for core.config settings."""

    def test_settings_defaults(self):
        """Test default settings values."""
        from core.config import Settings
        settings = Settings(_env_file=None)

        assert settings.app_name == "Prompt Gallery"
        assert settings.storage_bucket == "prompts"
        assert settings.gemini_model == "gemini-2.5-flash"
        assert settings.image_max_dimension == 800
        assert settings.image_jpeg_quality == 70
        assert settings.session_cookie_name == "session"

    def test_settings_from_env(self, monkeypatch):
        """Test settings loaded from environment."""
        monkeypatch.setenv("APP_NAME", "Test App")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("DEBUG", "false")

        from core.config import Settings
        settings = Settings(_env_file=None)

        assert settings.app_name == "Test App"
        assert settings.environment == "production"
        assert settings.debug is False
        assert settings.is_production is True

    def test_google_api_key_alias(self, monkeypatch):
        """GOOGLE_API_KEY is accepted in place of GEMINI_API_KEY."""
        monkeypatch.setenv("GOOGLE_API_KEY", "alias-key")

        from core.config import Settings
        settings = Settings(_env_file=None)

        assert settings.gemini_api_key == "alias-key"
        assert settings.is_gemini_configured is True

    def test_database_configured(self, monkeypatch):
        from core.config import Settings

        assert Settings(_env_file=None).is_database_configured is False

        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost/gallery")
        assert Settings(_env_file=None).is_database_configured is True

        monkeypatch.setenv("DATABASE_ENABLED", "false")
        assert Settings(_env_file=None).is_database_configured is False

    def test_auth_configured(self, monkeypatch):
        from core.config import Settings

        assert Settings(_env_file=None).is_auth_configured is True

        monkeypatch.delenv("ADMIN_PASSWORD")
        assert Settings(_env_file=None).is_auth_configured is False

    def test_default_secret_key_detected(self):
        from core.config import DEFAULT_SECRET_KEY, Settings

        assert Settings(_env_file=None).uses_default_secret_key is False
        assert Settings(_env_file=None, secret_key=DEFAULT_SECRET_KEY).uses_default_secret_key is True

    def test_default_secret_key_warned_in_production(self, caplog):
        from api.main import log_configuration_warnings
        from core.config import DEFAULT_SECRET_KEY, Settings

        settings = Settings(_env_file=None, secret_key=DEFAULT_SECRET_KEY, environment="production")

        with caplog.at_level("WARNING", logger="api.main"):
            log_configuration_warnings(settings)

        assert "SECRET_KEY is the built-in default" in caplog.text

    def test_custom_secret_key_not_warned(self, caplog):
        from api.main import log_configuration_warnings
        from core.config import Settings

        settings = Settings(_env_file=None, environment="production")

        with caplog.at_level("WARNING", logger="api.main"):
            log_configuration_warnings(settings)

        assert "SECRET_KEY" not in caplog.text


class TestSecurity:
    """Tests for core.security module."""

    def test_create_and_verify_token(self):
        """Test JWT token round trip."""
        from core.security import create_access_token, verify_token

        token = create_access_token(data={"sub": "admin@example.com"})
        payload = verify_token(token)

        assert payload["sub"] == "admin@example.com"
        assert "exp" in payload

    def test_verify_token_expired(self):
        """Test JWT token verification with expired token."""
        from core.exceptions import AuthenticationError
        from core.security import create_access_token, verify_token

        token = create_access_token(
            data={"sub": "admin@example.com"},
            expires_delta=timedelta(seconds=-100)
        )

        with pytest.raises(AuthenticationError):
            verify_token(token)

    def test_verify_token_invalid(self):
        """Test JWT token verification with invalid token."""
        from core.exceptions import AuthenticationError
        from core.security import verify_token

        with pytest.raises(AuthenticationError):
            verify_token("invalid.token.here")

    def test_verify_admin_credentials(self):
        from core.security import verify_admin_credentials

        assert verify_admin_credentials("admin@example.com", "correct-horse-battery") is True
        assert verify_admin_credentials(" Admin@Example.com ", "correct-horse-battery") is True
        assert verify_admin_credentials("admin@example.com", "wrong") is False
        assert verify_admin_credentials("other@example.com", "correct-horse-battery") is False

    def test_verify_admin_credentials_unconfigured(self, test_settings):
        from core.security import verify_admin_credentials

        test_settings.delenv("ADMIN_EMAIL")

        assert verify_admin_credentials("admin@example.com", "correct-horse-battery") is False

    def test_extract_token_from_header(self):
        from core.security import extract_token_from_header

        assert extract_token_from_header("Bearer abc") == "abc"
        assert extract_token_from_header("bearer abc") == "abc"
        assert extract_token_from_header("Basic abc") is None
        assert extract_token_from_header("Bearer") is None
        assert extract_token_from_header(None) is None


class TestExceptions:
    """Tests for core.exceptions module."""

    def test_app_exception(self):
        """Test AppException creation."""
        from core.exceptions import AppException

        exc = AppException(
            message="Test error",
            error_code="test_error",
            details={"field": "value"}
        )

        assert exc.message == "Test error"
        assert exc.error_code == "test_error"
        assert exc.status_code == 500
        assert exc.to_dict() == {
            "code": "test_error",
            "message": "Test error",
            "details": {"field": "value"},
        }

    def test_defaults(self):
        from core.exceptions import AnalysisError, AuthenticationError, StorageError

        assert AuthenticationError().status_code == 401
        assert AnalysisError().message == "Analysis Failed"
        assert StorageError().to_dict() == {
            "code": "storage_error",
            "message": "Storage operation failed",
        }

    def test_image_processing_error_is_validation_error(self):
        from core.exceptions import ImageProcessingError, ValidationError

        exc = ImageProcessingError()

        assert isinstance(exc, ValidationError)
        assert exc.status_code == 422
        assert exc.error_code == "image_processing_failed"
