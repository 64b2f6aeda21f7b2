"""
Settings Tests - Configuration Loading and Validation

Files that this module USES:
- shiprate.config (Settings, load_settings)
- shiprate.shared.validators (credential and URL checks)
- pytest (monkeypatch for environment isolation)
"""
import pytest
from pydantic import ValidationError

from shiprate.config import load_settings
from shiprate.shared.validators import validate_credential, validate_http_url

_ENV_VARS = (
    "UPS_CLIENT_ID",
    "UPS_CLIENT_SECRET",
    "UPS_API_BASE_URL",
    "UPS_AUTH_URL",
    "REQUEST_TIMEOUT_SECONDS",
    "MAX_RETRIES",
    "LOG_LEVEL",
    "LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the way
    monkeypatch.chdir(tmp_path)


def test_defaults_with_overrides():
    settings = load_settings(ups_client_id="client-id", ups_client_secret="client-secret")

    assert settings.ups_api_base_url == "https://onlinetools.ups.com/api"
    assert settings.ups_auth_url == "https://onlinetools.ups.com/security/v1/oauth/token"
    assert settings.request_timeout_seconds == 30
    assert settings.max_retries == 3
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("UPS_CLIENT_ID", "env-id")
    monkeypatch.setenv("UPS_CLIENT_SECRET", "env-secret")
    monkeypatch.setenv("UPS_API_BASE_URL", "https://wwwcie.ups.com/api/")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.ups_client_id == "env-id"
    assert settings.ups_api_base_url == "https://wwwcie.ups.com/api"
    assert settings.request_timeout_seconds == 5
    assert settings.log_level == "DEBUG"


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("UPS_CLIENT_ID=file-id\nUPS_CLIENT_SECRET=file-secret\n")
    assert load_settings().ups_client_id == "file-id"


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("UPS_CLIENT_ID", "env-id")
    monkeypatch.setenv("UPS_CLIENT_SECRET", "env-secret")
    assert load_settings(ups_client_id="override").ups_client_id == "override"


def test_missing_credentials():
    with pytest.raises(ValidationError):
        load_settings()


@pytest.mark.parametrize(
    "overrides",
    [
        {"ups_client_secret": "   "},
        {"ups_client_secret": ""},
        {"ups_api_base_url": "not-a-url"},
        {"ups_auth_url": "ftp://ups.test/token"},
        {"request_timeout_seconds": 0},
        {"request_timeout_seconds": 0.5},
        {"request_timeout_seconds": 121},
        {"max_retries": -1},
        {"log_level": "VERBOSE"},
    ],
)
def test_invalid_values(overrides):
    fields = {"ups_client_id": "client-id", "ups_client_secret": "client-secret"}
    fields.update(overrides)
    with pytest.raises(ValidationError):
        load_settings(**fields)


class TestValidators:
    def test_credential(self):
        assert validate_credential("abc123")
        assert not validate_credential("")
        assert not validate_credential("has space")

    def test_http_url(self):
        assert validate_http_url("https://onlinetools.ups.com/api")
        assert validate_http_url("http://localhost:8080")
        assert not validate_http_url("onlinetools.ups.com")
        assert not validate_http_url("")
