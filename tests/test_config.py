"""
Tests for configuration system.

Covers Config defaults, YAML loading with the nested logging section, and the
environment overrides.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from common.config import ENV_BASE_URL, ENV_LOG_LEVEL, Config, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ENV_BASE_URL, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_config_creation():
    """Test basic Config creation."""
    config = Config()

    assert config.backend.base_url == "http://localhost:8080"
    assert config.backend.timeout == 30.0
    assert config.backend.verify_ssl is True
    assert config.server.transport == "stdio"
    assert config.server.page_size == 50
    assert config.log_level == "INFO"


def test_config_values_are_reasonable():
    """Test that config values are within reasonable ranges."""
    config = Config()

    assert 1 <= config.backend.timeout <= 3600
    assert 1 <= config.server.port <= 65535
    assert config.max_log_file_size > 0
    assert config.backup_count >= 0


def test_config_yaml_file_exists():
    """Test that config.yaml file exists."""
    config_path = Path("config.yaml")
    assert config_path.exists(), "config.yaml file should exist in the project root"


def test_project_config_loads():
    config = load_config(Path("config.yaml"))

    assert config.server.name == "ZenTao MCP Server"
    assert config.server.transport in ("stdio", "http")


def test_missing_file_uses_defaults(tmp_path):
    config = load_config(tmp_path / "absent.yaml")

    assert config == Config()


def test_empty_file_uses_defaults(tmp_path):
    config = load_config(write_config(tmp_path, ""))

    assert config == Config()


def test_nested_sections_are_loaded(tmp_path):
    path = write_config(
        tmp_path,
        """
backend:
  base_url: "https://zentao.example.com"
  timeout: 5
  headers:
    X-Client: mcp
server:
  transport: http
  port: 9100
  page_size: 20
logging:
  level: DEBUG
  save_to_file: true
  backup_count: 2
""",
    )

    config = load_config(path)

    assert config.backend.base_url == "https://zentao.example.com"
    assert config.backend.timeout == 5.0
    assert config.backend.headers == {"X-Client": "mcp"}
    assert config.server.transport == "http"
    assert config.server.port == 9100
    assert config.server.page_size == 20
    assert config.log_level == "DEBUG"
    assert config.save_to_file is True
    assert config.backup_count == 2


def test_environment_overrides(tmp_path, monkeypatch):
    path = write_config(
        tmp_path,
        """
backend:
  base_url: "https://from-file.example.com"
  timeout: 12
logging:
  level: INFO
""",
    )
    monkeypatch.setenv(ENV_BASE_URL, "https://from-env.example.com")
    monkeypatch.setenv(ENV_LOG_LEVEL, "WARNING")

    config = load_config(path)

    assert config.backend.base_url == "https://from-env.example.com"
    assert config.backend.timeout == 12.0
    assert config.log_level == "WARNING"


def test_invalid_transport_is_rejected(tmp_path):
    path = write_config(tmp_path, "server:\n  transport: websocket\n")

    with pytest.raises(ValidationError):
        load_config(path)


def test_page_size_must_be_positive(tmp_path):
    path = write_config(tmp_path, "server:\n  page_size: 0\n")

    with pytest.raises(ValidationError):
        load_config(path)
