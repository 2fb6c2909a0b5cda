"""
Configuration loader for the ZenTao tool adapter.

Loads settings from config.yaml. A small set of environment variables may
override deployment-specific values (backend URL, log level).
Never log secrets or backend credentials.
"""

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field

ENV_BASE_URL = "ZENTAO_BASE_URL"
ENV_LOG_LEVEL = "ZENTAO_LOG_LEVEL"

_LOGGING_KEYS = (
    "enable_pretty_print",
    "save_to_file",
    "log_file_path",
    "max_log_file_size",
    "backup_count",
)


class BackendConfig(BaseModel):
    """Configuration for the ZenTao backend connection."""

    base_url: str = Field(default="http://localhost:8080", description="ZenTao base URL")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Static headers sent with every request"
    )


class ServerConfig(BaseModel):
    """Configuration for the tool protocol server."""

    name: str = Field(default="ZenTao MCP Server", description="Server name reported to clients")
    version: str = Field(default="1.0.0", description="Server version reported to clients")
    transport: Literal["stdio", "http"] = Field(default="stdio", description="Protocol transport")
    host: str = Field(default="127.0.0.1", description="Host to bind to in http mode")
    port: int = Field(default=8000, description="Port to bind to in http mode")
    page_size: int = Field(default=50, gt=0, description="Tools per tools/list page")


class Config(BaseModel):
    """Main configuration object."""

    backend: BackendConfig = Field(default_factory=BackendConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    log_level: str = Field(default="INFO", description="Logging level")
    enable_pretty_print: bool = Field(
        default=False, description="Enable custom pretty print for debugging"
    )
    save_to_file: bool = Field(default=False, description="Save logs to file")
    log_file_path: str = Field(default="server.log", description="Log file path (relative to root)")
    max_log_file_size: int = Field(
        default=10485760, description="Max log file size in bytes (10MB)"
    )
    backup_count: int = Field(default=5, description="Number of backup log files to keep")


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file, then apply environment overrides.

    Args:
        config_path: Path to config.yaml file. Defaults to ./config.yaml

    Returns:
        Loaded configuration object
    """
    if config_path is None:
        config_path = Path("config.yaml")

    config_data: Dict[str, Any] = {}

    # Load from YAML file if it exists
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

    # Handle nested logging configuration
    logging_config = config_data.pop("logging", None) or {}
    if "level" in logging_config:
        config_data["log_level"] = logging_config["level"]
    for key in _LOGGING_KEYS:
        if key in logging_config:
            config_data[key] = logging_config[key]

    base_url = os.getenv(ENV_BASE_URL)
    if base_url:
        backend = dict(config_data.get("backend") or {})
        backend["base_url"] = base_url
        config_data["backend"] = backend

    log_level = os.getenv(ENV_LOG_LEVEL)
    if log_level:
        config_data["log_level"] = log_level

    return Config(**config_data)
