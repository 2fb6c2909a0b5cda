"""
Tests for the command-line entry point.
"""

import pytest

from common.config import Config
from main import apply_overrides, main, parse_args


def test_parse_args_defaults():
    args = parse_args([])

    assert args.config is None
    assert args.transport is None
    assert args.host is None
    assert args.port is None


def test_overrides_apply_to_server_section():
    config = apply_overrides(Config(), parse_args(["--transport", "http", "--port", "9001"]))

    assert config.server.transport == "http"
    assert config.server.port == 9001
    assert config.server.host == "127.0.0.1"


def test_no_overrides_keep_config():
    config = Config()

    assert apply_overrides(config, parse_args([])) is config


def test_unknown_transport_is_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--transport", "websocket"])


def test_invalid_config_exits_non_zero(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("server:\n  page_size: -5\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(config_path)])

    assert exc_info.value.code != 0


def test_malformed_yaml_exits_non_zero(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("server: [unclosed\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(config_path)])

    assert exc_info.value.code != 0
