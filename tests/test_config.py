from __future__ import annotations

import json

import pytest

from boxtable.config import AppConfig, load_config, read_env_file, read_toml_table


def test_defaults(tmp_path):
    config = load_config(base=tmp_path, environ={})
    assert isinstance(config, AppConfig)
    assert config.padding == 1
    assert config.log_level is None
    assert config.log_file_path is None
    assert config.enable_completion is True
    assert config.history_file_path.name == ".boxtable_history"
    assert config.extra == {}


def test_toml_boxtable_table(tmp_path):
    (tmp_path / "config.toml").write_text(
        'padding = 9\n\n[boxtable]\npadding = 2\nlog_level = "debug"\nenable_completion = false\n',
        encoding="utf-8")
    config = load_config(base=tmp_path, environ={})
    assert config.padding == 2
    assert config.log_level == "DEBUG"
    assert config.enable_completion is False


def test_toml_without_boxtable_table_is_ignored(tmp_path):
    (tmp_path / "config.toml").write_text(
        'log_level = "verbose"\n[server]\nport = 80\n', encoding="utf-8")
    assert read_toml_table(tmp_path / "config.toml") == {}
    assert load_config(base=tmp_path, environ={}).log_level is None


def test_broken_toml_names_the_file(tmp_path):
    (tmp_path / "config.toml").write_text("[boxtable\n", encoding="utf-8")
    with pytest.raises(ValueError, match="config.toml"):
        load_config(base=tmp_path, environ={})


def test_env_file_reads_only_prefixed_keys(tmp_path):
    (tmp_path / ".env").write_text(
        "# comment\n"
        "LOG_LEVEL=verbose\n"
        "PADDING=0\n"
        "export BOXTABLE_LOG_FILE_PATH='logs/boxtable.log'\n"
        "\n"
        'BOXTABLE_PADDING="4"\n',
        encoding="utf-8")
    assert read_env_file(tmp_path / ".env") == {
        "LOG_FILE_PATH": "logs/boxtable.log", "PADDING": "4"}
    config = load_config(base=tmp_path, environ={})
    assert config.padding == 4
    assert config.log_level is None
    assert config.log_file_path is not None
    assert config.log_file_path.name == "boxtable.log"


def test_other_tools_config_files_are_ignored(tmp_path):
    (tmp_path / "config.json").write_text(
        json.dumps({"padding": "wide", "log_level": "verbose"}), encoding="utf-8")
    (tmp_path / "config.ini").write_text("[app]\npadding = -1\n", encoding="utf-8")
    (tmp_path / ".env").write_text("LOG_LEVEL=verbose\nENABLE_COMPLETION=maybe\n", encoding="utf-8")
    config = load_config(base=tmp_path, environ={"LOG_LEVEL": "verbose"})
    assert config.padding == 1
    assert config.log_level is None
    assert config.enable_completion is True


def test_sources_are_layered(tmp_path):
    (tmp_path / "config.toml").write_text(
        "[boxtable]\npadding = 2\nlog_level = 'info'\n", encoding="utf-8")
    (tmp_path / ".env").write_text("BOXTABLE_PADDING=3\n", encoding="utf-8")
    config = load_config(base=tmp_path, environ={})
    assert config.padding == 3
    assert config.log_level == "INFO"

    config = load_config(base=tmp_path, environ={"BOXTABLE_PADDING": "5", "PADDING": "9"})
    assert config.padding == 5


def test_unknown_keys_are_kept(tmp_path):
    config = load_config(base=tmp_path, environ={"BOXTABLE_THEME": "dark"})
    assert config.extra == {"THEME": "dark"}


@pytest.mark.parametrize(
    "environ, message",
    [
        ({"BOXTABLE_PADDING": "0"}, "PADDING must be >= 1"),
        ({"BOXTABLE_PADDING": "wide"}, "PADDING: Expected integer"),
        ({"BOXTABLE_LOG_LEVEL": "loud"}, "LOG_LEVEL"),
        ({"BOXTABLE_ENABLE_COMPLETION": "maybe"}, "ENABLE_COMPLETION: Expected boolean"),
    ],
)
def test_invalid_values(tmp_path, environ, message):
    with pytest.raises(ValueError, match=message):
        load_config(base=tmp_path, environ=environ)


def test_config_is_frozen(tmp_path):
    config = load_config(base=tmp_path, environ={})
    with pytest.raises(AttributeError):
        config.padding = 3  # type: ignore[misc]
