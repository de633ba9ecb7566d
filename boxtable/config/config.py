#!/usr/bin/env python3
# boxtable/config/config.py
from __future__ import annotations

"""
Settings for the boxtable console script.

Only keys owned by boxtable are read, so other tools' config files in the
same directory are left alone. Later sources win:

  1) built-in defaults
  2) the [boxtable] table of ./config.toml
  3) BOXTABLE_* lines of ./.env
  4) BOXTABLE_* environment variables

Keys are case-insensitive; `BOXTABLE_PADDING=2` and `padding = 2` name the
same setting.
"""

import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

ENV_PREFIX = "BOXTABLE_"
TOML_FILE = "config.toml"
TOML_TABLE = "boxtable"
ENV_FILE = ".env"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULTS: dict[str, Any] = {
    "PADDING": 1,
    "LOG_LEVEL": None,
    "LOG_FILE_PATH": None,
    "HISTORY_FILE_PATH": str(Path.home() / ".boxtable_history"),
    "ENABLE_COMPLETION": True,
}


@dataclass(frozen=True)
class AppConfig:
    padding: int
    log_level: str | None
    log_file_path: Path | None
    history_file_path: Path
    enable_completion: bool

    # BOXTABLE_* keys this version does not know about
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- sources ----------

_ENV_LINE = re.compile(r"^(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*)$")


def _owned(items: Mapping[str, Any]) -> dict[str, Any]:
    """Keep BOXTABLE_* keys, with the prefix removed."""
    return {key[len(ENV_PREFIX):].upper(): value for key, value in items.items()
            if key.upper().startswith(ENV_PREFIX) and len(key) > len(ENV_PREFIX)}


def read_env_file(path: Path) -> dict[str, str]:
    """BOXTABLE_* assignments from a dotenv file; every other line is ignored."""
    if not path.is_file():
        return {}
    pairs: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        match = _ENV_LINE.match(line.strip())
        if match is None:
            continue
        key, value = match.groups()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        pairs[key] = value
    return _owned(pairs)


def read_toml_table(path: Path) -> dict[str, Any]:
    """The [boxtable] table of a TOML file, keys upper-cased."""
    if not path.is_file():
        return {}
    with path.open("rb") as handle:
        try:
            document = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"{path.name}: {exc}") from exc
    table = document.get(TOML_TABLE, {})
    if not isinstance(table, dict):
        raise ValueError(f"{path.name}: [{TOML_TABLE}] must be a table")
    return {str(key).upper(): value for key, value in table.items()}


# ---------- coercion ----------

def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Expected integer, got: {value!r}")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"Expected integer, got: {value!r}") from None


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Expected boolean, got: {value!r}")


def _to_text(value: Any) -> str | None:
    if value is None or str(value).strip().lower() in ("", "none"):
        return None
    return str(value).strip()


def _to_level(value: Any) -> str | None:
    text = _to_text(value)
    if text is None:
        return None
    if text.upper() not in LOG_LEVELS:
        raise ValueError(f"Expected one of {', '.join(LOG_LEVELS)}, got: {value!r}")
    return text.upper()


def _to_path(value: Any) -> Path:
    return Path(os.path.expandvars(str(value))).expanduser().resolve()


def _to_opt_path(value: Any) -> Path | None:
    text = _to_text(value)
    return None if text is None else _to_path(text)


# ---------- public API ----------

def load_config(base: Path | None = None, environ: Mapping[str, str] | None = None) -> AppConfig:
    """
    Merge every source into a validated AppConfig.

    `base` is the directory holding config.toml and .env (the CWD by default);
    `environ` stands in for os.environ. Raises ValueError naming the bad key.
    """
    directory = Path.cwd() if base is None else base
    settings: dict[str, Any] = dict(DEFAULTS)
    settings.update(read_toml_table(directory / TOML_FILE))
    settings.update(read_env_file(directory / ENV_FILE))
    settings.update(_owned(os.environ if environ is None else environ))

    def get(key: str, convert: Callable[[Any], Any]) -> Any:
        try:
            return convert(settings[key])
        except ValueError as exc:
            raise ValueError(f"{key}: {exc}") from exc

    padding = get("PADDING", _to_int)
    if padding < 1:
        raise ValueError("PADDING must be >= 1")

    return AppConfig(
        padding=padding,
        log_level=get("LOG_LEVEL", _to_level),
        log_file_path=get("LOG_FILE_PATH", _to_opt_path),
        history_file_path=get("HISTORY_FILE_PATH", _to_path),
        enable_completion=get("ENABLE_COMPLETION", _to_bool),
        extra={key: value for key, value in settings.items() if key not in DEFAULTS},
    )
