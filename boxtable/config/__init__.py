#!/usr/bin/env python3
# boxtable/config/__init__.py
from __future__ import annotations

"""
Package for runtime configuration.

Provides:
- `AppConfig`: validated, immutable settings.
- `load_config`: merge defaults, the [boxtable] table of config.toml, BOXTABLE_*
  lines of .env and BOXTABLE_* env vars.
"""

from .config import AppConfig, DEFAULTS, ENV_PREFIX, load_config, read_env_file, read_toml_table

__all__ = [
    "AppConfig",
    "DEFAULTS",
    "ENV_PREFIX",
    "load_config",
    "read_env_file",
    "read_toml_table",
]
