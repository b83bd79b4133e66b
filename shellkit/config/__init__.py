#!/usr/bin/env python3
# shellkit/config/__init__.py
from __future__ import annotations

"""
Package for shell configuration.

Provides:
- Layered loader (defaults, config files in CWD, SHELLKIT_ environment variables).
- Frozen `AppConfig` consumed by the boot sequence and the application loop.
"""


from .config import AppConfig, ConfigError, DEFAULTS, ENV_PREFIX, load_config

__all__ = [
    "AppConfig",
    "ConfigError",
    "DEFAULTS",
    "ENV_PREFIX",
    "load_config",
]
