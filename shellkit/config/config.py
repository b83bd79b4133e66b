#!/usr/bin/env python3
# shellkit/config/config.py
from __future__ import annotations

"""
Shell configuration loader.

Sources, lowest precedence first:
  1) DEFAULTS below
  2) Files in the working directory: .env, config.ini, config.json, config.toml
  3) SHELLKIT_-prefixed environment variables (SHELLKIT_PROMPT, ...)

Keys are case-insensitive. Nested json/toml tables flatten to UPPER_SNAKE
({"udp": {"timeout_ms": 500}} -> UDP_TIMEOUT_MS). Values are coerced per key;
anything that cannot be coerced raises ConfigError.

Keys:
  - PROMPT / BANNER: str
  - SHOW_BANNER / SHOW_BOOT / ENABLE_COMPLETION: bool
  - LOG_LEVEL: None or DEBUG/INFO/WARNING/ERROR/CRITICAL
  - LOG_FILE_PATH: None or a path (relative to the working directory)
  - LINE_EDITOR: builtin | prompt_toolkit
  - PLUGIN_PACKAGE: None (discovery off) or dotted package name
  - UDP_TIMEOUT_MS: int >= 0
"""

import configparser
import json
import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

ENV_PREFIX = "SHELLKIT_"

DEFAULTS: dict[str, Any] = {
    "PROMPT": "shell> ",
    "BANNER": "shellkit",
    "SHOW_BANNER": True,
    "SHOW_BOOT": False,
    "LOG_LEVEL": None,
    "LOG_FILE_PATH": None,
    "LINE_EDITOR": "builtin",
    "ENABLE_COMPLETION": True,
    "PLUGIN_PACKAGE": "plugins",
    "UDP_TIMEOUT_MS": 3000,
}

LINE_EDITOR_CHOICES = ("builtin", "prompt_toolkit")
LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration value cannot be coerced or validated."""


@dataclass(frozen=True)
class AppConfig:
    prompt: str = DEFAULTS["PROMPT"]
    banner: str = DEFAULTS["BANNER"]
    show_banner: bool = DEFAULTS["SHOW_BANNER"]
    show_boot: bool = DEFAULTS["SHOW_BOOT"]

    log_level: str | None = DEFAULTS["LOG_LEVEL"]
    log_file_path: Path | None = DEFAULTS["LOG_FILE_PATH"]

    line_editor: str = DEFAULTS["LINE_EDITOR"]
    enable_completion: bool = DEFAULTS["ENABLE_COMPLETION"]
    plugin_package: str | None = DEFAULTS["PLUGIN_PACKAGE"]

    udp_timeout_ms: int = DEFAULTS["UDP_TIMEOUT_MS"]

    # Keys no field claims, kept for plugins and debugging
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- readers ----------

_ENV_LINE = re.compile(r"^(?:export\s+)?([A-Za-z_]\w*)\s*=\s*(.*)$")


def _read_dotenv(path: Path) -> dict[str, Any]:
    """KEY=VALUE lines; optional `export`, matching quotes stripped, # comments skipped."""
    entries: dict[str, Any] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        match = _ENV_LINE.match(line)
        if match is None:
            continue
        key, value = match.group(1), match.group(2).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        entries[key] = value
    return entries


def _read_ini(path: Path) -> dict[str, Any]:
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read_string(path.read_text(encoding="utf-8"), source=str(path))
    except configparser.Error as exc:
        raise ConfigError(f"{path.name}: {exc}") from exc
    # Section names are ignored; keys from every section merge
    return {key: value for section in parser.sections() for key, value in parser.items(section)}


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path.name}: {exc}") from exc
    return data if isinstance(data, dict) else {}


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path.name}: {exc}") from exc


# Lowest precedence first
_FILE_SOURCES: tuple[tuple[str, Callable[[Path], dict[str, Any]]], ...] = (
    (".env", _read_dotenv),
    ("config.ini", _read_ini),
    ("config.json", _read_json),
    ("config.toml", _read_toml),
)


def _flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in data.items():
        name = f"{prefix}_{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, name))
        else:
            flat[name.upper()] = value
    return flat


# ---------- coercion ----------

_TRUE_WORDS = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "n", "off"})


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    word = str(val).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ConfigError(f"Expected boolean, got: {val!r}")


def _as_int(val: Any) -> int:
    if isinstance(val, bool):
        raise ConfigError(f"Expected integer, got: {val!r}")
    if isinstance(val, int):
        return val
    try:
        return int(str(val).strip())
    except ValueError as exc:
        raise ConfigError(f"Expected integer, got: {val!r}") from exc


def _as_opt_str(val: Any) -> str | None:
    if val is None:
        return None
    text = str(val)
    return None if text.strip().lower() in {"", "none"} else text


def _as_log_level(val: Any) -> str | None:
    level = _as_opt_str(val)
    if level is None:
        return None
    level = level.strip().upper()
    if level not in LOG_LEVEL_CHOICES:
        raise ConfigError(f"LOG_LEVEL must be one of {list(LOG_LEVEL_CHOICES)}, got {val!r}")
    return level


def _as_line_editor(val: Any) -> str:
    editor = (_as_opt_str(val) or DEFAULTS["LINE_EDITOR"]).strip().lower()
    if editor not in LINE_EDITOR_CHOICES:
        raise ConfigError(f"LINE_EDITOR must be one of {list(LINE_EDITOR_CHOICES)}, got {val!r}")
    return editor


def _as_timeout(val: Any) -> int:
    timeout = _as_int(val)
    if timeout < 0:
        raise ConfigError(f"UDP_TIMEOUT_MS must be >= 0, got {timeout}")
    return timeout


# KEY -> (AppConfig field, coercion). LOG_FILE_PATH needs the base dir and is handled apart.
_FIELDS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "PROMPT": ("prompt", lambda v: DEFAULTS["PROMPT"] if v is None else str(v)),
    "BANNER": ("banner", lambda v: "" if v is None else str(v)),
    "SHOW_BANNER": ("show_banner", _as_bool),
    "SHOW_BOOT": ("show_boot", _as_bool),
    "LOG_LEVEL": ("log_level", _as_log_level),
    "LINE_EDITOR": ("line_editor", _as_line_editor),
    "ENABLE_COMPLETION": ("enable_completion", _as_bool),
    "PLUGIN_PACKAGE": ("plugin_package", _as_opt_str),
    "UDP_TIMEOUT_MS": ("udp_timeout_ms", _as_timeout),
}


def _resolve_path(val: Any, base: Path) -> Path | None:
    text = _as_opt_str(val)
    if text is None:
        return None
    path = Path(os.path.expandvars(os.path.expanduser(text)))
    return path if path.is_absolute() else (base / path).resolve()


# ---------- public API ----------

def collect_settings(cwd: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    """Merge every source into one UPPER_SNAKE mapping (no coercion yet)."""
    merged: dict[str, Any] = dict(DEFAULTS)
    for filename, reader in _FILE_SOURCES:
        path = cwd / filename
        if path.is_file():
            merged.update(_flatten(reader(path)))

    for key, value in environ.items():
        if key.startswith(ENV_PREFIX) and len(key) > len(ENV_PREFIX):
            merged[key[len(ENV_PREFIX):].upper()] = value
    return merged


def load_config(
    *,
    cwd: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """
    Build the AppConfig for `cwd` (default: the process working directory)
    and `environ` (default: os.environ). Reads files only; raises ConfigError
    on the first invalid value.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    settings = collect_settings(base, os.environ if environ is None else environ)

    values: dict[str, Any] = {
        attr: coerce(settings.get(key, DEFAULTS[key])) for key, (attr, coerce) in _FIELDS.items()
    }
    values["log_file_path"] = _resolve_path(settings.get("LOG_FILE_PATH"), base)
    values["extra"] = {key: value for key, value in settings.items() if key not in DEFAULTS}
    return AppConfig(**values)
