#!/usr/bin/env python3
# shellkit/__main__.py
from __future__ import annotations

import sys

from shellkit.app import ShellApplication
from shellkit.config import AppConfig, ConfigError, load_config
from shellkit.ui import Console


def main() -> None:
    console = Console()
    try:
        config = load_config()
    except ConfigError as exc:
        console.println_color(f"[ WARN ] Invalid configuration: {exc}", "yellow")
        config = AppConfig()

    sys.exit(ShellApplication(config, console=console).run())


if __name__ == "__main__":
    main()
