# plugins/__init__.py
"""
Command plugins discovered at boot.

Each subpackage ships an ``entrypoint.py`` exporting COMMAND or COMMANDS;
plain modules placed here may export them directly.
"""
