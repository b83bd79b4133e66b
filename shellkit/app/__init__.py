#!/usr/bin/env python3
# shellkit/app/__init__.py
from __future__ import annotations

"""
Application layer: the read-dispatch loop and signal-to-token plumbing.
"""


from .signals import CancellationToken, SignalManager
from .application import ShellApplication

__all__ = ["CancellationToken", "SignalManager", "ShellApplication"]
