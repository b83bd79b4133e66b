#!/usr/bin/env python3
# shellkit/ui/animated/__init__.py
from __future__ import annotations
from .spinner import Spinner

__all__ = ["Spinner"]
