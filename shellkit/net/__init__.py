#!/usr/bin/env python3
# shellkit/net/__init__.py
from __future__ import annotations

from .udp import UdpClient, UdpError

__all__ = ["UdpClient", "UdpError"]
