#!/usr/bin/env python3
# shellkit/net/udp.py
from __future__ import annotations

"""
Fire-and-forget UDP helper (IPv4).

- send_to: resolve a host and send one datagram.
- receive_once: bind a local port and wait for one datagram.
Failures raise UdpError with a short, user-facing reason.
"""

import logging
import socket

log = logging.getLogger(__name__)

_MAX_DATAGRAM = 2048


class UdpError(OSError):
    """A UDP send or receive that did not complete."""


class UdpClient:
    """Stateless UDP sender/receiver; every call opens and closes its own socket."""

    def __init__(self, *, buffer_size: int = _MAX_DATAGRAM, encoding: str = "utf-8") -> None:
        self.buffer_size = buffer_size
        self.encoding = encoding

    def send_to(self, host: str, port: int, message: str) -> None:
        """Send `message` to host:port, trying each resolved address until one succeeds."""
        try:
            addresses = socket.getaddrinfo(
                host, port, socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP
            )
        except socket.gaierror as exc:
            raise UdpError(f"Failed to resolve host: {host}") from exc

        payload = message.encode(self.encoding)
        for family, socktype, proto, _, address in addresses:
            try:
                with socket.socket(family, socktype, proto) as sock:
                    sent = sock.sendto(payload, address)
            except OSError as exc:
                log.debug("sendto %s failed: %s", address, exc)
                continue
            if sent == len(payload):
                log.debug("Sent %d byte(s) to %s", sent, address)
                return

        raise UdpError("Failed to send UDP payload.")

    def receive_once(self, local_port: int, timeout_ms: int) -> str:
        """
        Wait up to `timeout_ms` for one datagram on `local_port` (all interfaces).
        A timeout of 0 only checks for a datagram that is already queued.
        """
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP) as sock:
            try:
                sock.bind(("0.0.0.0", local_port))
            except OSError as exc:
                raise UdpError("Failed to bind UDP socket.") from exc

            sock.settimeout(timeout_ms / 1000)
            try:
                data, sender = sock.recvfrom(self.buffer_size)
            except (TimeoutError, BlockingIOError) as exc:
                raise UdpError("No UDP message received before timeout.") from exc
            except OSError as exc:
                raise UdpError("Failed to receive UDP payload.") from exc

        if not data:
            raise UdpError("No UDP message received before timeout.")
        log.debug("Received %d byte(s) from %s", len(data), sender)
        return data.decode(self.encoding, errors="replace")
