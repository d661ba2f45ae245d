"""Network address validators.

Literal IP addresses are checked locally with ``ipaddress``. Host names are
resolved with ``socket.getaddrinfo``, so these validators may block on DNS;
bound them externally if that matters to the caller.
"""

from __future__ import annotations

import ipaddress
import logging
import os
import re
import socket
from typing import Any

from ..exceptions import ERR_ADDRESS, WrongTypeError
from .base import OptionalValidator

logger = logging.getLogger(__name__)

# Hosts made only of digits and dots are never looked up: getaddrinfo would
# accept shorthand such as "0" or "127.1" that is not an IP address. Hosts
# with a colon that are not IPv6 literals are rejected the same way.
_NUMERIC_HOST = re.compile(r"^[0-9.]+$")

# sun_path size on Linux, including the terminating NUL
_UNIX_PATH_MAX = 108

_VERSIONS = {socket.AF_UNSPEC: (4, 6), socket.AF_INET: (4,), socket.AF_INET6: (6,)}


def split_host_port(address: str) -> tuple[str, str]:
    """Split ``host:port`` or ``[host]:port`` into host and port.

    Raises:
        ValueError: If the address has no port or is malformed
    """
    if address.startswith("["):
        end = address.find("]")
        if end < 0 or address[end + 1 : end + 2] != ":":
            raise ValueError(f"missing port in address: {address}")
        host, port = address[1:end], address[end + 2 :]
        if "[" in host or "]" in port:
            raise ValueError(f"unexpected bracket in address: {address}")
        return host, port

    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address: {address}")
    if ":" in host:
        raise ValueError(f"too many colons in address: {address}")
    return host, port


def _valid_port(port: str, protocol: str) -> bool:
    # an empty port means port 0
    if not port:
        return True
    if port.isascii() and port.isdigit():
        return int(port) <= 65535
    try:
        socket.getservbyname(port, protocol)
    except (OSError, ValueError):
        return False
    return True


def resolves(host: str, family: int = socket.AF_UNSPEC, socktype: int = 0) -> bool:
    """Check whether a host is a literal IP or a name that resolves.

    Args:
        host: IP literal (an IPv6 zone suffix is allowed) or host name
        family: ``AF_UNSPEC``, ``AF_INET`` or ``AF_INET6``
        socktype: Socket type passed to ``getaddrinfo``

    Returns:
        True if the host is usable for the requested address family
    """
    try:
        ip = ipaddress.ip_address(host.split("%", 1)[0])
    except ValueError:
        ip = None
    if ip is not None:
        return ip.version in _VERSIONS[family]

    if not host or ":" in host or _NUMERIC_HOST.match(host):
        return False

    try:
        socket.getaddrinfo(host, None, family, socktype)
    except (OSError, UnicodeError) as e:
        logger.debug(f"Cannot resolve host {host!r}: {e}")
        return False
    return True


class SocketAddress(OptionalValidator):
    """String must be a resolvable ``host:port`` socket address.

    An empty host (``":80"``) stands for the local system and an empty port
    (``"localhost:"``) for port 0; both are accepted.
    """

    protocol = "tcp"
    family = socket.AF_UNSPEC

    @property
    def socktype(self) -> int:
        return socket.SOCK_DGRAM if self.protocol == "udp" else socket.SOCK_STREAM

    def inspect(self, value: Any) -> Exception | None:
        if not isinstance(value, str):
            raise WrongTypeError(value, type(self).__name__)
        try:
            host, port = split_host_port(value)
        except ValueError:
            return ERR_ADDRESS
        if not _valid_port(port, self.protocol):
            return ERR_ADDRESS
        if host and not resolves(host, self.family, self.socktype):
            return ERR_ADDRESS
        return None


class TCPAddress(SocketAddress):
    pass


class TCPv4Address(SocketAddress):
    family = socket.AF_INET


class TCPv6Address(SocketAddress):
    family = socket.AF_INET6


class UDPAddress(SocketAddress):
    protocol = "udp"


class UDPv4Address(SocketAddress):
    protocol = "udp"
    family = socket.AF_INET


class UDPv6Address(SocketAddress):
    protocol = "udp"
    family = socket.AF_INET6


class IPAddress(OptionalValidator):
    """String must be an IP address or a host name that resolves to one.

    A bracketed host with a port (``"[::1]:80"``) is accepted and only the host
    is checked.
    """

    family = socket.AF_UNSPEC

    def inspect(self, value: Any) -> Exception | None:
        if not isinstance(value, str):
            raise WrongTypeError(value, type(self).__name__)
        host = value
        if value.startswith("["):
            try:
                host, _ = split_host_port(value)
            except ValueError:
                return ERR_ADDRESS
        if not resolves(host, self.family):
            return ERR_ADDRESS
        return None


class IPv4Address(IPAddress):
    family = socket.AF_INET


class IPv6Address(IPAddress):
    family = socket.AF_INET6


class UnixAddress(OptionalValidator):
    """String must be usable as a Unix domain socket path."""

    def inspect(self, value: Any) -> Exception | None:
        if not isinstance(value, str):
            raise WrongTypeError(value, "UnixAddress")
        try:
            encoded = os.fsencode(value)
        except UnicodeError:
            return ERR_ADDRESS
        if b"\x00" in encoded[1:] or len(encoded) >= _UNIX_PATH_MAX:
            return ERR_ADDRESS
        return None
