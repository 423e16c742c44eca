"""Export – short-lived connections to push targets.

``dial`` opens a stream or datagram socket for one push cycle and wraps it
in a :class:`SocketConnection`.  Every socket failure surfaces as one of the
:mod:`metric_pusher.kernel.errors` export errors, tagged with the address.
"""
from __future__ import annotations

import logging
import socket
from typing import Callable, Protocol, runtime_checkable

from metric_pusher.kernel.errors import CloseError, DeadlineError, DialError, WriteError
from metric_pusher.resilience.timeouts import Deadline

__all__ = [
    "Connection",
    "Dialer",
    "NETWORKS",
    "SocketConnection",
    "dial",
    "split_host_port",
]

logger = logging.getLogger(__name__)

# network -> (address family, socket type)
NETWORKS: dict[str, tuple[int, int]] = {
    "tcp": (socket.AF_UNSPEC, socket.SOCK_STREAM),
    "tcp4": (socket.AF_INET, socket.SOCK_STREAM),
    "tcp6": (socket.AF_INET6, socket.SOCK_STREAM),
    "udp": (socket.AF_UNSPEC, socket.SOCK_DGRAM),
    "udp4": (socket.AF_INET, socket.SOCK_DGRAM),
    "udp6": (socket.AF_INET6, socket.SOCK_DGRAM),
}
if hasattr(socket, "AF_UNIX"):
    NETWORKS["unix"] = (socket.AF_UNIX, socket.SOCK_STREAM)
    NETWORKS["unixgram"] = (socket.AF_UNIX, socket.SOCK_DGRAM)


@runtime_checkable
class Connection(Protocol):
    """Port: an open connection to a push target."""

    def set_deadline(self, deadline: Deadline) -> None: ...
    def write(self, text: str) -> int: ...
    def close(self) -> None: ...


Dialer = Callable[[str, str, float], Connection]


class SocketConnection:
    """A connected socket with an optional absolute deadline on all I/O."""

    def __init__(self, sock: socket.socket, address: str) -> None:
        self._sock = sock
        self.address = address
        self._deadline: Deadline | None = None

    def set_deadline(self, deadline: Deadline) -> None:
        try:
            self._sock.settimeout(deadline.remaining_seconds)
        except OSError as exc:
            raise DeadlineError(self.address, f"couldn't set deadline on {self.address}: {exc}", cause=exc) from exc
        self._deadline = deadline

    def write(self, text: str) -> int:
        data = text.encode("utf-8")
        try:
            if self._deadline is not None:
                self._deadline.raise_if_expired()
                self._sock.settimeout(self._deadline.remaining_seconds)
            self._sock.sendall(data)
        except OSError as exc:
            raise WriteError(self.address, f"write to {self.address} failed: {exc}", cause=exc) from exc
        return len(data)

    def close(self) -> None:
        try:
            self._sock.close()
        except OSError as exc:
            raise CloseError(self.address, f"close of {self.address} failed: {exc}", cause=exc) from exc

    def __repr__(self) -> str:
        return f"SocketConnection(address={self.address!r})"


def split_host_port(address: str) -> tuple[str, int]:
    """Split ``host:port`` or ``[v6-host]:port``; raises ``ValueError``."""
    host, sep, port = address.rpartition(":")
    if not sep or not port:
        raise ValueError(f"missing port in address {address!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"too many colons in address {address!r}")
    return host, int(port)


def dial(network: str, address: str, timeout: float) -> SocketConnection:
    """Connect to *address* over *network* within *timeout* seconds."""
    try:
        family, socktype = NETWORKS[network]
    except KeyError:
        raise DialError(address, f"unknown network {network!r}") from None

    if family == getattr(socket, "AF_UNIX", None):
        sock: socket.socket | None = None
        try:
            sock = socket.socket(family, socktype)
            sock.settimeout(timeout)
            sock.connect(address)
        except OSError as exc:
            if sock is not None:
                sock.close()
            raise DialError(address, f"dial {network} {address}: {exc}", cause=exc) from exc
        return SocketConnection(sock, address)

    try:
        host, port = split_host_port(address)
        infos = socket.getaddrinfo(host or None, port, family, socktype)
    except (OSError, ValueError) as exc:
        raise DialError(address, f"dial {network} {address}: {exc}", cause=exc) from exc

    last_exc: OSError | None = None
    for af, kind, proto, _canonname, sockaddr in infos:
        sock = None
        try:
            sock = socket.socket(af, kind, proto)
            sock.settimeout(timeout)
            sock.connect(sockaddr)
        except OSError as exc:
            if sock is not None:
                sock.close()
            last_exc = exc
            logger.debug("dial.attempt_failed address=%s sockaddr=%s exc=%r", address, sockaddr, exc)
            continue
        return SocketConnection(sock, address)

    raise DialError(
        address,
        f"dial {network} {address}: {last_exc or 'no addresses resolved'}",
        cause=last_exc,
    )
