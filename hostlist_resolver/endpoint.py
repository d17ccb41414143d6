"""Endpoint strings and the port normalizer.

Names flow through the pipeline as plain strings: first bare hosts or
``host:port`` pairs, then — after :func:`attach_port_if_missing` — always
``host:port``.  :class:`PeerEndpoint` is the structured form handed to
callers that want host and port separately.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from hostlist_resolver.errors import InvalidFormatError


@dataclass(frozen=True)
class PeerEndpoint:
    """A single peer's host (name or IPv4 address) and port."""

    host: str
    port: int

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def parse(cls, address: str) -> "PeerEndpoint":
        """Parse a ``host:port`` string.

        Raises
        ------
        InvalidFormatError
            If *address* is not exactly ``host:port`` with a numeric port.
        """
        parts = address.split(":")
        if len(parts) != 2 or not parts[1].isdigit():
            raise InvalidFormatError(address)
        return cls(host=parts[0], port=int(parts[1]))


def attach_port_if_missing(names: Iterable[str], port: int) -> set[str]:
    """Return *names* with *port* attached to every entry lacking one.

    Parameters
    ----------
    names:
        Bare hosts (``"10.0.0.5"``, ``"node-a"``) or ``host:port`` pairs.
    port:
        Port appended to bare hosts.  Entries that already carry a port
        keep their own.

    Returns
    -------
    set[str]
        A new set of ``host:port`` strings; *names* is not modified.

    Raises
    ------
    InvalidFormatError
        If an entry contains more than one ``:`` (bare IPv6 addresses
        included).
    """
    result: set[str] = set()
    for name in names:
        parts = name.split(":")
        if len(parts) == 1:
            name = f"{name}:{port}"
        elif len(parts) != 2:
            raise InvalidFormatError(name)
        result.add(name)
    return result


def to_endpoints(addresses: Iterable[str]) -> list[PeerEndpoint]:
    """Convert ``host:port`` strings into endpoints sorted by host, then port."""
    endpoints = [PeerEndpoint.parse(addr) for addr in addresses]
    endpoints.sort(key=lambda ep: (ep.host, ep.port))
    return endpoints
