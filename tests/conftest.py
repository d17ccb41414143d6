"""Shared fixtures — fake DNS resolver and fake local network state."""

from __future__ import annotations

import socket
from collections import namedtuple
from dataclasses import dataclass, field

import psutil
import pytest

import hostlist_resolver.resolver


# Same fields as psutil's ``snicaddr``.
NicAddr = namedtuple("NicAddr", ["family", "address", "netmask", "broadcast", "ptp"])

AF_LINK = getattr(psutil, "AF_LINK", -1)


def ipv4(address: str) -> NicAddr:
    return NicAddr(socket.AF_INET, address, "255.255.255.0", None, None)


def ipv6(address: str) -> NicAddr:
    return NicAddr(socket.AF_INET6, address, None, None, None)


def link(address: str) -> NicAddr:
    return NicAddr(AF_LINK, address, None, None, None)


# ---------------------------------------------------------------------------
# Fake DNS
# ---------------------------------------------------------------------------


@dataclass
class FakeDNS:
    """Answers (or exceptions) per DNS record, plus the queries seen."""

    records: dict[str, list[str] | Exception] = field(default_factory=dict)
    queries: list[str] = field(default_factory=list)

    def lookup_host(self, record: str) -> list[str]:
        self.queries.append(record)
        answer = self.records.get(record)
        if answer is None:
            # Unknown records fail the way getaddrinfo does for NXDOMAIN.
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        if isinstance(answer, Exception):
            raise answer
        return list(answer)


@pytest.fixture
def dns(monkeypatch) -> FakeDNS:
    """Patch ``lookup_host`` to answer from a :class:`FakeDNS`."""
    fake = FakeDNS()
    monkeypatch.setattr(hostlist_resolver.resolver, "lookup_host", fake.lookup_host)
    return fake


# ---------------------------------------------------------------------------
# Fake local machine
# ---------------------------------------------------------------------------


@dataclass
class FakeMachine:
    """Network state returned by the patched psutil / socket calls."""

    hostname: str = "self-host"
    interfaces: dict[str, list[NicAddr]] = field(
        default_factory=lambda: {"lo": [ipv4("127.0.0.1"), ipv6("::1")]}
    )
    interfaces_error: Exception | None = None
    hostname_error: Exception | None = None


@pytest.fixture
def machine(monkeypatch) -> FakeMachine:
    """Patch interface enumeration and ``gethostname`` to read a :class:`FakeMachine`."""
    fake = FakeMachine()

    def _net_if_addrs() -> dict[str, list[NicAddr]]:
        if fake.interfaces_error is not None:
            raise fake.interfaces_error
        return fake.interfaces

    def _gethostname() -> str:
        if fake.hostname_error is not None:
            raise fake.hostname_error
        return fake.hostname

    monkeypatch.setattr(psutil, "net_if_addrs", _net_if_addrs)
    monkeypatch.setattr(socket, "gethostname", _gethostname)
    return fake
