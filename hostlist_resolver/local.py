"""Local identity discovery.

Collects every name by which peers might list this machine: its
non-loopback IPv4 addresses and its hostname.  Both are gathered even
though one usually suffices, so self-exclusion works whether the host
list was written with addresses or with names.
"""

from __future__ import annotations

import ipaddress
import logging
import socket

import psutil

from hostlist_resolver.errors import (
    AddressEnumerationError,
    HostnameError,
    InterfaceEnumerationError,
)

logger = logging.getLogger("hostlist_resolver.local")


def local_ipv4_addresses() -> set[str]:
    """Return the non-loopback IPv4 addresses bound to local interfaces.

    Raises
    ------
    InterfaceEnumerationError
        If the interface table cannot be read.
    AddressEnumerationError
        If an interface reports an ``AF_INET`` address that is not a
        valid IPv4 address.
    """
    try:
        interfaces = psutil.net_if_addrs()
    except (OSError, RuntimeError) as exc:
        raise InterfaceEnumerationError(f"interfaces: {exc}") from exc

    result: set[str] = set()
    for name, addrs in interfaces.items():
        for addr in addrs:
            # IPv6 and link-layer entries are not used for self-exclusion.
            if addr.family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.IPv4Address(addr.address)
            except ipaddress.AddressValueError as exc:
                raise AddressEnumerationError(name, exc) from exc
            if ip.is_loopback:
                continue
            result.add(str(ip))
    return result


def get_local_names() -> set[str]:
    """Return the local IPv4 addresses plus the machine's hostname.

    Raises
    ------
    InterfaceEnumerationError, AddressEnumerationError
        See :func:`local_ipv4_addresses`.
    HostnameError
        If the hostname cannot be read.
    """
    result = local_ipv4_addresses()
    try:
        hostname = socket.gethostname()
    except OSError as exc:
        raise HostnameError(f"hostname: {exc}") from exc
    result.add(hostname)
    logger.debug("local names: %s", sorted(result))
    return result
