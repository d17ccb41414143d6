"""Source resolver — turn a :class:`HostListConfig` into raw names.

A configured DNS record always wins over the static list.  An empty DNS
answer is an error: it almost always means a broken record rather than a
deliberately empty cluster.
"""

from __future__ import annotations

import logging
import socket
from typing import TYPE_CHECKING

from hostlist_resolver.errors import EmptyResultError, ResolutionError

if TYPE_CHECKING:
    from hostlist_resolver.config import HostListConfig

logger = logging.getLogger("hostlist_resolver.resolver")

# The name exists but has no address of the requested family.
_EAI_NODATA = getattr(socket, "EAI_NODATA", None)


def _no_data(exc: BaseException) -> bool:
    """Whether *exc* (or the error it wraps) is an ``EAI_NODATA`` answer."""
    for err in (exc, exc.__cause__):
        if (
            _EAI_NODATA is not None
            and isinstance(err, socket.gaierror)
            and err.errno == _EAI_NODATA
        ):
            return True
    return False


def lookup_host(record: str) -> list[str]:
    """Resolve *record* to its IPv4 addresses using the system resolver.

    Addresses are returned once each, in the order the resolver gave them.
    ``OSError`` (``socket.gaierror`` included) and ``UnicodeError``
    propagate to the caller.
    """
    infos = socket.getaddrinfo(
        record, None, family=socket.AF_INET, type=socket.SOCK_STREAM
    )
    return list(dict.fromkeys(info[4][0] for info in infos))


def resolve(config: HostListConfig) -> set[str]:
    """Return the raw names described by *config*.

    Raises
    ------
    ResolutionError
        If the DNS lookup fails.
    EmptyResultError
        If the DNS lookup returns no addresses, or the resolver reports
        that the name has none (``EAI_NODATA``).
    """
    if not config.dns:
        return set(config.static)
    try:
        addrs = lookup_host(config.dns)
    except (OSError, UnicodeError) as exc:
        if _no_data(exc):
            raise EmptyResultError(config.dns) from exc
        raise ResolutionError(config.dns, exc) from exc
    logger.debug("dns record %s resolved to %d address(es)", config.dns, len(addrs))
    if not addrs:
        raise EmptyResultError(config.dns)
    return set(addrs)


async def resolve_async(config: HostListConfig) -> set[str]:
    """Coroutine variant of :func:`resolve` for use inside an event loop.

    The lookup runs through aiohttp's :class:`ThreadedResolver`, which
    hands ``getaddrinfo`` to the loop's executor.
    """
    if not config.dns:
        return set(config.static)
    # Import here so synchronous callers never load aiohttp.
    from aiohttp.resolver import ThreadedResolver

    resolver = ThreadedResolver()
    try:
        results = await resolver.resolve(config.dns, 0, family=socket.AF_INET)
    except (OSError, UnicodeError) as exc:
        if _no_data(exc):
            raise EmptyResultError(config.dns) from exc
        raise ResolutionError(config.dns, exc) from exc
    finally:
        await resolver.close()
    addrs = {result["host"] for result in results}
    logger.debug("dns record %s resolved to %d address(es)", config.dns, len(addrs))
    if not addrs:
        raise EmptyResultError(config.dns)
    return addrs
