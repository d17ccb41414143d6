"""Build a peer address set from a host list configuration.

Pipeline::

    resolve ──► attach port ──┐
                              ├──► resolved − local
    local names ► attach port ┘

Any failure aborts the whole build; the failing stage is recorded on the
raised :class:`~hostlist_resolver.errors.HostListError`.  An empty result
is *not* a failure — it is what a single-node cluster resolves to.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from hostlist_resolver.endpoint import attach_port_if_missing
from hostlist_resolver.errors import HostListError
from hostlist_resolver.local import get_local_names
from hostlist_resolver.resolver import resolve, resolve_async

if TYPE_CHECKING:
    from hostlist_resolver.config import HostListConfig

logger = logging.getLogger("hostlist_resolver.pipeline")


@contextmanager
def _stage(name: str) -> Iterator[None]:
    """Tag any :class:`HostListError` raised inside the block with *name*."""
    try:
        yield
    except HostListError as exc:
        exc.stage = name
        raise


def _exclude_local(addrs: set[str], port: int) -> set[str]:
    with _stage("get local names"):
        local_names = get_local_names()
    with _stage("attach port to local names"):
        local_addrs = attach_port_if_missing(local_names, port)
    peers = addrs - local_addrs
    logger.debug(
        "resolved %d address(es), %d excluded as local",
        len(addrs),
        len(addrs) - len(peers),
    )
    return peers


def build(config: HostListConfig, port: int) -> set[str]:
    """Resolve *config* into a set of ``host:port`` peer addresses.

    Names without a port get *port* attached; names that already carry
    one are left alone.  Either IP addresses or host names are accepted.
    The local machine, identified by its IPv4 addresses and its hostname
    combined with *port*, is removed from the result.

    Parameters
    ----------
    config:
        DNS record or static host list to resolve.
    port:
        Default port for names that lack one.

    Returns
    -------
    set[str]
        Peer addresses, possibly empty.

    Raises
    ------
    HostListError
        From whichever stage failed, with ``exc.stage`` set.
    """
    with _stage("resolve"):
        names = resolve(config)
    with _stage("attach port to resolved names"):
        addrs = attach_port_if_missing(names, port)
    return _exclude_local(addrs, port)


async def build_async(config: HostListConfig, port: int) -> set[str]:
    """Coroutine variant of :func:`build`.

    DNS goes through :func:`~hostlist_resolver.resolver.resolve_async`;
    local discovery runs in the loop's default executor.
    """
    with _stage("resolve"):
        names = await resolve_async(config)
    with _stage("attach port to resolved names"):
        addrs = attach_port_if_missing(names, port)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _exclude_local, addrs, port)
