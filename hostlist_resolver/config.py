"""Host list configuration.

A host list is declared either by a DNS record or by a static list of
hosts.  If present, the DNS record always takes precedence.

The configuration is normally handed over already parsed (e.g. the
``hostlist`` section of a YAML file)::

    dns: peers.cluster.local
    static:
      - node-a
      - 10.0.0.5:9000

and can also be read from ``HOSTLIST_DNS``, ``HOSTLIST_STATIC`` (comma
separated) and ``HOSTLIST_HOSTFILE``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from hostlist_resolver.errors import ConfigError
from hostlist_resolver.hostfile import parse_hostfile
from hostlist_resolver.pipeline import build, build_async


@dataclass(frozen=True)
class HostListConfig:
    """A DNS record or a static host list, resolved by :meth:`build`.

    Parameters
    ----------
    dns:
        DNS record to resolve host addresses from.  Empty means unset.
    static:
        Statically configured ``host`` or ``host:port`` entries, used only
        when *dns* is empty.  Duplicates collapse.
    """

    dns: str = ""
    static: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if isinstance(self.static, str):
            raise ConfigError(
                f"static: expected a list of hosts, got the string {self.static!r}"
            )
        object.__setattr__(self, "static", frozenset(self.static))

    # -- loaders --------------------------------------------------------------

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "HostListConfig":
        """Build a config from a parsed ``{dns, static}`` mapping.

        Unknown keys are ignored.  Raises :class:`ConfigError` on wrong types.
        """
        dns = data.get("dns")
        if dns is None:
            dns = ""
        if not isinstance(dns, str):
            raise ConfigError(f"dns: expected a string, got {type(dns).__name__}")
        static = data.get("static")
        if static is None:
            static = []
        if isinstance(static, str) or not isinstance(static, Iterable):
            raise ConfigError(
                f"static: expected a list of strings, got {type(static).__name__}"
            )
        static = list(static)
        for entry in static:
            if not isinstance(entry, str):
                raise ConfigError(f"static: invalid entry {entry!r}")
        return cls(dns=dns, static=static)

    @classmethod
    def from_env(cls) -> "HostListConfig":
        """Build a config from ``HOSTLIST_*`` environment variables."""
        static = split_hosts(os.environ.get("HOSTLIST_STATIC", ""))
        hostfile = os.environ.get("HOSTLIST_HOSTFILE")
        if hostfile:
            static.extend(parse_hostfile(hostfile))
        return cls(dns=os.environ.get("HOSTLIST_DNS", "").strip(), static=static)

    # -- resolution -----------------------------------------------------------

    def build(self, port: int) -> set[str]:
        """Resolve into ``host:port`` peers, minus the local machine.

        See :func:`hostlist_resolver.pipeline.build`.
        """
        return build(self, port)

    async def build_async(self, port: int) -> set[str]:
        """Coroutine variant of :meth:`build`."""
        return await build_async(self, port)


def split_hosts(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]
