"""Hostlist Resolver — DNS or static host lists to peer addresses, minus self."""

from hostlist_resolver.pipeline import build, build_async
from hostlist_resolver.config import HostListConfig
from hostlist_resolver.endpoint import PeerEndpoint, attach_port_if_missing, to_endpoints
from hostlist_resolver.errors import (
    AddressEnumerationError,
    ConfigError,
    EmptyResultError,
    HostListError,
    HostnameError,
    InterfaceEnumerationError,
    InvalidFormatError,
    ResolutionError,
)
from hostlist_resolver.hostfile import parse_hostfile
from hostlist_resolver.local import get_local_names
from hostlist_resolver.resolver import resolve, resolve_async

__all__ = [
    "AddressEnumerationError",
    "ConfigError",
    "EmptyResultError",
    "HostListConfig",
    "HostListError",
    "HostnameError",
    "InterfaceEnumerationError",
    "InvalidFormatError",
    "PeerEndpoint",
    "ResolutionError",
    "attach_port_if_missing",
    "build",
    "build_async",
    "get_local_names",
    "parse_hostfile",
    "resolve",
    "resolve_async",
    "to_endpoints",
]
