"""Error hierarchy for host list resolution.

Every failure raised by :func:`hostlist_resolver.pipeline.build` derives from
:class:`HostListError`.  When a stage of the pipeline fails, the stage name
is attached to the exception so the message reads like
``resolve: dns record 'peers.example' empty``.
"""

from __future__ import annotations


class HostListError(Exception):
    """Base class for all host list failures."""

    #: Pipeline stage that raised the error, set by ``build``.
    stage: str | None = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.stage:
            return f"{self.stage}: {message}"
        return message


class ConfigError(HostListError):
    """Malformed configuration mapping, environment value or hostfile."""


class ResolutionError(HostListError):
    """The DNS lookup for the configured record failed."""

    def __init__(self, record: str, reason: object) -> None:
        super().__init__(f"resolve dns {record!r}: {reason}")
        self.record = record


class EmptyResultError(HostListError):
    """The DNS lookup succeeded but returned no addresses."""

    def __init__(self, record: str) -> None:
        super().__init__(f"dns record {record!r} empty")
        self.record = record


class InterfaceEnumerationError(HostListError):
    """Listing the local network interfaces failed."""


class AddressEnumerationError(HostListError):
    """Reading the addresses bound to one interface failed."""

    def __init__(self, interface: str, reason: object) -> None:
        super().__init__(f"addrs of {interface}: {reason}")
        self.interface = interface


class HostnameError(HostListError):
    """The local hostname could not be read."""


class InvalidFormatError(HostListError):
    """A name has neither the ``host`` nor the ``host:port`` form."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"invalid name format: {name}, expected 'host' or 'ip:port'"
        )
        self.name = name
