"""Hostfile parser for static host lists.

Hostfile format — one host per line, columns separated by tabs or spaces::

    node-a
    node-b\t9000
    10.0.0.7\t9000\trole=worker

The optional second column is a port.  Any further ``key=value`` columns
are ignored, so hostfiles carrying per-node tags can be read as-is.
Blank lines and lines starting with ``#`` are ignored.
"""

from __future__ import annotations

from pathlib import Path

from hostlist_resolver.errors import ConfigError


def parse_hostfile(path: str | Path) -> list[str]:
    """Parse a hostfile and return its entries as static host strings.

    Parameters
    ----------
    path:
        Path to the hostfile.

    Returns
    -------
    list[str]
        ``host`` or ``host:port`` entries in file order.

    Raises
    ------
    ConfigError
        If the file is not UTF-8 text, or a second column is present but
        is neither a port nor a tag.
    """
    entries: list[str] = []
    with open(path, encoding="utf-8") as fh:
        try:
            lines = fh.readlines()
        except UnicodeDecodeError as exc:
            raise ConfigError(f"{path}: not a text hostfile: {exc}") from exc
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        host = parts[0]
        if len(parts) > 1 and "=" not in parts[1]:
            if not parts[1].isdigit():
                raise ConfigError(
                    f"{path}:{lineno}: invalid port {parts[1]!r} for {host}"
                )
            host = f"{host}:{int(parts[1])}"
        entries.append(host)
    return entries
