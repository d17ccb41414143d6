"""CLI entry point for resolving a host list into peer addresses.

Usage::

    hostlist-resolve --dns peers.cluster.local --port 7000
    hostlist-resolve --static node-a,node-b --static 10.0.0.5:9000 -p 7000

Sources not given on the command line fall back to the ``HOSTLIST_DNS``,
``HOSTLIST_STATIC`` and ``HOSTLIST_HOSTFILE`` environment variables; the
port falls back to ``HOSTLIST_PORT``.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from hostlist_resolver.config import HostListConfig, split_hosts
from hostlist_resolver.endpoint import to_endpoints
from hostlist_resolver.errors import HostListError
from hostlist_resolver.hostfile import parse_hostfile

logger = logging.getLogger("hostlist_resolver.cli")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``hostlist-resolve``."""
    parser = argparse.ArgumentParser(
        prog="hostlist-resolve",
        description=(
            "Resolve a DNS record or static host list into host:port peer "
            "addresses, excluding the local machine."
        ),
    )
    parser.add_argument(
        "--dns",
        help="DNS record to resolve. Takes precedence over static hosts.",
    )
    parser.add_argument(
        "--static",
        action="append",
        default=[],
        metavar="HOSTS",
        help="Comma-separated host or host:port entries (repeatable).",
    )
    parser.add_argument(
        "--hostfile",
        "-f",
        help="Path to a hostfile with one host per line.",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=os.environ.get("HOSTLIST_PORT"),
        help=(
            "Port attached to names without one. "
            "Falls back to the HOSTLIST_PORT environment variable."
        ),
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON list of {host, port} objects instead of lines.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING).",
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> HostListConfig:
    """Merge command-line sources over the environment configuration."""
    if not (args.dns or args.static or args.hostfile):
        return HostListConfig.from_env()
    static: list[str] = []
    for value in args.static:
        static.extend(split_hosts(value))
    if args.hostfile:
        static.extend(parse_hostfile(args.hostfile))
    return HostListConfig(dns=args.dns or "", static=static)


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, resolve the host list and print the peers."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.port is None:
        parser.error("the --port/-p argument is required (or set HOSTLIST_PORT)")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = _config_from_args(args)
        peers = config.build(args.port)
    except (HostListError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    if not args.json:
        for addr in sorted(peers):
            print(addr)
        return 0

    # JSON needs numeric ports; build passes host:port entries through as-is.
    try:
        endpoints = to_endpoints(peers)
    except HostListError as exc:
        logger.error("json output: %s", exc)
        return 1
    print(json.dumps([{"host": ep.host, "port": ep.port} for ep in endpoints]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
