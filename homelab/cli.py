"""
Home Lab Inventory CLI

Composition root: builds settings, the cache endpoint and client, and the
snapshot service, then runs one command.

Usage:
    homelab sync [--key KEY] [--cache-url URL]
    homelab show [--key KEY] [--cache-url URL]
    homelab search TERM
"""

import argparse
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from .constants import APP_VERSION
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.telemetry import TelemetryManager
from .domain.inventory import HomeLab, InventoryError, build_sample_lab
from .infrastructure.cache import (
    CacheClient,
    CacheConfigurationException,
    CacheConnectionException,
    CacheEndpoint,
    CacheServiceException,
)
from .services import InventorySnapshotService, SnapshotStage, SnapshotStageError

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONNECTION_ERROR = 3
EXIT_SERVICE_ERROR = 4
EXIT_VERIFY_FAILED = 5


def exit_code_for(error: SnapshotStageError) -> int:
    """Map a failed round trip to a process exit status."""
    if isinstance(error.cause, CacheConnectionException):
        return EXIT_CONNECTION_ERROR
    if isinstance(error.cause, CacheServiceException):
        return EXIT_SERVICE_ERROR
    if error.stage is SnapshotStage.VERIFY:
        return EXIT_VERIFY_FAILED
    return EXIT_FAILURE


def _snapshot_service(args: argparse.Namespace, settings: Settings) -> InventorySnapshotService:
    endpoint = CacheEndpoint.from_url(args.cache_url or settings.CACHE_URL)
    logger.debug("Using cache endpoint", endpoint=str(endpoint))
    return InventorySnapshotService(CacheClient(endpoint))


def _format_systems(lab: HomeLab) -> List[str]:
    lines = []
    for system in lab.systems:
        lines.append(
            f"{system.name}\t{system.ip_address}\t{system.system_type.kind.value}"
            f"\t{system.cpu_info.vendor} {system.cpu_info.model}"
            f"\t{system.ram_in_gb:g} GB\t{system.os.name} {system.os.version:g}"
        )
    return lines


def cmd_sync(args: argparse.Namespace, settings: Settings) -> int:
    """Round-trip the sample lab through the cache."""
    service = _snapshot_service(args, settings)
    key = args.key or settings.LAB_CACHE_KEY

    try:
        value = service.round_trip(build_sample_lab(settings.LAB_NAME), key)
    except SnapshotStageError as e:
        print(str(e), file=sys.stderr)
        return exit_code_for(e)

    print(f"Ok data {value}")
    return EXIT_OK


def cmd_show(args: argparse.Namespace, settings: Settings) -> int:
    """Print the lab currently stored in the cache."""
    service = _snapshot_service(args, settings)
    key = args.key or settings.LAB_CACHE_KEY

    try:
        lab = service.load(key)
    except SnapshotStageError as e:
        print(str(e), file=sys.stderr)
        return exit_code_for(e)

    print(f"{lab.name} ({len(lab.systems)} systems)")
    for line in _format_systems(lab):
        print(line)
    return EXIT_OK


def cmd_search(args: argparse.Namespace, settings: Settings) -> int:
    """Search the sample lab by host name."""
    lab = build_sample_lab(settings.LAB_NAME)

    try:
        matches = lab.search_systems(args.term)
    except InventoryError as e:
        print(f"search failed: {e}", file=sys.stderr)
        return EXIT_FAILURE

    for line in _format_systems(HomeLab(name=lab.name, systems=matches)):
        print(line)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="homelab", description="Home lab inventory snapshots in Redis"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    cache_options = argparse.ArgumentParser(add_help=False)
    cache_options.add_argument(
        "--key", default=None, help="Cache key (default: LAB_CACHE_KEY)"
    )
    cache_options.add_argument(
        "--cache-url", default=None, help="Redis URL (default: CACHE_URL)"
    )

    sync = subparsers.add_parser(
        "sync", parents=[cache_options], help="Write the sample lab and read it back"
    )
    sync.set_defaults(handler=cmd_sync)

    show = subparsers.add_parser(
        "show", parents=[cache_options], help="Print the lab stored in the cache"
    )
    show.set_defaults(handler=cmd_show)

    search = subparsers.add_parser("search", help="Search the sample lab by name")
    search.add_argument("term", help="Substring of the host name (min 3 characters)")
    search.set_defaults(handler=cmd_search)

    return parser


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(argv)

    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as e:
            print(f"config failed: {e}", file=sys.stderr)
            return EXIT_FAILURE

    configure_logging(settings)
    telemetry = TelemetryManager(settings)
    telemetry.initialize()

    try:
        return args.handler(args, settings)
    except CacheConfigurationException as e:
        print(f"config failed: {e.message}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        telemetry.shutdown()


if __name__ == "__main__":
    sys.exit(main())
