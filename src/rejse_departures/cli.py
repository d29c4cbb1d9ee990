"""CLI for configuring and watching the departure board."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any
from urllib.parse import parse_qsl, urlsplit

import aiohttp

from rejse_departures.adapters.config import AppConfig
from rejse_departures.adapters.console import ConsoleBoardDisplay
from rejse_departures.adapters.geolocation import ConfiguredGeolocator
from rejse_departures.adapters.rejseplanen_api import (
    RejseplanenAddressLookup,
    RejseplanenDepartureBoard,
    RejseplanenHttpClient,
    RejseplanenLocationSearch,
)
from rejse_departures.adapters.storage import JsonFileConfigStore
from rejse_departures.application.services import (
    ConfigurationResolver,
    CountdownProjector,
    DepartureBoardOrchestrator,
    SetupService,
)
from rejse_departures.domain.models import (
    BoardPhase,
    ConfigurationValidationError,
    Place,
    TransportModes,
    TripConfig,
)

logger = logging.getLogger(__name__)


def parse_link(link: str) -> dict[str, str]:
    """Query parameters of a shareable link (or of a bare query string)."""
    parts = urlsplit(link)
    query = parts.query if parts.query or parts.scheme or parts.path.startswith("/") else link
    return dict(parse_qsl(query.lstrip("?")))


def _http_client(config: AppConfig, session: aiohttp.ClientSession) -> RejseplanenHttpClient:
    return RejseplanenHttpClient(
        session,
        config.access_token,
        base_url=config.api_base_url,
        timeout_seconds=config.api_timeout,
    )


def _setup_service(config: AppConfig, session: aiohttp.ClientSession) -> SetupService:
    return SetupService(
        JsonFileConfigStore(config.resolved_config_store_path),
        RejseplanenLocationSearch(_http_client(config, session)),
        namespace=config.config_namespace,
    )


def build_orchestrator(
    config: AppConfig, session: aiohttp.ClientSession, display: ConsoleBoardDisplay
) -> DepartureBoardOrchestrator:
    """Wire the departure board for the terminal."""
    http_client = _http_client(config, session)
    resolver = ConfigurationResolver(
        JsonFileConfigStore(config.resolved_config_store_path),
        ConfiguredGeolocator(config.latitude, config.longitude),
        RejseplanenAddressLookup(http_client),
        namespace=config.config_namespace,
        current_location_sentinel=config.current_location_sentinel,
    )
    return DepartureBoardOrchestrator(
        resolver,
        RejseplanenDepartureBoard(http_client),
        display,
        config.product_bits,
        projector=CountdownProjector(config.timezone),
        refresh_interval_seconds=config.refresh_interval_seconds,
    )


def config_from_args(args: argparse.Namespace, app_config: AppConfig) -> TripConfig:
    """TripConfig described by the 'configure' arguments."""
    if args.current_location:
        origin = Place(ext_id=app_config.current_location_sentinel, name="Current location")
    else:
        origin = Place(ext_id=args.origin_ext_id or "", name=args.origin_name or "")
    return TripConfig(
        origin=origin,
        direction=Place(ext_id=args.direction_ext_id or "", name=args.direction_name or ""),
        duration_minutes=args.duration,
        modes=TransportModes(bus=args.bus, train=args.train),
    )


def _print_config(trip: TripConfig) -> None:
    print(f"  Origin:    {trip.origin.name} ({trip.origin.ext_id or 'not set'})")
    if trip.direction.ext_id:
        print(f"  Direction: {trip.direction.name} ({trip.direction.ext_id})")
    print(f"  Duration:  {trip.duration_minutes} minutes")
    print(f"  Bus:       {'yes' if trip.modes.bus else 'no'}")
    print(f"  Train:     {'yes' if trip.modes.train else 'no'}")


async def search(query: str, config: AppConfig, as_json: bool) -> int:
    """Print stop suggestions for a query."""
    async with aiohttp.ClientSession() as session:
        stops = await _setup_service(config, session).suggest_locations(query)

    if as_json:
        print(json.dumps([stop.to_dict() for stop in stops], indent=2, ensure_ascii=False))
        return 0
    if not stops:
        print(f"No stops found for '{query}' (at least 4 characters are needed)", file=sys.stderr)
        return 1
    print(f"\nFound {len(stops)} stop(s):\n")
    for stop in stops:
        print(f"  {stop.name}")
        print(f"    ID: {stop.ext_id}")
        print()
    return 0


async def watch_board(config: AppConfig, link: str | None, once: bool) -> int:
    """Show the live departure board until interrupted."""
    url_params: dict[str, Any] = parse_link(link) if link else {}
    display = ConsoleBoardDisplay(clear_screen=not once)
    async with aiohttp.ClientSession() as session:
        orchestrator = build_orchestrator(config, session, display)
        snapshot = await orchestrator.activate(url_params)
        try:
            if snapshot.phase != BoardPhase.READY:
                return 1
            if not once:
                while orchestrator.is_ticking:
                    await asyncio.sleep(1)
        finally:
            await orchestrator.deactivate()
    return 0


async def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Rejseplanen Departure Board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find your stop
  rejse-config search "Nørreport"

  # Save a configuration
  rejse-config configure --origin-ext-id 8600646 --origin-name "Nørreport St." --train

  # Watch the live board
  rejse-config board
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    search_parser = subparsers.add_parser("search", help="Search for stops")
    search_parser.add_argument("query", help="Stop name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    configure_parser = subparsers.add_parser("configure", help="Save the trip configuration")
    origin_group = configure_parser.add_mutually_exclusive_group(required=True)
    origin_group.add_argument("--origin-ext-id", help="External id of the origin stop")
    origin_group.add_argument(
        "--current-location", action="store_true", help="Use the device position as origin"
    )
    configure_parser.add_argument("--origin-name", help="Display name of the origin stop")
    configure_parser.add_argument("--direction-ext-id", help="External id of the direction stop")
    configure_parser.add_argument("--direction-name", help="Display name of the direction stop")
    configure_parser.add_argument(
        "--duration", type=int, default=15, help="Minutes ahead to show (5-30)"
    )
    configure_parser.add_argument("--bus", action="store_true", help="Show buses")
    configure_parser.add_argument("--train", action="store_true", help="Show trains")

    show_parser = subparsers.add_parser("show", help="Show the saved configuration")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")

    share_parser = subparsers.add_parser("share", help="Print a shareable link")
    share_parser.add_argument("--base-url", default="http://localhost:8000/", help="Board URL")

    board_parser = subparsers.add_parser("board", help="Watch the live departure board")
    board_parser.add_argument("--link", help="Shareable link or query string to use")
    board_parser.add_argument("--once", action="store_true", help="Print one board and exit")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    exit_code = 0
    try:
        if args.command == "search":
            exit_code = await search(args.query, config, args.json)

        elif args.command == "configure":
            async with aiohttp.ClientSession() as session:
                setup = _setup_service(config, session)
                trip = config_from_args(args, config)
                setup.save(trip)
            print("Configuration saved:")
            _print_config(trip)

        elif args.command == "show":
            async with aiohttp.ClientSession() as session:
                trip = _setup_service(config, session).load()
            if args.json:
                print(json.dumps(SetupService.share_params(trip), indent=2, ensure_ascii=False))
            else:
                _print_config(trip)

        elif args.command == "share":
            async with aiohttp.ClientSession() as session:
                trip = _setup_service(config, session).load()
            if not trip.origin.ext_id:
                print("No configuration saved yet.", file=sys.stderr)
                exit_code = 1
            else:
                print(SetupService.share_link(args.base_url, trip))

        elif args.command == "board":
            exit_code = await watch_board(config, args.link, args.once)

    except ConfigurationValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
