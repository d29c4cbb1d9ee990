"""Tests for CLI helper functions."""

import argparse
import io
from pathlib import Path

import pytest

from rejse_departures.adapters.config import AppConfig
from rejse_departures.adapters.console import ConsoleBoardDisplay
from rejse_departures.cli import build_orchestrator, config_from_args, parse_link
from rejse_departures.domain.models import BoardPhase, Place, TransportMode


def _configure_args(**overrides: object) -> argparse.Namespace:
    values = {
        "current_location": False,
        "origin_ext_id": "8600646",
        "origin_name": "Nørreport St.",
        "direction_ext_id": None,
        "direction_name": None,
        "duration": 15,
        "bus": True,
        "train": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.mark.parametrize(
    "link",
    [
        "https://board.example/?locationExtId=8600646&duration=20",
        "/?locationExtId=8600646&duration=20",
        "?locationExtId=8600646&duration=20",
        "locationExtId=8600646&duration=20",
    ],
)
def test_parse_link_accepts_links_and_query_strings(link: str) -> None:
    """Given a link or bare query, when parsing, then its parameters are returned."""
    assert parse_link(link) == {"locationExtId": "8600646", "duration": "20"}


def test_config_from_args_builds_trip() -> None:
    """Given configure arguments, when converting, then a matching TripConfig is built."""
    trip = config_from_args(
        _configure_args(direction_ext_id="8600626", direction_name="København H"),
        AppConfig(_env_file=None),
    )

    assert trip.origin == Place(ext_id="8600646", name="Nørreport St.")
    assert trip.direction.ext_id == "8600626"
    assert trip.modes.enabled() == [TransportMode.BUS]


def test_config_from_args_current_location_uses_sentinel() -> None:
    """Given --current-location, when converting, then the origin is the sentinel id."""
    trip = config_from_args(
        _configure_args(current_location=True, origin_ext_id=None), AppConfig(_env_file=None)
    )

    assert trip.origin.ext_id == "CURRENT_LOCATION"


@pytest.mark.asyncio
async def test_build_orchestrator_without_configuration_redirects(tmp_path: Path) -> None:
    """Given an empty store, when activating the terminal board, then it redirects."""
    config = AppConfig(_env_file=None, config_store_path=str(tmp_path / "store.json"))
    stream = io.StringIO()
    display = ConsoleBoardDisplay(stream=stream, color=False, clear_screen=False)

    orchestrator = build_orchestrator(config, session=None, display=display)
    snapshot = await orchestrator.activate()

    assert snapshot.phase == BoardPhase.REDIRECTED
    assert "rejse-config configure" in stream.getvalue()
