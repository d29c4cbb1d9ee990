"""Starlette application fronting the journey planner calls."""

import logging
from typing import Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from rejse_departures.adapters.web.rate_limit_middleware import RateLimitMiddleware
from rejse_departures.domain.models.error_details import ErrorDetails
from rejse_departures.domain.models.errors import GatewayError
from rejse_departures.domain.ports import (
    AddressLookupGateway,
    DepartureBoardGateway,
    LocationSearchGateway,
)

logger = logging.getLogger(__name__)

DEFAULT_BOARD_DURATION = 10


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _optional_int(value: str | None) -> int | None:
    try:
        return int(value) if value else None
    except ValueError:
        return None


def departure_board_params(query: Any) -> dict[str, Any]:
    """Departure board parameters from request query parameters.

    Only parameters that are present (and valid) are forwarded.
    """
    params: dict[str, Any] = {
        "duration": _optional_int(query.get("duration")) or DEFAULT_BOARD_DURATION,
    }
    for name in ("id", "direction", "date", "time"):
        value = query.get(name)
        if value:
            params[name] = value
    products = _optional_int(query.get("products"))
    if products is not None:
        params["products"] = products
    return params


class GatewayEndpoints:
    """Request handlers for the three journey planner endpoints."""

    def __init__(
        self,
        location_search: LocationSearchGateway,
        address_lookup: AddressLookupGateway,
        departure_board: DepartureBoardGateway,
    ) -> None:
        self.location_search = location_search
        self.address_lookup = address_lookup
        self.departure_board = departure_board

    async def search_locations(self, request: Request) -> Response:
        """GET /api/location-search?input=..."""
        text = request.query_params.get("input")
        if not text:
            return _error("Input is required", 400)
        try:
            stops = await self.location_search.search_locations(text)
        except GatewayError as e:
            logger.error(f"Location search failed: {ErrorDetails.from_exception(e).reason}")
            return _error("Failed to fetch location search", 500)
        return JSONResponse([stop.to_dict() for stop in stops])

    async def lookup_address(self, request: Request) -> Response:
        """GET /api/address-lookup?latitude=...&longitude=..."""
        latitude = request.query_params.get("latitude")
        longitude = request.query_params.get("longitude")
        if not latitude or not longitude:
            return _error("Latitude and longitude are required", 400)
        try:
            payload = await self.address_lookup.lookup_address(latitude, longitude)
        except GatewayError as e:
            logger.error(f"Address lookup failed: {ErrorDetails.from_exception(e).reason}")
            return _error("Failed to fetch address lookup", 500)
        return JSONResponse(payload)

    async def get_departure_board(self, request: Request) -> Response:
        """GET /api/departure-board?id=...&direction=...&duration=...&products=..."""
        params = departure_board_params(request.query_params)
        try:
            payload = await self.departure_board.get_departure_board(params)
        except GatewayError as e:
            logger.error(f"Departure board failed: {ErrorDetails.from_exception(e).reason}")
            return _error("Failed to fetch departure board", 500)
        return JSONResponse(payload)


async def healthz(_request: Request) -> Response:
    """Liveness probe."""
    return Response("ok", media_type="text/plain")


def create_app(
    location_search: LocationSearchGateway,
    address_lookup: AddressLookupGateway,
    departure_board: DepartureBoardGateway,
    rate_limit_per_minute: int = 100,
) -> Starlette:
    """Build the Starlette application.

    Args:
        location_search: Gateway for stop search.
        address_lookup: Gateway for reverse address lookup.
        departure_board: Gateway for departure boards.
        rate_limit_per_minute: Per-IP request quota for /api routes.
    """
    endpoints = GatewayEndpoints(location_search, address_lookup, departure_board)
    routes = [
        Route("/api/location-search", endpoints.search_locations, methods=["GET"]),
        Route("/api/address-lookup", endpoints.lookup_address, methods=["GET"]),
        Route("/api/departure-board", endpoints.get_departure_board, methods=["GET"]),
        Route("/healthz", healthz, methods=["GET"]),
    ]
    middleware = [
        Middleware(RateLimitMiddleware, requests_per_minute=rate_limit_per_minute),
    ]
    return Starlette(routes=routes, middleware=middleware)
