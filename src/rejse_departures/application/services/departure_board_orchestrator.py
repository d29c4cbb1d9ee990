"""Orchestrates resolving, fetching and counting down a departure board."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from rejse_departures.application.services.countdown_projector import CountdownProjector
from rejse_departures.application.services.departure_normalizer import DepartureNormalizer
from rejse_departures.application.services.departure_ordering import order_departures
from rejse_departures.application.services.product_bitmask import product_bitmask
from rejse_departures.domain.models.board import (
    BoardPhase,
    BoardSnapshot,
    DepartureBoardQuery,
    RedirectSignal,
)
from rejse_departures.domain.models.error_details import ErrorDetails

if TYPE_CHECKING:
    from rejse_departures.application.services.configuration_resolver import (
        ConfigurationResolver,
    )
    from rejse_departures.domain.models.departure_item import DepartureItem
    from rejse_departures.domain.models.place import TransportMode
    from rejse_departures.domain.models.trip_config import TripConfig
    from rejse_departures.domain.ports import BoardDisplay, DepartureBoardGateway

logger = logging.getLogger(__name__)


class DepartureBoardOrchestrator:
    """Drives one departure board view.

    Phases run Idle -> Resolving -> Fetching -> Ready. Any failure while
    resolving or fetching ends in Redirected. While Ready, a ticker task
    re-projects the countdowns of the current items without fetching again.
    """

    def __init__(
        self,
        resolver: ConfigurationResolver,
        departure_board: DepartureBoardGateway,
        display: BoardDisplay,
        product_bits: Mapping[TransportMode, int],
        projector: CountdownProjector | None = None,
        refresh_interval_seconds: float = 10,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            resolver: Resolver for the trip configuration.
            departure_board: Gateway for the departure board.
            display: Display receiving a snapshot after every update.
            product_bits: Product bit per transport mode.
            projector: Countdown projector.
            refresh_interval_seconds: Seconds between countdown updates.
            clock: Source of the current time.
        """
        self.resolver = resolver
        self.departure_board = departure_board
        self.display = display
        self.product_bits = product_bits
        self.projector = projector or CountdownProjector()
        self.refresh_interval_seconds = refresh_interval_seconds
        self._clock = clock or (lambda: datetime.now(UTC))
        self._phase = BoardPhase.IDLE
        self._items: list[DepartureItem] = []
        self._config: TripConfig | None = None
        self._redirect: RedirectSignal | None = None
        self._ticker: asyncio.Task | None = None
        self._generation = 0

    @property
    def phase(self) -> BoardPhase:
        """Current lifecycle phase."""
        return self._phase

    @property
    def items(self) -> list[DepartureItem]:
        """Copy of the current departure items."""
        return list(self._items)

    @property
    def is_ticking(self) -> bool:
        """Whether the countdown ticker task is running."""
        return self._ticker is not None and not self._ticker.done()

    def snapshot(self) -> BoardSnapshot:
        """Current state for rendering."""
        return BoardSnapshot(
            phase=self._phase,
            items=list(self._items),
            config=self._config,
            redirect=self._redirect,
        )

    def build_query(self, config: TripConfig) -> DepartureBoardQuery:
        """Departure board query for a trip configuration."""
        return DepartureBoardQuery(
            stop_ext_id=config.origin.ext_id,
            duration_minutes=config.duration_minutes,
            products=product_bitmask(config.modes, self.product_bits),
            direction_ext_id=config.direction.ext_id or None,
        )

    def _set_phase(self, phase: BoardPhase) -> None:
        if phase != self._phase:
            logger.info(f"Departure board {self._phase.value} -> {phase.value}")
        self._phase = phase

    async def activate(self, url_params: Mapping[str, str] | None = None) -> BoardSnapshot:
        """(Re)start the view: resolve, fetch once, then start the countdown ticker.

        Args:
            url_params: Shareable-link query parameters, if any.

        Returns:
            Snapshot after the activation settled.
        """
        await self._stop_ticker()
        self._generation += 1
        generation = self._generation

        self._items = []
        self._config = None
        self._redirect = None
        self._set_phase(BoardPhase.IDLE)

        self._set_phase(BoardPhase.RESOLVING)
        try:
            resolved = await self.resolver.resolve_from_store(url_params)
        except Exception as e:
            resolved = RedirectSignal(reason=ErrorDetails.from_exception(e).reason)
        if generation != self._generation:
            return self.snapshot()
        if isinstance(resolved, RedirectSignal):
            return await self._redirect_to_setup(resolved)

        self._config = resolved
        self._set_phase(BoardPhase.FETCHING)
        query = self.build_query(resolved)
        try:
            response = await self.departure_board.get_departure_board(query.to_params())
            items = order_departures(DepartureNormalizer.normalize(response))
        except Exception as e:
            details = ErrorDetails.from_exception(e)
            logger.error(
                f"Failed to fetch departures for '{query.stop_ext_id}': "
                f"{details.reason} (status: {details.status_code})"
            )
            if generation != self._generation:
                return self.snapshot()
            return await self._redirect_to_setup(RedirectSignal(reason=details.reason))

        if generation != self._generation:
            # A newer activation owns the item list now
            return self.snapshot()

        self._items = self.projector.project(items, self._clock())
        self._set_phase(BoardPhase.READY)
        logger.info(f"Loaded {len(self._items)} departure(s) for '{query.stop_ext_id}'")
        await self._render()
        if generation != self._generation:
            return self.snapshot()
        self._ticker = asyncio.create_task(self._tick_loop(generation))
        return self.snapshot()

    async def deactivate(self) -> None:
        """Tear the view down and cancel the countdown ticker."""
        await self._stop_ticker()
        self._generation += 1
        self._items = []
        self._config = None
        self._redirect = None
        self._set_phase(BoardPhase.IDLE)

    def tick(self) -> list[DepartureItem]:
        """Re-project the countdowns of the current items once."""
        self._items = self.projector.project(self._items, self._clock())
        return list(self._items)

    async def _redirect_to_setup(self, signal: RedirectSignal) -> BoardSnapshot:
        self._items = []
        self._redirect = signal
        self._set_phase(BoardPhase.REDIRECTED)
        logger.warning(f"Redirecting to setup: {signal.reason}")
        await self._render()
        return self.snapshot()

    async def _render(self) -> None:
        try:
            await self.display.render(self.snapshot())
        except Exception as e:
            logger.error(f"Display failed to render {self._phase.value} board: {e}")

    async def _tick_loop(self, generation: int) -> None:
        """Countdown loop of one activation; never fetches."""
        try:
            while True:
                await asyncio.sleep(self.refresh_interval_seconds)
                if generation != self._generation or self._phase != BoardPhase.READY:
                    return
                self.tick()
                await self._render()
        except asyncio.CancelledError:
            logger.debug("Countdown ticker cancelled")
            raise

    async def _stop_ticker(self) -> None:
        if self._ticker and not self._ticker.done():
            self._ticker.cancel()
            try:
                await self._ticker
            except asyncio.CancelledError:
                pass
            logger.debug("Stopped countdown ticker")
        self._ticker = None
