"""Board display port."""

from abc import ABC, abstractmethod

from rejse_departures.domain.models.board import BoardSnapshot


class BoardDisplay(ABC):
    """Port for presenting the departure board to a user."""

    @abstractmethod
    async def render(self, snapshot: BoardSnapshot) -> None:
        """Render a board snapshot."""
        ...
