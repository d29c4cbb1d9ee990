"""Console display adapters."""

from rejse_departures.adapters.console.console_board_display import ConsoleBoardDisplay

__all__ = ["ConsoleBoardDisplay"]
