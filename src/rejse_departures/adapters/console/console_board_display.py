"""Terminal rendering of departure board snapshots."""

import sys
from datetime import datetime
from typing import TextIO

from rejse_departures.domain.models.board import BoardPhase, BoardSnapshot
from rejse_departures.domain.models.departure_item import DepartureItem, EtaSeverity
from rejse_departures.domain.ports.board_display import BoardDisplay

# ANSI colors per severity: green for now, red for departed, then escalating
_RESET = "\033[0m"
_SEVERITY_COLORS = {
    EtaSeverity.NOW: "\033[92m",
    EtaSeverity.DEPARTED: "\033[91m",
    EtaSeverity.UNDER_5: "\033[31m",
    EtaSeverity.UNDER_10: "\033[33m",
    EtaSeverity.UNDER_15: "\033[93m",
    EtaSeverity.UNDER_20: "\033[36m",
    EtaSeverity.UNDER_25: "\033[96m",
    EtaSeverity.UNDER_30: "\033[94m",
    EtaSeverity.CALM: "\033[37m",
}


class ConsoleBoardDisplay(BoardDisplay):
    """Writes each snapshot to a text stream."""

    def __init__(
        self, stream: TextIO | None = None, color: bool = True, clear_screen: bool = True
    ) -> None:
        self.stream = stream or sys.stdout
        self.color = color
        self.clear_screen = clear_screen

    def format_item(self, item: DepartureItem) -> str:
        """One board line for a departure."""
        eta = item.eta or "?"
        if self.color and item.severity is not None:
            eta = f"{_SEVERITY_COLORS[item.severity]}{eta}{_RESET}"
        platform = f"  Platform: {item.platform}" if item.platform else ""
        return (
            f"{item.line_name:>8}  {item.destination:<30} {item.scheduled_time:>8}  "
            f"{eta:>8}  From: {item.origin}{platform}"
        )

    def format_snapshot(self, snapshot: BoardSnapshot) -> str:
        """Full text of a snapshot."""
        if snapshot.phase == BoardPhase.REDIRECTED:
            reason = snapshot.redirect.reason if snapshot.redirect else "unknown"
            return (
                f"No usable configuration ({reason}).\n"
                "Run 'rejse-config configure' to set up your stop."
            )
        if snapshot.phase != BoardPhase.READY:
            return "Loading departures..."

        lines = []
        if snapshot.config is not None:
            title = snapshot.config.origin.name or snapshot.config.origin.ext_id
            if snapshot.config.direction.name:
                title = f"{title} -> {snapshot.config.direction.name}"
            lines.append(title)
        lines.append(f"Updated {datetime.now().strftime('%H:%M:%S')}")
        lines.append("")
        if snapshot.has_no_departures:
            lines.append("No upcoming departures.")
        else:
            lines.extend(self.format_item(item) for item in snapshot.items)
        return "\n".join(lines)

    async def render(self, snapshot: BoardSnapshot) -> None:
        """Write the snapshot to the stream."""
        if self.clear_screen:
            self.stream.write("\033[2J\033[H")
        self.stream.write(self.format_snapshot(snapshot) + "\n")
        self.stream.flush()
