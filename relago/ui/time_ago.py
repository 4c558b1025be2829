from __future__ import annotations

from datetime import datetime

from textual.widgets import Static

from ..utils.time import Instant, format_time_ago, to_utc


class TimeAgoLabel(Static):
    """Label that keeps a "time ago" string current while mounted."""

    def __init__(
        self,
        occurred: Instant | None,
        prefix: str = "",
        refresh_interval: float = 1.0,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the label.

        Args:
            occurred: Instant to describe, or None when it has not happened yet.
            prefix: Text placed before the relative time (e.g., "Last refresh: ").
            refresh_interval: Seconds between re-renders once mounted.
            id: Optional widget id.
            classes: Optional space-separated CSS classes.
        """
        super().__init__("", id=id, classes=classes)
        self.occurred = _normalize(occurred)
        self.prefix = prefix
        self.refresh_interval = refresh_interval
        self.current_text = ""

    def time_ago_text(self) -> str:
        if self.occurred is None:
            return f"{self.prefix}never"
        return f"{self.prefix}{format_time_ago(self.occurred)}"

    def on_mount(self) -> None:  # type: ignore[override]
        self.refresh_text()
        self.set_interval(self.refresh_interval, self.refresh_text)

    def refresh_text(self) -> None:
        """Recompute the relative time against the current clock and display it."""
        self.current_text = self.time_ago_text()
        self.update(self.current_text)

    def set_occurred(self, occurred: Instant | None) -> None:
        """Point the label at a new instant and re-render immediately.

        Raises:
            InvalidTimestampError: If `occurred` cannot be normalized to UTC;
                the current instant is left unchanged.
        """
        self.occurred = _normalize(occurred)
        self.refresh_text()


def _normalize(occurred: Instant | None) -> datetime | None:
    return None if occurred is None else to_utc(occurred)
