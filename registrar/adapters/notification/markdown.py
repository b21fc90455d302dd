"""Markdown outbox notifier adapter.

Implements NotifierPort by appending messages to markdown files named
by date (YYYY-MM-DD.md) in an outbox directory. Useful as an audit
trail of every confirmation the engine has sent.
"""

import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path

from registrar.core.ports import NotifierPort

logger = logging.getLogger(__name__)


class MarkdownOutboxNotifierAdapter(NotifierPort):
    """Appends messages to a date-named markdown outbox file."""

    def __init__(self, outbox_dir: str):
        """Initialize markdown outbox adapter.

        Args:
            outbox_dir: Directory where daily outbox files are written.

        Raises:
            ValueError: If outbox_dir is a filesystem root.
            OSError: If the directory cannot be created.
        """
        self.outbox_dir = Path(outbox_dir).resolve()

        if self.outbox_dir.parent == self.outbox_dir:
            raise ValueError(f"outbox_dir cannot be a filesystem root: {outbox_dir}")

        try:
            self.outbox_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(f"Failed to create outbox directory {outbox_dir}: {e}") from e
        self._lock = asyncio.Lock()

    def _outbox_path(self, now: datetime) -> Path:
        return self.outbox_dir / f"{now.strftime('%Y-%m-%d')}.md"

    async def send(self, address: str, subject: str, body: str) -> None:
        """Append a message entry to today's outbox file."""
        now = datetime.now(UTC)
        entry = self._format_entry(address, subject, body, now)
        path = self._outbox_path(now)

        async with self._lock:
            await asyncio.to_thread(self._append, path, entry)

        logger.debug(f"Appended message for {address} to {path}")

    @staticmethod
    def _append(path: Path, entry: str) -> None:
        with path.open("a", encoding="utf-8") as f:
            f.write(entry)

    @staticmethod
    def _format_entry(address: str, subject: str, body: str, sent_at: datetime) -> str:
        """Format one outbox entry as markdown."""
        lines = [
            f"## {subject}",
            "",
            f"- **To:** {address}",
            f"- **Sent:** {sent_at.isoformat()}",
            "",
            body,
            "",
            "---",
            "",
        ]
        return "\n".join(lines)
