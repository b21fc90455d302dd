"""Stdout notifier adapter.

Implements NotifierPort by printing messages to terminal with
human-readable formatting.
"""

import asyncio
import logging

from registrar.core.ports import NotifierPort

logger = logging.getLogger(__name__)


class StdoutNotifierAdapter(NotifierPort):
    """Prints messages to stdout with human-readable formatting."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout notifier adapter.

        Args:
            verbose: If True, log each delivery as well.
        """
        self.verbose = verbose

    async def send(self, address: str, subject: str, body: str) -> None:
        """Print a message block to stdout."""
        await asyncio.to_thread(print, self._format_message(address, subject, body))

        if self.verbose:
            logger.info(f"Printed message to {address}", extra={"subject": subject})

    @staticmethod
    def _format_message(address: str, subject: str, body: str) -> str:
        """Format a message block."""
        lines = [
            "=" * 80,
            f"TO: {address}",
            f"SUBJECT: {subject}",
            "-" * 80,
            body,
            "=" * 80,
        ]
        return "\n".join(lines)
