"""Integration tests for MarkdownOutboxNotifierAdapter.

Tests verify that the adapter correctly:
- Appends entries to a date-named markdown file
- Creates the outbox directory
- Serializes concurrent writes
- Handles non-ASCII content
"""

import asyncio
import tempfile
from pathlib import Path

import pytest

from registrar.adapters.notification.markdown import MarkdownOutboxNotifierAdapter


@pytest.fixture
def temp_outbox_dir() -> Path:
    """Create a temporary directory for outbox files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "outbox"


class TestMarkdownOutboxNotifierAdapter:
    """Test suite for MarkdownOutboxNotifierAdapter."""

    def test_creates_outbox_directory(self, temp_outbox_dir: Path) -> None:
        MarkdownOutboxNotifierAdapter(str(temp_outbox_dir))

        assert temp_outbox_dir.is_dir()

    def test_rejects_filesystem_root(self) -> None:
        with pytest.raises(ValueError, match="filesystem root"):
            MarkdownOutboxNotifierAdapter("/")

    @pytest.mark.asyncio
    async def test_send_appends_entry(self, temp_outbox_dir: Path) -> None:
        adapter = MarkdownOutboxNotifierAdapter(str(temp_outbox_dir))

        await adapter.send(
            "dewi@example.edu",
            "Enrollment Confirmation",
            "You have been enrolled in: Data Structures",
        )

        files = list(temp_outbox_dir.glob("*.md"))
        assert len(files) == 1
        content = files[0].read_text(encoding="utf-8")
        assert "## Enrollment Confirmation" in content
        assert "- **To:** dewi@example.edu" in content
        assert "You have been enrolled in: Data Structures" in content

    @pytest.mark.asyncio
    async def test_concurrent_sends_are_all_written(self, temp_outbox_dir: Path) -> None:
        adapter = MarkdownOutboxNotifierAdapter(str(temp_outbox_dir))

        await asyncio.gather(
            *(adapter.send(f"s{i}@example.edu", "Subject", f"Body {i}") for i in range(10))
        )

        content = next(temp_outbox_dir.glob("*.md")).read_text(encoding="utf-8")
        assert content.count("## Subject") == 10
        for i in range(10):
            assert f"Body {i}" in content

    @pytest.mark.asyncio
    async def test_unicode_body(self, temp_outbox_dir: Path) -> None:
        adapter = MarkdownOutboxNotifierAdapter(str(temp_outbox_dir))

        await adapter.send("a@example.edu", "Konfirmasi", "Mata kuliah: Pengujian Perangkat Lunak — ✓")

        content = next(temp_outbox_dir.glob("*.md")).read_text(encoding="utf-8")
        assert "✓" in content
