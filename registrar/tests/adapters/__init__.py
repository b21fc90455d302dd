"""Integration tests for adapter implementations.

These tests exercise adapters against real local resources (a
temporary SQLite database, temporary directories, captured stdout)
and mocked external services (SMTP).
"""
