"""Registry adapters for student and course persistence.

Implementations:
- SQLite (zero-config, single-file)
"""
