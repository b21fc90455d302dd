"""External adapters for the registrar enrollment engine.

This package contains all external dependencies (SQLite, SMTP, terminal
I/O) and provides implementations of the core port interfaces.

Adapter Organization:

- store/: Student and course persistence (SQLite)
- notification/: Confirmation delivery (stdout, markdown outbox, SMTP)
- cli/: Command-line interface commands
"""
