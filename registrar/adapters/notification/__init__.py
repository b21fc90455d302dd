"""Notifier adapters for delivering confirmations to students.

Implementations support multiple output channels:
- Stdout (terminal pretty-print)
- Markdown outbox (append to a daily file)
- SMTP (email)
"""
