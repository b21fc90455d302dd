"""Command-line interface adapters.

Provides CLI commands for the registrar engine:
- enroll: Enroll a student in a course
- drop: Drop a student from a course
- check-credits: Validate a requested credit load
"""
