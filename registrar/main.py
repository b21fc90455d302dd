"""Composition root for the registrar enrollment engine.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Interactive CLI loop
"""

import asyncio
import json
import logging
import sys

from registrar.adapters.cli.commands import run_command
from registrar.adapters.notification.markdown import MarkdownOutboxNotifierAdapter
from registrar.adapters.notification.stdout import StdoutNotifierAdapter
from registrar.adapters.store.sqlite import SQLiteRegistry
from registrar.config import Settings, load_settings
from registrar.core.credit_policy import GpaTierCreditPolicy
from registrar.core.enrollment_service import EnrollmentService
from registrar.core.ports import EnrollmentPort, NotifierPort


async def _run_cli_interactive(enrollment: EnrollmentPort) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for enrollment commands.

    Args:
        enrollment: EnrollmentPort implementation commands are run against.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            # Read command from stdin in a thread to avoid blocking
            command_line = await loop.run_in_executor(None, input, "registrar> ")
            command_line = command_line.strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            try:
                result = await run_command(enrollment, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({"status": "error", "message": str(e)}, indent=2))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  enroll
    Enroll a student in a course.
    Required: student_id, course_code

    Example: enroll {"student_id": "230309044", "course_code": "PPL101"}

  drop
    Drop a student from a course.
    Required: student_id, course_code

    Example: drop {"student_id": "230309044", "course_code": "PPL101"}

  check-credits
    Check a requested credit load against the student's limit.
    Required: student_id, requested_credits

    Example: check-credits {"student_id": "230309044", "requested_credits": 18}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


# Attributes every LogRecord carries; anything else came from ``extra``
_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


class JsonLogFormatter(logging.Formatter):
    """Render each record as one JSON object, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and key not in payload:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logging.basicConfig(level=level, handlers=[handler])


def build_notifier(settings: Settings) -> NotifierPort:
    """Instantiate the notifier selected by configuration.

    Raises:
        ValueError: If the backend is unknown.
    """
    if settings.notification_backend == "stdout":
        return StdoutNotifierAdapter(verbose=settings.debug)
    elif settings.notification_backend == "markdown":
        return MarkdownOutboxNotifierAdapter(outbox_dir=settings.notification_outbox_dir)
    elif settings.notification_backend == "smtp":
        # Lazy import for optional SMTP dependency
        from registrar.adapters.notification.smtp import SMTPNotifierAdapter

        return SMTPNotifierAdapter(
            host=settings.smtp_host,
            port=settings.smtp_port,
            from_email=settings.smtp_from_email,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
        )
    raise ValueError(f"Unknown notification backend: {settings.notification_backend}")


def build_service(settings: Settings) -> tuple[EnrollmentService, SQLiteRegistry]:
    """Wire adapters into the enrollment service.

    Returns:
        The service and the registry backing it (the caller owns closing it).
    """
    registry = SQLiteRegistry(db_path=settings.database_path)
    service = EnrollmentService(
        students=registry.students,
        courses=registry.courses,
        notifier=build_notifier(settings),
        credit_policy=GpaTierCreditPolicy(),
    )
    return service, registry


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the interactive CLI.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and core services
    4. Run the CLI loop
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading registrar enrollment engine...")

    service, registry = build_service(settings)
    logger.info(f"Registry initialized: {settings.database_path}")
    logger.info(f"Notifier: {settings.notification_backend}")

    try:
        await _run_cli_interactive(service)
    finally:
        await registry.close_pool()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
