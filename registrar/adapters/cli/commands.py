"""CLI command implementations for registrar.

Maps CLI commands (enroll, drop, check-credits) to EnrollmentPort
operations. Each enrollment failure kind is reported with its own
error_code so scripts can branch on it.
"""

import logging
from typing import Any

from registrar.core.exceptions import EnrollmentError
from registrar.core.models import Enrollment
from registrar.core.ports import EnrollmentPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to EnrollmentPort.

    Results are JSON-serializable dictionaries with a "status" of
    "success" or "error". Collaborator failures (database, mail server)
    are not enrollment decisions and propagate to the caller.
    """

    def __init__(self, enrollment: EnrollmentPort):
        """Initialize the CLI command handler.

        Args:
            enrollment: EnrollmentPort implementation to execute commands.
        """
        self.enrollment = enrollment

    async def enroll(
        self, student_id: str, course_code: str, verbose: bool = False
    ) -> dict[str, Any]:
        """Enroll a student via CLI.

        Args:
            student_id: Student identifier.
            course_code: Course code.
            verbose: If True, log the outcome.

        Returns:
            Dictionary with status and either the enrollment or the error.
        """
        try:
            enrollment = await self.enrollment.enroll(student_id, course_code)
        except EnrollmentError as e:
            return self._error("enroll", e, student_id=student_id, course_code=course_code)

        if verbose:
            logger.info(
                f"Enrolled {student_id} in {course_code}",
                extra={"enrollment_id": enrollment.enrollment_id, "verbose": True},
            )

        return {
            "status": "success",
            "operation": "enroll",
            "data": self._enrollment_to_dict(enrollment),
            "message": f"Student {student_id} enrolled in {course_code}",
        }

    async def drop(
        self, student_id: str, course_code: str, verbose: bool = False
    ) -> dict[str, Any]:
        """Drop a course via CLI."""
        try:
            await self.enrollment.drop(student_id, course_code)
        except EnrollmentError as e:
            return self._error("drop", e, student_id=student_id, course_code=course_code)

        if verbose:
            logger.info(f"Dropped {student_id} from {course_code}", extra={"verbose": True})

        return {
            "status": "success",
            "operation": "drop",
            "student_id": student_id,
            "course_code": course_code,
            "message": f"Student {student_id} dropped {course_code}",
        }

    async def check_credits(
        self, student_id: str, requested_credits: int
    ) -> dict[str, Any]:
        """Check a requested credit load via CLI.

        Returns:
            Dictionary with the limit, the request, and the verdict.
        """
        if isinstance(requested_credits, bool) or not isinstance(requested_credits, int):
            return {
                "status": "error",
                "operation": "check_credits",
                "error_code": "INVALID_ARGUMENT",
                "message": f"requested_credits must be an integer, got {requested_credits!r}",
            }

        try:
            check = await self.enrollment.check_credit_limit(student_id, requested_credits)
        except EnrollmentError as e:
            return self._error("check_credits", e, student_id=student_id)

        return {
            "status": "success",
            "operation": "check_credits",
            "data": {
                "student_id": check.student_id,
                "gpa": check.gpa,
                "requested_credits": check.requested_credits,
                "max_credits": check.max_credits,
                "within_limit": check.within_limit,
            },
        }

    @staticmethod
    def _enrollment_to_dict(enrollment: Enrollment) -> dict[str, Any]:
        return {
            "enrollment_id": enrollment.enrollment_id,
            "student_id": enrollment.student_id,
            "course_code": enrollment.course_code,
            "enrolled_at": enrollment.enrolled_at.isoformat(),
            "status": enrollment.status.value,
        }

    @staticmethod
    def _error(operation: str, error: EnrollmentError, **context: Any) -> dict[str, Any]:
        logger.error(f"Failed to {operation}: {error.message}")
        return {
            "status": "error",
            "operation": operation,
            "error_code": error.error_code,
            "message": error.message,
            **context,
        }


async def run_command(
    enrollment: EnrollmentPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        enrollment: EnrollmentPort implementation.
        command: Command name ('enroll', 'drop', 'check-credits').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized or a required argument is missing.
    """
    handler = CLICommandHandler(enrollment)

    required = {
        "enroll": ("student_id", "course_code"),
        "drop": ("student_id", "course_code"),
        "check-credits": ("student_id", "requested_credits"),
    }
    if command not in required:
        raise ValueError(f"Unknown command: {command}")

    missing = [name for name in required[command] if name not in args]
    if missing:
        raise ValueError(f"Missing required parameter: {', '.join(missing)}")

    if command == "enroll":
        return await handler.enroll(
            args["student_id"],
            args["course_code"],
            args.get("verbose", False),
        )

    elif command == "drop":
        return await handler.drop(
            args["student_id"],
            args["course_code"],
            args.get("verbose", False),
        )

    return await handler.check_credits(
        args["student_id"],
        args["requested_credits"],
    )
