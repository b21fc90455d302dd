"""Enrollment service: implements EnrollmentPort.

This is the decision engine. Every operation resolves its records
fresh, applies the rule checks in a fixed order, and only then mutates
and persists course state. A failing check raises before any side effect.
"""

import logging
import time
import uuid
from datetime import UTC, datetime

from .exceptions import (
    CourseFullError,
    CourseNotFoundError,
    EnrollmentBlockedError,
    EnrollmentError,
    PrerequisiteNotMetError,
    StudentNotFoundError,
)
from .models import Course, CreditCheck, Enrollment, EnrollmentStatus, Student
from .ports import (
    CourseCatalogPort,
    CreditLimitPolicyPort,
    EnrollmentPort,
    NotifierPort,
    StudentDirectoryPort,
)

logger = logging.getLogger(__name__)

ENROLLMENT_ID_PREFIX = "ENR-"
ENROLL_SUBJECT = "Enrollment Confirmation"
DROP_SUBJECT = "Course Drop Confirmation"


def generate_enrollment_id() -> str:
    """Return a new enrollment ID: prefix, epoch millis, random suffix."""
    millis = int(time.time() * 1000)
    return f"{ENROLLMENT_ID_PREFIX}{millis}-{uuid.uuid4().hex[:8]}"


class EnrollmentService(EnrollmentPort):
    """Core implementation of EnrollmentPort.

    Stateless between calls: students and courses are looked up on each
    call and the course working copy is discarded once persisted.

    Not safe for concurrent enroll/drop on the same course. Callers must
    serialize per course code.
    """

    def __init__(
        self,
        students: StudentDirectoryPort,
        courses: CourseCatalogPort,
        notifier: NotifierPort,
        credit_policy: CreditLimitPolicyPort,
    ):
        """Initialize the enrollment service.

        Args:
            students: StudentDirectoryPort implementation for student lookup.
            courses: CourseCatalogPort implementation for course lookup and persistence.
            notifier: NotifierPort implementation for confirmations.
            credit_policy: CreditLimitPolicyPort implementation for credit limits.
        """
        self.students = students
        self.courses = courses
        self.notifier = notifier
        self.credit_policy = credit_policy

    async def enroll(self, student_id: str, course_code: str) -> Enrollment:
        """Enroll a student in a course.

        Checks run in order: student exists, student not suspended,
        course exists, seat available, prerequisites met. The seat is
        then taken and persisted before the confirmation is sent.
        """
        try:
            student = await self._require_student(student_id)
            if student.is_suspended:
                raise EnrollmentBlockedError(student_id, student.academic_status)

            course = await self._require_course(course_code)
            if course.is_full:
                raise CourseFullError(course_code, course.capacity)

            if not await self.courses.is_prerequisite_satisfied(
                student_id, course_code
            ):
                raise PrerequisiteNotMetError(student_id, course_code)
        except EnrollmentError as e:
            logger.warning(
                f"Enrollment rejected: {e.message}",
                extra={
                    "student_id": student_id,
                    "course_code": course_code,
                    "error_code": e.error_code,
                },
            )
            raise

        enrollment = Enrollment(
            enrollment_id=generate_enrollment_id(),
            student_id=student_id,
            course_code=course_code,
            enrolled_at=datetime.now(UTC),
            status=EnrollmentStatus.APPROVED,
        )

        course.add_enrollment()
        await self.courses.update(course)

        logger.info(
            f"Student {student_id} enrolled in {course_code}",
            extra={
                "student_id": student_id,
                "course_code": course_code,
                "enrollment_id": enrollment.enrollment_id,
                "enrolled_count": course.enrolled_count,
            },
        )

        # Sent after persistence; a delivery failure does not undo the seat
        await self.notifier.send(
            student.email,
            ENROLL_SUBJECT,
            f"You have been enrolled in: {course.name}",
        )

        return enrollment

    async def drop(self, student_id: str, course_code: str) -> None:
        """Drop a student from a course.

        The seat count is decremented but never below zero. The course is
        persisted and the confirmation sent even when the count was
        already zero.
        """
        try:
            student = await self._require_student(student_id)
            course = await self._require_course(course_code)
        except EnrollmentError as e:
            logger.warning(
                f"Drop rejected: {e.message}",
                extra={
                    "student_id": student_id,
                    "course_code": course_code,
                    "error_code": e.error_code,
                },
            )
            raise

        previous = course.enrolled_count
        course.remove_enrollment()
        await self.courses.update(course)

        if previous == 0:
            logger.warning(
                f"Drop on {course_code} with no enrolled students; count left at 0",
                extra={"student_id": student_id, "course_code": course_code},
            )
        logger.info(
            f"Student {student_id} dropped {course_code}",
            extra={
                "student_id": student_id,
                "course_code": course_code,
                "enrolled_count": course.enrolled_count,
            },
        )

        await self.notifier.send(
            student.email,
            DROP_SUBJECT,
            f"You have dropped: {course.name}",
        )

    async def validate_credit_limit(
        self, student_id: str, requested_credits: int
    ) -> bool:
        """Return True if requested_credits is within the student's limit."""
        check = await self.check_credit_limit(student_id, requested_credits)
        return check.within_limit

    async def check_credit_limit(
        self, student_id: str, requested_credits: int
    ) -> CreditCheck:
        """Evaluate a requested credit load against the policy.

        Args:
            student_id: Student identifier.
            requested_credits: Total credits the student wants to take.

        Returns:
            CreditCheck with the policy limit and verdict.

        Raises:
            StudentNotFoundError: If the student doesn't exist.
        """
        student = await self._require_student(student_id)
        max_credits = self.credit_policy.max_credits(student.gpa)

        check = CreditCheck(
            student_id=student_id,
            gpa=student.gpa,
            requested_credits=requested_credits,
            max_credits=max_credits,
        )
        logger.debug(
            f"Credit check for {student_id}: {requested_credits}/{max_credits}",
            extra={
                "student_id": student_id,
                "requested_credits": requested_credits,
                "max_credits": max_credits,
            },
        )
        return check

    async def _require_student(self, student_id: str) -> Student:
        student = await self.students.find(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    async def _require_course(self, course_code: str) -> Course:
        course = await self.courses.find(course_code)
        if course is None:
            raise CourseNotFoundError(course_code)
        return course
