"""Enrollment error taxonomy.

Each failure kind is a direct subclass of EnrollmentError so callers can
catch the family or map a single kind to a specific response. None of
the concrete kinds subclasses another.
"""


class EnrollmentError(Exception):
    """Base class for all enrollment decision failures."""

    error_code = "ENROLLMENT_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StudentNotFoundError(EnrollmentError):
    """Raised when a student identifier has no matching record."""

    error_code = "STUDENT_NOT_FOUND"

    def __init__(self, student_id: str):
        super().__init__(f"Student not found: {student_id}")
        self.student_id = student_id


class CourseNotFoundError(EnrollmentError):
    """Raised when a course code has no matching record."""

    error_code = "COURSE_NOT_FOUND"

    def __init__(self, course_code: str):
        super().__init__(f"Course not found: {course_code}")
        self.course_code = course_code


class CourseFullError(EnrollmentError):
    """Raised when a course has reached capacity."""

    error_code = "COURSE_FULL"

    def __init__(self, course_code: str, capacity: int):
        super().__init__(f"Course is full: {course_code} (capacity {capacity})")
        self.course_code = course_code
        self.capacity = capacity


class PrerequisiteNotMetError(EnrollmentError):
    """Raised when the catalog reports unmet prerequisites."""

    error_code = "PREREQUISITE_NOT_MET"

    def __init__(self, student_id: str, course_code: str):
        super().__init__(
            f"Prerequisites not met for {course_code} by student {student_id}"
        )
        self.student_id = student_id
        self.course_code = course_code


class EnrollmentBlockedError(EnrollmentError):
    """Raised when the student's academic status forbids enrollment."""

    error_code = "ENROLLMENT_BLOCKED"

    def __init__(self, student_id: str, academic_status: str):
        super().__init__(
            f"Student {student_id} is not eligible to enroll "
            f"(status: {academic_status})"
        )
        self.student_id = student_id
        self.academic_status = academic_status


__all__ = [
    "CourseFullError",
    "CourseNotFoundError",
    "EnrollmentBlockedError",
    "EnrollmentError",
    "PrerequisiteNotMetError",
    "StudentNotFoundError",
]
