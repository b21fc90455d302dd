"""Core domain logic for the registrar enrollment engine.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .exceptions import (
    CourseFullError,
    CourseNotFoundError,
    EnrollmentBlockedError,
    EnrollmentError,
    PrerequisiteNotMetError,
    StudentNotFoundError,
)
from .models import (
    AcademicStatus,
    Course,
    CreditCheck,
    Enrollment,
    EnrollmentStatus,
    Student,
)

__all__ = [
    "AcademicStatus",
    "Course",
    "CourseFullError",
    "CourseNotFoundError",
    "CreditCheck",
    "Enrollment",
    "EnrollmentBlockedError",
    "EnrollmentError",
    "EnrollmentStatus",
    "PrerequisiteNotMetError",
    "Student",
    "StudentNotFoundError",
]
