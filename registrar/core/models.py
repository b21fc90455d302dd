"""Domain models for the registrar enrollment engine.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

SUSPENDED_STATUS = "SUSPENDED"


class AcademicStatus(Enum):
    """Common academic standing values.

    Institutions may define others; a student's status is stored as a
    plain string so unknown values round-trip unchanged.
    """

    ACTIVE = "ACTIVE"
    SUSPENDED = SUSPENDED_STATUS
    ON_LEAVE = "ON_LEAVE"
    GRADUATED = "GRADUATED"


class EnrollmentStatus(Enum):
    """Status carried by an enrollment record."""

    APPROVED = "APPROVED"


@dataclass(frozen=True)
class Student:
    """Read-only snapshot of a student record."""

    student_id: str
    name: str
    email: str
    major: str
    semester: int
    gpa: float
    academic_status: str

    def __post_init__(self) -> None:
        """Validate student invariants on creation."""
        if not self.student_id or not self.student_id.strip():
            raise ValueError("student_id must be a non-empty string")

    @property
    def is_suspended(self) -> bool:
        """True when the academic status is SUSPENDED, ignoring case."""
        return (self.academic_status or "").upper() == SUSPENDED_STATUS


@dataclass
class Course:
    """A course offering with seat accounting.

    Mutable so the engine can adjust ``enrolled_count`` on its working
    copy before handing it back to the catalog for persistence.

    Invariant: ``0 <= enrolled_count <= capacity``.
    """

    code: str
    name: str
    credits: int
    capacity: int
    enrolled_count: int
    instructor: str

    def __post_init__(self) -> None:
        """Validate seat invariants on creation or deserialization."""
        if not self.code or not self.code.strip():
            raise ValueError("code must be a non-empty string")
        if self.credits < 0:
            raise ValueError(f"credits must be non-negative, got {self.credits}")
        if self.capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {self.capacity}")
        if not 0 <= self.enrolled_count <= self.capacity:
            raise ValueError(
                f"enrolled_count ({self.enrolled_count}) must be between "
                f"0 and capacity ({self.capacity})"
            )

    @property
    def is_full(self) -> bool:
        """True when no seats remain."""
        return self.enrolled_count >= self.capacity

    @property
    def available_seats(self) -> int:
        return max(self.capacity - self.enrolled_count, 0)

    def add_enrollment(self) -> None:
        """Take one seat."""
        if self.is_full:
            raise ValueError(f"Course {self.code} has no available seats")
        self.enrolled_count += 1

    def remove_enrollment(self) -> None:
        """Release one seat, clamping at zero."""
        if self.enrolled_count > 0:
            self.enrolled_count -= 1
        else:
            self.enrolled_count = 0


@dataclass(frozen=True)
class Enrollment:
    """Record of a successful enrollment, owned by the caller."""

    enrollment_id: str
    student_id: str
    course_code: str
    enrolled_at: datetime
    status: EnrollmentStatus = EnrollmentStatus.APPROVED


@dataclass(frozen=True)
class CreditCheck:
    """Outcome of evaluating a requested credit load against policy."""

    student_id: str
    gpa: float
    requested_credits: int
    max_credits: int

    @property
    def within_limit(self) -> bool:
        # Inclusive: exactly at the limit is allowed
        return self.requested_credits <= self.max_credits
