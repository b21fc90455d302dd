"""Port interfaces for the registrar enrollment engine.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - StudentDirectoryPort: Resolve student records
   - CourseCatalogPort: Resolve, check prerequisites for, and persist courses
   - NotifierPort: Deliver confirmation messages
   - CreditLimitPolicyPort: Map GPA to a maximum credit load

2. **Driving Ports** (adapters/external systems call into core)
   - EnrollmentPort: Enroll, drop, and credit-limit validation
"""

from abc import ABC, abstractmethod

from .models import Course, CreditCheck, Enrollment, Student


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class StudentDirectoryPort(ABC):
    """Port for resolving student records.

    The directory is the system of record for students. The core asks
    for a fresh snapshot on every call and never caches it.
    """

    @abstractmethod
    async def find(self, student_id: str) -> Student | None:
        """Retrieve a student by identifier.

        Args:
            student_id: Unique student identifier.

        Returns:
            Student snapshot if found, None otherwise.

        Raises:
            Exception: If the backing store is unavailable.
        """


class CourseCatalogPort(ABC):
    """Port for resolving and persisting course offerings.

    The catalog is the system of record for courses. The core mutates a
    transient working copy and hands it back through update().
    """

    @abstractmethod
    async def find(self, course_code: str) -> Course | None:
        """Retrieve a course by code.

        Args:
            course_code: Unique course code.

        Returns:
            Course if found, None otherwise.

        Raises:
            Exception: If the backing store is unavailable.
        """

    @abstractmethod
    async def is_prerequisite_satisfied(
        self, student_id: str, course_code: str
    ) -> bool:
        """Check whether a student meets a course's prerequisites.

        Args:
            student_id: Student identifier.
            course_code: Course code being requested.

        Returns:
            True if all prerequisites are satisfied.

        Raises:
            Exception: If the backing store is unavailable.
        """

    @abstractmethod
    async def update(self, course: Course) -> None:
        """Persist the full state of a course.

        Replaces every stored field; there is no partial update.

        Args:
            course: Course with updated fields (usually enrolled_count).

        Raises:
            Exception: If the course doesn't exist or the store is unavailable.
        """


class NotifierPort(ABC):
    """Port for delivering messages to students.

    Delivery is fire-and-forget from the core's point of view. Whether a
    failed delivery raises or is only logged is the adapter's contract.
    """

    @abstractmethod
    async def send(self, address: str, subject: str, body: str) -> None:
        """Deliver a message.

        Args:
            address: Recipient address (an email address).
            subject: Message subject line.
            body: Plain-text message body.

        Raises:
            Exception: If the channel is unavailable and the adapter
                chooses to surface it.
        """


class CreditLimitPolicyPort(ABC):
    """Port for the credit-limit formula."""

    @abstractmethod
    def max_credits(self, gpa: float) -> int:
        """Return the maximum credit load allowed at a grade-point average.

        Args:
            gpa: Grade-point average.

        Returns:
            Maximum number of credits.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class EnrollmentPort(ABC):
    """Port for enrollment decisions.

    Driving port: the CLI (or any transport layer) invokes these methods.

    Concurrency: implementations perform an unguarded read-modify-write
    of a course's enrolled_count. Callers must serialize enroll/drop
    calls per course code (an external lock or a single-writer queue);
    interleaving two calls for the same course can lose an update.
    """

    @abstractmethod
    async def enroll(self, student_id: str, course_code: str) -> Enrollment:
        """Enroll a student in a course.

        Returns:
            Approved Enrollment record.

        Raises:
            StudentNotFoundError: Student does not exist.
            EnrollmentBlockedError: Student is suspended.
            CourseNotFoundError: Course does not exist.
            CourseFullError: Course is at capacity.
            PrerequisiteNotMetError: Prerequisites are unmet.
        """

    @abstractmethod
    async def drop(self, student_id: str, course_code: str) -> None:
        """Drop a student from a course.

        Raises:
            StudentNotFoundError: Student does not exist.
            CourseNotFoundError: Course does not exist.
        """

    @abstractmethod
    async def validate_credit_limit(
        self, student_id: str, requested_credits: int
    ) -> bool:
        """Check a requested credit load against the student's limit.

        Returns:
            True if requested_credits is at or below the limit.

        Raises:
            StudentNotFoundError: Student does not exist.
        """

    @abstractmethod
    async def check_credit_limit(
        self, student_id: str, requested_credits: int
    ) -> CreditCheck:
        """Evaluate a requested credit load, returning the full result.

        Raises:
            StudentNotFoundError: Student does not exist.
        """
