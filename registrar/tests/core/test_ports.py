"""Unit tests for port interface contracts.

Tests verify that port abstract base classes are properly defined
and that implementations must satisfy the interface contract.
"""

import pytest

from registrar.core.credit_policy import GpaTierCreditPolicy
from registrar.core.enrollment_service import EnrollmentService
from registrar.core.models import Course, Student
from registrar.core.ports import (
    CourseCatalogPort,
    CreditLimitPolicyPort,
    EnrollmentPort,
    NotifierPort,
    StudentDirectoryPort,
)
from registrar.tests.fakes import (
    FakeCourseCatalogPort,
    FakeCreditLimitPolicyPort,
    FakeNotifierPort,
    FakeStudentDirectoryPort,
)


@pytest.mark.parametrize(
    "port",
    [
        StudentDirectoryPort,
        CourseCatalogPort,
        NotifierPort,
        CreditLimitPolicyPort,
        EnrollmentPort,
    ],
)
def test_ports_cannot_be_instantiated(port: type) -> None:
    with pytest.raises(TypeError):
        port()


def test_incomplete_catalog_cannot_be_instantiated() -> None:
    """A catalog missing update() is rejected at construction."""

    class ReadOnlyCatalog(CourseCatalogPort):
        async def find(self, course_code: str) -> Course | None:
            return None

        async def is_prerequisite_satisfied(
            self, student_id: str, course_code: str
        ) -> bool:
            return True

    with pytest.raises(TypeError):
        ReadOnlyCatalog()  # type: ignore[abstract]


def test_fakes_implement_ports() -> None:
    assert isinstance(FakeStudentDirectoryPort(), StudentDirectoryPort)
    assert isinstance(FakeCourseCatalogPort(), CourseCatalogPort)
    assert isinstance(FakeNotifierPort(), NotifierPort)
    assert isinstance(FakeCreditLimitPolicyPort(), CreditLimitPolicyPort)
    assert isinstance(GpaTierCreditPolicy(), CreditLimitPolicyPort)


@pytest.mark.asyncio
async def test_minimal_stub_collaborators_are_interchangeable() -> None:
    """Fixed-behavior stubs work in place of the recording fakes."""

    class OneStudent(StudentDirectoryPort):
        async def find(self, student_id: str) -> Student | None:
            return Student("S1", "Budi", "budi@example.edu", "Math", 1, 2.0, "ACTIVE")

    class OneCourse(CourseCatalogPort):
        def __init__(self) -> None:
            self.course = Course("M101", "Calculus", 4, 10, 0, "Dr. Sitompul")

        async def find(self, course_code: str) -> Course | None:
            return self.course

        async def is_prerequisite_satisfied(
            self, student_id: str, course_code: str
        ) -> bool:
            return True

        async def update(self, course: Course) -> None:
            self.course = course

    class SilentNotifier(NotifierPort):
        async def send(self, address: str, subject: str, body: str) -> None:
            return None

    class FlatPolicy(CreditLimitPolicyPort):
        def max_credits(self, gpa: float) -> int:
            return 18

    catalog = OneCourse()
    service = EnrollmentService(OneStudent(), catalog, SilentNotifier(), FlatPolicy())

    assert isinstance(service, EnrollmentPort)
    await service.enroll("S1", "M101")
    assert catalog.course.enrolled_count == 1
    assert await service.validate_credit_limit("S1", 18) is True
