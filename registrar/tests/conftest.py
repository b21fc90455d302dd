"""Shared fixtures: an EnrollmentService wired to in-memory fakes."""

import pytest

from registrar.core.enrollment_service import EnrollmentService
from registrar.core.models import AcademicStatus, Course, Student
from registrar.tests.fakes import (
    FakeCourseCatalogPort,
    FakeCreditLimitPolicyPort,
    FakeNotifierPort,
    FakeStudentDirectoryPort,
)


@pytest.fixture
def fake_students() -> FakeStudentDirectoryPort:
    return FakeStudentDirectoryPort(
        [
            Student("S-ACTIVE", "Sari", "sari@example.edu", "Informatics", 5, 3.8, AcademicStatus.ACTIVE.value),
            Student("S-SUSP", "Budi", "budi@example.edu", "Informatics", 5, 3.2, AcademicStatus.SUSPENDED.value),
        ]
    )


@pytest.fixture
def fake_courses() -> FakeCourseCatalogPort:
    return FakeCourseCatalogPort(
        [
            Course("IF101", "Intro to Programming", 3, 30, 10, "Dr. Hartono"),
            Course("IF999", "Capstone", 6, 5, 5, "Dr. Wibowo"),
        ]
    )


@pytest.fixture
def fake_notifier() -> FakeNotifierPort:
    return FakeNotifierPort()


@pytest.fixture
def wired_service(
    fake_students: FakeStudentDirectoryPort,
    fake_courses: FakeCourseCatalogPort,
    fake_notifier: FakeNotifierPort,
) -> EnrollmentService:
    policy = FakeCreditLimitPolicyPort(default_max_credits=24)
    return EnrollmentService(fake_students, fake_courses, fake_notifier, policy)
