"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeStudentDirectoryPort: In-memory student lookup
- FakeCourseCatalogPort: In-memory courses, prerequisite answers, captured updates
- FakeNotifierPort: Captured messages for assertion
- FakeCreditLimitPolicyPort: Canned credit limits
"""

from .catalog import FakeCourseCatalogPort
from .credit_policy import FakeCreditLimitPolicyPort
from .directory import FakeStudentDirectoryPort
from .notification import FakeNotifierPort, SentMessage

__all__ = [
    "FakeCourseCatalogPort",
    "FakeCreditLimitPolicyPort",
    "FakeNotifierPort",
    "FakeStudentDirectoryPort",
    "SentMessage",
]
