"""Fake CreditLimitPolicyPort implementation for testing."""

from registrar.core.ports import CreditLimitPolicyPort


class FakeCreditLimitPolicyPort(CreditLimitPolicyPort):
    """Returns canned credit limits.

    Limits can be set per GPA; anything else gets the default.
    """

    def __init__(self, default_max_credits: int = 24):
        self.default_max_credits = default_max_credits
        self.limits_by_gpa: dict[float, int] = {}
        self.max_credits_calls: list[float] = []

    def max_credits(self, gpa: float) -> int:
        self.max_credits_calls.append(gpa)
        return self.limits_by_gpa.get(gpa, self.default_max_credits)

    def set_limit(self, gpa: float, max_credits: int) -> None:
        """Return max_credits whenever asked about exactly this GPA."""
        self.limits_by_gpa[gpa] = max_credits
