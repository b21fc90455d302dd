"""Credit-limit rules keyed on grade-point average.

The default tier table follows the common semester-credit scheme:
stronger standing unlocks a heavier load.
"""

from collections.abc import Mapping

from .ports import CreditLimitPolicyPort

DEFAULT_CREDIT_TIERS: Mapping[float, int] = {
    3.00: 24,
    2.50: 21,
    2.00: 18,
    0.00: 15,
}


class GpaTierCreditPolicy(CreditLimitPolicyPort):
    """Maps a GPA to the credit cap of the highest tier it reaches.

    Pure decision logic with no side effects.
    """

    def __init__(self, tiers: Mapping[float, int] | None = None):
        """Initialize with a tier table.

        Args:
            tiers: Minimum GPA -> maximum credits. Defaults to
                DEFAULT_CREDIT_TIERS. A student below every threshold
                gets the lowest tier's credits.

        Raises:
            ValueError: If the table is empty or holds negative credits.
        """
        table = dict(DEFAULT_CREDIT_TIERS if tiers is None else tiers)
        if not table:
            raise ValueError("tiers must not be empty")
        for threshold, credits in table.items():
            if credits < 0:
                raise ValueError(
                    f"credits for tier {threshold} must be non-negative, got {credits}"
                )
        self._tiers = sorted(table.items(), reverse=True)

    def max_credits(self, gpa: float) -> int:
        """Return the credit cap for a GPA.

        Raises:
            ValueError: If gpa is outside [0.0, 4.0].
        """
        if not 0.0 <= gpa <= 4.0:
            raise ValueError(f"gpa must be between 0.0 and 4.0, got {gpa}")

        for threshold, credits in self._tiers:
            if gpa >= threshold:
                return credits
        return self._tiers[-1][1]
