"""Unit tests for the GPA tier credit policy."""

import pytest

from registrar.core.credit_policy import DEFAULT_CREDIT_TIERS, GpaTierCreditPolicy


@pytest.fixture
def policy() -> GpaTierCreditPolicy:
    return GpaTierCreditPolicy()


@pytest.mark.parametrize(
    "gpa,expected",
    [
        (4.0, 24),
        (3.5, 24),
        (3.0, 24),
        (2.99, 21),
        (2.5, 21),
        (2.49, 18),
        (2.0, 18),
        (1.99, 15),
        (0.0, 15),
    ],
)
def test_default_tiers(policy: GpaTierCreditPolicy, gpa: float, expected: int) -> None:
    assert policy.max_credits(gpa) == expected


@pytest.mark.parametrize("gpa", [-0.5, 4.5])
def test_gpa_out_of_range(policy: GpaTierCreditPolicy, gpa: float) -> None:
    with pytest.raises(ValueError, match="gpa"):
        policy.max_credits(gpa)


def test_custom_tiers_in_any_order() -> None:
    policy = GpaTierCreditPolicy({2.0: 20, 3.5: 26, 1.0: 12})

    assert policy.max_credits(3.9) == 26
    assert policy.max_credits(2.7) == 20
    assert policy.max_credits(1.0) == 12


def test_below_every_threshold_gets_lowest_tier() -> None:
    policy = GpaTierCreditPolicy({2.0: 20, 3.0: 24})

    assert policy.max_credits(1.5) == 20


def test_empty_tiers_rejected() -> None:
    with pytest.raises(ValueError, match="empty"):
        GpaTierCreditPolicy({})


def test_negative_credits_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        GpaTierCreditPolicy({3.0: -1})


def test_default_table_not_mutated() -> None:
    GpaTierCreditPolicy({4.0: 30})

    assert dict(DEFAULT_CREDIT_TIERS) == {3.00: 24, 2.50: 21, 2.00: 18, 0.00: 15}
