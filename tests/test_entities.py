"""Tests for domain entities."""

from decimal import Decimal

import pytest

from budgetdash.domain.entities import (
    DebtEntry,
    ExpenseEntry,
    GoalEntry,
    PayoffPolicy,
    Scenario,
)


class TestDebtEntry:
    """Tests for DebtEntry entity."""

    def test_total_payment(self):
        """Test that total payment adds minimum and extra."""
        debt = DebtEntry(
            id="debt-1",
            name="Card",
            type="credit_card",
            balance=Decimal("5000.00"),
            interest_rate=Decimal("19.99"),
            minimum_payment=Decimal("150.00"),
            extra_payment=Decimal("100.00"),
        )
        assert debt.total_payment == Decimal("250.00")

    def test_monthly_rate(self):
        """Test converting the annual percentage rate to a monthly fraction."""
        debt = DebtEntry("debt-1", "Card", "credit_card", Decimal("1000"), Decimal("12"), Decimal("50"))
        assert debt.monthly_rate == Decimal("0.01")

    def test_defaults(self):
        """Test extra payment and order default to zero."""
        debt = DebtEntry("debt-1", "Card", "credit_card", Decimal("1000"), Decimal("12"), Decimal("50"))
        assert debt.extra_payment == Decimal("0")
        assert debt.order == 0

    def test_debt_immutability(self):
        """Test that DebtEntry entities are immutable."""
        debt = DebtEntry("debt-1", "Card", "credit_card", Decimal("1000"), Decimal("12"), Decimal("50"))
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            debt.balance = Decimal("0")


class TestScenario:
    """Tests for Scenario entity."""

    def test_empty_scenario(self):
        """Test a scenario starts with empty collections."""
        scenario = Scenario(name="Empty")
        assert scenario.income == ()
        assert scenario.expenses == ()
        assert scenario.debts == ()
        assert scenario.goals == ()

    def test_sorted_debts_uses_order(self):
        """Test debts are returned by priority, not insertion order."""
        scenario = Scenario(
            name="Test",
            debts=(
                DebtEntry("b", "Second", "other", Decimal("100"), Decimal("0"), Decimal("10"), order=1),
                DebtEntry("a", "First", "other", Decimal("100"), Decimal("0"), Decimal("10"), order=0),
            ),
        )
        assert [debt.id for debt in scenario.sorted_debts()] == ["a", "b"]
        assert [debt.id for debt in scenario.debts] == ["b", "a"]

    def test_sorted_goals_uses_order(self):
        """Test goals are returned in display order."""
        scenario = Scenario(
            name="Test",
            goals=(
                GoalEntry("g2", "Later", "other", Decimal("100"), Decimal("0"), Decimal("10"), order=5),
                GoalEntry("g1", "Sooner", "other", Decimal("100"), Decimal("0"), Decimal("10"), order=2),
            ),
        )
        assert [goal.id for goal in scenario.sorted_goals()] == ["g1", "g2"]

    def test_scenario_equality(self):
        """Test scenarios with the same records compare equal."""
        expense = ExpenseEntry("exp-1", "Rent", "housing", Decimal("1500.00"), True)
        assert Scenario("A", expenses=(expense,)) == Scenario("A", expenses=(expense,))


def test_payoff_policy_from_string():
    """Test policies can be built from their string values."""
    assert PayoffPolicy("cascade") is PayoffPolicy.CASCADE
    assert PayoffPolicy.INDEPENDENT == "independent"
    with pytest.raises(ValueError):
        PayoffPolicy("snowball")
