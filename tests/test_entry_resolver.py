"""Tests for resolving entries by name or ID."""

from decimal import Decimal

import pytest

from budgetdash.domain.entities import IncomeEntry
from budgetdash.domain.errors import DomainError, NotFoundError, ValidationError
from budgetdash.utils.entry_resolver import resolve_entry


@pytest.fixture
def income():
    return [
        IncomeEntry("inc-1", "Salary", "salary", Decimal("5000")),
        IncomeEntry("inc-2", "Side Gig", "freelance", Decimal("400")),
        IncomeEntry("inc-3", "Side Gig", "freelance", Decimal("250")),
        IncomeEntry("Salary", "Rental", "rental", Decimal("900")),
    ]


def test_resolve_by_id(income):
    """Test resolving an entry by its ID."""
    assert resolve_entry(income, "inc-2").amount == Decimal("400")


def test_id_wins_over_name(income):
    """Test an ID match is preferred to a name match."""
    assert resolve_entry(income, "Salary").id == "Salary"


def test_resolve_by_name(income):
    """Test resolving an entry by its exact name."""
    assert resolve_entry(income, " Rental ").id == "Salary"


def test_ambiguous_name(income):
    """Test a name shared by several entries is rejected."""
    with pytest.raises(ValidationError, match="use the entry ID"):
        resolve_entry(income, "Side Gig", "income")


def test_not_found(income):
    """Test a missing entry raises NotFoundError."""
    with pytest.raises(NotFoundError, match="Income 'Bonus' not found"):
        resolve_entry(income, "Bonus", "income")


def test_errors_are_value_errors(income):
    """Test domain errors stay compatible with ValueError handling."""
    with pytest.raises(ValueError):
        resolve_entry(income, "Bonus")
    assert issubclass(NotFoundError, DomainError)
