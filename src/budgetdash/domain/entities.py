"""Domain model entities for budgetdash.

These are pure value records describing one budgeting scenario. They carry no
behavior beyond a few derived properties; every calculator reads them and none
of them is ever mutated in place.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional


class PayoffPolicy(str, Enum):
    """How debt payments are allocated month to month."""

    INDEPENDENT = "independent"
    CASCADE = "cascade"


class ScenarioKey(str, Enum):
    """Keys of the two scenarios kept per profile."""

    CURRENT = "current"
    PLAN = "plan"


@dataclass(frozen=True)
class IncomeEntry:
    """Monthly income source."""

    id: str
    name: str
    type: str
    amount: Decimal


@dataclass(frozen=True)
class ExpenseEntry:
    """Monthly expense.

    Fixed expenses count as needs in the 50/30/20 split, the rest as wants.
    """

    id: str
    name: str
    category: Optional[str]
    amount: Decimal
    is_fixed: bool = False


@dataclass(frozen=True)
class DebtEntry:
    """Debt with an annual percentage rate and monthly payments."""

    id: str
    name: str
    type: str
    balance: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal
    extra_payment: Decimal = Decimal("0")
    order: int = 0

    @property
    def total_payment(self) -> Decimal:
        return self.minimum_payment + self.extra_payment

    @property
    def monthly_rate(self) -> Decimal:
        return self.interest_rate / 100 / 12


@dataclass(frozen=True)
class GoalEntry:
    """Savings goal funded by a monthly contribution."""

    id: str
    name: str
    type: str
    target_amount: Decimal
    current_amount: Decimal
    monthly_contribution: Decimal
    order: int = 0


@dataclass(frozen=True)
class Scenario:
    """A complete set of income, expense, debt and goal records."""

    name: str
    income: tuple[IncomeEntry, ...] = field(default_factory=tuple)
    expenses: tuple[ExpenseEntry, ...] = field(default_factory=tuple)
    debts: tuple[DebtEntry, ...] = field(default_factory=tuple)
    goals: tuple[GoalEntry, ...] = field(default_factory=tuple)

    def sorted_debts(self) -> list[DebtEntry]:
        """Return debts in priority order."""
        return sorted(self.debts, key=lambda debt: debt.order)

    def sorted_goals(self) -> list[GoalEntry]:
        """Return goals in display order."""
        return sorted(self.goals, key=lambda goal: goal.order)
