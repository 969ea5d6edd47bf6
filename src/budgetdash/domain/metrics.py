"""Metric calculators over a scenario's collections.

Stateless aggregation helpers. Each function takes plain entries (or the
totals computed from them) and returns a new value; calling one twice on the
same input always yields the same result.
"""

from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from budgetdash.domain.amortization import months_to_debt_free
from budgetdash.domain.entities import (
    DebtEntry,
    ExpenseEntry,
    GoalEntry,
    IncomeEntry,
    Scenario,
)

DEFAULT_EXPENSE_CATEGORY = "other"
DEFAULT_EMERGENCY_FUND_MONTHS = 3

NEEDS_TARGET_PERCENT = Decimal("50")
WANTS_TARGET_PERCENT = Decimal("30")
SAVINGS_TARGET_PERCENT = Decimal("20")
# Head room above a target (or short fall below it) that still counts as "warning".
ALLOCATION_WARNING_MARGIN = Decimal("10")

STATUS_GOOD = "good"
STATUS_WARNING = "warning"
STATUS_OVER = "over"
STATUS_UNDER = "under"

ZERO = Decimal("0")


@dataclass(frozen=True)
class ExpenseSplit:
    """Expenses partitioned by the fixed flag."""

    fixed: Decimal
    variable: Decimal


@dataclass(frozen=True)
class AllocationBucket:
    """One 50/30/20 bucket: share of income and its status tier."""

    percent: Decimal
    status: str


@dataclass(frozen=True)
class BudgetAllocation:
    """Needs / wants / savings split of monthly income."""

    needs: AllocationBucket
    wants: AllocationBucket
    savings: AllocationBucket
    unallocated_percent: Decimal


def total_income(income: Iterable[IncomeEntry]) -> Decimal:
    return sum((entry.amount for entry in income), ZERO)


def total_expenses(expenses: Iterable[ExpenseEntry]) -> Decimal:
    return sum((entry.amount for entry in expenses), ZERO)


def expenses_by_type(expenses: Iterable[ExpenseEntry]) -> ExpenseSplit:
    """Sum fixed and variable expenses separately."""
    fixed = ZERO
    variable = ZERO
    for entry in expenses:
        if entry.is_fixed:
            fixed += entry.amount
        else:
            variable += entry.amount
    return ExpenseSplit(fixed=fixed, variable=variable)


def expenses_by_category(expenses: Iterable[ExpenseEntry]) -> dict[str, Decimal]:
    """Sum expenses per category; entries without one count as 'other'."""
    by_category: dict[str, Decimal] = defaultdict(Decimal)
    for entry in expenses:
        by_category[entry.category or DEFAULT_EXPENSE_CATEGORY] += entry.amount
    return dict(by_category)


def total_debt_payments(debts: Iterable[DebtEntry]) -> Decimal:
    """Sum of minimum plus extra payments."""
    return sum((debt.minimum_payment + debt.extra_payment for debt in debts), ZERO)


def total_debt_minimums(debts: Iterable[DebtEntry]) -> Decimal:
    return sum((debt.minimum_payment for debt in debts), ZERO)


def total_debt_extras(debts: Iterable[DebtEntry]) -> Decimal:
    return sum((debt.extra_payment for debt in debts), ZERO)


def total_debt_balance(debts: Iterable[DebtEntry]) -> Decimal:
    return sum((debt.balance for debt in debts), ZERO)


def total_goal_contributions(goals: Iterable[GoalEntry]) -> Decimal:
    return sum((goal.monthly_contribution for goal in goals), ZERO)


def net_surplus(
    income: Decimal, expenses: Decimal, debt_payments: Decimal, goal_contributions: Decimal
) -> Decimal:
    """Money left each month; negative means a deficit."""
    return income - expenses - debt_payments - goal_contributions


def savings_rate(income: Decimal, expenses: Decimal, debt_payments: Decimal) -> Decimal:
    """Percentage of income left after expenses and debt payments.

    Floored at 0 and not capped. Zero or negative income yields 0.
    """
    if income <= 0:
        return ZERO
    savings = income - expenses - debt_payments
    return max(ZERO, (savings / income) * 100)


def emergency_fund_target(
    monthly_expenses: Decimal, months: int = DEFAULT_EMERGENCY_FUND_MONTHS
) -> Decimal:
    return monthly_expenses * months


def _ceiling_status(percent: Decimal, target: Decimal) -> str:
    if percent <= target:
        return STATUS_GOOD
    if percent <= target + ALLOCATION_WARNING_MARGIN:
        return STATUS_WARNING
    return STATUS_OVER


def _floor_status(percent: Decimal, target: Decimal) -> str:
    if percent >= target:
        return STATUS_GOOD
    if percent >= target - ALLOCATION_WARNING_MARGIN:
        return STATUS_WARNING
    return STATUS_UNDER


def budget_allocation(
    fixed_expenses: Decimal,
    variable_expenses: Decimal,
    debt_minimums: Decimal,
    debt_extras: Decimal,
    goal_contributions: Decimal,
    income: Decimal,
) -> BudgetAllocation:
    """Classify spending against the 50/30/20 rule.

    Needs are fixed expenses plus debt minimums, wants are variable expenses,
    savings are goal contributions plus extra debt payments. Whatever is left
    of income is reported as unallocated (negative when overspent).
    """
    if income <= 0:
        needs_percent = wants_percent = savings_percent = unallocated = ZERO
    else:
        needs_percent = (fixed_expenses + debt_minimums) / income * 100
        wants_percent = variable_expenses / income * 100
        savings_percent = (goal_contributions + debt_extras) / income * 100
        unallocated = 100 - needs_percent - wants_percent - savings_percent

    return BudgetAllocation(
        needs=AllocationBucket(
            needs_percent, _ceiling_status(needs_percent, NEEDS_TARGET_PERCENT)
        ),
        wants=AllocationBucket(
            wants_percent, _ceiling_status(wants_percent, WANTS_TARGET_PERCENT)
        ),
        savings=AllocationBucket(
            savings_percent, _floor_status(savings_percent, SAVINGS_TARGET_PERCENT)
        ),
        unallocated_percent=unallocated,
    )


def scenario_allocation(scenario: Scenario) -> BudgetAllocation:
    """Run budget_allocation on a scenario's own totals."""
    split = expenses_by_type(scenario.expenses)
    return budget_allocation(
        fixed_expenses=split.fixed,
        variable_expenses=split.variable,
        debt_minimums=total_debt_minimums(scenario.debts),
        debt_extras=total_debt_extras(scenario.debts),
        goal_contributions=total_goal_contributions(scenario.goals),
        income=total_income(scenario.income),
    )
