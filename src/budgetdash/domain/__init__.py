"""Domain layer for budgetdash application."""

from budgetdash.domain.dashboard import DashboardService
from budgetdash.domain.entities import (
    DebtEntry,
    ExpenseEntry,
    GoalEntry,
    IncomeEntry,
    PayoffPolicy,
    Scenario,
    ScenarioKey,
)

__all__ = [
    "DashboardService",
    "DebtEntry",
    "ExpenseEntry",
    "GoalEntry",
    "IncomeEntry",
    "PayoffPolicy",
    "Scenario",
    "ScenarioKey",
]
