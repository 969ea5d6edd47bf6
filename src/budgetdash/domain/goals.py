"""Savings goal projections."""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from budgetdash.domain.amortization import Months
from budgetdash.domain.entities import GoalEntry, Scenario
from budgetdash.domain.metrics import (
    DEFAULT_EMERGENCY_FUND_MONTHS,
    emergency_fund_target,
    total_expenses,
)

EMERGENCY_GOAL_TYPE = "emergency"


@dataclass(frozen=True)
class GoalProjection:
    """Progress and time to target for one goal."""

    goal_id: str
    name: str
    progress: Decimal
    remaining: Decimal
    months_to_goal: Months


@dataclass(frozen=True)
class EmergencyFundStatus:
    """Emergency goal measured against a multiple of monthly expenses."""

    target: Decimal
    months_of_expenses: int
    goal_id: Optional[str]
    current_amount: Decimal
    progress: Decimal
    months_to_target: Months


def goal_progress(current_amount: Decimal, target_amount: Decimal) -> Decimal:
    """Percent of target reached, capped at 100."""
    if target_amount <= 0:
        return Decimal("0")
    return min(Decimal("100"), (current_amount / target_amount) * 100)


def months_to_goal(
    target_amount: Decimal, current_amount: Decimal, monthly_contribution: Decimal
) -> Months:
    """Months of contributions needed to reach a target.

    A goal already reached reports 0; without contributions it never finishes.
    """
    remaining = target_amount - current_amount
    if remaining <= 0:
        return 0
    if monthly_contribution <= 0:
        return math.inf
    return math.ceil(remaining / monthly_contribution)


def months_to_emergency_fund(
    current_savings: Decimal, target_amount: Decimal, monthly_contribution: Decimal
) -> Months:
    return months_to_goal(target_amount, current_savings, monthly_contribution)


def project_goal(goal: GoalEntry) -> GoalProjection:
    return GoalProjection(
        goal_id=goal.id,
        name=goal.name,
        progress=goal_progress(goal.current_amount, goal.target_amount),
        remaining=max(Decimal("0"), goal.target_amount - goal.current_amount),
        months_to_goal=months_to_goal(
            goal.target_amount, goal.current_amount, goal.monthly_contribution
        ),
    )


def find_emergency_goal(scenario: Scenario) -> Optional[GoalEntry]:
    """Return the first goal of the emergency type, if any."""
    for goal in scenario.sorted_goals():
        if goal.type == EMERGENCY_GOAL_TYPE:
            return goal
    return None


def emergency_fund_status(
    scenario: Scenario, months: int = DEFAULT_EMERGENCY_FUND_MONTHS
) -> EmergencyFundStatus:
    """Measure the emergency goal against months of the scenario's expenses."""
    target = emergency_fund_target(total_expenses(scenario.expenses), months)
    goal = find_emergency_goal(scenario)
    if goal is None:
        return EmergencyFundStatus(
            target=target,
            months_of_expenses=months,
            goal_id=None,
            current_amount=Decimal("0"),
            progress=Decimal("0"),
            months_to_target=math.inf,
        )

    return EmergencyFundStatus(
        target=target,
        months_of_expenses=months,
        goal_id=goal.id,
        current_amount=goal.current_amount,
        progress=goal_progress(goal.current_amount, target),
        months_to_target=months_to_emergency_fund(
            goal.current_amount, target, goal.monthly_contribution
        ),
    )
