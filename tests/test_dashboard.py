"""Tests for DashboardService."""

import math
from decimal import Decimal

import pytest

from budgetdash.domain.dashboard import DashboardService
from budgetdash.domain.entities import DebtEntry, PayoffPolicy, Scenario


@pytest.fixture
def dashboard_service():
    """Create a DashboardService with default settings."""
    return DashboardService()


def test_build_report(dashboard_service, current_scenario):
    """Test the report collects every dashboard figure."""
    report = dashboard_service.build_report(current_scenario)

    assert report.scenario_name == "Current Reality"
    assert report.policy is PayoffPolicy.INDEPENDENT
    assert report.total_income == Decimal("5000")
    assert report.total_expenses == Decimal("2920")
    assert report.expense_split.fixed == Decimal("2250")
    assert report.total_debt_payments == Decimal("430")
    assert report.total_debt_balance == Decimal("30000")
    assert report.total_goal_contributions == Decimal("300")
    assert report.net_surplus == Decimal("1350")
    assert report.savings_rate == Decimal("33")
    assert report.emergency_fund.target == Decimal("8760")
    assert report.allocation.needs.status == "warning"
    assert report.months_to_debt_free == report.payoff_schedule.months_to_debt_free
    assert report.total_interest == report.payoff_schedule.total_interest
    assert report.total_interest > 0
    assert [row.debt_id for row in report.debt_projections] == ["debt-1", "debt-2"]
    assert [row.goal_id for row in report.goal_projections] == ["goal-1", "goal-2"]


def test_report_for_empty_scenario(dashboard_service):
    """Test an empty scenario reports zeros and no debt."""
    report = dashboard_service.build_report(Scenario(name="Empty"))
    assert report.total_income == 0
    assert report.savings_rate == 0
    assert report.months_to_debt_free == 0
    assert report.total_interest == 0
    assert report.debt_projections == ()
    assert math.isinf(report.emergency_fund.months_to_target)


def test_policy_from_string(current_scenario):
    """Test the service takes the policy by value."""
    service = DashboardService(policy="cascade")
    report = service.build_report(current_scenario)
    assert report.policy is PayoffPolicy.CASCADE
    assert report.payoff_schedule.policy is PayoffPolicy.CASCADE


def test_cascade_report_is_never_slower(current_scenario):
    """Test switching policy only ever shortens the payoff."""
    independent = DashboardService(policy="independent").build_report(current_scenario)
    cascade = DashboardService(policy="cascade").build_report(current_scenario)
    assert cascade.months_to_debt_free <= independent.months_to_debt_free
    assert cascade.total_interest <= independent.total_interest


def test_compare_scenarios(dashboard_service, current_scenario, plan_scenario):
    """Test the plan is measured against the current scenario."""
    comparison = dashboard_service.compare_scenarios(current_scenario, plan_scenario)

    assert comparison.income_change == 0
    assert comparison.expense_change == Decimal("-140")
    assert comparison.surplus_change == Decimal("-210")
    assert comparison.savings_rate_change == pytest.approx(Decimal("0.8"))
    assert comparison.months_to_debt_free_change <= 0
    assert comparison.interest_change < 0


def test_compare_identical_scenarios(dashboard_service, current_scenario):
    """Test comparing a scenario with itself shows no change."""
    comparison = dashboard_service.compare_scenarios(current_scenario, current_scenario)
    assert comparison.expense_change == 0
    assert comparison.months_to_debt_free_change == 0
    assert comparison.interest_change == 0


def test_compare_when_neither_pays_off(dashboard_service):
    """Test two scenarios that never pay off show no change in months."""
    stuck = Scenario(
        name="Stuck",
        debts=(DebtEntry("d", "Card", "credit_card", Decimal("1000"), Decimal("24"), Decimal("15")),),
    )
    comparison = dashboard_service.compare_scenarios(stuck, stuck)
    assert comparison.months_to_debt_free_change == 0


def test_compare_policies(dashboard_service, current_scenario):
    """Test running both policies over a scenario's debts."""
    comparison = dashboard_service.compare_policies(current_scenario)
    assert comparison.months_saved >= 0
    assert comparison.interest_saved >= 0


def test_horizon_limits_projection(current_scenario):
    """Test a short horizon leaves the debts unpaid."""
    report = DashboardService(horizon=12).build_report(current_scenario)
    assert math.isinf(report.months_to_debt_free)
    assert len(report.payoff_schedule.entries) == 13
