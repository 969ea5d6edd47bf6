"""Dashboard composition domain service."""

from dataclasses import dataclass
from decimal import Decimal

from budgetdash.domain.amortization import (
    DEFAULT_HORIZON_MONTHS,
    DebtProjection,
    Months,
    PayoffSchedule,
    PolicyComparison,
    compare_policies,
    project_debt,
    simulate_payoff,
)
from budgetdash.domain.entities import PayoffPolicy, Scenario
from budgetdash.domain.goals import (
    EmergencyFundStatus,
    GoalProjection,
    emergency_fund_status,
    project_goal,
)
from budgetdash.domain.metrics import (
    DEFAULT_EMERGENCY_FUND_MONTHS,
    BudgetAllocation,
    ExpenseSplit,
    expenses_by_category,
    expenses_by_type,
    net_surplus,
    savings_rate,
    scenario_allocation,
    total_debt_balance,
    total_debt_payments,
    total_expenses,
    total_goal_contributions,
    total_income,
)


@dataclass(frozen=True)
class DashboardReport:
    """Every figure the dashboard shows for one scenario."""

    scenario_name: str
    policy: PayoffPolicy
    total_income: Decimal
    total_expenses: Decimal
    expense_split: ExpenseSplit
    expenses_by_category: dict[str, Decimal]
    total_debt_payments: Decimal
    total_debt_balance: Decimal
    total_goal_contributions: Decimal
    net_surplus: Decimal
    savings_rate: Decimal
    months_to_debt_free: Months
    total_interest: Decimal
    payoff_schedule: PayoffSchedule
    emergency_fund: EmergencyFundStatus
    allocation: BudgetAllocation
    debt_projections: tuple[DebtProjection, ...]
    goal_projections: tuple[GoalProjection, ...]


@dataclass(frozen=True)
class ScenarioComparison:
    """Plan scenario measured against the current one (plan minus current)."""

    current: DashboardReport
    plan: DashboardReport

    @property
    def income_change(self) -> Decimal:
        return self.plan.total_income - self.current.total_income

    @property
    def expense_change(self) -> Decimal:
        return self.plan.total_expenses - self.current.total_expenses

    @property
    def surplus_change(self) -> Decimal:
        return self.plan.net_surplus - self.current.net_surplus

    @property
    def savings_rate_change(self) -> Decimal:
        return self.plan.savings_rate - self.current.savings_rate

    @property
    def months_to_debt_free_change(self) -> Months:
        current_months = self.current.months_to_debt_free
        plan_months = self.plan.months_to_debt_free
        if current_months == plan_months:
            return 0
        return plan_months - current_months

    @property
    def interest_change(self) -> Decimal:
        return self.plan.total_interest - self.current.total_interest


class DashboardService:
    """Service for building dashboard reports from scenario snapshots."""

    def __init__(
        self,
        policy: PayoffPolicy = PayoffPolicy.INDEPENDENT,
        horizon: int = DEFAULT_HORIZON_MONTHS,
        emergency_months: int = DEFAULT_EMERGENCY_FUND_MONTHS,
    ):
        """Initialize dashboard service.

        Args:
            policy: Payoff policy used for the debt projections
            horizon: Simulation horizon in months
            emergency_months: Months of expenses the emergency fund should cover
        """
        self.policy = PayoffPolicy(policy)
        self.horizon = horizon
        self.emergency_months = emergency_months

    def build_report(self, scenario: Scenario) -> DashboardReport:
        """Compute every dashboard metric for a scenario.

        Args:
            scenario: Scenario snapshot

        Returns:
            DashboardReport for the scenario
        """
        income = total_income(scenario.income)
        expenses = total_expenses(scenario.expenses)
        debt_payments = total_debt_payments(scenario.debts)
        goal_contributions = total_goal_contributions(scenario.goals)
        schedule = simulate_payoff(scenario.debts, self.horizon, self.policy)

        return DashboardReport(
            scenario_name=scenario.name,
            policy=self.policy,
            total_income=income,
            total_expenses=expenses,
            expense_split=expenses_by_type(scenario.expenses),
            expenses_by_category=expenses_by_category(scenario.expenses),
            total_debt_payments=debt_payments,
            total_debt_balance=total_debt_balance(scenario.debts),
            total_goal_contributions=goal_contributions,
            net_surplus=net_surplus(income, expenses, debt_payments, goal_contributions),
            savings_rate=savings_rate(income, expenses, debt_payments),
            months_to_debt_free=schedule.months_to_debt_free,
            total_interest=schedule.total_interest,
            payoff_schedule=schedule,
            emergency_fund=emergency_fund_status(scenario, self.emergency_months),
            allocation=scenario_allocation(scenario),
            debt_projections=tuple(project_debt(debt) for debt in scenario.sorted_debts()),
            goal_projections=tuple(project_goal(goal) for goal in scenario.sorted_goals()),
        )

    def compare_scenarios(self, current: Scenario, plan: Scenario) -> ScenarioComparison:
        """Build reports for both scenarios for side-by-side display."""
        return ScenarioComparison(
            current=self.build_report(current), plan=self.build_report(plan)
        )

    def compare_policies(self, scenario: Scenario) -> PolicyComparison:
        """Run independent and cascade payoff over the scenario's debts."""
        return compare_policies(scenario.debts, self.horizon)
