"""Scenario comparison command."""

import math
from decimal import Decimal

import click

from budgetdash.cli.document_context import (
    horizon_option,
    load_document_or_exit,
    policy_option,
)
from budgetdash.domain.amortization import Months
from budgetdash.domain.dashboard import DashboardService
from budgetdash.domain.entities import ScenarioKey
from budgetdash.utils.formatting import (
    format_currency,
    format_months,
    format_percentage,
)


def _signed_currency(amount: Decimal) -> str:
    text = format_currency(amount)
    return f"+{text}" if amount > 0 and text != "$0" else text


def _signed_months(months: Months) -> str:
    if math.isinf(months):
        return "never" if months > 0 else "now pays off"
    if months == 0:
        return "-"
    sign = "+" if months > 0 else "-"
    return f"{sign}{format_months(abs(months))}"


@click.command("compare")
@policy_option
@horizon_option
@click.pass_context
def compare(ctx, policy: str, horizon: int):
    """Compare the plan scenario with the current one."""
    document = load_document_or_exit(ctx)
    service = DashboardService(policy=policy, horizon=horizon)
    comparison = service.compare_scenarios(
        document.scenarios[ScenarioKey.CURRENT.value],
        document.scenarios[ScenarioKey.PLAN.value],
    )
    current = comparison.current
    plan = comparison.plan

    click.echo(f"\n{'':<24} {current.scenario_name[:18]:>18} {plan.scenario_name[:18]:>18} {'Change':>16}")
    click.echo("-" * 79)
    rows = [
        ("Income", current.total_income, plan.total_income, comparison.income_change),
        ("Expenses", current.total_expenses, plan.total_expenses, comparison.expense_change),
        ("Net Surplus", current.net_surplus, plan.net_surplus, comparison.surplus_change),
        ("Interest To Pay", current.total_interest, plan.total_interest, comparison.interest_change),
    ]
    for label, before, after, change in rows:
        click.echo(
            f"{label:<24} {format_currency(before):>18} {format_currency(after):>18} "
            f"{_signed_currency(change):>16}"
        )
    click.echo(
        f"{'Savings Rate':<24} {format_percentage(current.savings_rate):>18} "
        f"{format_percentage(plan.savings_rate):>18} "
        f"{format_percentage(comparison.savings_rate_change):>16}"
    )
    click.echo(
        f"{'Debt-Free In':<24} {format_months(current.months_to_debt_free):>18} "
        f"{format_months(plan.months_to_debt_free):>18} "
        f"{_signed_months(comparison.months_to_debt_free_change):>16}"
    )


def register_commands(cli):
    """Register compare command with main CLI."""
    cli.add_command(compare)
