"""Dashboard and allocation commands."""

from decimal import Decimal

import click

from budgetdash.cli.document_context import (
    horizon_option,
    load_scenario_or_exit,
    policy_option,
    scenario_option,
)
from budgetdash.domain.dashboard import DashboardService
from budgetdash.domain.defaults import EXPENSE_CATEGORIES, type_label
from budgetdash.domain.metrics import AllocationBucket, scenario_allocation
from budgetdash.utils.formatting import (
    format_currency,
    format_months,
    format_percentage,
)

WIDTH = 72


def _row(label: str, value: str, indent: int = 0) -> str:
    return f"{' ' * indent}{label:<{50 - indent}} {value:>21}"


def _bucket_row(label: str, bucket: AllocationBucket) -> str:
    return _row(label, f"{format_percentage(bucket.percent)}  [{bucket.status}]", indent=4)


@click.command("dashboard")
@scenario_option
@policy_option
@horizon_option
@click.option("--cents", is_flag=True, help="Show amounts with cents")
@click.pass_context
def dashboard(ctx, scenario: str, policy: str, horizon: int, cents: bool):
    """Show the monthly snapshot of a scenario.

    Examples:
        budgetdash dashboard
        budgetdash dashboard --scenario plan --policy cascade
    """
    selected = load_scenario_or_exit(ctx, scenario)
    report = DashboardService(policy=policy, horizon=horizon).build_report(selected)

    def money(amount: Decimal) -> str:
        return format_currency(amount, show_cents=cents)

    click.echo(f"\n{report.scenario_name}")
    click.echo("=" * WIDTH)
    click.echo(_row("Monthly Income", money(report.total_income)))
    click.echo(_row("Expenses", money(report.total_expenses)))
    click.echo(_row("Fixed", money(report.expense_split.fixed), indent=4))
    click.echo(_row("Variable", money(report.expense_split.variable), indent=4))
    click.echo(_row("Debt Payments", money(report.total_debt_payments)))
    click.echo(_row("Goal Contributions", money(report.total_goal_contributions)))
    click.echo("-" * WIDTH)
    surplus_label = "Net Surplus" if report.net_surplus >= 0 else "Net Deficit"
    click.echo(_row(surplus_label, money(report.net_surplus)))
    click.echo(_row("Savings Rate", format_percentage(report.savings_rate)))
    click.echo()

    click.echo("Debt")
    click.echo("*" * WIDTH)
    click.echo(_row("Total Balance", money(report.total_debt_balance), indent=4))
    click.echo(
        _row(f"Debt-Free In ({report.policy.value})", format_months(report.months_to_debt_free), indent=4)
    )
    click.echo(_row("Interest To Pay", money(report.total_interest), indent=4))
    click.echo()

    emergency = report.emergency_fund
    click.echo("Emergency Fund")
    click.echo("*" * WIDTH)
    click.echo(
        _row(f"Target ({emergency.months_of_expenses} months of expenses)", money(emergency.target), indent=4)
    )
    click.echo(_row("Saved", money(emergency.current_amount), indent=4))
    click.echo(_row("Progress", format_percentage(emergency.progress), indent=4))
    click.echo(_row("Fully Funded In", format_months(emergency.months_to_target), indent=4))
    click.echo()

    if report.expenses_by_category:
        click.echo("Expenses By Category")
        click.echo("*" * WIDTH)
        by_amount = sorted(
            report.expenses_by_category.items(), key=lambda item: (-item[1], item[0])
        )
        for category, amount in by_amount:
            click.echo(_row(type_label(EXPENSE_CATEGORIES, category), money(amount), indent=4))
        click.echo()

    click.echo("50/30/20")
    click.echo("*" * WIDTH)
    click.echo(_bucket_row("Needs (target 50%)", report.allocation.needs))
    click.echo(_bucket_row("Wants (target 30%)", report.allocation.wants))
    click.echo(_bucket_row("Savings (target 20%)", report.allocation.savings))


@click.command("allocation")
@scenario_option
@click.pass_context
def allocation(ctx, scenario: str):
    """Show how income splits into needs, wants and savings."""
    selected = load_scenario_or_exit(ctx, scenario)
    result = scenario_allocation(selected)

    click.echo(f"\n50/30/20 Allocation: {selected.name}")
    click.echo("-" * WIDTH)
    click.echo(_bucket_row("Needs (fixed expenses + debt minimums)", result.needs))
    click.echo(_bucket_row("Wants (variable expenses)", result.wants))
    click.echo(_bucket_row("Savings (goals + extra debt payments)", result.savings))
    click.echo("-" * WIDTH)
    click.echo(_row("Unallocated", format_percentage(result.unallocated_percent), indent=4))


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(dashboard)
    cli.add_command(allocation)
