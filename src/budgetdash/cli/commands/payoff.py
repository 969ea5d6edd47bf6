"""Debt payoff commands."""

import math

import click

from budgetdash.cli.document_context import (
    horizon_option,
    load_scenario_or_exit,
    policy_option,
    scenario_option,
)
from budgetdash.domain.amortization import compare_policies, project_debt, simulate_payoff
from budgetdash.utils.date_parser import parse_date
from budgetdash.utils.formatting import (
    format_currency,
    format_months,
    format_payoff_date,
    format_percentage,
    sample_schedule,
)


@click.command("payoff")
@scenario_option
@policy_option
@horizon_option
@click.option("--schedule", "show_schedule", is_flag=True, help="Show the month-by-month balance chart data")
@click.option("--start-date", help="Month payments start (e.g. 'next month', '2025-03'); defaults to today")
@click.pass_context
def payoff(ctx, scenario: str, policy: str, horizon: int, show_schedule: bool, start_date: str | None):
    """Show the debt payoff projection for a scenario.

    Each debt row uses the closed-form payoff of that debt alone; the totals
    come from simulating every debt together under the chosen policy.

    Examples:
        budgetdash payoff
        budgetdash payoff --policy cascade --schedule
        budgetdash payoff --scenario plan --start-date "next month"
    """
    start = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    selected = load_scenario_or_exit(ctx, scenario)
    debts = selected.sorted_debts()
    if not debts:
        click.echo("No debts found.")
        return

    click.echo(f"\nDebt Payoff: {selected.name}")
    click.echo("-" * 96)
    click.echo(
        f"{'#':>2} {'Debt':<22} {'Balance':>11} {'Rate':>7} {'Payment':>9} "
        f"{'Interest/mo':>11} {'Payoff':>17} {'Total interest':>14}"
    )
    click.echo("-" * 96)
    for debt in debts:
        row = project_debt(debt)
        click.echo(
            f"{debt.order:>2} {debt.name[:22]:<22} {format_currency(debt.balance):>11} "
            f"{format_percentage(debt.interest_rate, 2):>7} {format_currency(row.total_payment):>9} "
            f"{format_currency(row.monthly_interest):>11} {format_months(row.months_to_payoff):>17} "
            f"{format_currency(row.total_interest):>14}"
        )
    click.echo("-" * 96)

    schedule = simulate_payoff(debts, horizon=horizon, policy=policy)
    click.echo(f"Policy: {schedule.policy.value}")
    click.echo(f"  Debt-free in: {format_months(schedule.months_to_debt_free)}")
    click.echo(f"  Debt-free by: {format_payoff_date(schedule.months_to_debt_free, start)}")
    click.echo(f"  Interest to pay: {format_currency(schedule.total_interest, show_cents=True)}")
    if not schedule.is_paid_off:
        remaining = schedule.entries[-1].total_balance
        click.echo(
            f"  Balance left after {schedule.horizon} months: {format_currency(remaining, show_cents=True)}"
        )

    comparison = compare_policies(debts, horizon)
    click.echo("\nCascading payments vs. independent payments:")
    months_saved = comparison.months_saved
    if math.isinf(months_saved):
        saved_text = f"only cascading pays off within {horizon} months"
    elif months_saved <= 0:
        saved_text = "none"
    else:
        saved_text = format_months(months_saved)
    click.echo(f"  Time saved: {saved_text}")
    click.echo(f"  Interest saved: {format_currency(comparison.interest_saved, show_cents=True)}")

    if show_schedule:
        click.echo(f"\n{'Month':<12} {'Balance':>14}")
        click.echo("-" * 27)
        for point in sample_schedule(schedule.entries):
            marker = " *" if point.is_year_marker else ""
            click.echo(f"{point.label:<12} {format_currency(point.total_balance):>14}{marker}")


def register_commands(cli):
    """Register payoff command with main CLI."""
    cli.add_command(payoff)
