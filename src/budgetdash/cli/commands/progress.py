"""Goal progress command."""

import click

from budgetdash.cli.document_context import load_scenario_or_exit, scenario_option
from budgetdash.domain.defaults import GOAL_TYPES, type_label
from budgetdash.domain.goals import emergency_fund_status, project_goal
from budgetdash.utils.formatting import (
    format_currency,
    format_months,
    format_percentage,
)


@click.command("progress")
@scenario_option
@click.option(
    "--emergency-months",
    type=click.IntRange(1, 24),
    default=3,
    show_default=True,
    help="Months of expenses the emergency fund should cover",
)
@click.pass_context
def progress(ctx, scenario: str, emergency_months: int):
    """Show progress toward each savings goal."""
    selected = load_scenario_or_exit(ctx, scenario)
    goals = selected.sorted_goals()
    if not goals:
        click.echo("No goals found.")
        return

    click.echo(f"\nGoals: {selected.name}")
    click.echo("-" * 88)
    click.echo(
        f"{'Goal':<22} {'Type':<18} {'Saved':>10} {'Target':>10} {'Progress':>9} {'Reached in':>15}"
    )
    click.echo("-" * 88)
    for goal in goals:
        projection = project_goal(goal)
        click.echo(
            f"{goal.name[:22]:<22} {type_label(GOAL_TYPES, goal.type)[:18]:<18} "
            f"{format_currency(goal.current_amount):>10} {format_currency(goal.target_amount):>10} "
            f"{format_percentage(projection.progress):>9} {format_months(projection.months_to_goal):>15}"
        )

    emergency = emergency_fund_status(selected, emergency_months)
    click.echo("-" * 88)
    if emergency.goal_id is None:
        click.echo(
            f"No emergency fund goal. Recommended target: {format_currency(emergency.target)} "
            f"({emergency_months} months of expenses)"
        )
    else:
        click.echo(
            f"Emergency fund: {format_percentage(emergency.progress)} of "
            f"{format_currency(emergency.target)} ({emergency_months} months of expenses), "
            f"funded in {format_months(emergency.months_to_target)}"
        )


def register_commands(cli):
    """Register progress command with main CLI."""
    cli.add_command(progress)
