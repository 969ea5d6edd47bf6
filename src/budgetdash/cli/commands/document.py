"""Budget document commands."""

from datetime import date
from pathlib import Path

import click

from budgetdash.cli.document_context import apply_and_save, load_document_or_exit
from budgetdash.cli.error_handling import handle_domain_error
from budgetdash.domain.defaults import DOCUMENT_VERSION, default_scenarios, empty_scenario
from budgetdash.domain.document import ScenarioDocument, load_document, save_document
from budgetdash.domain.entities import ScenarioKey
from budgetdash.domain.errors import DomainError
from budgetdash.domain.state import Action, ActionType


@click.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing budget file")
@click.option("--empty", is_flag=True, help="Start with empty scenarios instead of sample data")
@click.pass_context
def init_document(ctx, force: bool, empty: bool):
    """Create a budget file with sample current and plan scenarios.

    Examples:
        budgetdash init
        budgetdash --file ./budget.json init --empty
    """
    path = ctx.obj["document_path"]
    if path.exists() and not force:
        click.echo(f"Error: {path} already exists. Use --force to overwrite it.", err=True)
        ctx.exit(1)

    scenarios = default_scenarios()
    if empty:
        scenarios = {key: empty_scenario(scenario.name) for key, scenario in scenarios.items()}

    try:
        save_document(path, ScenarioDocument(scenarios=scenarios, version=DOCUMENT_VERSION))
    except OSError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created budget file {path}")


@click.command("validate")
@click.pass_context
def validate_document(ctx):
    """Check that the budget file can be imported."""
    document = load_document_or_exit(ctx)

    click.echo(f"Budget file {ctx.obj['document_path']} is valid (version {document.version})")
    if document.exported_at is not None:
        click.echo(f"  Exported: {document.exported_at:%Y-%m-%d %H:%M}")
    for key in ScenarioKey:
        scenario = document.scenarios[key.value]
        click.echo(
            f"  {scenario.name}: {len(scenario.income)} income, "
            f"{len(scenario.expenses)} expenses, {len(scenario.debts)} debts, "
            f"{len(scenario.goals)} goals"
        )


@click.command("export")
@click.argument("destination", type=click.Path(dir_okay=False), required=False)
@click.pass_context
def export_budget(ctx, destination: str | None):
    """Write both scenarios to a JSON file stamped with the export time.

    DESTINATION defaults to budget-YYYY-MM-DD.json in the working directory.

    Examples:
        budgetdash export
        budgetdash export ~/backups/budget.json
    """
    document = load_document_or_exit(ctx)
    path = Path(destination or f"budget-{date.today().isoformat()}.json")

    try:
        data = save_document(path, document)
    except OSError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Exported budget to {path} (exported at {data['exportedAt']})")


@click.command("import")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_budget(ctx, source: str):
    """Replace both scenarios with the ones in an exported budget file.

    Examples:
        budgetdash import budget-2024-01-15.json
    """
    try:
        imported = load_document(source)
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    # The budget file may be missing or unreadable; all of it is replaced.
    current = ScenarioDocument(scenarios=default_scenarios())
    apply_and_save(ctx, current, ScenarioKey.CURRENT.value, [Action(ActionType.IMPORT_DATA, imported)])
    click.echo(f"Imported budget from {source} (version {imported.version})")
    for key in ScenarioKey:
        click.echo(f"  {imported.scenarios[key.value].name}")


@click.command("reset")
@click.pass_context
def reset_budget(ctx):
    """Replace both scenarios with the sample data."""
    path = ctx.obj["document_path"]
    document = load_document_or_exit(ctx)

    if not click.confirm(f"Are you sure you want to reset {path} to the sample data?"):
        click.echo("Reset cancelled.")
        return

    apply_and_save(ctx, document, ScenarioKey.CURRENT.value, [Action(ActionType.RESET_DATA)])
    click.echo("Budget reset to the sample data")


def register_commands(cli):
    """Register document commands with main CLI."""
    cli.add_command(init_document)
    cli.add_command(validate_document)
    cli.add_command(export_budget)
    cli.add_command(import_budget)
    cli.add_command(reset_budget)
