"""Income, expense, debt and goal entry commands."""

from dataclasses import replace
from decimal import Decimal

import click

from budgetdash.cli.document_context import (
    apply_and_save,
    load_document_or_exit,
    resolve_entry_or_exit,
    scenario_option,
)
from budgetdash.domain.defaults import (
    DEBT_TYPES,
    EXPENSE_CATEGORIES,
    GOAL_TYPES,
    INCOME_TYPES,
    type_label,
    typical_rate,
)
from budgetdash.domain.entities import DebtEntry, ExpenseEntry, GoalEntry, IncomeEntry
from budgetdash.domain.state import Action, ActionType, ENTRY_ACTIONS, generate_id
from budgetdash.utils.amount_parser import parse_amount
from budgetdash.utils.formatting import format_currency, format_percentage


def _amount(ctx, param, value):
    """Click callback parsing a non-negative amount."""
    if value is None:
        return None
    try:
        amount = parse_amount(value)
    except ValueError as e:
        raise click.BadParameter(str(e))
    if amount < 0:
        raise click.BadParameter("must not be negative")
    return amount


def _remove(ctx, scenario: str, collection: str, reference: str, kind: str) -> None:
    document = load_document_or_exit(ctx)
    entries = getattr(document.scenarios[scenario], collection)
    entry = resolve_entry_or_exit(ctx, entries, reference, kind)
    delete_action = ENTRY_ACTIONS[type(entry)][2]
    apply_and_save(ctx, document, scenario, [Action(delete_action, entry.id)])
    click.echo(f"Removed {kind} '{entry.name}' (ID: {entry.id})")


def _reorder(ctx, scenario: str, collection: str, references: tuple[str, ...], kind: str, action_type: ActionType) -> None:
    document = load_document_or_exit(ctx)
    entries = getattr(document.scenarios[scenario], collection)
    ordered = [resolve_entry_or_exit(ctx, entries, reference, kind) for reference in references]
    state = apply_and_save(ctx, document, scenario, [Action(action_type, ordered)])
    click.echo(f"New {kind} order:")
    for entry in sorted(getattr(state.scenarios[scenario], collection), key=lambda e: e.order):
        click.echo(f"  {entry.order}. {entry.name}")


# Income

@click.group("income")
def income_group():
    """Manage income sources."""
    pass


@income_group.command("list")
@scenario_option
@click.pass_context
def list_income(ctx, scenario: str):
    """List income sources."""
    entries = load_document_or_exit(ctx).scenarios[scenario].income
    if not entries:
        click.echo("No income found.")
        return
    for entry in entries:
        click.echo(
            f"ID: {entry.id:<24} | {entry.name:20s} | {type_label(INCOME_TYPES, entry.type):14s} | "
            f"{format_currency(entry.amount, show_cents=True)}"
        )


@income_group.command("add")
@click.argument("name")
@click.argument("amount", callback=_amount)
@click.option("--type", "income_type", type=click.Choice(list(INCOME_TYPES)), default="salary", show_default=True)
@scenario_option
@click.pass_context
def add_income(ctx, name: str, amount: Decimal, income_type: str, scenario: str):
    """Add a monthly income source.

    Examples:
        budgetdash income add "Primary Salary" 5000
        budgetdash income add "Side Gig" 400 --type freelance --scenario plan
    """
    document = load_document_or_exit(ctx)
    entry = IncomeEntry(id=generate_id("inc"), name=name, type=income_type, amount=amount)
    apply_and_save(ctx, document, scenario, [Action(ActionType.ADD_INCOME, entry)])
    click.echo(f"Added income '{name}' (ID: {entry.id})")


@income_group.command("remove")
@click.argument("income", metavar="INCOME")
@scenario_option
@click.pass_context
def remove_income(ctx, income: str, scenario: str):
    """Remove an income source by name or ID."""
    _remove(ctx, scenario, "income", income, "income")


# Expenses

@click.group("expense")
def expense_group():
    """Manage expenses."""
    pass


@expense_group.command("list")
@scenario_option
@click.pass_context
def list_expenses(ctx, scenario: str):
    """List expenses."""
    entries = load_document_or_exit(ctx).scenarios[scenario].expenses
    if not entries:
        click.echo("No expenses found.")
        return
    for entry in entries:
        kind = "fixed" if entry.is_fixed else "variable"
        click.echo(
            f"ID: {entry.id:<24} | {entry.name:20s} | {type_label(EXPENSE_CATEGORIES, entry.category):16s} | "
            f"{kind:8s} | {format_currency(entry.amount, show_cents=True)}"
        )


@expense_group.command("add")
@click.argument("name")
@click.argument("amount", callback=_amount)
@click.option("--category", type=click.Choice(list(EXPENSE_CATEGORIES)), default="other", show_default=True)
@click.option("--fixed/--variable", "is_fixed", default=False, help="Recurring need (fixed) or discretionary want (variable)")
@scenario_option
@click.pass_context
def add_expense(ctx, name: str, amount: Decimal, category: str, is_fixed: bool, scenario: str):
    """Add a monthly expense.

    Examples:
        budgetdash expense add Rent 1500 --category housing --fixed
        budgetdash expense add "Dining Out" 200 --category food
    """
    document = load_document_or_exit(ctx)
    entry = ExpenseEntry(
        id=generate_id("exp"), name=name, category=category, amount=amount, is_fixed=is_fixed
    )
    apply_and_save(ctx, document, scenario, [Action(ActionType.ADD_EXPENSE, entry)])
    click.echo(f"Added expense '{name}' (ID: {entry.id})")


@expense_group.command("remove")
@click.argument("expense", metavar="EXPENSE")
@scenario_option
@click.pass_context
def remove_expense(ctx, expense: str, scenario: str):
    """Remove an expense by name or ID."""
    _remove(ctx, scenario, "expenses", expense, "expense")


# Debts

@click.group("debt")
def debt_group():
    """Manage debts and their payoff priority."""
    pass


@debt_group.command("list")
@scenario_option
@click.pass_context
def list_debts(ctx, scenario: str):
    """List debts in priority order."""
    entries = load_document_or_exit(ctx).scenarios[scenario].sorted_debts()
    if not entries:
        click.echo("No debts found.")
        return
    for entry in entries:
        click.echo(
            f"{entry.order:2d}. ID: {entry.id:<24} | {entry.name:20s} | "
            f"{format_currency(entry.balance, show_cents=True):>12} @ {format_percentage(entry.interest_rate, 2)} | "
            f"min {format_currency(entry.minimum_payment)} + extra {format_currency(entry.extra_payment)}"
        )


@debt_group.command("add")
@click.argument("name")
@click.argument("balance", callback=_amount)
@click.option("--type", "debt_type", type=click.Choice(list(DEBT_TYPES)), default="other", show_default=True)
@click.option("--rate", callback=_amount, help="Annual interest rate in percent (defaults to the typical rate for the type)")
@click.option("--minimum", callback=_amount, required=True, help="Minimum monthly payment")
@click.option("--extra", callback=_amount, default="0", show_default=True, help="Extra monthly payment")
@scenario_option
@click.pass_context
def add_debt(ctx, name: str, balance: Decimal, debt_type: str, rate: Decimal | None, minimum: Decimal, extra: Decimal, scenario: str):
    """Add a debt at the lowest priority.

    Examples:
        budgetdash debt add "Visa" 5000 --type credit_card --minimum 150
        budgetdash debt add "Car" 12000 --type auto_loan --rate 6.9 --minimum 320 --extra 50
    """
    document = load_document_or_exit(ctx)
    entry = DebtEntry(
        id=generate_id("debt"),
        name=name,
        type=debt_type,
        balance=balance,
        interest_rate=rate if rate is not None else typical_rate(debt_type),
        minimum_payment=minimum,
        extra_payment=extra,
    )
    state = apply_and_save(ctx, document, scenario, [Action(ActionType.ADD_DEBT, entry)])
    added = next(debt for debt in state.scenarios[scenario].debts if debt.id == entry.id)
    click.echo(f"Added debt '{name}' (ID: {entry.id}, priority {added.order})")


@debt_group.command("update")
@click.argument("debt", metavar="DEBT")
@click.option("--name", "new_name", help="New name")
@click.option("--balance", callback=_amount, help="Current balance")
@click.option("--rate", callback=_amount, help="Annual interest rate in percent")
@click.option("--minimum", callback=_amount, help="Minimum monthly payment")
@click.option("--extra", callback=_amount, help="Extra monthly payment")
@scenario_option
@click.pass_context
def update_debt(ctx, debt: str, new_name: str | None, balance: Decimal | None, rate: Decimal | None, minimum: Decimal | None, extra: Decimal | None, scenario: str):
    """Change fields of a debt, given by name or ID.

    Examples:
        budgetdash debt update "Credit Card" --extra 100 --scenario plan
    """
    document = load_document_or_exit(ctx)
    entry = resolve_entry_or_exit(ctx, document.scenarios[scenario].debts, debt, "debt")
    changes = {
        "name": new_name,
        "balance": balance,
        "interest_rate": rate,
        "minimum_payment": minimum,
        "extra_payment": extra,
    }
    changes = {field: value for field, value in changes.items() if value is not None}
    if not changes:
        click.echo("Error: Nothing to update. Pass at least one option.", err=True)
        ctx.exit(1)

    apply_and_save(ctx, document, scenario, [Action(ActionType.UPDATE_DEBT, replace(entry, **changes))])
    click.echo(f"Updated debt '{changes.get('name', entry.name)}'")


@debt_group.command("remove")
@click.argument("debt", metavar="DEBT")
@scenario_option
@click.pass_context
def remove_debt(ctx, debt: str, scenario: str):
    """Remove a debt by name or ID."""
    _remove(ctx, scenario, "debts", debt, "debt")


@debt_group.command("reorder")
@click.argument("debts", metavar="DEBT...", nargs=-1, required=True)
@scenario_option
@click.pass_context
def reorder_debts(ctx, debts: tuple[str, ...], scenario: str):
    """Set payoff priority: the first debt named is paid first.

    Debts left out keep their relative order after the ones listed.

    Examples:
        budgetdash debt reorder "Student Loan" "Credit Card"
    """
    _reorder(ctx, scenario, "debts", debts, "debt", ActionType.REORDER_DEBTS)


# Goals

@click.group("goal")
def goal_group():
    """Manage savings goals."""
    pass


@goal_group.command("list")
@scenario_option
@click.pass_context
def list_goals(ctx, scenario: str):
    """List goals in display order."""
    entries = load_document_or_exit(ctx).scenarios[scenario].sorted_goals()
    if not entries:
        click.echo("No goals found.")
        return
    for entry in entries:
        click.echo(
            f"{entry.order:2d}. ID: {entry.id:<24} | {entry.name:20s} | "
            f"{format_currency(entry.current_amount)} of {format_currency(entry.target_amount)} | "
            f"{format_currency(entry.monthly_contribution)}/mo"
        )


@goal_group.command("add")
@click.argument("name")
@click.argument("target", callback=_amount)
@click.option("--type", "goal_type", type=click.Choice(list(GOAL_TYPES)), default="other", show_default=True)
@click.option("--saved", callback=_amount, default="0", show_default=True, help="Amount already saved")
@click.option("--monthly", callback=_amount, default="0", show_default=True, help="Monthly contribution")
@scenario_option
@click.pass_context
def add_goal(ctx, name: str, target: Decimal, goal_type: str, saved: Decimal, monthly: Decimal, scenario: str):
    """Add a savings goal.

    Examples:
        budgetdash goal add "Emergency Fund" 15000 --type emergency --saved 3000 --monthly 200
    """
    document = load_document_or_exit(ctx)
    entry = GoalEntry(
        id=generate_id("goal"),
        name=name,
        type=goal_type,
        target_amount=target,
        current_amount=saved,
        monthly_contribution=monthly,
    )
    apply_and_save(ctx, document, scenario, [Action(ActionType.ADD_GOAL, entry)])
    click.echo(f"Added goal '{name}' (ID: {entry.id})")


@goal_group.command("update")
@click.argument("goal", metavar="GOAL")
@click.option("--name", "new_name", help="New name")
@click.option("--target", callback=_amount, help="Target amount")
@click.option("--saved", callback=_amount, help="Amount already saved")
@click.option("--monthly", callback=_amount, help="Monthly contribution")
@scenario_option
@click.pass_context
def update_goal(ctx, goal: str, new_name: str | None, target: Decimal | None, saved: Decimal | None, monthly: Decimal | None, scenario: str):
    """Change fields of a goal, given by name or ID."""
    document = load_document_or_exit(ctx)
    entry = resolve_entry_or_exit(ctx, document.scenarios[scenario].goals, goal, "goal")
    changes = {
        "name": new_name,
        "target_amount": target,
        "current_amount": saved,
        "monthly_contribution": monthly,
    }
    changes = {field: value for field, value in changes.items() if value is not None}
    if not changes:
        click.echo("Error: Nothing to update. Pass at least one option.", err=True)
        ctx.exit(1)

    apply_and_save(ctx, document, scenario, [Action(ActionType.UPDATE_GOAL, replace(entry, **changes))])
    click.echo(f"Updated goal '{changes.get('name', entry.name)}'")


@goal_group.command("remove")
@click.argument("goal", metavar="GOAL")
@scenario_option
@click.pass_context
def remove_goal(ctx, goal: str, scenario: str):
    """Remove a goal by name or ID."""
    _remove(ctx, scenario, "goals", goal, "goal")


@goal_group.command("reorder")
@click.argument("goals", metavar="GOAL...", nargs=-1, required=True)
@scenario_option
@click.pass_context
def reorder_goals(ctx, goals: tuple[str, ...], scenario: str):
    """Set the display order of goals."""
    _reorder(ctx, scenario, "goals", goals, "goal", ActionType.REORDER_GOALS)


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(income_group, name="income")
    cli.add_command(expense_group, name="expense")
    cli.add_command(debt_group, name="debt")
    cli.add_command(goal_group, name="goal")
