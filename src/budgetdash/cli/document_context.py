"""CLI helpers for loading, resolving and saving the budget document."""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

import click

from budgetdash.cli.error_handling import handle_domain_error
from budgetdash.config import DEFAULT_HORIZON, DEFAULT_POLICY, HORIZON_ENV, POLICY_ENV
from budgetdash.domain.amortization import MAX_HORIZON_MONTHS
from budgetdash.domain.document import ScenarioDocument, load_document, save_document
from budgetdash.domain.entities import PayoffPolicy, Scenario, ScenarioKey
from budgetdash.domain.errors import DomainError
from budgetdash.domain.state import Action, ActionType, BudgetState, reduce
from budgetdash.utils.entry_resolver import resolve_entry

logger = logging.getLogger(__name__)

Entry = TypeVar("Entry")

scenario_option = click.option(
    "--scenario",
    type=click.Choice([key.value for key in ScenarioKey]),
    default=ScenarioKey.CURRENT.value,
    show_default=True,
    help="Scenario to work on",
)

policy_option = click.option(
    "--policy",
    type=click.Choice([policy.value for policy in PayoffPolicy]),
    default=DEFAULT_POLICY,
    envvar=POLICY_ENV,
    show_default=True,
    help="Debt payoff policy (overrides BUDGETDASH_POLICY environment variable)",
)

horizon_option = click.option(
    "--horizon",
    type=click.IntRange(1, MAX_HORIZON_MONTHS),
    default=DEFAULT_HORIZON,
    envvar=HORIZON_ENV,
    show_default=True,
    help="Months to simulate (overrides BUDGETDASH_HORIZON environment variable)",
)


def load_document_or_exit(ctx: click.Context) -> ScenarioDocument:
    """Load the document named on the command line, or exit with a CLI error."""
    try:
        return load_document(ctx.obj["document_path"])
    except (DomainError, OSError) as exc:
        handle_domain_error(ctx, exc)


def load_scenario_or_exit(ctx: click.Context, scenario_key: str) -> Scenario:
    return load_document_or_exit(ctx).scenarios[scenario_key]


def resolve_entry_or_exit(
    ctx: click.Context, entries: Sequence[Entry], reference: str, kind: str
) -> Entry:
    """Resolve entry name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_entry(entries, reference, kind)
    except DomainError as exc:
        handle_domain_error(ctx, exc)


def apply_and_save(
    ctx: click.Context,
    document: ScenarioDocument,
    scenario_key: str,
    actions: Sequence[Action],
) -> BudgetState:
    """Run actions against a scenario of the document and write the result."""
    state = BudgetState(scenarios=dict(document.scenarios), version=document.version)
    try:
        state = reduce(state, Action(ActionType.SET_ACTIVE_SCENARIO, scenario_key))
        for action in actions:
            state = reduce(state, action)
    except DomainError as exc:
        handle_domain_error(ctx, exc)

    try:
        save_document(
            ctx.obj["document_path"],
            ScenarioDocument(scenarios=state.scenarios, version=state.version),
        )
    except OSError as exc:
        handle_domain_error(ctx, exc)

    logger.info(
        "Applied %s to scenario '%s'",
        ", ".join(action.type.value for action in actions),
        scenario_key,
    )
    return state
