"""Budget state transitions.

`reduce(state, action)` is the only way a budget changes: it returns a new
BudgetState and leaves the old one untouched. Calculators never see the
state itself, only the Scenario snapshots it holds.
"""

import random
import string
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable, Optional

from budgetdash.domain import errors
from budgetdash.domain.defaults import DOCUMENT_VERSION, default_scenarios
from budgetdash.domain.entities import (
    DebtEntry,
    ExpenseEntry,
    GoalEntry,
    IncomeEntry,
    Scenario,
    ScenarioKey,
)
from budgetdash.domain.errors import ConflictError, ValidationError


class ActionType(str, Enum):
    SET_ACTIVE_SCENARIO = "SET_ACTIVE_SCENARIO"
    ADD_INCOME = "ADD_INCOME"
    UPDATE_INCOME = "UPDATE_INCOME"
    DELETE_INCOME = "DELETE_INCOME"
    ADD_EXPENSE = "ADD_EXPENSE"
    UPDATE_EXPENSE = "UPDATE_EXPENSE"
    DELETE_EXPENSE = "DELETE_EXPENSE"
    ADD_DEBT = "ADD_DEBT"
    UPDATE_DEBT = "UPDATE_DEBT"
    DELETE_DEBT = "DELETE_DEBT"
    REORDER_DEBTS = "REORDER_DEBTS"
    ADD_GOAL = "ADD_GOAL"
    UPDATE_GOAL = "UPDATE_GOAL"
    DELETE_GOAL = "DELETE_GOAL"
    REORDER_GOALS = "REORDER_GOALS"
    IMPORT_DATA = "IMPORT_DATA"
    RESET_DATA = "RESET_DATA"


@dataclass(frozen=True)
class Action:
    type: ActionType
    payload: Any = None


@dataclass(frozen=True)
class BudgetState:
    """Both scenarios plus which one edits apply to."""

    scenarios: dict[str, Scenario]
    version: int = DOCUMENT_VERSION
    active_scenario: str = ScenarioKey.CURRENT.value

    @property
    def current_scenario(self) -> Scenario:
        return self.scenarios[self.active_scenario]


def default_state() -> BudgetState:
    return BudgetState(scenarios=default_scenarios())


def generate_id(prefix: str = "item") -> str:
    """Generate an entry ID such as 'debt-1718030000000-k3j9x0a1b'."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"{prefix}-{int(time.time() * 1000)}-{suffix}"


# Collection attribute on Scenario for each entry kind.
_COLLECTIONS = {
    "INCOME": "income",
    "EXPENSE": "expenses",
    "DEBT": "debts",
    "GOAL": "goals",
}
_ORDERED_COLLECTIONS = {"debts", "goals"}
_KINDS = {"income": "income", "expenses": "expense", "debts": "debt", "goals": "goal"}


def _with_collection(
    state: BudgetState, collection: str, entries: Iterable[Any]
) -> BudgetState:
    scenario = state.scenarios[state.active_scenario]
    updated = replace(scenario, **{collection: tuple(entries)})
    scenarios = dict(state.scenarios)
    scenarios[state.active_scenario] = updated
    return replace(state, scenarios=scenarios)


def _add_entry(state: BudgetState, collection: str, entry: Any) -> BudgetState:
    entries = list(getattr(state.current_scenario, collection))
    if any(existing.id == entry.id for existing in entries):
        raise ConflictError(errors.duplicate_entry_id(_KINDS[collection], entry.id))
    if collection in _ORDERED_COLLECTIONS:
        entry = replace(entry, order=len(entries))
    entries.append(entry)
    return _with_collection(state, collection, entries)


def _update_entry(state: BudgetState, collection: str, entry: Any) -> BudgetState:
    entries = [
        entry if existing.id == entry.id else existing
        for existing in getattr(state.current_scenario, collection)
    ]
    return _with_collection(state, collection, entries)


def _delete_entry(state: BudgetState, collection: str, entry_id: str) -> BudgetState:
    entries = [
        existing
        for existing in getattr(state.current_scenario, collection)
        if existing.id != entry_id
    ]
    return _with_collection(state, collection, entries)


def _reorder_entries(
    state: BudgetState, collection: str, sequence: Iterable[Any]
) -> BudgetState:
    """Rewrite `order` as 0..N-1 following the given IDs (or entries).

    Entries not named in the sequence keep their relative order after the
    listed ones.
    """
    current = sorted(
        getattr(state.current_scenario, collection), key=lambda entry: entry.order
    )
    by_id = {entry.id: entry for entry in current}

    ordered_ids: list[str] = []
    for item in sequence:
        entry_id = item if isinstance(item, str) else item.id
        if entry_id in by_id and entry_id not in ordered_ids:
            ordered_ids.append(entry_id)
    ordered_ids.extend(entry.id for entry in current if entry.id not in ordered_ids)

    entries = [
        replace(by_id[entry_id], order=index)
        for index, entry_id in enumerate(ordered_ids)
    ]
    return _with_collection(state, collection, entries)


def _split_action_type(action_type: ActionType) -> tuple[Optional[str], Optional[str]]:
    verb, _, kind = action_type.value.partition("_")
    if kind.endswith("S") and kind[:-1] in _COLLECTIONS:
        kind = kind[:-1]
    if kind not in _COLLECTIONS:
        return None, None
    return verb, _COLLECTIONS[kind]


def reduce(state: BudgetState, action: Action) -> BudgetState:
    """Apply an action and return the resulting state.

    Raises:
        ConflictError: If an added entry reuses an existing ID
        ValidationError: If the active scenario is set to an unknown key
    """
    action_type = action.type
    payload = action.payload

    if action_type is ActionType.SET_ACTIVE_SCENARIO:
        try:
            key = ScenarioKey(payload)
        except ValueError:
            raise ValidationError(errors.unknown_scenario(str(payload)))
        return replace(state, active_scenario=key.value)

    if action_type is ActionType.IMPORT_DATA:
        return replace(
            state,
            scenarios=dict(payload.scenarios),
            version=payload.version,
        )

    if action_type is ActionType.RESET_DATA:
        return default_state()

    verb, collection = _split_action_type(action_type)
    if verb == "ADD":
        return _add_entry(state, collection, payload)
    if verb == "UPDATE":
        return _update_entry(state, collection, payload)
    if verb == "DELETE":
        return _delete_entry(state, collection, payload)
    if verb == "REORDER":
        return _reorder_entries(state, collection, payload)

    return state


ENTRY_ACTIONS = {
    IncomeEntry: (ActionType.ADD_INCOME, ActionType.UPDATE_INCOME, ActionType.DELETE_INCOME),
    ExpenseEntry: (ActionType.ADD_EXPENSE, ActionType.UPDATE_EXPENSE, ActionType.DELETE_EXPENSE),
    DebtEntry: (ActionType.ADD_DEBT, ActionType.UPDATE_DEBT, ActionType.DELETE_DEBT),
    GoalEntry: (ActionType.ADD_GOAL, ActionType.UPDATE_GOAL, ActionType.DELETE_GOAL),
}
