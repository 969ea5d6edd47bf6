"""Scenario-pair document import and export.

The document is the JSON shape budgets travel in:

    {"scenarios": {"current": {...}, "plan": {...}}, "version": 1,
     "exportedAt": "2024-01-15T12:00:00+00:00"}

Mapper functions convert between that camelCase shape and the domain
entities. Importing sanitizes every number so the calculators only ever see
non-negative finite amounts; every field a calculator reads survives an
export/import round trip unchanged.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping, Optional

from dateutil import parser as date_parser

from budgetdash.domain import errors
from budgetdash.domain.defaults import DOCUMENT_VERSION, SCENARIO_NAMES
from budgetdash.domain.entities import (
    DebtEntry,
    ExpenseEntry,
    GoalEntry,
    IncomeEntry,
    Scenario,
    ScenarioKey,
)
from budgetdash.domain.errors import NotFoundError, ValidationError
from budgetdash.domain.state import generate_id
from budgetdash.utils.amount_parser import sanitize_amount, sanitize_order

logger = logging.getLogger(__name__)

SCENARIO_KEYS = (ScenarioKey.CURRENT.value, ScenarioKey.PLAN.value)


@dataclass(frozen=True)
class ScenarioDocument:
    """Both scenarios of a budget plus document metadata."""

    scenarios: dict[str, Scenario]
    version: int = DOCUMENT_VERSION
    exported_at: Optional[datetime] = None


def _text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _entry_id(raw: Mapping[str, Any], prefix: str) -> str:
    value = raw.get("id")
    return str(value) if value not in (None, "") else generate_id(prefix)


def _number(amount: Decimal) -> int | float:
    """Plain JSON number for an amount; whole amounts stay integers."""
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


def income_to_dict(entry: IncomeEntry) -> dict[str, Any]:
    return {"id": entry.id, "name": entry.name, "type": entry.type, "amount": _number(entry.amount)}


def income_from_dict(raw: Mapping[str, Any]) -> IncomeEntry:
    return IncomeEntry(
        id=_entry_id(raw, "inc"),
        name=_text(raw.get("name")),
        type=_text(raw.get("type"), "other"),
        amount=sanitize_amount(raw.get("amount")),
    )


def expense_to_dict(entry: ExpenseEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "name": entry.name,
        "category": entry.category,
        "amount": _number(entry.amount),
        "isFixed": entry.is_fixed,
    }


def expense_from_dict(raw: Mapping[str, Any]) -> ExpenseEntry:
    category = raw.get("category")
    return ExpenseEntry(
        id=_entry_id(raw, "exp"),
        name=_text(raw.get("name")),
        category=str(category) if category else None,
        amount=sanitize_amount(raw.get("amount")),
        is_fixed=bool(raw.get("isFixed", False)),
    )


def debt_to_dict(entry: DebtEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "name": entry.name,
        "type": entry.type,
        "balance": _number(entry.balance),
        "interestRate": _number(entry.interest_rate),
        "minimumPayment": _number(entry.minimum_payment),
        "extraPayment": _number(entry.extra_payment),
        "order": entry.order,
    }


def debt_from_dict(raw: Mapping[str, Any], position: int = 0) -> DebtEntry:
    return DebtEntry(
        id=_entry_id(raw, "debt"),
        name=_text(raw.get("name")),
        type=_text(raw.get("type"), "other"),
        balance=sanitize_amount(raw.get("balance")),
        interest_rate=sanitize_amount(raw.get("interestRate")),
        minimum_payment=sanitize_amount(raw.get("minimumPayment")),
        extra_payment=sanitize_amount(raw.get("extraPayment")),
        order=sanitize_order(raw.get("order"), position),
    )


def goal_to_dict(entry: GoalEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "name": entry.name,
        "type": entry.type,
        "targetAmount": _number(entry.target_amount),
        "currentAmount": _number(entry.current_amount),
        "monthlyContribution": _number(entry.monthly_contribution),
        "order": entry.order,
    }


def goal_from_dict(raw: Mapping[str, Any], position: int = 0) -> GoalEntry:
    return GoalEntry(
        id=_entry_id(raw, "goal"),
        name=_text(raw.get("name")),
        type=_text(raw.get("type"), "other"),
        target_amount=sanitize_amount(raw.get("targetAmount")),
        current_amount=sanitize_amount(raw.get("currentAmount")),
        monthly_contribution=sanitize_amount(raw.get("monthlyContribution")),
        order=sanitize_order(raw.get("order"), position),
    )


def scenario_to_dict(scenario: Scenario) -> dict[str, Any]:
    return {
        "name": scenario.name,
        "income": [income_to_dict(entry) for entry in scenario.income],
        "expenses": [expense_to_dict(entry) for entry in scenario.expenses],
        "debts": [debt_to_dict(entry) for entry in scenario.debts],
        "goals": [goal_to_dict(entry) for entry in scenario.goals],
    }


def _entries(raw: Mapping[str, Any], key: str, scenario_key: str) -> list:
    items = raw.get(key) or []
    if not isinstance(items, list):
        raise ValidationError(
            errors.invalid_document(f"'{scenario_key}.{key}' must be a list")
        )
    for item in items:
        if not isinstance(item, Mapping):
            raise ValidationError(
                errors.invalid_document(f"'{scenario_key}.{key}' must contain objects")
            )
    return items


def scenario_from_dict(raw: Mapping[str, Any], key: str) -> Scenario:
    if not isinstance(raw, Mapping):
        raise ValidationError(errors.invalid_document(f"scenario '{key}' must be an object"))

    return Scenario(
        name=_text(raw.get("name"), SCENARIO_NAMES.get(key, key)),
        income=tuple(income_from_dict(item) for item in _entries(raw, "income", key)),
        expenses=tuple(expense_from_dict(item) for item in _entries(raw, "expenses", key)),
        debts=tuple(
            debt_from_dict(item, position)
            for position, item in enumerate(_entries(raw, "debts", key))
        ),
        goals=tuple(
            goal_from_dict(item, position)
            for position, item in enumerate(_entries(raw, "goals", key))
        ),
    )


def export_document(
    scenarios: Mapping[str, Scenario],
    version: int = DOCUMENT_VERSION,
    exported_at: Optional[datetime] = None,
) -> dict[str, Any]:
    """Build the JSON-ready scenario-pair document.

    Args:
        scenarios: Mapping holding the 'current' and 'plan' scenarios
        version: Document version
        exported_at: Export timestamp (defaults to now, UTC)

    Returns:
        Dict ready for json.dump
    """
    if exported_at is None:
        exported_at = datetime.now(timezone.utc)

    return {
        "scenarios": {key: scenario_to_dict(scenarios[key]) for key in SCENARIO_KEYS},
        "version": version,
        "exportedAt": exported_at.isoformat(),
    }


def _parse_exported_at(value: Any) -> Optional[datetime]:
    if not value:
        return None
    try:
        return date_parser.isoparse(str(value))
    except (ValueError, OverflowError) as e:
        logger.warning("Ignoring unreadable exportedAt %r: %s", value, e)
        return None


def _parse_version(value: Any) -> int:
    if value is None:
        return DOCUMENT_VERSION
    try:
        version = int(value)
    except (TypeError, ValueError):
        raise ValidationError(errors.invalid_document(f"bad version {value!r}"))
    return version or DOCUMENT_VERSION


def import_document(data: Any) -> ScenarioDocument:
    """Validate and convert a parsed JSON document.

    Raises:
        ValidationError: If the document lacks the current or plan scenario
            or a collection has the wrong shape
    """
    if not isinstance(data, Mapping):
        raise ValidationError(errors.invalid_document("expected a JSON object"))

    raw_scenarios = data.get("scenarios")
    if not isinstance(raw_scenarios, Mapping):
        raise ValidationError(errors.invalid_document("missing 'scenarios'"))

    scenarios = {}
    for key in SCENARIO_KEYS:
        if not raw_scenarios.get(key):
            raise ValidationError(errors.invalid_document(f"missing scenario '{key}'"))
        scenarios[key] = scenario_from_dict(raw_scenarios[key], key)

    return ScenarioDocument(
        scenarios=scenarios,
        version=_parse_version(data.get("version")),
        exported_at=_parse_exported_at(data.get("exportedAt")),
    )


def load_document(path: str | Path) -> ScenarioDocument:
    """Read and import a document file.

    Raises:
        NotFoundError: If the file does not exist
        ValidationError: If the file is not valid JSON or not a budget document
    """
    document_path = Path(path)
    if not document_path.exists():
        raise NotFoundError(errors.document_not_found(str(document_path)))

    with open(document_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise ValidationError(errors.invalid_document(f"not valid JSON ({e})"))

    document = import_document(data)
    logger.debug("Loaded budget document %s (version %d)", document_path, document.version)
    return document


def save_document(path: str | Path, document: ScenarioDocument) -> dict[str, Any]:
    """Export a document and write it as JSON, creating parent directories."""
    document_path = Path(path)
    document_path.parent.mkdir(parents=True, exist_ok=True)

    data = export_document(document.scenarios, document.version)
    with open(document_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")

    logger.debug("Saved budget document %s", document_path)
    return data
