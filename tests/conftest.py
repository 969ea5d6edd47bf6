"""Shared pytest fixtures for budgetdash tests."""

import logging
from decimal import Decimal

import pytest

from budgetdash.domain.defaults import default_scenarios
from budgetdash.domain.document import ScenarioDocument, save_document
from budgetdash.domain.entities import DebtEntry, Scenario


@pytest.fixture(autouse=True)
def reset_budgetdash_logger():
    """Drop handlers the CLI attaches so they don't outlive the runner's streams."""
    yield
    logger = logging.getLogger("budgetdash")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def scenarios():
    """Sample current and plan scenarios."""
    return default_scenarios()


@pytest.fixture
def current_scenario(scenarios):
    """The sample current scenario."""
    return scenarios["current"]


@pytest.fixture
def plan_scenario(scenarios):
    """The sample plan scenario."""
    return scenarios["plan"]


@pytest.fixture
def empty_scenario():
    """Scenario without any entries."""
    return Scenario(name="Empty")


@pytest.fixture
def two_debts():
    """High-rate debt paid first, followed by a low-rate debt paid fast."""
    return [
        DebtEntry(
            id="debt-a",
            name="Card",
            type="credit_card",
            balance=Decimal("1000"),
            interest_rate=Decimal("20"),
            minimum_payment=Decimal("50"),
            order=0,
        ),
        DebtEntry(
            id="debt-b",
            name="Loan",
            type="personal_loan",
            balance=Decimal("1000"),
            interest_rate=Decimal("5"),
            minimum_payment=Decimal("150"),
            order=1,
        ),
    ]


@pytest.fixture
def document_path(tmp_path, scenarios):
    """Budget file holding the sample scenarios."""
    path = tmp_path / "budget.json"
    save_document(path, ScenarioDocument(scenarios=scenarios))
    return path


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
