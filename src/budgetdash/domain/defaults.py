"""Known entry types and the sample data new budgets start from.

The type tables are display metadata only; calculators never consult them.
"""

from decimal import Decimal

from budgetdash.domain.entities import (
    DebtEntry,
    ExpenseEntry,
    GoalEntry,
    IncomeEntry,
    Scenario,
    ScenarioKey,
)

DOCUMENT_VERSION = 1

SCENARIO_NAMES = {
    ScenarioKey.CURRENT.value: "Current Reality",
    ScenarioKey.PLAN.value: "Plan Budget",
}

INCOME_TYPES = {
    "salary": "Salary",
    "freelance": "Freelance",
    "investments": "Investments",
    "rental": "Rental Income",
    "business": "Business",
    "other": "Other",
}

EXPENSE_CATEGORIES = {
    "housing": "Housing",
    "utilities": "Utilities",
    "food": "Food & Groceries",
    "transport": "Transportation",
    "insurance": "Insurance",
    "healthcare": "Healthcare",
    "entertainment": "Entertainment",
    "shopping": "Shopping",
    "personal": "Personal Care",
    "education": "Education",
    "subscriptions": "Subscriptions",
    "other": "Other",
}

# Display name and typical APR used to prefill new debts.
DEBT_TYPES = {
    "credit_card": ("Credit Card", Decimal("19.99")),
    "personal_loan": ("Personal Loan", Decimal("10.5")),
    "student_loan": ("Student Loan", Decimal("5.8")),
    "auto_loan": ("Auto Loan", Decimal("6.5")),
    "mortgage": ("Mortgage", Decimal("7")),
    "medical": ("Medical Debt", Decimal("0")),
    "other": ("Other", Decimal("8")),
}

GOAL_TYPES = {
    "emergency": "Emergency Fund",
    "debt_free": "Debt Free",
    "vacation": "Vacation",
    "house": "House Down Payment",
    "car": "New Car",
    "retirement": "Retirement",
    "education": "Education",
    "investment": "Investment",
    "other": "Other",
}


def type_label(table: dict, key: str | None) -> str:
    """Return the display name for a type key, falling back to the key itself."""
    if key is None:
        return "Other"
    value = table.get(key)
    if value is None:
        return key
    return value[0] if isinstance(value, tuple) else value


def typical_rate(debt_type: str) -> Decimal:
    """Typical APR for a debt type; unknown types use the 'other' rate."""
    return DEBT_TYPES.get(debt_type, DEBT_TYPES["other"])[1]


def empty_scenario(name: str) -> Scenario:
    return Scenario(name=name)


def _sample_expenses(
    groceries: str, gas: str, entertainment: str, subscriptions: str
) -> tuple[ExpenseEntry, ...]:
    return (
        ExpenseEntry("exp-1", "Rent/Mortgage", "housing", Decimal("1500"), True),
        ExpenseEntry("exp-2", "Groceries", "food", Decimal(groceries), False),
        ExpenseEntry("exp-3", "Utilities", "utilities", Decimal("150"), True),
        ExpenseEntry("exp-4", "Car Payment", "transport", Decimal("350"), True),
        ExpenseEntry("exp-5", "Gas", "transport", Decimal(gas), False),
        ExpenseEntry("exp-6", "Insurance", "insurance", Decimal("200"), True),
        ExpenseEntry("exp-7", "Entertainment", "entertainment", Decimal(entertainment), False),
        ExpenseEntry("exp-8", "Subscriptions", "subscriptions", Decimal(subscriptions), True),
    )


def _sample_debts(credit_card_extra: str) -> tuple[DebtEntry, ...]:
    return (
        DebtEntry(
            "debt-1", "Credit Card", "credit_card",
            Decimal("5000"), Decimal("19.99"), Decimal("150"), Decimal(credit_card_extra), 0,
        ),
        DebtEntry(
            "debt-2", "Student Loan", "student_loan",
            Decimal("25000"), Decimal("5.8"), Decimal("280"), Decimal("0"), 1,
        ),
    )


def _sample_goals(emergency: str, vacation: str) -> tuple[GoalEntry, ...]:
    return (
        GoalEntry(
            "goal-1", "Emergency Fund", "emergency",
            Decimal("15000"), Decimal("3000"), Decimal(emergency), 0,
        ),
        GoalEntry(
            "goal-2", "Vacation Fund", "vacation",
            Decimal("5000"), Decimal("500"), Decimal(vacation), 1,
        ),
    )


def default_scenarios() -> dict[str, Scenario]:
    """Sample current and plan scenarios for a fresh budget."""
    income = (IncomeEntry("inc-1", "Primary Salary", "salary", Decimal("5000")),)
    return {
        ScenarioKey.CURRENT.value: Scenario(
            name=SCENARIO_NAMES[ScenarioKey.CURRENT.value],
            income=income,
            expenses=_sample_expenses("400", "120", "150", "50"),
            debts=_sample_debts("0"),
            goals=_sample_goals("200", "100"),
        ),
        ScenarioKey.PLAN.value: Scenario(
            name=SCENARIO_NAMES[ScenarioKey.PLAN.value],
            income=income,
            expenses=_sample_expenses("350", "100", "100", "30"),
            debts=_sample_debts("100"),
            goals=_sample_goals("400", "150"),
        ),
    }
