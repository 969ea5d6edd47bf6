"""Tests for income, expense, debt and goal commands."""

from decimal import Decimal

from budgetdash.cli.main import cli
from budgetdash.domain.document import load_document


def run(cli_runner, document_path, *args):
    return cli_runner.invoke(cli, ["--file", str(document_path), *args])


def current(document_path):
    return load_document(document_path).scenarios["current"]


class TestIncome:
    """Tests for income commands."""

    def test_add_and_list(self, cli_runner, document_path):
        """Test adding income and listing it."""
        result = run(cli_runner, document_path, "income", "add", "Side Gig", "400", "--type", "freelance")

        assert result.exit_code == 0
        assert "Added income 'Side Gig'" in result.output
        assert current(document_path).income[-1].amount == Decimal("400")

        result = run(cli_runner, document_path, "income", "list")
        assert result.exit_code == 0
        assert "Side Gig" in result.output
        assert "Freelance" in result.output
        assert "$400.00" in result.output

    def test_add_to_plan(self, cli_runner, document_path):
        """Test --scenario picks the scenario to change."""
        run(cli_runner, document_path, "income", "add", "Bonus", "$1,200", "--scenario", "plan")

        document = load_document(document_path)
        assert len(document.scenarios["current"].income) == 1
        assert document.scenarios["plan"].income[-1].amount == Decimal("1200")

    def test_invalid_amount(self, cli_runner, document_path):
        """Test unreadable amounts are rejected."""
        result = run(cli_runner, document_path, "income", "add", "Bonus", "lots")

        assert result.exit_code == 2
        assert "Invalid value" in result.output

    def test_remove(self, cli_runner, document_path):
        """Test removing income by name."""
        result = run(cli_runner, document_path, "income", "remove", "Primary Salary")

        assert result.exit_code == 0
        assert "Removed income 'Primary Salary' (ID: inc-1)" in result.output
        assert current(document_path).income == ()


class TestExpense:
    """Tests for expense commands."""

    def test_add_fixed_expense(self, cli_runner, document_path):
        """Test adding a fixed expense with a category."""
        result = run(
            cli_runner, document_path, "expense", "add", "Gym", "40", "--category", "personal", "--fixed"
        )

        assert result.exit_code == 0
        expense = current(document_path).expenses[-1]
        assert expense.name == "Gym"
        assert expense.category == "personal"
        assert expense.is_fixed is True

    def test_list(self, cli_runner, document_path):
        """Test listing expenses with their kind."""
        result = run(cli_runner, document_path, "expense", "list")

        assert result.exit_code == 0
        assert "Rent/Mortgage" in result.output
        assert "fixed" in result.output
        assert "variable" in result.output

    def test_remove_by_id(self, cli_runner, document_path):
        """Test removing an expense by ID."""
        result = run(cli_runner, document_path, "expense", "remove", "exp-7")

        assert result.exit_code == 0
        assert "Removed expense 'Entertainment'" in result.output
        assert len(current(document_path).expenses) == 7

    def test_remove_missing(self, cli_runner, document_path):
        """Test removing an unknown expense."""
        result = run(cli_runner, document_path, "expense", "remove", "Yacht")

        assert result.exit_code == 1
        assert "Expense 'Yacht' not found" in result.output


class TestDebt:
    """Tests for debt commands."""

    def test_add_uses_typical_rate(self, cli_runner, document_path):
        """Test a new debt goes last and takes the typical rate for its type."""
        result = run(
            cli_runner, document_path, "debt", "add", "Visa", "1200", "--type", "credit_card", "--minimum", "50"
        )

        assert result.exit_code == 0
        assert "Added debt 'Visa'" in result.output
        assert "priority 2" in result.output
        debt = current(document_path).debts[-1]
        assert debt.interest_rate == Decimal("19.99")
        assert debt.minimum_payment == Decimal("50")
        assert debt.extra_payment == 0
        assert debt.order == 2

    def test_add_requires_minimum(self, cli_runner, document_path):
        """Test the minimum payment is required."""
        result = run(cli_runner, document_path, "debt", "add", "Visa", "1200")

        assert result.exit_code == 2

    def test_update(self, cli_runner, document_path):
        """Test updating the extra payment."""
        result = run(cli_runner, document_path, "debt", "update", "Credit Card", "--extra", "75")

        assert result.exit_code == 0
        assert "Updated debt 'Credit Card'" in result.output
        debt = current(document_path).debts[0]
        assert debt.extra_payment == Decimal("75")
        assert debt.balance == Decimal("5000")

    def test_update_nothing(self, cli_runner, document_path):
        """Test update needs at least one option."""
        result = run(cli_runner, document_path, "debt", "update", "Credit Card")

        assert result.exit_code == 1
        assert "Nothing to update" in result.output

    def test_reorder(self, cli_runner, document_path):
        """Test moving a debt to the top of the payoff order."""
        result = run(cli_runner, document_path, "debt", "reorder", "Student Loan")

        assert result.exit_code == 0
        assert "New debt order:" in result.output
        assert "0. Student Loan" in result.output
        assert "1. Credit Card" in result.output
        assert [debt.id for debt in current(document_path).sorted_debts()] == ["debt-2", "debt-1"]

    def test_remove_and_list(self, cli_runner, document_path):
        """Test removing a debt."""
        result = run(cli_runner, document_path, "debt", "remove", "debt-2")
        assert result.exit_code == 0
        assert "Removed debt 'Student Loan' (ID: debt-2)" in result.output

        result = run(cli_runner, document_path, "debt", "list")
        assert "Credit Card" in result.output
        assert "Student Loan" not in result.output


class TestGoal:
    """Tests for goal commands."""

    def test_add(self, cli_runner, document_path):
        """Test adding a goal."""
        result = run(
            cli_runner, document_path, "goal", "add", "New Car", "10000", "--type", "car", "--saved", "500", "--monthly", "250"
        )

        assert result.exit_code == 0
        goal = current(document_path).goals[-1]
        assert goal.target_amount == Decimal("10000")
        assert goal.current_amount == Decimal("500")
        assert goal.monthly_contribution == Decimal("250")
        assert goal.order == 2

    def test_update_and_list(self, cli_runner, document_path):
        """Test renaming a goal and raising its contribution."""
        result = run(
            cli_runner, document_path, "goal", "update", "goal-2", "--name", "Japan Trip", "--monthly", "300"
        )
        assert result.exit_code == 0
        assert "Updated goal 'Japan Trip'" in result.output

        result = run(cli_runner, document_path, "goal", "list")
        assert "Japan Trip" in result.output
        assert "$300/mo" in result.output

    def test_reorder(self, cli_runner, document_path):
        """Test changing goal display order."""
        result = run(cli_runner, document_path, "goal", "reorder", "Vacation Fund", "Emergency Fund")

        assert result.exit_code == 0
        assert [goal.id for goal in current(document_path).sorted_goals()] == ["goal-2", "goal-1"]

    def test_ambiguous_name(self, cli_runner, document_path):
        """Test a name shared by two goals must be given by ID."""
        run(cli_runner, document_path, "goal", "add", "Vacation Fund", "2000")
        result = run(cli_runner, document_path, "goal", "remove", "Vacation Fund")

        assert result.exit_code == 1
        assert "use the entry ID" in result.output
