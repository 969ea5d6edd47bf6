"""Debt amortization: multi-debt payoff simulation and single-debt closed form.

Pure functions: entries in, dataclasses out. No I/O, no shared state; the
simulator works on private copies of the balances so both payoff policies can
be computed side by side from the same input.
"""

import logging
import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Union

from budgetdash.domain.entities import DebtEntry, PayoffPolicy

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_MONTHS = 360
MAX_HORIZON_MONTHS = 600

CENT = Decimal("0.01")
ZERO = Decimal("0")

# Balances at or below one cent are treated as paid off.
PAID_OFF_THRESHOLD = CENT

Months = Union[int, float]


def _round_currency(amount: Union[Decimal, int]) -> Decimal:
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ScheduleEntry:
    """Snapshot of all simulated debts at the end of a month."""

    month: int
    total_balance: Decimal
    interest: Decimal
    principal: Decimal
    balances: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class PayoffSchedule:
    """Month-indexed result of a payoff simulation."""

    entries: tuple[ScheduleEntry, ...]
    policy: PayoffPolicy
    horizon: int

    @property
    def months_to_debt_free(self) -> Months:
        """Month of the first entry with no balance left, or infinity."""
        for entry in self.entries:
            if entry.total_balance <= 0:
                return entry.month
        return math.inf

    @property
    def is_paid_off(self) -> bool:
        return not math.isinf(self.months_to_debt_free)

    @property
    def total_interest(self) -> Decimal:
        return _round_currency(sum((entry.interest for entry in self.entries), ZERO))

    @property
    def total_principal(self) -> Decimal:
        return _round_currency(sum((entry.principal for entry in self.entries), ZERO))

    def payoff_month(self, debt_id: str) -> Months:
        """Return the month a single debt reaches zero.

        Debts that were not simulated (zero starting balance) report 0.
        """
        for entry in self.entries:
            if entry.balances.get(debt_id, ZERO) <= 0:
                return entry.month
        return math.inf


@dataclass(frozen=True)
class PolicyComparison:
    """Independent and cascade schedules for the same debts."""

    independent: PayoffSchedule
    cascade: PayoffSchedule

    @property
    def months_saved(self) -> Months:
        independent_months = self.independent.months_to_debt_free
        cascade_months = self.cascade.months_to_debt_free
        if math.isinf(independent_months) and math.isinf(cascade_months):
            return 0
        return independent_months - cascade_months

    @property
    def interest_saved(self) -> Decimal:
        return _round_currency(
            self.independent.total_interest - self.cascade.total_interest
        )


@dataclass(frozen=True)
class DebtProjection:
    """Closed-form payoff figures for one debt row."""

    debt_id: str
    name: str
    total_payment: Decimal
    monthly_interest: Decimal
    principal_portion: Decimal
    months_to_payoff: Months
    total_interest: Decimal


def _snapshot(
    month: int,
    debts: list[DebtEntry],
    balances: list[Decimal],
    interest: Decimal,
    principal: Decimal,
) -> ScheduleEntry:
    return ScheduleEntry(
        month=month,
        total_balance=_round_currency(sum(balances, ZERO)),
        interest=_round_currency(interest),
        principal=_round_currency(principal),
        balances={debt.id: _round_currency(balance) for debt, balance in zip(debts, balances)},
    )


def simulate_payoff(
    debts: Iterable[DebtEntry],
    horizon: int = DEFAULT_HORIZON_MONTHS,
    policy: PayoffPolicy = PayoffPolicy.INDEPENDENT,
) -> PayoffSchedule:
    """Simulate monthly interest and payments until every debt is paid off.

    Each month every open debt accrues interest and then receives its own
    minimum plus extra payment, capped at the outstanding balance. Under the
    cascade policy the committed payments of debts closed in earlier months
    are pooled and added to the lowest-order debt still open.

    Args:
        debts: Debt entries; zero-balance debts are skipped
        horizon: Maximum number of months to simulate
        policy: Payment allocation policy

    Returns:
        PayoffSchedule starting with a month 0 snapshot of the starting balances
    """
    policy = PayoffPolicy(policy)
    horizon = max(0, min(int(horizon), MAX_HORIZON_MONTHS))

    active = sorted(
        (debt for debt in debts if _round_currency(debt.balance) > 0),
        key=lambda debt: debt.order,
    )
    balances = [_round_currency(debt.balance) for debt in active]
    entries = [_snapshot(0, active, balances, ZERO, ZERO)]

    released_payments = ZERO
    month = 0
    while month < horizon and any(balance > 0 for balance in balances):
        month += 1
        open_indexes = [i for i, balance in enumerate(balances) if balance > 0]
        rollover_index = open_indexes[0] if policy is PayoffPolicy.CASCADE else None

        month_interest = ZERO
        month_principal = ZERO
        closed_indexes = []

        for i in open_indexes:
            debt = active[i]
            interest = _round_currency(balances[i] * debt.monthly_rate)
            balance = _round_currency(balances[i] + interest)

            payment = debt.total_payment
            if i == rollover_index:
                payment += released_payments

            paid = min(payment, balance)
            balance = _round_currency(balance - paid)
            if balance <= PAID_OFF_THRESHOLD:
                paid += balance
                balance = ZERO
                closed_indexes.append(i)

            balances[i] = balance
            month_interest += interest
            month_principal += paid

        if policy is PayoffPolicy.CASCADE:
            released_payments += sum(
                (active[i].total_payment for i in closed_indexes), ZERO
            )

        entries.append(
            _snapshot(month, active, balances, month_interest, month_principal)
        )

    schedule = PayoffSchedule(entries=tuple(entries), policy=policy, horizon=horizon)
    logger.debug(
        "Simulated %d debts over %d months (%s policy), debt-free at %s",
        len(active),
        month,
        policy.value,
        schedule.months_to_debt_free,
    )
    return schedule


def months_to_debt_free(
    debts: Iterable[DebtEntry],
    policy: PayoffPolicy = PayoffPolicy.INDEPENDENT,
    horizon: int = DEFAULT_HORIZON_MONTHS,
) -> Months:
    """Return months until every debt is paid off, or infinity."""
    return simulate_payoff(debts, horizon=horizon, policy=policy).months_to_debt_free


def total_interest_to_pay(
    debts: Iterable[DebtEntry],
    policy: PayoffPolicy = PayoffPolicy.INDEPENDENT,
    horizon: int = DEFAULT_HORIZON_MONTHS,
) -> Decimal:
    """Return interest accrued across the simulated schedule."""
    return simulate_payoff(debts, horizon=horizon, policy=policy).total_interest


def compare_policies(
    debts: Iterable[DebtEntry], horizon: int = DEFAULT_HORIZON_MONTHS
) -> PolicyComparison:
    """Run both payoff policies over the same debts."""
    debts = list(debts)
    return PolicyComparison(
        independent=simulate_payoff(debts, horizon, PayoffPolicy.INDEPENDENT),
        cascade=simulate_payoff(debts, horizon, PayoffPolicy.CASCADE),
    )


def monthly_interest(balance: Decimal, annual_rate: Decimal) -> Decimal:
    """Interest accrued in one month at an annual percentage rate."""
    return balance * (annual_rate / 100) / 12


def months_to_payoff(balance: Decimal, annual_rate: Decimal, monthly_payment: Decimal) -> Months:
    """Months to pay off one debt with a fixed monthly payment.

    Uses n = -ln(1 - r*B/P) / ln(1 + r). A payment that does not cover the
    monthly interest never pays the debt off and yields infinity.
    """
    if monthly_payment <= 0 or balance <= 0:
        return math.inf

    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        return math.ceil(balance / monthly_payment)

    if monthly_payment <= balance * monthly_rate:
        return math.inf

    months = -(1 - monthly_rate * balance / monthly_payment).ln() / (1 + monthly_rate).ln()
    return math.ceil(months)


def total_interest_paid(balance: Decimal, annual_rate: Decimal, monthly_payment: Decimal) -> Decimal:
    """Total interest paid over the life of one debt."""
    if monthly_payment <= 0 or balance <= 0:
        return ZERO

    months = months_to_payoff(balance, annual_rate, monthly_payment)
    if math.isinf(months):
        return Decimal("Infinity")

    return max(ZERO, monthly_payment * months - balance)


def project_debt(debt: DebtEntry) -> DebtProjection:
    """Build the closed-form payoff figures shown next to a debt."""
    payment = debt.total_payment
    interest = monthly_interest(debt.balance, debt.interest_rate)
    return DebtProjection(
        debt_id=debt.id,
        name=debt.name,
        total_payment=payment,
        monthly_interest=interest,
        principal_portion=max(ZERO, payment - interest),
        months_to_payoff=months_to_payoff(debt.balance, debt.interest_rate, payment),
        total_interest=total_interest_paid(debt.balance, debt.interest_rate, payment),
    )
