"""
Dashboard statistics.

Stats are derived from the store's current contents on every call; nothing is
cached or maintained incrementally.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, List

from launchpad.core.constants import TVL_FRACTION_DIGITS
from launchpad.models.launchpad import (
    DashboardStats,
    Participant,
    Presale,
    PresaleStatus,
    Token,
)

_TVL_QUANTUM = Decimal(1).scaleb(-TVL_FRACTION_DIGITS)


def to_decimal(amount: str) -> Decimal:
    """Parse a decimal amount string. Amounts are validated before they get here."""
    return Decimal(amount)


def format_amount(amount: Decimal) -> str:
    """Render a Decimal as a plain (non-exponent) string."""
    return format(amount, "f")


def _exact_precision(amounts: List[Decimal]) -> int:
    """Digits needed to add the amounts without rounding, plus room for the TVL quantum."""
    int_digits = frac_digits = 1
    for amount in amounts:
        int_digits = max(int_digits, amount.adjusted() + 1)
        frac_digits = max(frac_digits, -amount.as_tuple().exponent)
    return int_digits + frac_digits + len(str(len(amounts))) + TVL_FRACTION_DIGITS + 1


def sum_amounts(amounts: Iterable[Decimal]) -> Decimal:
    """Exact sum, whatever the size of the operands."""
    amounts = list(amounts)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _exact_precision(amounts))
        return sum(amounts, Decimal(0))


def quantize_tvl(amount: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + TVL_FRACTION_DIGITS + 2)
        return amount.quantize(_TVL_QUANTUM, rounding=ROUND_HALF_UP)


def compute_dashboard_stats(
    tokens: Iterable[Token],
    presales: Iterable[Presale],
    participants: Iterable[Participant],
) -> DashboardStats:
    tokens = list(tokens)
    presales = list(presales)
    participant_count = sum(1 for _ in participants)

    active = sum(1 for p in presales if p.status == PresaleStatus.ACTIVE)
    total_value_locked = sum_amounts(to_decimal(p.total_raised) for p in presales)

    return DashboardStats(
        total_tokens=len(tokens),
        active_presales=active,
        # Rough activity proxy: token creations plus contributions
        total_transactions=len(tokens) + participant_count,
        total_value_locked=format_amount(quantize_tvl(total_value_locked)),
    )
