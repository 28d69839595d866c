"""Year-by-year payout projection at a fixed growth rate."""

from __future__ import annotations

from typing import Iterator, List

from ratefinder.models import YearRecord


def _iter_payout_years(
    starting_balance: float,
    payout_years: int,
    rate: float,
    first_year_withdrawal: float,
    income_growth_rate: float,
) -> Iterator[YearRecord]:
    balance = starting_balance
    withdrawal = first_year_withdrawal
    for year in range(1, payout_years + 1):
        # growth on the starting balance, withdrawal at year end
        growth_amount = balance * rate
        ending_balance = balance + growth_amount - withdrawal
        yield YearRecord(
            year=year,
            starting_balance=balance,
            growth_amount=growth_amount,
            withdrawal=withdrawal,
            ending_balance=ending_balance,
        )
        balance = ending_balance
        withdrawal *= 1 + income_growth_rate


def compute_yearly_schedule(
    starting_balance: float,
    payout_years: int,
    rate: float,
    first_year_withdrawal: float,
    income_growth_rate: float,
) -> List[YearRecord]:
    """
    Project the balance through every payout year.

    Balances are not clamped at zero: a negative ending balance means the
    plan runs out before the last withdrawal.
    """
    return list(
        _iter_payout_years(
            starting_balance, payout_years, rate, first_year_withdrawal, income_growth_rate
        )
    )
