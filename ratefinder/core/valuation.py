"""Closed-form growing annuity valuations evaluated at a trial growth rate."""

# Rates closer than this are treated as equal to avoid a vanishing denominator.
RATE_EPSILON = 1e-9


def future_value_of_assets(
    current_value: float,
    growth_years: float,
    annual_contribution: float,
    rate: float,
) -> float:
    """Value at payout start of today's balance plus yearly contributions.

    Both compound at ``rate`` for ``growth_years`` (which may be fractional).
    At a zero rate the contribution term collapses to ``contribution * years``.
    """
    compounding = (1 + rate) ** growth_years
    grown_balance = current_value * compounding
    if abs(rate) < RATE_EPSILON:
        grown_contributions = annual_contribution * growth_years
    else:
        grown_contributions = annual_contribution * ((compounding - 1) / rate)
    return grown_balance + grown_contributions


def present_value_of_payouts(
    first_withdrawal: float,
    payout_years: int,
    income_growth_rate: float,
    rate: float,
) -> float:
    """Value at payout start of ``payout_years`` withdrawals discounted at ``rate``.

    The first withdrawal is ``first_withdrawal`` and each later one grows by
    ``income_growth_rate``. Withdrawals are taken at the end of each year.
    """
    if abs(rate - income_growth_rate) < RATE_EPSILON:
        return first_withdrawal * payout_years / (1 + income_growth_rate)

    growth_factor = (1 + income_growth_rate) / (1 + rate)
    return (first_withdrawal / (rate - income_growth_rate)) * (1 - growth_factor**payout_years)
