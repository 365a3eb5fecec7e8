"""Mortgage math: fixed monthly payment and remaining balance.

Pure functions: Decimal in, Decimal out. No I/O. Rates are annual percents
(6 means 6%). Nothing is rounded here; rounding is a display concern.
"""

from decimal import Decimal

from src.engine.numeric import non_trapping


def _monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    return annual_rate_percent / 100 / 12


@non_trapping
def monthly_payment(
    principal: Decimal, annual_rate_percent: Decimal, term_years: int
) -> Decimal:
    """Calculate fixed monthly mortgage payment.

    Returns 0 for a non-positive principal or term. A zero rate is paid off
    straight-line. A rate that makes (1+r)^n == 1 yields Infinity or NaN.
    """
    if principal <= 0 or term_years <= 0:
        return Decimal("0")

    n = term_years * 12
    if annual_rate_percent == 0:
        return principal / n

    r = _monthly_rate(annual_rate_percent)
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return principal * (r * factor) / (factor - 1)


@non_trapping
def remaining_balance(
    principal: Decimal,
    annual_rate_percent: Decimal,
    term_years: int,
    payments_made: int,
) -> Decimal:
    """Outstanding principal after `payments_made` monthly payments.

    Invalid input (negative principal, negative rate) is not rejected; it
    flows through the arithmetic.
    """
    if payments_made <= 0:
        return principal

    n = term_years * 12
    if payments_made >= n:
        return Decimal("0")

    if annual_rate_percent == 0:
        return principal - (principal / n) * payments_made

    r = _monthly_rate(annual_rate_percent)
    # B_k = P * [(1+r)^n - (1+r)^k] / [(1+r)^n - 1]
    factor_n = (1 + r) ** n
    factor_k = (1 + r) ** payments_made
    return principal * (factor_n - factor_k) / (factor_n - 1)
