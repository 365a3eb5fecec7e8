"""Investment metrics: NOI, cap rates, CoC return, DSCR, five-year return.

Pure functions: Decimal in, Decimal out. No I/O. Every ratio guards its
denominator and reports 0 instead of raising.
"""

import logging
from decimal import Decimal

from src.models.assumptions import RentalPropertyInputs
from src.models.results import CashFlowProjection, InvestmentMetrics
from src.engine.numeric import non_trapping

logger = logging.getLogger(__name__)

DEFAULT_SALES_EXPENSES_PCT = Decimal("7")
HOLD_YEARS = 5


def noi(gross_monthly_income: Decimal, total_monthly_expenses: Decimal) -> Decimal:
    """Annual Net Operating Income. Excludes debt service."""
    return (gross_monthly_income * 12) - (total_monthly_expenses * 12)


def total_cash_needed(inputs: RentalPropertyInputs) -> Decimal:
    """Cash out of pocket at closing: down payment, closing costs, rehab.

    An all-cash purchase, or a financed one with no down payment recorded,
    counts the full purchase price.
    """
    if inputs.is_purchasing_with_cash:
        upfront = inputs.purchase_price
    else:
        upfront = inputs.down_payment or inputs.purchase_price
    return upfront + inputs.purchase_closing_cost + inputs.repair_costs_if_rehabbing


@non_trapping
def cash_on_cash(annual_cash_flow: Decimal, cash_invested: Decimal) -> Decimal:
    """Cash-on-cash return (%) = annual cash flow / total cash invested."""
    if cash_invested <= 0:
        return Decimal("0")
    return annual_cash_flow / cash_invested * 100


@non_trapping
def cap_rate(noi_amount: Decimal, cost: Decimal) -> Decimal:
    """Cap rate (%) = NOI / cost."""
    if cost <= 0:
        return Decimal("0")
    return noi_amount / cost * 100


@non_trapping
def dscr(noi_amount: Decimal, annual_debt_service: Decimal) -> Decimal:
    """Debt Service Coverage Ratio = NOI / annual debt service.

    No debt service reports 0, not infinity.
    """
    if annual_debt_service <= 0:
        return Decimal("0")
    return noi_amount / annual_debt_service


@non_trapping
def operating_expense_ratio(
    total_monthly_expenses: Decimal, gross_monthly_income: Decimal
) -> Decimal:
    """Operating expenses as a percent of gross income."""
    if gross_monthly_income <= 0:
        return Decimal("0")
    return total_monthly_expenses / gross_monthly_income * 100


@non_trapping
def annualized_return(
    total_return: Decimal, cash_invested: Decimal, years: int = HOLD_YEARS
) -> Decimal:
    """Geometric annualized return (%) over `years`.

    A loss larger than the cash invested makes the base negative; the
    fractional power has no real value and the result is Decimal('NaN').
    """
    if cash_invested <= 0:
        return Decimal("0")

    base = 1 + total_return / cash_invested
    result = (base ** (Decimal("1") / years) - 1) * 100

    if result.is_nan():
        logger.warning(
            "Annualized return undefined: total return %s exceeds cash invested %s",
            total_return, cash_invested,
        )
    return result


@non_trapping
def compute_investment_metrics(
    inputs: RentalPropertyInputs,
    monthly_cash_flow: Decimal,
    total_monthly_expenses: Decimal,
    monthly_mortgage: Decimal,
    loan_amount: Decimal,
    projections: list[CashFlowProjection],
) -> InvestmentMetrics:
    """Summary ratios plus terminal values from the last projected month."""
    annual_cash_flow = monthly_cash_flow * 12
    noi_amount = noi(inputs.gross_monthly_income, total_monthly_expenses)
    cash_needed = total_cash_needed(inputs)
    total_investment = inputs.purchase_price + inputs.repair_costs_if_rehabbing

    final = projections[-1]
    sales_pct = inputs.sales_expenses or DEFAULT_SALES_EXPENSES_PCT
    sales_expenses = final.property_value * (sales_pct / 100)
    total_return = final.equity + final.cumulative_cash_flow - sales_expenses - cash_needed

    return InvestmentMetrics(
        annual_cash_flow=annual_cash_flow,
        net_operating_income=noi_amount,
        total_cash_needed=cash_needed,
        cash_on_cash_roi=cash_on_cash(annual_cash_flow, cash_needed),
        pro_forma_cap_rate=cap_rate(noi_amount, inputs.purchase_price),
        purchase_cap_rate=cap_rate(noi_amount, total_investment),
        debt_service_coverage_ratio=dscr(noi_amount, monthly_mortgage * 12),
        operating_expense_ratio=operating_expense_ratio(
            total_monthly_expenses, inputs.gross_monthly_income
        ),
        five_year_property_value=final.property_value,
        five_year_equity_buildup=final.equity - (total_investment - loan_amount),
        sales_expenses=sales_expenses,
        five_year_total_return=total_return,
        five_year_annualized_return=annualized_return(total_return, cash_needed),
    )
