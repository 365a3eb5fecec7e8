"""Rental analysis orchestrator: composes the engine sub-modules.

Pure computation. No I/O. RentalPropertyInputs in, RentalPropertyResults out.
"""

import logging
from decimal import Decimal

from src.models.assumptions import RentalPropertyInputs
from src.models.results import RentalPropertyResults

from src.engine.debt import monthly_payment
from src.engine.expenses import monthly_expenses
from src.engine.projection import cash_flow_projections
from src.engine.cashflow import compute_investment_metrics
from src.engine.numeric import non_trapping

logger = logging.getLogger(__name__)


@non_trapping
def run_rental_analysis(inputs: RentalPropertyInputs) -> RentalPropertyResults:
    """Run the complete rental property analysis.

    Returns monthly, annual and five-year metrics plus the 60-month
    projection series.
    """
    # Financing
    loan_amount = inputs.loan_amount
    if inputs.is_purchasing_with_cash:
        mortgage = Decimal("0")
    else:
        mortgage = monthly_payment(
            loan_amount, inputs.effective_interest_rate, inputs.effective_loan_term_years
        )

    # Expenses & cash flow
    breakdown = monthly_expenses(inputs)
    total_expenses = breakdown.total
    monthly_cash_flow = inputs.gross_monthly_income - total_expenses - mortgage

    # Projection & metrics
    projections = cash_flow_projections(inputs, mortgage, total_expenses, loan_amount)
    metrics = compute_investment_metrics(
        inputs=inputs,
        monthly_cash_flow=monthly_cash_flow,
        total_monthly_expenses=total_expenses,
        monthly_mortgage=mortgage,
        loan_amount=loan_amount,
        projections=projections,
    )

    logger.debug(
        "Rental analysis: price=%s loan=%s mortgage=%s cash_flow=%s",
        inputs.purchase_price, loan_amount, mortgage, monthly_cash_flow,
    )

    return RentalPropertyResults(
        monthly_mortgage_payment=mortgage,
        total_monthly_income=inputs.gross_monthly_income,
        total_monthly_expenses=total_expenses,
        monthly_expense_breakdown=breakdown,
        monthly_cash_flow=monthly_cash_flow,
        annual_cash_flow=metrics.annual_cash_flow,
        net_operating_income=metrics.net_operating_income,
        total_cash_needed=metrics.total_cash_needed,
        loan_amount=loan_amount,
        cash_on_cash_roi=metrics.cash_on_cash_roi,
        pro_forma_cap_rate=metrics.pro_forma_cap_rate,
        purchase_cap_rate=metrics.purchase_cap_rate,
        five_year_annualized_return=metrics.five_year_annualized_return,
        five_year_total_return=metrics.five_year_total_return,
        five_year_equity_buildup=metrics.five_year_equity_buildup,
        five_year_property_value=metrics.five_year_property_value,
        debt_service_coverage_ratio=metrics.debt_service_coverage_ratio,
        operating_expense_ratio=metrics.operating_expense_ratio,
        cash_flow_projections=projections,
    )
