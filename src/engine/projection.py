"""Five-year monthly cash flow simulation.

Growth is applied once at each year end, never compounded monthly. The
mortgage payment stays fixed for the whole horizon.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from src.models.assumptions import RentalPropertyInputs
from src.models.results import (
    CashFlowProjection,
    ExpenseSlice,
    MonthlyExpenseBreakdown,
    YearlySummary,
)
from src.engine.debt import remaining_balance
from src.engine.numeric import non_trapping

PROJECTION_YEARS = 5
MONTHS_PER_YEAR = 12


def _growth_rate(pct: Decimal | None) -> Decimal:
    return (pct or Decimal("0")) / 100


@non_trapping
def cash_flow_projections(
    inputs: RentalPropertyInputs,
    monthly_mortgage: Decimal,
    initial_monthly_expenses: Decimal,
    loan_amount: Decimal,
) -> list[CashFlowProjection]:
    """Simulate 60 months of income, expenses, amortization and equity."""
    income_growth = _growth_rate(inputs.annual_income_growth)
    expense_growth = _growth_rate(inputs.annual_expenses_growth)
    value_growth = _growth_rate(inputs.annual_property_value_growth)

    current_income = inputs.gross_monthly_income
    current_expenses = initial_monthly_expenses
    current_value = inputs.starting_property_value
    cumulative = Decimal("0")

    projections: list[CashFlowProjection] = []

    for year in range(1, PROJECTION_YEARS + 1):
        for month in range(1, MONTHS_PER_YEAR + 1):
            month_number = (year - 1) * MONTHS_PER_YEAR + month
            cash_flow = current_income - current_expenses - monthly_mortgage
            cumulative += cash_flow

            if inputs.is_purchasing_with_cash:
                loan_balance = Decimal("0")
            else:
                loan_balance = remaining_balance(
                    loan_amount,
                    inputs.effective_interest_rate,
                    inputs.effective_loan_term_years,
                    month_number,
                )

            projections.append(CashFlowProjection(
                year=year,
                month=month,
                income=current_income,
                expenses=current_expenses,
                mortgage=monthly_mortgage,
                cash_flow=cash_flow,
                cumulative_cash_flow=cumulative,
                property_value=current_value,
                loan_balance=loan_balance,
                equity=current_value - loan_balance,
            ))

        # Year-end step
        current_income *= 1 + income_growth
        current_expenses *= 1 + expense_growth
        current_value *= 1 + value_growth

    return projections


@non_trapping
def yearly_summaries(
    projections: list[CashFlowProjection],
) -> list[YearlySummary]:
    """Collapse the monthly series into one row per year for charting.

    Averages are the year's sum over 12 months; equity and property value are
    taken from the year's last month.
    """
    summaries: list[YearlySummary] = []
    years = sorted({p.year for p in projections})

    for year in years:
        months = [p for p in projections if p.year == year]
        last = months[-1]
        summaries.append(YearlySummary(
            year=year,
            average_monthly_income=sum((p.income for p in months), Decimal("0")) / MONTHS_PER_YEAR,
            average_monthly_expenses=sum((p.expenses for p in months), Decimal("0")) / MONTHS_PER_YEAR,
            monthly_mortgage=last.mortgage,
            average_monthly_cash_flow=sum((p.cash_flow for p in months), Decimal("0")) / MONTHS_PER_YEAR,
            end_of_year_equity=last.equity,
            end_of_year_property_value=last.property_value,
        ))

    return summaries


def expense_slices(breakdown: MonthlyExpenseBreakdown) -> list[ExpenseSlice]:
    """Group the monthly breakdown into pie-chart slices.

    Utilities and HOA & Other are sums of several line items. Values are
    rounded to whole dollars and empty slices are dropped.
    """
    grouped = [
        ("Property Taxes", breakdown.property_taxes),
        ("Insurance", breakdown.insurance),
        ("Repairs & Maintenance", breakdown.repairs_maintenance),
        ("Capital Expenditures", breakdown.capital_expenditures),
        ("Vacancy", breakdown.vacancy),
        ("Management Fees", breakdown.management_fees),
        ("Utilities", breakdown.electricity + breakdown.gas + breakdown.water_sewer),
        ("HOA & Other", breakdown.hoa_fees + breakdown.garbage + breakdown.other),
    ]

    slices: list[ExpenseSlice] = []
    for name, amount in grouped:
        value = amount.quantize(Decimal("1"), ROUND_HALF_UP)
        if value > 0:
            slices.append(ExpenseSlice(name=name, value=value))
    return slices
