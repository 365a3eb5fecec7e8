"""Monthly operating expense breakdown.

Pure functions. No I/O.
"""

from decimal import Decimal

from src.models.assumptions import ExpenseFrequency, RentalPropertyInputs
from src.models.results import MonthlyExpenseBreakdown


def to_monthly(amount: Decimal, frequency: ExpenseFrequency) -> Decimal:
    """Annual amounts are spread over 12 months; monthly amounts pass through."""
    if frequency == ExpenseFrequency.ANNUAL:
        return amount / 12
    return amount


def _pct_of_income(inputs: RentalPropertyInputs, pct: Decimal) -> Decimal:
    return inputs.gross_monthly_income * (pct / 100)


def monthly_expenses(inputs: RentalPropertyInputs) -> MonthlyExpenseBreakdown:
    """Normalize every expense input into one monthly breakdown.

    Repairs, capex, vacancy and management scale with gross monthly income,
    not with property value or the other expenses.
    """
    zero = Decimal("0")

    items = {
        "property_taxes": to_monthly(inputs.property_taxes, inputs.property_taxes_frequency),
        "insurance": to_monthly(inputs.insurance, inputs.insurance_frequency),
        "repairs_maintenance": _pct_of_income(inputs, inputs.repairs_maintenance),
        "capital_expenditures": _pct_of_income(inputs, inputs.capital_expenditures),
        "vacancy": _pct_of_income(inputs, inputs.vacancy),
        "management_fees": _pct_of_income(inputs, inputs.management_fees),
        "electricity": inputs.electricity or zero,
        "gas": inputs.gas or zero,
        "water_sewer": inputs.water_sewer or zero,
        "hoa_fees": inputs.hoa_fees or zero,
        "garbage": inputs.garbage or zero,
        "other": inputs.other_expense or zero,
    }

    return MonthlyExpenseBreakdown(**items, total=sum(items.values(), zero))
