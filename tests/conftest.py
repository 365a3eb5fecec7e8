"""Canonical test fixtures used across all tests.

Financed fixture: $300K rental, $75K down, 6% rate, 30yr fixed, $2,500/mo rent.
All-cash fixture: $200K rental, $2,000/mo rent, taxes and insurance only.
"""

import pytest
from decimal import Decimal

from src.models.assumptions import ExpenseFrequency, RentalPropertyInputs


@pytest.fixture
def financed_inputs() -> RentalPropertyInputs:
    """$300K property financed with 25% down."""
    return RentalPropertyInputs(
        property_address="742 Evergreen Terrace, Springfield, OR 97477",
        purchase_price=Decimal("300000"),
        purchase_closing_cost=Decimal("6000"),
        down_payment=Decimal("75000"),
        down_payment_percent=Decimal("25"),
        interest_rate=Decimal("6"),
        loan_term=30,
        points_charged=Decimal("2"),
        gross_monthly_income=Decimal("2500"),
        property_taxes=Decimal("3600"),
        property_taxes_frequency=ExpenseFrequency.ANNUAL,
        insurance=Decimal("1200"),
        insurance_frequency=ExpenseFrequency.ANNUAL,
        repairs_maintenance=Decimal("5"),
        capital_expenditures=Decimal("5"),
        vacancy=Decimal("5"),
        management_fees=Decimal("8"),
        annual_property_value_growth=Decimal("3"),
        annual_income_growth=Decimal("2"),
        annual_expenses_growth=Decimal("2"),
        sales_expenses=Decimal("7"),
    )


@pytest.fixture
def all_cash_inputs() -> RentalPropertyInputs:
    """$200K all-cash purchase, no percentage expenses, no growth."""
    return RentalPropertyInputs(
        purchase_price=Decimal("200000"),
        is_purchasing_with_cash=True,
        gross_monthly_income=Decimal("2000"),
        property_taxes=Decimal("2400"),
        property_taxes_frequency=ExpenseFrequency.ANNUAL,
        insurance=Decimal("1200"),
        insurance_frequency=ExpenseFrequency.ANNUAL,
    )


@pytest.fixture
def catastrophic_loss_inputs() -> RentalPropertyInputs:
    """No rent and $5K/mo of expenses: losses exceed the cash invested."""
    return RentalPropertyInputs(
        purchase_price=Decimal("100000"),
        is_purchasing_with_cash=True,
        gross_monthly_income=Decimal("0"),
        other_expense=Decimal("5000"),
    )
