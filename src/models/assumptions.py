from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

DEFAULT_LOAN_TERM_YEARS = 30


class ExpenseFrequency(str, Enum):
    ANNUAL = "Annual"
    MONTHLY = "Monthly"


@dataclass(frozen=True)
class RentalPropertyInputs:
    """Normalized inputs for a prospective rental purchase.

    Percentages are whole-number percents (6 means 6%). Currency is Decimal
    dollars. Parsing raw form text into this record is the caller's job.
    """

    # Purchase
    purchase_price: Decimal
    purchase_closing_cost: Decimal = Decimal("0")
    is_rehabbing: bool = False
    after_repair_value: Decimal | None = None
    repair_costs: Decimal | None = None

    # Financing
    is_purchasing_with_cash: bool = False
    down_payment: Decimal | None = None
    down_payment_percent: Decimal | None = None  # Informational; see loan_amount
    interest_rate: Decimal | None = None  # Annual %
    loan_term: int | None = None  # Years
    points_charged: Decimal | None = None  # Stored, not used in the math

    # Income
    gross_monthly_income: Decimal = Decimal("0")

    # Expenses
    property_taxes: Decimal = Decimal("0")
    property_taxes_frequency: ExpenseFrequency = ExpenseFrequency.ANNUAL
    insurance: Decimal = Decimal("0")
    insurance_frequency: ExpenseFrequency = ExpenseFrequency.ANNUAL
    repairs_maintenance: Decimal = Decimal("0")  # % of gross income
    capital_expenditures: Decimal = Decimal("0")  # % of gross income
    vacancy: Decimal = Decimal("0")  # % of gross income
    management_fees: Decimal = Decimal("0")  # % of gross income
    electricity: Decimal | None = None  # Monthly
    gas: Decimal | None = None
    water_sewer: Decimal | None = None
    hoa_fees: Decimal | None = None
    garbage: Decimal | None = None
    other_expense: Decimal | None = None

    # Growth (annual %)
    annual_property_value_growth: Decimal | None = None
    annual_income_growth: Decimal | None = None
    annual_expenses_growth: Decimal | None = None
    sales_expenses: Decimal | None = None  # % of terminal sale price

    # Carried through for persistence only
    property_address: str = ""
    itemized_repair_costs: dict[str, Decimal] | None = None
    itemized_closing_costs: dict[str, Decimal] | None = None
    income_breakdown: dict[str, Decimal] | None = None

    @property
    def loan_amount(self) -> Decimal:
        if self.is_purchasing_with_cash:
            return Decimal("0")
        return self.purchase_price - (self.down_payment or Decimal("0"))

    @property
    def repair_costs_if_rehabbing(self) -> Decimal:
        if not self.is_rehabbing:
            return Decimal("0")
        return self.repair_costs or Decimal("0")

    @property
    def starting_property_value(self) -> Decimal:
        """ARV when rehabbing with an ARV on hand, otherwise purchase price."""
        if self.is_rehabbing and self.after_repair_value:
            return self.after_repair_value
        return self.purchase_price

    @property
    def effective_interest_rate(self) -> Decimal:
        return self.interest_rate or Decimal("0")

    @property
    def effective_loan_term_years(self) -> int:
        return self.loan_term or DEFAULT_LOAN_TERM_YEARS
