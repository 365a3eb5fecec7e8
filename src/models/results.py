from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class MonthlyExpenseBreakdown:
    property_taxes: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")

    # Percentage-of-income
    repairs_maintenance: Decimal = Decimal("0")
    capital_expenditures: Decimal = Decimal("0")
    vacancy: Decimal = Decimal("0")
    management_fees: Decimal = Decimal("0")

    # Fixed monthly
    electricity: Decimal = Decimal("0")
    gas: Decimal = Decimal("0")
    water_sewer: Decimal = Decimal("0")
    hoa_fees: Decimal = Decimal("0")
    garbage: Decimal = Decimal("0")
    other: Decimal = Decimal("0")

    total: Decimal = Decimal("0")  # Sum of every field above


@dataclass(frozen=True)
class CashFlowProjection:
    year: int  # 1-5
    month: int  # 1-12 within the year
    income: Decimal
    expenses: Decimal
    mortgage: Decimal
    cash_flow: Decimal  # income - expenses - mortgage
    cumulative_cash_flow: Decimal
    property_value: Decimal
    loan_balance: Decimal
    equity: Decimal  # property_value - loan_balance


@dataclass(frozen=True)
class YearlySummary:
    """One projection year collapsed for charting."""
    year: int
    average_monthly_income: Decimal
    average_monthly_expenses: Decimal
    monthly_mortgage: Decimal
    average_monthly_cash_flow: Decimal
    end_of_year_equity: Decimal
    end_of_year_property_value: Decimal


@dataclass(frozen=True)
class ExpenseSlice:
    """One pie-chart slice of the monthly expense breakdown."""
    name: str
    value: Decimal  # Whole dollars


@dataclass
class InvestmentMetrics:
    annual_cash_flow: Decimal = Decimal("0")
    net_operating_income: Decimal = Decimal("0")  # Excludes debt service
    total_cash_needed: Decimal = Decimal("0")

    # Ratios, all in percent except DSCR
    cash_on_cash_roi: Decimal = Decimal("0")
    pro_forma_cap_rate: Decimal = Decimal("0")
    purchase_cap_rate: Decimal = Decimal("0")
    debt_service_coverage_ratio: Decimal = Decimal("0")
    operating_expense_ratio: Decimal = Decimal("0")

    # Terminal (end of month 60)
    five_year_property_value: Decimal = Decimal("0")
    five_year_equity_buildup: Decimal = Decimal("0")
    sales_expenses: Decimal = Decimal("0")
    five_year_total_return: Decimal = Decimal("0")
    five_year_annualized_return: Decimal = Decimal("0")  # NaN on catastrophic loss


@dataclass
class RentalPropertyResults:
    # Monthly
    monthly_mortgage_payment: Decimal = Decimal("0")
    total_monthly_income: Decimal = Decimal("0")
    total_monthly_expenses: Decimal = Decimal("0")
    monthly_expense_breakdown: MonthlyExpenseBreakdown = field(
        default_factory=MonthlyExpenseBreakdown
    )
    monthly_cash_flow: Decimal = Decimal("0")

    # Annual
    annual_cash_flow: Decimal = Decimal("0")
    net_operating_income: Decimal = Decimal("0")

    # Investment
    total_cash_needed: Decimal = Decimal("0")
    loan_amount: Decimal = Decimal("0")
    cash_on_cash_roi: Decimal = Decimal("0")
    pro_forma_cap_rate: Decimal = Decimal("0")
    purchase_cap_rate: Decimal = Decimal("0")

    # Five-year
    five_year_annualized_return: Decimal = Decimal("0")
    five_year_total_return: Decimal = Decimal("0")
    five_year_equity_buildup: Decimal = Decimal("0")
    five_year_property_value: Decimal = Decimal("0")

    debt_service_coverage_ratio: Decimal = Decimal("0")
    operating_expense_ratio: Decimal = Decimal("0")

    # Full monthly series, kept for charting
    cash_flow_projections: list[CashFlowProjection] = field(default_factory=list)
