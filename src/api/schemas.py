"""Pydantic schemas for API request/response models.

The request model is the input-normalization layer: it turns raw form text
("$76,444", "6.5%", "") into the plain Decimal record the engine consumes.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.models.assumptions import ExpenseFrequency, RentalPropertyInputs


def _strip_form_text(value: Any) -> Any:
    """'$1,200' -> '1200', '6.5%' -> '6.5', blank -> None."""
    if isinstance(value, str):
        cleaned = value.strip().replace("$", "").replace(",", "").replace("%", "").strip()
        return cleaned or None
    return value


def _zero_if_missing(value: Any) -> Any:
    value = _strip_form_text(value)
    return Decimal("0") if value is None else value


def _non_finite_to_none(value: Any) -> Any:
    if isinstance(value, Decimal) and not value.is_finite():
        return None
    return value


OptionalAmount = Annotated[Decimal | None, BeforeValidator(_strip_form_text)]
Amount = Annotated[Decimal, BeforeValidator(_zero_if_missing)]
OptionalYears = Annotated[int | None, BeforeValidator(_strip_form_text)]
Metric = Annotated[Decimal | None, BeforeValidator(_non_finite_to_none)]


# ---- Request schemas ----

class RentalAnalysisRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    property_address: str = ""

    # Purchase
    purchase_price: Amount = Decimal("0")
    purchase_closing_cost: Amount = Decimal("0")
    is_rehabbing: bool = False
    after_repair_value: OptionalAmount = None
    repair_costs: OptionalAmount = None
    itemized_repair_costs: dict[str, Decimal] | None = None
    itemized_closing_costs: dict[str, Decimal] | None = None

    # Financing
    is_purchasing_with_cash: bool = False
    down_payment: OptionalAmount = None
    down_payment_percent: OptionalAmount = None
    interest_rate: OptionalAmount = Field(None, description="Annual %, e.g. 6.5")
    loan_term: OptionalYears = Field(None, description="Years; 30 when omitted")
    points_charged: OptionalAmount = None

    # Income
    gross_monthly_income: Amount = Decimal("0")
    income_breakdown: dict[str, Decimal] | None = None

    # Expenses
    property_taxes: Amount = Decimal("0")
    property_taxes_frequency: ExpenseFrequency = ExpenseFrequency.ANNUAL
    insurance: Amount = Decimal("0")
    insurance_frequency: ExpenseFrequency = ExpenseFrequency.ANNUAL
    repairs_maintenance: Amount = Decimal("0")
    capital_expenditures: Amount = Decimal("0")
    vacancy: Amount = Decimal("0")
    management_fees: Amount = Decimal("0")
    electricity: OptionalAmount = None
    gas: OptionalAmount = None
    water_sewer: OptionalAmount = None
    hoa_fees: OptionalAmount = None
    garbage: OptionalAmount = None
    other_expense: OptionalAmount = None

    # Growth
    annual_property_value_growth: OptionalAmount = None
    annual_income_growth: OptionalAmount = None
    annual_expenses_growth: OptionalAmount = None
    sales_expenses: OptionalAmount = Field(None, description="% of sale price; 7 when omitted")

    def resolved_down_payment(self) -> Decimal | None:
        """Explicit down payment, else derived from the percent field."""
        if self.down_payment is not None:
            return self.down_payment
        if self.down_payment_percent is not None:
            return self.purchase_price * self.down_payment_percent / 100
        return None

    def to_inputs(self) -> RentalPropertyInputs:
        fields = self.model_dump()
        fields["down_payment"] = self.resolved_down_payment()
        return RentalPropertyInputs(**fields)


# ---- Response schemas ----

class ExpenseBreakdownResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    property_taxes: Decimal
    insurance: Decimal
    repairs_maintenance: Decimal
    capital_expenditures: Decimal
    vacancy: Decimal
    management_fees: Decimal
    electricity: Decimal
    gas: Decimal
    water_sewer: Decimal
    hoa_fees: Decimal
    garbage: Decimal
    other: Decimal
    total: Decimal


class CashFlowProjectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    month: int
    income: Metric
    expenses: Metric
    mortgage: Metric
    cash_flow: Metric
    cumulative_cash_flow: Metric
    property_value: Metric
    loan_balance: Metric
    equity: Metric


class YearlySummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    average_monthly_income: Metric
    average_monthly_expenses: Metric
    monthly_mortgage: Metric
    average_monthly_cash_flow: Metric
    end_of_year_equity: Metric
    end_of_year_property_value: Metric


class ExpenseSliceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    value: Decimal


class RentalAnalysisResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    # Monthly
    monthly_mortgage_payment: Metric
    total_monthly_income: Decimal
    total_monthly_expenses: Decimal
    monthly_expense_breakdown: ExpenseBreakdownResponse
    monthly_cash_flow: Metric

    # Annual
    annual_cash_flow: Metric
    net_operating_income: Decimal

    # Investment
    total_cash_needed: Decimal
    loan_amount: Decimal
    cash_on_cash_roi: Metric
    pro_forma_cap_rate: Metric
    purchase_cap_rate: Metric
    debt_service_coverage_ratio: Metric
    operating_expense_ratio: Metric

    # Five-year
    five_year_annualized_return: Metric = Field(
        None, description="null when the loss exceeds the cash invested"
    )
    five_year_total_return: Metric
    five_year_equity_buildup: Metric
    five_year_property_value: Metric

    cash_flow_projections: list[CashFlowProjectionResponse]
    yearly_summaries: list[YearlySummaryResponse] = []
    expense_slices: list[ExpenseSliceResponse] = []


class SavedAnalysisSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    property_address: str
    monthly_cash_flow: Decimal | None = None
    cash_on_cash_roi: Decimal | None = None
    five_year_annualized_return: Decimal | None = None
    total_cash_needed: Decimal | None = None


class SavedAnalysisResponse(SavedAnalysisSummaryResponse):
    purchase_price: Decimal
    gross_monthly_income: Decimal
    loan_amount: Decimal | None = None
    monthly_mortgage_payment: Decimal | None = None
    total_monthly_expenses: Decimal | None = None
    annual_cash_flow: Decimal | None = None
    net_operating_income: Decimal | None = None
    pro_forma_cap_rate: Decimal | None = None
    purchase_cap_rate: Decimal | None = None
    debt_service_coverage_ratio: Decimal | None = None
    operating_expense_ratio: Decimal | None = None
    five_year_total_return: Decimal | None = None
    five_year_equity_buildup: Decimal | None = None
    five_year_property_value: Decimal | None = None
    cash_flow_projections: list[dict] | None = None
    expense_breakdown: dict | None = None
