"""SQLAlchemy ORM models for saved rental analyses."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String,
    Integer,
    Numeric,
    DateTime,
    Boolean,
    JSON,
    Uuid,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class RentalAnalysisRecord(Base):
    __tablename__ = "rental_property_analyses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id: Mapped[str] = mapped_column(String(64), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    property_address: Mapped[str] = mapped_column(String(255), default="")

    # Purchase
    purchase_price: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    purchase_closing_cost: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=0)
    is_rehabbing: Mapped[bool] = mapped_column(Boolean, default=False)
    after_repair_value: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    repair_costs: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    itemized_repair_costs: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    itemized_closing_costs: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    # Financing
    is_purchasing_with_cash: Mapped[bool] = mapped_column(Boolean, default=False)
    down_payment: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    down_payment_percent: Mapped[Decimal | None] = mapped_column(Numeric(7, 4), nullable=True)
    interest_rate: Mapped[Decimal | None] = mapped_column(Numeric(7, 4), nullable=True)
    loan_term: Mapped[int | None] = mapped_column(Integer, nullable=True)
    points_charged: Mapped[Decimal | None] = mapped_column(Numeric(7, 4), nullable=True)

    # Income
    gross_monthly_income: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    income_breakdown: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    # Expenses
    property_taxes: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    property_taxes_frequency: Mapped[str] = mapped_column(String(10), default="Annual")
    insurance: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    insurance_frequency: Mapped[str] = mapped_column(String(10), default="Annual")
    repairs_maintenance_percent: Mapped[Decimal] = mapped_column(Numeric(7, 4), default=0)
    capital_expenditures_percent: Mapped[Decimal] = mapped_column(Numeric(7, 4), default=0)
    vacancy_percent: Mapped[Decimal] = mapped_column(Numeric(7, 4), default=0)
    management_fees_percent: Mapped[Decimal] = mapped_column(Numeric(7, 4), default=0)
    electricity: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    gas: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    water_sewer: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    hoa_fees: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    garbage: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    other_expense: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)

    # Growth
    annual_property_value_growth: Mapped[Decimal | None] = mapped_column(Numeric(7, 4), nullable=True)
    annual_income_growth: Mapped[Decimal | None] = mapped_column(Numeric(7, 4), nullable=True)
    annual_expenses_growth: Mapped[Decimal | None] = mapped_column(Numeric(7, 4), nullable=True)
    sales_expenses_percent: Mapped[Decimal | None] = mapped_column(Numeric(7, 4), nullable=True)

    # Summary results (NULL when undefined, e.g. NaN annualized return)
    monthly_mortgage_payment: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    total_monthly_expenses: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    monthly_cash_flow: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    annual_cash_flow: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    net_operating_income: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    total_cash_needed: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    loan_amount: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    cash_on_cash_roi: Mapped[Decimal | None] = mapped_column(Numeric(20, 4), nullable=True)
    pro_forma_cap_rate: Mapped[Decimal | None] = mapped_column(Numeric(20, 4), nullable=True)
    purchase_cap_rate: Mapped[Decimal | None] = mapped_column(Numeric(20, 4), nullable=True)
    debt_service_coverage_ratio: Mapped[Decimal | None] = mapped_column(Numeric(20, 4), nullable=True)
    operating_expense_ratio: Mapped[Decimal | None] = mapped_column(Numeric(20, 4), nullable=True)
    five_year_annualized_return: Mapped[Decimal | None] = mapped_column(Numeric(20, 4), nullable=True)
    five_year_total_return: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    five_year_equity_buildup: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    five_year_property_value: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)

    # Full results (JSON)
    cash_flow_projections: Mapped[list | None] = mapped_column(JSON, nullable=True)
    expense_breakdown: Mapped[dict | None] = mapped_column(JSON, nullable=True)
