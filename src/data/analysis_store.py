"""Persistence of saved rental analyses.

Thin adapter around the engine's plain data: shapes inputs + results into a
RentalAnalysisRecord row and runs owner-scoped queries. The engine never
touches this module.
"""

import logging
import uuid
from dataclasses import asdict
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.assumptions import RentalPropertyInputs
from src.models.db import RentalAnalysisRecord
from src.models.results import RentalPropertyResults

logger = logging.getLogger(__name__)


class AnalysisNotFoundError(LookupError):
    """No saved analysis with this id belongs to the owner."""


def _json_safe(value):
    """Decimals -> floats (NaN, Infinity -> None) so the value fits a JSON column."""
    if isinstance(value, Decimal):
        return float(value) if value.is_finite() else None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


def _summary(value: Decimal) -> Decimal | None:
    return value if value.is_finite() else None


def _record_fields(
    inputs: RentalPropertyInputs, results: RentalPropertyResults
) -> dict:
    return {
        "property_address": inputs.property_address,
        # Purchase
        "purchase_price": inputs.purchase_price,
        "purchase_closing_cost": inputs.purchase_closing_cost,
        "is_rehabbing": inputs.is_rehabbing,
        "after_repair_value": inputs.after_repair_value,
        "repair_costs": inputs.repair_costs,
        "itemized_repair_costs": _json_safe(inputs.itemized_repair_costs),
        "itemized_closing_costs": _json_safe(inputs.itemized_closing_costs),
        # Financing
        "is_purchasing_with_cash": inputs.is_purchasing_with_cash,
        "down_payment": inputs.down_payment,
        "down_payment_percent": inputs.down_payment_percent,
        "interest_rate": inputs.interest_rate,
        "loan_term": inputs.loan_term,
        "points_charged": inputs.points_charged,
        # Income
        "gross_monthly_income": inputs.gross_monthly_income,
        "income_breakdown": _json_safe(inputs.income_breakdown),
        # Expenses
        "property_taxes": inputs.property_taxes,
        "property_taxes_frequency": inputs.property_taxes_frequency.value,
        "insurance": inputs.insurance,
        "insurance_frequency": inputs.insurance_frequency.value,
        "repairs_maintenance_percent": inputs.repairs_maintenance,
        "capital_expenditures_percent": inputs.capital_expenditures,
        "vacancy_percent": inputs.vacancy,
        "management_fees_percent": inputs.management_fees,
        "electricity": inputs.electricity,
        "gas": inputs.gas,
        "water_sewer": inputs.water_sewer,
        "hoa_fees": inputs.hoa_fees,
        "garbage": inputs.garbage,
        "other_expense": inputs.other_expense,
        # Growth
        "annual_property_value_growth": inputs.annual_property_value_growth,
        "annual_income_growth": inputs.annual_income_growth,
        "annual_expenses_growth": inputs.annual_expenses_growth,
        "sales_expenses_percent": inputs.sales_expenses,
        # Results
        "monthly_mortgage_payment": _summary(results.monthly_mortgage_payment),
        "total_monthly_expenses": _summary(results.total_monthly_expenses),
        "monthly_cash_flow": _summary(results.monthly_cash_flow),
        "annual_cash_flow": _summary(results.annual_cash_flow),
        "net_operating_income": _summary(results.net_operating_income),
        "total_cash_needed": _summary(results.total_cash_needed),
        "loan_amount": _summary(results.loan_amount),
        "cash_on_cash_roi": _summary(results.cash_on_cash_roi),
        "pro_forma_cap_rate": _summary(results.pro_forma_cap_rate),
        "purchase_cap_rate": _summary(results.purchase_cap_rate),
        "debt_service_coverage_ratio": _summary(results.debt_service_coverage_ratio),
        "operating_expense_ratio": _summary(results.operating_expense_ratio),
        "five_year_annualized_return": _summary(results.five_year_annualized_return),
        "five_year_total_return": _summary(results.five_year_total_return),
        "five_year_equity_buildup": _summary(results.five_year_equity_buildup),
        "five_year_property_value": _summary(results.five_year_property_value),
        "cash_flow_projections": _json_safe(
            [asdict(p) for p in results.cash_flow_projections]
        ),
        "expense_breakdown": _json_safe(asdict(results.monthly_expense_breakdown)),
    }


def analysis_to_record(
    owner_id: str,
    inputs: RentalPropertyInputs,
    results: RentalPropertyResults,
) -> RentalAnalysisRecord:
    """Shape one analysis into a database row."""
    return RentalAnalysisRecord(owner_id=owner_id, **_record_fields(inputs, results))


async def save_analysis(
    session: AsyncSession,
    owner_id: str,
    inputs: RentalPropertyInputs,
    results: RentalPropertyResults,
) -> RentalAnalysisRecord:
    record = analysis_to_record(owner_id, inputs, results)
    session.add(record)
    await session.commit()
    await session.refresh(record)
    logger.info("Saved rental analysis %s for owner %s", record.id, owner_id)
    return record


async def list_analyses(
    session: AsyncSession, owner_id: str
) -> list[RentalAnalysisRecord]:
    """All analyses for an owner, newest first."""
    stmt = (
        select(RentalAnalysisRecord)
        .where(RentalAnalysisRecord.owner_id == owner_id)
        .order_by(RentalAnalysisRecord.created_at.desc())
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_analysis(
    session: AsyncSession, owner_id: str, analysis_id: uuid.UUID
) -> RentalAnalysisRecord:
    stmt = select(RentalAnalysisRecord).where(
        RentalAnalysisRecord.id == analysis_id,
        RentalAnalysisRecord.owner_id == owner_id,
    )
    record = (await session.execute(stmt)).scalar_one_or_none()
    if record is None:
        raise AnalysisNotFoundError(f"Analysis {analysis_id} not found")
    return record


async def update_analysis(
    session: AsyncSession,
    owner_id: str,
    analysis_id: uuid.UUID,
    inputs: RentalPropertyInputs,
    results: RentalPropertyResults,
) -> RentalAnalysisRecord:
    record = await get_analysis(session, owner_id, analysis_id)
    for name, value in _record_fields(inputs, results).items():
        setattr(record, name, value)
    await session.commit()
    await session.refresh(record)
    logger.info("Updated rental analysis %s", analysis_id)
    return record


async def delete_analysis(
    session: AsyncSession, owner_id: str, analysis_id: uuid.UUID
) -> None:
    record = await get_analysis(session, owner_id, analysis_id)
    await session.delete(record)
    await session.commit()
    logger.info("Deleted rental analysis %s", analysis_id)
