"""Rental analysis routes: the primary API entry point."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.schemas import (
    RentalAnalysisRequest,
    RentalAnalysisResponse,
    ExpenseBreakdownResponse,
    CashFlowProjectionResponse,
    YearlySummaryResponse,
    ExpenseSliceResponse,
    SavedAnalysisResponse,
    SavedAnalysisSummaryResponse,
)
from src.api.deps import get_db, get_owner_id
from src.data import analysis_store
from src.data.analysis_store import AnalysisNotFoundError
from src.engine.proforma import run_rental_analysis
from src.engine.projection import expense_slices, yearly_summaries
from src.models.results import RentalPropertyResults

router = APIRouter(prefix="/api/v1/rental", tags=["rental"])


def _result_to_response(result: RentalPropertyResults) -> RentalAnalysisResponse:
    """Convert engine RentalPropertyResults to API response."""
    return RentalAnalysisResponse(
        monthly_mortgage_payment=result.monthly_mortgage_payment,
        total_monthly_income=result.total_monthly_income,
        total_monthly_expenses=result.total_monthly_expenses,
        monthly_expense_breakdown=ExpenseBreakdownResponse.model_validate(
            result.monthly_expense_breakdown
        ),
        monthly_cash_flow=result.monthly_cash_flow,
        annual_cash_flow=result.annual_cash_flow,
        net_operating_income=result.net_operating_income,
        total_cash_needed=result.total_cash_needed,
        loan_amount=result.loan_amount,
        cash_on_cash_roi=result.cash_on_cash_roi,
        pro_forma_cap_rate=result.pro_forma_cap_rate,
        purchase_cap_rate=result.purchase_cap_rate,
        debt_service_coverage_ratio=result.debt_service_coverage_ratio,
        operating_expense_ratio=result.operating_expense_ratio,
        five_year_annualized_return=result.five_year_annualized_return,
        five_year_total_return=result.five_year_total_return,
        five_year_equity_buildup=result.five_year_equity_buildup,
        five_year_property_value=result.five_year_property_value,
        cash_flow_projections=[
            CashFlowProjectionResponse.model_validate(p)
            for p in result.cash_flow_projections
        ],
        yearly_summaries=[
            YearlySummaryResponse.model_validate(s)
            for s in yearly_summaries(result.cash_flow_projections)
        ],
        expense_slices=[
            ExpenseSliceResponse.model_validate(s)
            for s in expense_slices(result.monthly_expense_breakdown)
        ],
    )


@router.post("/analyze", response_model=RentalAnalysisResponse)
async def analyze(req: RentalAnalysisRequest):
    """Inputs → full analysis. Nothing is stored."""
    result = run_rental_analysis(req.to_inputs())
    return _result_to_response(result)


@router.post("/analyses", response_model=SavedAnalysisResponse, status_code=201)
async def save(
    req: RentalAnalysisRequest,
    owner_id: str = Depends(get_owner_id),
    db: AsyncSession = Depends(get_db),
):
    """Run the analysis server-side and save inputs + results."""
    inputs = req.to_inputs()
    result = run_rental_analysis(inputs)
    return await analysis_store.save_analysis(db, owner_id, inputs, result)


@router.get("/analyses", response_model=list[SavedAnalysisSummaryResponse])
async def list_saved(
    owner_id: str = Depends(get_owner_id),
    db: AsyncSession = Depends(get_db),
):
    return await analysis_store.list_analyses(db, owner_id)


@router.get("/analyses/{analysis_id}", response_model=SavedAnalysisResponse)
async def get_saved(
    analysis_id: UUID,
    owner_id: str = Depends(get_owner_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await analysis_store.get_analysis(db, owner_id, analysis_id)
    except AnalysisNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/analyses/{analysis_id}", response_model=SavedAnalysisResponse)
async def update_saved(
    analysis_id: UUID,
    req: RentalAnalysisRequest,
    owner_id: str = Depends(get_owner_id),
    db: AsyncSession = Depends(get_db),
):
    inputs = req.to_inputs()
    result = run_rental_analysis(inputs)
    try:
        return await analysis_store.update_analysis(db, owner_id, analysis_id, inputs, result)
    except AnalysisNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/analyses/{analysis_id}", status_code=204)
async def delete_saved(
    analysis_id: UUID,
    owner_id: str = Depends(get_owner_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        await analysis_store.delete_analysis(db, owner_id, analysis_id)
    except AnalysisNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
