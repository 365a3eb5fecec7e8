import asyncio
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from src.api.app import app
from src.api.deps import get_db
from src.models.db import Base

FINANCED_FORM = {
    "propertyAddress": "742 Evergreen Terrace",
    "purchasePrice": "$300,000",
    "purchaseClosingCost": "6,000",
    "downPaymentPercent": "25",
    "interestRate": "6",
    "loanTerm": "30",
    "grossMonthlyIncome": "2,500",
    "propertyTaxes": "3600",
    "propertyTaxesFrequency": "Annual",
    "insurance": "1200",
    "insuranceFrequency": "Annual",
    "repairsMaintenance": "5",
    "capitalExpenditures": "5",
    "vacancy": "5",
    "managementFees": "8",
}


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_client(tmp_path):
    """Client whose saved-analysis routes hit a throwaway SQLite file."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'analyses.db'}"

    async def create_tables():
        engine = create_async_engine(url, poolclass=NullPool)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        await engine.dispose()

    asyncio.run(create_tables())

    async def override_get_db():
        engine = create_async_engine(url, poolclass=NullPool)
        try:
            async with async_sessionmaker(engine, expire_on_commit=False)() as session:
                yield session
        finally:
            await engine.dispose()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestAnalyze:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_financed(self, client):
        resp = client.post("/api/v1/rental/analyze", json=FINANCED_FORM)
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["loan_amount"]) == Decimal("225000")
        assert Decimal(data["monthly_mortgage_payment"]).quantize(Decimal("0.01")) == Decimal("1348.99")
        assert Decimal(data["total_cash_needed"]) == Decimal("81000")
        assert Decimal(data["monthly_expense_breakdown"]["total"]) == Decimal("975")
        assert len(data["cash_flow_projections"]) == 60
        assert [y["year"] for y in data["yearly_summaries"]] == [1, 2, 3, 4, 5]

    def test_catastrophic_loss_returns_null(self, client):
        resp = client.post("/api/v1/rental/analyze", json={
            "purchasePrice": "100000",
            "isPurchasingWithCash": True,
            "otherExpense": "5000",
        })
        assert resp.status_code == 200
        assert resp.json()["five_year_annualized_return"] is None

    def test_degenerate_rate_returns_null(self, client):
        resp = client.post("/api/v1/rental/analyze", json={**FINANCED_FORM, "interestRate": "-2400"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["monthly_mortgage_payment"] is None
        assert data["five_year_annualized_return"] is None
        assert data["cash_flow_projections"][11]["loan_balance"] is None

    def test_expense_slices(self, client):
        data = client.post("/api/v1/rental/analyze", json=FINANCED_FORM).json()
        slices = {s["name"]: Decimal(s["value"]) for s in data["expense_slices"]}
        assert slices == {
            "Property Taxes": Decimal("300"),
            "Insurance": Decimal("100"),
            "Repairs & Maintenance": Decimal("125"),
            "Capital Expenditures": Decimal("125"),
            "Vacancy": Decimal("125"),
            "Management Fees": Decimal("200"),
        }

    def test_malformed_number(self, client):
        resp = client.post("/api/v1/rental/analyze", json={"purchasePrice": "three hundred"})
        assert resp.status_code == 422


class TestSavedAnalyses:
    def test_requires_user(self, client):
        assert client.get("/api/v1/rental/analyses").status_code == 401

    def test_save_list_get_delete(self, db_client):
        headers = {"X-User-Id": "user-1"}
        created = db_client.post("/api/v1/rental/analyses", json=FINANCED_FORM, headers=headers)
        assert created.status_code == 201
        analysis_id = created.json()["id"]
        assert Decimal(created.json()["total_cash_needed"]) == Decimal("81000")

        listed = db_client.get("/api/v1/rental/analyses", headers=headers).json()
        assert [a["id"] for a in listed] == [analysis_id]

        fetched = db_client.get(f"/api/v1/rental/analyses/{analysis_id}", headers=headers)
        assert fetched.status_code == 200
        assert len(fetched.json()["cash_flow_projections"]) == 60

        deleted = db_client.delete(f"/api/v1/rental/analyses/{analysis_id}", headers=headers)
        assert deleted.status_code == 204
        assert db_client.get("/api/v1/rental/analyses", headers=headers).json() == []

    def test_other_owner_gets_404(self, db_client):
        created = db_client.post(
            "/api/v1/rental/analyses", json=FINANCED_FORM, headers={"X-User-Id": "user-1"}
        )
        analysis_id = created.json()["id"]
        resp = db_client.get(
            f"/api/v1/rental/analyses/{analysis_id}", headers={"X-User-Id": "user-2"}
        )
        assert resp.status_code == 404

    def test_update(self, db_client):
        headers = {"X-User-Id": "user-1"}
        created = db_client.post("/api/v1/rental/analyses", json=FINANCED_FORM, headers=headers)
        analysis_id = created.json()["id"]
        resp = db_client.put(
            f"/api/v1/rental/analyses/{analysis_id}",
            json={**FINANCED_FORM, "grossMonthlyIncome": "3000"},
            headers=headers,
        )
        assert resp.status_code == 200
        assert Decimal(resp.json()["gross_monthly_income"]) == Decimal("3000")
