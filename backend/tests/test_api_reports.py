from __future__ import annotations

import json
from datetime import date
from decimal import Decimal

import httpx
import pytest


@pytest.fixture()
async def seeded(client: httpx.AsyncClient, auth_headers: dict) -> dict:
    res = await client.post(
        "/api/v1/categories",
        headers=auth_headers,
        json={"name": "Makanan", "type": "expense", "icon": "Utensils"},
    )
    food = res.json()["data"]["id"]
    today = date.today().isoformat()
    for body in (
        {"type": "income", "amount": "5000000", "date": today, "description": "Gaji"},
        {"type": "expense", "amount": "150000", "date": today, "category_id": food,
         "description": "Makan, minum"},
        {"type": "expense", "amount": "50000", "date": "2001-01-01"},
    ):
        res = await client.post("/api/v1/transactions", headers=auth_headers, json=body)
        assert res.status_code == 201, res.text
    return {"food": food, "today": today}


async def test_report_default_range(
    client: httpx.AsyncClient, auth_headers: dict, seeded: dict
):
    res = await client.get("/api/v1/reports", headers=auth_headers)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["date_range"] == "6M"
    assert data["range_label"] == "6 Bulan"
    assert data["end_date"] == seeded["today"]
    assert data["summary"]["transaction_count"] == 2
    assert Decimal(data["summary"]["balance"]) == Decimal("4850000")
    assert data["savings_rate"] == pytest.approx(97.0)
    assert len(data["monthly"]) == 7
    assert [c["category"]["name"] for c in data["expense_by_category"]] == ["Makanan"]
    assert data["expense_by_category"][0]["percentage"] == pytest.approx(100.0)


async def test_report_all_range_starts_at_oldest(
    client: httpx.AsyncClient, auth_headers: dict, seeded: dict
):
    res = await client.get("/api/v1/reports", headers=auth_headers, params={"range": "ALL"})
    data = res.json()["data"]
    assert data["range_label"] == "Semua"
    assert data["start_date"] == "2001-01-01"
    assert data["summary"]["transaction_count"] == 3
    # uncategorized spending counts toward the total but gets no row
    [food] = data["expense_by_category"]
    assert food["category"]["name"] == "Makanan"
    assert food["percentage"] == pytest.approx(75.0)


async def test_report_invalid_range(client: httpx.AsyncClient, auth_headers: dict):
    res = await client.get("/api/v1/reports", headers=auth_headers, params={"range": "2W"})
    assert res.status_code == 422


async def test_dashboard(client: httpx.AsyncClient, auth_headers: dict, seeded: dict):
    res = await client.get("/api/v1/reports/dashboard", headers=auth_headers)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["summary"]["transaction_count"] == 2
    assert Decimal(data["summary"]["total_expense"]) == Decimal("150000")
    assert len(data["recent_transactions"]) == 2
    today = date.fromisoformat(seeded["today"])
    bucket = next(b for b in data["daily"] if b["period"] == seeded["today"])
    assert Decimal(bucket["income"]) == Decimal("5000000")
    assert len(data["daily"]) >= today.day


async def test_export_csv(client: httpx.AsyncClient, auth_headers: dict, seeded: dict):
    res = await client.get("/api/v1/reports/export", headers=auth_headers)
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/csv")
    assert "laporan-keuangan-" in res.headers["content-disposition"]
    assert res.headers["content-disposition"].endswith('.csv"')

    lines = res.text.split("\n")
    assert lines[0] == "Tanggal,Tipe,Kategori,Jumlah,Deskripsi"
    assert len(lines) == 4
    assert f'{seeded["today"]},Pengeluaran,Makanan,150000,"Makan, minum"' in lines
    assert "2001-01-01,Pengeluaran,Tanpa Kategori,50000," in lines


async def test_export_csv_respects_range(
    client: httpx.AsyncClient, auth_headers: dict, seeded: dict
):
    res = await client.get(
        "/api/v1/reports/export", headers=auth_headers, params={"range": "1M"}
    )
    lines = res.text.split("\n")
    assert len(lines) == 3
    assert not any(line.startswith("2001-01-01") for line in lines)


async def test_export_json(client: httpx.AsyncClient, auth_headers: dict, seeded: dict):
    res = await client.get(
        "/api/v1/reports/export", headers=auth_headers, params={"format": "json"}
    )
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    assert res.headers["content-disposition"].endswith('.json"')
    rows = json.loads(res.text)
    assert len(rows) == 3
    assert {r["description"] for r in rows} == {"Gaji", "Makan, minum", None}


async def test_reports_unauthorized(client: httpx.AsyncClient):
    res = await client.get("/api/v1/reports/dashboard")
    assert res.status_code == 401
