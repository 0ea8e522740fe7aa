"""
Tests for the HTTP API.
"""

from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from autocare.application.use_cases.split_payment import SplitPaymentUseCase
from autocare.application.use_cases.wallet import WalletUseCase
from autocare.infrastructure.store.memory_wallet_store import MemoryWalletStore
from autocare.main import app
from autocare.wiring.dependencies import get_split_payment_use_case

client = TestClient(app)


def _user() -> str:
    return f"user-{uuid.uuid4().hex[:8]}"


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_quote_basic_wash():
    response = client.post("/api/v1/pricing/quote", json={"service_id": "basic-wash", "category": "wash"})

    assert response.status_code == 200
    data = response.json()
    assert data["service_name"] == "basic-wash"
    assert data["discount"] == 0
    assert data["taxes"] == 3582
    assert data["total"] == 23482
    assert data["formatted"]["total"] == "₹234"
    assert data["formatted"]["base_price"] == "₹199"


def test_quote_with_promo():
    response = client.post(
        "/api/v1/pricing/quote",
        json={"service_id": "basic-wash", "category": "wash", "promo_code": "first20"},
    )

    assert response.status_code == 200
    assert response.json()["discount"] == 3980


def test_quote_unknown_service_is_404():
    response = client.post("/api/v1/pricing/quote", json={"service_id": "moon-wash", "category": "wash"})

    assert response.status_code == 404
    assert "moon-wash" in response.json()["detail"]


def test_quote_unknown_category_is_422():
    response = client.post("/api/v1/pricing/quote", json={"service_id": "basic-wash", "category": "bodyshop"})
    assert response.status_code == 422


def test_list_services():
    response = client.get("/api/v1/services/mechanic")

    assert response.status_code == 200
    data = response.json()
    assert data[0]["service_id"] == "emergency-roadside"
    assert data[0]["base_price"] == 29900
    assert data[0]["formatted_price"] == "₹299"
    assert {item["category"] for item in data} == {"mechanic"}


def test_wallet_top_up_and_read():
    user_id = _user()

    response = client.post(f"/api/v1/wallets/{user_id}/top-up", json={"amount": "150.50"})
    assert response.status_code == 200
    assert response.json()["balance"] == 15050

    response = client.get(f"/api/v1/wallets/{user_id}")
    assert response.json()["balance"] == 15050
    assert response.json()["formatted_balance"] == "₹150"


def test_wallet_top_up_invalid_amount_is_400():
    response = client.post(f"/api/v1/wallets/{_user()}/top-up", json={"amount": "-10"})
    assert response.status_code == 400


def test_split_endpoint():
    response = client.post(
        "/api/v1/payments/split",
        json={"total": 23482, "wallet_balance": 10000},
    )

    assert response.status_code == 200
    assert response.json() == {
        "wallet_amount": 10000,
        "card_amount": 13482,
        "max_wallet_usage": 10000,
        "label": "Pay ₹134 + Use Wallet",
    }


def test_split_endpoint_with_typed_rupees():
    response = client.post(
        "/api/v1/payments/split",
        json={"total": 23482, "wallet_balance": 10000, "wallet_input": "25"},
    )
    assert response.json()["wallet_amount"] == 2500


def test_checkout_pays_fully_from_wallet():
    user_id = _user()
    client.post(f"/api/v1/wallets/{user_id}/top-up", json={"amount": "300"})

    response = client.post("/api/v1/payments/checkout", json={"user_id": user_id, "total": 23482})

    assert response.status_code == 200
    data = response.json()
    assert data["wallet_amount"] == 23482
    assert data["card_amount"] == 0
    assert data["method"] == "wallet"
    assert data["wallet_balance"] == 30000 - 23482
    assert data["label"] == "Pay from Wallet"


def test_provider_search():
    response = client.post(
        "/api/v1/providers/search",
        json={
            "providers": [
                {"id": "a", "company_name": "Alpha Wash", "city": "Pune", "base_price": 45000, "rating": 4.2},
                {"id": "b", "company_name": "Beta Motors", "city": "Pune", "base_price": 25000, "rating": 4.8},
                {"id": "c", "company_name": "Gamma Wash", "city": "Delhi", "base_price": 35000},
            ],
            "filters": {"search": "pune", "sort_by": "price_low"},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data["providers"]] == ["b", "a"]
    assert data["active_filters"] == 1


def test_provider_search_bad_distance_is_400():
    response = client.post(
        "/api/v1/providers/search",
        json={"providers": [], "filters": {"distance": "far"}},
    )
    assert response.status_code == 400


def test_wallet_top_up_huge_amount_is_400():
    response = client.post(f"/api/v1/wallets/{_user()}/top-up", json={"amount": "1e5000"})
    assert response.status_code == 400


def test_split_endpoint_clamps_huge_typed_rupees():
    response = client.post(
        "/api/v1/payments/split",
        json={"total": 23482, "wallet_balance": 10000, "wallet_input": "1e999999999"},
    )

    assert response.status_code == 200
    assert response.json()["wallet_amount"] == 10000
    assert response.json()["card_amount"] == 13482


def test_cash_checkout_confirms_booking():
    response = client.post(
        "/api/v1/payments/checkout",
        json={"user_id": _user(), "total": 23482, "method": "cash"},
    )

    assert response.status_code == 200
    assert response.json()["label"] == "Confirm Booking"


class _StaleBalanceStore(MemoryWalletStore):
    """Reports a balance that another payment has already spent."""

    def get_balance(self, user_id: str) -> int:
        return 10000


def test_checkout_conflict_is_409():
    store = _StaleBalanceStore()
    app.dependency_overrides[get_split_payment_use_case] = lambda: SplitPaymentUseCase(
        wallet=WalletUseCase(store=store, max_top_up=1_000_000)
    )
    try:
        response = client.post("/api/v1/payments/checkout", json={"user_id": "racer", "total": 23482})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 409
