# This project was developed with assistance from AI tools.
"""Tests for public API endpoints (catalog + calculators)."""


def test_health(client):
    response = client.get("/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_offers_endpoint(client):
    response = client.get("/api/public/offers")
    assert response.status_code == 200
    data = response.json()
    assert data["pagination"]["total"] == 6
    assert data["pagination"]["has_more"] is False
    assert data["data"][0]["bank_name"] == "First Bank"


def test_offers_filtered_by_amount(client):
    response = client.get("/api/public/offers", params={"amount": 10000})
    ids = [o["id"] for o in response.json()["data"]]
    assert ids == ["offer-2", "offer-5"]


def test_offers_pagination(client):
    response = client.get("/api/public/offers", params={"offset": 4, "limit": 1})
    data = response.json()
    assert [o["id"] for o in data["data"]] == ["offer-5"]
    assert data["pagination"]["has_more"] is True


def test_read_offer(client):
    response = client.get("/api/public/offers/offer-4")
    assert response.status_code == 200
    assert response.json()["type"] == "Home Improvement"


def test_missing_offer_is_problem_details(client):
    response = client.get("/api/public/offers/offer-99", headers={"x-request-id": "req-1"})
    assert response.status_code == 404
    body = response.json()
    assert body["type"] == "/problems/not-found"
    assert body["title"] == "Not Found"
    assert body["request_id"] == "req-1"
    assert body["instance"] == "/api/public/offers/offer-99"


def test_bundles_endpoint(client):
    response = client.get("/api/public/bundles", params={"amount": 20000})
    assert response.status_code == 200
    assert [b["name"] for b in response.json()] == ["Low Rate Bundle"]


def test_bundles_requires_amount(client):
    response = client.get("/api/public/bundles")
    assert response.status_code == 422


def test_calculate_payment(client):
    response = client.post("/api/public/calculate-payment", json={
        "amount": 10000,
        "interest_rate": 12,
        "term_months": 12,
    })
    assert response.status_code == 200
    assert response.json()["monthly_payment"] == 888.49


def test_read_bundle(client):
    response = client.get("/api/public/bundles/bundle-max-value")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Max Value Bundle"
    assert data["total_amount"] == 63750


def test_read_bundle_not_available_for_amount(client):
    # Only offer-2 and offer-5 fit 10000, too few for a max-value bundle
    response = client.get(
        "/api/public/bundles/bundle-max-value", params={"amount": 10000}
    )
    assert response.status_code == 404
    assert response.json()["type"] == "/problems/not-found"


def test_calculate_payment_with_down_payment_and_fee(client):
    response = client.post("/api/public/calculate-payment", json={
        "amount": 12000,
        "down_payment": 2000,
        "processing_fee": 1.5,
        "interest_rate": 12,
        "term_months": 12,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["principal"] == 10000
    assert data["processing_fee_amount"] == 150
    assert len(data["schedule"]) == 12
    assert data["schedule"][0]["interest"] == 100


def test_calculate_payment_rejects_down_payment_over_amount(client):
    response = client.post("/api/public/calculate-payment", json={
        "amount": 10000,
        "down_payment": 10000,
        "interest_rate": 12,
        "term_months": 12,
    })
    assert response.status_code == 422
    assert response.json()["type"] == "/problems/invalid-input"


def test_calculate_payment_rejects_zero_term(client):
    response = client.post("/api/public/calculate-payment", json={
        "amount": 10000,
        "interest_rate": 12,
        "term_months": 0,
    })
    assert response.status_code == 422


def test_affordability_happy_path(client):
    response = client.post("/api/public/calculate-affordability", json={
        "monthly_income": 5000,
        "monthly_debts": 500,
        "amount": 10000,
        "interest_rate": 0,
        "term_months": 10,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["tier"] == "comfortable"
    assert data["dti_ratio"] == 30.0
    assert data["dti_warning"] is None


def test_affordability_rejects_negative_income(client):
    response = client.post("/api/public/calculate-affordability", json={
        "monthly_income": -5000,
        "amount": 10000,
        "interest_rate": 5,
        "term_months": 12,
    })
    assert response.status_code == 422
