"""Contract tests for tenant, site and lease routes."""

from decimal import Decimal

import pytest


def register(client, name="Jane Citizen", contact="jane@example.com"):
    return client.post("/api/tenants", json={"name": name, "contact": contact})


def lease_body(**overrides):
    body = {
        "tenant": "Jane Citizen",
        "site": "A1",
        "start": "2026-11-01T00:00:00Z",
        "days": 30,
        "rent": "250.00",
    }
    body.update(overrides)
    return body


@pytest.fixture
def setup(client):
    register(client)
    client.post("/api/sites", json={"number": "A1", "dwelling": "Cabin"})
    return client


class TestTenants:
    def test_register_and_list(self, client):
        response = register(client)
        assert response.status_code == 201
        assert response.json() == {"name": "Jane Citizen", "contact": "jane@example.com"}

        listing = client.get("/api/tenants").json()
        assert listing["total"] == 1

    def test_empty_name(self, client):
        response = register(client, name=" ")
        assert response.status_code == 400
        assert response.json()["detail"] == "name required"

    def test_duplicate(self, client):
        register(client)
        assert register(client).status_code == 409


class TestSites:
    def test_list_site(self, client):
        response = client.post("/api/sites", json={"number": "A1", "dwelling": "House"})
        assert response.status_code == 201
        assert response.json()["dwelling"] == "House"

    def test_duplicate_number(self, client):
        client.post("/api/sites", json={"number": "A1"})
        response = client.post("/api/sites", json={"number": "A1", "dwelling": "Flat"})
        assert response.status_code == 409
        assert client.get("/api/sites").json()["total"] == 1

    def test_unknown_dwelling(self, client):
        assert client.post("/api/sites", json={"number": "A1", "dwelling": "Castle"}).status_code == 422


class TestLeases:
    def test_create(self, setup):
        response = setup.post("/api/leases", json=lease_body())
        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["rent"]) == Decimal("250")
        assert set(data["services"]) == {"rent", "utility"}
        assert data["end"].startswith("2026-12-01")

    def test_same_term_conflicts(self, setup):
        setup.post("/api/leases", json=lease_body())
        response = setup.post("/api/leases", json=lease_body())
        assert response.status_code == 409
        assert "lease conflict" in response.json()["detail"]

    def test_different_term_accepted(self, setup):
        setup.post("/api/leases", json=lease_body())
        response = setup.post("/api/leases", json=lease_body(start="2026-12-01T00:00:00Z"))
        assert response.status_code == 201
        assert setup.get("/api/leases", params={"site": "A1"}).json()["total"] == 2

    def test_unknown_tenant(self, setup):
        assert setup.post("/api/leases", json=lease_body(tenant="Nobody")).status_code == 404


class TestServiceBilling:
    def test_bill_then_send_invoice(self, setup, notifier):
        setup.post("/api/leases", json=lease_body())
        billed = setup.post(
            "/api/leases/bill",
            json={"tenant": "Jane Citizen", "site": "A1", "service": "utility", "amount": "120"},
        )
        assert billed.status_code == 200
        assert Decimal(billed.json()["services"]["utility"]["balance"]) == Decimal("-120")

        response = setup.post("/api/leases/invoice", json={"tenant": "Jane Citizen", "site": "A1"})
        assert response.status_code == 200
        assert response.json() == {"sent": True, "message": "you owe $120.00 in utilities"}
        assert notifier.sent == [("jane@example.com", "you owe $120.00 in utilities")]

    def test_nothing_owed(self, setup, notifier):
        setup.post("/api/leases", json=lease_body())
        response = setup.post("/api/leases/invoice", json={"tenant": "Jane Citizen", "site": "A1"})
        assert response.json() == {"sent": False, "message": None}
        assert notifier.sent == []

    def test_naive_billing_time_taken_as_utc(self, setup):
        setup.post("/api/leases", json=lease_body(start="2026-11-01T00:00:00"))
        billed = setup.post(
            "/api/leases/bill",
            json={"tenant": "Jane Citizen", "site": "A1", "amount": "120", "issued": "2026-11-02T00:00:00"},
        )
        assert billed.status_code == 200
        assert setup.get("/api/invoices").json()["total"] == 1
        assert setup.post("/api/leases", json=lease_body()).status_code == 409

    def test_send_invoice_unknown_tenant(self, setup):
        response = setup.post("/api/leases/invoice", json={"tenant": "Nobody", "site": "A1"})
        assert response.status_code == 404

    def test_pay_service_invoice(self, setup):
        setup.post("/api/leases", json=lease_body())
        setup.post("/api/leases/bill", json={"tenant": "Jane Citizen", "site": "A1", "amount": "120"})
        response = setup.post(
            "/api/leases/pay",
            json={"tenant": "Jane Citizen", "site": "A1", "invoice_id": 1, "amount": "120"},
        )
        assert response.status_code == 200
        assert Decimal(response.json()["services"]["utility"]["balance"]) == 0
        assert setup.get("/api/invoices/1").json()["status"] == "PAID"

    def test_send_invoice_without_lease(self, setup):
        response = setup.post("/api/leases/invoice", json={"tenant": "Jane Citizen", "site": "A1"})
        assert response.status_code == 404
