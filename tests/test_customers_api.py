"""Companies, customers (company and individual) and calls."""

import logging


def _company(client, headers, name="Acme"):
    res = client.post("/api/companies", json={"name": name, "taxCode": "TX-1", "phone": "555-0001"}, headers=headers)
    assert res.status_code == 200, res.text
    return res.json()


def _individual(client, headers, **extra):
    body = {"name": "Alice", "type": "individual", "mobile": "555-0100"}
    body.update(extra)
    res = client.post("/api/customers", json=body, headers=headers)
    assert res.status_code == 200, res.text
    return res.json()


class TestCompanies:

    def test_create_and_get_with_customers(self, client, admin_headers):
        company = _company(client, admin_headers)
        assert company["taxCode"] == "TX-1"
        assert company["customers"] == []

        _individual(client, admin_headers, companyId=company["id"], position="Buyer")
        fetched = client.get(f"/api/companies/{company['id']}", headers=admin_headers).json()
        assert [c["name"] for c in fetched["customers"]] == ["Alice"]
        assert fetched["customers"][0]["position"] == "Buyer"

    def test_update(self, client, admin_headers):
        company = _company(client, admin_headers)
        res = client.put(f"/api/companies/{company['id']}", json={"address": "1 Main St"}, headers=admin_headers)
        assert res.status_code == 200
        assert res.json()["address"] == "1 Main St"
        assert res.json()["name"] == "Acme"

    def test_delete_detaches_customers(self, client, admin_headers):
        company = _company(client, admin_headers)
        alice = _individual(client, admin_headers, companyId=company["id"])

        assert client.delete(f"/api/companies/{company['id']}", headers=admin_headers).status_code == 200
        assert client.get(f"/api/companies/{company['id']}", headers=admin_headers).status_code == 404
        assert client.get(f"/api/customers/{alice['id']}", headers=admin_headers).json()["companyId"] is None

    def test_unknown(self, client, admin_headers):
        assert client.get("/api/companies/999", headers=admin_headers).status_code == 404


class TestCustomers:

    def test_listing_merges_companies_and_individuals(self, client, admin_headers):
        company = _company(client, admin_headers)
        alice = _individual(client, admin_headers)

        listing = client.get("/api/customers", headers=admin_headers).json()
        assert [(c["type"], c["id"]) for c in listing] == [("company", company["id"]), ("individual", alice["id"])]
        assert listing[0]["taxCode"] == "TX-1"
        assert listing[1]["phone"] == "555-0100"

    def test_create_company_through_customers(self, client, admin_headers):
        res = client.post("/api/customers", json={"name": "Globex", "type": "company", "serial": "G-1"}, headers=admin_headers)
        assert res.status_code == 200
        body = res.json()
        assert body["type"] == "company"
        fetched = client.get(f"/api/customers/{body['id']}?type=company", headers=admin_headers).json()
        assert fetched["serial"] == "G-1"

    def test_contacts(self, client, admin_headers):
        alice = _individual(client, admin_headers, contacts=[{"title": "Email", "content": "a@example.com", "type": "email"}])
        assert [c["content"] for c in alice["contacts"]] == ["a@example.com"]
        assert alice["contacts"][0]["isNew"] is True

        # omitted contacts are kept
        res = client.put(f"/api/customers/{alice['id']}", json={"name": "Alice B"}, headers=admin_headers)
        assert res.json()["name"] == "Alice B"
        assert len(res.json()["contacts"]) == 1

        # an explicit list replaces them
        res = client.put(f"/api/customers/{alice['id']}", json={"name": "Alice B", "contacts": []}, headers=admin_headers)
        assert res.json()["contacts"] == []

    def test_blank_name(self, client, admin_headers):
        res = client.post("/api/customers", json={"name": "  "}, headers=admin_headers)
        assert res.status_code == 400

    def test_unknown_company_reference(self, client, admin_headers):
        res = client.post("/api/customers", json={"name": "Bob", "companyId": 999}, headers=admin_headers)
        assert res.status_code == 404

    def test_bad_type_query(self, client, admin_headers):
        alice = _individual(client, admin_headers)
        res = client.get(f"/api/customers/{alice['id']}?type=robot", headers=admin_headers)
        assert res.status_code == 400

    def test_delete_blocked_by_orders(self, client, admin_headers, catalog):
        order = {
            "customerId": catalog["customer"],
            "orderItems": [{"productId": catalog["chair"], "quantity": 1}],
        }
        assert client.post("/api/orders", json=order, headers=admin_headers).status_code == 200
        res = client.delete(f"/api/customers/{catalog['customer']}", headers=admin_headers)
        assert res.status_code == 409

    def test_delete(self, client, admin_headers):
        alice = _individual(client, admin_headers, contacts=[{"title": "Phone", "content": "1"}])
        assert client.delete(f"/api/customers/{alice['id']}", headers=admin_headers).status_code == 200
        assert client.get(f"/api/customers/{alice['id']}", headers=admin_headers).status_code == 404

    def test_plain_user_cannot_delete(self, client, admin_headers, user_headers):
        alice = _individual(client, admin_headers)
        assert client.delete(f"/api/customers/{alice['id']}", headers=user_headers).status_code == 403


class TestCalls:

    def test_log_and_list(self, client, admin_headers, user_headers):
        alice = _individual(client, admin_headers)
        bob = _individual(client, admin_headers, name="Bob")

        first = client.post("/api/calls", json={"customerId": alice["id"], "subject": "Intro", "callTime": 100}, headers=user_headers)
        assert first.status_code == 200
        assert first.json()["createdBy"] == "clerk"
        client.post("/api/calls", json={"customerId": alice["id"], "subject": "Follow-up", "callTime": 200}, headers=user_headers)
        client.post("/api/calls", json={"customerId": bob["id"], "subject": "Quote"}, headers=user_headers)

        subjects = [c["subject"] for c in client.get(f"/api/calls?customerId={alice['id']}", headers=user_headers).json()]
        assert subjects == ["Follow-up", "Intro"]
        assert len(client.get("/api/calls", headers=user_headers).json()) == 3

    def test_call_time_defaults_to_now(self, client, admin_headers):
        alice = _individual(client, admin_headers)
        call = client.post("/api/calls", json={"customerId": alice["id"], "subject": "Hi"}, headers=admin_headers).json()
        assert call["callTime"] > 1_600_000_000

    def test_explicit_zero_call_time_is_kept(self, client, admin_headers):
        alice = _individual(client, admin_headers)
        call = client.post("/api/calls", json={"customerId": alice["id"], "subject": "Epoch", "callTime": 0}, headers=admin_headers).json()
        assert call["callTime"] == 0

    def test_writes_are_logged(self, client, admin_headers, caplog):
        alice = _individual(client, admin_headers)
        with caplog.at_level(logging.INFO, logger="app.services.call_service"):
            call = client.post("/api/calls", json={"customerId": alice["id"], "subject": "Hi"}, headers=admin_headers).json()
            client.delete(f"/api/calls/{call['id']}", headers=admin_headers)
        messages = [r.getMessage() for r in caplog.records if r.name == "app.services.call_service"]
        assert f"admin logged call {call['id']} for customer {alice['id']}" in messages
        assert f"Call {call['id']} deleted" in messages

    def test_unknown_customer(self, client, admin_headers):
        res = client.post("/api/calls", json={"customerId": 999, "subject": "Hi"}, headers=admin_headers)
        assert res.status_code == 404

    def test_delete(self, client, admin_headers):
        alice = _individual(client, admin_headers)
        call = client.post("/api/calls", json={"customerId": alice["id"], "subject": "Hi"}, headers=admin_headers).json()
        assert client.delete(f"/api/calls/{call['id']}", headers=admin_headers).status_code == 200
        assert client.delete(f"/api/calls/{call['id']}", headers=admin_headers).status_code == 404
