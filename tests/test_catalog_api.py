"""Options and products."""


def _option(client, headers, **body):
    return client.post("/api/options", json=body, headers=headers)


class TestOptions:

    def test_multi_state_keeps_trimmed_states(self, client, admin_headers):
        res = _option(client, admin_headers, title="Size", model="multiState", states=[" S ", "", "M", "   "])
        assert res.status_code == 200
        body = res.json()
        assert body["states"] == ["S", "M"]
        assert body["isActive"] is True

    def test_multi_state_requires_a_state(self, client, admin_headers):
        res = _option(client, admin_headers, title="Size", model="countableMultiState", states=["", " "])
        assert res.status_code == 400

    def test_other_models_drop_states(self, client, admin_headers):
        body = _option(client, admin_headers, title="Note", model="text", states=["x"]).json()
        assert body["states"] is None

    def test_title_and_model_required(self, client, admin_headers):
        assert _option(client, admin_headers, model="text").status_code == 400
        assert _option(client, admin_headers, title="Note").status_code == 400

    def test_plain_user_cannot_create(self, client, user_headers):
        assert _option(client, user_headers, title="Note", model="text").status_code == 403

    def test_update(self, client, admin_headers):
        option = _option(client, admin_headers, title="Note", model="text").json()
        res = client.put(
            f"/api/options/{option['id']}",
            json={"title": "Finish", "model": "multiState", "states": ["matte"], "isActive": False},
            headers=admin_headers,
        )
        assert res.status_code == 200
        assert res.json()["states"] == ["matte"]
        assert res.json()["isActive"] is False

    def test_list_newest_first(self, client, admin_headers):
        first = _option(client, admin_headers, title="A", model="text").json()
        second = _option(client, admin_headers, title="B", model="text").json()
        ids = [o["id"] for o in client.get("/api/options", headers=admin_headers).json()]
        assert ids == [second["id"], first["id"]]

    def test_delete_blocked_when_selected_in_order(self, client, admin_headers, catalog):
        order = {
            "customerId": catalog["customer"],
            "orderItems": [{
                "productId": catalog["chair"],
                "quantity": 1,
                "orderItemProductOptions": [{"productOptionId": catalog["color"], "selection": "blue"}],
            }],
        }
        assert client.post("/api/orders", json=order, headers=admin_headers).status_code == 200
        assert client.delete(f"/api/options/{catalog['color']}", headers=admin_headers).status_code == 409

    def test_delete(self, client, admin_headers):
        option = _option(client, admin_headers, title="Note", model="text").json()
        assert client.delete(f"/api/options/{option['id']}", headers=admin_headers).status_code == 200
        assert client.get(f"/api/options/{option['id']}", headers=admin_headers).status_code == 404


class TestProducts:

    def test_product_options_are_expanded(self, client, admin_headers, catalog):
        product = client.get(f"/api/products/{catalog['chair']}", headers=admin_headers).json()
        [entry] = product["productOptions"]
        assert entry["optionId"] == catalog["color"]
        assert entry["maxNo"] == 1
        assert entry["option"]["title"] == "Color"

    def test_update_replaces_product_options(self, client, admin_headers, catalog):
        res = client.put(
            f"/api/products/{catalog['chair']}",
            json={"productOptions": [{"optionId": catalog["note"]}, {"optionId": catalog["color"], "maxNo": 2}]},
            headers=admin_headers,
        )
        assert res.status_code == 200
        body = res.json()
        assert body["name"] == "Chair"
        assert [(p["optionId"], p["maxNo"]) for p in body["productOptions"]] == [
            (catalog["note"], None),
            (catalog["color"], 2),
        ]

    def test_update_without_options_keeps_them(self, client, admin_headers, catalog):
        res = client.put(f"/api/products/{catalog['chair']}", json={"description": "Oak"}, headers=admin_headers)
        assert res.json()["description"] == "Oak"
        assert len(res.json()["productOptions"]) == 1

    def test_unknown_option(self, client, admin_headers):
        res = client.post("/api/products", json={"name": "Desk", "productOptions": [{"optionId": 999}]}, headers=admin_headers)
        assert res.status_code == 404

    def test_name_required(self, client, admin_headers):
        assert client.post("/api/products", json={"description": "x"}, headers=admin_headers).status_code == 400

    def test_delete_blocked_by_orders(self, client, admin_headers, catalog):
        order = {"customerId": catalog["customer"], "orderItems": [{"productId": catalog["table"], "quantity": 1}]}
        assert client.post("/api/orders", json=order, headers=admin_headers).status_code == 200
        assert client.delete(f"/api/products/{catalog['table']}", headers=admin_headers).status_code == 409

    def test_delete(self, client, manager_headers, catalog):
        assert client.delete(f"/api/products/{catalog['chair']}", headers=manager_headers).status_code == 200
        assert client.get(f"/api/products/{catalog['chair']}", headers=manager_headers).status_code == 404

    def test_plain_user_reads_but_cannot_write(self, client, user_headers, catalog):
        assert client.get("/api/products", headers=user_headers).status_code == 200
        assert client.delete(f"/api/products/{catalog['chair']}", headers=user_headers).status_code == 403
