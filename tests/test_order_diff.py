"""Unit tests for the order snapshot differ."""

from app.utils.order_diff import diff_order_snapshots


def _snapshot(status="open", customer_id=1, description="", products=(10,)):
    return {
        "status": status,
        "customerId": customer_id,
        "description": description,
        "orderItems": [{"productId": p, "quantity": 1} for p in products],
    }


class TestDiffOrderSnapshots:

    def test_missing_side_gives_none(self):
        assert diff_order_snapshots(None, _snapshot()) is None
        assert diff_order_snapshots(_snapshot(), None) is None

    def test_identical_gives_none(self):
        assert diff_order_snapshots(_snapshot(), _snapshot()) is None

    def test_status_change(self):
        changes = diff_order_snapshots(_snapshot(), _snapshot(status="closed"))
        assert changes == {"status": {"from": "open", "to": "closed"}}

    def test_customer_change(self):
        changes = diff_order_snapshots(_snapshot(customer_id=1), _snapshot(customer_id=2))
        assert changes == {"customerId": {"from": 1, "to": 2}}

    def test_missing_description_equals_empty(self):
        old = _snapshot()
        del old["description"]
        assert diff_order_snapshots(old, _snapshot(description="")) is None

    def test_description_change(self):
        changes = diff_order_snapshots(_snapshot(), _snapshot(description="rush"))
        assert changes == {"description": {"from": "", "to": "rush"}}

    def test_item_added(self):
        changes = diff_order_snapshots(_snapshot(products=(10,)), _snapshot(products=(10, 11)))
        assert changes == {"itemsCount": {"from": 1, "to": 2}, "itemsChanged": True}

    def test_item_swapped_keeps_count(self):
        changes = diff_order_snapshots(_snapshot(products=(10,)), _snapshot(products=(11,)))
        assert changes == {"itemsChanged": True}

    def test_item_order_is_ignored(self):
        assert diff_order_snapshots(_snapshot(products=(10, 11)), _snapshot(products=(11, 10))) is None

    def test_quantity_change_is_not_tracked(self):
        old = _snapshot()
        new = _snapshot()
        new["orderItems"][0]["quantity"] = 5
        assert diff_order_snapshots(old, new) is None
