# app/utils/order_diff.py
from typing import Any, Dict, Optional


def _pair(old: Any, new: Any) -> Dict[str, Any]:
    return {"from": old, "to": new}


def _items(snapshot: Dict[str, Any]):
    return snapshot.get("orderItems")


def diff_order_snapshots(old: Optional[Dict[str, Any]], new: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Compare two order snapshots (camelCase dicts, as serialized for history)
    and return the change-set, or None when nothing tracked changed.

    Tracked: status, customerId, description (absent == ""), item count and
    item composition. Composition is compared as the sorted productId lists;
    a difference is only flagged, not itemised.
    """
    if not old or not new:
        return None

    changes: Dict[str, Any] = {}

    if old.get("status") != new.get("status"):
        changes["status"] = _pair(old.get("status"), new.get("status"))

    if old.get("customerId") != new.get("customerId"):
        changes["customerId"] = _pair(old.get("customerId"), new.get("customerId"))

    old_description = old.get("description") or ""
    new_description = new.get("description") or ""
    if old_description != new_description:
        changes["description"] = _pair(old_description, new_description)

    old_items = _items(old)
    new_items = _items(new)
    old_count = len(old_items or [])
    new_count = len(new_items or [])
    if old_count != new_count:
        changes["itemsCount"] = _pair(old_count, new_count)

    if old_items is not None and new_items is not None:
        old_products = sorted(item.get("productId") for item in old_items)
        new_products = sorted(item.get("productId") for item in new_items)
        if old_products != new_products:
            changes["itemsChanged"] = True

    return changes or None
