# app/utils/selection.py
import json
from typing import Any, Dict, List, Optional, Union

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr

# Shapes a client may send for an order item's option selection.
# Strict members keep pydantic from coercing one shape into another.
Selection = Optional[Union[StrictStr, StrictBool, StrictInt, StrictFloat, List[Any], Dict[str, Any]]]


def normalize_selection(value: Selection) -> str:
    """
    Collapse a selection of any supported shape into the single text form
    stored in order_item_options.selection.

    - str          -> unchanged
    - bool         -> "true" / "false"
    - int / float  -> decimal string ("3", "2.5"; 3.0 -> "3")
    - list / dict  -> compact JSON text
    - None         -> ""
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    raise TypeError(f"Unsupported selection type: {type(value).__name__}")
