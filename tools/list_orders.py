from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.io_utils import pretty_json
from core.schema import validate_arguments
from core.shopify_api import ShopifyAPI

TOOL_NAME = "list_orders"

MAX_LIMIT = 250

TOOL_SPEC = {
    "name": "list_orders",
    "description": "Get a list of orders with optional filters. Returns up to 250 orders per request.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "status": {
                "type": "string",
                "enum": ["open", "closed", "cancelled", "any"],
                "description": "Filter by order status",
                "default": "any",
            },
            "financial_status": {
                "type": "string",
                "enum": ["pending", "authorized", "paid", "partially_paid", "refunded", "voided", "any"],
                "description": "Filter by financial status",
                "default": "any",
            },
            "fulfillment_status": {
                "type": "string",
                "enum": ["shipped", "partial", "unshipped", "unfulfilled", "any"],
                "description": "Filter by fulfillment status",
                "default": "any",
            },
            "created_at_min": {
                "type": "string",
                "description": "Show orders created after this date (ISO 8601 format)",
            },
            "created_at_max": {
                "type": "string",
                "description": "Show orders created before this date (ISO 8601 format)",
            },
            "limit": {
                "type": "integer",
                "description": "Number of orders to return (1-250)",
                "minimum": 1,
                "maximum": MAX_LIMIT,
                "default": 50,
            },
        },
        "additionalProperties": False,
    },
}


@dataclass
class ListOrdersArgs:
    status: str = "any"
    financial_status: str = "any"
    fulfillment_status: str = "any"
    created_at_min: Optional[str] = None
    created_at_max: Optional[str] = None
    limit: int = 50

    def to_params(self) -> Dict[str, Any]:
        # "any" is the upstream default, so it is never sent
        params: Dict[str, Any] = {}
        for key in ("status", "financial_status", "fulfillment_status"):
            value = getattr(self, key)
            if value and value != "any":
                params[key] = value
        if self.created_at_min:
            params["created_at_min"] = self.created_at_min
        if self.created_at_max:
            params["created_at_max"] = self.created_at_max
        params["limit"] = self.limit
        return params


def parse(args: dict) -> ListOrdersArgs:
    v = validate_arguments(TOOL_SPEC["inputSchema"], args)
    # jsonschema accepts 50.0 as an integer
    v["limit"] = int(v["limit"])
    return ListOrdersArgs(**v)


def run(api: ShopifyAPI, args: ListOrdersArgs) -> str:
    data = api.list_orders(args.to_params())
    orders = data["orders"]
    return f"Found {len(orders)} orders:\n\n{pretty_json(orders)}"
