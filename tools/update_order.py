from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.io_utils import pretty_json
from core.schema import validate_arguments
from core.shopify_api import ShopifyAPI

TOOL_NAME = "update_order"

TOOL_SPEC = {
    "name": "update_order",
    "description": "Update an existing order. Can update notes, tags, email, phone, and other order attributes.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "orderId": {
                "type": "string",
                "description": "The Shopify order ID to update",
                "minLength": 1,
                "pattern": r"\S",
            },
            "note": {"type": "string", "description": "Add or update order notes"},
            "tags": {"type": "string", "description": "Comma-separated tags to add to the order"},
            "email": {"type": "string", "description": "Update customer email"},
        },
        "required": ["orderId"],
        "additionalProperties": False,
    },
}


@dataclass
class UpdateOrderArgs:
    order_id: str
    note: Optional[str] = None
    tags: Optional[str] = None
    email: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            k: v
            for k, v in (("note", self.note), ("tags", self.tags), ("email", self.email))
            if v is not None
        }


def parse(args: dict) -> UpdateOrderArgs:
    v = validate_arguments(TOOL_SPEC["inputSchema"], args)
    return UpdateOrderArgs(
        order_id=v["orderId"].strip(),
        note=v.get("note"),
        tags=v.get("tags"),
        email=v.get("email"),
    )


def run(api: ShopifyAPI, args: UpdateOrderArgs) -> str:
    data = api.update_order(args.order_id, args.to_payload())
    return f"Order {args.order_id} updated successfully:\n\n{pretty_json(data['order'])}"
