from __future__ import annotations
from dataclasses import dataclass

from core.io_utils import pretty_json
from core.schema import validate_arguments
from core.shopify_api import ShopifyAPI

TOOL_NAME = "cancel_order"

TOOL_SPEC = {
    "name": "cancel_order",
    "description": "Cancel an order and optionally refund payment. This action cannot be undone.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "orderId": {
                "type": "string",
                "description": "The Shopify order ID to cancel",
                "minLength": 1,
                "pattern": r"\S",
            },
            "reason": {
                "type": "string",
                "enum": ["customer", "fraud", "inventory", "declined", "other"],
                "description": "Reason for cancellation",
                "default": "customer",
            },
            "refund": {"type": "boolean", "description": "Whether to refund the order", "default": False},
            "email": {"type": "boolean", "description": "Send cancellation email to customer", "default": True},
        },
        "required": ["orderId"],
        "additionalProperties": False,
    },
}


@dataclass
class CancelOrderArgs:
    order_id: str
    reason: str = "customer"
    refund: bool = False
    email: bool = True


def parse(args: dict) -> CancelOrderArgs:
    v = validate_arguments(TOOL_SPEC["inputSchema"], args)
    return CancelOrderArgs(
        order_id=v["orderId"].strip(),
        reason=v["reason"],
        refund=v["refund"],
        email=v["email"],
    )


def run(api: ShopifyAPI, args: CancelOrderArgs) -> str:
    data = api.cancel_order(
        args.order_id,
        {"reason": args.reason, "refund": args.refund, "email": args.email},
    )
    return f"Order {args.order_id} cancelled successfully:\n\n{pretty_json(data['order'])}"
