from __future__ import annotations
from dataclasses import dataclass

from core.io_utils import pretty_json
from core.schema import validate_arguments
from core.shopify_api import ShopifyAPI

TOOL_NAME = "create_refund"

TOOL_SPEC = {
    "name": "create_refund",
    "description": "Create a refund for an order. Can refund full or partial amounts.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "orderId": {
                "type": "string",
                "description": "The Shopify order ID to refund",
                "minLength": 1,
                "pattern": r"\S",
            },
            "amount": {"type": "number", "description": "Amount to refund in store currency"},
            "reason": {
                "type": "string",
                "enum": ["customer_changed_mind", "defective", "fraud", "inventory", "other"],
                "description": "Reason for refund",
            },
            "restock": {"type": "boolean", "description": "Whether to restock refunded items", "default": True},
            "notify": {"type": "boolean", "description": "Send refund notification to customer", "default": True},
        },
        "required": ["orderId", "amount", "reason"],
        "additionalProperties": False,
    },
}


@dataclass
class CreateRefundArgs:
    order_id: str
    amount: float
    reason: str
    restock: bool = True
    notify: bool = True


def parse(args: dict) -> CreateRefundArgs:
    v = validate_arguments(TOOL_SPEC["inputSchema"], args)
    return CreateRefundArgs(
        order_id=v["orderId"].strip(),
        amount=float(v["amount"]),
        reason=v["reason"],
        restock=v["restock"],
        notify=v["notify"],
    )


def run(api: ShopifyAPI, args: CreateRefundArgs) -> str:
    data = api.create_refund(
        args.order_id,
        {"amount": args.amount, "reason": args.reason, "restock": args.restock, "notify": args.notify},
    )
    return f"Refund created for order {args.order_id}:\n\n{pretty_json(data['refund'])}"
