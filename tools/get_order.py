from __future__ import annotations
from dataclasses import dataclass

from core.io_utils import pretty_json
from core.schema import validate_arguments
from core.shopify_api import ShopifyAPI

TOOL_NAME = "get_order"

TOOL_SPEC = {
    "name": "get_order",
    "description": (
        "Get detailed information about a specific Shopify order by ID. Returns order details "
        "including line items, customer info, fulfillment status, and payment details."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "orderId": {
                "type": "string",
                "description": 'The Shopify order ID (e.g., "5432109876543")',
                "minLength": 1,
                "pattern": r"\S",
            },
        },
        "required": ["orderId"],
        "additionalProperties": False,
    },
}


@dataclass
class GetOrderArgs:
    order_id: str


def parse(args: dict) -> GetOrderArgs:
    v = validate_arguments(TOOL_SPEC["inputSchema"], args)
    return GetOrderArgs(order_id=v["orderId"].strip())


def run(api: ShopifyAPI, args: GetOrderArgs) -> str:
    data = api.get_order(args.order_id)
    return pretty_json(data["order"])
