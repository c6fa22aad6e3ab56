from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core import config
from core.io_utils import pretty_json
from core.schema import validate_arguments
from core.shopify_api import ShopifyAPI

TOOL_NAME = "fulfill_order"

TOOL_SPEC = {
    "name": "fulfill_order",
    "description": (
        "Create a fulfillment for an order. Marks orders as shipped and sends tracking "
        "information to customers."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "orderId": {
                "type": "string",
                "description": "The Shopify order ID to fulfill",
                "minLength": 1,
                "pattern": r"\S",
            },
            "location_id": {
                "type": "string",
                "description": "Location ID for fulfillment (defaults to the store's configured location)",
            },
            "tracking_number": {"type": "string", "description": "Tracking number for shipment"},
            "tracking_company": {
                "type": "string",
                "description": 'Shipping carrier (e.g., "USPS", "FedEx", "UPS")',
            },
            "notify_customer": {
                "type": "boolean",
                "description": "Send fulfillment notification email to customer",
                "default": True,
            },
        },
        "required": ["orderId"],
        "additionalProperties": False,
    },
}


@dataclass
class FulfillOrderArgs:
    order_id: str
    location_id: Optional[str] = None
    tracking_number: Optional[str] = None
    tracking_company: Optional[str] = None
    notify_customer: bool = True

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        location_id = self.location_id or config.SHOPIFY_LOCATION_ID
        if location_id:
            payload["location_id"] = location_id
        if self.tracking_number is not None:
            payload["tracking_number"] = self.tracking_number
        if self.tracking_company is not None:
            payload["tracking_company"] = self.tracking_company
        payload["notify_customer"] = self.notify_customer
        return payload


def parse(args: dict) -> FulfillOrderArgs:
    v = validate_arguments(TOOL_SPEC["inputSchema"], args)
    return FulfillOrderArgs(
        order_id=v["orderId"].strip(),
        location_id=v.get("location_id"),
        tracking_number=v.get("tracking_number"),
        tracking_company=v.get("tracking_company"),
        notify_customer=v["notify_customer"],
    )


def run(api: ShopifyAPI, args: FulfillOrderArgs) -> str:
    data = api.create_fulfillment(args.order_id, args.to_payload())
    return f"Order {args.order_id} fulfilled successfully:\n\n{pretty_json(data['fulfillment'])}"
