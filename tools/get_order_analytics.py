from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from core.io_utils import pretty_json
from core.schema import validate_arguments
from core.shopify_api import ShopifyAPI

log = logging.getLogger(__name__)

TOOL_NAME = "get_order_analytics"

PAGE_LIMIT = 250
UNKNOWN_PERIOD = "unknown"

TOOL_SPEC = {
    "name": "get_order_analytics",
    "description": (
        "Get analytics and statistics for orders within a date range. "
        "Covers at most 250 orders (one page)."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "start_date": {
                "type": "string",
                "description": "Start date for analytics (ISO 8601 format)",
                "minLength": 1,
            },
            "end_date": {
                "type": "string",
                "description": "End date for analytics (ISO 8601 format)",
                "minLength": 1,
            },
            "group_by": {
                "type": "string",
                "enum": ["day", "week", "month"],
                "description": "How to group the analytics data",
                "default": "day",
            },
        },
        "required": ["start_date", "end_date"],
        "additionalProperties": False,
    },
}


@dataclass
class OrderAnalyticsArgs:
    start_date: str
    end_date: str
    group_by: str = "day"


def parse(args: dict) -> OrderAnalyticsArgs:
    v = validate_arguments(TOOL_SPEC["inputSchema"], args)
    return OrderAnalyticsArgs(start_date=v["start_date"], end_date=v["end_date"], group_by=v["group_by"])


def _price(order: Dict[str, Any]) -> float:
    raw = order.get("total_price")
    try:
        price = float(raw)
    except (TypeError, ValueError):
        price = None
    if price is None or not math.isfinite(price):
        log.warning(f"Order {order.get('id')} has unusable total_price {raw!r}, counting it as 0")
        return 0.0
    return price


def _created_date(order: Dict[str, Any]) -> Optional[date]:
    raw = order.get("created_at")
    if not isinstance(raw, str) or not raw:
        return None
    # the wall-clock date as Shopify wrote it, offset ignored
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError:
        try:
            return date.fromisoformat(raw[:10])
        except ValueError:
            return None


def period_key(d: Optional[date], group_by: str) -> str:
    if d is None:
        return UNKNOWN_PERIOD
    if group_by == "month":
        return f"{d.year:04d}-{d.month:02d}"
    if group_by == "week":
        return (d - timedelta(days=d.weekday())).isoformat()
    return d.isoformat()


def _rate(part: int, whole: int) -> float:
    return (part / whole) * 100 if whole else 0


def summarize_orders(orders: List[Dict[str, Any]], group_by: str = "day") -> Dict[str, Any]:
    total_orders = len(orders)
    total_sales = 0.0
    fulfilled = 0
    buckets: Dict[str, Dict[str, Any]] = {}

    for order in orders:
        price = _price(order)
        is_fulfilled = order.get("fulfillment_status") == "fulfilled"
        total_sales += price
        fulfilled += int(is_fulfilled)

        key = period_key(_created_date(order), group_by)
        b = buckets.setdefault(key, {"period": key, "orders": 0, "sales": 0.0, "fulfilled": 0})
        b["orders"] += 1
        b["sales"] += price
        b["fulfilled"] += int(is_fulfilled)

    breakdown = [buckets[k] for k in sorted(k for k in buckets if k != UNKNOWN_PERIOD)]
    if UNKNOWN_PERIOD in buckets:
        breakdown.append(buckets[UNKNOWN_PERIOD])

    return {
        "total_orders": total_orders,
        "total_sales": total_sales,
        "average_order_value": total_sales / total_orders if total_orders else 0,
        "fulfillment_rate": _rate(fulfilled, total_orders),
        "group_by": group_by,
        "breakdown": breakdown,
    }


def run(api: ShopifyAPI, args: OrderAnalyticsArgs) -> str:
    data = api.list_orders({
        "created_at_min": args.start_date,
        "created_at_max": args.end_date,
        "limit": PAGE_LIMIT,
    })
    analytics = summarize_orders(data["orders"], args.group_by)
    return f"Order Analytics ({args.start_date} to {args.end_date}):\n\n{pretty_json(analytics)}"
