from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

from core import config

log = logging.getLogger(__name__)


class ShopifyAPIError(RuntimeError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Shopify API error: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class ShopifyAPI:
    """
    Thin client for the Shopify Admin REST API. One method call is one HTTP
    request; non-2xx responses raise ShopifyAPIError with the raw body text.

    A missing token does not fail here. The header is simply left off and
    Shopify rejects the request.
    """

    def __init__(
        self,
        store: Optional[str] = None,
        token: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.store = (store or config.SHOPIFY_STORE or "").strip()
        self.token = (token if token is not None else config.SHOPIFY_ACCESS_TOKEN or "").strip()
        self.api_version = (api_version or config.SHOPIFY_API_VERSION or "").strip()
        self.timeout = timeout if timeout is not None else config.SHOPIFY_TIMEOUT_SECONDS
        self.base = f"https://{self.store}/admin/api/{self.api_version}"
        self.headers = {"Content-Type": "application/json"}
        if self.token:
            self.headers["X-Shopify-Access-Token"] = self.token

    @property
    def has_credential(self) -> bool:
        return bool(self.token)

    def _req(self, method: str, endpoint: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base}/{endpoint}"
        log.debug(f"{method} {url}")
        r = requests.request(method, url, headers=self.headers, timeout=self.timeout, **kwargs)
        if not r.ok:
            raise ShopifyAPIError(r.status_code, r.text)
        return r.json()

    def get_order(self, order_id: str) -> Dict[str, Any]:
        return self._req("GET", f"orders/{order_id}.json")

    def list_orders(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return self._req("GET", "orders.json", params=params)

    def update_order(self, order_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._req("PUT", f"orders/{order_id}.json", json={"order": updates})

    def create_fulfillment(self, order_id: str, fulfillment: Dict[str, Any]) -> Dict[str, Any]:
        return self._req("POST", f"orders/{order_id}/fulfillments.json", json={"fulfillment": fulfillment})

    def cancel_order(self, order_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._req("POST", f"orders/{order_id}/cancel.json", json=payload)

    def create_refund(self, order_id: str, refund: Dict[str, Any]) -> Dict[str, Any]:
        return self._req("POST", f"orders/{order_id}/refunds.json", json={"refund": refund})
