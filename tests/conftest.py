import json
from typing import Any, Callable, Optional
from unittest.mock import MagicMock, patch

import pytest

from core.shopify_api import ShopifyAPI
from tools import ToolCatalog, load_catalog

STORE = "test-store.myshopify.com"
BASE = f"https://{STORE}/admin/api/2025-01"


def make_response(status: int = 200, body: Any = None, text: Optional[str] = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.text = text if text is not None else json.dumps(body)
    resp.json.return_value = body
    return resp


@pytest.fixture
def api() -> ShopifyAPI:
    return ShopifyAPI(store=STORE, token="shpat_test", api_version="2025-01")


@pytest.fixture
def catalog() -> ToolCatalog:
    return load_catalog()


@pytest.fixture
def upstream() -> Callable[..., MagicMock]:
    """Patch requests.request for the Shopify client; call with (status, body[, text])."""
    with patch("core.shopify_api.requests.request") as mock_request:
        def respond(status: int = 200, body: Any = None, text: Optional[str] = None) -> MagicMock:
            mock_request.return_value = make_response(status, body, text)
            return mock_request

        respond.mock = mock_request  # type: ignore[attr-defined]
        yield respond
