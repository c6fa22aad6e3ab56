import pytest
from fastapi.testclient import TestClient

import app as app_module
from core.shopify_api import ShopifyAPI
from tests.conftest import STORE


@pytest.fixture
def client(api) -> TestClient:
    return TestClient(app_module.create_app(api))


@pytest.fixture
def degraded_client(api, monkeypatch) -> TestClient:
    def broken(*args, **kwargs):
        raise RuntimeError("toolkit exploded")

    monkeypatch.setattr(app_module, "build_mcp", broken)
    return TestClient(app_module.create_app(api))


class TestHealth:

    def test_ready(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        body = r.json()
        assert body["ok"] is True
        assert body["status"] == "healthy"
        assert body["ready"] == {"catalog_loaded": True, "credential_present": True, "mcp": True}

    def test_missing_credential_still_starts(self):
        c = TestClient(app_module.create_app(ShopifyAPI(store=STORE, token="", api_version="2025-01")))
        body = c.get("/health").json()
        assert body["ready"]["credential_present"] is False
        assert body["ready"]["catalog_loaded"] is True

    def test_root(self, client):
        body = client.get("/").json()
        assert body["store"] == STORE
        assert body["mcp_sse"] == "/sse"


class TestToolRoutes:

    def test_list_tools(self, client):
        tools = client.get("/tools").json()["tools"]
        assert [t["name"] for t in tools][0] == "get_order"
        assert len(tools) == 7
        assert "inputSchema" in tools[0]

    def test_call_tool(self, client, upstream):
        upstream(200, {"order": {"id": 1001, "total_price": "19.99"}})
        r = client.post("/tools/call", json={"name": "get_order", "arguments": {"orderId": "1001"}})
        assert r.status_code == 200
        body = r.json()
        assert body["isError"] is False
        assert '"total_price": "19.99"' in body["content"][0]["text"]

    def test_null_arguments_accepted(self, client, upstream):
        mock = upstream(200, {"orders": []})
        r = client.post("/tools/call", json={"name": "list_orders", "arguments": None})
        assert r.status_code == 200
        assert r.json()["isError"] is False
        assert mock.call_args.kwargs["params"] == {"limit": 50}

    def test_whole_float_limit_coerced_to_int(self, client, upstream):
        mock = upstream(200, {"orders": []})
        client.post("/tools/call", json={"name": "list_orders", "arguments": {"limit": 10.0}})
        assert mock.call_args.kwargs["params"] == {"limit": 10}
        assert isinstance(mock.call_args.kwargs["params"]["limit"], int)

    def test_call_unknown_tool_is_not_an_http_error(self, client, upstream):
        r = client.post("/tools/call", json={"name": "nope"})
        assert r.status_code == 200
        body = r.json()
        assert body["isError"] is True
        assert "nope" in body["content"][0]["text"]


class TestDegradedMode:

    def test_health_still_served(self, degraded_client):
        r = degraded_client.get("/health")
        assert r.status_code == 200
        body = r.json()
        assert body["status"] == "degraded"
        assert body["ready"]["mcp"] is False

    @pytest.mark.parametrize("method,path", [
        ("get", "/tools"),
        ("post", "/tools/call"),
        ("get", "/sse"),
        ("post", "/messages/"),
    ])
    def test_tool_surfaces_unavailable(self, degraded_client, method, path):
        kwargs = {"json": {"name": "get_order", "arguments": {"orderId": "1"}}} if method == "post" else {}
        r = getattr(degraded_client, method)(path, **kwargs)
        assert r.status_code == 503
        assert r.json() == {"ok": False, "error": "service unavailable"}
