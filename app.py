import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult

from core.config import HOST, PORT, SERVICE_NAME, VERSION
from core.io_utils import utc_iso
from core.logger import setup_logging
from core.models import ToolInvocation
from core.shopify_api import ShopifyAPI
from tools import ToolCatalog, dispatch, load_catalog

log = logging.getLogger(__name__)

UNAVAILABLE = {"ok": False, "error": "service unavailable"}


# -----------------------------
# MCP over SSE
# -----------------------------
class CatalogTool(Tool):
    """fastmcp tool whose published schema is the catalog's input schema, run through dispatch."""

    call: Callable[[str, Dict[str, Any]], Awaitable[str]]

    async def run(self, arguments: Dict[str, Any]) -> MCPToolResult:
        return MCPToolResult(content=await self.call(self.name, arguments))


def build_mcp(catalog: ToolCatalog, api: ShopifyAPI) -> FastMCP:
    mcp = FastMCP(name=SERVICE_NAME)

    async def call(tool: str, args: Dict[str, Any]) -> str:
        # requests is blocking; keep it off the event loop
        result = await asyncio.to_thread(dispatch, catalog, api, tool, args)
        if result.is_error:
            raise ToolError(result.text)
        return result.text

    for d in catalog.definitions():
        mcp.add_tool(CatalogTool(name=d.name, description=d.description, parameters=d.input_schema, call=call))

    return mcp


# -----------------------------
# FastAPI (health + CORS + tools)
# -----------------------------
def create_app(api: Optional[ShopifyAPI] = None) -> FastAPI:
    api = api or ShopifyAPI()
    catalog: Optional[ToolCatalog] = None
    mcp: Optional[FastMCP] = None

    try:
        catalog = load_catalog()
        mcp = build_mcp(catalog, api)
    except Exception:
        # tool surfaces answer 503, /health keeps working
        log.exception("MCP toolkit failed to initialise, serving in degraded mode")

    ready = catalog is not None and mcp is not None
    if not api.has_credential:
        log.warning("SHOPIFY_ACCESS_TOKEN is not set; every tool call will be rejected upstream")

    app = FastAPI(title=SERVICE_NAME, version=VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {
            "ok": True,
            "message": "Shopify order management MCP server",
            "service": SERVICE_NAME,
            "version": VERSION,
            "ts": utc_iso(),
            "store": api.store,
            "mcp_sse": "/sse",
        }

    @app.get("/health")
    def health():
        return {
            "ok": True,
            "status": "healthy" if ready else "degraded",
            "ts": utc_iso(),
            "service": SERVICE_NAME,
            "version": VERSION,
            "ready": {
                "catalog_loaded": catalog is not None,
                "credential_present": api.has_credential,
                "mcp": mcp is not None,
            },
        }

    @app.get("/tools")
    def list_tools():
        if not ready:
            return JSONResponse(UNAVAILABLE, status_code=503)
        return {"tools": [d.to_dict() for d in catalog.definitions()]}

    @app.post("/tools/call")
    def call_tool(invocation: ToolInvocation):
        if not ready:
            return JSONResponse(UNAVAILABLE, status_code=503)
        return dispatch(catalog, api, invocation.name, invocation.arguments).to_dict()

    if ready:
        # Mount SSE endpoints (gives /sse and /messages/)
        app.mount("/", mcp.http_app(path="/sse", transport="sse"))
    else:
        @app.api_route("/sse", methods=["GET", "POST"])
        def sse_unavailable():
            return JSONResponse(UNAVAILABLE, status_code=503)

        @app.api_route("/messages/{rest:path}", methods=["GET", "POST"])
        def messages_unavailable(rest: str = ""):
            return JSONResponse(UNAVAILABLE, status_code=503)

    return app


app = create_app()


def main() -> None:
    import uvicorn

    setup_logging()
    log.info(f"MCP server running on port {PORT}")
    log.info("SSE endpoint available at /sse")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
