import logging

from core.models import ToolArgumentError, ToolResult, UnknownToolError
from core.shopify_api import ShopifyAPI, ShopifyAPIError

from .loader import ToolCatalog, load_catalog

log = logging.getLogger(__name__)

__all__ = ["ToolCatalog", "load_catalog", "dispatch"]


def dispatch(catalog: ToolCatalog, api: ShopifyAPI, tool_name: str, args: dict | None = None) -> ToolResult:
    """Run one tool call end to end. Never raises; failures come back as error results."""
    if args is None:
        args = {}

    try:
        entry = catalog.get(tool_name)
        if entry is None:
            raise UnknownToolError(tool_name)

        try:
            parsed = entry.parse(args)
        except ToolArgumentError as e:
            raise ToolArgumentError(f"Invalid arguments: {e}") from e

        log.info(f"Calling {tool_name}")
        return ToolResult.text_result(entry.run(api, parsed))

    except (UnknownToolError, ToolArgumentError, ShopifyAPIError) as e:
        log.warning(f"{tool_name} failed: {e}")
        return ToolResult.error_result(f"Error executing {tool_name}: {e}")
    except Exception as e:
        log.exception(f"{tool_name} raised")
        return ToolResult.error_result(f"Error executing {tool_name}: {e}")
