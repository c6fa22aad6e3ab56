from __future__ import annotations
import importlib
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Tuple

from core.models import ToolDefinition
from core.schema import check_schema

# Catalog order is the order tools are listed to callers.
TOOL_MODULES = (
    "get_order",
    "list_orders",
    "update_order",
    "fulfill_order",
    "cancel_order",
    "create_refund",
    "get_order_analytics",
)


@dataclass(frozen=True)
class CatalogEntry:
    definition: ToolDefinition
    parse: Callable[[dict], Any]
    run: Callable[..., str]


class ToolCatalog:
    """Immutable, ordered set of tools. Built once by load_catalog()."""

    def __init__(self, entries: List[CatalogEntry]) -> None:
        self._entries: Tuple[CatalogEntry, ...] = tuple(entries)
        self._by_name: Dict[str, CatalogEntry] = {e.definition.name: e for e in self._entries}
        if len(self._by_name) != len(self._entries):
            raise ValueError("Duplicate tool names in catalog")

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, name: str) -> CatalogEntry | None:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return [e.definition.name for e in self._entries]

    def definitions(self) -> List[ToolDefinition]:
        return [e.definition for e in self._entries]


def load_tools(modules=TOOL_MODULES) -> List[CatalogEntry]:
    """
    Import tool modules inside the tools/ package, in catalog order.
    Each tool module must expose:
      - TOOL_NAME (str)
      - TOOL_SPEC (dict)  (MCP-style tool schema)
      - parse(args: dict) -> typed args
      - run(api, args) -> str
    A module missing any of these is a packaging bug, so it raises.
    An inputSchema that is not valid JSON Schema raises SchemaError.
    """
    package_name = __name__.rsplit(".", 1)[0]  # "tools"
    entries = []

    for name in modules:
        m = importlib.import_module(f"{package_name}.{name}")

        tool_name = getattr(m, "TOOL_NAME", None)
        tool_spec = getattr(m, "TOOL_SPEC", None)
        parse = getattr(m, "parse", None)
        runner = getattr(m, "run", None)

        if not tool_name or not tool_spec or not callable(parse) or not callable(runner):
            raise ImportError(f"Tool module {m.__name__} is missing TOOL_NAME, TOOL_SPEC, parse or run")
        if tool_spec.get("name") != tool_name:
            raise ImportError(f"Tool module {m.__name__}: TOOL_SPEC name does not match TOOL_NAME")
        check_schema(tool_spec["inputSchema"])

        entries.append(CatalogEntry(definition=ToolDefinition.from_spec(tool_spec), parse=parse, run=runner))

    return entries


def load_catalog() -> ToolCatalog:
    return ToolCatalog(load_tools())
