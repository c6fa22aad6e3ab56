from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class UnknownToolError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolArgumentError(Exception):
    pass


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Dict[str, Any]

    @staticmethod
    def from_spec(spec: Dict[str, Any]) -> "ToolDefinition":
        return ToolDefinition(
            name=spec["name"],
            description=spec.get("description", ""),
            input_schema=spec.get("inputSchema", {"type": "object", "properties": {}}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


@dataclass
class ToolInvocation:
    name: str
    # null is accepted and treated like an empty object
    arguments: Optional[Dict[str, Any]] = field(default_factory=dict)


@dataclass
class ToolResult:
    content: List[Dict[str, str]]
    is_error: bool = False

    @staticmethod
    def text_result(text: str) -> "ToolResult":
        return ToolResult(content=[{"type": "text", "text": text}])

    @staticmethod
    def error_result(text: str) -> "ToolResult":
        return ToolResult(content=[{"type": "text", "text": text}], is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(block["text"] for block in self.content if block.get("type") == "text")

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "isError": self.is_error}
