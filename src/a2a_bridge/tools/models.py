"""Tool result and schema models shared by tool providers and registrars."""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel


class TextContent(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """The result of executing a tool."""

    content: list[TextContent] = []

    @classmethod
    def from_text(cls, text: str) -> ToolResult:
        """Create a ToolResult with a single text content part."""
        return cls(content=[TextContent(text=text)])

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> ToolResult:
        """Create a ToolResult whose text is *payload* as indented JSON."""
        return cls.from_text(json.dumps(payload, indent=2, ensure_ascii=False))

    @property
    def text(self) -> str:
        return "".join(part.text for part in self.content)

    def payload(self) -> Any:
        """Decode the JSON text written by :meth:`from_json`."""
        return json.loads(self.text)

    @property
    def is_error(self) -> bool:
        try:
            data = self.payload()
        except ValueError:
            return False
        return isinstance(data, dict) and "error" in data


class ToolSpec(BaseModel):
    """A tool as registered with a host: name, description, JSON Schema."""

    name: str
    description: str = ""
    parameters: dict[str, Any] = {"type": "object", "properties": {}}

    def to_function_schema(self) -> dict[str, Any]:
        """OpenAI-compatible function schema."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }
