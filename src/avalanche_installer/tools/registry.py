from __future__ import annotations

from typing import Any, Dict, Iterator, Optional, Tuple

from mcp import types
from pydantic import BaseModel, ConfigDict, Field

SUPPORTED_SHELLS = ("bash", "zsh", "fish")


def _object(**properties: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "object", "properties": properties}


class OperationDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(default_factory=_object)

    def to_tool(self) -> types.Tool:
        return types.Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


class OperationRegistry:
    """Ordered, read-only collection of the operations the server advertises."""

    def __init__(self, operations: Tuple[OperationDescriptor, ...]) -> None:
        names = [op.name for op in operations]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate operation names: {names}")
        self._operations = operations
        self._by_name = {op.name: op for op in operations}

    def __iter__(self) -> Iterator[OperationDescriptor]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[OperationDescriptor]:
        return self._by_name.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(op.name for op in self._operations)

    def list_tools(self) -> list[types.Tool]:
        return [op.to_tool() for op in self._operations]


OPERATIONS: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name="check_compatibility",
        description="Check if the current system is compatible with Avalanche CLI",
    ),
    OperationDescriptor(
        name="install_avalanche_cli",
        description="Install Avalanche CLI using the official installation script",
        input_schema=_object(
            force={
                "type": "boolean",
                "description": "Force installation even if already installed",
                "default": False,
            },
        ),
    ),
    OperationDescriptor(
        name="check_installation",
        description="Check if Avalanche CLI is installed and get version information",
    ),
    OperationDescriptor(
        name="setup_path",
        description="Add Avalanche CLI to system PATH",
        input_schema=_object(
            shell={
                "type": "string",
                "description": "Shell type (bash, zsh, fish)",
                "enum": list(SUPPORTED_SHELLS),
            },
        ),
    ),
    OperationDescriptor(
        name="get_installation_info",
        description="Get detailed installation information and instructions",
    ),
    OperationDescriptor(
        name="update_avalanche_cli",
        description="Update Avalanche CLI to the latest version",
    ),
    OperationDescriptor(
        name="build_from_source",
        description="Get instructions for building Avalanche CLI from source",
        input_schema=_object(
            tag={
                "type": "string",
                "description": "Git tag to checkout (optional)",
            },
        ),
    ),
)

DEFAULT_REGISTRY = OperationRegistry(OPERATIONS)
