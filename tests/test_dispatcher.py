import json

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, METHOD_NOT_FOUND

from avalanche_installer.dispatcher import Dispatcher
from avalanche_installer.system.executor import CommandOutput
from avalanche_installer.tools import HANDLERS
from avalanche_installer.tools.registry import DEFAULT_REGISTRY, OperationDescriptor, OperationRegistry
from avalanche_installer.tools.results import Failure, Success, render_text

EXPECTED_NAMES = (
    "check_compatibility",
    "install_avalanche_cli",
    "check_installation",
    "setup_path",
    "get_installation_info",
    "update_avalanche_cli",
    "build_from_source",
)


def test_registry_is_closed_and_ordered():
    assert DEFAULT_REGISTRY.names() == EXPECTED_NAMES
    assert set(HANDLERS) == set(EXPECTED_NAMES)
    tools = DEFAULT_REGISTRY.list_tools()
    assert [t.name for t in tools] == list(EXPECTED_NAMES)
    assert all(t.inputSchema["type"] == "object" for t in tools)


def test_registry_schemas():
    install = DEFAULT_REGISTRY.get("install_avalanche_cli")
    assert install.input_schema["properties"]["force"] == {
        "type": "boolean",
        "description": "Force installation even if already installed",
        "default": False,
    }
    assert DEFAULT_REGISTRY.get("setup_path").input_schema["properties"]["shell"]["enum"] == ["bash", "zsh", "fish"]
    assert DEFAULT_REGISTRY.get("check_installation").input_schema == {"type": "object", "properties": {}}


def test_registry_rejects_duplicates():
    op = OperationDescriptor(name="x", description="x")
    with pytest.raises(ValueError):
        OperationRegistry((op, op))


def test_unknown_tool_is_method_not_found(ctx):
    with pytest.raises(McpError) as info:
        Dispatcher(ctx).call("uninstall_everything", {})
    assert info.value.error.code == METHOD_NOT_FOUND
    assert "uninstall_everything" in info.value.error.message


def test_handler_exception_is_internal_error(ctx):
    async def boom(context, args):
        raise RuntimeError("disk on fire")

    handlers = dict(HANDLERS, check_compatibility=boom)
    with pytest.raises(McpError) as info:
        Dispatcher(ctx, handlers=handlers).call("check_compatibility")
    assert info.value.error.code == INTERNAL_ERROR
    assert info.value.error.message == "disk on fire"


def test_invalid_arguments_are_internal_error(ctx, executor):
    with pytest.raises(McpError) as info:
        Dispatcher(ctx).call("install_avalanche_cli", {"force": "sometimes"})
    assert info.value.error.code == INTERNAL_ERROR
    assert executor.calls == []


def test_missing_handler_is_rejected(ctx):
    handlers = dict(HANDLERS)
    handlers.pop("setup_path")
    with pytest.raises(ValueError):
        Dispatcher(ctx, handlers=handlers)


def test_expected_failures_come_back_as_results(ctx):
    result = Dispatcher(ctx).call("update_avalanche_cli")
    assert isinstance(result, Failure)
    assert result.render()["success"] is False


def test_every_result_round_trips_through_json(ctx, executor):
    executor.responses["avalanche --version"] = CommandOutput("avalanche version 1.8.0\n", "")
    executor.responses["which avalanche"] = CommandOutput("/x/avalanche\n", "")
    dispatcher = Dispatcher(ctx)
    calls = [
        ("check_compatibility", {}),
        ("install_avalanche_cli", {}),
        ("check_installation", {}),
        ("setup_path", {"shell": "bash"}),
        ("setup_path", {"shell": "powershell"}),
        ("get_installation_info", {}),
        ("update_avalanche_cli", {}),
        ("build_from_source", {"tag": "v1.2.3"}),
    ]
    for name, args in calls:
        result = dispatcher.call(name, args)
        assert isinstance(result, (Success, Failure))
        assert json.loads(render_text(result)) == result.render()
