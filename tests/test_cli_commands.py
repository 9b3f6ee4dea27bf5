import json

import pytest
from click.testing import CliRunner

from avalanche_installer import __main__ as cli_module
from avalanche_installer.__main__ import _parse_arguments, cli_main


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr(cli_module, "init_logging", lambda *args, **kwargs: None)


def test_tools_lists_every_operation():
    result = CliRunner().invoke(cli_main, ["tools", "--json"])

    assert result.exit_code == 0
    names = [entry["name"] for entry in json.loads(result.output)]
    assert names[0] == "check_compatibility"
    assert len(names) == 7


def test_call_prints_json_result():
    result = CliRunner().invoke(cli_main, ["call", "build_from_source", "-a", "tag=v1.2.3"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert "git checkout v1.2.3" in payload["commands"]


def test_call_unknown_tool_fails():
    result = CliRunner().invoke(cli_main, ["call", "nope"])

    assert result.exit_code == 1
    assert "Unknown tool: nope" in result.output


def test_parse_arguments():
    assert _parse_arguments(("force=true", "shell=zsh")) == {"force": True, "shell": "zsh"}
    assert _parse_arguments(("force=False",)) == {"force": False}
