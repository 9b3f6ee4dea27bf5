from __future__ import annotations

import pytest

from avalanche_installer.settings import Settings
from avalanche_installer.system.executor import CommandFailed, CommandOutput
from avalanche_installer.system.platform import PlatformInfo
from avalanche_installer.tools.context import ToolContext


class FakeExecutor:
    """Records commands and replays scripted outputs; unknown commands fail like a missing binary."""

    def __init__(self) -> None:
        self.responses: dict = {}
        self.calls: list[str] = []

    async def run(self, command: str) -> CommandOutput:
        self.calls.append(command)
        outcome = self.responses.get(command)
        if isinstance(outcome, list):
            outcome = outcome.pop(0) if outcome else None
        if outcome is None:
            raise CommandFailed(command, 127, "", f"sh: {command.split()[0]}: not found")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def ctx(settings, executor, home) -> ToolContext:
    return ToolContext(
        settings=settings,
        executor=executor,
        platform_probe=lambda: PlatformInfo(system="linux", architecture="x86_64"),
        home=home,
        environ={"SHELL": "/bin/bash"},
    )
