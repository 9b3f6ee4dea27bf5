from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

import anyio

logger = logging.getLogger("avalanche_installer.executor")


@dataclass
class CommandOutput:
    stdout: str
    stderr: str


class CommandFailed(Exception):
    """Raised when a shell command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, stdout: str = "", stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        message = f"Command failed: {command}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message)


class ShellExecutor:
    """Runs command strings through the system shell and captures their output."""

    async def run(self, command: str) -> CommandOutput:
        logger.debug("exec start: %s", command)
        result = await anyio.run_process(command, stdin=subprocess.DEVNULL, check=False)
        stdout = (result.stdout or b"").decode("utf-8", errors="replace")
        stderr = (result.stderr or b"").decode("utf-8", errors="replace")
        logger.debug("exec done: rc=%s", result.returncode)
        if result.returncode != 0:
            raise CommandFailed(command, result.returncode, stdout, stderr)
        return CommandOutput(stdout=stdout, stderr=stderr)
