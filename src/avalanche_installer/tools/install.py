"""
Install and update handlers.

Both shell out to the official installation script; the handlers only
decide whether running it is needed and whether the preconditions for
running it hold. Every failure is returned as a ``Failure`` so callers
always receive a JSON document.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import anyio
from pydantic import BaseModel

from ..system.executor import CommandFailed
from .context import ToolContext
from .results import Failure, Result, Success

logger = logging.getLogger("avalanche_installer.tools")


class InstallArgs(BaseModel):
    force: bool = False


async def _is_on_path(ctx: ToolContext) -> bool:
    try:
        await ctx.executor.run(f"which {ctx.settings.tool_name}")
    except (CommandFailed, OSError):
        return False
    return True


async def _probe_version(ctx: ToolContext) -> str:
    try:
        out = await ctx.executor.run(f"{ctx.settings.tool_name} --version")
    except (CommandFailed, OSError):
        return "unknown"
    return out.stdout.strip()


async def install_avalanche_cli(ctx: ToolContext, args: Mapping[str, Any]) -> Result:
    params = InstallArgs.model_validate(dict(args or {}))
    name = ctx.settings.display_name

    info = ctx.platform_probe()
    if not info.supported:
        logger.warning("install refused on platform %s", info.system)
        return Failure(f"{name} is not supported on this platform. Only Linux and macOS are supported.")

    if not params.force and await _is_on_path(ctx):
        return Success({
            "success": True,
            "already_installed": True,
            "message": f"{name} is already installed. Use 'force: true' to reinstall or use the update tool.",
        })

    try:
        await anyio.Path(ctx.bin_dir).mkdir(parents=True, exist_ok=True)
        logger.info("running install script from %s", ctx.settings.install_script_url)
        out = await ctx.executor.run(ctx.settings.install_command)
    except Exception as exc:
        logger.error("install failed: %s", exc)
        return Failure(str(exc))

    return Success({
        "success": True,
        "message": f"{name} installed successfully",
        "stdout": out.stdout,
        "stderr": out.stderr,
        "next_steps": [
            f"Add {ctx.bin_token} to your PATH if not already done",
            f"Run '{ctx.settings.tool_name} --version' to verify installation",
        ],
    })


async def update_avalanche_cli(ctx: ToolContext, args: Mapping[str, Any]) -> Result:
    name = ctx.settings.display_name
    binary = anyio.Path(ctx.binary_path)
    try:
        # Checks the fixed install location, not PATH resolution like install does.
        if not await binary.exists():
            return Failure(
                f"{name} not found at {ctx.bin_token}/{ctx.settings.tool_name}",
                {"suggestion": "Use install_avalanche_cli tool to install it first"},
            )

        previous = await _probe_version(ctx)
        logger.info("removing %s (version %s)", binary, previous)
        await binary.unlink()

        out = await ctx.executor.run(ctx.settings.install_command)
        current = await _probe_version(ctx)
    except Exception as exc:
        logger.error("update failed: %s", exc)
        return Failure(str(exc))

    return Success({
        "success": True,
        "message": f"{name} updated successfully",
        "previous_version": previous,
        "new_version": current,
        "stdout": out.stdout,
        "stderr": out.stderr,
    })
