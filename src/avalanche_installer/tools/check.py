from __future__ import annotations

import logging
from typing import Any, Mapping

from ..system.executor import CommandFailed
from .context import ToolContext
from .results import Result, Success

logger = logging.getLogger("avalanche_installer.tools")


async def check_installation(ctx: ToolContext, args: Mapping[str, Any]) -> Result:
    tool = ctx.settings.tool_name
    try:
        version = await ctx.executor.run(f"{tool} --version")
        location = await ctx.executor.run(f"which {tool}")
    except (CommandFailed, OSError) as exc:
        logger.info("%s not found: %s", tool, exc)
        return Success({
            "installed": False,
            "error": f"{ctx.settings.display_name} not found in PATH",
            "suggestion": "Run the install_avalanche_cli tool to install it",
        })
    return Success({
        "installed": True,
        "version": version.stdout.strip(),
        "path": location.stdout.strip(),
    })
