from __future__ import annotations

from typing import Any, Mapping

from .context import ToolContext
from .results import Result, Success


async def check_compatibility(ctx: ToolContext, args: Mapping[str, Any]) -> Result:
    info = ctx.platform_probe()
    name = ctx.settings.display_name
    if info.supported:
        message = f"Your system is compatible with {name}"
    else:
        message = f"{name} currently supports Linux and macOS only. Windows is not supported."
    return Success({
        "compatible": info.supported,
        "platform": info.system,
        "architecture": info.architecture,
        "message": message,
    })
