from __future__ import annotations

import logging
import posixpath
from typing import Any, Mapping, Optional

import anyio
from pydantic import BaseModel

from .context import ToolContext
from .results import Failure, Result, Success

logger = logging.getLogger("avalanche_installer.tools")

SHELL_CONFIGS = {
    "bash": ".bashrc",
    "zsh": ".zshrc",
    "fish": ".config/fish/config.fish",
}

MARKER = "# Added by avalanche-cli-installer"


class SetupPathArgs(BaseModel):
    # Any name is accepted here; unknown shells are reported back as data.
    shell: Optional[str] = None


def export_line(shell: str, bin_token: str) -> str:
    if shell == "fish":
        return f"set -gx PATH {bin_token} $PATH"
    return f"export PATH={bin_token}:$PATH"


def resolve_shell(requested: Optional[str], environ: Mapping[str, str], fallback: str) -> str:
    if requested:
        return requested
    return posixpath.basename(environ.get("SHELL", "")) or fallback


async def setup_path(ctx: ToolContext, args: Mapping[str, Any]) -> Result:
    params = SetupPathArgs.model_validate(dict(args or {}))
    shell = resolve_shell(params.shell, ctx.environ, ctx.settings.default_shell)

    config_file = SHELL_CONFIGS.get(shell)
    if config_file is None:
        return Success({
            "success": False,
            "error": f"Unsupported shell: {shell}",
            "supported_shells": list(SHELL_CONFIGS),
        })

    config_path = anyio.Path(ctx.home / config_file)
    line = export_line(shell, ctx.bin_token)

    try:
        content = ""
        if await config_path.exists():
            content = await config_path.read_text(encoding="utf-8", errors="replace")

        if ctx.bin_token in content or str(ctx.bin_dir) in content:
            return Success({
                "success": True,
                "message": f"PATH already contains {ctx.bin_token} directory",
                "current_config": str(config_path),
            })

        await config_path.parent.mkdir(parents=True, exist_ok=True)
        async with await config_path.open("a", encoding="utf-8") as fh:
            await fh.write(f"\n{MARKER}\n{line}\n")
        logger.info("appended PATH entry to %s", config_path)
    except OSError as exc:
        logger.error("setup_path failed for %s: %s", config_path, exc)
        return Failure(str(exc))

    return Success({
        "success": True,
        "message": f"Added {ctx.bin_token} to PATH in {config_path}",
        "config_path": str(config_path),
        "instruction": f"Restart your terminal or run 'source {config_path}' to apply changes",
        "added_line": line,
    })
