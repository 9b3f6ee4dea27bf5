from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from .context import ToolContext
from .path import SHELL_CONFIGS, export_line
from .results import Result, Success

TAG_PLACEHOLDER = "<tag>"


class BuildFromSourceArgs(BaseModel):
    tag: Optional[str] = None


async def get_installation_info(ctx: ToolContext, args: Mapping[str, Any]) -> Result:
    cfg = ctx.settings
    token = ctx.bin_token
    return Success({
        "title": f"{cfg.display_name} Installation Guide",
        "compatibility": {
            "supported_os": ["Linux", "macOS"],
            "unsupported_os": ["Windows"],
        },
        "installation": {
            "command": cfg.install_command,
            "install_location": f"{token}/{cfg.tool_name}",
            "description": "Downloads and installs the latest binary release",
        },
        "path_setup": {
            shell: f"{export_line(shell, token)} >> ~/{config}"
            for shell, config in SHELL_CONFIGS.items()
        },
        "verification": {
            "command": f"{cfg.tool_name} --version",
            "description": "Check installation and version",
        },
        "updating": {
            "method": "Delete current binary and reinstall",
            "description": "No built-in update mechanism",
        },
        "source_build": {
            "repository": cfg.repository_url,
            "build_script": "./scripts/build.sh",
            "output_binary": f"./bin/{cfg.tool_name}",
        },
    })


async def build_from_source(ctx: ToolContext, args: Mapping[str, Any]) -> Result:
    params = BuildFromSourceArgs.model_validate(dict(args or {}))
    cfg = ctx.settings
    repo = cfg.repository_url.rstrip("/")
    checkout_dir = repo.rsplit("/", 1)[-1]
    tag = params.tag or TAG_PLACEHOLDER
    checkout = (
        f"Checkout specific tag: git checkout {tag}" if params.tag
        else f"Checkout desired tag: git checkout {tag}"
    )
    binary = f"./bin/{cfg.tool_name}"

    return Success({
        "title": f"Building {cfg.display_name} from Source",
        "repository": repo,
        "steps": [
            f"Clone the repository: git clone {repo}.git",
            f"Navigate to the directory: cd {checkout_dir}",
            checkout,
            "Build the binary: ./scripts/build.sh",
            f"Binary will be available at: {binary}",
        ],
        "commands": [
            f"git clone {repo}.git",
            f"cd {checkout_dir}",
            f"git checkout {tag}",
            "./scripts/build.sh",
        ],
        "output": {
            "binary_location": binary,
            "description": f"The compiled binary will be named '{cfg.tool_name}' in the bin directory",
        },
        "note": "Building from source allows you to use specific versions or contribute to development",
    })
