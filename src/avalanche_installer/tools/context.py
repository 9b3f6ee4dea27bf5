from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping

from ..settings import Settings, settings as default_settings
from ..system.executor import ShellExecutor
from ..system.platform import PlatformInfo, detect_platform


@dataclass
class ToolContext:
    """Capabilities shared by every handler: shell, platform probe, home dir and environment."""

    settings: Settings = field(default_factory=lambda: default_settings)
    executor: ShellExecutor = field(default_factory=ShellExecutor)
    platform_probe: Callable[[], PlatformInfo] = detect_platform
    home: Path = field(default_factory=Path.home)
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)

    @property
    def bin_dir(self) -> Path:
        return self.home / self.settings.bin_dir_name

    @property
    def bin_token(self) -> str:
        return f"~/{self.settings.bin_dir_name}"

    @property
    def binary_path(self) -> Path:
        return self.bin_dir / self.settings.tool_name
