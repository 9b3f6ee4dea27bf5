from __future__ import annotations

from dataclasses import dataclass
import platform, sys

SUPPORTED_PLATFORMS = ("linux", "darwin")


@dataclass(frozen=True)
class PlatformInfo:
    system: str
    architecture: str

    @property
    def supported(self) -> bool:
        return self.system in SUPPORTED_PLATFORMS


def detect_platform() -> PlatformInfo:
    """Read the OS family and CPU architecture of the running host."""
    return PlatformInfo(system=sys.platform, architecture=platform.machine() or "unknown")
