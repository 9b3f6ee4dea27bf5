"""
Operation handlers exposed by the installer server.

Each handler takes a ``ToolContext`` and the raw argument mapping of a
request, and returns a ``Result``. ``HANDLERS`` maps every advertised
operation name to its handler.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Mapping

from .check import check_installation
from .compat import check_compatibility
from .context import ToolContext
from .info import build_from_source, get_installation_info
from .install import install_avalanche_cli, update_avalanche_cli
from .path import setup_path
from .results import Result

Handler = Callable[[ToolContext, Mapping[str, Any]], Awaitable[Result]]

HANDLERS: Dict[str, Handler] = {
    "check_compatibility": check_compatibility,
    "install_avalanche_cli": install_avalanche_cli,
    "check_installation": check_installation,
    "setup_path": setup_path,
    "get_installation_info": get_installation_info,
    "update_avalanche_cli": update_avalanche_cli,
    "build_from_source": build_from_source,
}
