from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import anyio
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, METHOD_NOT_FOUND, ErrorData

from .tools import HANDLERS, Handler
from .tools.context import ToolContext
from .tools.registry import DEFAULT_REGISTRY, OperationRegistry
from .tools.results import Result

logger = logging.getLogger("avalanche_installer.dispatcher")


class Dispatcher:
    """Routes a named operation request to its handler.

    Handlers report expected failures as ``Failure`` results. Anything they
    raise is turned into an ``INTERNAL_ERROR`` protocol error here, and an
    unknown name into ``METHOD_NOT_FOUND``. No state is kept between calls.
    """

    def __init__(
        self,
        context: Optional[ToolContext] = None,
        registry: OperationRegistry = DEFAULT_REGISTRY,
        handlers: Optional[Mapping[str, Handler]] = None,
    ) -> None:
        self.context = context or ToolContext()
        self.registry = registry
        self.handlers = dict(handlers if handlers is not None else HANDLERS)
        missing = [name for name in registry.names() if name not in self.handlers]
        if missing:
            raise ValueError(f"No handler registered for: {', '.join(missing)}")

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> Result:
        if name not in self.registry:
            logger.warning("unknown tool requested: %s", name)
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        handler = self.handlers[name]
        args: Dict[str, Any] = dict(arguments or {})
        logger.info("call %s args=%s", name, args)
        try:
            result = await handler(self.context, args)
        except Exception as exc:
            logger.exception("tool %s failed", name)
            raise McpError(ErrorData(code=INTERNAL_ERROR, message=str(exc))) from exc
        logger.debug("result %s: %s", name, result)
        return result

    def call(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> Result:
        return anyio.run(self.dispatch, name, arguments)
