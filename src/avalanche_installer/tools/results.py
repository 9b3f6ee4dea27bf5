from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Union


@dataclass(frozen=True)
class Success:
    """The operation ran; ``payload`` describes its outcome (which may be negative)."""

    payload: Dict[str, Any]

    def render(self) -> Dict[str, Any]:
        return dict(self.payload)


@dataclass(frozen=True)
class Failure:
    """An expected, recoverable failure reported as data rather than raised."""

    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def render(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message, **self.details}


Result = Union[Success, Failure]


def render_text(result: Result) -> str:
    return json.dumps(result.render(), indent=2)
