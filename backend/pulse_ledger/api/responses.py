"""JSON Responses: pretty-printed JSON with serialization failures mapped to 500.

Invariants:
    - Bodies are rendered with a two-space indent
    - Any render failure raises SerializationError (never a silent empty body)
"""

import json
import logging
from typing import Any

from fastapi.responses import JSONResponse

from pulse_ledger.core.errors import ErrorContext, SerializationError

logger = logging.getLogger(__name__)


class PrettyJSONResponse(JSONResponse):
    """JSONResponse rendered with indentation."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=2,
        ).encode("utf-8")


def render_json(content: Any, status_code: int = 200) -> PrettyJSONResponse:
    """Build a PrettyJSONResponse or raise SerializationError."""
    try:
        return PrettyJSONResponse(content=content, status_code=status_code)
    except (TypeError, ValueError) as e:
        logger.error(f"Serializing JSON failed: {e}")
        raise SerializationError(
            str(e), ErrorContext(debug_info={"type": type(content).__name__}),
        ) from e
