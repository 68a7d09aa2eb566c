"""Structured Logging: JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Block extras (block_index, block_hash, prev_hash) nest under one "block" object
    - Chain and request extras (chain_length, outcome, reason, error_code, path) stay top level
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency
    - Text format appends the block index so commits stay traceable without JSON
"""

import json
import logging
from datetime import datetime, timezone

BLOCK_FIELDS = {
    "block_index": "index",
    "block_hash": "hash",
    "prev_hash": "prev_hash",
}
CHAIN_FIELDS = ("chain_length", "outcome", "reason", "error_code", "path")


def _present(record: logging.LogRecord, key: str):
    return record.__dict__.get(key)


class JSONFormatter(logging.Formatter):
    """Format ledger logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        block = {
            name: _present(record, key)
            for key, name in BLOCK_FIELDS.items()
            if _present(record, key) is not None
        }
        if block:
            log["block"] = block
        for key in CHAIN_FIELDS:
            val = _present(record, key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines, suffixed with [block N] when a block is involved."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        index = _present(record, "block_index")
        if index is not None:
            line += f" [block {index}]"
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
