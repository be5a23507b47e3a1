"""
cribbage_client.errors — Error taxonomy
========================================

Defines the exception hierarchy for the session engine.

Most of these are never raised across a component boundary: the gateway,
the reconciliation engine and the reducer's validation step return them
as typed error values inside their result objects. Each error stores its
context so it can be rendered as a structured log block.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class CribbageClientError(Exception):
    """Base exception for all cribbage_client errors."""

    error_type = "CLIENT_ERROR"

    def context(self) -> Dict[str, Any]:
        return {}

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            message=str(self),
            context=self.context(),
        )


class ConfigError(CribbageClientError):
    """Raised at startup when required configuration is missing."""

    error_type = "CONFIG_ERROR"

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(f"Missing required config keys: {missing}")

    def context(self) -> Dict[str, Any]:
        return {"missing": self.missing}


class ValidationError(CribbageClientError):
    """Malformed or missing input, caught before any network call."""

    error_type = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)

    def context(self) -> Dict[str, Any]:
        return {"field": self.field}


class TransportError(CribbageClientError):
    """Network or server failure. Recoverable by an explicit user retry."""

    error_type = "TRANSPORT_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.url = url
        super().__init__(message)

    def context(self) -> Dict[str, Any]:
        return {"status_code": self.status_code, "url": self.url}


class IllegalAction(CribbageClientError):
    """An action was dispatched outside the phase that allows it."""

    error_type = "ILLEGAL_ACTION"

    def __init__(self, kind: str, phase: Optional[str]):
        self.kind = kind
        self.phase = phase
        super().__init__(f"Action {kind} is not legal in phase {phase or 'none'}")

    def context(self) -> Dict[str, Any]:
        return {"kind": self.kind, "phase": self.phase}


class ReconciliationError(CribbageClientError):
    """Base class for snapshots that cannot be merged into local state."""

    error_type = "RECONCILIATION_ERROR"


class IdentityMismatch(ReconciliationError):
    """A snapshot belongs to a different game than the joined one."""

    error_type = "IDENTITY_MISMATCH"

    def __init__(self, expected: str, got: str):
        self.expected = expected
        self.got = got
        super().__init__(f'bad game id: expected "{expected}", got "{got}"')

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityMismatch):
            return NotImplemented
        return (self.expected, self.got) == (other.expected, other.got)

    def __hash__(self) -> int:
        return hash((self.expected, self.got))

    def context(self) -> Dict[str, Any]:
        return {"expected": self.expected, "got": self.got}


class StaleSnapshot(ReconciliationError):
    """A response arrived for a request older than the latest one issued."""

    error_type = "STALE_SNAPSHOT"

    def __init__(self, generation: int, latest: int):
        self.generation = generation
        self.latest = latest
        super().__init__(
            f"Snapshot from generation {generation} superseded by generation {latest}"
        )

    def context(self) -> Dict[str, Any]:
        return {"generation": self.generation, "latest": self.latest}


def _format_error_block(
    error_type: str,
    message: str,
    context: Dict[str, Any],
) -> str:
    """Format a structured error block for the log file."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        f" {error_type}",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Message:      {message}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(_indent_json(context))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
