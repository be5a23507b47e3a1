# Area: Shared
"""
cribbage_client._shared.alert_bus — User-visible notices
=========================================================

Append-only list of notices produced by failures anywhere in the
pipeline. Knows nothing about cribbage.

One AlertBus is created per client session and passed to whatever
needs to append or read. Its owner drains it at session end.
Expiry and dismissal belong to the UI layer. A listener that raises
is logged and skipped; the alert is still stored.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Callable, Iterator, List, Tuple

logger = logging.getLogger("cribbage_client.alerts")


class AlertSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_LOG_LEVELS = {
    AlertSeverity.INFO: logging.INFO,
    AlertSeverity.WARNING: logging.WARNING,
    AlertSeverity.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class Alert:
    message: str
    severity: AlertSeverity = AlertSeverity.INFO


AlertListener = Callable[[Alert], None]


class AlertBus:
    """Append-only alert store with optional listeners."""

    def __init__(self):
        self._alerts: List[Alert] = []
        self._listeners: List[AlertListener] = []

    def add(self, message: str, severity: AlertSeverity = AlertSeverity.INFO) -> Alert:
        alert = Alert(message=str(message), severity=severity)
        self._alerts.append(alert)
        logger.log(_LOG_LEVELS[severity], f"Alert ({severity.value}): {alert.message}")
        for listener in list(self._listeners):
            try:
                listener(alert)
            except Exception:
                # listener failures are logged, never raised to the appender
                logger.exception(f"Alert listener {listener!r} failed")
        return alert

    def info(self, message: str) -> Alert:
        return self.add(message, AlertSeverity.INFO)

    def warning(self, message: str) -> Alert:
        return self.add(message, AlertSeverity.WARNING)

    def error(self, message: str) -> Alert:
        return self.add(message, AlertSeverity.ERROR)

    def subscribe(self, listener: AlertListener) -> Callable[[], None]:
        """Register a listener for new alerts. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def alerts(self) -> Tuple[Alert, ...]:
        return tuple(self._alerts)

    def drain(self) -> Tuple[Alert, ...]:
        """Return all alerts and empty the store. Only the owner calls this."""
        drained = tuple(self._alerts)
        self._alerts.clear()
        return drained

    def __iter__(self) -> Iterator[Alert]:
        return iter(tuple(self._alerts))

    def __len__(self) -> int:
        return len(self._alerts)
