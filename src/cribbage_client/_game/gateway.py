# Area: Game
"""
cribbage_client._game.gateway — Session gateway
================================================

The single point of contact with the game server. Each call issues
at most one request and returns a GatewayResult; nothing is raised
past this boundary and local state is never touched here.

Failure handling:
- Missing identifiers and local-only actions are rejected before any
  request, as a ValidationError plus a warning alert.
- Transport and server failures, and response bodies that do not
  parse, become a TransportError plus an error alert.

Endpoints:
    GET  /games/active?playerID={id}  -> {player, activeGames}
    GET  /game/{gameID}               -> game snapshot
    POST /create/action               -> game snapshot
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import ValidationError as PydanticValidationError

from ..errors import TransportError, ValidationError
from .._shared.alert_bus import AlertBus
from .._shared.http_client import HttpClient
from .action_builder import ActionRequest
from .snapshot import ActiveGames, GameSnapshot

logger = logging.getLogger("cribbage_client.gateway")

T = TypeVar("T")

GatewayError = Union[ValidationError, TransportError]

# the server registers the action route under its /create group
ACTION_PATH = "/create/action"


@dataclass(frozen=True)
class GatewayResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[GatewayError] = None
    generation: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SessionGateway:
    """Issues server requests and maps failures to typed results."""

    def __init__(self, http: HttpClient, alerts: AlertBus):
        self.http = http
        self.alerts = alerts

    def refresh_active_games(self, player_id: Optional[str]) -> GatewayResult[ActiveGames]:
        if not player_id:
            return self._reject("undefined player ID", field="player_id")
        return self._call(
            lambda: self.http.get_json("/games/active", params={"playerID": player_id}),
            ActiveGames,
        )

    def fetch_game(
        self, game_id: Optional[str], generation: Optional[int] = None,
    ) -> GatewayResult[GameSnapshot]:
        if not game_id:
            return self._reject("undefined game ID", field="game_id")
        return self._call(
            lambda: self.http.get_json(f"/game/{game_id}"),
            GameSnapshot,
            generation,
        )

    def submit_action(
        self, request: ActionRequest, generation: Optional[int] = None,
    ) -> GatewayResult[GameSnapshot]:
        if not request.game_id:
            return self._reject("undefined game ID", field="game_id")
        if not request.player_id:
            return self._reject("undefined player ID", field="player_id")
        if not request.is_remote:
            return self._reject(
                f"{request.kind.value} is a local action and is never sent", field="kind",
            )
        logger.info(f"[{request.game_id}] Submitting {request.kind.value}")
        return self._call(
            lambda: self.http.post_json(ACTION_PATH, request.to_wire()),
            GameSnapshot,
            generation,
        )

    def _call(self, send, model, generation: Optional[int] = None) -> GatewayResult:
        try:
            body = send()
        except TransportError as e:
            self.alerts.error(e.message)
            return GatewayResult(error=e, generation=generation)

        try:
            value = model.model_validate(body)
        except PydanticValidationError as e:
            logger.error(f"Unreadable {model.__name__} from server: {e}")
            error = TransportError("Malformed response from server")
            self.alerts.error(error.message)
            return GatewayResult(error=error, generation=generation)

        return GatewayResult(value=value, generation=generation)

    def _reject(self, message: str, field: str) -> GatewayResult[Any]:
        self.alerts.warning(message)
        return GatewayResult(error=ValidationError(message, field=field))
