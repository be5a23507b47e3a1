"""
cribbage_client.client — Game session facade
=============================================

Wires the engine together for one player:

    user input -> GameActionBuilder -> SessionGateway (network)
               -> ReconciliationEngine -> reducer -> CribbageClient.state

The client owns its AlertBus, gateway and reconciliation engine and
holds the single current ClientState. Every method returns an Outcome;
none of them raise.

Ordering: every join, refresh, exit and server action issues a new
request generation, so a response to anything but the latest request
is rejected as stale instead of overwriting fresher state. Exiting
therefore also invalidates any request still in flight.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Callable, Dict, Optional

from .errors import CribbageClientError, ValidationError
from ._game.action_builder import GameActionBuilder
from ._game.enums import ActionKind
from ._game.events import CutPositionChosen, Exited, JoinRequested
from ._game.gateway import GatewayResult, SessionGateway
from ._game.reconciler import ReconciliationEngine
from ._game.reducer import dispatch, reduce
from ._game.rules import check_action
from ._game.snapshot import ActiveGames, GameSnapshot
from ._game.state import ClientState, INITIAL_STATE
from ._shared.alert_bus import AlertBus
from ._shared.http_client import HttpClient

logger = logging.getLogger("cribbage_client.client")

# Called with (history, destination) after a navigation-worthy step
Navigator = Callable[[Any, str], None]

HOME_DESTINATION = "home"


@dataclass(frozen=True)
class Outcome:
    state: ClientState
    error: Optional[CribbageClientError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CribbageClient:
    """
    One player's view of the cribbage server.

    Attributes:
        state: The current ClientState
        active_games: Last successful active-games listing, if any
    """

    def __init__(
        self,
        gateway: SessionGateway,
        player_id: Optional[str] = None,
        navigator: Optional[Navigator] = None,
        engine: Optional[ReconciliationEngine] = None,
    ):
        self.gateway = gateway
        self.player_id = None if player_id is None else str(player_id)
        self.navigator = navigator
        self.engine = engine or ReconciliationEngine()
        self.state: ClientState = INITIAL_STATE
        self.active_games: Optional[ActiveGames] = None

    @classmethod
    def from_config(
        cls, config: Dict[str, Any], navigator: Optional[Navigator] = None,
    ) -> "CribbageClient":
        http = HttpClient(
            config["server_url"],
            timeout=config.get("request_timeout_seconds", 10.0),
        )
        gateway = SessionGateway(http, AlertBus())
        return cls(gateway, player_id=config.get("player_id"), navigator=navigator)

    @property
    def alerts(self) -> AlertBus:
        return self.gateway.alerts

    # ── Session lifecycle ────────────────────────────────────

    def join(self, game_id: str, history: Any = None) -> Outcome:
        """Join a game and fetch its first snapshot."""
        if not game_id:
            return self._invalid("undefined game ID", "game_id")
        game_id = str(game_id)
        logger.info(f"[{game_id}] Joining game")
        self.state = reduce(self.state, JoinRequested(game_id, history))
        generation = self.engine.issue_generation()
        self._navigate(history, f"game/{game_id}")
        return self._fetch(game_id, generation)

    def refresh(self) -> Outcome:
        """Re-fetch the current game. The only retry path."""
        if not self.state.joined:
            return self._invalid("undefined game ID", "game_id")
        generation = self.engine.issue_generation()
        return self._fetch(self.state.current_game_id, generation)

    def exit(self, history: Any = None) -> Outcome:
        """Leave the game. Responses still in flight will be rejected."""
        logger.info(f"[{self.state.current_game_id}] Exiting game")
        self.state = reduce(self.state, Exited(history))
        self.engine.issue_generation()
        self._navigate(history, HOME_DESTINATION)
        return Outcome(self.state)

    def close(self) -> None:
        """End the session: drop pending alerts and release the connection."""
        self.alerts.drain()
        self.gateway.http.close()

    def __enter__(self) -> "CribbageClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # ── Local actions ────────────────────────────────────────

    def shuffle(self) -> Outcome:
        illegal = check_action(ActionKind.SHUFFLE, self.state.active_phase)
        if illegal is not None:
            return Outcome(self.state, illegal)
        return self._apply_local(self._builder().shuffle())

    def toggle_card(self, card: Any, history: Any = None) -> Outcome:
        illegal = check_action(ActionKind.SELECT_CARD, self.state.active_phase)
        if illegal is not None:
            return Outcome(self.state, illegal)
        try:
            request = self._builder(history).select_card(card)
        except ValidationError as e:
            return self._invalid(e.message, e.field)
        return self._apply_local(request)

    def choose_cut(self, perc_cut: float) -> Outcome:
        try:
            perc = float(perc_cut)
        except (TypeError, ValueError):
            return self._invalid(f"Invalid cut position: {perc_cut!r}", "perc_cut")
        transition = dispatch(self.state, CutPositionChosen(perc))
        self.state = transition.state
        return Outcome(self.state, transition.error)

    # ── Server actions ───────────────────────────────────────

    def deal(self, history: Any = None) -> Outcome:
        return self._submit(ActionKind.DEAL, history)

    def build_crib(self, history: Any = None) -> Outcome:
        return self._submit(ActionKind.BUILD_CRIB, history)

    def cut(self, history: Any = None) -> Outcome:
        return self._submit(ActionKind.CUT, history)

    def peg(self, history: Any = None) -> Outcome:
        return self._submit(ActionKind.PEG, history)

    # ── Home ─────────────────────────────────────────────────

    def refresh_active_games(self, player_id: Optional[str] = None) -> GatewayResult[ActiveGames]:
        result = self.gateway.refresh_active_games(player_id or self.player_id)
        if result.ok:
            self.active_games = result.value
        return result

    # ── Internals ────────────────────────────────────────────

    def _submit(self, kind: ActionKind, history: Any) -> Outcome:
        # illegal actions never reach the network
        illegal = check_action(kind, self.state.active_phase)
        if illegal is not None:
            return Outcome(self.state, illegal)

        try:
            request = self._builder(history).from_pending(kind, self.state)
        except ValidationError as e:
            return self._invalid(e.message, e.field)

        self.state = dispatch(self.state, request.to_event()).state
        generation = self.engine.issue_generation()
        result = self.gateway.submit_action(request, generation)
        if not result.ok:
            return Outcome(self.state, result.error)

        outcome = self._reconcile(request.game_id, result.value, generation)
        if outcome.ok:
            self._navigate(history, f"game/{request.game_id}")
        return outcome

    def _fetch(self, game_id: str, generation: int) -> Outcome:
        result = self.gateway.fetch_game(game_id, generation)
        if not result.ok:
            return Outcome(self.state, result.error)
        return self._reconcile(game_id, result.value, generation)

    def _reconcile(self, game_id: str, snapshot: GameSnapshot, generation: int) -> Outcome:
        result = self.engine.apply(self.state, game_id, snapshot, generation)
        if not result.ok:
            return Outcome(self.state, result.error)
        self.state = result.state
        return Outcome(self.state)

    def _apply_local(self, request) -> Outcome:
        transition = dispatch(self.state, request.to_event())
        self.state = transition.state
        return Outcome(self.state, transition.error)

    def _builder(self, history: Any = None) -> GameActionBuilder:
        return GameActionBuilder.for_state(self.state, self.player_id, history)

    def _invalid(self, message: str, field: Optional[str]) -> Outcome:
        self.alerts.warning(message)
        return Outcome(self.state, ValidationError(message, field=field))

    def _navigate(self, history: Any, destination: str) -> None:
        if self.navigator is not None and history is not None:
            self.navigator(history, destination)
