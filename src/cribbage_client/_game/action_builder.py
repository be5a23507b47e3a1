# Area: Game
"""
cribbage_client._game.action_builder — Action request builder
==============================================================

Builds typed, serializable action requests from raw user input plus
the session context (game id, player id and an optional navigation
token). Builds requests; does not check phase legality.

Shuffle and SelectCard requests are local-only: they only drive the
reducer. Deal, BuildCrib, Cut and Peg are sent to the server as

    {"gameID": ..., "playerID": ..., "overcomes": <blocker>, "action": {...}}
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from ..errors import ValidationError
from ..types import ActionEnvelope
from .cards import card_from_wire
from .enums import ActionKind, Blocker
from .events import REQUEST_EVENTS, CardToggled, GameEvent, ShuffleRequested
from .rules import LOCAL_ONLY_ACTIONS
from .state import ClientState

# Blocker each server-bound action overcomes
_OVERCOMES = {
    ActionKind.DEAL: Blocker.DEAL_CARDS,
    ActionKind.BUILD_CRIB: Blocker.CRIB_CARD,
    ActionKind.CUT: Blocker.CUT_CARD,
    ActionKind.PEG: Blocker.PEG_CARD,
}


@dataclass(frozen=True)
class ActionRequest:
    """One prepared action, ready for the reducer or the gateway."""
    kind: ActionKind
    game_id: str
    player_id: Optional[str] = None
    payload: Dict[str, Any] = field(default_factory=dict)
    history: Any = None

    @property
    def is_remote(self) -> bool:
        return self.kind not in LOCAL_ONLY_ACTIONS

    @property
    def overcomes(self) -> Optional[Blocker]:
        return _OVERCOMES.get(self.kind)

    def to_event(self) -> GameEvent:
        """The reducer event that records this action locally."""
        if self.kind == ActionKind.SHUFFLE:
            return ShuffleRequested()
        if self.kind == ActionKind.SELECT_CARD:
            return CardToggled(card=self.payload.get("card"), history=self.history)
        return REQUEST_EVENTS[self.kind](history=self.history)

    def to_wire(self) -> ActionEnvelope:
        """Serialize for POST /create/action. Only valid for remote actions."""
        if not self.is_remote:
            raise ValidationError(
                f"{self.kind.value} is a local action and is never sent", field="kind",
            )
        return {
            "gameID": self.game_id,
            "playerID": self.player_id,
            "overcomes": self.overcomes.value,
            "action": _wire_payload(self.payload),
        }


class GameActionBuilder:
    """
    Builds ActionRequests for one game and player.

    Raises ValidationError on malformed input.
    """

    def __init__(self, game_id: str, player_id: Optional[str] = None, history: Any = None):
        self.game_id = game_id
        self.player_id = None if player_id is None else str(player_id)
        self.history = history

    @classmethod
    def for_state(
        cls, state: ClientState, player_id: Optional[str] = None, history: Any = None,
    ) -> "GameActionBuilder":
        return cls(state.current_game_id, player_id=player_id, history=history)

    def shuffle(self) -> ActionRequest:
        return self._request(ActionKind.SHUFFLE)

    def select_card(self, card: Any) -> ActionRequest:
        return self._request(ActionKind.SELECT_CARD, {"card": _parse_card(card)})

    def deal(self, num_shuffles: Any = 0) -> ActionRequest:
        if isinstance(num_shuffles, bool) or not isinstance(num_shuffles, int) or num_shuffles < 0:
            num_shuffles = 0
        return self._request(ActionKind.DEAL, {"num_shuffles": num_shuffles})

    def build_crib(self, cards: Iterable[Any]) -> ActionRequest:
        parsed = [_parse_card(c) for c in cards]
        if not parsed:
            raise ValidationError("No cards selected for the crib", field="cards")
        if not all(parsed):
            raise ValidationError("Face-down cards cannot be discarded", field="cards")
        return self._request(ActionKind.BUILD_CRIB, {"cards": parsed})

    def cut(self, perc_cut: float = 0.5) -> ActionRequest:
        try:
            perc = float(perc_cut)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid cut position: {perc_cut!r}", field="perc_cut") from None
        if not 0.0 <= perc <= 1.0:
            raise ValidationError(f"Cut position out of range: {perc}", field="perc_cut")
        return self._request(ActionKind.CUT, {"percentage": perc})

    def peg(self, card: Any = None) -> ActionRequest:
        """Peg a card, or say "go" when no card is given."""
        if card is None:
            return self._request(ActionKind.PEG, {"card": None, "say_go": True})
        parsed = _parse_card(card)
        if not parsed:
            raise ValidationError("Face-down cards cannot be pegged", field="card")
        return self._request(ActionKind.PEG, {"card": parsed, "say_go": False})

    def from_pending(self, kind: ActionKind, state: ClientState) -> ActionRequest:
        """Build a server-bound request from the locally prepared action."""
        pending = state.current_action
        if kind == ActionKind.DEAL:
            return self.deal(pending.num_shuffles)
        if kind == ActionKind.BUILD_CRIB:
            return self.build_crib(pending.selected_cards)
        if kind == ActionKind.CUT:
            return self.cut(pending.perc_cut)
        if kind == ActionKind.PEG:
            selected = pending.selected_cards
            if len(selected) > 1:
                raise ValidationError("Only one card can be pegged at a time", field="card")
            return self.peg(selected[0] if selected else None)
        raise ValidationError(f"{kind.value} is not a server action", field="kind")

    def _request(self, kind: ActionKind, payload: Optional[Dict[str, Any]] = None) -> ActionRequest:
        if not self.game_id:
            raise ValidationError("No game joined", field="game_id")
        return ActionRequest(
            kind=kind,
            game_id=self.game_id,
            player_id=self.player_id,
            payload=payload or {},
            history=self.history,
        )


def _parse_card(card: Any):
    try:
        return card_from_wire(card)
    except ValueError as e:
        raise ValidationError(str(e), field="card") from e


def _wire_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in payload.items():
        if isinstance(value, list):
            out[key] = [c.to_wire() for c in value]
        elif hasattr(value, "to_wire"):
            out[key] = value.to_wire()
        else:
            out[key] = value
    return out
