# Area: Game
"""
Game session engine.

This package handles:
- Cards and phases
- The client shadow state and its pure reducer
- Phase/action legality
- Action request building
- Snapshot reconciliation
- The gateway to the game server
"""

from .enums import ActionKind, Blocker, Phase, Suit
from .cards import Card, UNKNOWN_CARD, card_from_wire
from .snapshot import ActiveGame, ActiveGames, GameSnapshot, PeggedCard, PlayerInfo
from .state import ClientState, PendingAction, INITIAL_STATE
from .reducer import Transition, dispatch, reduce
from .rules import LEGAL_ACTIONS, legal_actions, is_legal
from .action_builder import ActionRequest, GameActionBuilder
from .reconciler import ReconcileResult, ReconciliationEngine
from .gateway import GatewayResult, SessionGateway

__all__ = [
    "ActionKind",
    "Blocker",
    "Phase",
    "Suit",
    "Card",
    "UNKNOWN_CARD",
    "card_from_wire",
    "ActiveGame",
    "ActiveGames",
    "GameSnapshot",
    "PeggedCard",
    "PlayerInfo",
    "ClientState",
    "PendingAction",
    "INITIAL_STATE",
    "Transition",
    "dispatch",
    "reduce",
    "LEGAL_ACTIONS",
    "legal_actions",
    "is_legal",
    "ActionRequest",
    "GameActionBuilder",
    "ReconcileResult",
    "ReconciliationEngine",
    "GatewayResult",
    "SessionGateway",
]
