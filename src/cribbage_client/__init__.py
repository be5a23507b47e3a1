"""
cribbage_client — Cribbage game session client
===============================================

Client-side session engine for an online cribbage game: keeps a
local shadow of one match, decides which actions are legal in each
phase, sends actions to the game server and reconciles the snapshots
it returns.

Quick Start:
    from cribbage_client import CribbageClient, load_config
    client = CribbageClient.from_config(load_config("config.json"))
    client.join("7")
    client.shuffle()
    client.deal()
    for alert in client.alerts:
        print(alert.severity.value, alert.message)

Lower-level pieces (pure reducer, reconciliation engine, gateway)
are importable for UIs that manage their own store:

    from cribbage_client import dispatch, ReconciliationEngine, SessionGateway
"""

from .client import CribbageClient, Outcome
from .errors import (
    CribbageClientError,
    ConfigError,
    ValidationError,
    TransportError,
    IllegalAction,
    ReconciliationError,
    IdentityMismatch,
    StaleSnapshot,
)
from ._game import (
    ActionKind,
    Phase,
    Suit,
    Card,
    UNKNOWN_CARD,
    card_from_wire,
    ActiveGame,
    ActiveGames,
    GameSnapshot,
    PlayerInfo,
    ClientState,
    PendingAction,
    INITIAL_STATE,
    Transition,
    dispatch,
    reduce,
    legal_actions,
    ActionRequest,
    GameActionBuilder,
    ReconcileResult,
    ReconciliationEngine,
    GatewayResult,
    SessionGateway,
)
from ._game.events import (
    JoinRequested,
    SnapshotReceived,
    Exited,
    ShuffleRequested,
    CardToggled,
    CutPositionChosen,
    DealRequested,
    BuildCribRequested,
    CutRequested,
    PegRequested,
)
from ._shared import (
    Alert,
    AlertBus,
    AlertSeverity,
    HttpClient,
    load_config,
    validate_config,
    setup_logging,
)

__all__ = [
    # Facade
    "CribbageClient",
    "Outcome",
    # Errors
    "CribbageClientError",
    "ConfigError",
    "ValidationError",
    "TransportError",
    "IllegalAction",
    "ReconciliationError",
    "IdentityMismatch",
    "StaleSnapshot",
    # Model
    "ActionKind",
    "Phase",
    "Suit",
    "Card",
    "UNKNOWN_CARD",
    "card_from_wire",
    "ActiveGame",
    "ActiveGames",
    "GameSnapshot",
    "PlayerInfo",
    "ClientState",
    "PendingAction",
    "INITIAL_STATE",
    # Events
    "JoinRequested",
    "SnapshotReceived",
    "Exited",
    "ShuffleRequested",
    "CardToggled",
    "CutPositionChosen",
    "DealRequested",
    "BuildCribRequested",
    "CutRequested",
    "PegRequested",
    # Engine
    "Transition",
    "dispatch",
    "reduce",
    "legal_actions",
    "ActionRequest",
    "GameActionBuilder",
    "ReconcileResult",
    "ReconciliationEngine",
    "GatewayResult",
    "SessionGateway",
    # Shared
    "Alert",
    "AlertBus",
    "AlertSeverity",
    "HttpClient",
    "load_config",
    "validate_config",
    "setup_logging",
]
__version__ = "0.1.0"
