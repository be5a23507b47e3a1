# Area: Game
"""
cribbage_client._game.events — Reducer events
==============================================

Tagged events accepted by the reducer. Session events (join, snapshot,
exit) are always legal. Action events carry the ActionKind used to
look up their legality in the phase table.

`history` is an opaque navigation token. The reducer never reads it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from .enums import ActionKind
from .snapshot import GameSnapshot


@dataclass(frozen=True)
class GameEvent:
    action_kind: ClassVar[Optional[ActionKind]] = None


@dataclass(frozen=True)
class JoinRequested(GameEvent):
    game_id: str
    history: Any = None


@dataclass(frozen=True)
class SnapshotReceived(GameEvent):
    game_id: str
    snapshot: GameSnapshot


@dataclass(frozen=True)
class Exited(GameEvent):
    history: Any = None


@dataclass(frozen=True)
class ShuffleRequested(GameEvent):
    action_kind: ClassVar[Optional[ActionKind]] = ActionKind.SHUFFLE


@dataclass(frozen=True)
class CardToggled(GameEvent):
    action_kind: ClassVar[Optional[ActionKind]] = ActionKind.SELECT_CARD

    card: Any = None
    history: Any = None


@dataclass(frozen=True)
class CutPositionChosen(GameEvent):
    action_kind: ClassVar[Optional[ActionKind]] = ActionKind.CUT

    perc_cut: float = 0.5


@dataclass(frozen=True)
class DealRequested(GameEvent):
    action_kind: ClassVar[Optional[ActionKind]] = ActionKind.DEAL

    history: Any = None


@dataclass(frozen=True)
class BuildCribRequested(GameEvent):
    action_kind: ClassVar[Optional[ActionKind]] = ActionKind.BUILD_CRIB

    history: Any = None


@dataclass(frozen=True)
class CutRequested(GameEvent):
    action_kind: ClassVar[Optional[ActionKind]] = ActionKind.CUT

    history: Any = None


@dataclass(frozen=True)
class PegRequested(GameEvent):
    action_kind: ClassVar[Optional[ActionKind]] = ActionKind.PEG

    history: Any = None


# Request event for each server-bound action kind
REQUEST_EVENTS = {
    ActionKind.DEAL: DealRequested,
    ActionKind.BUILD_CRIB: BuildCribRequested,
    ActionKind.CUT: CutRequested,
    ActionKind.PEG: PegRequested,
}
