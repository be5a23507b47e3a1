# Area: Game
"""
cribbage_client._game.state — Client shadow state
==================================================

The client's local copy of one match: the last server snapshot plus
the action the player is preparing but has not yet sent.

Both classes are immutable. The reducer produces a new ClientState
for every accepted event.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .enums import ActionKind, Phase
from .snapshot import GameSnapshot

DEFAULT_PERC_CUT = 0.5


@dataclass(frozen=True)
class PendingAction:
    """Client-local action, not yet confirmed by the server."""
    kind: Optional[ActionKind] = None
    selected_cards: Tuple[Any, ...] = ()
    num_shuffles: Any = 0                # cosmetic animation counter
    perc_cut: float = DEFAULT_PERC_CUT   # cut position hint sent with Cut

    def is_selected(self, card: Any) -> bool:
        return bool(card) and card in self.selected_cards


@dataclass(frozen=True)
class ClientState:
    """
    Full client state for the joined game.

    current_game_id is empty when no game is joined. current_game
    holds the last accepted snapshot and is left in place (inert)
    after exit.
    """
    current_game_id: str = ""
    current_game: Optional[GameSnapshot] = None
    current_action: PendingAction = field(default_factory=PendingAction)
    loading: bool = True

    @property
    def phase(self) -> Optional[Phase]:
        if self.current_game is None:
            return None
        return self.current_game.phase

    @property
    def joined(self) -> bool:
        return bool(self.current_game_id)

    @property
    def active_phase(self) -> Optional[Phase]:
        """Phase actions are checked against. None once the game is exited."""
        return self.phase if self.joined else None


INITIAL_STATE = ClientState()
