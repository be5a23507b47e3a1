# Area: Game
"""
cribbage_client._game.rules — Phase/action legality
====================================================

The client never advances the phase. It only decides which actions
to offer in the phase the server reported. Score and Complete are
read-only, and so is a session with no snapshot yet.

Deal, BuildCrib, Cut and Peg requests have no local consequence: the
server computes what moves where. They are listed in INERT_ACTIONS
so that "accepted but inert" is an explicit part of the table.
"""

import logging
from typing import FrozenSet, Optional

from ..errors import IllegalAction
from .enums import ActionKind, Phase
from .events import GameEvent
from .state import ClientState

logger = logging.getLogger("cribbage_client.rules")


# Legal actions per phase: {phase: {action_kind, ...}}
LEGAL_ACTIONS = {
    Phase.DEAL: frozenset({ActionKind.SHUFFLE, ActionKind.DEAL}),
    Phase.BUILD_CRIB: frozenset({ActionKind.SELECT_CARD, ActionKind.BUILD_CRIB}),
    Phase.CUT: frozenset({ActionKind.CUT}),
    Phase.PEG: frozenset({ActionKind.SELECT_CARD, ActionKind.PEG}),
    Phase.SCORE: frozenset(),
    Phase.COMPLETE: frozenset(),
}

# Actions that only change local state and are never sent to the server
LOCAL_ONLY_ACTIONS = frozenset({ActionKind.SHUFFLE, ActionKind.SELECT_CARD})

# Actions accepted in their phase whose reducer transition is a no-op
INERT_ACTIONS = frozenset({
    ActionKind.DEAL,
    ActionKind.BUILD_CRIB,
    ActionKind.CUT,
    ActionKind.PEG,
})


def legal_actions(phase: Optional[Phase]) -> FrozenSet[ActionKind]:
    """Return the actions legal in a phase. No phase means none."""
    if phase is None:
        return frozenset()
    return LEGAL_ACTIONS.get(phase, frozenset())


def is_legal(kind: ActionKind, phase: Optional[Phase]) -> bool:
    return kind in legal_actions(phase)


def check_action(kind: ActionKind, phase: Optional[Phase]) -> Optional[IllegalAction]:
    """
    Check an action kind against the phase table.

    Returns:
        None if legal, otherwise an IllegalAction error value
    """
    if is_legal(kind, phase):
        return None
    error = IllegalAction(kind.value, phase.value if phase else None)
    logger.debug(str(error))
    return error


def validate_event(state: ClientState, event: GameEvent) -> Optional[IllegalAction]:
    """
    Validate an event before it reaches the reducer.

    Session events have no action kind and are always legal.
    """
    if event.action_kind is None:
        return None
    return check_action(event.action_kind, state.active_phase)
