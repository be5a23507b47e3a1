# Area: Game
"""
cribbage_client._game.reducer — Pure state transitions
=======================================================

`reduce(state, event)` is synchronous and pure: it returns a new
ClientState and never raises for a known event. Legality is checked
beforehand by `rules.validate_event`; `dispatch` runs both steps and
returns the original state untouched when the event is rejected.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from numbers import Number
from typing import Optional

from ..errors import IllegalAction
from .enums import Phase
from .events import (
    REQUEST_EVENTS,
    CardToggled,
    CutPositionChosen,
    Exited,
    GameEvent,
    JoinRequested,
    ShuffleRequested,
    SnapshotReceived,
)
from .rules import INERT_ACTIONS, validate_event
from .state import ClientState, PendingAction


@dataclass(frozen=True)
class Transition:
    """Result of dispatching one event."""
    state: ClientState
    error: Optional[IllegalAction] = None

    @property
    def accepted(self) -> bool:
        return self.error is None


def dispatch(state: ClientState, event: GameEvent) -> Transition:
    """Validate an event, then apply it if legal."""
    error = validate_event(state, event)
    if error is not None:
        return Transition(state=state, error=error)
    return Transition(state=reduce(state, event))


def reduce(state: ClientState, event: GameEvent) -> ClientState:
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unknown event: {type(event).__name__}")
    return handler(state, event)


# ── Session events ───────────────────────────────────────────

def _join_requested(state: ClientState, event: JoinRequested) -> ClientState:
    # the previous game's shadow is dropped now, not on first snapshot
    return replace(
        state,
        loading=True,
        current_game_id=event.game_id,
        current_game=None,
        current_action=PendingAction(),
    )


def _snapshot_received(state: ClientState, event: SnapshotReceived) -> ClientState:
    action = PendingAction()
    if event.snapshot.phase == Phase.DEAL:
        # keep the shuffle animation going across a Deal refresh
        action = replace(action, num_shuffles=state.current_action.num_shuffles)
    return replace(
        state,
        loading=False,
        current_game=event.snapshot,
        current_action=action,
    )


def _exited(state: ClientState, event: Exited) -> ClientState:
    return replace(state, loading=False, current_game_id="")


# ── Action events ────────────────────────────────────────────

def _shuffle_requested(state: ClientState, event: ShuffleRequested) -> ClientState:
    count = state.current_action.num_shuffles
    if _valid_counter(count):
        count = count + 1
    else:
        count = 1
    return _with_action(state, kind=event.action_kind, num_shuffles=count)


def _card_toggled(state: ClientState, event: CardToggled) -> ClientState:
    card = event.card
    if not card:
        return state

    selected = list(state.current_action.selected_cards)
    if card in selected:
        selected.remove(card)
    else:
        selected.append(card)
    return _with_action(state, kind=event.action_kind, selected_cards=tuple(selected))


def _cut_position_chosen(state: ClientState, event: CutPositionChosen) -> ClientState:
    try:
        perc = float(event.perc_cut)
    except (TypeError, ValueError):
        return state
    if perc != perc:  # NaN
        return state
    return _with_action(state, kind=event.action_kind, perc_cut=min(1.0, max(0.0, perc)))


def _inert(state: ClientState, event: GameEvent) -> ClientState:
    return state


def _with_action(state: ClientState, **changes) -> ClientState:
    return replace(state, current_action=replace(state.current_action, **changes))


def _valid_counter(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, Number):
        return False
    if value != value:  # NaN
        return False
    return value >= 0 and float(value).is_integer()


_HANDLERS = {
    JoinRequested: _join_requested,
    SnapshotReceived: _snapshot_received,
    Exited: _exited,
    ShuffleRequested: _shuffle_requested,
    CardToggled: _card_toggled,
    CutPositionChosen: _cut_position_chosen,
}
_HANDLERS.update({REQUEST_EVENTS[kind]: _inert for kind in INERT_ACTIONS})
