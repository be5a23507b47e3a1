# Area: Game
"""
cribbage_client._game.reconciler — Snapshot reconciliation
===========================================================

Merges a server snapshot into local state under identity checks.

A snapshot is rejected when:
1. The game id it was requested for is not the joined game id
   (a response to an abandoned join, or one arriving after exit)
2. The snapshot itself names a different game
3. It answers a request older than the latest one issued

Rejections are returned as typed error values and the input state is
never modified. Accepted snapshots go through the reducer's
SnapshotReceived transition, so applying the same snapshot twice
yields the same state.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Optional

from ..errors import IdentityMismatch, ReconciliationError, StaleSnapshot
from .._shared.logging_config import log_client_error
from .events import SnapshotReceived
from .reducer import reduce
from .snapshot import GameSnapshot
from .state import ClientState

logger = logging.getLogger("cribbage_client.reconciler")


@dataclass(frozen=True)
class ReconcileResult:
    state: ClientState
    error: Optional[ReconciliationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ReconciliationEngine:
    """
    Applies server snapshots to local state.

    Tracks request generations: every outgoing request may be stamped
    with `issue_generation()`, and a snapshot carrying a generation
    other than the latest issued one is stale. Snapshots applied
    without a generation skip that check.

    Attributes:
        latest_generation: The most recently issued generation id
    """

    def __init__(self):
        self.latest_generation = 0

    def issue_generation(self) -> int:
        """Issue a new generation id, superseding all earlier ones."""
        self.latest_generation += 1
        return self.latest_generation

    def check(
        self,
        state: ClientState,
        expected_game_id: str,
        snapshot: GameSnapshot,
        generation: Optional[int] = None,
    ) -> Optional[ReconciliationError]:
        """Return the reason a snapshot cannot be applied, or None."""
        if expected_game_id != state.current_game_id:
            return IdentityMismatch(state.current_game_id, expected_game_id)
        if snapshot.game_id is not None and snapshot.game_id != expected_game_id:
            return IdentityMismatch(state.current_game_id, snapshot.game_id)
        if generation is not None and generation != self.latest_generation:
            return StaleSnapshot(generation, self.latest_generation)
        return None

    def apply(
        self,
        state: ClientState,
        expected_game_id: str,
        snapshot: GameSnapshot,
        generation: Optional[int] = None,
    ) -> ReconcileResult:
        """
        Merge a snapshot into state.

        Args:
            state: Current client state (not modified)
            expected_game_id: Game id the snapshot was requested for
            snapshot: Parsed server snapshot
            generation: Generation id stamped on the originating request

        Returns:
            ReconcileResult with the new state, or the unchanged state
            and an IdentityMismatch / StaleSnapshot error
        """
        error = self.check(state, expected_game_id, snapshot, generation)
        if error is not None:
            log_client_error(error, level=logging.WARNING)
            return ReconcileResult(state=state, error=error)

        new_state = reduce(state, SnapshotReceived(expected_game_id, snapshot))
        logger.info(
            f"[{expected_game_id}] Snapshot applied (phase={snapshot.phase.value})"
        )
        return ReconcileResult(state=new_state)
