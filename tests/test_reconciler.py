# Area: Game Tests
"""Tests for cribbage_client._game.reconciler — snapshot identity checks."""

import logging

import pytest
from cribbage_client._game.enums import Phase
from cribbage_client._game.reconciler import ReconciliationEngine
from cribbage_client._game.snapshot import GameSnapshot
from cribbage_client._game.state import ClientState, PendingAction
from cribbage_client.errors import IdentityMismatch, StaleSnapshot


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def log_records():
    """Collect every record logged under cribbage_client."""
    pkg_logger = logging.getLogger("cribbage_client")
    saved_level = pkg_logger.level
    handler = _ListHandler()
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG)
    yield handler.records
    pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(saved_level)


def _snapshot(phase="Peg", game_id=None):
    data = {"phase": phase}
    if game_id is not None:
        data["gameID"] = game_id
    return GameSnapshot.model_validate(data)


def _joined(game_id="G1", **action):
    return ClientState(
        current_game_id=game_id,
        current_game=_snapshot("BuildCrib", game_id),
        current_action=PendingAction(**action),
        loading=False,
    )


class TestIdentity:
    """Snapshots must belong to the joined game."""

    def test_matching_snapshot_applied(self):
        """Test that a snapshot for the joined game is merged."""
        engine = ReconciliationEngine()
        result = engine.apply(_joined("G1"), "G1", _snapshot("Peg", "G1"))
        assert result.ok
        assert result.state.phase == Phase.PEG
        assert result.state.loading is False

    def test_wrong_requested_game_rejected(self):
        """Test that a response for another requested game is rejected."""
        engine = ReconciliationEngine()
        state = _joined("G1")
        result = engine.apply(state, "G2", _snapshot("Peg"))
        assert result.error == IdentityMismatch("G1", "G2")
        assert result.state is state

    def test_snapshot_naming_other_game_rejected(self):
        """Test that a snapshot naming a different game is rejected."""
        engine = ReconciliationEngine()
        state = _joined("G1")
        result = engine.apply(state, "G1", _snapshot("Peg", "G9"))
        assert result.error == IdentityMismatch("G1", "G9")
        assert result.state is state

    def test_after_exit_rejected(self):
        """Test that a snapshot arriving after exit is rejected."""
        engine = ReconciliationEngine()
        state = ClientState(current_game_id="", loading=False)
        result = engine.apply(state, "G1", _snapshot("Peg", "G1"))
        assert isinstance(result.error, IdentityMismatch)
        assert result.state is state

    def test_mismatch_message(self):
        """Test the mismatch message format."""
        assert str(IdentityMismatch("G1", "G2")) == 'bad game id: expected "G1", got "G2"'


class TestRejectionLogging:
    """Each rejected snapshot is logged exactly once."""

    def test_rejection_logged_once(self, log_records):
        """Test that one rejected apply produces one warning record."""
        engine = ReconciliationEngine()
        engine.apply(_joined("G1"), "G2", _snapshot("Peg"))
        rejections = [r for r in log_records if hasattr(r, "error_type")]
        assert len(rejections) == 1
        assert rejections[0].levelno == logging.WARNING
        assert rejections[0].error_type == IdentityMismatch.error_type

    def test_accepted_snapshot_logs_no_error(self, log_records):
        """Test that an accepted snapshot logs no error record."""
        engine = ReconciliationEngine()
        engine.apply(_joined("G1"), "G1", _snapshot("Peg", "G1"))
        assert not [r for r in log_records if hasattr(r, "error_type")]


class TestIdempotency:
    """Applying a snapshot twice is the same as applying it once."""

    def test_same_snapshot_twice(self):
        """Test that a repeated snapshot yields an equal state."""
        engine = ReconciliationEngine()
        snap = _snapshot("Cut", "G1")
        once = engine.apply(_joined("G1", perc_cut=0.8), "G1", snap).state
        twice = engine.apply(once, "G1", snap).state
        assert once == twice

    def test_resets_selection(self):
        """Test that an applied snapshot clears the pending action."""
        engine = ReconciliationEngine()
        result = engine.apply(_joined("G1", perc_cut=0.8), "G1", _snapshot("Cut", "G1"))
        assert result.state.current_action == PendingAction()


class TestGenerations:
    """Only answers to the latest request are applied."""

    def test_issue_is_monotonic(self):
        """Test that generations increase by one."""
        engine = ReconciliationEngine()
        assert engine.issue_generation() == 1
        assert engine.issue_generation() == 2
        assert engine.latest_generation == 2

    def test_latest_generation_applied(self):
        """Test that the latest generation is accepted."""
        engine = ReconciliationEngine()
        generation = engine.issue_generation()
        assert engine.apply(_joined(), "G1", _snapshot(), generation).ok

    def test_older_generation_rejected(self):
        """Test that a superseded generation is stale."""
        engine = ReconciliationEngine()
        first = engine.issue_generation()
        engine.issue_generation()
        state = _joined()
        result = engine.apply(state, "G1", _snapshot(), first)
        assert isinstance(result.error, StaleSnapshot)
        assert result.error.generation == 1
        assert result.error.latest == 2
        assert result.state is state

    def test_no_generation_skips_check(self):
        """Test that an unstamped snapshot skips the generation check."""
        engine = ReconciliationEngine()
        engine.issue_generation()
        assert engine.apply(_joined(), "G1", _snapshot()).ok
