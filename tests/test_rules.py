# Area: Game Tests
"""Tests for cribbage_client._game.rules — phase/action legality table."""

import pytest
from cribbage_client._game.enums import ActionKind, Phase
from cribbage_client._game.events import (
    Exited,
    JoinRequested,
    PegRequested,
    ShuffleRequested,
)
from cribbage_client._game.rules import (
    INERT_ACTIONS,
    LEGAL_ACTIONS,
    LOCAL_ONLY_ACTIONS,
    check_action,
    is_legal,
    legal_actions,
    validate_event,
)
from cribbage_client._game.snapshot import GameSnapshot
from cribbage_client._game.state import ClientState
from cribbage_client.errors import IllegalAction


def _state(phase, game_id="G1"):
    return ClientState(
        current_game_id=game_id,
        current_game=GameSnapshot.model_validate({"phase": phase}),
        loading=False,
    )


class TestLegalityTable:
    """Exact contents of the phase table."""

    def test_deal(self):
        """Test that Deal allows shuffling and dealing."""
        assert legal_actions(Phase.DEAL) == {ActionKind.SHUFFLE, ActionKind.DEAL}

    def test_build_crib(self):
        """Test that BuildCrib allows selecting and discarding."""
        assert legal_actions(Phase.BUILD_CRIB) == {
            ActionKind.SELECT_CARD, ActionKind.BUILD_CRIB,
        }

    def test_cut(self):
        """Test that Cut allows only cutting."""
        assert legal_actions(Phase.CUT) == {ActionKind.CUT}

    def test_peg(self):
        """Test that Peg allows selecting and pegging."""
        assert legal_actions(Phase.PEG) == {ActionKind.SELECT_CARD, ActionKind.PEG}

    @pytest.mark.parametrize("phase", [Phase.SCORE, Phase.COMPLETE])
    def test_read_only_phases(self, phase):
        """Test that Score and Complete allow nothing."""
        assert legal_actions(phase) == frozenset()
        for kind in ActionKind:
            assert is_legal(kind, phase) is False

    def test_no_phase_allows_nothing(self):
        """Test that no snapshot means no legal action."""
        assert legal_actions(None) == frozenset()

    def test_every_phase_listed(self):
        """Test that the table has a row for every phase."""
        assert set(LEGAL_ACTIONS) == set(Phase)

    def test_inert_and_local_split_every_kind(self):
        """Test that every action is either local-only or inert, never both."""
        assert INERT_ACTIONS | LOCAL_ONLY_ACTIONS == set(ActionKind)
        assert not INERT_ACTIONS & LOCAL_ONLY_ACTIONS


class TestCheckAction:
    """Checks return error values instead of raising."""

    def test_legal_returns_none(self):
        """Test that a legal action yields no error."""
        assert check_action(ActionKind.CUT, Phase.CUT) is None

    def test_illegal_returns_error_value(self):
        """Test that an illegal action yields an IllegalAction with context."""
        error = check_action(ActionKind.PEG, Phase.DEAL)
        assert isinstance(error, IllegalAction)
        assert error.kind == "Peg"
        assert error.phase == "Deal"


class TestValidateEvent:
    """Event validation against the session state."""

    def test_session_events_always_legal(self):
        """Test that join and exit are legal with no game loaded."""
        state = ClientState()
        assert validate_event(state, JoinRequested("G1")) is None
        assert validate_event(state, Exited()) is None

    def test_action_checked_against_phase(self):
        """Test that action events are checked against the current phase."""
        assert validate_event(_state("Deal"), ShuffleRequested()) is None
        assert isinstance(validate_event(_state("Deal"), PegRequested()), IllegalAction)

    def test_actions_illegal_after_exit(self):
        """Test that a stale snapshot after exit allows no action."""
        assert isinstance(
            validate_event(_state("Deal", game_id=""), ShuffleRequested()),
            IllegalAction,
        )
