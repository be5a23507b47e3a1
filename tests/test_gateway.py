# Area: Game Tests
"""Tests for cribbage_client._game.gateway — server calls and failure mapping."""

import pytest
from unittest.mock import MagicMock

from cribbage_client._game.action_builder import GameActionBuilder
from cribbage_client._game.enums import Phase
from cribbage_client._game.gateway import SessionGateway
from cribbage_client._shared.alert_bus import AlertBus, AlertSeverity
from cribbage_client.errors import TransportError, ValidationError


def _gateway():
    http = MagicMock()
    return SessionGateway(http, AlertBus()), http


class TestRefreshActiveGames:
    """Listing a player's active games."""

    @pytest.mark.parametrize("player_id", [None, ""])
    def test_undefined_player_id(self, player_id):
        """Test that a missing player id warns and never calls the server."""
        gateway, http = _gateway()
        result = gateway.refresh_active_games(player_id)
        assert isinstance(result.error, ValidationError)
        assert [(a.message, a.severity) for a in gateway.alerts] == [
            ("undefined player ID", AlertSeverity.WARNING),
        ]
        http.get_json.assert_not_called()

    def test_success(self):
        """Test that the listing is parsed and no alert is raised."""
        gateway, http = _gateway()
        http.get_json.return_value = {
            "player": {"id": "42", "name": "alice"},
            "activeGames": [{"gameID": 7, "players": []}],
        }
        result = gateway.refresh_active_games("42")
        assert result.ok
        assert result.value.active_games[0].game_id == "7"
        http.get_json.assert_called_once_with("/games/active", params={"playerID": "42"})
        assert len(gateway.alerts) == 0

    def test_server_error_message_alerted(self):
        """Test that the server's error message becomes an error alert."""
        gateway, http = _gateway()
        http.get_json.side_effect = TransportError("player not found", status_code=404)
        result = gateway.refresh_active_games("42")
        assert result.error.status_code == 404
        assert [(a.message, a.severity) for a in gateway.alerts] == [
            ("player not found", AlertSeverity.ERROR),
        ]


class TestFetchGame:
    """Loading one game snapshot."""

    def test_success_carries_generation(self):
        """Test that the result carries the caller's generation."""
        gateway, http = _gateway()
        http.get_json.return_value = {"gameID": 7, "phase": 2}
        result = gateway.fetch_game("7", generation=3)
        assert result.ok
        assert result.value.phase == Phase.CUT
        assert result.generation == 3
        http.get_json.assert_called_once_with("/game/7")

    def test_missing_game_id(self):
        """Test that an empty game id never calls the server."""
        gateway, http = _gateway()
        result = gateway.fetch_game("")
        assert isinstance(result.error, ValidationError)
        http.get_json.assert_not_called()

    def test_malformed_body(self):
        """Test that an unparseable snapshot is a transport error."""
        gateway, http = _gateway()
        http.get_json.return_value = {"phase": "Bidding"}
        result = gateway.fetch_game("7")
        assert isinstance(result.error, TransportError)
        assert result.error.message == "Malformed response from server"
        assert gateway.alerts.alerts[0].severity == AlertSeverity.ERROR

    @pytest.mark.parametrize("rank", [[5], {"value": 5}])
    def test_unreadable_card_is_malformed(self, rank):
        """Test that a non-scalar card rank is returned as a malformed response."""
        gateway, http = _gateway()
        http.get_json.return_value = {
            "phase": "Peg",
            "players": [{"id": "p1"}],
            "hands": {"p1": [{"rank": rank, "suit": "H"}]},
        }
        result = gateway.fetch_game("7")
        assert isinstance(result.error, TransportError)
        assert result.error.message == "Malformed response from server"
        assert [a.severity for a in gateway.alerts] == [AlertSeverity.ERROR]


class TestSubmitAction:
    """Posting actions to the server."""

    def test_posts_envelope(self):
        """Test that the action envelope is posted to the action route."""
        gateway, http = _gateway()
        http.post_json.return_value = {"gameID": "G1", "phase": "BuildCrib"}
        request = GameActionBuilder("G1", "p1").deal(2)
        result = gateway.submit_action(request, generation=5)
        assert result.ok
        assert result.generation == 5
        path, body = http.post_json.call_args.args
        assert path == "/create/action"
        assert body["action"] == {"num_shuffles": 2}

    def test_missing_player_id(self):
        """Test that an action without a player id is rejected locally."""
        gateway, http = _gateway()
        result = gateway.submit_action(GameActionBuilder("G1").deal())
        assert result.error.field == "player_id"
        http.post_json.assert_not_called()

    def test_local_action_never_sent(self):
        """Test that a local-only action is never posted."""
        gateway, http = _gateway()
        result = gateway.submit_action(GameActionBuilder("G1", "p1").shuffle())
        assert isinstance(result.error, ValidationError)
        http.post_json.assert_not_called()

    def test_transport_failure(self):
        """Test that a network failure is returned and alerted."""
        gateway, http = _gateway()
        http.post_json.side_effect = TransportError("Network request failed")
        result = gateway.submit_action(GameActionBuilder("G1", "p1").cut(0.5))
        assert isinstance(result.error, TransportError)
        assert gateway.alerts.alerts[-1].message == "Network request failed"


class TestBrokenListener:
    """A failing alert subscriber never breaks a server call."""

    def test_raising_listener_still_returns_result(self):
        """Test that a raising listener still yields the validation error and one alert."""
        gateway, http = _gateway()

        def broken(alert):
            raise RuntimeError("display went away")

        gateway.alerts.subscribe(broken)
        result = gateway.refresh_active_games(None)
        assert isinstance(result.error, ValidationError)
        assert len(gateway.alerts) == 1
        http.get_json.assert_not_called()

    def test_raising_listener_on_transport_failure(self):
        """Test that a raising listener does not mask a transport error."""
        gateway, http = _gateway()
        gateway.alerts.subscribe(MagicMock(side_effect=RuntimeError("boom")))
        http.get_json.side_effect = TransportError("timeout")
        result = gateway.fetch_game("7")
        assert isinstance(result.error, TransportError)
        assert [a.message for a in gateway.alerts] == ["timeout"]
