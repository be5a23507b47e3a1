# Area: Shared Tests
"""Tests for cribbage_client._shared.alert_bus."""

from cribbage_client._shared.alert_bus import Alert, AlertBus, AlertSeverity


class TestAlertBus:
    """Appending, reading and draining alerts."""

    def test_append_order(self):
        """Test that alerts are kept in append order."""
        bus = AlertBus()
        bus.info("one")
        bus.error("two")
        assert [a.message for a in bus] == ["one", "two"]
        assert len(bus) == 2

    def test_severity(self):
        """Test that the severity helpers tag the alert."""
        bus = AlertBus()
        alert = bus.warning("careful")
        assert alert == Alert("careful", AlertSeverity.WARNING)

    def test_default_severity_is_info(self):
        """Test that add defaults to INFO."""
        assert AlertBus().add("hello").severity == AlertSeverity.INFO

    def test_alerts_is_a_snapshot(self):
        """Test that a read copy does not change after later appends."""
        bus = AlertBus()
        bus.info("one")
        seen = bus.alerts
        bus.info("two")
        assert len(seen) == 1

    def test_drain_empties(self):
        """Test that drain returns everything and clears the store."""
        bus = AlertBus()
        bus.info("one")
        drained = bus.drain()
        assert [a.message for a in drained] == ["one"]
        assert len(bus) == 0


class TestSubscribe:
    """Listeners for new alerts."""

    def test_listener_receives_alerts(self):
        """Test that a subscribed listener sees each new alert."""
        bus = AlertBus()
        received = []
        bus.subscribe(received.append)
        bus.error("boom")
        assert received == [Alert("boom", AlertSeverity.ERROR)]

    def test_unsubscribe(self):
        """Test that unsubscribe is idempotent and stops delivery."""
        bus = AlertBus()
        received = []
        unsubscribe = bus.subscribe(received.append)
        unsubscribe()
        unsubscribe()
        bus.info("ignored")
        assert received == []

    def test_raising_listener_is_skipped(self):
        """Test that a raising listener neither loses the alert nor starves later listeners."""
        bus = AlertBus()
        received = []

        def broken(alert):
            raise RuntimeError("display went away")

        bus.subscribe(broken)
        bus.subscribe(received.append)
        alert = bus.error("boom")
        assert alert == Alert("boom", AlertSeverity.ERROR)
        assert bus.alerts == (alert,)
        assert received == [alert]
