"""
Tests for the host client facade
"""

import logging

import pytest

from pywynn import Client, ClientConfig, ConfigValidationError, EventType, WorldState


class TestCommands:
    """Forwarding commands to the host"""

    def test_send_command(self, client, sent):
        assert client.send_command("party list") is True
        assert sent == ["party list"]
        assert client.sent_commands == ["party list"]

    def test_no_sender(self, caplog):
        client = Client()
        client.join("Salted")

        with caplog.at_level(logging.WARNING, logger="pywynn.client"):
            assert client.send_command("friend list") is False

        assert "No command sender" in caplog.text

    def test_no_player(self, sent):
        client = Client(send_command=sent.append)
        assert not client.has_player
        assert client.send_command("friend list") is False
        assert sent == []


class TestChat:
    """Delivering chat lines"""

    def test_history_keeps_shown_lines(self, client, clock):
        client.set_world_state(WorldState.WORLD, "WC1")

        client.receive_chat("§7hello")
        client.receive_chat("§eSalted's friends (1): §rAlice")

        assert [m.unformatted for m in client.chat_history] == ["hello"]

    def test_history_is_bounded(self, sent, clock):
        client = Client(send_command=sent.append, config=ClientConfig(chat_history_size=2), clock=clock)
        for i in range(5):
            client.receive_chat(f"line {i}")

        assert [m.coded for m in client.chat_history] == ["line 3", "line 4"]

    def test_timestamp_from_clock(self, client, clock):
        client.receive_chat("hello")
        assert client.chat_history[-1].timestamp == clock.now

    def test_listener_can_cancel(self, client):
        client.on(EventType.CHAT_MESSAGE, lambda message: message.cancel())
        assert client.receive_chat("spam") is False


class TestLifecycle:
    """Player presence and cleanup"""

    def test_leave_resets_world_and_friends(self, client, clock):
        client.set_world_state(WorldState.WORLD, "WC1")
        client.receive_chat("§eAlice has been added to your friends!")

        client.leave()

        assert not client.has_player
        assert client.world_state.state == WorldState.NOT_CONNECTED
        assert client.friends.get_friends() == set()

    def test_invalid_config_rejected(self):
        with pytest.raises(ConfigValidationError):
            Client(config=ClientConfig(request_cooldown=-1))

    def test_context_manager_clears_subscriptions(self, sent):
        with Client(send_command=sent.append) as client:
            assert client.events.has_subscribers(EventType.CHAT_MESSAGE)

        assert not client.events.has_subscribers(EventType.CHAT_MESSAGE)
