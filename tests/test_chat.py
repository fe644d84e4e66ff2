"""
Tests for chat helpers
"""

import pytest

from pywynn.chat import ChatMessageReceived, MessageType, strip_formatting


class TestStripFormatting:
    """Removing § codes"""

    @pytest.mark.parametrize("coded, plain", [
        ("§eSalted's friends (2): §rAlice, Bob", "Salted's friends (2): Alice, Bob"),
        ("§a§l§oBold§r text", "Bold text"),
        ("§EUpper§K case", "Upper case"),
        ("no codes", "no codes"),
        ("", ""),
    ])
    def test_strip(self, coded, plain):
        assert strip_formatting(coded) == plain

    def test_unknown_code_kept(self):
        assert strip_formatting("§zhi") == "§zhi"


class TestChatMessageReceived:
    """Cancelable chat line"""

    def test_defaults(self):
        message = ChatMessageReceived("§ehello")
        assert message.message_type == MessageType.FOREGROUND
        assert message.unformatted == "hello"
        assert not message.canceled

    def test_cancel(self):
        message = ChatMessageReceived("hello", MessageType.SYSTEM, 5.0)
        message.cancel()
        assert message.canceled
        assert message.timestamp == 5.0
