"""
Tests for client configuration
"""

import pytest

from pywynn.config import ClientConfig, ConfigValidationError
from pywynn.config.validation import (
    validate_command,
    validate_cooldown,
    validate_history_size,
    validate_log_level,
)


class TestClientConfig:
    """Defaults and conversion"""

    def test_defaults(self):
        config = ClientConfig()
        assert config.friend_list_command == "friend list"
        assert config.request_cooldown == 0.25
        assert config.chat_history_size == 1000

    def test_round_trip_dict(self):
        config = ClientConfig(request_cooldown=1, log_level="debug").validate()
        restored = ClientConfig.from_dict(config.to_dict())

        assert restored == config
        assert restored.request_cooldown == 1.0
        assert restored.log_level == "DEBUG"

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigValidationError, match="host"):
            ClientConfig.from_dict({"host": "play.wynncraft.com"})

    def test_update_validates(self):
        config = ClientConfig()
        config.update(request_cooldown=0.5, log_level="warning")
        assert config.request_cooldown == 0.5
        assert config.log_level == "WARNING"

        with pytest.raises(ConfigValidationError):
            config.update(request_cooldown=-1)
        assert config.request_cooldown == 0.5

    def test_update_rejects_unknown_keys(self):
        config = ClientConfig()

        with pytest.raises(ConfigValidationError, match="unknown"):
            config.update(request_cooldown=0.5, unknown=1)

        assert config.request_cooldown == 0.25
        assert not hasattr(config, "unknown")


class TestValidation:
    """Individual validators"""

    def test_command_strips_whitespace(self):
        assert validate_command("  friend list ") == "friend list"

    @pytest.mark.parametrize("bad", ["", "   ", "/friend list", None])
    def test_bad_command(self, bad):
        with pytest.raises(ConfigValidationError):
            validate_command(bad)

    @pytest.mark.parametrize("bad", [-0.1, "0.25", True])
    def test_bad_cooldown(self, bad):
        with pytest.raises(ConfigValidationError):
            validate_cooldown(bad)

    def test_zero_cooldown_allowed(self):
        assert validate_cooldown(0) == 0.0

    @pytest.mark.parametrize("bad", [0, 1.5, False])
    def test_bad_history_size(self, bad):
        with pytest.raises(ConfigValidationError):
            validate_history_size(bad)

    def test_bad_log_level(self):
        with pytest.raises(ConfigValidationError):
            validate_log_level("LOUD")
