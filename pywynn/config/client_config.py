"""
Client Configuration
"""

from dataclasses import dataclass, fields
from typing import Dict, Any

from .validation import (
    ConfigValidationError,
    validate_command,
    validate_cooldown,
    validate_history_size,
    validate_log_level,
)


@dataclass
class ClientConfig:
    """Client configuration settings"""

    # Friend list requests
    friend_list_command: str = "friend list"
    request_cooldown: float = 0.25  # Seconds between "friend list" commands

    # Chat
    chat_history_size: int = 1000

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    def validate(self) -> 'ClientConfig':
        """Normalize and check all values, raising ConfigValidationError"""
        self.friend_list_command = validate_command(self.friend_list_command)
        self.request_cooldown = validate_cooldown(self.request_cooldown)
        self.chat_history_size = validate_history_size(self.chat_history_size)
        self.log_level = validate_log_level(self.log_level)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'friend_list_command': self.friend_list_command,
            'request_cooldown': self.request_cooldown,
            'chat_history_size': self.chat_history_size,
            'log_level': self.log_level,
            'debug': self.debug
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClientConfig':
        """Create from dictionary"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data).validate()

    def update(self, **kwargs):
        """Update configuration values, leaving the config untouched if any are invalid"""
        candidate = self.from_dict({**self.to_dict(), **kwargs})
        for key, value in candidate.to_dict().items():
            setattr(self, key, value)
