"""
pywynn - Chat
Chat message model and formatting helpers.

Wynncraft sends chat as Minecraft "coded" strings where every color or style
change is a two character sequence starting with the section sign (§).
"""

import re
import time
from dataclasses import dataclass, field
from enum import Enum

FORMATTING_CODE = re.compile(r"§[0-9a-fk-or]", re.IGNORECASE)


class MessageType(Enum):
    """Where a chat line was shown by the host"""
    FOREGROUND = "foreground"
    BACKGROUND = "background"  # Dimmed lines shown behind dialogue
    SYSTEM = "system"


def strip_formatting(coded: str) -> str:
    """Remove all § formatting codes from a coded chat string."""
    return FORMATTING_CODE.sub("", coded)


@dataclass
class ChatMessageReceived:
    """A single chat line as delivered by the host.

    Handlers may call cancel() to stop the host from displaying the line.
    """
    coded: str
    message_type: MessageType = MessageType.FOREGROUND
    timestamp: float = field(default_factory=time.time)
    canceled: bool = False

    @property
    def unformatted(self) -> str:
        return strip_formatting(self.coded)

    def cancel(self):
        self.canceled = True
