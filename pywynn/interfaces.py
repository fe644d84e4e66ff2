"""
Simple base classes for the host collaborators the models talk to
"""


class CommandHost:
    """Something that can send chat commands on behalf of the player"""

    @property
    def has_player(self) -> bool:
        """True while a player entity exists in the game"""
        return False

    def send_command(self, command: str) -> bool:
        """Send a command (without the leading '/'). Returns True if sent."""
        raise NotImplementedError
