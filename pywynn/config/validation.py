"""
Configuration validation utilities
"""

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidationError(Exception):
    """Raised when configuration validation fails"""
    pass


def validate_command(command: str) -> str:
    """Validate a chat command (sent without the leading slash)"""
    if not command or not isinstance(command, str):
        raise ConfigValidationError("Command must be a non-empty string")

    command = command.strip()
    if len(command) == 0:
        raise ConfigValidationError("Command cannot be empty or whitespace")

    if command.startswith("/"):
        raise ConfigValidationError("Command must not include the leading '/'")

    return command


def validate_cooldown(cooldown: float) -> float:
    """Validate a request cooldown in seconds"""
    if isinstance(cooldown, bool) or not isinstance(cooldown, (int, float)):
        raise ConfigValidationError("Cooldown must be a number")

    if cooldown < 0:
        raise ConfigValidationError("Cooldown cannot be negative")

    return float(cooldown)


def validate_history_size(size: int) -> int:
    """Validate chat history length"""
    if isinstance(size, bool) or not isinstance(size, int):
        raise ConfigValidationError("History size must be an integer")

    if size < 1:
        raise ConfigValidationError("History size must be at least 1")

    return size


def validate_log_level(level: str) -> str:
    """Validate logging level name"""
    if not isinstance(level, str):
        raise ConfigValidationError("Log level must be a string")

    level = level.upper()
    if level not in LOG_LEVELS:
        raise ConfigValidationError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")

    return level
