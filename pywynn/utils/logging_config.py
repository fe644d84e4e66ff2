"""
Logging configuration for pywynn with module prefixes and debug controls
"""

import logging
import os
from typing import Optional, Set


class ModuleLogger:
    """Hands out loggers that carry a module prefix and per-subsystem debug level"""

    MODULE_PREFIXES = {
        'pywynn.friends': '[FRIENDS]',
        'pywynn.world_state': '[WORLD]',
        'pywynn.events': '[EVENT]',
        'pywynn.client': '[CLIENT]',
        'pywynn.tools': '[TOOLS]',
    }

    # Debug subsystems that can be enabled/disabled
    DEBUG_SUBSYSTEMS = {'friends', 'world', 'events', 'client', 'tools'}

    _enabled_debug_subsystems: Set[str] = set()

    @classmethod
    def enable_debug_subsystem(cls, subsystem: str) -> None:
        if subsystem in cls.DEBUG_SUBSYSTEMS:
            cls._enabled_debug_subsystems.add(subsystem)

    @classmethod
    def disable_debug_subsystem(cls, subsystem: str) -> None:
        cls._enabled_debug_subsystems.discard(subsystem)

    @classmethod
    def is_debug_enabled(cls, subsystem: str) -> bool:
        return subsystem in cls._enabled_debug_subsystems

    @classmethod
    def get_debug_level_for_module(cls, module_name: str, default: int = logging.INFO) -> int:
        """DEBUG if any enabled subsystem appears in the module name"""
        for subsystem in cls._enabled_debug_subsystems:
            if subsystem in module_name.lower():
                return logging.DEBUG
        return default

    @classmethod
    def get_logger(cls, name: str, level: int = logging.INFO) -> logging.Logger:
        """Get a logger with appropriate prefix and level for the module"""
        logger = logging.getLogger(name)

        # Don't add handler if already configured
        if logger.handlers:
            return logger

        prefix = '[UNKNOWN]'
        for module_name, module_prefix in cls.MODULE_PREFIXES.items():
            if name.startswith(module_name):
                prefix = module_prefix
                break

        handler = logging.StreamHandler()
        handler.setFormatter(ModulePrefixFormatter(prefix))
        logger.addHandler(handler)

        logger.setLevel(cls.get_debug_level_for_module(name, level))
        logger.propagate = False  # Don't propagate to root logger

        return logger


class ModulePrefixFormatter(logging.Formatter):
    """Custom formatter that adds module prefix to log messages"""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(
            fmt='%(asctime)s - %(prefix)s %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

    def format(self, record):
        record.prefix = self.prefix
        return super().format(record)


def configure_logging(level: int = logging.INFO, debug_subsystems: Optional[Set[str]] = None):
    """Configure logging for the whole package

    Args:
        level: Base logging level for all modules
        debug_subsystems: Set of subsystems to enable debug logging for
    """
    logging.getLogger().setLevel(level)

    if debug_subsystems:
        for subsystem in debug_subsystems:
            ModuleLogger.enable_debug_subsystem(subsystem)

    # PYWYNN_DEBUG=friends,world or PYWYNN_DEBUG=all
    debug_env = os.environ.get('PYWYNN_DEBUG', '').lower()
    if debug_env:
        for subsystem in (s.strip() for s in debug_env.split(',')):
            if subsystem == 'all':
                for s in ModuleLogger.DEBUG_SUBSYSTEMS:
                    ModuleLogger.enable_debug_subsystem(s)
            else:
                ModuleLogger.enable_debug_subsystem(subsystem)

    for module_name in ModuleLogger.MODULE_PREFIXES:
        ModuleLogger.get_logger(module_name, level)
