"""
Utility helpers for pywynn
"""

from .logging_config import ModuleLogger, configure_logging

__all__ = ['ModuleLogger', 'configure_logging']
