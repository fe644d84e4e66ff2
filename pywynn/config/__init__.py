"""
Configuration system for pywynn
"""

from .client_config import ClientConfig
from .validation import ConfigValidationError

__all__ = ['ClientConfig', 'ConfigValidationError']
