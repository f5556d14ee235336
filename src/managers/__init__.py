"""
Managers for configuration
"""

from .parameter_manager import ParameterManager
from .config_manager import ConfigManager

__all__ = ['ConfigManager', 'ParameterManager']
