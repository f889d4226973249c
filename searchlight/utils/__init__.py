"""
Utility functions and helpers.
"""
from .resource_loader import get_app_data_dir, get_config_dir
from .settings import SearchSettings, load_settings, save_settings

__all__ = [
    'get_app_data_dir',
    'get_config_dir',
    'SearchSettings',
    'load_settings',
    'save_settings',
]
