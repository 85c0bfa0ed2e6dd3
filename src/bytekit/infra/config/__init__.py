"""
Loading settings files and turning them into typed configuration.
"""

__all__ = [
    "copy_default_config",
    "load_config",
    "save_config",
    "ConfigAdapter",
]

from .adapter import ConfigAdapter
from .file_io import (
    copy_default_config,
    load_config,
    save_config,
)
