"""Core infrastructure layer - no mpv-specific logic.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging setup (Loguru)
- Console diagnostics (Rich)
- The on-disk state directory
- The exception hierarchy
"""

# Configuration
from .config import (
    Config,
    LoggingConfig,
    UIConfig,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
)

# Console
from .console import get_console, print_error, print_usage

# Exceptions
from .exceptions import (
    MpvMpError,
    UsageError,
    LivenessProbeError,
    LaunchError,
    ConnectError,
    InstanceKillError,
    ProtocolError,
    PropertyTypeError,
    PlaylistRangeError,
)

# Logging
from .output import setup_loguru, get_log_file_path

# State directory
from .state import StateDir, STATE_DIR

__all__ = [
    # Config
    "Config",
    "LoggingConfig",
    "UIConfig",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    # Console
    "get_console",
    "print_error",
    "print_usage",
    # Exceptions
    "MpvMpError",
    "UsageError",
    "LivenessProbeError",
    "LaunchError",
    "ConnectError",
    "InstanceKillError",
    "ProtocolError",
    "PropertyTypeError",
    "PlaylistRangeError",
    # Logging
    "setup_loguru",
    "get_log_file_path",
    # State
    "StateDir",
    "STATE_DIR",
]
