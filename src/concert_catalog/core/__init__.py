"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging (Loguru)
- Console management (Rich)
"""

from .config import (
    Config,
    CatalogConfig,
    SearchConfig,
    LoggingConfig,
    load_config,
    parse_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    create_default_config,
)
from .console import get_console, get_error_console, print_error, print_table, safe_print
from .output import setup_loguru, log

__all__ = [
    # Config
    "Config",
    "CatalogConfig",
    "SearchConfig",
    "LoggingConfig",
    "load_config",
    "parse_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "create_default_config",
    # Console
    "get_console",
    "get_error_console",
    "print_error",
    "print_table",
    "safe_print",
    # Output
    "setup_loguru",
    "log",
]
