"""
Configuration management for Concert Catalog
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger


@dataclass
class CatalogConfig:
    """Configuration for the show catalog source."""

    catalog_path: str = field(
        default_factory=lambda: str(get_data_dir() / "catalog.json")
    )
    image_base_url: str = "/images"  # Prefix for checksum-based artwork paths


@dataclass
class SearchConfig:
    """Configuration for search output."""

    result_limit: int = 50  # Max shows printed by the search command
    shows_per_artist: int = 20  # Max shows printed per artist row

    def validate(self) -> None:
        """Validate search configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.result_limit <= 0:
            raise ValueError(
                f"result_limit must be positive, got: {self.result_limit}"
            )
        if self.shows_per_artist <= 0:
            raise ValueError(
                f"shows_per_artist must be positive, got: {self.shows_per_artist}"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/concert-catalog/concert-catalog.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of backup files to keep
    console_output: bool = False  # Also output to console (for debugging)


@dataclass
class Config:
    """Main configuration object."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "concert-catalog"
    return Path.home() / ".config" / "concert-catalog"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "concert-catalog"
    return Path.home() / ".local" / "share" / "concert-catalog"


def get_log_file_path(config: Config) -> Path:
    """Resolve the log file from config, falling back to the data dir."""
    if config.logging.log_file:
        return Path(config.logging.log_file)
    return get_data_dir() / "concert-catalog.log"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            # Found project root but no config.toml there
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/concert-catalog (or ~/.config/concert-catalog)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Concert Catalog Configuration

[catalog]
# JSON file holding the show catalog (list of show objects)
# catalog_path = "~/.local/share/concert-catalog/catalog.json"

# URL prefix for checksum-based artwork ({prefix}/{checksum}_01.jpg)
image_base_url = "/images"

[search]
# Maximum number of shows printed by the search command
result_limit = 50

# Maximum number of shows printed per artist row
shows_per_artist = 20

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/concert-catalog/concert-catalog.log)
# log_file = "/path/to/custom/concert-catalog.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of backup log files to keep
backup_count = 5

# Also output logs to console (useful for debugging)
console_output = false
""".strip()


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML data, keeping defaults for absent keys."""
    config = Config()

    if "catalog" in toml_data:
        catalog_data = toml_data["catalog"]
        catalog_path = catalog_data.get("catalog_path")
        config.catalog = CatalogConfig(
            catalog_path=(
                str(Path(catalog_path).expanduser())
                if catalog_path
                else config.catalog.catalog_path
            ),
            image_base_url=catalog_data.get(
                "image_base_url", config.catalog.image_base_url
            ),
        )

    if "search" in toml_data:
        search_data = toml_data["search"]
        config.search = SearchConfig(
            result_limit=search_data.get("result_limit", config.search.result_limit),
            shows_per_artist=search_data.get(
                "shows_per_artist", config.search.shows_per_artist
            ),
        )
        try:
            config.search.validate()
        except ValueError as e:
            logger.warning(f"Invalid search configuration: {e}. Using defaults.")
            config.search = SearchConfig()

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            max_file_size_mb=logging_data.get(
                "max_file_size_mb", config.logging.max_file_size_mb
            ),
            backup_count=logging_data.get("backup_count", config.logging.backup_count),
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - CONCERT_CATALOG_PATH
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        logger.info(f"Created default configuration at: {config_path}")
        config = Config()
    else:
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
            config = parse_config(toml_data)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Error loading configuration from {config_path}: {e}")
            config = Config()

    catalog_path = os.environ.get("CONCERT_CATALOG_PATH")
    if catalog_path:
        config.catalog.catalog_path = str(Path(catalog_path).expanduser())

    return config
