"""Configuration for dmcommon: NuGet feed location and lookup cache duration"""

import configparser
import logging
import os
import platform
from datetime import timedelta
from pathlib import Path
from typing import Any, Optional

APP_NAME = "dmcommon"

logger = logging.getLogger(__name__)

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

DEFAULT_NUGET_INDEX_URL = "https://api.nuget.org/v3/index.json"
DEFAULT_DEVPACK_CACHE_MINUTES = 10

default_cfg = {
    "nuget": {
        "index_url": DEFAULT_NUGET_INDEX_URL,
        "cache_minutes": str(DEFAULT_DEVPACK_CACHE_MINUTES),
    }
}

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/dmcommon").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


def get_config_file():
    return config_dir / f"{APP_NAME}.cfg"


def init_dirs():
    """Initialize the configuration directory.

    Fails gracefully if the directory cannot be created (e.g., read-only filesystem).
    """
    try:
        os.makedirs(config_dir, exist_ok=True)
    except OSError as e:
        logger.warning(
            f"Could not create config directory {config_dir}: {e}. "
            "Using in-memory configuration only."
        )


class ConfigAccessor:
    """
    A dict-like accessor for configuration files.

    Missing sections or keys are handled gracefully.

    Usage:
        config = ConfigAccessor()
        value = config.get('nuget', 'index_url', default='https://...')
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
            init_dirs()
        else:
            self.config_path = Path(config_path)

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            self.config.read(self.config_path)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default

    def set(self, section: str, key: str, value: str) -> None:
        """
        Set a configuration value.

        Args:
            section: The configuration section
            key: The configuration key
            value: The value to set
        """
        if not self.config.has_section(section):
            self.config.add_section(section)

        self.config[section][key] = value

    def save(self) -> None:
        """
        Save the current configuration to the config file.

        Fails gracefully if the file cannot be written (e.g., read-only filesystem).
        """
        try:
            with open(self.config_path, "w") as configfile:
                self.config.write(configfile)
        except OSError as e:
            logger.warning(
                f"Could not save configuration to {self.config_path}: {e}. "
                "Configuration changes will not persist."
            )

    def sections(self) -> list:
        return self.config.sections()


_config: Optional[ConfigAccessor] = None


def get_config() -> ConfigAccessor:
    """Return the global config accessor, created on first use."""
    global _config
    if _config is None:
        _config = ConfigAccessor()
    return _config


def set_config(accessor: Optional[ConfigAccessor]) -> None:
    """Replace the global config accessor (None resets it to the default file)."""
    global _config
    _config = accessor


def get_nuget_index_url() -> str:
    """
    Get the NuGet v3 service index used to look up DevPacks.

    Returns:
        The configured service index URL (defaults to nuget.org)
    """
    return get_config().get("nuget", "index_url", default_cfg["nuget"]["index_url"])


def get_devpack_cache_duration() -> timedelta:
    """
    Get how long a DevPack lookup result stays valid.

    Invalid values fall back to the default with a warning.

    Returns:
        The cache duration
    """
    raw = get_config().get("nuget", "cache_minutes", default_cfg["nuget"]["cache_minutes"])
    try:
        minutes = float(raw)
        if minutes < 0:
            raise ValueError(raw)
    except ValueError:
        logger.warning(
            f"Invalid nuget.cache_minutes value '{raw}', "
            f"using {DEFAULT_DEVPACK_CACHE_MINUTES} minutes."
        )
        minutes = DEFAULT_DEVPACK_CACHE_MINUTES
    return timedelta(minutes=minutes)
