"""Configuration management for terminal-bible.

Handles loading, saving, and validating TOML configuration stored in:
- macOS/Linux: ~/.config/terminal-bible/config.toml (XDG_CONFIG_HOME)
- Windows: %APPDATA%\\terminal-bible\\config.toml
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import tomllib
import tomli_w

APP_NAME = "terminal-bible"
DEFAULT_API_BASE_URL = "https://bible-api.com"
DEFAULT_WRAP_WIDTH = 75
FAVORITES_FILENAME = ".verse_favorites.json"


def get_app_config_dir() -> Path:
    """Get the platform-specific config directory for terminal-bible.

    Returns:
        Path to the config directory
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_NAME
        return Path.home() / "AppData" / "Roaming" / APP_NAME

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_app_config_path() -> Path:
    """Get the path to the config.toml file.

    Returns:
        Path to config.toml
    """
    return get_app_config_dir() / "config.toml"


def get_default_favorites_path() -> Path:
    """Resolve the favorites file location.

    Uses HOME, then USERPROFILE, then the package directory.

    Returns:
        Path to .verse_favorites.json
    """
    home = os.environ.get("HOME") or os.environ.get("USERPROFILE")
    base = Path(home) if home else Path(__file__).resolve().parent
    return base / FAVORITES_FILENAME


@dataclass
class AppConfig:
    """Configuration for terminal-bible.

    Attributes:
        api_base_url: Base URL of the verse lookup service
        request_timeout: HTTP timeout in seconds (None uses the client default)
        wrap_width: Column width verse text is wrapped to
        favorites_path: JSON file holding saved verses
        log_dir: Directory for the session log
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: Optional[float] = None
    wrap_width: int = DEFAULT_WRAP_WIDTH
    favorites_path: Path = field(default_factory=get_default_favorites_path)
    log_dir: Path = field(default_factory=lambda: get_app_config_dir() / "logs")

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "AppConfig":
        """Load configuration from TOML file.

        Args:
            path: Path to config file (defaults to standard location)

        Returns:
            AppConfig instance with loaded values

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If a value has the wrong type
        """
        if path is None:
            path = get_app_config_path()

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()

        if "service" in data:
            service = data["service"]
            config.api_base_url = service.get("api_base_url", config.api_base_url)
            timeout = service.get("request_timeout")
            # TOML has no null, so 0 means "client default"
            if timeout:
                config.request_timeout = float(timeout)

        if "display" in data:
            wrap_width = int(data["display"].get("wrap_width", config.wrap_width))
            if wrap_width < 1:
                raise ValueError(f"wrap_width must be positive, got {wrap_width}")
            config.wrap_width = wrap_width

        if "paths" in data:
            paths = data["paths"]
            if paths.get("favorites"):
                config.favorites_path = Path(paths["favorites"]).expanduser()
            if paths.get("log_dir"):
                config.log_dir = Path(paths["log_dir"]).expanduser()

        # Environment takes precedence over the file
        env_url = os.environ.get("TERMINAL_BIBLE_API_URL")
        if env_url:
            config.api_base_url = env_url

        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to TOML file.

        Args:
            path: Path to save config (defaults to standard location)
        """
        if path is None:
            path = get_app_config_path()

        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "service": {
                "api_base_url": self.api_base_url,
                "request_timeout": self.request_timeout or 0,
            },
            "display": {
                "wrap_width": self.wrap_width,
            },
            "paths": {
                "favorites": str(self.favorites_path),
                "log_dir": str(self.log_dir),
            },
        }

        with open(path, "wb") as f:
            tomli_w.dump(data, f)


def ensure_app_config_exists() -> AppConfig:
    """Ensure config file exists, creating default if needed.

    Returns:
        AppConfig instance
    """
    config_path = get_app_config_path()

    if config_path.exists():
        try:
            return AppConfig.load(config_path)
        except (tomllib.TOMLDecodeError, ValueError, TypeError):
            # Corrupted config is replaced with defaults below
            pass

    AppConfig().save(config_path)
    return AppConfig.load(config_path)
