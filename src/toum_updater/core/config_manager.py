"""Configuration loading: constants, then the JSON config file, then the command line."""
import json
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional

from .constants import (
    CONFIG_FILE,
    DEFAULT_DOWNLOAD_DIR,
    DEFAULT_GAME_FOLDER,
    DEFAULT_MATCH,
    DEFAULT_MOD_NAME,
    DEFAULT_OWNER,
    DEFAULT_REPO,
    GITHUB_API_URL,
    LOG_FILE,
    POLL_INTERVAL,
    REQUEST_TIMEOUT,
    SCRATCH_DIR_NAME,
    VERSION_FILE_NAME,
)
from toum_updater.utils.errors import ConfigError
from toum_updater.utils.path_validator import SteamLibraryValidator


class UpdaterConfig(NamedTuple):
    """Everything an update run needs, fixed at construction time."""
    owner: str = DEFAULT_OWNER
    repo: str = DEFAULT_REPO
    match: str = DEFAULT_MATCH
    mod_name: str = DEFAULT_MOD_NAME
    game_folder: str = DEFAULT_GAME_FOLDER
    download_dir: Path = DEFAULT_DOWNLOAD_DIR
    api_url: str = GITHUB_API_URL
    request_timeout: float = REQUEST_TIMEOUT
    poll_interval: float = POLL_INTERVAL
    log_file: Optional[Path] = LOG_FILE
    force_update: bool = False
    skip_backup: bool = False
    force_backup: bool = False
    verbose: bool = False

    @property
    def game_dir(self) -> Path:
        return self.download_dir / self.game_folder

    @property
    def mod_dir(self) -> Path:
        return self.download_dir / self.mod_name

    @property
    def version_file(self) -> Path:
        return self.mod_dir / VERSION_FILE_NAME

    @property
    def scratch_dir(self) -> Path:
        return self.download_dir / SCRATCH_DIR_NAME

    @property
    def release_feed_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/repos/{self.owner}/{self.repo}/releases/latest"

    def archive_path(self, filename: str) -> Path:
        return self.download_dir / filename


# Keys accepted in the config file, with the type each must have
FILE_KEYS = {
    'owner': str,
    'repo': str,
    'match': str,
    'mod_name': str,
    'game_folder': str,
    'download_dir': str,
    'api_url': str,
    'request_timeout': (int, float),
    'poll_interval': (int, float),
    'log_file': str,
}

PATH_KEYS = ('download_dir', 'log_file')


class ConfigManager:
    """Loads the optional JSON config file and builds UpdaterConfig values."""

    def __init__(self, config_file=None, log_callback=None):
        self.config_file = Path(config_file) if config_file else CONFIG_FILE
        self.explicit = config_file is not None
        self.log_callback = log_callback

    def _log(self, message, **kwargs):
        if self.log_callback:
            self.log_callback(message, **kwargs)

    def load_file_settings(self) -> Dict[str, Any]:
        """Read the config file. A missing default file is fine, a missing explicit one is not."""
        if not self.config_file.exists():
            if self.explicit:
                raise ConfigError(self.config_file, "file does not exist")
            return {}

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(self.config_file, f"malformed JSON ({e})") from e
        except OSError as e:
            raise ConfigError(self.config_file, str(e)) from e

        if not isinstance(data, dict):
            raise ConfigError(self.config_file, "top level must be a JSON object")

        settings = {}
        for key, value in data.items():
            expected = FILE_KEYS.get(key)
            if expected is None:
                self._log(f"Ignoring unknown config key '{key}' in {self.config_file}", warning=True)
                continue
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ConfigError(self.config_file, f"'{key}' has the wrong type")
            if key in PATH_KEYS:
                value = Path(value).expanduser()
            settings[key] = value

        self._log(f"Loaded config from {self.config_file}", debug=True)
        return settings

    def build(self, overrides: Optional[Dict[str, Any]] = None) -> UpdaterConfig:
        """Merge defaults, config file and command-line overrides (None values are skipped)."""
        settings = self.load_file_settings()
        for key, value in (overrides or {}).items():
            if value is not None:
                settings[key] = value

        config = UpdaterConfig(**settings)

        if 'download_dir' not in settings and not config.game_dir.is_dir():
            detected = SteamLibraryValidator.auto_detect(config.game_folder)
            if detected and detected != config.download_dir:
                self._log(f"Using Steam library found at {detected}", debug=True)
                config = config._replace(download_dir=detected)

        return config
