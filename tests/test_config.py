import json
from pathlib import Path

import pytest

from toum_updater.core.config_manager import ConfigManager, UpdaterConfig
from toum_updater.utils.errors import ConfigError
from toum_updater.utils.path_validator import SteamLibraryValidator

from helpers import Logger


def write_config(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_derived_paths(tmp_path):
    config = UpdaterConfig(download_dir=tmp_path)
    assert config.game_dir == tmp_path / "Among Us"
    assert config.mod_dir == tmp_path / "toum"
    assert config.version_file == tmp_path / "toum" / "version.txt"
    assert config.scratch_dir == tmp_path / "tmp_extract"
    assert config.archive_path("mod-v1.0.0.zip") == tmp_path / "mod-v1.0.0.zip"
    assert config.release_feed_url == "https://api.github.com/repos/AU-Avengers/TOU-Mira/releases/latest"


def test_defaults_when_default_file_missing(tmp_path):
    cm = ConfigManager()
    cm.config_file = tmp_path / "config" / "config.json"

    config = cm.build({"download_dir": tmp_path})

    assert config.owner == "AU-Avengers"
    assert config.repo == "TOU-Mira"
    assert config.match == "steam-itch"
    assert config.download_dir == tmp_path
    assert config.force_update is False


def test_explicit_missing_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError):
        ConfigManager(tmp_path / "nope.json").build()


def test_file_settings_override_defaults(tmp_path):
    config_file = write_config(tmp_path / "config.json", {
        "owner": "someone",
        "repo": "fork",
        "match": "linux",
        "mod_name": "tou",
        "download_dir": str(tmp_path / "library"),
        "request_timeout": 5,
    })

    config = ConfigManager(config_file).build()

    assert (config.owner, config.repo, config.match, config.mod_name) == ("someone", "fork", "linux", "tou")
    assert config.download_dir == tmp_path / "library"
    assert config.mod_dir == tmp_path / "library" / "tou"
    assert config.request_timeout == 5


def test_command_line_overrides_file(tmp_path):
    config_file = write_config(tmp_path / "config.json", {"download_dir": str(tmp_path / "a")})

    config = ConfigManager(config_file).build({
        "download_dir": tmp_path / "b",
        "force_backup": True,
        "verbose": None,
    })

    assert config.download_dir == tmp_path / "b"
    assert config.force_backup is True
    assert config.verbose is False


def test_malformed_json(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError) as exc:
        ConfigManager(config_file).build()
    assert "malformed JSON" in str(exc.value)


def test_top_level_must_be_object(tmp_path):
    config_file = write_config(tmp_path / "config.json", ["owner"])
    with pytest.raises(ConfigError):
        ConfigManager(config_file).build()


@pytest.mark.parametrize("data", [{"owner": 3}, {"request_timeout": "fast"}, {"poll_interval": True}])
def test_wrong_types_rejected(tmp_path, data):
    config_file = write_config(tmp_path / "config.json", data)
    with pytest.raises(ConfigError):
        ConfigManager(config_file).build()


def test_unknown_keys_are_ignored_with_warning(tmp_path):
    config_file = write_config(tmp_path / "config.json", {"download_dir": str(tmp_path), "colour": "blue"})
    logs = Logger()

    config = ConfigManager(config_file, log_callback=logs).build()

    assert config.download_dir == tmp_path
    assert any("colour" in m for m, kw in logs.messages if kw.get("warning"))


def test_auto_detects_steam_library(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    library = tmp_path / ".local" / "share" / "Steam" / "steamapps" / "common"
    (library / "Among Us").mkdir(parents=True)

    cm = ConfigManager()
    cm.config_file = tmp_path / "missing.json"
    config = cm.build()

    assert config.download_dir == library


def test_steam_library_validator(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert SteamLibraryValidator.auto_detect("Among Us") is None
    assert SteamLibraryValidator.validate(None, "Among Us") is False

    library = tmp_path / ".steam" / "steam" / "steamapps" / "common"
    (library / "Among Us").mkdir(parents=True)
    assert SteamLibraryValidator.validate(str(library), "Among Us") is True
    assert SteamLibraryValidator.auto_detect("Among Us") == library
