"""Steam library path validation and auto-detection."""
from pathlib import Path
from typing import Optional, Union


class SteamLibraryValidator:

    @staticmethod
    def candidate_paths():
        """Usual locations of Steam's steamapps/common folder on Linux."""
        home = Path.home()
        return [
            home / ".steam" / "steam" / "steamapps" / "common",
            home / ".local" / "share" / "Steam" / "steamapps" / "common",
            home / ".var" / "app" / "com.valvesoftware.Steam" / ".local" / "share" / "Steam" / "steamapps" / "common",
            home / "snap" / "steam" / "common" / ".local" / "share" / "Steam" / "steamapps" / "common",
        ]

    @staticmethod
    def auto_detect(game_folder: str) -> Optional[Path]:
        """Return the first library folder that contains the game."""
        for path in SteamLibraryValidator.candidate_paths():
            if SteamLibraryValidator.validate(path, game_folder):
                return path
        return None

    @staticmethod
    def validate(path: Union[str, Path, None], game_folder: str) -> bool:
        """A library folder is valid when the game folder exists inside it."""
        if not path:
            return False
        path_obj = Path(path) if isinstance(path, str) else path
        return (path_obj / game_folder).is_dir()
