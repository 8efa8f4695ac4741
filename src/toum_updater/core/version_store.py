"""Plain-text version marker kept inside the mod directory."""
import os
import tempfile
from pathlib import Path
from typing import Optional

from toum_updater.model_types import UNKNOWN_VERSION


class VersionStore:

    def __init__(self, mod_dir, version_file):
        self.mod_dir = Path(mod_dir)
        self.version_file = Path(version_file)

    def read(self) -> Optional[str]:
        """Installed version, "unknown" for an unmarked mod directory, None when no mod is present."""
        if not self.mod_dir.is_dir():
            return None
        if not self.version_file.is_file():
            return UNKNOWN_VERSION
        try:
            version = self.version_file.read_text(encoding='utf-8').strip()
        except (OSError, UnicodeDecodeError):
            return UNKNOWN_VERSION
        return version or UNKNOWN_VERSION

    def write(self, version: str) -> None:
        """Atomic write: temp file + replace, so a crash never leaves half a marker."""
        self.version_file.parent.mkdir(parents=True, exist_ok=True)
        temp_fd, temp_path = tempfile.mkstemp(
            dir=self.version_file.parent,
            prefix=f'.tmp_{self.version_file.stem}_',
            suffix='.txt'
        )
        try:
            with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
                f.write(f"{version}\n")
            os.replace(temp_path, self.version_file)
        except BaseException:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def is_current(self, latest: str) -> bool:
        """Plain string equality; no ordering between versions is ever computed."""
        return self.read() == latest
