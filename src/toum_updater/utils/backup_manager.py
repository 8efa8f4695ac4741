import shutil
from pathlib import Path

from toum_updater.model_types import BackupResult, UNKNOWN_VERSION
from toum_updater.utils.prompts import ask_yes_no
from toum_updater.utils.symbols import LogSymbols


class BackupManager:
    """Moves an existing mod installation aside, or deletes it.

    Backups are sibling directories of the mod directory named after the
    version they hold, e.g. ``toum(v1.0.0)``. A name that is already taken
    gets a numeric suffix: ``toum(v1.0.0)_1``, ``toum(v1.0.0)_2``, ...
    Backups are never touched again once created.
    """

    def __init__(self, mod_dir, mod_name, log_callback=None, prompt_callback=None):
        """Initialize BackupManager.

        Args:
            mod_dir: Path to the mod installation
            mod_name: Name used as the backup prefix
            log_callback: Optional callback function for logging (signature: log(message, **kwargs))
            prompt_callback: Optional yes/no callback (question) -> bool, defaults to a terminal prompt
        """
        self.mod_dir = Path(mod_dir)
        self.backup_root = self.mod_dir.parent
        self.mod_name = mod_name
        self.log_callback = log_callback
        self.prompt_callback = prompt_callback

    def _log(self, message, **kwargs):
        """Internal logging helper."""
        if self.log_callback:
            self.log_callback(message, **kwargs)

    def _ask(self, question):
        if self.prompt_callback:
            return self.prompt_callback(question)
        return ask_yes_no(question, self.log_callback)

    def backup_base_name(self, version):
        return f"{self.mod_name}({version})"

    def next_backup_path(self, version):
        """First free backup path for version, probing _1, _2, ... on the live filesystem."""
        base = self.backup_root / self.backup_base_name(version)
        target = base
        counter = 1
        while target.exists() or target.is_symlink():
            target = base.with_name(f"{base.name}_{counter}")
            counter += 1
        return target

    def create_backup(self, version) -> BackupResult:
        """Move the whole mod directory to a fresh backup path."""
        target = self.next_backup_path(version)
        self._log(f"Backing up existing mod to {target}...")
        shutil.move(str(self.mod_dir), str(target))
        self._log(f"{LogSymbols.SAVE} Backup saved as {target.name}", debug=True)
        return BackupResult(target, True, False)

    def delete_installation(self) -> BackupResult:
        self._log("Deleting existing mod...")
        shutil.rmtree(self.mod_dir)
        return BackupResult(None, False, True)

    def handle_existing(self, version, force_backup=False, skip_backup=False) -> BackupResult:
        """Back up or delete the current installation.

        force_backup wins over skip_backup. Without either flag the user is
        asked, and only an explicit "n"/"no" deletes.
        """
        if not self.mod_dir.exists():
            return BackupResult(None, False, False)

        if force_backup:
            self._log("Force backup enabled")
            return self.create_backup(version)

        if skip_backup:
            self._log("Skip backup enabled, skipping backup.")
            return self.delete_installation()

        if version and version != UNKNOWN_VERSION:
            question = f"A previous mod version ({version}) exists. Save a backup?"
        else:
            question = "A previous mod version exists. Save a backup?"

        if self._ask(question):
            return self.create_backup(version)
        return self.delete_installation()

    def list_backups(self):
        """Returns existing backup directories of this mod, sorted by name."""
        if not self.backup_root.exists():
            return []

        prefix = f"{self.mod_name}("
        backups = [
            path for path in self.backup_root.iterdir()
            if path.is_dir() and path.name.startswith(prefix)
        ]
        return sorted(backups, key=lambda p: p.name)
