"""Update workflow: check, resolve, back up, copy, download, install."""
from pathlib import Path

from .downloader import Downloader
from .installer import ModInstaller
from .release_resolver import ReleaseResolver
from .update_report import UpdateReport
from .version_store import VersionStore
from .constants import MIN_FREE_SPACE_GB
from toum_updater.utils.backup_manager import BackupManager
from toum_updater.utils.error_messages import get_user_friendly_error, suggest_fix_for_error
from toum_updater.utils.errors import (
    BackupFailedError,
    CopyFailedError,
    MissingGameDirectoryError,
    UpdaterError,
)
from toum_updater.utils.file_ops import copy_tree, remove_path
from toum_updater.utils.installation_checks import run_pre_installation_checks


class ModUpdater:
    """Runs one update of the mod described by an UpdaterConfig.

    CheckGame -> ResolveRelease -> CheckUpToDate -> BackupOrDelete
    -> CopyBaseGame -> Download -> Install -> Done
    """

    def __init__(self, config, log_callback, prompt_callback=None, progress=None):
        self.config = config
        self.log = log_callback
        self.version_store = VersionStore(config.mod_dir, config.version_file)
        self.resolver = ReleaseResolver(config, log_callback)
        self.backup_manager = BackupManager(config.mod_dir, config.mod_name, log_callback, prompt_callback)
        self.downloader = Downloader(log_callback, poll_interval=config.poll_interval,
                                     timeout=config.request_timeout, progress=progress)
        self.installer = ModInstaller(log_callback)
        self.archive_path = None

    def run(self) -> int:
        """Run the whole update. Returns the process exit code.

        Interruptions propagate after the cleanup has run.
        """
        try:
            return self._run()
        except UpdaterError as e:
            self.report_error(e)
            return e.exit_code
        finally:
            self.cleanup()

    def _run(self) -> int:
        config = self.config
        report = UpdateReport(config.mod_name)

        self.check_game()
        self.log("Make sure your game has updated before running this!", warning=True)

        release = self.resolver.resolve()
        self.archive_path = config.archive_path(release.filename)
        self.log(f"Latest mod version: {release.version}")

        installed = self.version_store.read()
        if installed is not None:
            report.record_previous(installed)
            if config.force_update:
                self.log("Force update enabled, skipping version check.")
            elif installed == release.version:
                self.log(f"Mod is already up to date ({installed}).")
                return 0
            self.backup_or_delete(installed, report)

        self.copy_game_files()

        result = self.downloader.download(release.asset.download_url, self.archive_path)
        report.record_download(result)

        self.installer.install(self.archive_path, config.mod_dir, config.scratch_dir,
                               release.version, self.version_store)
        report.record_installed(release.version)

        for line in report.generate_summary():
            self.log(line)
        self.log(f"Mod updated to version {release.version} at {config.mod_dir}!", success=True)
        return 0

    def check_game(self):
        if not self.config.game_dir.is_dir():
            raise MissingGameDirectoryError(self.config.game_dir, f"{self.config.game_folder} folder not found")

    def backup_or_delete(self, installed, report):
        try:
            result = self.backup_manager.handle_existing(
                installed,
                force_backup=self.config.force_backup,
                skip_backup=self.config.skip_backup,
            )
        except OSError as e:
            raise BackupFailedError(f"Could not move or delete {self.config.mod_dir}: {e}") from e
        report.record_backup(result)

    def copy_game_files(self):
        config = self.config
        ok, error = run_pre_installation_checks(config.download_dir, config.game_dir,
                                                log_callback=self.log, min_disk_gb=MIN_FREE_SPACE_GB)
        if not ok:
            raise CopyFailedError(f"Cannot write to {config.download_dir}: {error}")

        self.log(f"Copying game files to {config.mod_dir}...")
        try:
            config.mod_dir.mkdir(parents=True, exist_ok=True)
            copy_tree(config.game_dir, config.mod_dir)
        except OSError as e:
            raise CopyFailedError(f"Failed to copy {config.game_folder} folder: {e}") from e

    def report_error(self, error):
        self.log(str(error), error=True)
        error_type = suggest_fix_for_error(error)
        if error_type:
            for line in get_user_friendly_error(error_type).splitlines():
                self.log(line, warning=True)

    def cleanup(self):
        """Remove the scratch directory and any leftover archive, whatever the outcome."""
        targets = [self.config.scratch_dir]
        if self.archive_path is not None:
            targets.append(Path(self.archive_path))
        for target in targets:
            try:
                if remove_path(target):
                    self.log(f"Cleaned up {target}", debug=True)
            except OSError as e:
                self.log(f"Could not clean up {target}: {e}", debug=True)
