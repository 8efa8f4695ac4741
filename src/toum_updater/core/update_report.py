"""
Update run tracking and reporting.
"""

import time

from toum_updater.utils.symbols import LogSymbols


class UpdateReport:
    """Tracks what a single update run did for the closing summary."""

    def __init__(self, mod_name):
        self.mod_name = mod_name
        self.previous_version = None
        self.new_version = None
        self.backup_path = None
        self.deleted_previous = False
        self.downloaded_bytes = 0
        self.start_time = time.time()

    def record_previous(self, version):
        self.previous_version = version

    def record_backup(self, result):
        """Record a BackupResult."""
        self.backup_path = result.path
        self.deleted_previous = result.deleted

    def record_download(self, result):
        self.downloaded_bytes = result.downloaded

    def record_installed(self, version):
        self.new_version = version

    def get_duration(self):
        return time.time() - self.start_time

    def generate_summary(self):
        """Generate formatted summary lines."""
        minutes, seconds = divmod(int(self.get_duration()), 60)
        lines = []

        if self.previous_version:
            lines.append(
                f"{self.mod_name}: {self.previous_version} {LogSymbols.ARROW_RIGHT} {self.new_version}"
            )
        else:
            lines.append(f"{self.mod_name}: fresh install of {self.new_version}")

        if self.backup_path:
            lines.append(f"  {LogSymbols.SAVE} Previous install kept at {self.backup_path}")
        elif self.deleted_previous:
            lines.append(f"  {LogSymbols.TRASH} Previous install deleted")

        if self.downloaded_bytes:
            lines.append(f"  {LogSymbols.BULLET} Downloaded {self.downloaded_bytes / (1024 ** 2):.1f} MB")
        lines.append(f"  {LogSymbols.BULLET} Finished in {minutes}m {seconds}s")

        return lines
