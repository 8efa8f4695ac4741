import shutil
from pathlib import Path

from .archive_extractor import ArchiveExtractor
from toum_updater.utils.errors import ExtractionFailedError
from toum_updater.utils.file_ops import merge_tree, widen_permissions
from toum_updater.utils.symbols import LogSymbols


def merge_sources(scratch_dir: Path):
    """Directories whose contents go into the mod directory.

    An archive that holds a single wrapper folder has that folder stripped;
    anything else is merged as laid out in the archive.
    """
    entries = list(scratch_dir.iterdir())
    if len(entries) == 1 and entries[0].is_dir() and not entries[0].is_symlink():
        return entries[0]
    return scratch_dir


class ModInstaller:

    def __init__(self, log_callback):
        self.log = log_callback
        self.extractor = ArchiveExtractor(log_callback)

    def install(self, archive_path, mod_dir, scratch_dir, version, version_store):
        """Extract the archive over the mod directory and record the version.

        The merge is not transactional: a failure halfway leaves old and new
        files mixed, and the version marker untouched.
        """
        archive_path = Path(archive_path)
        mod_dir = Path(mod_dir)
        scratch_dir = Path(scratch_dir)

        self.extractor.extract(archive_path, scratch_dir)

        source = merge_sources(scratch_dir)
        self.log(f"Merging {source.name} into {mod_dir}", debug=True)
        try:
            merge_tree(source, mod_dir)
        except OSError as e:
            raise ExtractionFailedError(f"Failed to move mod files into {mod_dir}: {e}") from e

        shutil.rmtree(scratch_dir, ignore_errors=True)
        try:
            archive_path.unlink(missing_ok=True)
        except OSError as e:
            self.log(f"Could not remove {archive_path}: {e}", debug=True)
        self.log(f"{archive_path.name} extracted to {mod_dir}")

        try:
            version_store.write(version)
            widen_permissions(mod_dir)
        except OSError as e:
            raise ExtractionFailedError(f"Failed to finish installing into {mod_dir}: {e}") from e
        self.log(f"  {LogSymbols.SUCCESS} Version marker set to {version}", debug=True)
