import shutil
import zipfile
from pathlib import Path

import py7zr
from py7zr.exceptions import ArchiveError, PasswordRequired

from toum_updater.utils.errors import ExtractionFailedError


def is_7z_archive(path: Path) -> bool:
    return path.suffix.lower() == '.7z'


def check_members_inside(members, target_dir: Path) -> None:
    """Zip-slip protection: every member must resolve inside target_dir."""
    target_resolved = target_dir.resolve()
    for member in members:
        member_path = (target_dir / member).resolve()
        try:
            member_path.relative_to(target_resolved)
        except ValueError:
            raise ExtractionFailedError(f"Path traversal detected in archive member '{member}' (blocked)")


class ArchiveExtractor:

    def __init__(self, log_callback):
        self.log = log_callback

    def extract(self, archive_path, scratch_dir) -> Path:
        """Extract archive_path into a freshly created scratch_dir.

        Raises ExtractionFailedError when the archive is unreadable, empty or unsafe.
        """
        archive_path = Path(archive_path)
        scratch_dir = Path(scratch_dir)

        try:
            if scratch_dir.exists():
                shutil.rmtree(scratch_dir)
            scratch_dir.mkdir(parents=True)
        except OSError as e:
            raise ExtractionFailedError(f"Could not prepare {scratch_dir}: {e}") from e

        self.log(f"Extracting {archive_path.name}...")
        try:
            if is_7z_archive(archive_path):
                self._extract_7z(archive_path, scratch_dir)
            else:
                self._extract_zip(archive_path, scratch_dir)
        except zipfile.BadZipFile as e:
            raise ExtractionFailedError(f"Failed to unzip mod: corrupted ZIP file ({e})") from e
        except py7zr.Bad7zFile as e:
            raise ExtractionFailedError(f"Failed to extract mod: corrupted 7z file ({e})") from e
        except (ArchiveError, PasswordRequired) as e:
            raise ExtractionFailedError(f"Failed to extract mod: unsupported 7z file ({e})") from e
        except (RuntimeError, NotImplementedError) as e:
            # Encrypted members or an unsupported compression method
            raise ExtractionFailedError(f"Failed to extract mod: unsupported archive ({e})") from e
        except OSError as e:
            raise ExtractionFailedError(f"Failed to extract mod: {e}") from e
        return scratch_dir

    def _extract_zip(self, archive_path, scratch_dir):
        with zipfile.ZipFile(archive_path, 'r') as zip_ref:
            names = zip_ref.namelist()
            members = [m for m in names if m and not m.endswith('/')]
            if not members:
                raise ExtractionFailedError("Archive is empty")

            check_members_inside(names, scratch_dir)
            zip_ref.extractall(scratch_dir)

    def _extract_7z(self, archive_path, scratch_dir):
        with py7zr.SevenZipFile(archive_path, 'r') as archive:
            names = archive.getnames()
            members = [m for m in names if m and not m.endswith('/')]
            if not members:
                raise ExtractionFailedError("Archive is empty")

            check_members_inside(names, scratch_dir)
            archive.extractall(path=scratch_dir)
