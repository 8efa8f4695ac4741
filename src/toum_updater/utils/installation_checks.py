"""Pre-installation validation checks."""

from pathlib import Path
import shutil

from toum_updater.utils.error_messages import get_user_friendly_error
from toum_updater.utils.file_ops import directory_size


def check_disk_space(install_dir, min_gb=1, required_bytes=0):
    """Check if there's enough disk space.

    Args:
        install_dir: Directory to check space for
        min_gb: Minimum free space in GB
        required_bytes: Extra bytes the run is about to write (game copy)

    Returns:
        tuple: (has_space: bool, message: str)
    """
    try:
        stat = shutil.disk_usage(install_dir)
    except OSError as e:
        return False, f"Could not check disk space: {e}"

    free_gb = stat.free / (1024 ** 3)
    needed_gb = min_gb + required_bytes / (1024 ** 3)
    if free_gb < needed_gb:
        return False, f"Only {free_gb:.1f} GB available ({needed_gb:.1f} GB recommended)"

    return True, f"{free_gb:.1f} GB available"


def check_write_permissions(target_dir):
    """Check if we have write permissions to the directory holding the mod.

    Args:
        target_dir: Path to the download directory

    Returns:
        tuple: (success: bool, error_message: str or None)
    """
    test_file = Path(target_dir) / ".toum_write_test"
    try:
        test_file.write_text("test")
        test_file.unlink()
        return True, None
    except OSError as e:
        friendly_msg = get_user_friendly_error('permission_denied')
        return False, f"{e}\n{friendly_msg}"


def run_pre_installation_checks(download_dir, game_dir, log_callback=None, min_disk_gb=1):
    """Run the checks that come before touching the mod directory.

    Low disk space is only reported, an unwritable directory fails the run.

    Returns:
        tuple: (success: bool, error_message: str or None)
    """
    def log(msg, **kwargs):
        if log_callback:
            log_callback(msg, **kwargs)

    perm_success, perm_error = check_write_permissions(download_dir)
    if not perm_success:
        return False, perm_error
    log("Write permissions verified", debug=True)

    try:
        game_size = directory_size(game_dir)
    except OSError:
        game_size = 0
    has_space, space_msg = check_disk_space(download_dir, min_disk_gb, game_size)
    if has_space:
        log(f"Disk space: {space_msg}", debug=True)
    else:
        log(space_msg, warning=True)

    return True, None
