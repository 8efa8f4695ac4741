"""Filesystem helpers for building the mod directory."""
import os
import shutil
import stat
from pathlib import Path
from typing import Union


def copy_tree(src: Path, dst: Path) -> None:
    """Copy the contents of src into dst, keeping files already in dst."""
    shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)


def merge_tree(src: Path, dst: Path) -> None:
    """Move everything inside src into dst, overwriting colliding paths.

    Directories are merged recursively. A file replaces a directory of the
    same name and the other way around. Emptied source directories are removed.
    """
    dst.mkdir(parents=True, exist_ok=True)
    for entry in src.iterdir():
        target = dst / entry.name
        if entry.is_dir() and not entry.is_symlink():
            if target.is_symlink() or (target.exists() and not target.is_dir()):
                target.unlink()
            merge_tree(entry, target)
            entry.rmdir()
            continue

        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        elif target.exists() or target.is_symlink():
            target.unlink()
        shutil.move(str(entry), str(target))


def widen_permissions(root: Path) -> None:
    """chmod -R u+rwX: owner read/write everywhere, traverse on directories."""
    root_mode = root.stat().st_mode
    os.chmod(root, root_mode | stat.S_IRWXU)
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames:
            path = os.path.join(dirpath, name)
            if os.path.islink(path):
                continue
            os.chmod(path, os.stat(path).st_mode | stat.S_IRWXU)
        for name in filenames:
            path = os.path.join(dirpath, name)
            if os.path.islink(path):
                continue
            mode = os.stat(path).st_mode
            extra = stat.S_IRUSR | stat.S_IWUSR
            if mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
                extra |= stat.S_IXUSR
            os.chmod(path, mode | extra)


def remove_path(path: Union[str, Path]) -> bool:
    """Delete a file or directory tree if present. Returns True if something was removed."""
    path = Path(path)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
        return True
    if path.exists() or path.is_symlink():
        path.unlink()
        return True
    return False


def directory_size(path: Path) -> int:
    """Total size in bytes of the regular files below path."""
    total = 0
    for dirpath, _, filenames in os.walk(path):
        for name in filenames:
            file_path = os.path.join(dirpath, name)
            if not os.path.islink(file_path):
                total += os.path.getsize(file_path)
    return total
