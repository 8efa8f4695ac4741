"""Type definitions for better code clarity and IDE support."""
from typing import NamedTuple, Optional
from pathlib import Path


# Recorded when a mod directory exists but carries no version marker
UNKNOWN_VERSION = "unknown"


class ReleaseAsset(NamedTuple):
    """Single downloadable file attached to a release."""
    name: str
    download_url: str


class ResolvedRelease(NamedTuple):
    """Asset picked from the latest release plus what was parsed from it."""
    asset: ReleaseAsset
    filename: str
    version: str


class BackupResult(NamedTuple):
    """Outcome of handling an existing mod installation."""
    path: Optional[Path]
    backed_up: bool
    deleted: bool


class DownloadResult(NamedTuple):
    """Result of an asset download."""
    path: Path
    total_size: int
    downloaded: int
