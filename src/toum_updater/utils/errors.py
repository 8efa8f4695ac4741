"""Fatal conditions of an update run. Each maps to exit code 1."""
from pathlib import Path
from typing import Optional, Union


class UpdaterError(Exception):
    exit_code = 1


class MissingGameDirectoryError(UpdaterError):
    def __init__(self, path: Union[str, Path], message: str = "Game folder not found") -> None:
        self.path = path
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message} at {self.path}"


class ReleaseFeedError(UpdaterError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(reason)

    def __str__(self) -> str:
        return f"Could not read release feed {self.url}: {self.reason}"


class NoMatchingAssetError(UpdaterError):
    def __init__(self, owner: str, repo: str, match: str) -> None:
        self.owner = owner
        self.repo = repo
        self.match = match
        super().__init__(match)

    def __str__(self) -> str:
        return f"No asset matching '{self.match}' found at {self.owner}/{self.repo}/releases/latest!"


class UnparseableVersionError(UpdaterError):
    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(filename)

    def __str__(self) -> str:
        return f"Could not determine latest mod version from filename '{self.filename}'!"


class CopyFailedError(UpdaterError):
    pass


class DownloadFailedError(UpdaterError):
    def __init__(self, path: Union[str, Path], reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        super().__init__(reason)

    def __str__(self) -> str:
        if self.reason:
            return f"Download failed for {self.path}: {self.reason}"
        return f"Download failed for {self.path}"


class ExtractionFailedError(UpdaterError):
    pass


class UnknownArgumentError(UpdaterError):
    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(argument)

    def __str__(self) -> str:
        return f"Unknown argument: {self.argument}"


class ConfigError(UpdaterError):
    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(reason)

    def __str__(self) -> str:
        return f"Invalid config file {self.path}: {self.reason}"


class BackupFailedError(UpdaterError):
    pass
