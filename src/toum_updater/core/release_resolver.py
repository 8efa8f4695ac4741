"""Latest-release lookup on the GitHub releases API."""
import re
from pathlib import PurePosixPath
from typing import Any, Dict, Optional
from urllib.parse import unquote, urlparse

import requests

from toum_updater.model_types import ReleaseAsset, ResolvedRelease
from toum_updater.utils.errors import (
    NoMatchingAssetError,
    ReleaseFeedError,
    UnparseableVersionError,
)
from toum_updater.utils.network_utils import DEFAULT_HEADERS


VERSION_PATTERN = re.compile(r'v[0-9]+\.[0-9]+\.[0-9]+')


def select_asset(release: Dict[str, Any], match: str) -> Optional[ReleaseAsset]:
    """First asset, in feed order, whose name contains match."""
    for asset in release.get('assets') or []:
        name = asset.get('name') or ''
        url = asset.get('browser_download_url')
        if match in name and url:
            return ReleaseAsset(name, url)
    return None


def filename_from_url(url: str) -> str:
    """Final path segment of the URL."""
    return unquote(PurePosixPath(urlparse(url).path).name)


def parse_version(filename: str) -> str:
    """Extract vMAJOR.MINOR.PATCH, e.g. mod-v1.2.10-steam-itch.zip -> v1.2.10."""
    match = VERSION_PATTERN.search(filename)
    if not match:
        raise UnparseableVersionError(filename)
    return match.group(0)


class ReleaseResolver:

    def __init__(self, config, log_callback=None):
        self.config = config
        self.log_callback = log_callback

    def _log(self, message, **kwargs):
        if self.log_callback:
            self.log_callback(message, **kwargs)

    def fetch_latest_release(self) -> Dict[str, Any]:
        url = self.config.release_feed_url
        self._log(f"Querying {url}", debug=True)
        headers = dict(DEFAULT_HEADERS, Accept='application/vnd.github+json')
        try:
            response = requests.get(url, headers=headers, timeout=self.config.request_timeout)
            response.raise_for_status()
            release = response.json()
        except requests.exceptions.RequestException as e:
            raise ReleaseFeedError(url, type(e).__name__) from e
        except ValueError as e:
            raise ReleaseFeedError(url, "response is not valid JSON") from e

        if not isinstance(release, dict):
            raise ReleaseFeedError(url, "unexpected response shape")
        return release

    def resolve(self) -> ResolvedRelease:
        """Pick the matching asset of the latest release and parse its version."""
        release = self.fetch_latest_release()
        asset = select_asset(release, self.config.match)
        if asset is None:
            raise NoMatchingAssetError(self.config.owner, self.config.repo, self.config.match)

        filename = filename_from_url(asset.download_url)
        version = parse_version(filename)
        self._log(f"Selected asset {asset.name} ({release.get('tag_name', 'untagged')})", debug=True)
        return ResolvedRelease(asset, filename, version)
