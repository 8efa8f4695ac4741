import pytest
import requests

from toum_updater.core.config_manager import UpdaterConfig
from toum_updater.core.release_resolver import (
    ReleaseResolver,
    filename_from_url,
    parse_version,
    select_asset,
)
from toum_updater.utils.error_messages import suggest_fix_for_error
from toum_updater.utils.errors import (
    NoMatchingAssetError,
    ReleaseFeedError,
    UnparseableVersionError,
)

from helpers import FakeJsonResp, Logger, release_payload


def make_resolver(tmp_path, **kwargs):
    config = UpdaterConfig(download_dir=tmp_path, log_file=None, **kwargs)
    return ReleaseResolver(config, Logger())


def test_select_asset_single_match():
    release = release_payload("TouMira-v1.2.10-x86-epic.zip", "TouMira-v1.2.10-steam-itch.zip")
    asset = select_asset(release, "steam-itch")
    assert asset.name == "TouMira-v1.2.10-steam-itch.zip"
    assert asset.download_url.endswith("/TouMira-v1.2.10-steam-itch.zip")


def test_select_asset_keeps_feed_order():
    release = release_payload("b-v2.0.0-steam-itch.zip", "a-v1.0.0-steam-itch.zip")
    assert select_asset(release, "steam-itch").name == "b-v2.0.0-steam-itch.zip"


def test_select_asset_no_match():
    assert select_asset(release_payload("TouMira-v1.0.0-epic.zip"), "steam-itch") is None
    assert select_asset({"assets": []}, "steam-itch") is None
    assert select_asset({}, "steam-itch") is None


@pytest.mark.parametrize("filename,expected", [
    ("mod-v1.2.10-steam-itch.zip", "v1.2.10"),
    ("TouMira-v0.0.1.zip", "v0.0.1"),
    ("v10.20.30-build-v1.2.3.zip", "v10.20.30"),
])
def test_parse_version(filename, expected):
    assert parse_version(filename) == expected


@pytest.mark.parametrize("filename", ["mod-steam-itch.zip", "mod-v1.2-steam.zip", "mod-1.2.3.zip"])
def test_parse_version_unparseable(filename):
    with pytest.raises(UnparseableVersionError) as exc:
        parse_version(filename)
    assert filename in str(exc.value)


def test_filename_from_url():
    url = "https://github.com/o/r/releases/download/v1.2.10/TouMira-v1.2.10-steam-itch.zip?x=1"
    assert filename_from_url(url) == "TouMira-v1.2.10-steam-itch.zip"
    assert filename_from_url("https://example.com/a/My%20Mod-v1.0.0.zip") == "My Mod-v1.0.0.zip"


def test_resolve_returns_url_and_version(tmp_path, monkeypatch):
    calls = []

    def fake_get(url, **kwargs):
        calls.append(url)
        return FakeJsonResp(release_payload("TouMira-v1.2.10-steam-itch.zip"))

    monkeypatch.setattr("toum_updater.core.release_resolver.requests.get", fake_get)

    resolved = make_resolver(tmp_path).resolve()
    assert calls == ["https://api.github.com/repos/AU-Avengers/TOU-Mira/releases/latest"]
    assert resolved.filename == "TouMira-v1.2.10-steam-itch.zip"
    assert resolved.version == "v1.2.10"
    assert resolved.asset.download_url.endswith("TouMira-v1.2.10-steam-itch.zip")


def test_resolve_uses_configured_repo_and_match(tmp_path, monkeypatch):
    calls = []

    def fake_get(url, **kwargs):
        calls.append(url)
        return FakeJsonResp(release_payload("Other-v3.1.4-linux.zip", "Other-v3.1.4-win.zip"))

    monkeypatch.setattr("toum_updater.core.release_resolver.requests.get", fake_get)

    resolver = make_resolver(tmp_path, owner="someone", repo="Other", match="win",
                             api_url="https://ghe.example.com/api/v3/")
    resolved = resolver.resolve()
    assert calls == ["https://ghe.example.com/api/v3/repos/someone/Other/releases/latest"]
    assert resolved.asset.name == "Other-v3.1.4-win.zip"


def test_resolve_no_matching_asset(tmp_path, monkeypatch):
    monkeypatch.setattr(
        "toum_updater.core.release_resolver.requests.get",
        lambda url, **kwargs: FakeJsonResp(release_payload("TouMira-v1.0.0-epic.zip")),
    )
    with pytest.raises(NoMatchingAssetError) as exc:
        make_resolver(tmp_path).resolve()
    assert "AU-Avengers/TOU-Mira/releases/latest" in str(exc.value)


def test_resolve_unparseable_version(tmp_path, monkeypatch):
    monkeypatch.setattr(
        "toum_updater.core.release_resolver.requests.get",
        lambda url, **kwargs: FakeJsonResp(release_payload("TouMira-latest-steam-itch.zip")),
    )
    with pytest.raises(UnparseableVersionError):
        make_resolver(tmp_path).resolve()


def test_feed_rate_limited(tmp_path, monkeypatch):
    monkeypatch.setattr(
        "toum_updater.core.release_resolver.requests.get",
        lambda url, **kwargs: FakeJsonResp({"message": "API rate limit exceeded"}, status_code=403),
    )
    with pytest.raises(ReleaseFeedError) as exc:
        make_resolver(tmp_path).resolve()
    assert suggest_fix_for_error(exc.value) == 'rate_limited'


def test_feed_connection_error(tmp_path, monkeypatch):
    def fake_get(url, **kwargs):
        raise requests.exceptions.ConnectionError("Network down")

    monkeypatch.setattr("toum_updater.core.release_resolver.requests.get", fake_get)
    with pytest.raises(ReleaseFeedError) as exc:
        make_resolver(tmp_path).resolve()
    assert suggest_fix_for_error(exc.value) == 'network_timeout'


def test_feed_invalid_json(tmp_path, monkeypatch):
    monkeypatch.setattr(
        "toum_updater.core.release_resolver.requests.get",
        lambda url, **kwargs: FakeJsonResp(ValueError("Expecting value")),
    )
    with pytest.raises(ReleaseFeedError) as exc:
        make_resolver(tmp_path).resolve()
    assert "not valid JSON" in str(exc.value)


def test_feed_unexpected_shape(tmp_path, monkeypatch):
    monkeypatch.setattr(
        "toum_updater.core.release_resolver.requests.get",
        lambda url, **kwargs: FakeJsonResp([1, 2, 3]),
    )
    with pytest.raises(ReleaseFeedError):
        make_resolver(tmp_path).resolve()
