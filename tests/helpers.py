"""Fakes shared by the test modules: log recorder, archives, requests responses."""

import io
import zipfile

import requests


class Logger:
    """Records every log call as (message, kwargs)."""

    def __init__(self):
        self.messages = []

    def __call__(self, msg, **kwargs):
        self.messages.append((msg, kwargs))

    def text(self):
        return "\n".join(m for m, _ in self.messages)

    def errors(self):
        return [m for m, kw in self.messages if kw.get("error")]


class RecordingProgress:
    def __init__(self):
        self.updates = []
        self.finished = False
        self.aborted = False

    def update(self, current, total):
        self.updates.append((current, total))

    def finish(self):
        self.finished = True

    def abort(self):
        self.aborted = True


def make_in_memory_zip(files):
    bio = io.BytesIO()
    with zipfile.ZipFile(bio, mode="w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    bio.seek(0)
    return bio.getvalue()


class FakeJsonResp:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code
        self.headers = {"Content-Type": "application/json"}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"HTTP {self.status_code}", response=self)

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeDownloadResp:
    def __init__(self, chunks, status_code=200):
        self.chunks = chunks
        self.status_code = status_code
        self.headers = {"Content-Type": "application/zip"}
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"HTTP {self.status_code}", response=self)

    def iter_content(self, chunk_size=8192):
        for chunk in self.chunks:
            yield chunk

    def close(self):
        self.closed = True


class FakeHeadResp:
    def __init__(self, content_length=None, status_code=200):
        self.status_code = status_code
        self.headers = {}
        if content_length is not None:
            self.headers["Content-Length"] = str(content_length)


def release_payload(*names, base="https://github.com/AU-Avengers/TOU-Mira/releases/download/v1"):
    """Release JSON whose assets are named (and served) as given, in order."""
    return {
        "tag_name": "v1",
        "assets": [
            {"name": name, "browser_download_url": f"{base}/{name}"}
            for name in names
        ],
    }
