"""Asset download: one background transfer, progress polled from the foreground."""
import threading
from pathlib import Path

import requests

from .constants import CANCEL_JOIN_TIMEOUT, CHUNK_SIZE, POLL_INTERVAL, REQUEST_TIMEOUT
from toum_updater.model_types import DownloadResult
from toum_updater.utils.errors import DownloadFailedError
from toum_updater.utils.network_utils import DEFAULT_HEADERS, probe_content_length
from toum_updater.utils.progress import ProgressBar


class DownloadCancelled(Exception):
    pass


class TransferWorker:
    """Streams one URL into a file. Runs on its own thread."""

    def __init__(self, url, dest: Path, cancel_event: threading.Event, timeout=REQUEST_TIMEOUT):
        self.url = url
        self.dest = dest
        self.cancel_event = cancel_event
        self.timeout = timeout
        self.error = None

    def run(self):
        try:
            self._transfer()
        except BaseException as e:
            self.error = e

    def _transfer(self):
        response = requests.get(self.url, stream=True, timeout=self.timeout,
                                allow_redirects=True, headers=DEFAULT_HEADERS)
        try:
            response.raise_for_status()
            if self.cancel_event.is_set():
                return
            with open(self.dest, 'wb') as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if self.cancel_event.is_set():
                        raise DownloadCancelled()
                    if chunk:
                        f.write(chunk)
                        f.flush()
        finally:
            response.close()


class Downloader:

    def __init__(self, log_callback, poll_interval=POLL_INTERVAL, timeout=REQUEST_TIMEOUT,
                 progress=None):
        self.log = log_callback
        self.poll_interval = poll_interval
        self.timeout = timeout
        self.progress = progress

    def _current_size(self, dest: Path) -> int:
        try:
            return dest.stat().st_size
        except OSError:
            return 0

    def _discard(self, dest: Path):
        try:
            dest.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            self.log(f"Could not remove partial download {dest}: {e}", debug=True)

    def download(self, url, dest) -> DownloadResult:
        """Download url to dest, redrawing the progress bar until the transfer ends.

        Raises DownloadFailedError when the transfer fails. The partial file
        is removed on failure and on interruption.
        """
        dest = Path(dest)
        self.log(f"Downloading {dest.name}...")

        # Create the file empty first so there is always something to stat
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(b"")
        except OSError as e:
            raise DownloadFailedError(dest, str(e)) from e

        total = probe_content_length(url)
        if total:
            self.log(f"Expected size: {total} bytes", debug=True)
        else:
            self.log("Download size unknown", debug=True)

        progress = self.progress or ProgressBar()
        cancel_event = threading.Event()
        worker = TransferWorker(url, dest, cancel_event, timeout=self.timeout)
        thread = threading.Thread(target=worker.run, name="asset-download", daemon=True)
        thread.start()

        try:
            while thread.is_alive():
                progress.update(self._current_size(dest), total)
                thread.join(self.poll_interval)
        except BaseException:
            cancel_event.set()
            thread.join(CANCEL_JOIN_TIMEOUT)
            progress.abort()
            self._discard(dest)
            raise

        if worker.error is not None:
            progress.abort()
            self._discard(dest)
            reason = str(worker.error) or type(worker.error).__name__
            raise DownloadFailedError(dest, reason) from worker.error

        downloaded = self._current_size(dest)
        progress.finish()
        self.log("Download complete!")
        return DownloadResult(dest, total, downloaded)
