import requests

from toum_updater.core.constants import URL_PROBE_TIMEOUT_HEAD, USER_AGENT


DEFAULT_HEADERS = {'User-Agent': USER_AGENT}


def probe_content_length(url, timeout=URL_PROBE_TIMEOUT_HEAD):
    """Best-effort size of the file behind url, following redirects.

    Returns 0 when the HEAD request fails or the final response has no
    usable Content-Length header.
    """
    try:
        response = requests.head(url, timeout=timeout, allow_redirects=True, headers=DEFAULT_HEADERS)
    except requests.exceptions.RequestException:
        return 0

    if not (200 <= response.status_code < 300):
        return 0

    value = response.headers.get('Content-Length', '')
    try:
        size = int(str(value).strip())
    except ValueError:
        return 0
    return max(size, 0)
