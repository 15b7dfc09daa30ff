# http_helpers.py
import logging

import requests

from watch_errors import UpstreamError


def safe_get(session, url, params=None, timeout=5):
    """
    session: requests-like session
    Returns (status_code, json) or raises UpstreamError.
    One attempt only; a timeout is not retried.
    """
    try:
        r = session.get(url, params=params, timeout=timeout)
    except requests.Timeout as e:
        raise UpstreamError(f"timed out after {timeout}s: {url}") from e
    except requests.RequestException as e:
        raise UpstreamError(f"request failed: {type(e).__name__} {url}") from e

    if r.status_code != 200:
        logging.warning("HTTP %s %s", r.status_code, url)
        raise UpstreamError(f"HTTP {r.status_code}: {r.text[:500]}")
    try:
        return 200, r.json()
    except ValueError as e:
        logging.exception("Failed to decode JSON")
        raise UpstreamError("response is not JSON") from e
