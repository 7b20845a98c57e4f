from __future__ import annotations

from uuid import uuid4

USER_AGENT = "apod-proxy/1.0 (+https://api.nasa.gov)"


def make_headers() -> dict[str, str]:
    """Return the headers sent with every APOD request.

    X-Request-ID is freshly generated on every call so upstream failures can
    be matched against our own log lines.
    """
    return {
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
        "X-Request-ID": str(uuid4()),
    }
