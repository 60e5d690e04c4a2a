"""HTTP transport for the Tinkoff Mobile client."""

import requests

from .config import DEFAULT_HEADERS


def build_session(verify_ssl: bool = True) -> requests.Session:
    """
    Return a requests.Session with keep-alive and browser-like headers.

    No retry adapter is mounted: a failed request surfaces to the caller
    exactly once.

    Args:
        verify_ssl: Whether to verify TLS certificates

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    session.verify = verify_ssl
    session.headers.update(DEFAULT_HEADERS)
    return session


def endpoint_url(base: str, path: str) -> str:
    """Join the service origin and an endpoint path."""
    return base.rstrip("/") + path
