"""Source URL checks applied before a generation job is created."""

from __future__ import annotations

import ipaddress
from urllib.parse import urlparse

from sitegen.shared.errors import SourceValidationError

_BLOCKED_HOSTNAMES = {"localhost", "localhost.localdomain"}


def validate_source_url(url: str | None) -> str:
    """Return the stripped URL, or raise ``SourceValidationError``.

    Accepts absolute http(s) URLs with a host. Hosts that point back into a
    private network (loopback, RFC 1918, link-local, unspecified) are refused
    so the scraper can't be aimed at internal services.
    """
    if url is None or not url.strip():
        raise SourceValidationError("A source URL is required")

    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise SourceValidationError(f"Source URL must use http or https: {url!r}")
    if not parsed.hostname:
        raise SourceValidationError(f"Source URL has no host: {url!r}")

    host = parsed.hostname.lower()
    if host in _BLOCKED_HOSTNAMES:
        raise SourceValidationError("Invalid URL: private addresses are not allowed")

    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        return url

    if ip.is_private or ip.is_loopback or ip.is_link_local or ip.is_unspecified:
        raise SourceValidationError("Invalid URL: private addresses are not allowed")
    return url
