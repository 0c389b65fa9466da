"""Syntactic URL validation applied before any network access."""

import logging
from typing import Tuple
from urllib.parse import ParseResult as ParsedUrl
from urllib.parse import urlparse

from recipease.app.services.url_parsing.errors import (
    DisallowedHostError,
    DisallowedSchemeError,
    InvalidUrlError,
)

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = {"http", "https"}

# Matched as string prefixes of the hostname, not as IP ranges. No DNS lookup happens here.
BLOCKED_HOST_PREFIXES: Tuple[str, ...] = (
    "localhost",
    "127.0.0.1",
    "::1",
    "0.0.0.0",
    "169.254.",
    "10.",
    "192.168.",
) + tuple(f"172.{octet}." for octet in range(16, 32))


def is_blocked_host(hostname: str) -> bool:
    """Check a hostname against the loopback/link-local/private deny-list."""
    host = (hostname or "").strip().lower().strip("[]")
    return any(host.startswith(prefix) for prefix in BLOCKED_HOST_PREFIXES)


def validate_import_url(raw_url: str) -> ParsedUrl:
    """Parse ``raw_url`` and reject anything that is not a public http(s) address."""
    candidate = (raw_url or "").strip()
    try:
        parsed = urlparse(candidate)
    except ValueError as exc:
        raise InvalidUrlError() from exc

    if not parsed.scheme:
        raise InvalidUrlError()
    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        logger.warning("Rejected import URL with scheme %s", parsed.scheme)
        raise DisallowedSchemeError()

    try:
        hostname = parsed.hostname
    except ValueError as exc:
        raise InvalidUrlError() from exc
    if not parsed.netloc or not hostname:
        raise InvalidUrlError()

    if is_blocked_host(hostname):
        logger.warning("Rejected import URL with blocked host %s", hostname)
        raise DisallowedHostError()
    return parsed
