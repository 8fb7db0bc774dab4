"""Validation and display helpers for calendar feed (ICS) URLs."""
import ipaddress
import re
from urllib.parse import urlsplit


class InvalidFeedUrl(ValueError):
    pass


def _is_disallowed_host(hostname: str) -> bool:
    host = (hostname or "").strip().lower()
    if not host:
        return True
    if host == "localhost" or host.endswith(".localhost") or host.endswith(".local"):
        return True
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        return False
    return (
        ip.is_private
        or ip.is_loopback
        or ip.is_link_local
        or ip.is_unspecified
        or ip in ipaddress.ip_network("100.64.0.0/10")
    )


def normalize_calendar_feed_url(raw_url: str) -> str:
    """Return a fetchable http(s) URL for a feed, or raise InvalidFeedUrl."""
    trimmed = (raw_url or "").strip()
    if not trimmed:
        raise InvalidFeedUrl("Calendar feed URL is required.")

    candidate = re.sub(r"^webcal://", "https://", trimmed, flags=re.IGNORECASE)
    try:
        parsed = urlsplit(candidate)
        hostname = parsed.hostname
    except ValueError:
        raise InvalidFeedUrl("Calendar feed URL is invalid.")

    if parsed.scheme.lower() not in ("http", "https"):
        if not parsed.scheme or not parsed.netloc:
            raise InvalidFeedUrl("Calendar feed URL is invalid.")
        raise InvalidFeedUrl("Only https:// or http:// calendar feed URLs are supported.")
    if not parsed.netloc:
        raise InvalidFeedUrl("Calendar feed URL is invalid.")

    if _is_disallowed_host(hostname):
        raise InvalidFeedUrl("That calendar host is not allowed.")

    return parsed.geturl()


def mask_calendar_feed_url(url: str) -> str:
    """Hide query strings (which usually carry the feed's secret token)."""
    try:
        parsed = urlsplit(url)
    except ValueError:
        return "Invalid URL"
    if not parsed.scheme or not parsed.hostname:
        return "Invalid URL"
    return f"{parsed.scheme}://{parsed.hostname}{parsed.path}"
