"""Small helpers shared by the enrichers, mappers and builders."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .models import UserData


_BROWSER_PATTERNS = (
    (re.compile(r"(Firefox)/([\d\.]+)"), "Firefox"),
    (re.compile(r"(Edg)/([\d\.]+)"), "Edge"),
    (re.compile(r"(Chrome)/([\d\.]+)"), "Chrome"),
    (re.compile(r"(Safari)/([\d\.]+)"), "Safari"),
    (re.compile(r"(Opera)/([\d\.]+)"), "Opera"),
)


def parse_browser_info(user_agent: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(browser, version)`` detected in a user-agent string.

    Patterns are tried in order, so Edge wins over the Chrome token it also
    carries and Chrome wins over Safari.

    >>> parse_browser_info("Mozilla/5.0 Chrome/120.0.0.0 Safari/537.36")
    ('Chrome', '120.0.0.0')
    >>> parse_browser_info("curl/8.0")
    (None, None)
    """
    for pattern, name in _BROWSER_PATTERNS:
        match = pattern.search(user_agent or "")
        if match:
            return name, match.group(2)
    return None, None


def mixpanel_endpoint(region: str) -> str:
    return f"https://{region}.mixpanel.com"


def resolve_distinct_id(user: UserData) -> str:
    """Prefer the host's user id, falling back to the edgee pseudo-identity."""
    if user.user_id.strip():
        return user.user_id
    return user.edgee_id
