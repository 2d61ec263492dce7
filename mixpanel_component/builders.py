"""Assemble outbound Mixpanel requests from an enriched property bag."""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, Dict, Mapping

from .helpers import mixpanel_endpoint, resolve_distinct_id
from .models import EdgeeRequest, Event, HttpMethod
from .settings import DestinationVariant, Settings


logger = logging.getLogger(__name__)

LEGACY_TRACK_URL = mixpanel_endpoint("api") + "/track"

# Keys the destination requires; event properties never override them.
RESERVED_EVENT_KEYS = ("token", "distinct_id", "time", "$insert_id")


def _dumps(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def basic_auth_header(secret: str) -> str:
    encoded = base64.b64encode(f"{secret}:".encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


def import_url(settings: Settings) -> str:
    url = f"{settings.base_url}/import?strict=1"
    if settings.project_id:
        url += f"&project_id={settings.project_id}"
    return url


def build_event_request(
    event: Event,
    settings: Settings,
    name: str,
    properties: Mapping[str, str],
) -> EdgeeRequest:
    """Build an event ingestion request for page and track events.

    The reserved keys are written first and the property bag is layered
    underneath them, so a property named ``token`` or ``distinct_id`` is
    dropped rather than replacing the value the destination relies on.
    """
    merged: Dict[str, Any] = {
        "token": settings.api_secret,
        "distinct_id": resolve_distinct_id(event.context.user),
        "time": event.timestamp,
        "$insert_id": event.uuid,
    }
    for key, value in properties.items():
        if key in RESERVED_EVENT_KEYS:
            logger.debug("Ignoring event property %r that collides with a reserved key", key)
            continue
        merged[key] = value

    body = _dumps([{"event": name, "properties": merged}])

    if settings.variant is DestinationVariant.LEGACY_TRACK:
        return EdgeeRequest(
            method=HttpMethod.POST,
            url=LEGACY_TRACK_URL,
            headers=(
                ("Content-Type", "application/json"),
                ("Accept", "text/plain"),
            ),
            body=body,
            forward_client_headers=False,
        )

    return EdgeeRequest(
        method=HttpMethod.POST,
        url=import_url(settings),
        headers=(
            ("Content-Type", "application/json"),
            ("Accept", "application/json"),
            ("Authorization", basic_auth_header(settings.api_secret)),
        ),
        body=body,
        forward_client_headers=False,
    )


def build_profile_request(
    settings: Settings,
    distinct_id: str,
    properties: Mapping[str, str],
) -> EdgeeRequest:
    """Build an ``engage`` request that sets profile properties.

    Profile updates travel with the original client headers so the
    destination can derive geolocation from them.
    """
    set_properties = dict(properties)
    body = _dumps(
        [
            {
                "$distinct_id": distinct_id,
                "$token": settings.project_token,
                "$set": set_properties,
            }
        ]
    )
    return EdgeeRequest(
        method=HttpMethod.POST,
        url=f"{settings.base_url}/engage",
        headers=(
            ("Content-Type", "application/json"),
            ("Accept", "application/json"),
        ),
        body=body,
        forward_client_headers=True,
    )
