"""Entry points that turn a collected event into a Mixpanel request.

Property precedence is applied as explicit, ordered merge steps:

1. fields and free-form properties of the event payload,
2. context enrichment (page, campaign, session, then client),
3. reserved protocol keys, applied by the request builders.

Later steps overwrite earlier ones, so the context page snapshot supersedes
the page payload's own url/title/path and the reserved keys always win.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict

from .builders import build_event_request, build_profile_request
from .enrichers import (
    PropertyBag,
    enrich_with_campaign_context,
    enrich_with_client_context,
    enrich_with_page_context,
    enrich_with_session_context,
    insert_if_nonempty,
    merge_properties,
)
from .errors import InvalidEventType
from .helpers import resolve_distinct_id
from .models import Context, EdgeeRequest, Event, PageData, TrackData
from .settings import DestinationVariant, SettingsInput, resolve_settings


logger = logging.getLogger(__name__)

PAGE_VIEW_EVENT = "Page View"
LEGACY_USER_EVENT = "User Update"


def _enrich_with_context(bag: PropertyBag, context: Context) -> None:
    # Client fields go last and replace same-named event properties.
    enrich_with_page_context(bag, context.page)
    enrich_with_campaign_context(bag, context.campaign)
    enrich_with_session_context(bag, context.session)
    enrich_with_client_context(bag, context.client)


def _log_built(kind: str, request: EdgeeRequest) -> EdgeeRequest:
    logger.debug("Built Mixpanel %s request: %s %s", kind, request.method.value, request.url)
    return request


def page(event: Event, settings: SettingsInput) -> EdgeeRequest:
    resolved = resolve_settings(settings)
    data = event.data
    if not isinstance(data, PageData):
        raise InvalidEventType("page")

    bag: PropertyBag = {}
    insert_if_nonempty(bag, "url", data.url)
    insert_if_nonempty(bag, "title", data.title)
    insert_if_nonempty(bag, "path", data.path)
    insert_if_nonempty(bag, "referrer", data.referrer)
    insert_if_nonempty(bag, "category", data.category)
    insert_if_nonempty(bag, "name", data.name)
    merge_properties(bag, data.properties)

    _enrich_with_context(bag, event.context)

    return _log_built("page", build_event_request(event, resolved, PAGE_VIEW_EVENT, bag))


def track(event: Event, settings: SettingsInput) -> EdgeeRequest:
    resolved = resolve_settings(settings)
    data = event.data
    if not isinstance(data, TrackData):
        raise InvalidEventType("track")

    bag: PropertyBag = {}
    merge_properties(bag, data.properties)

    _enrich_with_context(bag, event.context)

    return _log_built("track", build_event_request(event, resolved, data.name, bag))


def user(event: Event, settings: SettingsInput) -> EdgeeRequest:
    """Update the user's profile from ``context.user``.

    Any payload variant is accepted; only the context is read.
    """
    resolved = resolve_settings(settings)
    context = event.context
    distinct_id = resolve_distinct_id(context.user)

    bag: PropertyBag = {"$distinct_id": distinct_id}
    insert_if_nonempty(bag, "$ip", context.client.ip)
    merge_properties(bag, context.user.properties)

    _enrich_with_context(bag, context)

    if resolved.variant is DestinationVariant.LEGACY_TRACK:
        request = build_event_request(event, resolved, LEGACY_USER_EVENT, bag)
    else:
        request = build_profile_request(resolved, distinct_id, bag)
    return _log_built("user", request)


HANDLERS: Dict[str, Callable[[Event, SettingsInput], EdgeeRequest]] = {
    "page": page,
    "track": track,
    "user": user,
}


def handle(kind: str, event: Event, settings: SettingsInput) -> EdgeeRequest:
    """Dispatch to the entry point named *kind*."""
    handler = HANDLERS.get(kind.lower())
    if handler is None:
        raise InvalidEventType(kind, f"Unsupported event kind: {kind!r}")
    return handler(event, settings)
