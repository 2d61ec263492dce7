"""Translate collected analytics events into Mixpanel ingestion requests."""

from .builders import build_event_request, build_profile_request
from .errors import ConfigurationError, InvalidEventType, MixpanelComponentError
from .mappers import handle, page, track, user
from .models import (
    Campaign,
    Client,
    Consent,
    Context,
    EdgeeRequest,
    Event,
    EventType,
    HttpMethod,
    PageData,
    Session,
    TrackData,
    UserData,
)
from .settings import DestinationVariant, Settings, resolve_settings

__all__ = [
    "page",
    "track",
    "user",
    "handle",
    "build_event_request",
    "build_profile_request",
    "resolve_settings",
    "Settings",
    "DestinationVariant",
    "ConfigurationError",
    "InvalidEventType",
    "MixpanelComponentError",
    "Event",
    "EventType",
    "Consent",
    "Context",
    "PageData",
    "TrackData",
    "UserData",
    "Campaign",
    "Session",
    "Client",
    "EdgeeRequest",
    "HttpMethod",
]
