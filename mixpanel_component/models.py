"""Data model for collected events and the outbound request descriptor.

Events arrive from the host as JSON-like dictionaries. ``Event.from_dict``
converts them into frozen dataclasses so the mappers can rely on every
context sub-record being present, with empty values standing in for
anything the host did not collect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .errors import InvalidEventType


Properties = Dict[str, str]


class EventType(str, Enum):
    PAGE = "page"
    TRACK = "track"
    USER = "user"


class Consent(str, Enum):
    PENDING = "pending"
    GRANTED = "granted"
    DENIED = "denied"


class HttpMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value)


def _integer(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value in (None, ""):
        return 0
    return int(value)


def _flag(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)


def _number(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value in (None, ""):
        return 0.0
    return float(value)


def _record(data: Any, name: str) -> Mapping[str, Any]:
    if not data:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{name} must be an object")
    return data


def _properties(raw: Union[Mapping[str, Any], Iterable[Any], None]) -> Properties:
    """Accept either a JSON object or a list of ``[key, value]`` pairs."""
    if not raw:
        return {}
    items = raw.items() if isinstance(raw, Mapping) else raw
    result: Properties = {}
    for key, value in items:
        result[str(key)] = "" if value is None else str(value)
    return result


@dataclass(frozen=True)
class PageData:
    url: str = ""
    path: str = ""
    search: str = ""
    title: str = ""
    category: str = ""
    name: str = ""
    referrer: str = ""
    keywords: Tuple[str, ...] = ()
    properties: Properties = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "PageData":
        data = _record(data, "page")
        return cls(
            url=_text(data, "url"),
            path=_text(data, "path"),
            search=_text(data, "search"),
            title=_text(data, "title"),
            category=_text(data, "category"),
            name=_text(data, "name"),
            referrer=_text(data, "referrer"),
            keywords=tuple(data.get("keywords") or ()),
            properties=_properties(data.get("properties")),
        )


@dataclass(frozen=True)
class TrackData:
    name: str = ""
    properties: Properties = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "TrackData":
        data = _record(data, "data")
        return cls(name=_text(data, "name"), properties=_properties(data.get("properties")))


@dataclass(frozen=True)
class UserData:
    user_id: str = ""
    anonymous_id: str = ""
    edgee_id: str = ""
    properties: Properties = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "UserData":
        data = _record(data, "user")
        return cls(
            user_id=_text(data, "user_id"),
            anonymous_id=_text(data, "anonymous_id"),
            edgee_id=_text(data, "edgee_id"),
            properties=_properties(data.get("properties")),
        )


@dataclass(frozen=True)
class Campaign:
    name: str = ""
    source: str = ""
    medium: str = ""
    term: str = ""
    content: str = ""
    creative_format: str = ""
    marketing_tactic: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Campaign":
        data = _record(data, "campaign")
        return cls(**{name: _text(data, name) for name in cls.__dataclass_fields__})


@dataclass(frozen=True)
class Session:
    session_id: str = ""
    previous_session_id: str = ""
    session_count: int = 0
    session_start: bool = False
    first_seen: int = 0
    last_seen: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Session":
        data = _record(data, "session")
        return cls(
            session_id=_text(data, "session_id"),
            previous_session_id=_text(data, "previous_session_id"),
            session_count=_integer(data, "session_count"),
            session_start=_flag(data, "session_start"),
            first_seen=_integer(data, "first_seen"),
            last_seen=_integer(data, "last_seen"),
        )


@dataclass(frozen=True)
class Client:
    ip: str = ""
    locale: str = ""
    timezone: str = ""
    user_agent: str = ""
    user_agent_architecture: str = ""
    user_agent_bitness: str = ""
    user_agent_full_version_list: str = ""
    user_agent_version_list: str = ""
    user_agent_mobile: str = ""
    user_agent_model: str = ""
    os_name: str = ""
    os_version: str = ""
    screen_width: int = 0
    screen_height: int = 0
    screen_density: float = 0.0
    continent: str = ""
    country_code: str = ""
    country_name: str = ""
    region: str = ""
    city: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Client":
        data = _record(data, "client")
        screen = {
            "screen_width": _integer(data, "screen_width"),
            "screen_height": _integer(data, "screen_height"),
            "screen_density": _number(data, "screen_density"),
        }
        text_fields = {
            name: _text(data, name)
            for name in cls.__dataclass_fields__
            if name not in screen
        }
        return cls(**text_fields, **screen)


@dataclass(frozen=True)
class Context:
    page: PageData = field(default_factory=PageData)
    user: UserData = field(default_factory=UserData)
    client: Client = field(default_factory=Client)
    campaign: Campaign = field(default_factory=Campaign)
    session: Session = field(default_factory=Session)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Context":
        data = _record(data, "context")
        return cls(
            page=PageData.from_dict(data.get("page")),
            user=UserData.from_dict(data.get("user")),
            client=Client.from_dict(data.get("client")),
            campaign=Campaign.from_dict(data.get("campaign")),
            session=Session.from_dict(data.get("session")),
        )


EventData = Union[PageData, TrackData, UserData]

_DATA_TYPES = {
    EventType.PAGE: PageData,
    EventType.TRACK: TrackData,
    EventType.USER: UserData,
}


@dataclass(frozen=True)
class Event:
    """A single collected event with its payload variant and context."""

    uuid: str
    timestamp: int
    event_type: EventType
    data: EventData
    context: Context = field(default_factory=Context)
    timestamp_millis: int = 0
    timestamp_micros: int = 0
    consent: Optional[Consent] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Event":
        """Build an event from the host's JSON representation.

        The payload variant is read from ``data["type"]`` and falls back to
        the top-level ``event_type``. Unknown variants raise
        :class:`InvalidEventType`.
        """
        payload = data.get("data") or {}
        if not isinstance(payload, Mapping):
            raise TypeError("Event data must be an object")
        raw_type = payload.get("type") or data.get("event_type") or ""
        try:
            event_type = EventType(str(raw_type).lower())
        except ValueError:
            raise InvalidEventType(str(raw_type), f"Unknown event type: {raw_type!r}") from None

        raw_consent = data.get("consent")
        consent = Consent(str(raw_consent).lower()) if raw_consent else None

        return cls(
            uuid=_text(data, "uuid"),
            timestamp=_integer(data, "timestamp"),
            timestamp_millis=_integer(data, "timestamp_millis"),
            timestamp_micros=_integer(data, "timestamp_micros"),
            event_type=event_type,
            data=_DATA_TYPES[event_type].from_dict(payload),
            context=Context.from_dict(data.get("context")),
            consent=consent,
        )


@dataclass(frozen=True)
class EdgeeRequest:
    """Outbound request descriptor handed back to the host for dispatch."""

    method: HttpMethod
    url: str
    headers: Tuple[Tuple[str, str], ...]
    body: str
    forward_client_headers: bool = False

    def header(self, name: str) -> Optional[str]:
        """Return the first header value matching *name* case-insensitively."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method.value,
            "url": self.url,
            "headers": [list(pair) for pair in self.headers],
            "body": self.body,
            "forward_client_headers": self.forward_client_headers,
        }
