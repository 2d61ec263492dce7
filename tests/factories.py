"""Sample events used across the Mixpanel component tests."""
from __future__ import annotations

from dataclasses import replace

from mixpanel_component import (
    Campaign,
    Client,
    Consent,
    Context,
    Event,
    EventType,
    PageData,
    Session,
    TrackData,
    UserData,
)


def sample_page_data() -> PageData:
    return PageData(
        name="page name",
        category="category",
        keywords=("value1", "value2"),
        title="page title",
        url="https://example.com/full-url?test=1",
        path="/full-path",
        search="?test=1",
        referrer="https://example.com/another-page",
        properties={"prop1": "value1", "prop2": "10", "currency": "USD"},
    )


def sample_context(
    edgee_id: str = "edgee-123",
    locale: str = "fr-FR",
    session_start: bool = False,
    user_id: str = "123",
) -> Context:
    return Context(
        page=sample_page_data(),
        user=UserData(
            user_id=user_id,
            anonymous_id="456",
            edgee_id=edgee_id,
            properties={"prop1": "value1", "prop2": "10"},
        ),
        client=Client(
            city="Paris",
            ip="192.168.0.1",
            locale=locale,
            timezone="CET",
            user_agent="Mozilla/5.0 (Macintosh) AppleWebKit/537.36 Chrome/120.0.0.0 Safari/537.36",
            user_agent_architecture="x86",
            user_agent_bitness="64",
            user_agent_full_version_list="abc",
            user_agent_version_list="abc",
            user_agent_mobile="0",
            user_agent_model="don't know",
            os_name="MacOS",
            os_version="latest",
            screen_width=1024,
            screen_height=768,
            screen_density=2.0,
            continent="Europe",
            country_code="FR",
            country_name="France",
            region="West Europe",
        ),
        campaign=Campaign(
            name="spring",
            source="newsletter",
            medium="email",
            term="shoes",
            content="banner",
            creative_format="html",
            marketing_tactic="retention",
        ),
        session=Session(
            session_id="sess-1",
            previous_session_id="sess-0",
            session_count=2,
            session_start=session_start,
            first_seen=123,
            last_seen=456,
        ),
    )


def sample_page_event(**context_kwargs) -> Event:
    return Event(
        uuid="0d3ec1f8-4b43-4b8e-9b3c-5a4c6e8f9a10",
        timestamp=123,
        timestamp_millis=123000,
        timestamp_micros=123000000,
        event_type=EventType.PAGE,
        data=sample_page_data(),
        context=sample_context(**context_kwargs),
        consent=Consent.GRANTED,
    )


def sample_track_event(name: str = "Signup", **context_kwargs) -> Event:
    return replace(
        sample_page_event(**context_kwargs),
        event_type=EventType.TRACK,
        data=TrackData(name=name, properties={"plan": "pro", "prop1": "value1"}),
    )


def sample_user_event(**context_kwargs) -> Event:
    context = sample_context(**context_kwargs)
    return replace(
        sample_page_event(**context_kwargs),
        event_type=EventType.USER,
        data=context.user,
    )

