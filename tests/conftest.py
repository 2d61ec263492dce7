"""Root conftest for all tests - shared fixtures."""
from __future__ import annotations

import pytest

from app import create_app
from mixpanel_component import Event
from tests.factories import sample_page_event, sample_track_event, sample_user_event


@pytest.fixture()
def page_event() -> Event:
    return sample_page_event()


@pytest.fixture()
def track_event() -> Event:
    return sample_track_event()


@pytest.fixture()
def user_event() -> Event:
    return sample_user_event()


@pytest.fixture()
def import_settings() -> dict[str, str]:
    return {
        "api_secret": "abc123",
        "project_token": "tok123",
        "region": "api-eu",
        "project_id": "123456",
    }


@pytest.fixture()
def legacy_settings() -> dict[str, str]:
    return {"mixpanel_token": "token789"}


@pytest.fixture()
def flask_app(monkeypatch):
    monkeypatch.delenv("LOGFIRE_SEND_TO_LOGFIRE", raising=False)
    monkeypatch.delenv("MIXPANEL_COMPONENT_REVEAL_CREDENTIALS", raising=False)
    return create_app({"TESTING": True})


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
