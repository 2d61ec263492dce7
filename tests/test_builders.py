"""Tests for the request builders."""

from __future__ import annotations

import json
import logging

from mixpanel_component import build_event_request, build_profile_request, resolve_settings
from mixpanel_component.builders import LEGACY_TRACK_URL, basic_auth_header, import_url


def test_basic_auth_header_uses_empty_password():
    assert basic_auth_header("abc123") == "Basic YWJjMTIzOg=="


def test_import_url_with_and_without_project():
    assert import_url(resolve_settings({"api_secret": "s", "project_token": "t"})) == (
        "https://api.mixpanel.com/import?strict=1"
    )
    assert import_url(
        resolve_settings({"api_secret": "s", "project_token": "t", "project_id": "42", "region": "api-eu"})
    ) == "https://api-eu.mixpanel.com/import?strict=1&project_id=42"


def test_event_request_body_is_compact_json(track_event, import_settings):
    request = build_event_request(
        track_event, resolve_settings(import_settings), "Signup", {"plan": "pro"}
    )

    assert request.body == (
        '[{"event":"Signup","properties":{"token":"abc123","distinct_id":"123",'
        '"time":123,"$insert_id":"0d3ec1f8-4b43-4b8e-9b3c-5a4c6e8f9a10","plan":"pro"}}]'
    )
    assert request.headers == (
        ("Content-Type", "application/json"),
        ("Accept", "application/json"),
        ("Authorization", "Basic YWJjMTIzOg=="),
    )


def test_event_request_keeps_non_ascii(track_event, import_settings):
    request = build_event_request(
        track_event, resolve_settings(import_settings), "Inscription", {"ville": "Besançon"}
    )

    assert "Besançon" in request.body


def test_colliding_property_logged_and_dropped(track_event, import_settings, caplog):
    with caplog.at_level(logging.DEBUG, logger="mixpanel_component.builders"):
        request = build_event_request(
            track_event, resolve_settings(import_settings), "Signup", {"token": "spoofed"}
        )

    properties = json.loads(request.body)[0]["properties"]
    assert properties["token"] == "abc123"
    assert "collides with a reserved key" in caplog.text


def test_legacy_event_request(track_event, legacy_settings):
    request = build_event_request(track_event, resolve_settings(legacy_settings), "Signup", {})

    assert request.url == LEGACY_TRACK_URL == "https://api.mixpanel.com/track"
    assert request.headers == (
        ("Content-Type", "application/json"),
        ("Accept", "text/plain"),
    )


def test_profile_request(import_settings):
    request = build_profile_request(
        resolve_settings(import_settings),
        "123",
        {"$distinct_id": "123", "$ip": "10.0.0.1", "plan": "pro"},
    )

    assert request.url == "https://api-eu.mixpanel.com/engage"
    assert request.body == (
        '[{"$distinct_id":"123","$token":"tok123",'
        '"$set":{"$distinct_id":"123","$ip":"10.0.0.1","plan":"pro"}}]'
    )
    assert request.forward_client_headers is True
    assert request.to_dict()["headers"] == [
        ["Content-Type", "application/json"],
        ["Accept", "application/json"],
    ]
