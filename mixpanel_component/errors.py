"""Errors raised while turning events into Mixpanel requests."""

from __future__ import annotations


class MixpanelComponentError(Exception):
    """Base class for errors surfaced to the host as a readable message."""


class ConfigurationError(MixpanelComponentError, ValueError):
    """A required destination setting is missing or blank."""

    def __init__(self, setting_name: str, message: str | None = None):
        self.setting_name = setting_name
        super().__init__(message or f"Missing or empty '{setting_name}' setting")


class InvalidEventType(MixpanelComponentError, TypeError):
    """The entry point invoked does not match the event's payload variant."""

    def __init__(self, kind: str, message: str | None = None):
        self.kind = kind
        super().__init__(message or f"Invalid event type for {kind}")
