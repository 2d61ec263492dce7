"""Resolve the host's untyped destination settings into ``Settings``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .errors import ConfigurationError
from .helpers import mixpanel_endpoint


DEFAULT_REGION = "api"

SettingsInput = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


class DestinationVariant(str, Enum):
    """Which Mixpanel ingestion convention a deployment targets."""

    IMPORT = "import"
    LEGACY_TRACK = "legacy_track"


@dataclass(frozen=True)
class Settings:
    variant: DestinationVariant
    api_secret: str
    project_token: str
    project_id: Optional[str] = None
    region: str = DEFAULT_REGION

    @property
    def base_url(self) -> str:
        return mixpanel_endpoint(self.region)


class SettingsValidator:
    """Validate required credentials in a settings mapping.

    Example:
        >>> SettingsValidator.require({"api_secret": "abc"}, "api_secret")
        'abc'
        >>> SettingsValidator.require({"api_secret": "  "}, "api_secret")
        Traceback (most recent call last):
        ...
        mixpanel_component.errors.ConfigurationError: Missing or empty 'api_secret' setting
    """

    @staticmethod
    def require(settings: Mapping[str, str], name: str) -> str:
        value = settings.get(name)
        if value is None or not value.strip():
            raise ConfigurationError(name)
        return value

    @staticmethod
    def optional(settings: Mapping[str, str], name: str) -> Optional[str]:
        value = settings.get(name)
        if value is None or not value.strip():
            return None
        return value


def _as_dict(raw: SettingsInput) -> Dict[str, str]:
    items = raw.items() if isinstance(raw, Mapping) else raw
    return {str(key): "" if value is None else str(value) for key, value in items}


def resolve_settings(raw: Union[SettingsInput, Settings]) -> Settings:
    """Validate *raw* once and return an immutable :class:`Settings`.

    The variant is chosen from the shape of the mapping: ``api_secret`` or
    ``project_token`` selects the import endpoint, a lone ``mixpanel_token``
    selects the legacy ``/track`` endpoint.
    """
    if isinstance(raw, Settings):
        return raw

    settings = _as_dict(raw)

    if "api_secret" not in settings and "project_token" not in settings and "mixpanel_token" in settings:
        token = SettingsValidator.require(settings, "mixpanel_token")
        return Settings(
            variant=DestinationVariant.LEGACY_TRACK,
            api_secret=token,
            project_token=token,
            project_id=SettingsValidator.optional(settings, "project_id"),
        )

    return Settings(
        variant=DestinationVariant.IMPORT,
        api_secret=SettingsValidator.require(settings, "api_secret"),
        project_token=SettingsValidator.require(settings, "project_token"),
        project_id=SettingsValidator.optional(settings, "project_id"),
        region=SettingsValidator.optional(settings, "region") or DEFAULT_REGION,
    )
