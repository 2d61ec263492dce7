"""Flatten context sub-records into the Mixpanel property bag.

Every enricher mutates the bag in place. Free-text fields are written only
when they carry a value; counters, flags and screen metrics are always
written so the destination can tell "zero" apart from "not collected".
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping

from .helpers import parse_browser_info
from .models import Campaign, Client, PageData, Session


logger = logging.getLogger(__name__)

PropertyBag = Dict[str, str]


def stringify(value: Any) -> str:
    """Render a scalar the way the destination expects to read it back.

    >>> stringify(True), stringify(2.0), stringify(1.5), stringify(7)
    ('true', '2', '1.5', '7')
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def insert_if_nonempty(bag: PropertyBag, key: str, value: Any) -> None:
    if value is None:
        return
    text = value if isinstance(value, str) else stringify(value)
    if text.strip():
        bag[key] = text


def merge_properties(bag: PropertyBag, properties: Mapping[str, Any]) -> None:
    for key, value in properties.items():
        insert_if_nonempty(bag, key, value)


def enrich_with_page_context(bag: PropertyBag, page: PageData) -> None:
    insert_if_nonempty(bag, "url", page.url)
    insert_if_nonempty(bag, "path", page.path)
    insert_if_nonempty(bag, "title", page.title)
    insert_if_nonempty(bag, "category", page.category)
    insert_if_nonempty(bag, "name", page.name)
    insert_if_nonempty(bag, "referrer", page.referrer)

    if page.keywords:
        try:
            bag["keywords"] = json.dumps(
                list(page.keywords), separators=(",", ":"), ensure_ascii=False
            )
        except (TypeError, ValueError) as exc:
            logger.debug("Dropping unserializable page keywords: %s", exc)

    merge_properties(bag, page.properties)


def enrich_with_campaign_context(bag: PropertyBag, campaign: Campaign) -> None:
    insert_if_nonempty(bag, "campaign_name", campaign.name)
    insert_if_nonempty(bag, "campaign_source", campaign.source)
    insert_if_nonempty(bag, "campaign_medium", campaign.medium)
    insert_if_nonempty(bag, "campaign_term", campaign.term)
    insert_if_nonempty(bag, "campaign_content", campaign.content)
    insert_if_nonempty(bag, "campaign_creative_format", campaign.creative_format)
    insert_if_nonempty(bag, "campaign_marketing_tactic", campaign.marketing_tactic)


def enrich_with_session_context(bag: PropertyBag, session: Session) -> None:
    insert_if_nonempty(bag, "session_id", session.session_id)
    insert_if_nonempty(bag, "previous_session_id", session.previous_session_id)
    bag["session_count"] = stringify(session.session_count)
    bag["session_start"] = stringify(session.session_start)
    bag["first_seen"] = stringify(session.first_seen)
    bag["last_seen"] = stringify(session.last_seen)


_CLIENT_TEXT_FIELDS = (
    "ip",
    "city",
    "country_code",
    "country_name",
    "continent",
    "region",
    "locale",
    "timezone",
    "os_name",
    "os_version",
    "user_agent",
    "user_agent_architecture",
    "user_agent_bitness",
    "user_agent_full_version_list",
    "user_agent_version_list",
    "user_agent_mobile",
    "user_agent_model",
)


def enrich_with_client_context(bag: PropertyBag, client: Client) -> None:
    for name in _CLIENT_TEXT_FIELDS:
        insert_if_nonempty(bag, name, getattr(client, name))

    browser, version = parse_browser_info(client.user_agent)
    insert_if_nonempty(bag, "browser", browser)
    insert_if_nonempty(bag, "browser_version", version)

    bag["screen_width"] = stringify(client.screen_width)
    bag["screen_height"] = stringify(client.screen_height)
    bag["screen_density"] = stringify(client.screen_density)
