"""Routes that build Mixpanel requests for events posted by the host."""

from __future__ import annotations

import logging
from typing import Any

from flask import current_app, jsonify, request

from mixpanel_component import ConfigurationError, Event, InvalidEventType, handle
from server_utils.external_api import (
    PreviewBuilder,
    configuration_error,
    error_output,
    validation_error,
)

from . import collect_bp


logger = logging.getLogger(__name__)


@collect_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@collect_bp.route("/collect/<kind>", methods=["POST"])
def collect(kind: str):
    """Translate the posted event into the request the host should send.

    The body must be ``{"event": {...}, "settings": {...}}``.
    """
    body: Any = request.get_json(silent=True)
    if not isinstance(body, dict) or not isinstance(body.get("event"), dict):
        return jsonify(error_output("Request body must be a JSON object with an 'event'", status_code=400)), 400

    settings = body.get("settings") or {}
    if not isinstance(settings, (dict, list)):
        return jsonify(validation_error("Settings must be an object", field="settings", status_code=400)), 400

    try:
        event = Event.from_dict(body["event"])
        built = handle(kind, event, settings)
    except ConfigurationError as exc:
        logger.info("Rejected %s event: %s", kind, exc)
        return jsonify(configuration_error(str(exc), exc.setting_name)), 400
    except InvalidEventType as exc:
        logger.info("Rejected %s event: %s", kind, exc)
        return jsonify(validation_error(str(exc), field="event", status_code=422)), 422
    except (TypeError, ValueError) as exc:
        return jsonify(validation_error(f"Malformed event: {exc}", field="event", status_code=400)), 400

    if current_app.config.get("REVEAL_CREDENTIALS"):
        return jsonify({"output": built.to_dict()})
    return jsonify({"output": PreviewBuilder.from_request(built)})
