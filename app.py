import logging
from os import getenv
from typing import Optional

import logfire
from dotenv import load_dotenv
from flask import Flask
from logfire.exceptions import LogfireConfigError

from routes import collect_bp


def _is_truthy_env(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes"}


def _configure_logfire(flask_app: Flask, logger: logging.Logger) -> Optional[str]:
    """Enable Logfire when LOGFIRE_SEND_TO_LOGFIRE is set; return the reason when skipped."""
    if not getenv("LOGFIRE_SEND_TO_LOGFIRE"):
        return "LOGFIRE_SEND_TO_LOGFIRE not set"

    if not getenv("LOGFIRE_TOKEN") and not flask_app.config.get("TESTING"):
        logger.warning("LOGFIRE_SEND_TO_LOGFIRE is set but LOGFIRE_TOKEN is missing; disabling Logfire")
        return "LOGFIRE_TOKEN not set"

    try:
        logfire.configure(service_name=getenv("LOGFIRE_SERVICE_NAME", "mixpanel-component"))
        logfire.instrument_flask(flask_app)
    except LogfireConfigError as exc:
        logger.warning("Logfire configuration failed: %s", exc)
        return str(exc)

    logger.info("Logfire configured")
    return None


def create_app(config_override: Optional[dict] = None) -> Flask:
    """Application factory for creating configured Flask instances."""
    load_dotenv()
    logger = logging.getLogger(__name__)

    flask_app = Flask(__name__)
    flask_app.config.update(
        TESTING=_is_truthy_env(getenv("TESTING")),
        REVEAL_CREDENTIALS=_is_truthy_env(getenv("MIXPANEL_COMPONENT_REVEAL_CREDENTIALS")),
    )

    if config_override:
        flask_app.config.update(config_override)

    flask_app.config["LOGFIRE_REASON"] = _configure_logfire(flask_app, logger)

    flask_app.register_blueprint(collect_bp)

    return flask_app


if __name__ == "__main__":
    logging.basicConfig(
        level=getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    create_app().run(host="0.0.0.0", port=int(getenv("PORT", "5000")))
