# fastlonn/core/sentry_config.py
"""
Sentry error tracking.

Only enabled in production with SENTRY_DSN set. Income, form values and
marked days travel in request bodies and query strings, so those are
stripped before an event leaves the process.
"""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from fastlonn.core.config import APP_VERSION, IS_PRODUCTION

logger = logging.getLogger(__name__)

FILTERED = "[Filtered]"


def init_sentry() -> bool:
    """Returns True when Sentry was started."""
    if not IS_PRODUCTION:
        logger.info("Sentry disabled outside production")
        return False

    dsn = os.getenv("SENTRY_DSN", "").strip()
    if not dsn:
        logger.warning("SENTRY_DSN not set; error tracking disabled")
        return False

    environment = os.getenv("SENTRY_ENVIRONMENT", "production")
    try:
        sentry_sdk.init(
            dsn=dsn,
            integrations=[
                FastApiIntegration(),
                StarletteIntegration(),
                LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
            ],
            traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
            release=os.getenv("RELEASE_VERSION", f"fastlonn@{APP_VERSION}"),
            environment=environment,
            send_default_pii=False,
            before_send=before_send_hook,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}", exc_info=True)
        return False

    logger.info(f"Sentry initialized ({environment})")
    return True


def before_send_hook(event, hint):
    """Drop cookies, request bodies and query strings from outgoing events."""
    request = event.get("request")
    if not request:
        return event

    headers = request.get("headers") or {}
    if "cookie" in headers:
        headers["cookie"] = FILTERED
    for field in ("data", "query_string"):
        if request.get(field):
            request[field] = FILTERED
    return event
