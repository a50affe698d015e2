import json
import logging

from stray_tracker.core.config import settings

_configured = False


def configure_logging(level: str | None = None):
    """Configure root logging once from LOG_LEVEL."""
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    _configured = True


def log_event(event: str, data: dict, logger: logging.Logger | None = None):
    """
    Logs a structured debug event if DEBUG_EVENTS is enabled.
    """
    if not settings.DEBUG_EVENTS:
        return

    logger = logger or logging.getLogger("stray_tracker.events")
    logger.debug("%s: %s", event, json.dumps(data, default=str, sort_keys=True))
