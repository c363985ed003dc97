"""Echo handler — returns the incoming event in the response body."""

import logging
from typing import Any

from core.config import DEFAULT_ECHO_INDENT, get_config
from core.log import bind_request_id, configure_logging, to_log_json
from core.responses import echo_response

logger = logging.getLogger(__name__)


def handler(event: Any, context: object) -> dict[str, Any]:
    """Return the event unchanged under ``input``; always 200.

    An unreadable configuration falls back to the default indent.
    """
    bind_request_id(context)

    try:
        configure_logging()
        indent = get_config().echo_indent
    except ValueError:
        logger.exception("Invalid configuration, using defaults")
        indent = DEFAULT_ECHO_INDENT

    logger.info("Received event: %s", to_log_json(event))
    response = echo_response(event, indent=indent)

    logger.info("Returning response: %s", to_log_json(response))
    return response
