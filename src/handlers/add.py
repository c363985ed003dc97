"""Sum handler — adds the integers in ``num1`` and ``num2``."""

import logging
from typing import Any

from core.config import get_config
from core.errors import HandlerError
from core.log import bind_request_id, configure_logging, to_log_json
from core.responses import error_response, sum_response
from core.services.arithmetic import add, extract_operands

logger = logging.getLogger(__name__)


def handler(event: Any, context: object) -> dict[str, Any]:
    """Sum two fields read from the event or from its JSON ``body``.

    Never raises — any failure, including bad configuration, is returned
    as a 400 response.
    """
    bind_request_id(context)

    try:
        configure_logging()
        logger.info("Received event: %s", to_log_json(event))

        operands = extract_operands(event)
        result = add(operands, strict=get_config().strict_numbers)
        response = sum_response(result)
    except HandlerError as e:
        logger.warning("Rejected request (%s): %s", e.code.value, e.message)
        response = error_response(e)
    except Exception as e:
        logger.exception("Error processing request")
        response = error_response(e)

    logger.info("Returning response: %s", to_log_json(response))
    return response
