"""FastAPI dependencies for request payload validation.

Declared on the create and update routes so validation runs after request
logging and before the route handler reads the payload.
"""

import logging
from typing import Any

from fastapi import Request

from tasty_bites_api.exceptions import MenuValidationError
from tasty_bites_api.models.menu_models import MenuItemPayload
from tasty_bites_api.validation.menu_validator import (
    normalize_menu_payload,
    validate_menu_payload,
)

logger = logging.getLogger(__name__)


async def read_json_object(request: Request) -> dict[str, Any]:
    """Decode the request body as a JSON object.

    Malformed JSON and non-object bodies decode to an empty dict so they fail
    validation like a payload with every field missing.
    """
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


async def get_validated_menu_payload(request: Request) -> MenuItemPayload:
    """FastAPI dependency that validates and normalizes a menu item body.

    Args:
        request: Incoming request (injected by FastAPI)

    Returns:
        MenuItemPayload: Normalized payload with ``available`` defaulted

    Raises:
        MenuValidationError: If any validation rule fails
    """
    body = await read_json_object(request)

    messages = validate_menu_payload(body)
    if messages:
        logger.info(f"Rejected menu payload with {len(messages)} validation errors")
        request.app.state.menu_metrics.record_validation_failure(len(messages))
        raise MenuValidationError(messages)

    return MenuItemPayload.model_validate(normalize_menu_payload(body))
