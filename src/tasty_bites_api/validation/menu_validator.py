"""Validation rules for menu item create and update payloads.

Rules are declared once as a static table and evaluated in order. Every
failing rule contributes its message, so a client sees all problems with a
payload in a single response.
"""

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from tasty_bites_api.models.menu_models import MenuCategory

ALLOWED_CATEGORIES = [category.value for category in MenuCategory]

_NUMERIC_STRING = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


@dataclass(frozen=True)
class ValidationRule:
    """A single (field, predicate, message) validation rule."""

    field: str
    check: Callable[[Any], bool]
    message: str
    optional: bool = False

    def applies_to(self, payload: dict[str, Any]) -> bool:
        """Optional rules are skipped when their field is absent."""
        return not self.optional or self.field in payload


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def min_length(length: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and len(value) >= length

    return check


def to_number(value: Any) -> float | None:
    """Convert a JSON number or numeric string to a float.

    Booleans, non-finite values, integers beyond the float range, strings
    with surrounding whitespace and anything else that is not numeric
    convert to None.
    """
    if isinstance(value, bool):
        return None
    if not isinstance(value, (int, float)) and not (
        isinstance(value, str) and _NUMERIC_STRING.fullmatch(value)
    ):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def is_positive_number(value: Any) -> bool:
    number = to_number(value)
    return number is not None and number > 0


def is_category(value: Any) -> bool:
    return isinstance(value, str) and value in ALLOWED_CATEGORIES


def is_non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) >= 1


def has_only_string_items(value: Any) -> bool:
    # Type and emptiness are reported by is_non_empty_list
    if not isinstance(value, list):
        return True
    return all(isinstance(item, str) for item in value)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


MENU_ITEM_RULES: tuple[ValidationRule, ...] = (
    ValidationRule("name", is_string, "Name must be a string"),
    ValidationRule("name", min_length(3), "Name must be at least 3 characters"),
    ValidationRule("description", is_string, "Description must be a string"),
    ValidationRule("description", min_length(10), "Description must be at least 10 characters"),
    ValidationRule("price", is_positive_number, "Price must be a number greater than 0"),
    ValidationRule("category", is_string, "Category must be a string"),
    ValidationRule(
        "category",
        is_category,
        f"Category must be one of: {', '.join(ALLOWED_CATEGORIES)}",
    ),
    ValidationRule(
        "ingredients",
        is_non_empty_list,
        "Ingredients must be an array with at least 1 item",
    ),
    ValidationRule("ingredients", has_only_string_items, "Ingredients must contain only strings"),
    ValidationRule("available", is_boolean, "Available must be true or false", optional=True),
)


def validate_menu_payload(
    payload: dict[str, Any],
    rules: tuple[ValidationRule, ...] = MENU_ITEM_RULES,
) -> list[str]:
    """Evaluate every rule against a payload.

    Args:
        payload: Decoded request body
        rules: Rule table to evaluate (defaults to the menu item rules)

    Returns:
        list: Messages of all failing rules, empty if the payload is valid
    """
    return [
        rule.message
        for rule in rules
        if rule.applies_to(payload) and not rule.check(payload.get(rule.field))
    ]


def normalize_menu_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Apply defaults and coercions to a payload that passed validation.

    Missing ``available`` becomes True and ``price`` is converted to a float.

    Args:
        payload: Validated request body

    Returns:
        dict: Normalized copy of the payload
    """
    normalized = dict(payload)
    if normalized.get("available") is None:
        normalized["available"] = True
    normalized["price"] = to_number(normalized["price"])
    return normalized
