"""
Input Validators and Sanitizers

This module provides the helpers used to turn untrusted query parameters
into something safe to hand to a model.

Security Considerations:
- Allow-lists prevent arbitrary column injection through sort/filter params
- Page sizes are clamped to prevent oversized queries
"""

from typing import Any, Iterable, Mapping, Optional

ASC = "ASC"
DESC = "DESC"


def filter_keys(data: Mapping[str, Any], allowed: Iterable[str]) -> dict[str, Any]:
    """
    Keep only the entries of data whose key is in allowed.

    Input order is preserved. Unknown keys are dropped silently.

    Example:
        filter_keys({"status": "open", "page": "2"}, ["status"]) -> {"status": "open"}
    """
    allowed = set(allowed)
    return {key: value for key, value in data.items() if key in allowed}


def parse_order(token: str) -> dict[str, str]:
    """
    Parse an 'order' query value into a single-entry order spec.

    Example:
        parse_order("created_at") -> {"created_at": "ASC"}
        parse_order("-created_at") -> {"created_at": "DESC"}
    """
    if token.startswith("-"):
        return {token[1:]: DESC}
    return {token: ASC}


def parse_positive_int(value: Optional[str], default: int, maximum: Optional[int] = None) -> int:
    """
    Parse a query value as a positive integer.

    Returns:
        The parsed integer, or default if value is missing, malformed, < 1
        or above maximum
    """
    if value is None:
        return default
    try:
        number = int(value.strip())
    except (ValueError, AttributeError):
        return default
    if number < 1 or (maximum is not None and number > maximum):
        return default
    return number
