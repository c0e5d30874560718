"""
Field Builder - Assembles wire dictionaries for SendGrid payload nodes

Supports:
- Omission of absent optionals (None)
- Omission of empty lists/tuples and empty mappings
- Nested value nodes (anything exposing to_dict())
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterable, Optional, Tuple


def frozen_mapping(values: Optional[Mapping] = None) -> Mapping:
    """Return a read-only copy of a mapping for a built node"""
    return MappingProxyType(dict(values or {}))


def is_absent(value: Any) -> bool:
    """Check if a field value must be left out of the payload"""
    if value is None:
        return True
    if isinstance(value, (list, tuple, Mapping)) and len(value) == 0:
        return True
    return False


def build_value(value: Any) -> Any:
    """Convert a field value to its wire representation"""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [build_value(item) for item in value]
    if isinstance(value, Mapping):
        return {key: build_value(item) for key, item in value.items()}
    return value


def build_fields(fields: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """
    Build a wire dictionary from (target, value) pairs

    Pairs whose value is absent are skipped, so the payload never carries
    null, [] or {} placeholders. False, 0 and "" are kept.

    Example:
        build_fields([("email", "a@example.com"), ("name", None)])
        # Returns: {"email": "a@example.com"}
    """
    payload = {}

    for target, value in fields:
        if is_absent(value):
            continue
        payload[target] = build_value(value)

    return payload
