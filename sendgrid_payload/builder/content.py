"""Content node: one body part of a message."""
from dataclasses import dataclass
from typing import Any, Dict

from .field_builder import build_fields


@dataclass(frozen=True)
class Content:
    """
    A body part, e.g. Content("text/plain", "Hello")

    mime_type is sent under the "type" key.
    """

    mime_type: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire dictionary."""
        return build_fields([
            ("type", self.mime_type),
            ("value", self.value),
        ])
