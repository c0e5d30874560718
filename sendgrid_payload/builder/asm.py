"""Asm node: unsubscribe group handling."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .field_builder import build_fields


@dataclass(frozen=True)
class Asm:
    """Unsubscribe group reference and the groups shown on the preferences page."""

    group_id: int
    groups_to_display: Tuple[int, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire dictionary."""
        return build_fields([
            ("group_id", self.group_id),
            ("groups_to_display", self.groups_to_display),
        ])


class AsmBuilder:
    """Builds an Asm from a group id plus any number of groups to display."""

    def __init__(self, group_id: int):
        self._group_id = group_id
        self._groups_to_display: List[int] = []

    def group_to_display(self, group: int) -> "AsmBuilder":
        """Append a group id to groups_to_display."""
        self._groups_to_display.append(group)
        return self

    def build(self) -> Asm:
        """Return the Asm."""
        return Asm(
            group_id=self._group_id,
            groups_to_display=tuple(self._groups_to_display),
        )
