"""Contact node: an address used for from, reply_to, to, cc and bcc."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .field_builder import build_fields


@dataclass(frozen=True)
class Contact:
    """An email address with an optional display name."""

    email: str
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire dictionary."""
        return build_fields([
            ("email", self.email),
            ("name", self.name),
        ])


class ContactBuilder:
    """
    Builds a Contact

    Usage:
    ```python
    contact = ContactBuilder("to@example.com").name("to").build()
    ```
    """

    def __init__(self, email: str):
        self._email = email
        self._name: Optional[str] = None

    def name(self, name: str) -> "ContactBuilder":
        """Set the display name."""
        self._name = name
        return self

    def build(self) -> Contact:
        """Return the Contact."""
        return Contact(email=self._email, name=self._name)
