"""
Personalization Builder - Per-recipient blocks of a SendGrid message

A personalization carries its own recipients plus overrides (subject,
headers, substitutions, dynamic template data, custom args, send_at) that
apply only to those recipients.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .contact import Contact
from .field_builder import build_fields, frozen_mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Personalization:
    """Recipients and overrides for one envelope of a message"""

    to: Tuple[Contact, ...] = field(default_factory=tuple)
    cc: Tuple[Contact, ...] = field(default_factory=tuple)
    bcc: Tuple[Contact, ...] = field(default_factory=tuple)
    subject: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=frozen_mapping)
    substitutions: Mapping[str, str] = field(default_factory=frozen_mapping)
    dynamic_template_data: Mapping[str, Any] = field(default_factory=frozen_mapping)
    custom_args: Mapping[str, str] = field(default_factory=frozen_mapping)
    send_at: Optional[int] = None  # unix epoch seconds

    # mapping fields may hold lists, so nodes compare by value but do not hash
    __hash__ = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire dictionary"""
        return build_fields([
            ("to", self.to),
            ("cc", self.cc),
            ("bcc", self.bcc),
            ("subject", self.subject),
            ("headers", self.headers),
            ("substitutions", self.substitutions),
            ("dynamic_template_data", self.dynamic_template_data),
            ("custom_args", self.custom_args),
            ("send_at", self.send_at),
        ])


class PersonalizationBuilder:
    """
    Builds a Personalization

    Usage:
    ```python
    personalization = (
        PersonalizationBuilder()
        .to(ContactBuilder("to@example.com").name("to").build())
        .dynamic_template_data("first_name", "Ada")
        .build()
    )
    ```
    """

    def __init__(self):
        self._to: List[Contact] = []
        self._cc: List[Contact] = []
        self._bcc: List[Contact] = []
        self._subject: Optional[str] = None
        self._headers: Dict[str, str] = {}
        self._substitutions: Dict[str, str] = {}
        self._dynamic_template_data: Dict[str, Any] = {}
        self._custom_args: Dict[str, str] = {}
        self._send_at: Optional[int] = None

    def to(self, contact: Contact) -> "PersonalizationBuilder":
        """Append a recipient to the to list"""
        self._to.append(contact)
        return self

    def cc(self, contact: Contact) -> "PersonalizationBuilder":
        """Append a recipient to the cc list"""
        self._cc.append(contact)
        return self

    def bcc(self, contact: Contact) -> "PersonalizationBuilder":
        """Append a recipient to the bcc list"""
        self._bcc.append(contact)
        return self

    def subject(self, subject: str) -> "PersonalizationBuilder":
        """Override the message subject for these recipients"""
        self._subject = subject
        return self

    def header(self, key: str, value: str) -> "PersonalizationBuilder":
        self._headers[key] = value
        return self

    def substitution(self, key: str, value: str) -> "PersonalizationBuilder":
        self._substitutions[key] = value
        return self

    def dynamic_template_data(self, key: str, value: Any) -> "PersonalizationBuilder":
        """Set a value consumed by a dynamic template (any JSON-compatible value)"""
        self._dynamic_template_data[key] = value
        return self

    def custom_arg(self, key: str, value: str) -> "PersonalizationBuilder":
        self._custom_args[key] = value
        return self

    def send_at(self, time: int) -> "PersonalizationBuilder":
        """Schedule delivery at a unix epoch time"""
        self._send_at = time
        return self

    def build(self) -> Personalization:
        """Return the Personalization"""
        logger.debug(
            f"Built personalization with {len(self._to)} to, "
            f"{len(self._cc)} cc, {len(self._bcc)} bcc"
        )
        return Personalization(
            to=tuple(self._to),
            cc=tuple(self._cc),
            bcc=tuple(self._bcc),
            subject=self._subject,
            headers=frozen_mapping(self._headers),
            substitutions=frozen_mapping(self._substitutions),
            dynamic_template_data=frozen_mapping(self._dynamic_template_data),
            custom_args=frozen_mapping(self._custom_args),
            send_at=self._send_at,
        )
