"""
Message Builder - Assembles the complete SendGrid v3 mail send payload

Integrates:
- Personalizations: recipients and per-recipient overrides
- Content and attachments
- Asm, mail settings and tracking settings
- JsonExporter: rendering to the request body
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..exporter.json_exporter import JsonExporter
from .asm import Asm
from .attachment import Attachment
from .contact import Contact
from .content import Content
from .field_builder import build_fields, frozen_mapping
from .mail_settings import MailSettings
from .personalization import Personalization
from .tracking_settings import TrackingSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Message:
    """
    Root of the payload graph

    from_contact is sent under the "from" key.
    """

    from_contact: Contact
    subject: str
    personalizations: Tuple[Personalization, ...] = field(default_factory=tuple)
    reply_to: Optional[Contact] = None
    content: Tuple[Content, ...] = field(default_factory=tuple)
    attachments: Tuple[Attachment, ...] = field(default_factory=tuple)
    template_id: Optional[str] = None
    sections: Mapping[str, str] = field(default_factory=frozen_mapping)
    headers: Mapping[str, str] = field(default_factory=frozen_mapping)
    categories: Tuple[str, ...] = field(default_factory=tuple)
    custom_args: Mapping[str, str] = field(default_factory=frozen_mapping)
    send_at: Optional[int] = None
    batch_id: Optional[str] = None
    asm: Optional[Asm] = None
    ip_pool_name: Optional[str] = None
    mail_settings: Optional[MailSettings] = None
    tracking_settings: Optional[TrackingSettings] = None

    # mapping fields may hold lists, so nodes compare by value but do not hash
    __hash__ = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire dictionary"""
        return build_fields([
            ("personalizations", self.personalizations),
            ("from", self.from_contact),
            ("reply_to", self.reply_to),
            ("subject", self.subject),
            ("content", self.content),
            ("attachments", self.attachments),
            ("template_id", self.template_id),
            ("sections", self.sections),
            ("headers", self.headers),
            ("categories", self.categories),
            ("custom_args", self.custom_args),
            ("send_at", self.send_at),
            ("batch_id", self.batch_id),
            ("asm", self.asm),
            ("ip_pool_name", self.ip_pool_name),
            ("mail_settings", self.mail_settings),
            ("tracking_settings", self.tracking_settings),
        ])

    def to_json(self) -> str:
        """
        Render the request body

        Raises:
            SerializationError: If a forwarded value is not JSON-compatible
        """
        return JsonExporter().export(self)


class MessageBuilder:
    """
    Builds a Message

    Usage:
    ```python
    body = (
        MessageBuilder(ContactBuilder("from@example.com").name("from").build(), "Subject Line!")
        .template_id("SENDGRID-TEMPLATE-ID")
        .mail_settings(MailSettingsBuilder().sandbox_mode().build())
        .personalization(
            PersonalizationBuilder()
            .to(ContactBuilder("to@example.com").name("to").build())
            .build()
        )
        .build()
        .to_json()
    )
    # POST body to https://api.sendgrid.com/v3/mail/send with your own HTTP client
    ```

    build() copies every collection, so a Message never changes after it is
    returned. Treat the builder as spent after build().
    """

    def __init__(self, from_contact: Contact, subject: str):
        """
        Initialize MessageBuilder

        Args:
            from_contact: Sender
            subject: Default subject, personalizations may override it
        """
        self._from_contact = from_contact
        self._subject = subject
        self._personalizations: List[Personalization] = []
        self._reply_to: Optional[Contact] = None
        self._content: List[Content] = []
        self._attachments: List[Attachment] = []
        self._template_id: Optional[str] = None
        self._sections: Dict[str, str] = {}
        self._headers: Dict[str, str] = {}
        self._categories: List[str] = []
        self._custom_args: Dict[str, str] = {}
        self._send_at: Optional[int] = None
        self._batch_id: Optional[str] = None
        self._asm: Optional[Asm] = None
        self._ip_pool_name: Optional[str] = None
        self._mail_settings: Optional[MailSettings] = None
        self._tracking_settings: Optional[TrackingSettings] = None

    def personalization(self, personalization: Personalization) -> "MessageBuilder":
        """Append one personalization"""
        self._personalizations.append(personalization)
        return self

    def personalizations(self, personalizations: List[Personalization]) -> "MessageBuilder":
        """Replace the whole personalization list"""
        self._personalizations = list(personalizations)
        return self

    def reply_to(self, contact: Contact) -> "MessageBuilder":
        self._reply_to = contact
        return self

    def content(self, content: Content) -> "MessageBuilder":
        """Append a body part"""
        self._content.append(content)
        return self

    def attachment(self, attachment: Attachment) -> "MessageBuilder":
        self._attachments.append(attachment)
        return self

    def template_id(self, template_id: str) -> "MessageBuilder":
        self._template_id = template_id
        return self

    def section(self, key: str, value: str) -> "MessageBuilder":
        self._sections[key] = value
        return self

    def header(self, key: str, value: str) -> "MessageBuilder":
        self._headers[key] = value
        return self

    def category(self, category: str) -> "MessageBuilder":
        self._categories.append(category)
        return self

    def custom_arg(self, key: str, value: str) -> "MessageBuilder":
        self._custom_args[key] = value
        return self

    def send_at(self, time: int) -> "MessageBuilder":
        """Schedule delivery at a unix epoch time"""
        self._send_at = time
        return self

    def batch_id(self, batch_id: str) -> "MessageBuilder":
        self._batch_id = batch_id
        return self

    def asm(self, asm: Asm) -> "MessageBuilder":
        self._asm = asm
        return self

    def ip_pool_name(self, name: str) -> "MessageBuilder":
        self._ip_pool_name = name
        return self

    def mail_settings(self, settings: MailSettings) -> "MessageBuilder":
        self._mail_settings = settings
        return self

    def tracking_settings(self, settings: TrackingSettings) -> "MessageBuilder":
        self._tracking_settings = settings
        return self

    def build(self) -> Message:
        """Return the Message"""
        logger.debug(
            f"Built message with {len(self._personalizations)} personalizations, "
            f"{len(self._content)} content blocks, {len(self._attachments)} attachments"
        )
        return Message(
            from_contact=self._from_contact,
            subject=self._subject,
            personalizations=tuple(self._personalizations),
            reply_to=self._reply_to,
            content=tuple(self._content),
            attachments=tuple(self._attachments),
            template_id=self._template_id,
            sections=frozen_mapping(self._sections),
            headers=frozen_mapping(self._headers),
            categories=tuple(self._categories),
            custom_args=frozen_mapping(self._custom_args),
            send_at=self._send_at,
            batch_id=self._batch_id,
            asm=self._asm,
            ip_pool_name=self._ip_pool_name,
            mail_settings=self._mail_settings,
            tracking_settings=self._tracking_settings,
        )
