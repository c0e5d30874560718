"""
Payload Builder Module

Builders for every node of a SendGrid v3 mail send request:
- Message: root of the payload, rendered with to_json()
- Personalization: recipients and per-recipient overrides
- Contact, Content, Attachment, Asm
- MailSettings and TrackingSettings (calling a method enables the setting)
"""

from .asm import Asm, AsmBuilder
from .attachment import Attachment, AttachmentBuilder
from .contact import Contact, ContactBuilder
from .content import Content
from .mail_settings import (
    BccSetting,
    BypassListManagementSetting,
    FooterSetting,
    MailSettings,
    MailSettingsBuilder,
    SandboxModeSetting,
    SpamCheckSetting,
)
from .message import Message, MessageBuilder
from .personalization import Personalization, PersonalizationBuilder
from .tracking_settings import (
    ClickTrackingSetting,
    GaTrackingSetting,
    GaTrackingSettingBuilder,
    OpenTrackingSetting,
    SubscriptionTrackingSetting,
    TrackingSettings,
    TrackingSettingsBuilder,
)

__all__ = [
    "Asm",
    "AsmBuilder",
    "Attachment",
    "AttachmentBuilder",
    "BccSetting",
    "BypassListManagementSetting",
    "ClickTrackingSetting",
    "Contact",
    "ContactBuilder",
    "Content",
    "FooterSetting",
    "GaTrackingSetting",
    "GaTrackingSettingBuilder",
    "MailSettings",
    "MailSettingsBuilder",
    "Message",
    "MessageBuilder",
    "OpenTrackingSetting",
    "Personalization",
    "PersonalizationBuilder",
    "SandboxModeSetting",
    "SpamCheckSetting",
    "SubscriptionTrackingSetting",
    "TrackingSettings",
    "TrackingSettingsBuilder",
]
