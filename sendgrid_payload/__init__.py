"""
SendGrid Payload - Builders for SendGrid v3 mail send request bodies

No batteries included: nothing is validated and nothing is sent. Build a
Message, call to_json(), and POST the result to
https://api.sendgrid.com/v3/mail/send with the HTTP client of your choice.

Usage:
```python
from sendgrid_payload import (
    ContactBuilder, MailSettingsBuilder, MessageBuilder, PersonalizationBuilder,
)

api_payload = (
    MessageBuilder(ContactBuilder("from@example.com").name("from").build(), "Subject Line!")
    .template_id("SENDGRID-TEMPLATE-ID")
    # Don't actually send email. Remove to really deliver it.
    .mail_settings(MailSettingsBuilder().sandbox_mode().build())
    .personalization(
        PersonalizationBuilder()
        .to(ContactBuilder("to@example.com").name("to").build())
        .build()
    )
    .build()
    .to_json()
)
```
"""

__version__ = "0.1.0"

from .builder import (
    Asm,
    AsmBuilder,
    Attachment,
    AttachmentBuilder,
    Contact,
    ContactBuilder,
    Content,
    GaTrackingSetting,
    GaTrackingSettingBuilder,
    MailSettings,
    MailSettingsBuilder,
    Message,
    MessageBuilder,
    Personalization,
    PersonalizationBuilder,
    TrackingSettings,
    TrackingSettingsBuilder,
)
from .exporter import JsonExporter, SerializationError

__all__ = [
    "Asm",
    "AsmBuilder",
    "Attachment",
    "AttachmentBuilder",
    "Contact",
    "ContactBuilder",
    "Content",
    "GaTrackingSetting",
    "GaTrackingSettingBuilder",
    "JsonExporter",
    "MailSettings",
    "MailSettingsBuilder",
    "Message",
    "MessageBuilder",
    "Personalization",
    "PersonalizationBuilder",
    "SerializationError",
    "TrackingSettings",
    "TrackingSettingsBuilder",
]
