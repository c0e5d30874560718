"""
End-to-end tests: builders + JsonExporter

Builds complete request bodies the way a caller would before handing them
to an HTTP client for POST /v3/mail/send.
"""

import json

import pytest

from sendgrid_payload import (
    AsmBuilder,
    AttachmentBuilder,
    ContactBuilder,
    Content,
    GaTrackingSettingBuilder,
    MailSettingsBuilder,
    MessageBuilder,
    PersonalizationBuilder,
    TrackingSettingsBuilder,
)


ABSENT_KEYS = [
    "reply_to",
    "content",
    "attachments",
    "sections",
    "headers",
    "categories",
    "custom_args",
    "send_at",
    "batch_id",
    "asm",
    "ip_pool_name",
    "tracking_settings",
]


def build_api_email() -> str:
    """Template email in sandbox mode"""
    return (
        MessageBuilder(
            ContactBuilder("from@example.com").name("from").build(),
            "Subject Line!",
        )
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


class TestEndToEnd:
    """Integration tests for complete payloads"""

    def test_template_email_in_sandbox(self):
        text = build_api_email()

        assert '"from":{"email":"from@example.com","name":"from"}' in text
        assert '"subject":"Subject Line!"' in text
        assert '"personalizations":[{"to":[{"email":"to@example.com","name":"to"}]}]' in text
        assert '"template_id":"SENDGRID-TEMPLATE-ID"' in text
        assert '"mail_settings":{"sandbox_mode":{"enable":true}}' in text

        payload = json.loads(text)
        for key in ABSENT_KEYS:
            assert key not in payload

    def test_template_email_exact_payload(self):
        assert json.loads(build_api_email()) == {
            "personalizations": [{"to": [{"email": "to@example.com", "name": "to"}]}],
            "from": {"email": "from@example.com", "name": "from"},
            "subject": "Subject Line!",
            "template_id": "SENDGRID-TEMPLATE-ID",
            "mail_settings": {"sandbox_mode": {"enable": True}},
        }

    def test_no_null_or_empty_placeholders(self):
        """Test no null, [] or {} appears anywhere in a sparse payload"""
        text = (
            MessageBuilder(ContactBuilder("from@example.com").build(), "s")
            .personalization(PersonalizationBuilder().build())
            .mail_settings(MailSettingsBuilder().footer().spam_check().build())
            .tracking_settings(TrackingSettingsBuilder().open_tracking().build())
            .asm(AsmBuilder(1).build())
            .build()
            .to_json()
        )

        assert "null" not in text
        assert "[]" not in text
        # the only empty object is the personalization itself
        assert text.count("{}") == 1

    def test_newsletter_payload(self):
        """Test a fully featured newsletter request body"""
        readers = [
            ("ada@example.com", "Ada"),
            ("grace@example.com", "Grace"),
            ("linus@example.com", None),
        ]
        message = MessageBuilder(
            ContactBuilder("news@example.com").name("Newsletter").build(),
            "Spring issue",
        ).reply_to(ContactBuilder("editor@example.com").build())

        for email, name in readers:
            contact = ContactBuilder(email)
            if name:
                contact.name(name)
            message.personalization(
                PersonalizationBuilder()
                .to(contact.build())
                .dynamic_template_data("first_name", name or "reader")
                .build()
            )

        ga = GaTrackingSettingBuilder().utm_source("newsletter").utm_campaign("spring").build()
        payload = json.loads(
            message.content(Content("text/plain", "Hello"))
            .content(Content("text/html", "<p>Hello</p>"))
            .attachment(
                AttachmentBuilder("JVBERi0xLjQ=", "issue.pdf")
                .attachment_type("application/pdf")
                .disposition("attachment")
                .build()
            )
            .category("newsletter")
            .asm(AsmBuilder(100).group_to_display(100).group_to_display(200).build())
            .mail_settings(MailSettingsBuilder().bypass_list_management().build())
            .tracking_settings(
                TrackingSettingsBuilder()
                .click_tracking(False)
                .subscription_tracking("[unsubscribe]")
                .ganalytics(ga)
                .build()
            )
            .build()
            .to_json()
        )

        assert [p["to"][0]["email"] for p in payload["personalizations"]] == [
            email for email, _ in readers
        ]
        assert payload["personalizations"][2]["to"][0] == {"email": "linus@example.com"}
        assert payload["personalizations"][2]["dynamic_template_data"] == {"first_name": "reader"}
        assert payload["reply_to"] == {"email": "editor@example.com"}
        assert payload["attachments"][0]["type"] == "application/pdf"
        assert payload["asm"] == {"group_id": 100, "groups_to_display": [100, 200]}
        assert payload["tracking_settings"]["click_tracking"] == {"enable": True, "enable_text": False}
        assert payload["tracking_settings"]["ganalytics"]["utm_campaign"] == "spring"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
