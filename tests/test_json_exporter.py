"""Tests for JsonExporter."""
import json
import logging

import pytest

from sendgrid_payload.builder import ContactBuilder, MessageBuilder, PersonalizationBuilder
from sendgrid_payload.exporter import JsonExporter, SerializationError


@pytest.fixture
def message():
    """Minimal message with one recipient"""
    return (
        MessageBuilder(ContactBuilder("from@example.com").build(), "subject")
        .personalization(
            PersonalizationBuilder().to(ContactBuilder("to@example.com").build()).build()
        )
        .send_at(1700000000)
        .build()
    )


class TestJsonExporter:
    """Test JSON export."""

    def test_compact_output(self, message):
        """Test default output has no whitespace between tokens."""
        text = JsonExporter().export(message)

        assert text.startswith('{"personalizations":[{"to":[{"email":"to@example.com"}]}]')
        assert '"send_at":1700000000' in text
        assert ": " not in text

    def test_indented_output(self, message):
        text = JsonExporter(indent=2).export(message)

        assert "\n" in text
        assert json.loads(text) == message.to_dict()

    def test_numbers_are_not_strings(self, message):
        payload = json.loads(JsonExporter().export(message))

        assert isinstance(payload["send_at"], int)

    def test_non_ascii_text(self):
        message = MessageBuilder(ContactBuilder("from@example.com").name("Zoë").build(), "Olá").build()

        payload = json.loads(message.to_json())

        assert payload["subject"] == "Olá"
        assert payload["from"]["name"] == "Zoë"

    def test_unserializable_value_raises(self):
        """Test a non-JSON value forwarded into a mapping raises SerializationError."""
        personalization = (
            PersonalizationBuilder()
            .dynamic_template_data("bad", object())
            .build()
        )
        message = (
            MessageBuilder(ContactBuilder("from@example.com").build(), "subject")
            .personalization(personalization)
            .build()
        )

        with pytest.raises(SerializationError) as excinfo:
            message.to_json()

        assert isinstance(excinfo.value.__cause__, TypeError)

    def test_nan_raises(self):
        personalization = PersonalizationBuilder().dynamic_template_data("x", float("nan")).build()
        message = (
            MessageBuilder(ContactBuilder("from@example.com").build(), "subject")
            .personalization(personalization)
            .build()
        )

        with pytest.raises(SerializationError):
            JsonExporter().export(message)

    def test_circular_value_raises(self, caplog):
        """Test a self-referencing mapping raises SerializationError and is logged."""
        loop = {}
        loop["self"] = loop
        personalization = PersonalizationBuilder().dynamic_template_data("x", loop).build()
        message = (
            MessageBuilder(ContactBuilder("from@example.com").build(), "subject")
            .personalization(personalization)
            .build()
        )

        with caplog.at_level(logging.ERROR, logger="sendgrid_payload.exporter.json_exporter"):
            with pytest.raises(SerializationError) as excinfo:
                message.to_json()

        assert excinfo.value.__cause__ is not None
        assert "Could not serialize Message" in caplog.text

    def test_serialization_error_is_runtime_error(self):
        assert issubclass(SerializationError, RuntimeError)

    def test_export_to_file(self, message, tmp_path):
        output_file = tmp_path / "nested" / "message.json"

        JsonExporter().export_to_file(output_file, message)

        assert output_file.exists()
        assert json.loads(output_file.read_text(encoding="utf-8")) == message.to_dict()
