"""
Attachment Builder - File attachments for SendGrid messages

The content must already be base64 encoded; it is forwarded verbatim.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .field_builder import build_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attachment:
    """A file attached to a message"""

    content: str  # base64 text
    filename: str
    mime_type: Optional[str] = None  # sent as "type"
    disposition: Optional[str] = None  # "inline" or "attachment"
    content_id: Optional[str] = None  # referenced from HTML as cid:<content_id>

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire dictionary"""
        return build_fields([
            ("content", self.content),
            ("type", self.mime_type),
            ("filename", self.filename),
            ("disposition", self.disposition),
            ("content_id", self.content_id),
        ])


class AttachmentBuilder:
    """
    Builds an Attachment

    Usage:
    ```python
    attachment = (
        AttachmentBuilder("SGVsbG8gV29ybGQh", "file.txt")
        .attachment_type("text/plain")
        .disposition("inline")
        .content_id("file-1")
        .build()
    )
    ```
    """

    def __init__(self, content: str, filename: str):
        """
        Initialize AttachmentBuilder

        Args:
            content: Base64 encoded file content
            filename: File name shown to the recipient
        """
        self._content = content
        self._filename = filename
        self._mime_type: Optional[str] = None
        self._disposition: Optional[str] = None
        self._content_id: Optional[str] = None

    def attachment_type(self, mime_type: str) -> "AttachmentBuilder":
        """Set the mime type"""
        self._mime_type = mime_type
        return self

    def disposition(self, disposition: str) -> "AttachmentBuilder":
        """Set the content disposition"""
        self._disposition = disposition
        return self

    def content_id(self, content_id: str) -> "AttachmentBuilder":
        """Set the content id used by inline attachments"""
        self._content_id = content_id
        return self

    def build(self) -> Attachment:
        """Return the Attachment"""
        logger.debug(f"Built attachment {self._filename}")
        return Attachment(
            content=self._content,
            filename=self._filename,
            mime_type=self._mime_type,
            disposition=self._disposition,
            content_id=self._content_id,
        )
