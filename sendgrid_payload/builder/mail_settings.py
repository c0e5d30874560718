"""
Mail Settings Builder - Delivery options for a SendGrid message

Every sub-setting is enabled by calling its builder method. There is no way
to disable a sub-setting; leave the method uncalled and the key is omitted.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .field_builder import build_fields


@dataclass(frozen=True)
class BccSetting:
    """Blind copy every message to an address"""
    email: str
    enable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return build_fields([("enable", self.enable), ("email", self.email)])


@dataclass(frozen=True)
class BypassListManagementSetting:
    """Deliver regardless of unsubscribe, bounce and spam report lists"""
    enable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return build_fields([("enable", self.enable)])


@dataclass(frozen=True)
class FooterSetting:
    """Footer appended to every message"""
    text: Optional[str] = None
    html: Optional[str] = None
    enable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return build_fields([
            ("enable", self.enable),
            ("text", self.text),
            ("html", self.html),
        ])


@dataclass(frozen=True)
class SandboxModeSetting:
    """Validate the request without delivering the message"""
    enable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return build_fields([("enable", self.enable)])


@dataclass(frozen=True)
class SpamCheckSetting:
    """Spam scoring, threshold is 1-10 on the remote side"""
    threshold: Optional[int] = None
    post_to_url: Optional[str] = None
    enable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return build_fields([
            ("enable", self.enable),
            ("threshold", self.threshold),
            ("post_to_url", self.post_to_url),
        ])


@dataclass(frozen=True)
class MailSettings:
    """All mail settings of a message"""
    bcc: Optional[BccSetting] = None
    bypass_list_management: Optional[BypassListManagementSetting] = None
    footer: Optional[FooterSetting] = None
    sandbox_mode: Optional[SandboxModeSetting] = None
    spam_check: Optional[SpamCheckSetting] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire dictionary"""
        return build_fields([
            ("bcc", self.bcc),
            ("bypass_list_management", self.bypass_list_management),
            ("footer", self.footer),
            ("sandbox_mode", self.sandbox_mode),
            ("spam_check", self.spam_check),
        ])


class MailSettingsBuilder:
    """
    Builds MailSettings

    Usage:
    ```python
    # Don't actually deliver
    settings = MailSettingsBuilder().sandbox_mode().build()
    ```
    """

    def __init__(self):
        self._bcc: Optional[BccSetting] = None
        self._bypass_list_management: Optional[BypassListManagementSetting] = None
        self._footer: Optional[FooterSetting] = None
        self._sandbox_mode: Optional[SandboxModeSetting] = None
        self._spam_check: Optional[SpamCheckSetting] = None

    def bcc(self, email: str) -> "MailSettingsBuilder":
        """Enable bcc to the given address"""
        self._bcc = BccSetting(email=email)
        return self

    def bypass_list_management(self) -> "MailSettingsBuilder":
        """Enable list management bypass"""
        self._bypass_list_management = BypassListManagementSetting()
        return self

    def footer(
        self,
        text: Optional[str] = None,
        html: Optional[str] = None,
    ) -> "MailSettingsBuilder":
        """Enable the footer with optional text and html bodies"""
        self._footer = FooterSetting(text=text, html=html)
        return self

    def sandbox_mode(self) -> "MailSettingsBuilder":
        """Enable sandbox mode"""
        self._sandbox_mode = SandboxModeSetting()
        return self

    def spam_check(
        self,
        threshold: Optional[int] = None,
        post_to_url: Optional[str] = None,
    ) -> "MailSettingsBuilder":
        """Enable spam checking"""
        self._spam_check = SpamCheckSetting(threshold=threshold, post_to_url=post_to_url)
        return self

    def build(self) -> MailSettings:
        """Return the MailSettings"""
        return MailSettings(
            bcc=self._bcc,
            bypass_list_management=self._bypass_list_management,
            footer=self._footer,
            sandbox_mode=self._sandbox_mode,
            spam_check=self._spam_check,
        )
