"""
Tracking Settings Builder - Click, open, subscription and Google Analytics tracking

As with mail settings, calling a builder method enables the tracking kind;
not calling it leaves the key out of the payload.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .field_builder import build_fields


@dataclass(frozen=True)
class ClickTrackingSetting:
    enable_text: bool
    enable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return build_fields([
            ("enable", self.enable),
            ("enable_text", self.enable_text),
        ])


@dataclass(frozen=True)
class OpenTrackingSetting:
    substitution_tag: Optional[str] = None  # replaced by the tracking pixel
    enable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return build_fields([
            ("enable", self.enable),
            ("substitution_tag", self.substitution_tag),
        ])


@dataclass(frozen=True)
class SubscriptionTrackingSetting:
    text: Optional[str] = None
    html: Optional[str] = None
    substitution_tag: Optional[str] = None  # replaced by the unsubscribe link
    enable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return build_fields([
            ("enable", self.enable),
            ("text", self.text),
            ("html", self.html),
            ("substitution_tag", self.substitution_tag),
        ])


@dataclass(frozen=True)
class GaTrackingSetting:
    """Google Analytics utm parameters appended to links"""
    utm_source: Optional[str] = None
    utm_medium: Optional[str] = None
    utm_term: Optional[str] = None
    utm_content: Optional[str] = None
    utm_campaign: Optional[str] = None
    enable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return build_fields([
            ("enable", self.enable),
            ("utm_source", self.utm_source),
            ("utm_medium", self.utm_medium),
            ("utm_term", self.utm_term),
            ("utm_content", self.utm_content),
            ("utm_campaign", self.utm_campaign),
        ])


class GaTrackingSettingBuilder:
    """
    Builds a GaTrackingSetting, always enabled

    Usage:
    ```python
    ga = GaTrackingSettingBuilder().utm_source("newsletter").utm_campaign("spring").build()
    settings = TrackingSettingsBuilder().ganalytics(ga).build()
    ```
    """

    def __init__(self):
        self._utm_source: Optional[str] = None
        self._utm_medium: Optional[str] = None
        self._utm_term: Optional[str] = None
        self._utm_content: Optional[str] = None
        self._utm_campaign: Optional[str] = None

    def utm_source(self, source: str) -> "GaTrackingSettingBuilder":
        """Set utm_source, e.g. the newsletter name"""
        self._utm_source = source
        return self

    def utm_medium(self, medium: str) -> "GaTrackingSettingBuilder":
        """Set utm_medium, e.g. "email\""""
        self._utm_medium = medium
        return self

    def utm_term(self, term: str) -> "GaTrackingSettingBuilder":
        """Set utm_term for paid keywords"""
        self._utm_term = term
        return self

    def utm_content(self, content: str) -> "GaTrackingSettingBuilder":
        """Set utm_content to tell apart links in the same message"""
        self._utm_content = content
        return self

    def utm_campaign(self, campaign: str) -> "GaTrackingSettingBuilder":
        """Set utm_campaign"""
        self._utm_campaign = campaign
        return self

    def build(self) -> GaTrackingSetting:
        """Return the GaTrackingSetting"""
        return GaTrackingSetting(
            utm_source=self._utm_source,
            utm_medium=self._utm_medium,
            utm_term=self._utm_term,
            utm_content=self._utm_content,
            utm_campaign=self._utm_campaign,
        )


@dataclass(frozen=True)
class TrackingSettings:
    """All tracking settings of a message"""
    click_tracking: Optional[ClickTrackingSetting] = None
    open_tracking: Optional[OpenTrackingSetting] = None
    subscription_tracking: Optional[SubscriptionTrackingSetting] = None
    ganalytics: Optional[GaTrackingSetting] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire dictionary"""
        return build_fields([
            ("click_tracking", self.click_tracking),
            ("open_tracking", self.open_tracking),
            ("subscription_tracking", self.subscription_tracking),
            ("ganalytics", self.ganalytics),
        ])


class TrackingSettingsBuilder:
    """Builds TrackingSettings"""

    def __init__(self):
        self._click_tracking: Optional[ClickTrackingSetting] = None
        self._open_tracking: Optional[OpenTrackingSetting] = None
        self._subscription_tracking: Optional[SubscriptionTrackingSetting] = None
        self._ganalytics: Optional[GaTrackingSetting] = None

    def click_tracking(self, enable_text: bool) -> "TrackingSettingsBuilder":
        """Enable click tracking, enable_text also rewrites links in the text body"""
        self._click_tracking = ClickTrackingSetting(enable_text=enable_text)
        return self

    def open_tracking(self, substitution_tag: Optional[str] = None) -> "TrackingSettingsBuilder":
        """Enable open tracking"""
        self._open_tracking = OpenTrackingSetting(substitution_tag=substitution_tag)
        return self

    def subscription_tracking(
        self,
        substitution_tag: Optional[str] = None,
        text: Optional[str] = None,
        html: Optional[str] = None,
    ) -> "TrackingSettingsBuilder":
        """Enable subscription tracking (unsubscribe link)"""
        self._subscription_tracking = SubscriptionTrackingSetting(
            text=text,
            html=html,
            substitution_tag=substitution_tag,
        )
        return self

    def ganalytics(self, setting: GaTrackingSetting) -> "TrackingSettingsBuilder":
        """Attach Google Analytics tracking built with GaTrackingSettingBuilder"""
        self._ganalytics = setting
        return self

    def build(self) -> TrackingSettings:
        """Return the TrackingSettings"""
        return TrackingSettings(
            click_tracking=self._click_tracking,
            open_tracking=self._open_tracking,
            subscription_tracking=self._subscription_tracking,
            ganalytics=self._ganalytics,
        )
