"""Application configuration for the command line tool.

The builder library never reads these; only the CLI does.
"""
import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class PayloadDefaults:
    """Defaults applied to messages built from the command line."""

    from_email: str = ""
    from_name: Optional[str] = None
    sandbox_mode: bool = True  # safe default, nothing gets delivered
    ip_pool_name: Optional[str] = None

    @classmethod
    def from_env(cls) -> "PayloadDefaults":
        """Load defaults from environment variables."""
        return cls(
            from_email=os.getenv("SENDGRID_FROM_EMAIL", ""),
            from_name=os.getenv("SENDGRID_FROM_NAME") or None,
            sandbox_mode=_env_flag("SENDGRID_SANDBOX_MODE", True),
            ip_pool_name=os.getenv("SENDGRID_IP_POOL") or None,
        )


@dataclass
class AppConfig:
    """Application configuration."""

    output_dir: str = "./output"
    defaults: PayloadDefaults = None

    def __post_init__(self):
        """Fill defaults."""
        if self.defaults is None:
            self.defaults = PayloadDefaults.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            output_dir=os.getenv("SENDGRID_PAYLOAD_OUTPUT_DIR", "./output"),
            defaults=PayloadDefaults.from_env(),
        )
