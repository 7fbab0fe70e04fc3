"""
Client configuration.

Holds credentials and transport settings for a RestClient and knows how to
load them from the process environment.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://api.twilio.com"
DEFAULT_USER_AGENT = "twilio-rest-sdk-python/1.0.0"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ClientConfig:
    """Configuration for the Twilio REST client."""

    account_sid: str
    auth_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.account_sid:
            raise ValueError("account_sid is required")
        if not self.auth_token:
            raise ValueError("auth_token is required")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        self.base_url = self.base_url.rstrip("/")
        if self.debug:
            logging.getLogger("twilio_sdk").setLevel(logging.DEBUG)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
        """
        Build a configuration from environment variables.

        Reads TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN (required) plus the
        optional TWILIO_BASE_URL, TWILIO_TIMEOUT and TWILIO_DEBUG.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ClientConfig built from the environment

        Raises:
            ValueError: If credentials are missing or a value is malformed
        """
        env = os.environ if environ is None else environ

        account_sid = env.get("TWILIO_ACCOUNT_SID", "")
        auth_token = env.get("TWILIO_AUTH_TOKEN", "")
        if not account_sid or not auth_token:
            raise ValueError("TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN must be set")

        timeout_raw = env.get("TWILIO_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else 30.0
        except ValueError as e:
            raise ValueError(f"TWILIO_TIMEOUT is not a number: {timeout_raw!r}") from e

        return cls(
            account_sid=account_sid,
            auth_token=auth_token,
            base_url=env.get("TWILIO_BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
            debug=env.get("TWILIO_DEBUG", "").strip().lower() in _TRUTHY,
        )
