"""Environment-driven configuration utilities for the REST client."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for runtime configuration."""

    request_timeout: float = 5.0
    follow_redirects: bool = True
    service_address_prefix: str = "SERVICE_ADDRESS"

    @classmethod
    def load(cls) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so developers can rely on a local .env file without
        exporting variables globally.
        """
        load_dotenv()

        timeout_raw = os.getenv("REST_CLIENT_TIMEOUT", "").strip() or "5"
        try:
            request_timeout = float(timeout_raw)
        except ValueError as exc:
            raise ValueError("REST_CLIENT_TIMEOUT must be a numeric value.") from exc
        if request_timeout <= 0:
            raise ValueError("REST_CLIENT_TIMEOUT must be greater than zero.")

        redirects_raw = os.getenv("REST_CLIENT_FOLLOW_REDIRECTS", "").strip().lower() or "true"
        if redirects_raw in _TRUE_VALUES:
            follow_redirects = True
        elif redirects_raw in _FALSE_VALUES:
            follow_redirects = False
        else:
            raise ValueError("REST_CLIENT_FOLLOW_REDIRECTS must be a boolean value.")

        service_address_prefix = (
            os.getenv("SERVICE_ADDRESS_PREFIX", "").strip() or "SERVICE_ADDRESS"
        )

        return cls(
            request_timeout=request_timeout,
            follow_redirects=follow_redirects,
            service_address_prefix=service_address_prefix,
        )
