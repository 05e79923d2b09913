"""
phonevalidator - client for the GenderAPI.io phone number validation API.

The service validates international phone numbers, detects the number type
(mobile, landline, VoIP, ...), returns region/country metadata, and formats
numbers to E.164 or national format. This package sends the request and hands
back the service's JSON response untouched.

Learn more: https://www.genderapi.io
"""

from __future__ import annotations

__version__ = "0.1.0"

from phonevalidator.client import (
    DEFAULT_BASE_URL,
    Client,
    InvalidResponseError,
    PhoneValidatorError,
    RequestFailedError,
    ServerErrorOrTimeout,
)

__all__ = [
    "__version__",
    "DEFAULT_BASE_URL",
    "Client",
    "PhoneValidatorError",
    "ServerErrorOrTimeout",
    "InvalidResponseError",
    "RequestFailedError",
]
