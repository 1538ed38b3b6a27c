"""Google service account authentication utilities."""

from sheets_manager.google.exceptions import (
    CredentialsNotFoundError,
    GoogleAuthError,
)
from sheets_manager.google.service_account import SCOPES, GoogleServiceAccount

__all__ = [
    "GoogleServiceAccount",
    "SCOPES",
    "GoogleAuthError",
    "CredentialsNotFoundError",
]
