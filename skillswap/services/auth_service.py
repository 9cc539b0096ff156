"""Auth Service - Sign up and log in with email and password.

Interface Contract:
- sign_up(email, password) -> Account
- log_in(email, password) -> Account
- All methods raise AuthError with a user-facing message on failure
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from threading import Lock

from werkzeug.security import check_password_hash, generate_password_hash

from skillswap.models import Account
from skillswap.services.json_store import JsonDocument

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Raised when sign-up or log-in is refused."""
    pass


def normalize_email(email: str) -> str:
    if not isinstance(email, str):
        return ""
    return email.strip().lower()


class AuthService:
    """Account storage and credential checks."""

    def __init__(self, path: Path):
        self._doc = JsonDocument(path, "accounts")
        self._lock = Lock()

    def sign_up(self, email: str, password: str) -> Account:
        """Create an account. The profile itself is created at onboarding.

        Raises:
            AuthError: If the email is taken or a field is blank
        """
        email = normalize_email(email)
        if not email or not isinstance(password, str) or not password:
            raise AuthError("Email and password are required")

        with self._lock:
            accounts = self._doc.load(Account.from_dict)
            if any(a.email == email for a in accounts):
                raise AuthError("Email already exists")
            account = Account(
                user_id=uuid.uuid4().hex[:9],
                email=email,
                password_hash=generate_password_hash(password),
            )
            accounts.append(account)
            self._doc.save(accounts)

        logger.info("[auth] sign up user=%s", account.user_id)
        return account

    def log_in(self, email: str, password: str) -> Account:
        """Check credentials.

        Raises:
            AuthError: If no account matches
        """
        email = normalize_email(email)
        with self._lock:
            accounts = self._doc.load(Account.from_dict)
        for account in accounts:
            if account.email == email and isinstance(password, str) and check_password_hash(account.password_hash, password):
                return account
        logger.info("[auth] failed log in for %s", email)
        raise AuthError("Invalid email or password")
