"""Cashier accounts.

Accounts live only as long as the process; there is no account store.
"""

from __future__ import annotations

import hmac
import re
from dataclasses import dataclass

from wansilog.domain.exceptions import ValidationError

# At least one uppercase letter and one digit, 8-20 characters.
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Z])(?=.*\d).{8,20}$")
PASSWORD_RULES = "at least one uppercase, one number, 8-20 characters"


@dataclass(frozen=True)
class Cashier:

    username: str
    password: str

    @staticmethod
    def register(username: str, password: str) -> Cashier:
        """Create a new account, enforcing the credential rules."""
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if username.strip() == "0":
            raise ValidationError("'0' is reserved for cancelling")
        if not PASSWORD_PATTERN.match(password):
            raise ValidationError(
                f"Invalid password format. Password needs {PASSWORD_RULES}."
            )
        return Cashier(username=username.strip(), password=password)

    def check_password(self, candidate: str) -> bool:
        return hmac.compare_digest(
            self.password.encode("utf-8"), candidate.encode("utf-8")
        )
