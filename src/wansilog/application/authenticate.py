"""Application services: cashier Sign Up and Log In use cases."""

from __future__ import annotations

import logging

from wansilog.domain.exceptions import ValidationError
from wansilog.domain.model.cashier import Cashier
from wansilog.domain.repository.cashier_repository import CashierRepository

logger = logging.getLogger(__name__)


class SignUpHandler:

    def __init__(self, cashier_repo: CashierRepository) -> None:
        self._cashier_repo = cashier_repo

    def check_username(self, username: str) -> None:
        """Fail early, before asking for a password, if the name is taken."""
        if self._cashier_repo.exists(username.strip()):
            raise ValidationError("Username already taken. Please choose another.")

    def handle(self, username: str, password: str) -> str:
        self.check_username(username)
        cashier = Cashier.register(username, password)
        self._cashier_repo.save(cashier)
        logger.info("Cashier account created: %s", cashier.username)
        return cashier.username


class LogInHandler:

    def __init__(self, cashier_repo: CashierRepository) -> None:
        self._cashier_repo = cashier_repo

    def handle(self, username: str, password: str) -> str:
        """Return the username on success."""
        cashier = self._cashier_repo.get_by_username(username.strip())
        if cashier is None or not cashier.check_password(password):
            logger.info("Failed login attempt for %r", username)
            raise ValidationError("Invalid username or password. Please try again.")
        logger.info("Cashier logged in: %s", cashier.username)
        return cashier.username
