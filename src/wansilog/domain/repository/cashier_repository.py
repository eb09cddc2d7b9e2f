"""Abstract repository for Cashier accounts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wansilog.domain.model.cashier import Cashier


class CashierRepository(ABC):

    @abstractmethod
    def get_by_username(self, username: str) -> Cashier | None:
        """Return the account with this exact username, or None."""

    @abstractmethod
    def save(self, cashier: Cashier) -> None:
        """Store a new account."""

    def exists(self, username: str) -> bool:
        return self.get_by_username(username) is not None
