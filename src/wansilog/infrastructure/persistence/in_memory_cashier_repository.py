"""Process-lifetime implementation of CashierRepository."""

from __future__ import annotations

from wansilog.domain.model.cashier import Cashier
from wansilog.domain.repository.cashier_repository import CashierRepository


class InMemoryCashierRepository(CashierRepository):

    def __init__(self, cashiers: list[Cashier] | None = None) -> None:
        self._store: dict[str, Cashier] = {}
        for cashier in cashiers or []:
            self._store[cashier.username] = cashier

    def get_by_username(self, username: str) -> Cashier | None:
        return self._store.get(username)

    def save(self, cashier: Cashier) -> None:
        self._store[cashier.username] = cashier
