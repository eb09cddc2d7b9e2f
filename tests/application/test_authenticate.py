"""Integration tests for the Sign Up and Log In use cases."""

import pytest

from wansilog.application.authenticate import LogInHandler, SignUpHandler
from wansilog.domain.exceptions import ValidationError
from wansilog.domain.model.cashier import Cashier
from wansilog.infrastructure.persistence.in_memory_cashier_repository import (
    InMemoryCashierRepository,
)


def _repo() -> InMemoryCashierRepository:
    return InMemoryCashierRepository([Cashier("karl", "Lonely123")])


class TestSignUp:

    def test_new_cashier_can_log_in(self):
        repo = _repo()
        SignUpHandler(repo).handle("maria", "Silog2024")
        assert LogInHandler(repo).handle("maria", "Silog2024") == "maria"

    def test_taken_username_rejected(self):
        with pytest.raises(ValidationError, match="already taken"):
            SignUpHandler(_repo()).handle("karl", "Another123")

    def test_bad_password_not_saved(self):
        repo = _repo()
        with pytest.raises(ValidationError, match="Invalid password format"):
            SignUpHandler(repo).handle("maria", "weak")
        assert not repo.exists("maria")


class TestLogIn:

    def test_username_is_stripped_like_sign_up(self):
        repo = _repo()
        SignUpHandler(repo).handle(" maria", "Silog2024")
        assert LogInHandler(repo).handle(" maria", "Silog2024") == "maria"

    def test_valid_credentials(self):
        assert LogInHandler(_repo()).handle("karl", "Lonely123") == "karl"

    def test_wrong_password(self):
        with pytest.raises(ValidationError, match="Invalid username or password"):
            LogInHandler(_repo()).handle("karl", "Lonely124")

    def test_unknown_user(self):
        with pytest.raises(ValidationError, match="Invalid username or password"):
            LogInHandler(_repo()).handle("nobody", "Lonely123")
