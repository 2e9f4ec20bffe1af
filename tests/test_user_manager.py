"""Tests for the admin credential store."""

import pytest

from core.exceptions import ValidationError
from models.user import AdminUserModel
from utils.user_manager import (
    _DUMMY_HASH,
    AdminUserManager,
    UserAlreadyExistsError,
    UserNotFoundError,
)


def test_password_is_stored_as_bcrypt_hash(admin_user):
    assert admin_user.password_hash != "secret123"
    assert admin_user.password_hash.startswith("$2b$")
    cost = int(admin_user.password_hash.split("$")[2])
    assert cost >= 10


def test_rounds_never_drop_below_ten(db):
    manager = AdminUserManager(db, rounds=4)
    assert manager.rounds == 10
    assert manager.hash_password("whatever").split("$")[2] == "10"


def test_same_password_hashes_differently(user_manager):
    assert user_manager.hash_password("secret123") != user_manager.hash_password("secret123")


def test_verify_password(user_manager, admin_user):
    assert user_manager.verify_password("secret123", admin_user.password_hash)
    assert not user_manager.verify_password("wrong-pass", admin_user.password_hash)
    assert not user_manager.verify_password("", admin_user.password_hash)


def test_verify_password_with_malformed_hash_returns_false(user_manager):
    assert user_manager.verify_password("secret123", "not-a-bcrypt-hash") is False


def test_model_refuses_plaintext_password_hash():
    with pytest.raises(ValueError):
        AdminUserModel(username="x", name="X", password_hash="secret123")


def test_authenticate(user_manager, admin_user):
    assert user_manager.authenticate("admin", "secret123").id == admin_user.id
    assert user_manager.authenticate("admin", "nope-nope") is None
    assert user_manager.authenticate("ghost", "secret123") is None


def test_duplicate_username_is_rejected(user_manager, admin_user):
    with pytest.raises(UserAlreadyExistsError) as exc_info:
        user_manager.create_user("admin", "another123", "Another")
    assert exc_info.value.status_code == 409


@pytest.mark.parametrize(
    "username, password, name",
    [
        ("", "secret123", "Name"),
        ("   ", "secret123", "Name"),
        ("someone", "short", "Name"),
        ("someone", "", "Name"),
        ("someone", "secret123", ""),
        ("u" * 101, "secret123", "Name"),
    ],
)
def test_create_user_validation(user_manager, username, password, name):
    with pytest.raises(ValidationError):
        user_manager.create_user(username, password, name)


def test_update_password_rehashes(user_manager, admin_user):
    old_hash = admin_user.password_hash

    user = user_manager.update_password(admin_user.id, "brand-new-pass")

    assert user.password_hash != old_hash
    assert user.password_hash != "brand-new-pass"
    assert user_manager.authenticate("admin", "brand-new-pass") is not None
    assert user_manager.authenticate("admin", "secret123") is None


def test_update_password_for_missing_user(user_manager):
    with pytest.raises(UserNotFoundError):
        user_manager.update_password(999, "brand-new-pass")


def test_update_user_hashes_password_field(user_manager, admin_user):
    user = user_manager.update_user(admin_user.id, name="Renamed", password="changed-pass")

    assert user.name == "Renamed"
    assert user.password_hash.startswith("$2")
    assert user_manager.verify_password("changed-pass", user.password_hash)


def test_touch_last_login(user_manager, admin_user):
    assert admin_user.last_login is None
    assert user_manager.touch_last_login(admin_user).last_login is not None


def test_dummy_hash_costs_as_much_as_real_hashes(user_manager, admin_user):
    assert _DUMMY_HASH.split("$")[2] == admin_user.password_hash.split("$")[2]
