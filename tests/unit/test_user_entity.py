import pytest

from todolist_service.core.domain.user import DUMMY_USERS, User


def test_display_line_format():
    user = User(id=7, name="Dana Scully", email="dana@example.com")

    assert user.display_line() == "User: ID=7, Name=Dana Scully, Email=dana@example.com"


def test_negative_id_is_rejected():
    with pytest.raises(ValueError, match="unsigned"):
        User(id=-1, name="Nobody", email="nobody@example.com")


def test_dummy_users_literals():
    assert [(u.id, u.name, u.email) for u in DUMMY_USERS] == [
        (1, "Alice Johnson", "alice@example.com"),
        (2, "Bob Smith", "bob@example.com"),
        (3, "Charlie Brown", "charlie@example.com"),
    ]
