import pytest

from todolist_service.core.application.services.user_service import UserService
from todolist_service.core.domain.user import DUMMY_USERS, User
from todolist_service.core.exceptions import UserSeedingError


def test_create_dummy_users_inserts_three_users_in_one_batch(user_repository):
    service = UserService(user_repository)

    created = service.create_dummy_users()

    assert created == list(DUMMY_USERS)
    assert user_repository.add_calls == 1
    assert sorted(user_repository.rows) == [1, 2, 3]


def test_get_all_users_returns_stored_users(user_repository):
    service = UserService(user_repository)
    service.create_dummy_users()

    assert service.get_all_users() == list(DUMMY_USERS)


def test_get_all_users_on_empty_store(user_repository):
    assert UserService(user_repository).get_all_users() == []


def test_reseeding_conflicts_without_existence_check(user_repository):
    service = UserService(user_repository)
    service.create_dummy_users()

    with pytest.raises(UserSeedingError, match="Duplicate user ids"):
        service.create_dummy_users()

    assert user_repository.add_calls == 2
    assert len(user_repository.rows) == 3


def test_custom_seed_users(user_repository):
    seed = [User(id=10, name="Ten", email="ten@example.com")]

    UserService(user_repository, seed_users=seed).create_dummy_users()

    assert user_repository.list_all() == seed
