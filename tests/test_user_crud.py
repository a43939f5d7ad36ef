import pytest

from thingful.core.exceptions import StorageError, UsernameTakenError
from thingful.repositories import user_crud
from thingful.schemas.user_schema import UserCreate


def test_has_user_with_user_name(db_session, seeded_users):
    assert user_crud.has_user_with_user_name(db_session, "TestUser1")
    assert not user_crud.has_user_with_user_name(db_session, "testuser1")
    assert not user_crud.has_user_with_user_name(db_session, "Nobody")


def test_insert_user_returns_generated_fields(db_session, hashed_test_password):
    new_user = UserCreate(
        user_name="fresh", password=hashed_test_password, full_name="Fresh User"
    )

    db_user = user_crud.insert_user(db_session, new_user)

    assert db_user.id is not None
    assert db_user.date_created is not None
    assert db_user.nick_name is None
    assert user_crud.get_user_by_id(db_session, db_user.id) is db_user


def test_insert_duplicate_user_name_raises_username_taken(
    db_session, seeded_users, hashed_test_password
):
    duplicate = UserCreate(
        user_name="TestUser1", password=hashed_test_password, full_name="Someone else"
    )

    with pytest.raises(UsernameTakenError) as exc_info:
        user_crud.insert_user(db_session, duplicate)

    assert exc_info.value.message == "Username already taken"


def test_other_integrity_errors_raise_storage_error(db_session, hashed_test_password):
    broken = UserCreate.model_construct(
        user_name="broken", password=hashed_test_password, full_name=None, nick_name=None
    )

    with pytest.raises(StorageError):
        user_crud.insert_user(db_session, broken)

    assert not user_crud.has_user_with_user_name(db_session, "broken")


def test_get_user_by_id_returns_none_for_unknown_id(db_session):
    assert user_crud.get_user_by_id(db_session, 12345) is None
