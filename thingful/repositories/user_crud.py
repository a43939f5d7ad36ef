import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from thingful.core.exceptions import StorageError, UsernameTakenError
from thingful.models.model import User
from thingful.schemas.user_schema import UserCreate

logger = logging.getLogger(__name__)


def has_user_with_user_name(db: Session, user_name: str) -> bool:
    """Return True if a user with exactly this user_name is stored."""
    try:
        user_id = db.execute(
            select(User.id).where(User.user_name == user_name).limit(1)
        ).scalar_one_or_none()
    except SQLAlchemyError as e:
        raise StorageError() from e
    return user_id is not None


def insert_user(db: Session, new_user: UserCreate) -> User:
    """Insert a user whose password is already hashed.

    The unique constraint on user_name decides concurrent registrations of the
    same name; the loser gets UsernameTakenError like a pre-checked duplicate.
    """
    db_user = User(
        user_name=new_user.user_name,
        full_name=new_user.full_name,
        nick_name=new_user.nick_name,
        password=new_user.password,
    )
    try:
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
        return db_user
    except IntegrityError as e:
        db.rollback()
        if has_user_with_user_name(db, new_user.user_name):
            logger.info(f"Lost registration race for user_name {new_user.user_name!r}")
            raise UsernameTakenError(new_user.user_name) from e
        raise StorageError() from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError() from e


def get_user_by_id(db: Session, user_id: int) -> User | None:
    try:
        return db.get(User, user_id)
    except SQLAlchemyError as e:
        raise StorageError() from e
