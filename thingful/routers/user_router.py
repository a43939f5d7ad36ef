import logging

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from thingful.core.exceptions import (
    MissingFieldError,
    UsernameTakenError,
    UserNotFoundError,
    ValidationError,
)
from thingful.database.connection import get_db
from thingful.repositories import user_crud
from thingful.schemas import user_schema
from thingful.security.user_security import hash_password
from thingful.services.user_service import serialize_user, validate_password

user_Router = APIRouter(prefix="/api/users")

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("user_name", "password", "full_name")


@user_Router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=user_schema.PublicUser,
    responses={400: {"model": user_schema.ErrorResponse}},
    tags=["users"],
)
def register_user(
    response: Response,
    user: user_schema.UserRegister | None = Body(default=None),
    db: Session = Depends(get_db),
):
    if user is None:
        user = user_schema.UserRegister()

    for field in REQUIRED_FIELDS:
        if not getattr(user, field):
            raise MissingFieldError(field)

    password_error = validate_password(user.password)
    if password_error:
        raise ValidationError(password_error)

    if user_crud.has_user_with_user_name(db=db, user_name=user.user_name):
        raise UsernameTakenError(user.user_name)

    new_user = user_schema.UserCreate(
        user_name=user.user_name,
        password=hash_password(user.password),
        full_name=user.full_name,
        nick_name=user.nickname or None,
    )
    db_user = user_crud.insert_user(db=db, new_user=new_user)
    logger.info(f"Registered user {db_user.id}")

    response.headers["Location"] = f"{user_Router.prefix}/{db_user.id}"
    return serialize_user(db_user)


@user_Router.get(
    "/{user_id}",
    response_model=user_schema.PublicUser,
    responses={404: {"model": user_schema.ErrorResponse}},
    tags=["users"],
)
def get_user(user_id: int, db: Session = Depends(get_db)):
    db_user = user_crud.get_user_by_id(db=db, user_id=user_id)
    if db_user is None:
        raise UserNotFoundError(user_id)
    return serialize_user(db_user)
