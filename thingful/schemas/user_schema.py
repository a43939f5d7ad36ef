from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class UserRegister(BaseModel):
    # fields are optional so missing ones can be reported one at a time,
    # and values are not stripped because surrounding spaces matter to the
    # password policy
    user_name: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None
    nickname: Optional[str] = None


class UserCreate(BaseModel):
    user_name: str
    password: str
    full_name: str
    nick_name: Optional[str] = None


class PublicUser(BaseModel):
    id: int
    full_name: str
    user_name: str
    nickname: str
    date_created: datetime


class ErrorResponse(BaseModel):
    error: str
