from typing import Annotated

from heliclockter import datetime_utc
from pydantic import BaseModel, StringConstraints

from leagueboard.models.db.shared import BaseModelORM
from leagueboard.utils.id_types import UserId


class UserBase(BaseModelORM):
    email: str
    name: str
    created: datetime_utc


class UserInsertable(UserBase):
    password_hash: str


class User(UserBase):
    id: UserId
    password_hash: str


class UserPublic(UserBase):
    id: UserId


class UserToRegister(BaseModel):
    email: Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=320)]
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
    password: Annotated[str, StringConstraints(min_length=8, max_length=72)]
