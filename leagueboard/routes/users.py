from fastapi import APIRouter, Depends, HTTPException
from heliclockter import datetime_utc, timedelta
from starlette import status

from leagueboard.config import config
from leagueboard.models.db.user import UserInsertable, UserPublic, UserToRegister
from leagueboard.routes.auth import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
    user_authenticated,
)
from leagueboard.routes.models import Token, TokenResponse, UserPublicResponse
from leagueboard.sql.users import check_whether_email_is_in_use, create_user
from leagueboard.utils.errors import UniqueIndex, check_unique_constraint_violation
from leagueboard.utils.security import hash_password

router = APIRouter(prefix=config.api_prefix)


@router.get("/users/me", response_model=UserPublicResponse)
async def get_me(user_public: UserPublic = Depends(user_authenticated)) -> UserPublicResponse:
    return UserPublicResponse(data=user_public)


@router.post("/users/register", response_model=TokenResponse)
async def register_user(user_to_register: UserToRegister) -> TokenResponse:
    if await check_whether_email_is_in_use(user_to_register.email):
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Email address already in use")

    with check_unique_constraint_violation({UniqueIndex.ix_users_email}):
        user = await create_user(
            UserInsertable(
                email=user_to_register.email,
                name=user_to_register.name,
                password_hash=hash_password(user_to_register.password),
                created=datetime_utc.now(),
            )
        )

    access_token = create_access_token(
        data={"user": user.id},
        expires_delta=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return TokenResponse(
        data=Token(access_token=access_token, token_type="bearer", user_id=user.id)
    )
