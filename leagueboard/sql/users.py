from leagueboard.database import database
from leagueboard.models.db.user import User, UserInsertable, UserPublic
from leagueboard.utils.id_types import UserId


async def get_user_by_id(user_id: UserId) -> UserPublic | None:
    query = """
        SELECT id, email, name, created
        FROM users
        WHERE id = :user_id
    """
    result = await database.fetch_one(query=query, values={"user_id": user_id})
    return UserPublic.model_validate(dict(result._mapping)) if result is not None else None


async def get_user(email: str) -> User | None:
    query = """
        SELECT *
        FROM users
        WHERE lower(email) = lower(:email)
    """
    result = await database.fetch_one(query=query, values={"email": email})
    return User.model_validate(dict(result._mapping)) if result is not None else None


async def check_whether_email_is_in_use(email: str) -> bool:
    return await get_user(email) is not None


async def create_user(user: UserInsertable) -> User:
    query = """
        INSERT INTO users (email, name, password_hash, created)
        VALUES (:email, :name, :password_hash, :created)
        RETURNING *
    """
    result = await database.fetch_one(query=query, values=user.model_dump())
    assert result is not None
    return User.model_validate(dict(result._mapping))
