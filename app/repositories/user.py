"""User repository for database operations."""

from sqlalchemy import select

from app.errors.database import DuplicateEntryError
from app.models.user import UserDB
from app.repositories.base import BaseRepository
from app.schemas.user import UserCreate


class UserRepository(BaseRepository[UserDB, UserCreate]):
    """
    Repository for User database operations.

    Blog endpoints only resolve owners by login; account creation is here
    so that owners can be provisioned by scripts and tests.
    """

    model = UserDB

    async def create(self, schema: UserCreate, **kwargs: object) -> UserDB:
        """
        Create a new user in the database.

        Args:
            schema: User schema with user data
            **kwargs: Extra column values not present on the schema

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If login or email already exists
            DatabaseError: For other database errors
        """
        try:
            return await super().create(schema, **kwargs)
        except DuplicateEntryError as e:
            error_msg = e.detail.lower()
            if "login" in error_msg:
                raise DuplicateEntryError(
                    detail=f"Login '{schema.login}' already exists",
                ) from e
            if "email" in error_msg:
                raise DuplicateEntryError(
                    detail=f"Email '{schema.email}' already exists",
                ) from e
            raise

    async def get_by_login(self, login: str) -> UserDB | None:
        """
        Get user by login.

        Args:
            login: User login

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            # pyrefly: ignore [bad-argument-type]
            select(UserDB).where(UserDB.login == login),
        )
        return result.scalar_one_or_none()
