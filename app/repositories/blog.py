"""Blog repository for database operations."""

from logging import getLogger

from sqlalchemy import delete, select, update

from app.configs import file_logger
from app.models.blog import BlogDB
from app.models.user import UserDB
from app.repositories.base import BaseRepository
from app.schemas.blog import BlogCreate

logger = file_logger(getLogger(__name__))

# Columns a PUT may rewrite. Anything else (the primary key above all) is
# rejected before a statement is built.
UPDATABLE_FIELDS: frozenset[str] = frozenset({"name", "handle", "user_id"})

type FieldValue = str | int


class BlogRepository(BaseRepository[BlogDB, BlogCreate]):
    """
    Repository for Blog database operations.

    Every query binds its values as parameters; field names are checked
    against `UPDATABLE_FIELDS` and resolved to mapped columns, never
    interpolated into SQL text.
    """

    model = BlogDB

    async def save(self, name: str, handle: str, user_id: int) -> BlogDB:
        """
        Persist a new blog; the store assigns its id.

        Args:
            name: Display name
            handle: Short name
            user_id: Owner ID

        Returns:
            BlogDB: Created blog with its generated id

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other database errors
        """
        db_blog = BlogDB(name=name, handle=handle, user_id=user_id)
        return await self._add_and_refresh(db_blog)

    async def find_by_owner_login(self, login: str) -> list[BlogDB]:
        """
        Get every blog owned by the user with the given login.

        Args:
            login: Owner login

        Returns:
            list[BlogDB]: Blogs ordered by id
        """
        statement = (
            select(BlogDB)
            # pyrefly: ignore [bad-argument-type]
            .join(UserDB, BlogDB.user_id == UserDB.id)
            # pyrefly: ignore [bad-argument-type]
            .where(UserDB.login == login)
            # pyrefly: ignore [bad-argument-type]
            .order_by(BlogDB.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update_field(self, blog_id: int, field: str, value: FieldValue) -> int:
        """
        Rewrite a single column of one blog.

        Args:
            blog_id: Blog ID
            field: Column to rewrite, one of `UPDATABLE_FIELDS`
            value: New value, sent as a bound parameter

        Returns:
            int: Number of rows affected

        Raises:
            ValueError: If `field` is not updatable
        """
        if field not in UPDATABLE_FIELDS:
            mssg = f"Field '{field}' cannot be updated"
            raise ValueError(mssg)

        statement = (
            update(BlogDB)
            # pyrefly: ignore [bad-argument-type]
            .where(BlogDB.id == blog_id)
            .values({getattr(BlogDB, field): value})
        )
        result = await self.session.execute(statement)
        logger.debug(f"Updated {field} of Blog {blog_id}")
        return result.rowcount

    async def delete_by_id(self, blog_id: int) -> int:
        """
        Delete one blog by id.

        Args:
            blog_id: Blog ID

        Returns:
            int: Number of rows affected
        """
        # pyrefly: ignore [bad-argument-type]
        result = await self.session.execute(delete(BlogDB).where(BlogDB.id == blog_id))
        return result.rowcount
