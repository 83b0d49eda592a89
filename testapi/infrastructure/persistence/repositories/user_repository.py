"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from testapi.domain.entities.user import User, normalize_username
from testapi.domain.enums import Application, UserType
from testapi.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_username("Automation_Judge_1@hearings.test")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username, ignoring case.

        Matches on the stored case-folded column, the same key the unique
        index enforces, so lookup and uniqueness never disagree.

        Args:
            username: Username (case-insensitive).

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(
            UserModel.username_normalized == normalize_username(username)
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def list_by_user_type(
        self, user_type: UserType, application: Application
    ) -> list[User]:
        stmt = (
            select(UserModel)
            .where(
                UserModel.user_type == user_type.value,
                UserModel.application == application.value,
            )
            .order_by(UserModel.number, UserModel.username)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_highest_number(
        self, user_type: UserType, application: Application
    ) -> int | None:
        stmt = select(func.max(UserModel.number)).where(
            UserModel.user_type == user_type.value,
            UserModel.application == application.value,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, user: User) -> None:
        """Create new user in database.

        Args:
            user: Domain User entity to persist.

        Raises:
            IntegrityError: If the username is already taken. The session is
                rolled back before the error propagates.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise
        await self.session.refresh(user_model)

    async def delete(self, user_id: UUID) -> bool:
        """Delete user row (hard delete).

        Args:
            user_id: User's unique identifier.

        Returns:
            True if a row was deleted, False if no user had that id.
        """
        stmt = delete(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            username=user_model.username,
            contact_email=user_model.contact_email,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            display_name=user_model.display_name,
            user_type=UserType(user_model.user_type),
            application=Application(user_model.application),
            number=user_model.number,
            created_at=user_model.created_at,
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model."""
        return UserModel(
            id=user.id,
            username=user.username,
            username_normalized=normalize_username(user.username),
            contact_email=user.contact_email,
            first_name=user.first_name,
            last_name=user.last_name,
            display_name=user.display_name,
            user_type=user.user_type.value,
            application=user.application.value,
            number=user.number,
            created_at=user.created_at,
        )
