"""Role repository for database operations."""

from datetime import datetime, timezone

from sqlalchemy import delete, exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rolehex.domain.entities.role import Role
from rolehex.domain.exceptions import RoleAlreadyExistsError, RoleNotFoundError
from rolehex.domain.ports.role_repository import RoleRepositoryPort
from rolehex.infrastructure.persistence.models import RoleModel


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyRoleRepository(RoleRepositoryPort):
    """Repository for role database operations.

    Writes are committed before returning, so a role returned by ``save``
    is durable.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(name=model.name, id=model.id, created_at=_as_utc(model.created_at))

    async def save(self, role: Role) -> Role:
        """Insert or update a role.

        Args:
            role: Role to store. Roles without an ID are inserted.

        Returns:
            The stored role.

        Raises:
            RoleNotFoundError: If an update targets a row that no longer exists.
            RoleAlreadyExistsError: If the unique name constraint is violated.
        """
        if role.id is None:
            model = RoleModel(name=role.name, created_at=role.created_at)
            self.session.add(model)
        else:
            model = await self.session.get(RoleModel, role.id)
            if model is None:
                raise RoleNotFoundError(role.id)
            model.name = role.name

        try:
            await self.session.flush()
            stored = self._to_entity(model)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise RoleAlreadyExistsError(role.name) from e

        return stored

    async def find_by_id(self, role_id: int) -> Role | None:
        """Get a role by ID.

        Args:
            role_id: Role ID.

        Returns:
            Role if found, None otherwise.
        """
        result = await self.session.execute(
            select(RoleModel).where(RoleModel.id == role_id)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    async def find_by_name(self, name: str) -> Role | None:
        """Get a role by canonical name.

        Args:
            name: Canonical role name (e.g., 'ADMIN').

        Returns:
            Role if found, None otherwise.
        """
        result = await self.session.execute(
            select(RoleModel).where(RoleModel.name == name)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    async def find_all(self) -> list[Role]:
        """List all roles ordered by ID."""
        result = await self.session.execute(select(RoleModel).order_by(RoleModel.id))
        return [self._to_entity(model) for model in result.scalars().all()]

    async def find_by_name_containing(self, pattern: str) -> list[Role]:
        """List roles whose name contains the pattern, ignoring case.

        LIKE wildcards in the pattern are escaped, so 'SYSTEM_' matches a
        literal underscore.
        """
        result = await self.session.execute(
            select(RoleModel)
            .where(func.upper(RoleModel.name).contains(pattern.upper(), autoescape=True))
            .order_by(RoleModel.id)
        )
        return [self._to_entity(model) for model in result.scalars().all()]

    async def delete_by_id(self, role_id: int) -> bool:
        """Delete a role by ID.

        Returns:
            True if a row was deleted, False otherwise.
        """
        result = await self.session.execute(
            delete(RoleModel).where(RoleModel.id == role_id)
        )
        await self.session.commit()
        return result.rowcount > 0

    async def exists_by_name(self, name: str) -> bool:
        """Check whether a role with the canonical name exists."""
        result = await self.session.execute(
            select(exists().where(RoleModel.name == name))
        )
        return bool(result.scalar())

    async def count(self) -> int:
        """Count all roles."""
        result = await self.session.execute(select(func.count()).select_from(RoleModel))
        return result.scalar_one()
