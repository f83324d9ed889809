"""SQLAlchemy ORM models for RoleHex."""

from rolehex.infrastructure.persistence.models.role import RoleModel

__all__ = ["RoleModel"]
