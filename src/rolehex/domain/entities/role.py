"""Role entity for authorization.

A role is identified by its canonical name: the trimmed, uppercased form
of whatever the caller typed. Some names are reserved for system roles,
which cannot be renamed or deleted.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from rolehex.domain.exceptions import InvalidRoleNameError

MAX_NAME_LENGTH = 100
SYSTEM_ROLE_PREFIX = "SYSTEM_"
RESERVED_ROLE_NAMES = frozenset({"ADMIN", "ROOT", "SYSTEM"})


def normalize_role_name(name: str | None) -> str:
    """Return the canonical form of a role name (trimmed, uppercased).

    ``None`` normalizes to an empty string so callers can treat it as blank.
    """
    if name is None:
        return ""
    return name.strip().upper()


def is_system_role_name(name: str) -> bool:
    """Check whether a canonical name is reserved for a system role."""
    return name.startswith(SYSTEM_ROLE_PREFIX) or name in RESERVED_ROLE_NAMES


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Role:
    """Immutable role value.

    The name is canonicalized and validated on construction, so an instance
    with an invalid name can never exist.

    Attributes:
        name: Canonical role name (e.g., 'BILLING_CLERK').
        id: Storage identifier, None until the role has been persisted.
        created_at: Creation timestamp, carried over unchanged by renames.
    """

    name: str
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow, compare=False)

    def __post_init__(self) -> None:
        """Canonicalize and validate the role name."""
        canonical = normalize_role_name(self.name)
        if not canonical:
            raise InvalidRoleNameError("Role name cannot be blank")
        if len(canonical) > MAX_NAME_LENGTH:
            raise InvalidRoleNameError(
                f"Role name cannot exceed {MAX_NAME_LENGTH} characters"
            )
        object.__setattr__(self, "name", canonical)

    @classmethod
    def create(cls, name: str) -> "Role":
        """Create a new, not yet persisted role from a raw name."""
        return cls(name=name)

    def is_system_role(self) -> bool:
        """Check whether this role is a protected system role."""
        return is_system_role_name(self.name)

    def with_name(self, new_name: str) -> "Role":
        """Return a renamed copy keeping the ID and creation timestamp."""
        return replace(self, name=new_name)
