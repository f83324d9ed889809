"""Unit tests for the Role domain entity."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from rolehex.domain.entities.role import Role, normalize_role_name
from rolehex.domain.exceptions import InvalidRoleNameError, RoleErrorKind


@pytest.mark.parametrize("raw", ["admin", "Admin", "  ADMIN  ", "\tadmin\n"])
def test_create_normalizes_name(raw):
    """Names differing only in case or surrounding whitespace share one canonical form."""
    role = Role.create(raw)

    assert role.name == "ADMIN"
    assert role.name == normalize_role_name(raw)


def test_create_new_role_has_no_id():
    """A freshly created role is not persisted yet."""
    before = datetime.now(timezone.utc)
    role = Role.create("billing_clerk")

    assert role.id is None
    assert role.name == "BILLING_CLERK"
    assert before <= role.created_at <= datetime.now(timezone.utc)


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
def test_create_blank_name_rejected(raw):
    """Blank names fail at construction."""
    with pytest.raises(InvalidRoleNameError, match="cannot be blank") as exc:
        Role.create(raw)

    assert exc.value.kind is RoleErrorKind.INVALID_NAME


def test_invalid_name_is_value_error():
    """Invalid names can also be caught as ValueError."""
    with pytest.raises(ValueError):
        Role.create("")


def test_name_length_limit():
    """Canonical names may be at most 100 characters."""
    assert Role.create("a" * 100).name == "A" * 100
    # Surrounding whitespace does not count
    assert Role.create("  " + "a" * 100 + "  ").name == "A" * 100

    with pytest.raises(InvalidRoleNameError, match="cannot exceed 100 characters"):
        Role.create("a" * 101)


@pytest.mark.parametrize(
    "name",
    ["ADMIN", "root", " system ", "SYSTEM_AUDIT", "system_backup", "SYSTEM_"],
)
def test_is_system_role_true(name):
    """Reserved names and the SYSTEM_ prefix make a system role."""
    assert Role.create(name).is_system_role() is True


@pytest.mark.parametrize(
    "name",
    ["USER", "ADMINISTRATOR", "SYSTEMS", "MY_SYSTEM_ROLE", "ROOTS", "SUPER_ADMIN"],
)
def test_is_system_role_false(name):
    """Names merely resembling reserved names are regular roles."""
    assert Role.create(name).is_system_role() is False


def test_with_name_keeps_identity_and_timestamp():
    """Renaming keeps ID and creation time and normalizes the new name."""
    created_at = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    role = Role(name="BILLING_CLERK", id=7, created_at=created_at)

    renamed = role.with_name("  billing_manager ")

    assert renamed.id == 7
    assert renamed.created_at == created_at
    assert renamed.name == "BILLING_MANAGER"
    # The source value is untouched
    assert role.name == "BILLING_CLERK"


def test_with_name_validates():
    """Renaming to an invalid name fails."""
    role = Role(name="EDITOR", id=1)

    with pytest.raises(InvalidRoleNameError):
        role.with_name("   ")


def test_with_name_does_not_check_system_status():
    """The entity allows renaming into a reserved name; the service decides."""
    renamed = Role(name="EDITOR", id=1).with_name("system_editor")

    assert renamed.is_system_role() is True


def test_role_is_immutable():
    """Roles cannot be mutated in place."""
    role = Role.create("editor")

    with pytest.raises(FrozenInstanceError):
        role.name = "OTHER"


def test_equality_ignores_created_at():
    """Two values with the same ID and name are equal."""
    first = Role(name="EDITOR", id=1, created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    second = Role(name="editor", id=1, created_at=datetime(2025, 1, 1, tzinfo=timezone.utc))

    assert first == second
    assert first != Role(name="EDITOR", id=2)
