"""Behavioural tests for RoleService over the in-memory repository."""

import pytest

from rolehex.domain.entities.role import Role
from rolehex.domain.exceptions import (
    RoleAlreadyExistsError,
    RoleNotFoundError,
    SystemRoleError,
)
from rolehex.domain.services import NotificationDispatcher, RoleService
from rolehex.infrastructure.persistence.repositories import InMemoryRoleRepository


@pytest.fixture
def repository():
    return InMemoryRoleRepository()


@pytest.fixture
def dispatcher():
    return NotificationDispatcher()


@pytest.fixture
def service(repository, notifier, dispatcher):
    return RoleService(repository, notifier, dispatcher)


@pytest.mark.asyncio
async def test_names_unique_ignoring_case_and_whitespace(service):
    """Only one role can hold a canonical name."""
    await service.create_role("editor")

    for variant in ["EDITOR", " Editor", "eDiToR\t"]:
        with pytest.raises(RoleAlreadyExistsError):
            await service.create_role(variant)

    assert await service.get_role_count() == 1


@pytest.mark.asyncio
async def test_stored_names_are_canonical(service):
    await service.create_role("  support agent ")
    await service.create_role("Viewer")

    names = [role.name for role in await service.get_all_roles()]

    assert names == ["SUPPORT AGENT", "VIEWER"]


@pytest.mark.asyncio
async def test_lookups_accept_any_case(service):
    created = await service.create_role("auditor")

    assert await service.get_role_by_name(" Auditor ") == created
    assert await service.role_exists("AUDITOR") is True
    assert await service.role_exists("missing") is False
    assert await service.get_role_by_id(created.id) == created
    assert await service.get_role_by_id(999) is None


@pytest.mark.asyncio
async def test_search_is_case_insensitive_substring(service):
    await service.create_role("billing_clerk")
    await service.create_role("billing_manager")
    await service.create_role("viewer")

    found = await service.search_roles_by_name("Billing")

    assert [role.name for role in found] == ["BILLING_CLERK", "BILLING_MANAGER"]
    assert await service.search_roles_by_name("nothing") == []


@pytest.mark.asyncio
async def test_admin_cannot_be_changed(service, notifier, dispatcher):
    """Create ADMIN, then try to rename and delete it."""
    admin = await service.create_role("admin")
    assert admin.is_system_role() is True

    with pytest.raises(SystemRoleError):
        await service.update_role(admin.id, "superuser")
    with pytest.raises(SystemRoleError):
        await service.delete_role(admin.id)

    await dispatcher.drain()
    assert await service.get_role_by_id(admin.id) == admin
    assert notifier.events == [("created", admin)]


@pytest.mark.asyncio
async def test_rename_then_recreate_old_name(service, notifier, dispatcher):
    """Renaming frees the old name for a new role."""
    clerk = await service.create_role("billing_clerk")

    renamed = await service.update_role(clerk.id, "billing_manager")
    recreated = await service.create_role("billing_clerk")

    assert renamed.id == clerk.id
    assert renamed.created_at == clerk.created_at
    assert renamed.name == "BILLING_MANAGER"
    assert recreated.id != clerk.id
    assert await service.get_role_count() == 2

    await dispatcher.drain()
    assert notifier.events == [
        ("created", clerk),
        ("updated", renamed),
        ("created", recreated),
    ]


@pytest.mark.asyncio
async def test_rename_to_taken_name_keeps_both(service):
    editor = await service.create_role("editor")
    await service.create_role("viewer")

    with pytest.raises(RoleAlreadyExistsError):
        await service.update_role(editor.id, "VIEWER")

    assert (await service.get_role_by_id(editor.id)).name == "EDITOR"


@pytest.mark.asyncio
async def test_delete_regular_role(service, notifier, dispatcher):
    role = await service.create_role("temp")

    await service.delete_role(role.id)

    assert await service.get_role_by_id(role.id) is None
    assert await service.role_exists("temp") is False
    with pytest.raises(RoleNotFoundError):
        await service.delete_role(role.id)

    await dispatcher.drain()
    assert notifier.events[-1] == ("deleted", role.id)


@pytest.mark.asyncio
async def test_failed_operations_do_not_notify(service, notifier, dispatcher):
    await service.create_role("editor")

    with pytest.raises(RoleAlreadyExistsError):
        await service.create_role("editor")
    with pytest.raises(RoleNotFoundError):
        await service.update_role(42, "x")
    with pytest.raises(RoleNotFoundError):
        await service.delete_role(42)

    await dispatcher.drain()
    assert [kind for kind, _ in notifier.events] == ["created"]


@pytest.mark.asyncio
async def test_preloaded_system_roles_are_protected(notifier):
    repository = InMemoryRoleRepository(
        [Role.create("root"), Role.create("system_backup"), Role.create("user")]
    )
    service = RoleService(repository, notifier)

    root = await service.get_role_by_name("root")
    backup = await service.get_role_by_name("SYSTEM_BACKUP")
    user = await service.get_role_by_name("user")

    with pytest.raises(SystemRoleError):
        await service.delete_role(root.id)
    with pytest.raises(SystemRoleError):
        await service.update_role(backup.id, "backup")

    await service.delete_role(user.id)
    await service.dispatcher.drain()
    assert await service.get_role_count() == 2
