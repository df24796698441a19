"""Unit tests for directory configuration and provisioning use cases."""

from dataclasses import replace

import pytest

from praetor.application.use_cases.directory import (
    AuthenticateDirectoryUserUseCase,
    GetDirectoryConfigUseCase,
    ProvisionDirectoryUserUseCase,
    SaveDirectoryConfigUseCase,
    SyncDirectoryUsersUseCase,
)
from praetor.application.use_cases.role import CreateRoleUseCase, SeedSystemRolesUseCase
from praetor.domain.entities import (
    DirectoryConfig,
    DirectoryUser,
    GroupRoleMapping,
    UserSource,
)
from praetor.domain.exceptions import ValidationError

from tests.conftest import FakeDirectory, FakeUnitOfWork

ADMINS = "cn=admins,ou=groups,dc=example,dc=com"


def _enabled_config(**overrides) -> DirectoryConfig:
    config = DirectoryConfig(
        enabled=True,
        bind_dn="cn=read-only-admin,dc=example,dc=com",
        bind_password="readonly",
        role_mappings=[GroupRoleMapping(ADMINS, "admin")],
    )
    return replace(config, **overrides)


@pytest.fixture
async def seeded(uow_factory, catalog, fake_uow: FakeUnitOfWork) -> FakeUnitOfWork:
    await SeedSystemRolesUseCase(uow_factory, catalog).execute()
    return fake_uow


@pytest.fixture
def provision(uow_factory) -> ProvisionDirectoryUserUseCase:
    return ProvisionDirectoryUserUseCase(uow_factory)


# --- Save / Get configuration ---


@pytest.mark.asyncio
async def test_get_config_defaults_when_unset(uow_factory) -> None:
    config = await GetDirectoryConfigUseCase(uow_factory).execute()
    assert config == DirectoryConfig()
    assert config.enabled is False
    assert config.default_role_id == "user"


@pytest.mark.asyncio
async def test_defaults_save_without_bind_credentials(uow_factory, seeded) -> None:
    saved = await SaveDirectoryConfigUseCase(uow_factory).execute(
        replace(DirectoryConfig(), default_role_id="manager")
    )
    assert saved.bind_dn == ""
    assert saved.default_role_id == "manager"


@pytest.mark.asyncio
async def test_save_and_get_config(uow_factory, seeded) -> None:
    saved = await SaveDirectoryConfigUseCase(uow_factory).execute(_enabled_config())
    loaded = await GetDirectoryConfigUseCase(uow_factory).execute()
    assert loaded == saved
    assert loaded.role_mappings == [GroupRoleMapping(ADMINS, "admin")]


@pytest.mark.asyncio
async def test_save_rejects_dangling_default_role(uow_factory, seeded) -> None:
    with pytest.raises(ValidationError, match="Unknown default role: ghost"):
        await SaveDirectoryConfigUseCase(uow_factory).execute(
            _enabled_config(default_role_id="ghost")
        )
    assert await seeded.directory_config.get() is None


@pytest.mark.asyncio
async def test_save_rejects_dangling_mapping_role(uow_factory, seeded) -> None:
    with pytest.raises(ValidationError, match="unknown role: role-gone"):
        await SaveDirectoryConfigUseCase(uow_factory).execute(
            _enabled_config(role_mappings=[GroupRoleMapping(ADMINS, "role-gone")])
        )


@pytest.mark.asyncio
async def test_save_accepts_custom_role_mapping(uow_factory, catalog, seeded) -> None:
    role = await CreateRoleUseCase(uow_factory, catalog).execute("Billing")
    saved = await SaveDirectoryConfigUseCase(uow_factory).execute(
        _enabled_config(role_mappings=[GroupRoleMapping("cn=billing", role.id)])
    )
    assert saved.role_mappings[0].role_id == role.id


@pytest.mark.asyncio
async def test_save_rejects_empty_mapping_group(uow_factory, seeded) -> None:
    with pytest.raises(ValidationError, match=r"roleMappings\[0\]"):
        await SaveDirectoryConfigUseCase(uow_factory).execute(
            _enabled_config(role_mappings=[GroupRoleMapping("  ", "admin")])
        )


@pytest.mark.asyncio
async def test_save_requires_bind_pair(uow_factory, seeded) -> None:
    with pytest.raises(ValidationError, match="together"):
        await SaveDirectoryConfigUseCase(uow_factory).execute(
            _enabled_config(bind_password="")
        )


@pytest.mark.asyncio
async def test_save_allows_anonymous_bind(uow_factory, seeded) -> None:
    saved = await SaveDirectoryConfigUseCase(uow_factory).execute(
        _enabled_config(bind_dn="", bind_password="")
    )
    assert saved.bind_dn == ""


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field", ["server_url", "base_dn", "user_filter", "group_base_dn", "group_filter"]
)
async def test_save_enabled_requires_connection_fields(uow_factory, seeded, field) -> None:
    with pytest.raises(ValidationError, match="is required"):
        await SaveDirectoryConfigUseCase(uow_factory).execute(_enabled_config(**{field: ""}))


@pytest.mark.asyncio
async def test_save_disabled_skips_connection_fields(uow_factory, seeded) -> None:
    saved = await SaveDirectoryConfigUseCase(uow_factory).execute(
        _enabled_config(enabled=False, server_url="")
    )
    assert saved.enabled is False


# --- Provisioning ---


@pytest.mark.asyncio
async def test_provision_new_user_resolves_role(uow_factory, seeded, provision) -> None:
    await SaveDirectoryConfigUseCase(uow_factory).execute(_enabled_config())
    result = await provision.execute(
        DirectoryUser("alice", "Alice", frozenset({ADMINS})), UserSource.LDAP
    )
    assert result.created
    assert result.user.role_id == "admin"
    assert result.user.source is UserSource.LDAP


@pytest.mark.asyncio
async def test_provision_unmapped_user_gets_default(uow_factory, seeded, provision) -> None:
    await SaveDirectoryConfigUseCase(uow_factory).execute(_enabled_config())
    result = await provision.execute(DirectoryUser("bob", "Bob", frozenset({"cn=other"})))
    assert result.user.role_id == "user"


@pytest.mark.asyncio
async def test_provision_without_config_uses_default(seeded, provision) -> None:
    result = await provision.execute(DirectoryUser("carol", "Carol", frozenset({ADMINS})))
    assert result.user.role_id == "user"


@pytest.mark.asyncio
async def test_provision_existing_user_keeps_role(uow_factory, seeded, provision) -> None:
    await SaveDirectoryConfigUseCase(uow_factory).execute(_enabled_config())
    first = await provision.execute(DirectoryUser("dave", "Dave"))
    assert first.user.role_id == "user"

    second = await provision.execute(DirectoryUser("dave", "David", frozenset({ADMINS})))
    assert not second.created
    assert second.user.id == first.user.id
    assert second.user.role_id == "user"
    assert second.user.name == "David"
    assert len(seeded.users.all()) == 1


@pytest.mark.asyncio
async def test_provision_name_falls_back_to_username(seeded, provision) -> None:
    result = await provision.execute(DirectoryUser("erin", ""))
    assert result.user.name == "erin"


# --- Authenticate ---


def _authenticate(uow_factory, directory: FakeDirectory) -> AuthenticateDirectoryUserUseCase:
    return AuthenticateDirectoryUserUseCase(
        get_config=GetDirectoryConfigUseCase(uow_factory),
        directory=directory,
        provision=ProvisionDirectoryUserUseCase(uow_factory),
    )


@pytest.mark.asyncio
async def test_authenticate_provisions_user(uow_factory, seeded, fake_directory) -> None:
    await SaveDirectoryConfigUseCase(uow_factory).execute(_enabled_config())
    result = await _authenticate(uow_factory, fake_directory).execute("alice", "secret")
    assert result is not None
    assert result.user.username == "alice"
    assert result.user.role_id == "admin"


@pytest.mark.asyncio
async def test_authenticate_rejected_credentials(uow_factory, seeded, fake_directory) -> None:
    await SaveDirectoryConfigUseCase(uow_factory).execute(_enabled_config())
    assert await _authenticate(uow_factory, fake_directory).execute("alice", "wrong") is None
    assert seeded.users.all() == []


@pytest.mark.asyncio
async def test_authenticate_empty_password(uow_factory, seeded, fake_directory) -> None:
    await SaveDirectoryConfigUseCase(uow_factory).execute(_enabled_config())
    assert await _authenticate(uow_factory, fake_directory).execute("alice", "") is None
    assert fake_directory.calls == []


@pytest.mark.asyncio
async def test_authenticate_disabled_directory(uow_factory, seeded, fake_directory) -> None:
    assert await _authenticate(uow_factory, fake_directory).execute("alice", "secret") is None
    assert fake_directory.calls == []


# --- Sync ---


def _sync(uow_factory, directory: FakeDirectory) -> SyncDirectoryUsersUseCase:
    return SyncDirectoryUsersUseCase(
        get_config=GetDirectoryConfigUseCase(uow_factory),
        directory=directory,
        provision=ProvisionDirectoryUserUseCase(uow_factory),
    )


@pytest.mark.asyncio
async def test_sync_skipped_when_disabled(uow_factory, seeded, fake_directory) -> None:
    result = await _sync(uow_factory, fake_directory).execute()
    assert result == {"skipped": True, "reason": "LDAP is disabled"}
    assert fake_directory.calls == []


@pytest.mark.asyncio
async def test_sync_creates_then_refreshes(uow_factory, seeded, fake_directory) -> None:
    await SaveDirectoryConfigUseCase(uow_factory).execute(_enabled_config())
    sync = _sync(uow_factory, fake_directory)

    assert await sync.execute() == {"synced": 0, "created": 2}
    roles = {u.username: u.role_id for u in seeded.users.all()}
    assert roles == {"alice": "admin", "bob": "user"}

    assert await sync.execute() == {"synced": 2, "created": 0}
    assert len(seeded.users.all()) == 2
