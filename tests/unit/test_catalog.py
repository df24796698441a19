"""Unit tests for the permission catalog."""

import pytest

from praetor.domain.catalog import PermissionCatalog
from praetor.domain.entities import PermissionDefinition
from praetor.domain.value_objects import CRUD, VIEW_ONLY, VIEW_UPDATE, PermissionAction


def test_default_catalog_size(catalog: PermissionCatalog) -> None:
    assert len(catalog) == 34
    assert len(catalog.all_permissions()) == 100


def test_all_permissions_unique(catalog: PermissionCatalog) -> None:
    permissions = catalog.all_permissions()
    assert len(permissions) == len(set(permissions))


def test_scope_definitions_expose_only_view(catalog: PermissionCatalog) -> None:
    scopes = [d for d in catalog if d.is_scope]
    assert scopes
    for definition in scopes:
        assert definition.actions == (PermissionAction.VIEW,)
        assert definition.resource.endswith("_all")


def test_always_granted_is_baseline_modules(catalog: PermissionCatalog) -> None:
    assert catalog.always_granted_permissions() == frozenset(
        {
            "settings.view",
            "settings.update",
            "docs.api.view",
            "docs.frontend.view",
            "notifications.view",
            "notifications.update",
            "notifications.delete",
        }
    )


def test_definitions_by_module_keeps_declaration_order(catalog: PermissionCatalog) -> None:
    modules = list(catalog.definitions_by_module())
    assert modules[0] == "timesheets"
    assert modules[-1] == "notifications"
    assert [d.resource for d in catalog.definitions_by_module()["docs"]] == [
        "docs.api",
        "docs.frontend",
    ]


def test_is_known(catalog: PermissionCatalog) -> None:
    assert catalog.is_known("administration.roles.delete")
    assert not catalog.is_known("administration.authentication.delete")
    assert not catalog.is_known("configuration.roles.view")


def test_get(catalog: PermissionCatalog) -> None:
    definition = catalog.get("administration.email")
    assert definition is not None
    assert definition.module == "administration"
    assert definition.actions == VIEW_UPDATE
    assert catalog.get("nope") is None


def test_duplicate_resource_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        PermissionCatalog(
            [
                PermissionDefinition("crm.clients", CRUD),
                PermissionDefinition("crm.clients", VIEW_ONLY),
            ]
        )


def test_scope_with_write_actions_rejected() -> None:
    with pytest.raises(ValueError, match="scope"):
        PermissionDefinition("crm.clients_all", CRUD, is_scope=True)


def test_empty_actions_rejected() -> None:
    with pytest.raises(ValueError):
        PermissionDefinition("crm.clients", ())


def test_actions_are_canonicalized() -> None:
    definition = PermissionDefinition("hr.internal", ("delete", "view", "update"))
    assert definition.actions == (
        PermissionAction.VIEW,
        PermissionAction.UPDATE,
        PermissionAction.DELETE,
    )


def test_custom_always_visible_modules() -> None:
    catalog = PermissionCatalog(
        [
            PermissionDefinition("crm.clients", CRUD),
            PermissionDefinition("help", VIEW_ONLY),
        ],
        always_visible_modules=("help",),
    )
    assert catalog.always_granted_permissions() == frozenset({"help.view"})


def test_module_permissions(catalog: PermissionCatalog) -> None:
    docs = catalog.module_permissions("docs")
    assert docs == frozenset({"docs.api.view", "docs.frontend.view"})
    assert catalog.module_permissions("nope") == frozenset()
