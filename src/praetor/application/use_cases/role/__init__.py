"""Role store use cases."""

from praetor.application.use_cases.role.create_role import CreateRoleUseCase
from praetor.application.use_cases.role.delete_role import DeleteRoleUseCase
from praetor.application.use_cases.role.list_roles import GetRoleUseCase, ListRolesUseCase
from praetor.application.use_cases.role.rename_role import RenameRoleUseCase
from praetor.application.use_cases.role.seed_system_roles import SeedSystemRolesUseCase
from praetor.application.use_cases.role.set_role_permissions import SetRolePermissionsUseCase

__all__ = [
    "CreateRoleUseCase",
    "DeleteRoleUseCase",
    "GetRoleUseCase",
    "ListRolesUseCase",
    "RenameRoleUseCase",
    "SeedSystemRolesUseCase",
    "SetRolePermissionsUseCase",
]
