"""Application ports - interfaces for external adapters."""

from praetor.application.ports.directory import Directory
from praetor.application.ports.permission_checker import PermissionChecker
from praetor.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Directory",
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
