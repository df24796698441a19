"""Directory provisioning use cases."""

from praetor.application.use_cases.directory.authenticate_user import (
    AuthenticateDirectoryUserUseCase,
)
from praetor.application.use_cases.directory.get_directory_config import (
    GetDirectoryConfigUseCase,
)
from praetor.application.use_cases.directory.provision_user import (
    ProvisionDirectoryUserUseCase,
    ProvisioningResult,
)
from praetor.application.use_cases.directory.save_directory_config import (
    SaveDirectoryConfigUseCase,
)
from praetor.application.use_cases.directory.sync_users import SyncDirectoryUsersUseCase

__all__ = [
    "AuthenticateDirectoryUserUseCase",
    "GetDirectoryConfigUseCase",
    "ProvisionDirectoryUserUseCase",
    "ProvisioningResult",
    "SaveDirectoryConfigUseCase",
    "SyncDirectoryUsersUseCase",
]
