"""Domain exceptions."""


class PraetorError(Exception):
    """Base exception for Praetor."""

    pass


class ValidationError(PraetorError):
    """Validation failed for input data (empty name, duplicate name, bad config)."""

    pass


class ForbiddenError(PraetorError):
    """Mutation attempted against a protected (system or admin) role."""

    pass


class NotFound(PraetorError):
    """Requested resource was not found."""

    def __init__(self, kind: str, identifier: object) -> None:
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


class ConflictError(PraetorError):
    """Storage reported a conflict (uniqueness or reference integrity)."""

    pass


class RoleInUse(ConflictError):
    """Role is still assigned to at least one user."""

    def __init__(self, role_id: str) -> None:
        super().__init__("Role is in use by existing users; reassign users first")
        self.role_id = role_id


class DirectoryError(PraetorError):
    """External directory could not be reached or queried."""

    pass
