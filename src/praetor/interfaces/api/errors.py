"""Domain error -> HTTP response mapping."""

import falcon

from praetor.domain.exceptions import (
    ConflictError,
    DirectoryError,
    ForbiddenError,
    NotFound,
    PraetorError,
    ValidationError,
)

_STATUS: tuple[tuple[type[PraetorError], str], ...] = (
    (ValidationError, falcon.HTTP_400),
    (ForbiddenError, falcon.HTTP_403),
    (NotFound, falcon.HTTP_404),
    (ConflictError, falcon.HTTP_409),
    (DirectoryError, falcon.HTTP_502),
)


def set_error(resp, error: PraetorError) -> None:
    """Write ``{"error": message}`` with the status for the error kind."""
    for kind, status in _STATUS:
        if isinstance(error, kind):
            resp.status = status
            break
    else:
        resp.status = falcon.HTTP_500
    resp.media = {"error": str(error)}
