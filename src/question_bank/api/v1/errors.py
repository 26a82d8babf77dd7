"""Translation of service exceptions into HTTP errors."""

from fastapi import HTTPException, status

from question_bank.services.catalog import (
    CatalogError,
    DependencyConflictError,
    DuplicateEntityError,
    EmptyUpdateError,
    EntityNotFoundError,
    InvalidReferenceError,
)
from question_bank.services.tally import (
    InvalidVoteError,
    QuestionNotFoundError,
    TallyError,
    TallyOperationFailedError,
)

_CATALOG_STATUS: dict[type[CatalogError], int] = {
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateEntityError: status.HTTP_409_CONFLICT,
    InvalidReferenceError: status.HTTP_400_BAD_REQUEST,
    DependencyConflictError: status.HTTP_400_BAD_REQUEST,
    EmptyUpdateError: status.HTTP_400_BAD_REQUEST,
}

_TALLY_STATUS: dict[type[TallyError], int] = {
    InvalidVoteError: status.HTTP_400_BAD_REQUEST,
    QuestionNotFoundError: status.HTTP_404_NOT_FOUND,
    TallyOperationFailedError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def catalog_http_error(err: CatalogError) -> HTTPException:
    """Return the HTTP error matching a catalog failure."""
    code = _CATALOG_STATUS.get(type(err), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=code, detail=str(err))


def tally_http_error(err: TallyError) -> HTTPException:
    """Return the HTTP error matching a tally failure."""
    code = _TALLY_STATUS.get(type(err), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(err, TallyOperationFailedError):
        return HTTPException(status_code=code, detail="Vote could not be recorded, try again")
    return HTTPException(status_code=code, detail=str(err))
