"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from question_bank.core.security import InvalidTokenError, decode_voter_id
from question_bank.db.session import get_db
from question_bank.services.tally import TallyService

# HTTP Bearer scheme for JWT authentication
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_voter_id(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> int:
    """Return the voter id carried by the bearer token.

    The identity provider is trusted; the id is not looked up locally.

    Raises:
        HTTPException: If the token is invalid or expired
    """
    try:
        return decode_voter_id(credentials.credentials)
    except InvalidTokenError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from err


def get_tally_service(db: SessionDep) -> TallyService:
    """Build a tally service bound to the request session."""
    return TallyService(db)


# Type alias for current voter dependency
CurrentVoterDep = Annotated[int, Depends(get_current_voter_id)]
TallyServiceDep = Annotated[TallyService, Depends(get_tally_service)]
