"""Session API: who the dashboard client is signed in as."""

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import require_user
from app.application.dtos.user import AuthUser
from app.schemas.session import SessionUserResponse

router = APIRouter()


@router.get("", response_model=SessionUserResponse)
def get_session_user(user: AuthUser = Depends(require_user)) -> SessionUserResponse:
    """Return the signed-in user; 401 when the request carries no valid session."""
    return SessionUserResponse(id=user.id, email=user.email)
